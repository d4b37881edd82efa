"""
Domain services. Each receives its store handles through the constructor.
"""

from resort_shared.services.provisioning import provision
from resort_shared.services.registry import ResortServices, build_services

__all__ = ["ResortServices", "build_services", "provision"]
