"""
Access to the per-application service container from request context.
"""

from flask import current_app

from resort_shared.config import AppConfig
from resort_shared.services import ResortServices

SERVICES_KEY = "resort_services"
CONFIG_KEY = "resort_config"


def init_services(app, services: ResortServices, config: AppConfig) -> None:
    app.extensions[SERVICES_KEY] = services
    app.extensions[CONFIG_KEY] = config


def get_services() -> ResortServices:
    return current_app.extensions[SERVICES_KEY]


def get_config() -> AppConfig:
    return current_app.extensions[CONFIG_KEY]
