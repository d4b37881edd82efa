"""
System API - collection provisioning.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_shared.serializers import success_response
from resort_shared.services import provision

system_bp = Blueprint("system", __name__)


@system_bp.post("/init")
def initialize_store():
    """Create missing collections and seed the new ones with defaults."""
    result = provision(get_services())
    return jsonify(
        success_response(result, message="Database initialized successfully")
    ), HTTPStatus.OK
