"""
Tax Settings API - per-service tax percentages.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.schemas import TaxUpdateRequest
from resort_shared.serializers import success_response
from resort_shared.validation import parse_model

tax_settings_bp = Blueprint("tax_settings", __name__)


@tax_settings_bp.get("/tax-settings")
def list_tax_settings():
    return jsonify(success_response(get_services().tax.list_all())), HTTPStatus.OK


@tax_settings_bp.get("/tax-settings/<service_id>")
def get_tax_setting(service_id: str):
    setting = found(get_services().tax.get(service_id), "Tax setting", serviceId=service_id)
    return jsonify(success_response(setting)), HTTPStatus.OK


@tax_settings_bp.put("/tax-settings/<service_id>")
def update_tax_setting(service_id: str):
    """
    Body:
        {"taxPercent": number between 0 and 100}
    """
    payload = parse_model(TaxUpdateRequest, json_body())
    setting = found(
        get_services().tax.update_tax(service_id, payload.taxPercent),
        "Tax setting",
        serviceId=service_id,
    )
    return jsonify(success_response(setting)), HTTPStatus.OK
