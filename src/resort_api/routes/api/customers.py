"""
Customers API - check-in, lookup, search and check-out.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.logging_config import get_logger
from resort_shared.serializers import success_response

# Create blueprint without url_prefix (inherited from parent)
customers_bp = Blueprint("customers", __name__)
logger = get_logger(__name__)


@customers_bp.post("/customers")
def create_customer():
    """
    Check a customer in.

    Body:
        {"name": str, "mobile": str, "walletAmount": number (optional)}

    Responds 409 with the existing customer when the mobile is taken.
    """
    customer = get_services().customers.create(json_body())
    return jsonify(success_response(customer)), HTTPStatus.CREATED


@customers_bp.get("/customers")
def list_customers():
    return jsonify(success_response(get_services().customers.list_all())), HTTPStatus.OK


@customers_bp.get("/customers/search")
def search_customers():
    """Search by name or mobile (?q=)."""
    results = get_services().customers.search(request.args.get("q", ""))
    return jsonify(success_response(results)), HTTPStatus.OK


@customers_bp.get("/customers/mobile/<mobile>")
def get_customer_by_mobile(mobile: str):
    customer = found(get_services().customers.get_by_mobile(mobile), "Customer", mobile=mobile)
    return jsonify(success_response(customer)), HTTPStatus.OK


@customers_bp.get("/customers/<customer_id>")
def get_customer(customer_id: str):
    customer = found(get_services().customers.get(customer_id), "Customer", customerId=customer_id)
    return jsonify(success_response(customer)), HTTPStatus.OK


@customers_bp.put("/customers/<customer_id>")
def update_customer(customer_id: str):
    customer = found(
        get_services().customers.update(customer_id, json_body()),
        "Customer",
        customerId=customer_id,
    )
    return jsonify(success_response(customer)), HTTPStatus.OK


@customers_bp.post("/customers/<customer_id>/checkout")
def check_out_customer(customer_id: str):
    customer = found(
        get_services().customers.check_out(customer_id), "Customer", customerId=customer_id
    )
    logger.info("Customer checked out", extra={"customerId": customer_id})
    return jsonify(success_response(customer)), HTTPStatus.OK


@customers_bp.delete("/customers/<customer_id>")
def delete_customer(customer_id: str):
    get_services().customers.delete(customer_id)
    return jsonify(
        success_response({"customerId": customer_id}, message="Customer deleted")
    ), HTTPStatus.OK
