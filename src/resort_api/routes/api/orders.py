"""
Orders API - restaurant, bakery, juice, massage and pool orders.

Besides CRUD each order resource exposes a per-customer listing and
dedicated status and payment updates (used by the kitchen order ticket
and billing screens).
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.schemas import PaymentUpdateRequest, StatusUpdateRequest
from resort_shared.serializers import success_response
from resort_shared.validation import parse_model

ORDER_RESOURCES = {
    "restaurant-orders": "Restaurant order",
    "bakery-orders": "Bakery order",
    "juice-orders": "Juice order",
    "massage-orders": "Massage order",
    "pool-orders": "Pool order",
}


def make_orders_blueprint(resource: str, label: str) -> Blueprint:
    bp = Blueprint(resource.replace("-", "_"), __name__)

    def service():
        return get_services().orders[resource]

    @bp.get(f"/{resource}")
    def list_orders():
        return jsonify(success_response(service().list_all())), HTTPStatus.OK

    @bp.post(f"/{resource}")
    def create_order():
        return jsonify(success_response(service().create(json_body()))), HTTPStatus.CREATED

    @bp.get(f"/{resource}/customer/<customer_id>")
    def list_customer_orders(customer_id: str):
        return jsonify(success_response(service().for_customer(customer_id))), HTTPStatus.OK

    @bp.get(f"/{resource}/<order_id>")
    def get_order(order_id: str):
        order = found(service().get(order_id), label, orderId=order_id)
        return jsonify(success_response(order)), HTTPStatus.OK

    @bp.put(f"/{resource}/<order_id>")
    def update_order(order_id: str):
        order = found(service().update(order_id, json_body()), label, orderId=order_id)
        return jsonify(success_response(order)), HTTPStatus.OK

    @bp.patch(f"/{resource}/<order_id>/status")
    def update_order_status(order_id: str):
        payload = parse_model(StatusUpdateRequest, json_body())
        order = found(service().update_status(order_id, payload.status), label, orderId=order_id)
        return jsonify(success_response(order)), HTTPStatus.OK

    @bp.patch(f"/{resource}/<order_id>/payment")
    def update_order_payment(order_id: str):
        payload = parse_model(PaymentUpdateRequest, json_body())
        order = found(
            service().update_payment(order_id, payload.paymentMethod), label, orderId=order_id
        )
        return jsonify(success_response(order)), HTTPStatus.OK

    @bp.delete(f"/{resource}/<order_id>")
    def delete_order(order_id: str):
        service().delete(order_id)
        return jsonify(
            success_response({"orderId": order_id}, message=f"{label} deleted")
        ), HTTPStatus.OK

    return bp


order_blueprints = [
    make_orders_blueprint(resource, label) for resource, label in ORDER_RESOURCES.items()
]
