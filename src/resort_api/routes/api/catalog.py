"""
Catalog API - menu items, combos, bakery/juice/massage items and pool types.

All six resources expose the same CRUD routes, so their blueprints are
built by one factory.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.serializers import success_response

CATALOG_RESOURCES = {
    "menu": "Menu item",
    "combos": "Combo",
    "bakery-items": "Bakery item",
    "juice-items": "Juice item",
    "massage-items": "Massage item",
    "pool-types": "Pool type",
}


def make_catalog_blueprint(resource: str, label: str) -> Blueprint:
    bp = Blueprint(resource.replace("-", "_"), __name__)

    def service():
        return get_services().catalogs[resource]

    @bp.get(f"/{resource}")
    def list_items():
        return jsonify(success_response(service().list_all())), HTTPStatus.OK

    @bp.post(f"/{resource}")
    def create_item():
        return jsonify(success_response(service().create(json_body()))), HTTPStatus.CREATED

    @bp.get(f"/{resource}/<item_id>")
    def get_item(item_id: str):
        catalog = service()
        item = found(catalog.get(item_id), label, **{catalog.key: item_id})
        return jsonify(success_response(item)), HTTPStatus.OK

    @bp.put(f"/{resource}/<item_id>")
    def update_item(item_id: str):
        catalog = service()
        item = found(catalog.update(item_id, json_body()), label, **{catalog.key: item_id})
        return jsonify(success_response(item)), HTTPStatus.OK

    @bp.delete(f"/{resource}/<item_id>")
    def delete_item(item_id: str):
        catalog = service()
        catalog.delete(item_id)
        return jsonify(
            success_response({catalog.key: item_id}, message=f"{label} deleted")
        ), HTTPStatus.OK

    return bp


catalog_blueprints = [
    make_catalog_blueprint(resource, label) for resource, label in CATALOG_RESOURCES.items()
]
