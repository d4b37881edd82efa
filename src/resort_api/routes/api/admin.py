"""
Admin API - dashboard revenue stats and the combined order list.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify, request

from resort_api.extensions import get_services
from resort_shared.logging_config import get_logger
from resort_shared.serializers import success_response

admin_bp = Blueprint("admin", __name__)
logger = get_logger(__name__)


@admin_bp.get("/admin/stats")
def get_dashboard_stats():
    """
    Revenue for today, the last 7 days, this month and this year.

    Each window carries revenue, orderCount and byService; totalOrders
    counts every order ever placed.
    """
    stats = get_services().analytics.compute_dashboard_stats()
    return jsonify(success_response(stats)), HTTPStatus.OK


@admin_bp.get("/admin/orders")
def list_admin_orders():
    """
    Orders from every service, newest first.

    Query params:
    - startDate: ISO timestamp or YYYY-MM-DD (optional)
    - endDate: ISO timestamp or YYYY-MM-DD, a bare date includes the whole day (optional)
    """
    start_date = request.args.get("startDate")
    end_date = request.args.get("endDate")
    orders = get_services().analytics.list_orders_for_admin(start_date, end_date)
    logger.debug(
        "Admin order list",
        extra={"startDate": start_date, "endDate": end_date, "count": len(orders)},
    )
    return jsonify(success_response(orders)), HTTPStatus.OK
