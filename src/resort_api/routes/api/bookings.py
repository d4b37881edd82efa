"""
Bookings API - game zone bookings.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.serializers import success_response

bookings_bp = Blueprint("bookings", __name__)


@bookings_bp.post("/bookings")
def create_booking():
    """
    Record a booking.

    Body:
        {"items": list, "totalAmount": number, "service": str,
         "customerId", "customerName", "customerMobile", "totalCoins",
         "paymentMethod" (all optional)}
    """
    booking = get_services().bookings.create(json_body())
    return jsonify(success_response(booking)), HTTPStatus.CREATED


@bookings_bp.get("/bookings")
def list_bookings():
    return jsonify(success_response(get_services().bookings.list_all())), HTTPStatus.OK


@bookings_bp.get("/bookings/customer/<customer_id>")
def list_customer_bookings(customer_id: str):
    bookings = get_services().bookings.for_customer(customer_id)
    return jsonify(success_response(bookings)), HTTPStatus.OK


@bookings_bp.get("/bookings/<booking_id>")
def get_booking(booking_id: str):
    booking = found(get_services().bookings.get(booking_id), "Booking", bookingId=booking_id)
    return jsonify(success_response(booking)), HTTPStatus.OK


@bookings_bp.put("/bookings/<booking_id>")
def update_booking(booking_id: str):
    booking = found(
        get_services().bookings.update(booking_id, json_body()), "Booking", bookingId=booking_id
    )
    return jsonify(success_response(booking)), HTTPStatus.OK


@bookings_bp.delete("/bookings/<booking_id>")
def delete_booking(booking_id: str):
    get_services().bookings.delete(booking_id)
    return jsonify(
        success_response({"bookingId": booking_id}, message="Booking deleted")
    ), HTTPStatus.OK
