"""
Rooms API - room catalogue and room image uploads.
"""

from http import HTTPStatus

from flask import Blueprint, jsonify

from resort_api.extensions import get_services
from resort_api.routes.api.helpers import found, json_body
from resort_shared.schemas import UploadImageRequest, UploadUrlRequest
from resort_shared.serializers import success_response
from resort_shared.validation import parse_model

rooms_bp = Blueprint("rooms", __name__)


@rooms_bp.get("/rooms")
def list_rooms():
    return jsonify(success_response(get_services().rooms.list_all())), HTTPStatus.OK


@rooms_bp.post("/rooms")
def create_room():
    room = get_services().rooms.create(json_body())
    return jsonify(success_response(room)), HTTPStatus.CREATED


@rooms_bp.post("/rooms/init")
def initialize_rooms():
    rooms = get_services().rooms.initialize_defaults()
    return jsonify(
        success_response(rooms, message=f"Initialized {len(rooms)} rooms")
    ), HTTPStatus.OK


@rooms_bp.post("/rooms/upload-url")
def create_room_upload_url():
    """
    Presigned URL for uploading a room image straight to object storage.

    Body:
        {"fileName": str, "fileType": str (default image/jpeg)}
    """
    payload = parse_model(UploadUrlRequest, json_body())
    urls = get_services().rooms.create_upload_url(payload.fileName, payload.fileType)
    return jsonify(success_response(urls)), HTTPStatus.OK


@rooms_bp.post("/rooms/upload-image")
def upload_room_image():
    """
    Upload a base64 encoded room image through the API.

    Body:
        {"image": base64 str, "fileName": str, "fileType": str (default image/jpeg)}
    """
    payload = parse_model(UploadImageRequest, json_body())
    result = get_services().rooms.upload_image(payload.image, payload.fileName, payload.fileType)
    return jsonify(success_response(result)), HTTPStatus.CREATED


@rooms_bp.get("/rooms/<room_id>")
def get_room(room_id: str):
    room = found(get_services().rooms.get(room_id), "Room", roomId=room_id)
    return jsonify(success_response(room)), HTTPStatus.OK


@rooms_bp.put("/rooms/<room_id>")
def update_room(room_id: str):
    room = found(get_services().rooms.update(room_id, json_body()), "Room", roomId=room_id)
    return jsonify(success_response(room)), HTTPStatus.OK


@rooms_bp.delete("/rooms/<room_id>")
def delete_room(room_id: str):
    get_services().rooms.delete(room_id)
    return jsonify(success_response({"roomId": room_id}, message="Room deleted")), HTTPStatus.OK
