"""
Room Service - room catalogue and room image uploads.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from werkzeug.utils import secure_filename

from resort_shared.constants import ROOM_IMAGE_PREFIX, Collection
from resort_shared.datetime_utils import epoch_millis, utcnow
from resort_shared.errors import ValidationError
from resort_shared.ids import prefixed_id
from resort_shared.logging_config import get_logger
from resort_shared.schemas import Room
from resort_shared.seed_data import DEFAULT_ROOMS
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore, ObjectStore
from resort_shared.validation import decode_base64

logger = get_logger(__name__)


class RoomService:
    """Service for rooms and their images."""

    def __init__(
        self,
        store: DocumentStore,
        object_store: ObjectStore,
        upload_url_expires_seconds: int = 3600,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = EntityRepository(
            store,
            Collection.ROOMS,
            Room,
            id_factory=lambda: prefixed_id("room_"),
            clock=clock,
            keep_caller_key=True,
        )
        self.object_store = object_store
        self.upload_url_expires_seconds = upload_url_expires_seconds
        self.clock = clock

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.repository.create(data)

    def get(self, room_id: str) -> dict[str, Any] | None:
        return self.repository.get(room_id)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all()

    def update(self, room_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.repository.update(room_id, updates)

    def delete(self, room_id: str) -> None:
        self.repository.delete(room_id)

    def initialize_defaults(self) -> list[dict[str, Any]]:
        return self.repository.seed(DEFAULT_ROOMS)

    def image_key(self, file_name: str) -> str:
        """
        Object key for a new room image: ``rooms/<epoch ms>_<file name>``.

        Raises:
            ValidationError: If nothing usable is left of the file name
        """
        safe_name = secure_filename(file_name or "")
        if not safe_name:
            raise ValidationError("fileName is not a valid file name")
        return f"{ROOM_IMAGE_PREFIX}/{epoch_millis(self.clock())}_{safe_name}"

    def create_upload_url(self, file_name: str, file_type: str = "image/jpeg") -> dict[str, str]:
        """
        Presigned PUT for a client-side upload.

        Returns:
            Dict with ``uploadUrl`` (time limited) and ``publicUrl``
        """
        key = self.image_key(file_name)
        upload_url = self.object_store.generate_upload_url(
            key, file_type, self.upload_url_expires_seconds
        )
        return {"uploadUrl": upload_url, "publicUrl": self.object_store.public_url(key)}

    def upload_image(
        self, image_base64: str, file_name: str, file_type: str = "image/jpeg"
    ) -> dict[str, str]:
        body = decode_base64(image_base64, "image")
        key = self.image_key(file_name)
        self.object_store.put_object(key, body, file_type)
        logger.info("Room image uploaded", extra={"key": key, "size": len(body)})
        return {"publicUrl": self.object_store.public_url(key)}
