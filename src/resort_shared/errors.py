"""
Error taxonomy shared by services and the HTTP layer.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class ResortError(Exception):
    """Base class for errors that map to a client-visible response."""

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ResortError):
    """Raised when request input is missing or invalid, before any store call."""

    status = HTTPStatus.BAD_REQUEST


class NotFound(ResortError):
    """Raised on a key lookup miss."""

    status = HTTPStatus.NOT_FOUND


class Conflict(ResortError):
    """Raised when a create would duplicate an application-level unique value."""

    status = HTTPStatus.CONFLICT


class DataUnavailable(ResortError):
    """
    One or more store calls failed or timed out.

    Carries the operation, collection and key so the failure can be logged
    with enough context to diagnose; the client only sees a generic message.
    """

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        operation: str,
        collection: str | None = None,
        key: Any = None,
        cause: BaseException | None = None,
    ):
        super().__init__(f"Store operation '{operation}' failed")
        self.operation = operation
        self.collection = collection
        self.key = key
        self.cause = cause

    def log_context(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "collection": self.collection,
            "key": self.key,
            "cause": repr(self.cause) if self.cause else None,
        }
