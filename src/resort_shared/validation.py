"""
Input validation utilities.
"""

from __future__ import annotations

import base64
import binascii
import math
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from resort_shared.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, (list, dict)) and not value:
        return True
    return False


def require_fields(payload: dict[str, Any], *names: str) -> None:
    """
    Reject a payload missing any of the given fields.

    Zero is a valid value; empty strings, empty collections and None are not.
    """
    missing = [name for name in names if _is_blank(payload.get(name))]
    if missing:
        raise ValidationError(
            f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required",
            {"missing": missing},
        )


def require_mapping(payload: Any) -> dict[str, Any]:
    """Request bodies must be JSON objects."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def coerce_number(value: Any, field: str) -> int | float:
    """Accept finite numbers or numeric strings; keep integers integral."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            raise ValidationError(f"{field} must be a number")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"{field} must be a finite number")
        return value
    raise ValidationError(f"{field} must be a number")


def decode_base64(data: str, field: str = "image") -> bytes:
    """Decode a base64 payload, tolerating a ``data:<mime>;base64,`` prefix."""
    if not isinstance(data, str) or not data:
        raise ValidationError(f"{field} is required")
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError(f"{field} is not valid base64")


def parse_model(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    """Validate `payload` against a pydantic model, raising our ValidationError."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        fields = ", ".join(err["field"] for err in errors)
        raise ValidationError(f"Invalid value for {fields}", {"errors": errors}) from exc
