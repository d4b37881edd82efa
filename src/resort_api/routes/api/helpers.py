"""
Small request/response helpers shared by the API blueprints.
"""

from typing import Any

from flask import request

from resort_shared.errors import NotFound
from resort_shared.validation import require_mapping


def json_body() -> dict[str, Any]:
    """Request JSON as a dict; an absent or non-JSON body reads as empty."""
    return dict(require_mapping(request.get_json(silent=True)))


def found(record: dict[str, Any] | None, label: str, **key: Any) -> dict[str, Any]:
    """Return `record`, or raise NotFound naming the missing key."""
    if record is None:
        raise NotFound(f"{label} not found", key or None)
    return record
