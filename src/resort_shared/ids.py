"""
Identifier generation.
"""

from __future__ import annotations

import secrets
import uuid
from datetime import datetime

from resort_shared.datetime_utils import epoch_millis

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 encoding expects a non-negative integer")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def short_hex() -> str:
    """First eight hex characters of a random UUID."""
    return uuid.uuid4().hex[:8]


def prefixed_id(prefix: str) -> str:
    return f"{prefix}{short_hex()}"


def customer_id(now: datetime | None = None) -> str:
    """``JJ-<base36 epoch ms>-<4 random base36>``, upper-cased."""
    random_part = "".join(secrets.choice(_BASE36) for _ in range(4))
    return f"JJ-{to_base36(epoch_millis(now))}-{random_part}".upper()


def booking_id() -> str:
    return f"BK-{short_hex().upper()}"
