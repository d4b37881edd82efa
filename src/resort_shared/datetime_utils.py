"""
Datetime utilities.

Stored timestamps are ISO-8601 UTC strings with millisecond precision and a
trailing ``Z`` (``2026-10-19T08:30:00.000Z``). Comparisons always go through
`parse_timestamp` so older records written in another ISO-8601 shape still
order correctly.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Serialize an instant the way every record timestamp is stored."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def now_iso() -> str:
    return to_iso(utcnow())


def epoch_millis(value: datetime | None = None) -> int:
    return int((value or utcnow()).timestamp() * 1000)


def is_date_only(value: str) -> bool:
    return bool(_DATE_ONLY.match(value.strip()))


def parse_timestamp(value, tz: tzinfo | None = None) -> datetime | None:
    """
    Parse a stored or user supplied timestamp into an aware datetime.

    Naive timestamps are taken as UTC. A bare date (``YYYY-MM-DD``) is the
    start of that day in ``tz`` (UTC when not given). Anything else that
    does not parse returns None.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if is_date_only(text):
        try:
            day = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime.combine(day, time.min, tzinfo=tz or timezone.utc)

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def local_midnight(day: date, tz: tzinfo | None = None) -> datetime:
    """
    Start of `day` in `tz`, or in the host zone when none is configured.

    The offset is resolved for `day` itself, so boundaries on the other side
    of a DST change get that date's offset rather than today's.
    """
    if tz is not None:
        return datetime.combine(day, time.min, tzinfo=tz)
    return datetime.combine(day, time.min).astimezone()


def end_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Last representable instant of `day` in `tz` (host zone when None)."""
    return local_midnight(day + timedelta(days=1), tz) - timedelta(microseconds=1)


def local_now(now: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert `now` to the resort's zone, or the host zone when none is configured."""
    return now.astimezone(tz) if tz is not None else now.astimezone()
