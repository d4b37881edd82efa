from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from resort_shared.datetime_utils import (
    end_of_day,
    epoch_millis,
    is_date_only,
    local_midnight,
    local_now,
    parse_timestamp,
    to_iso,
)

IST = ZoneInfo("Asia/Kolkata")
BERLIN = ZoneInfo("Europe/Berlin")


def test_to_iso_uses_utc_millis_and_z():
    value = datetime(2026, 10, 19, 14, 0, 0, 123456, tzinfo=IST)
    assert to_iso(value) == "2026-10-19T08:30:00.123Z"
    assert to_iso(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02T03:04:05.000Z"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-10-19T08:30:00.000Z", datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)),
        ("2026-10-19T14:00:00+05:30", datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)),
        ("2026-10-19T08:30:00", datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)),
        ("2026-10-19", datetime(2026, 10, 19, tzinfo=timezone.utc)),
    ],
)
def test_parse_timestamp(raw, expected):
    assert parse_timestamp(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "  ", "yesterday", "2026-02-30", 1729328400])
def test_parse_timestamp_rejects_garbage(raw):
    assert parse_timestamp(raw) is None


def test_bare_date_in_zone():
    assert parse_timestamp("2026-10-19", tz=IST) == datetime(2026, 10, 18, 18, 30, tzinfo=timezone.utc)


def test_end_of_day():
    end = end_of_day(date(2026, 10, 19), timezone.utc)
    assert end == datetime(2026, 10, 19, 23, 59, 59, 999999, tzinfo=timezone.utc)
    assert end + timedelta(microseconds=1) == local_midnight(date(2026, 10, 20), timezone.utc)


def test_local_midnight_resolves_offset_per_date():
    assert local_midnight(date(2026, 1, 1), BERLIN).utcoffset() == timedelta(hours=1)
    assert local_midnight(date(2026, 7, 1), BERLIN).utcoffset() == timedelta(hours=2)


def test_host_zone_midnight_across_dst(host_timezone):
    host_timezone("Europe/Berlin")

    assert local_midnight(date(2026, 1, 1)) == datetime(2025, 12, 31, 23, 0, tzinfo=timezone.utc)
    assert local_midnight(date(2026, 10, 19)) == datetime(2026, 10, 18, 22, 0, tzinfo=timezone.utc)
    # 25 October 2026 is 25 hours long in Berlin
    assert end_of_day(date(2026, 10, 25)) == datetime(2026, 10, 25, 22, 59, 59, 999999, tzinfo=timezone.utc)


def test_helpers():
    assert is_date_only(" 2026-10-19 ")
    assert not is_date_only("2026-10-19T00:00:00Z")
    assert epoch_millis(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000
    now = datetime(2026, 10, 19, 20, 0, tzinfo=timezone.utc)
    assert local_now(now, IST).day == 20
