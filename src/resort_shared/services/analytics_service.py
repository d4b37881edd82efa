"""
Analytics Service - revenue rollups for the admin dashboard.

Combines the six order sources (game bookings plus restaurant, bakery,
juice, massage and pool orders) into:
- today / rolling week / month / year revenue, order count and
  per-service revenue
- a single admin order list, optionally limited to a date range
"""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any

from resort_shared.constants import Collection, ServiceLabel
from resort_shared.datetime_utils import (
    end_of_day,
    is_date_only,
    local_midnight,
    local_now,
    parse_timestamp,
    utcnow,
)
from resort_shared.errors import DataUnavailable, ValidationError
from resort_shared.logging_config import get_logger
from resort_shared.services.repository import newest_first, record_instant
from resort_shared.store.base import DocumentStore

logger = get_logger(__name__)

REVENUE_SOURCES: tuple[tuple[Collection, ServiceLabel], ...] = (
    (Collection.BOOKINGS, ServiceLabel.GAMES),
    (Collection.RESTAURANT_ORDERS, ServiceLabel.RESTAURANT),
    (Collection.BAKERY_ORDERS, ServiceLabel.BAKERY),
    (Collection.JUICE_ORDERS, ServiceLabel.JUICE),
    (Collection.MASSAGE_ORDERS, ServiceLabel.MASSAGE),
    (Collection.POOL_ORDERS, ServiceLabel.POOL),
)

WINDOWS = ("today", "week", "month", "year")


@dataclass(frozen=True)
class RevenueEntry:
    service: str
    amount: int | float
    created_at: datetime | None


def _amount(value: Any) -> int | float:
    """Order total as a number; missing, non-numeric or non-finite totals count as zero."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    return 0


def _money(value: int | float) -> int | float:
    if isinstance(value, float):
        rounded = round(value, 2)
        return int(rounded) if rounded.is_integer() else rounded
    return value


def _service_label(record: dict[str, Any], label: ServiceLabel) -> str:
    # bookings may carry their own service name
    if label is ServiceLabel.GAMES and record.get("service"):
        return str(record["service"])
    return label.value


class RevenueAggregator:
    """
    Read-only aggregation over the order collections.

    Args:
        store: Document store handle
        tz: Zone that "today", "month" and "year" are measured in; the
            host's local zone when None
    """

    def __init__(self, store: DocumentStore, tz: tzinfo | None = None):
        self.store = store
        self.tz = tz

    def _fetch_sources(self) -> list[tuple[ServiceLabel, list[dict[str, Any]]]]:
        """Scan all sources concurrently; any failed scan fails the whole read."""
        with ThreadPoolExecutor(
            max_workers=len(REVENUE_SOURCES), thread_name_prefix="revenue-scan"
        ) as pool:
            futures = [
                (collection, label, pool.submit(self.store.scan, collection))
                for collection, label in REVENUE_SOURCES
            ]
            results = []
            for collection, label, future in futures:
                try:
                    results.append((label, future.result()))
                except DataUnavailable:
                    logger.error(
                        "Revenue source unavailable",
                        extra={"collection": collection.value},
                    )
                    raise
                except Exception as exc:
                    logger.error(
                        "Revenue source read failed",
                        extra={"collection": collection.value},
                        exc_info=True,
                    )
                    raise DataUnavailable("scan", collection.value, cause=exc) from exc
        return results

    def _entries(self) -> list[RevenueEntry]:
        entries = []
        for label, records in self._fetch_sources():
            for record in records:
                entries.append(
                    RevenueEntry(
                        service=_service_label(record, label),
                        amount=_amount(record.get("totalAmount")),
                        created_at=record_instant(record, "createdAt", "timestamp"),
                    )
                )
        return entries

    def window_starts(self, now: datetime) -> dict[str, datetime]:
        """Start instant of each report window relative to `now`."""
        today = local_now(now, self.tz).date()
        return {
            "today": local_midnight(today, self.tz),
            "week": now - timedelta(days=7),
            "month": local_midnight(today.replace(day=1), self.tz),
            "year": local_midnight(today.replace(month=1, day=1), self.tz),
        }

    def compute_dashboard_stats(self, now: datetime | None = None) -> dict[str, Any]:
        """
        Revenue, order count and per-service revenue for each window.

        Args:
            now: Reference instant; current time when omitted

        Returns:
            ``{"today": {...}, "week": {...}, "month": {...}, "year": {...},
            "totalOrders": n}`` where each window holds ``revenue``,
            ``orderCount`` and ``byService``

        Raises:
            DataUnavailable: If any of the source reads fails
        """
        now = now or utcnow()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        starts = self.window_starts(now)
        entries = self._entries()

        stats: dict[str, Any] = {}
        for window in WINDOWS:
            start = starts[window]
            revenue: int | float = 0
            order_count = 0
            by_service: dict[str, int | float] = {}
            for entry in entries:
                if entry.created_at is None or entry.created_at < start:
                    continue
                revenue += entry.amount
                order_count += 1
                by_service[entry.service] = by_service.get(entry.service, 0) + entry.amount
            stats[window] = {
                "revenue": _money(revenue),
                "orderCount": order_count,
                "byService": {name: _money(total) for name, total in by_service.items()},
            }
        stats["totalOrders"] = len(entries)
        return stats

    def _bound(self, value: str | None, name: str, end: bool = False) -> datetime | None:
        if value is None or not str(value).strip():
            return None
        text = str(value).strip()
        if is_date_only(text):
            try:
                day = date.fromisoformat(text)
            except ValueError:
                raise ValidationError(f"{name} is not a valid date", {name: value})
            return end_of_day(day, self.tz) if end else local_midnight(day, self.tz)
        parsed = parse_timestamp(text)
        if parsed is None:
            raise ValidationError(f"{name} is not a valid date", {name: value})
        return parsed

    def list_orders_for_admin(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> list[dict[str, Any]]:
        """
        Every order from every source, newest first.

        Each record gets its ``service`` label and a ``createdAt`` taken from
        ``createdAt`` or, failing that, ``timestamp``; bookings also get
        ``orderId`` set to their ``bookingId``. When a bound is given only
        records whose creation time lies inside ``[start_date, end_date]``
        are kept. Bounds are ISO timestamps or bare dates; a bare end date
        includes the whole of that day.
        """
        start = self._bound(start_date, "startDate")
        end = self._bound(end_date, "endDate", end=True)
        if start and end and start > end:
            raise ValidationError("startDate must not be after endDate")

        orders = []
        for label, records in self._fetch_sources():
            for record in records:
                order = dict(record)
                order["service"] = _service_label(record, label)
                order["createdAt"] = record.get("createdAt") or record.get("timestamp")
                if label is ServiceLabel.GAMES:
                    order["orderId"] = record.get("bookingId")

                if start or end:
                    instant = record_instant(record, "createdAt", "timestamp")
                    if instant is None:
                        continue
                    if start and instant < start:
                        continue
                    if end and instant > end:
                        continue
                orders.append(order)

        return newest_first(orders, "createdAt", "timestamp")
