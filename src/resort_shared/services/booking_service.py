"""
Booking Service - game zone bookings.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import CUSTOMER_TIMESTAMP_INDEX, WALK_IN_CUSTOMER_ID, Collection
from resort_shared.datetime_utils import utcnow
from resort_shared.ids import booking_id
from resort_shared.schemas import Booking
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore
from resort_shared.validation import coerce_number, require_fields


class BookingService:
    def __init__(self, store: DocumentStore, clock: Callable[[], datetime] = utcnow):
        self.repository = EntityRepository(
            store, Collection.BOOKINGS, Booking, id_factory=booking_id, clock=clock
        )

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Record a booking.

        Missing customer details fall back to a walk-in customer.

        Raises:
            ValidationError: If items, totalAmount or service is missing
        """
        require_fields(data, "items", "totalAmount", "service")
        return self.repository.create(
            data,
            customerId=data.get("customerId") or WALK_IN_CUSTOMER_ID,
            customerName=data.get("customerName") or "Walk-in Customer",
            customerMobile=str(data.get("customerMobile") or ""),
            totalAmount=coerce_number(data["totalAmount"], "totalAmount"),
            totalCoins=data.get("totalCoins") or 0,
            paymentMethod=data.get("paymentMethod") or "Cash",
            timestamp=self.repository.now_iso(),
        )

    def get(self, booking_id: str) -> dict[str, Any] | None:
        return self.repository.get(booking_id)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all("timestamp", "createdAt")

    def for_customer(self, customer_id: str) -> list[dict[str, Any]]:
        """Newest first, via the customer/timestamp index."""
        return self.repository.query(CUSTOMER_TIMESTAMP_INDEX, customer_id)

    def update(self, booking_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.repository.update(booking_id, updates)

    def delete(self, booking_id: str) -> None:
        self.repository.delete(booking_id)
