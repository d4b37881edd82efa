"""
Customer Service - check-in, lookup and check-out of resort customers.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import MOBILE_INDEX, Collection, CustomerStatus
from resort_shared.datetime_utils import utcnow
from resort_shared.errors import Conflict
from resort_shared.ids import customer_id
from resort_shared.logging_config import get_logger
from resort_shared.schemas import Customer
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore
from resort_shared.validation import require_fields

logger = get_logger(__name__)


class CustomerService:
    """Service for managing checked-in customers."""

    def __init__(self, store: DocumentStore, clock: Callable[[], datetime] = utcnow):
        self.repository = EntityRepository(
            store,
            Collection.CUSTOMERS,
            Customer,
            id_factory=lambda: customer_id(clock()),
            clock=clock,
        )

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Check a new customer in.

        Mobile numbers are unique per customer, checked by lookup before the
        insert. The lookup and the insert are two separate store calls, so
        two concurrent check-ins with the same mobile can both succeed.

        Raises:
            ValidationError: If name or mobile is missing
            Conflict: If a customer with the same mobile already exists
        """
        require_fields(data, "name", "mobile")
        mobile = str(data["mobile"]).strip()

        existing = self.get_by_mobile(mobile)
        if existing:
            logger.info("Duplicate customer mobile", extra={"customerId": existing["customerId"]})
            raise Conflict("Customer with this mobile already exists", {"customer": existing})

        return self.repository.create(
            data,
            mobile=mobile,
            walletAmount=data.get("walletAmount") or 0,
            checkinTime=self.repository.now_iso(),
            status=CustomerStatus.CHECKED_IN.value,
        )

    def get(self, customer_id: str) -> dict[str, Any] | None:
        return self.repository.get(customer_id)

    def get_by_mobile(self, mobile: str) -> dict[str, Any] | None:
        matches = self.repository.query(MOBILE_INDEX, str(mobile).strip(), descending=False)
        return matches[0] if matches else None

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all("checkinTime")

    def search(self, query: str | None) -> list[dict[str, Any]]:
        """Case-insensitive name match or mobile substring match."""
        if not query or not query.strip():
            return []
        needle = query.strip()
        lowered = needle.lower()
        return [
            customer
            for customer in self.repository.list_all()
            if lowered in str(customer.get("name") or "").lower()
            or needle in str(customer.get("mobile") or "")
        ]

    def update(self, customer_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.repository.update(customer_id, updates)

    def check_out(self, customer_id: str) -> dict[str, Any] | None:
        return self.repository.update(
            customer_id,
            {
                "status": CustomerStatus.CHECKED_OUT.value,
                "checkoutTime": self.repository.now_iso(),
            },
        )

    def delete(self, customer_id: str) -> None:
        self.repository.delete(customer_id)
