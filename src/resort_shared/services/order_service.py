"""
Order Service - restaurant, bakery, juice, massage and pool orders.

All five order collections share the same lifecycle; they differ only in
id prefix, how the initial status is chosen, and whether the customer
lookup can use the customer/timestamp index.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import CUSTOMER_TIMESTAMP_INDEX, Collection, OrderStatus
from resort_shared.datetime_utils import utcnow
from resort_shared.errors import ValidationError
from resort_shared.ids import prefixed_id
from resort_shared.logging_config import get_logger
from resort_shared.schemas import ServiceOrder
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore
from resort_shared.store.collections import get_spec

logger = get_logger(__name__)

_ORDER_TIME_FIELDS = ("createdAt", "timestamp")


class OrderService:
    """
    Args:
        id_prefix: Prefix of generated order ids
        forced_status: Status every new order starts in, ignoring the caller
        stamp_timestamp: Whether new orders also carry a ``timestamp`` field
    """

    def __init__(
        self,
        store: DocumentStore,
        collection: Collection,
        id_prefix: str,
        forced_status: OrderStatus | None = None,
        stamp_timestamp: bool = False,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = EntityRepository(
            store,
            collection,
            ServiceOrder,
            id_factory=lambda: prefixed_id(id_prefix),
            clock=clock,
        )
        self.forced_status = forced_status
        self.stamp_timestamp = stamp_timestamp
        self._has_customer_index = any(
            index.name == CUSTOMER_TIMESTAMP_INDEX for index in get_spec(collection).indexes
        )

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        forced: dict[str, Any] = {}
        if self.forced_status is not None:
            forced["status"] = self.forced_status.value
        else:
            forced["status"] = data.get("status") or OrderStatus.PENDING.value
            self._check_status(forced["status"])
        if self.stamp_timestamp:
            forced["timestamp"] = self.repository.now_iso()
        return self.repository.create(data, **forced)

    def get(self, order_id: str) -> dict[str, Any] | None:
        return self.repository.get(order_id)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all(*_ORDER_TIME_FIELDS)

    def for_customer(self, customer_id: str) -> list[dict[str, Any]]:
        """A customer's orders, newest first."""
        if self._has_customer_index:
            return self.repository.query(CUSTOMER_TIMESTAMP_INDEX, customer_id)
        return self.repository.find_by("customerId", customer_id, *_ORDER_TIME_FIELDS)

    def update(self, order_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        if "status" in updates:
            self._check_status(updates["status"])
        return self.repository.update(order_id, updates)

    def update_status(self, order_id: str, status: str) -> dict[str, Any] | None:
        self._check_status(status)
        order = self.repository.update(order_id, {"status": status})
        if order is not None:
            logger.info(
                "Order status changed",
                extra={
                    "collection": self.repository.collection.value,
                    "orderId": order_id,
                    "status": status,
                },
            )
        return order

    def update_payment(self, order_id: str, payment_method: str) -> dict[str, Any] | None:
        return self.repository.update(order_id, {"paymentMethod": payment_method})

    def delete(self, order_id: str) -> None:
        self.repository.delete(order_id)

    @staticmethod
    def _check_status(status: Any) -> None:
        allowed = OrderStatus.all_values()
        if status not in allowed:
            raise ValidationError(
                f"Invalid order status: {status}", {"allowed": sorted(allowed)}
            )

