"""
Tax Service - per-service tax percentages.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import Collection
from resort_shared.datetime_utils import utcnow
from resort_shared.errors import ValidationError
from resort_shared.schemas import TaxSetting
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore
from resort_shared.validation import coerce_number


class TaxService:
    """Tax settings are keyed by caller-chosen service ids and only seeded, never created."""

    def __init__(self, store: DocumentStore, clock: Callable[[], datetime] = utcnow):
        self.repository = EntityRepository(store, Collection.TAX_SETTINGS, TaxSetting, clock=clock)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all()

    def get(self, service_id: str) -> dict[str, Any] | None:
        return self.repository.get(service_id)

    def update_tax(self, service_id: str, tax_percent: Any) -> dict[str, Any] | None:
        """
        Change a service's tax percentage.

        Returns:
            The updated setting, or None if the service id is unknown
        """
        percent = coerce_number(tax_percent, "taxPercent")
        if percent < 0 or percent > 100:
            raise ValidationError("taxPercent must be between 0 and 100")
        return self.repository.update(service_id, {"taxPercent": percent})

    def seed(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self.repository.seed(records)
