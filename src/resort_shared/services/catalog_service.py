"""
Catalog Service - sellable items (menu, bakery, juice, massage), combos and
pool types. One instance per collection.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from resort_shared.constants import Collection
from resort_shared.datetime_utils import utcnow
from resort_shared.ids import prefixed_id
from resort_shared.schemas import ResortRecord
from resort_shared.services.repository import EntityRepository
from resort_shared.store.base import DocumentStore


class CatalogService:
    def __init__(
        self,
        store: DocumentStore,
        collection: Collection,
        model: type[ResortRecord],
        id_prefix: str,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = EntityRepository(
            store, collection, model, id_factory=lambda: prefixed_id(id_prefix), clock=clock
        )

    @property
    def key(self) -> str:
        return self.repository.key

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.repository.create(data)

    def get(self, key: str) -> dict[str, Any] | None:
        return self.repository.get(key)

    def list_all(self) -> list[dict[str, Any]]:
        return self.repository.list_all()

    def update(self, key: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.repository.update(key, updates)

    def delete(self, key: str) -> None:
        self.repository.delete(key)

    def seed(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self.repository.seed(records)
