"""
Generic keyed-record repository shared by every entity service.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from resort_shared.constants import CREATED_AT, UPDATED_AT, Collection
from resort_shared.datetime_utils import parse_timestamp, to_iso, utcnow
from resort_shared.errors import NotFound
from resort_shared.logging_config import get_logger
from resort_shared.schemas import ResortRecord
from resort_shared.store.base import DocumentStore
from resort_shared.store.collections import get_spec
from resort_shared.store.update_builder import UpdateBuilder
from resort_shared.validation import parse_model

logger = get_logger(__name__)


def record_instant(record: Mapping[str, Any], *fields: str) -> datetime | None:
    """First parseable timestamp among `fields`, in order."""
    for field in fields:
        parsed = parse_timestamp(record.get(field))
        if parsed is not None:
            return parsed
    return None


def newest_first(records: Iterable[dict[str, Any]], *fields: str) -> list[dict[str, Any]]:
    """Sort records by their first parseable timestamp field, newest first; undated last."""
    dated = []
    undated = []
    for record in records:
        instant = record_instant(record, *fields)
        if instant is None:
            undated.append(record)
        else:
            dated.append((instant, record))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [record for _, record in dated] + undated


class EntityRepository:
    """
    CRUD over one collection.

    Creation validates against the entity's schema, assigns the key and
    stamps ``createdAt``. Updates always go through `UpdateBuilder` with
    the key stripped and ``updatedAt`` forced.
    """

    def __init__(
        self,
        store: DocumentStore,
        collection: Collection,
        model: type[ResortRecord],
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] = utcnow,
        keep_caller_key: bool = False,
    ):
        self.store = store
        self.spec = get_spec(collection)
        self.collection = self.spec.collection
        self.key = self.spec.key
        self.model = model
        self.id_factory = id_factory
        self.clock = clock
        self.keep_caller_key = keep_caller_key

    def now_iso(self) -> str:
        return to_iso(self.clock())

    def build(self, data: Mapping[str, Any], **forced: Any) -> dict[str, Any]:
        """Validate `data` with `forced` fields on top and return the item to store."""
        payload = dict(data)
        payload.update(forced)
        if self.id_factory and not (self.keep_caller_key and payload.get(self.key)):
            payload[self.key] = self.id_factory()
        payload[CREATED_AT] = self.now_iso()
        return parse_model(self.model, payload).to_item()

    def insert(self, item: Mapping[str, Any]) -> dict[str, Any]:
        self.store.put(self.collection, item)
        logger.info(
            "Created record",
            extra={"collection": self.collection.value, "key": item.get(self.key)},
        )
        return dict(item)

    def create(self, data: Mapping[str, Any], **forced: Any) -> dict[str, Any]:
        return self.insert(self.build(data, **forced))

    def get(self, key: Any) -> dict[str, Any] | None:
        return self.store.get(self.collection, key)

    def require(self, key: Any, label: str | None = None) -> dict[str, Any]:
        record = self.get(key)
        if record is None:
            raise NotFound(f"{label or self.model.__name__} not found", {self.key: key})
        return record

    def list_all(self, *sort_fields: str) -> list[dict[str, Any]]:
        records = self.store.scan(self.collection)
        if sort_fields:
            return newest_first(records, *sort_fields)
        return records

    def find_by(self, field: str, value: Any, *sort_fields: str) -> list[dict[str, Any]]:
        records = self.store.scan(self.collection, {field: value})
        if sort_fields:
            return newest_first(records, *sort_fields)
        return records

    def query(self, index_name: str, value: Any, descending: bool = True) -> list[dict[str, Any]]:
        return self.store.query_index(self.collection, index_name, value, descending=descending)

    def update(self, key: Any, updates: Mapping[str, Any]) -> dict[str, Any] | None:
        """
        Set exactly the given fields on an existing record.

        Returns the full post-update record, or None when `key` does not
        exist. An update with nothing to set returns the current record
        without writing.
        """
        builder = UpdateBuilder(updates).without(self.key)
        if builder.is_empty():
            return self.get(key)
        builder.touch(UPDATED_AT, self.now_iso())
        return self.store.update(self.collection, key, builder)

    def delete(self, key: Any) -> None:
        self.store.delete(self.collection, key)
        logger.info("Deleted record", extra={"collection": self.collection.value, "key": key})

    def seed(self, records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
        """Write fixed records (keys included) stamped with ``createdAt``."""
        created_at = self.now_iso()
        items = [{**record, CREATED_AT: created_at} for record in records]
        for item in items:
            self.store.put(self.collection, item)
        logger.info(
            "Seeded collection",
            extra={"collection": self.collection.value, "count": len(items)},
        )
        return items
