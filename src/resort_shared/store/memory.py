"""
In-memory store implementations for tests and local development.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from resort_shared.constants import Collection
from resort_shared.errors import DataUnavailable
from resort_shared.store.base import DocumentStore, ObjectStore, SortRange
from resort_shared.store.collections import COLLECTIONS, CollectionSpec, get_spec
from resort_shared.store.update_builder import UpdateBuilder


class InMemoryDocumentStore(DocumentStore):
    """
    Dict-backed document store with the same semantics as the DynamoDB one.

    Records are deep-copied in and out so callers never share state with
    the store. Secondary indexes are sparse: records without the partition
    attribute are not returned by `query_index`.

    `fail_on` is a set of collections whose every call raises
    `DataUnavailable`, used to exercise failure paths.
    """

    def __init__(self, specs: Iterable[CollectionSpec] | None = None, create: bool = True):
        self._lock = threading.Lock()
        self._data: dict[Collection, dict[Any, dict[str, Any]]] = {}
        self.fail_on: set[Collection] = set()
        if create:
            for spec in specs or COLLECTIONS.values():
                self._data[spec.collection] = {}

    def _records(self, operation: str, collection: Collection, key: Any = None):
        spec = get_spec(collection)
        if spec.collection in self.fail_on:
            raise DataUnavailable(operation, spec.collection.value, key)
        if spec.collection not in self._data:
            raise DataUnavailable(
                operation,
                spec.collection.value,
                key,
                cause=LookupError(f"Collection {spec.name} does not exist"),
            )
        return spec, self._data[spec.collection]

    def get(self, collection, key):
        with self._lock:
            _, records = self._records("get", collection, key)
            record = records.get(key)
            return copy.deepcopy(record) if record is not None else None

    def put(self, collection, item):
        with self._lock:
            spec, records = self._records("put", collection, item.get(get_spec(collection).key))
            records[item[spec.key]] = copy.deepcopy(dict(item))

    def update(self, collection, key, builder: UpdateBuilder):
        with self._lock:
            spec, records = self._records("update", collection, key)
            current = records.get(key)
            if current is None:
                return None
            if builder.is_empty():
                return copy.deepcopy(current)
            updated = builder.apply(current)
            updated[spec.key] = key
            records[key] = copy.deepcopy(updated)
            return copy.deepcopy(updated)

    def delete(self, collection, key):
        with self._lock:
            _, records = self._records("delete", collection, key)
            records.pop(key, None)

    def query_index(
        self,
        collection,
        index_name: str,
        value: Any,
        sort_range: SortRange | None = None,
        descending: bool = False,
    ):
        with self._lock:
            spec, records = self._records("query", collection, value)
            index = spec.index(index_name)
            matches = [
                record
                for record in records.values()
                if index.partition_key in record and record[index.partition_key] == value
            ]
            if index.sort_key:
                matches = [r for r in matches if index.sort_key in r]
                if sort_range:
                    lower, upper = sort_range
                    matches = [
                        r
                        for r in matches
                        if (lower is None or r[index.sort_key] >= lower)
                        and (upper is None or r[index.sort_key] <= upper)
                    ]
                matches.sort(key=lambda r: r[index.sort_key], reverse=descending)
            return copy.deepcopy(matches)

    def scan(self, collection, filters: Mapping[str, Any] | None = None):
        with self._lock:
            _, records = self._records("scan", collection)
            items = [
                record
                for record in records.values()
                if not filters
                or all(name in record and record[name] == v for name, v in filters.items())
            ]
            return copy.deepcopy(items)

    def ensure_collections(self, specs: Iterable[CollectionSpec]) -> list[Collection]:
        created = []
        with self._lock:
            for spec in specs:
                if spec.collection not in self._data:
                    self._data[spec.collection] = {}
                    created.append(spec.collection)
        return created


class InMemoryObjectStore(ObjectStore):
    """Keeps uploaded objects in a dict keyed by object key."""

    def __init__(self, bucket: str = "local-bucket", region: str = "local"):
        self.bucket = bucket
        self.region = region
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put_object(self, key, body, content_type):
        self.objects[key] = (bytes(body), content_type)

    def generate_upload_url(self, key, content_type, expires_in):
        return (
            f"{self.public_url(key)}?X-Amz-Expires={int(expires_in)}"
            f"&Content-Type={quote(content_type, safe='')}"
        )

    def public_url(self, key):
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{quote(key)}"
