"""
Interfaces of the external collaborators: a document store and an object store.

Services only ever talk to these; the concrete client is chosen once in the
application factory and handed to every service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from resort_shared.constants import Collection
from resort_shared.store.collections import CollectionSpec
from resort_shared.store.update_builder import UpdateBuilder

# (lower, upper) on the index sort key, either side may be None
SortRange = tuple[Any, Any]


class DocumentStore(ABC):
    """Keyed document collections with secondary indexes and scans."""

    @abstractmethod
    def get(self, collection: Collection, key: Any) -> dict[str, Any] | None:
        """Fetch one record by primary key, None when absent."""

    @abstractmethod
    def put(self, collection: Collection, item: Mapping[str, Any]) -> None:
        """Insert or replace a whole record."""

    @abstractmethod
    def update(
        self, collection: Collection, key: Any, builder: UpdateBuilder
    ) -> dict[str, Any] | None:
        """
        Apply the builder's assignments to an existing record.

        Returns the full post-update record, or None when the key does not
        exist. Never creates a record.
        """

    @abstractmethod
    def delete(self, collection: Collection, key: Any) -> None:
        """Delete by primary key; deleting an absent key is not an error."""

    @abstractmethod
    def query_index(
        self,
        collection: Collection,
        index_name: str,
        value: Any,
        sort_range: SortRange | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Exact match on the index partition key, ordered by its sort key."""

    @abstractmethod
    def scan(
        self, collection: Collection, filters: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Full-collection read, optionally keeping only records whose fields equal `filters`."""

    @abstractmethod
    def ensure_collections(self, specs: Iterable[CollectionSpec]) -> list[Collection]:
        """Create missing collections; returns the ones that were created."""


class ObjectStore(ABC):
    """Blob storage for uploaded images."""

    @abstractmethod
    def put_object(self, key: str, body: bytes, content_type: str) -> None:
        """Upload bytes directly."""

    @abstractmethod
    def generate_upload_url(self, key: str, content_type: str, expires_in: int) -> str:
        """Time-limited URL a client can PUT the object to."""

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Stable URL the object is served from once uploaded."""
