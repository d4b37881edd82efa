"""
Document and object store clients.
"""

from __future__ import annotations

from resort_shared.config import AppConfig
from resort_shared.store.base import DocumentStore, ObjectStore
from resort_shared.store.collections import COLLECTIONS, CollectionSpec, IndexSpec, get_spec
from resort_shared.store.memory import InMemoryDocumentStore, InMemoryObjectStore
from resort_shared.store.update_builder import UpdateBuilder


def build_stores(config: AppConfig) -> tuple[DocumentStore, ObjectStore]:
    """Construct the store handles selected by `config.store_backend`."""
    if config.store_backend == "memory":
        return (
            InMemoryDocumentStore(create=False),
            InMemoryObjectStore(config.s3_bucket, config.aws_region),
        )

    from resort_shared.store.dynamodb import DynamoDocumentStore
    from resort_shared.store.s3 import S3ObjectStore

    return DynamoDocumentStore(config), S3ObjectStore(config)


__all__ = [
    "COLLECTIONS",
    "CollectionSpec",
    "DocumentStore",
    "InMemoryDocumentStore",
    "InMemoryObjectStore",
    "IndexSpec",
    "ObjectStore",
    "UpdateBuilder",
    "build_stores",
    "get_spec",
]
