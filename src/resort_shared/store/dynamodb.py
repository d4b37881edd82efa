"""
DynamoDB-backed document store.

Uses the low-level boto3 client (thread-safe, unlike boto3 resources) with
boto3's type (de)serializers. Numbers cross the boundary as Decimal; they
are converted to int/float on the way out and back on the way in.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from resort_shared.config import AppConfig
from resort_shared.constants import Collection
from resort_shared.errors import DataUnavailable
from resort_shared.logging_config import LoggerAdapter, get_logger
from resort_shared.store.base import DocumentStore, SortRange
from resort_shared.store.collections import CollectionSpec, get_spec
from resort_shared.store.update_builder import UpdateBuilder

logger = LoggerAdapter(get_logger(__name__), {"store": "dynamodb"})

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def to_dynamo(value: Any) -> Any:
    """Prepare a Python value for the DynamoDB serializer (floats are not accepted)."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, Mapping):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_dynamo(v) for v in value]
    return value


def from_dynamo(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, Mapping):
        return {k: from_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [from_dynamo(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(from_dynamo(v) for v in value)
    return value


def _serialize_item(item: Mapping[str, Any]) -> dict[str, Any]:
    return {k: _serializer.serialize(to_dynamo(v)) for k, v in item.items()}


def _deserialize_item(item: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if item is None:
        return None
    return {k: from_dynamo(_deserializer.deserialize(v)) for k, v in item.items()}


@contextmanager
def _store_call(operation: str, collection: Collection, key: Any = None) -> Iterator[None]:
    try:
        yield
    except (ClientError, BotoCoreError) as exc:
        raise DataUnavailable(operation, collection.value, key, cause=exc) from exc


class DynamoDocumentStore(DocumentStore):
    """DocumentStore over DynamoDB tables named ``<prefix><Collection>``."""

    def __init__(self, config: AppConfig, client=None):
        self._config = config
        self._client = client or self._build_client(config)

    @staticmethod
    def _build_client(config: AppConfig):
        session_kwargs: dict[str, Any] = {"region_name": config.aws_region}
        if config.aws_access_key_id and config.aws_secret_access_key:
            session_kwargs["aws_access_key_id"] = config.aws_access_key_id
            session_kwargs["aws_secret_access_key"] = config.aws_secret_access_key
        session = boto3.session.Session(**session_kwargs)
        return session.client(
            "dynamodb",
            endpoint_url=config.dynamodb_endpoint_url or None,
            config=Config(
                retries={"max_attempts": config.store_max_attempts, "mode": "standard"},
                connect_timeout=config.store_timeout_seconds,
                read_timeout=config.store_timeout_seconds,
            ),
        )

    def _table_name(self, collection: Collection) -> str:
        return self._config.table_name(Collection(collection).value)

    def get(self, collection, key):
        spec = get_spec(collection)
        with _store_call("get", spec.collection, key):
            response = self._client.get_item(
                TableName=self._table_name(spec.collection),
                Key=_serialize_item(spec.key_of(key)),
            )
        return _deserialize_item(response.get("Item"))

    def put(self, collection, item):
        spec = get_spec(collection)
        with _store_call("put", spec.collection, item.get(spec.key)):
            self._client.put_item(
                TableName=self._table_name(spec.collection), Item=_serialize_item(item)
            )

    def update(self, collection, key, builder: UpdateBuilder):
        spec = get_spec(collection)
        request = builder.compile(spec.key)
        request["ExpressionAttributeValues"] = _serialize_item(
            request["ExpressionAttributeValues"]
        )
        with _store_call("update", spec.collection, key):
            try:
                response = self._client.update_item(
                    TableName=self._table_name(spec.collection),
                    Key=_serialize_item(spec.key_of(key)),
                    **request,
                )
            except ClientError as exc:
                if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                    return None
                raise
        return _deserialize_item(response.get("Attributes"))

    def delete(self, collection, key):
        spec = get_spec(collection)
        with _store_call("delete", spec.collection, key):
            self._client.delete_item(
                TableName=self._table_name(spec.collection),
                Key=_serialize_item(spec.key_of(key)),
            )

    def query_index(
        self,
        collection,
        index_name: str,
        value: Any,
        sort_range: SortRange | None = None,
        descending: bool = False,
    ):
        spec = get_spec(collection)
        index = spec.index(index_name)

        condition = "#pk = :pk"
        names = {"#pk": index.partition_key}
        values: dict[str, Any] = {":pk": value}
        if sort_range and index.sort_key:
            lower, upper = sort_range
            names["#sk"] = index.sort_key
            if lower is not None and upper is not None:
                condition += " AND #sk BETWEEN :lo AND :hi"
                values.update({":lo": lower, ":hi": upper})
            elif lower is not None:
                condition += " AND #sk >= :lo"
                values[":lo"] = lower
            elif upper is not None:
                condition += " AND #sk <= :hi"
                values[":hi"] = upper

        paginator = self._client.get_paginator("query")
        items: list[dict[str, Any]] = []
        with _store_call("query", spec.collection, value):
            for page in paginator.paginate(
                TableName=self._table_name(spec.collection),
                IndexName=index.name,
                KeyConditionExpression=condition,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=_serialize_item(values),
                ScanIndexForward=not descending,
            ):
                items.extend(_deserialize_item(item) for item in page.get("Items", []))
        return items

    def scan(self, collection, filters: Mapping[str, Any] | None = None):
        spec = get_spec(collection)
        kwargs: dict[str, Any] = {"TableName": self._table_name(spec.collection)}
        if filters:
            clauses = []
            names = {}
            values = {}
            for index, (name, value) in enumerate(filters.items()):
                clauses.append(f"#f{index} = :v{index}")
                names[f"#f{index}"] = name
                values[f":v{index}"] = value
            kwargs.update(
                FilterExpression=" AND ".join(clauses),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=_serialize_item(values),
            )

        paginator = self._client.get_paginator("scan")
        items: list[dict[str, Any]] = []
        with _store_call("scan", spec.collection):
            for page in paginator.paginate(**kwargs):
                items.extend(_deserialize_item(item) for item in page.get("Items", []))
        return items

    def ensure_collections(self, specs: Iterable[CollectionSpec]) -> list[Collection]:
        specs = list(specs)
        with _store_call("list_tables", specs[0].collection if specs else Collection.CUSTOMERS):
            existing: set[str] = set()
            for page in self._client.get_paginator("list_tables").paginate():
                existing.update(page.get("TableNames", []))

        created = []
        for spec in specs:
            table_name = self._table_name(spec.collection)
            if table_name in existing:
                logger.info("Table %s already exists", table_name)
                continue

            logger.info("Creating table %s", table_name)
            with _store_call("create_table", spec.collection):
                self._client.create_table(**self._table_definition(spec, table_name))
                self._client.get_waiter("table_exists").wait(
                    TableName=table_name, WaiterConfig={"Delay": 2, "MaxAttempts": 30}
                )
            created.append(spec.collection)
        return created

    @staticmethod
    def _table_definition(spec: CollectionSpec, table_name: str) -> dict[str, Any]:
        attributes = {spec.key}
        indexes = []
        for index in spec.indexes:
            key_schema = [{"AttributeName": index.partition_key, "KeyType": "HASH"}]
            attributes.add(index.partition_key)
            if index.sort_key:
                key_schema.append({"AttributeName": index.sort_key, "KeyType": "RANGE"})
                attributes.add(index.sort_key)
            indexes.append(
                {
                    "IndexName": index.name,
                    "KeySchema": key_schema,
                    "Projection": {"ProjectionType": "ALL"},
                }
            )

        definition: dict[str, Any] = {
            "TableName": table_name,
            "KeySchema": [{"AttributeName": spec.key, "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": name, "AttributeType": "S"} for name in sorted(attributes)
            ],
            "BillingMode": "PAY_PER_REQUEST",
        }
        if indexes:
            definition["GlobalSecondaryIndexes"] = indexes
        return definition
