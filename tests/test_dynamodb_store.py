from decimal import Decimal

import boto3
import pytest
from botocore.stub import Stubber

from resort_shared.constants import CUSTOMER_TIMESTAMP_INDEX, Collection
from resort_shared.errors import DataUnavailable
from resort_shared.store import UpdateBuilder, get_spec
from resort_shared.store.dynamodb import DynamoDocumentStore, from_dynamo, to_dynamo


@pytest.fixture
def dynamo_client():
    return boto3.client(
        "dynamodb",
        region_name="ap-south-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(dynamo_client):
    with Stubber(dynamo_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def dynamo_store(config, dynamo_client):
    return DynamoDocumentStore(config, client=dynamo_client)


def test_number_conversion():
    assert to_dynamo({"price": 12.5, "qty": 2, "tags": [0.1], "ok": True}) == {
        "price": Decimal("12.5"),
        "qty": 2,
        "tags": [Decimal("0.1")],
        "ok": True,
    }
    assert from_dynamo({"price": Decimal("12.5"), "qty": Decimal("2")}) == {"price": 12.5, "qty": 2}
    assert isinstance(from_dynamo(Decimal("2")), int)


def test_get_deserializes_numbers(dynamo_store, stubber):
    stubber.add_response(
        "get_item",
        {"Item": {"customerId": {"S": "JJ-1"}, "walletAmount": {"N": "500"}, "rate": {"N": "12.5"}}},
        {"TableName": "TestCustomers", "Key": {"customerId": {"S": "JJ-1"}}},
    )

    assert dynamo_store.get(Collection.CUSTOMERS, "JJ-1") == {
        "customerId": "JJ-1",
        "walletAmount": 500,
        "rate": 12.5,
    }


def test_get_missing_returns_none(dynamo_store, stubber):
    stubber.add_response(
        "get_item", {}, {"TableName": "TestCustomers", "Key": {"customerId": {"S": "JJ-2"}}}
    )
    assert dynamo_store.get(Collection.CUSTOMERS, "JJ-2") is None


def test_put_serializes_item(dynamo_store, stubber):
    stubber.add_response(
        "put_item",
        {},
        {
            "TableName": "TestRestaurantOrders",
            "Item": {
                "orderId": {"S": "o1"},
                "totalAmount": {"N": "99.5"},
                "items": {"L": [{"M": {"qty": {"N": "2"}}}]},
                "paid": {"BOOL": True},
            },
        },
    )

    dynamo_store.put(
        Collection.RESTAURANT_ORDERS,
        {"orderId": "o1", "totalAmount": 99.5, "items": [{"qty": 2}], "paid": True},
    )


def test_update_sets_only_given_fields(dynamo_store, stubber):
    builder = UpdateBuilder({"status": "ready"}).touch("updatedAt", "2026-10-19T09:30:00.000Z")
    stubber.add_response(
        "update_item",
        {"Attributes": {"orderId": {"S": "o1"}, "status": {"S": "ready"}, "totalAmount": {"N": "300"}}},
        {
            "TableName": "TestRestaurantOrders",
            "Key": {"orderId": {"S": "o1"}},
            "UpdateExpression": "SET #f0 = :v0, #f1 = :v1",
            "ConditionExpression": "attribute_exists(#pk)",
            "ExpressionAttributeNames": {"#pk": "orderId", "#f0": "status", "#f1": "updatedAt"},
            "ExpressionAttributeValues": {
                ":v0": {"S": "ready"},
                ":v1": {"S": "2026-10-19T09:30:00.000Z"},
            },
            "ReturnValues": "ALL_NEW",
        },
    )

    updated = dynamo_store.update(Collection.RESTAURANT_ORDERS, "o1", builder)

    assert updated == {"orderId": "o1", "status": "ready", "totalAmount": 300}


def test_update_of_missing_key_returns_none(dynamo_store, stubber):
    stubber.add_client_error(
        "update_item", service_error_code="ConditionalCheckFailedException", http_status_code=400
    )
    assert dynamo_store.update(Collection.GAMES, "game_x", UpdateBuilder({"rate": 10})) is None


def test_client_errors_become_data_unavailable(dynamo_store, stubber):
    stubber.add_client_error(
        "get_item", service_error_code="ResourceNotFoundException", http_status_code=400
    )

    with pytest.raises(DataUnavailable) as exc_info:
        dynamo_store.get(Collection.ROOMS, "room_1")

    assert exc_info.value.log_context()["operation"] == "get"
    assert exc_info.value.log_context()["collection"] == "Rooms"
    assert exc_info.value.log_context()["key"] == "room_1"


def test_query_index_newest_first(dynamo_store, stubber):
    stubber.add_response(
        "query",
        {"Items": [{"bookingId": {"S": "BK-2"}}, {"bookingId": {"S": "BK-1"}}]},
        {
            "TableName": "TestBookings",
            "IndexName": CUSTOMER_TIMESTAMP_INDEX,
            "KeyConditionExpression": "#pk = :pk",
            "ExpressionAttributeNames": {"#pk": "customerId"},
            "ExpressionAttributeValues": {":pk": {"S": "JJ-1"}},
            "ScanIndexForward": False,
        },
    )

    items = dynamo_store.query_index(Collection.BOOKINGS, CUSTOMER_TIMESTAMP_INDEX, "JJ-1", descending=True)

    assert [item["bookingId"] for item in items] == ["BK-2", "BK-1"]


def test_query_index_with_sort_range(dynamo_store, stubber):
    stubber.add_response(
        "query",
        {"Items": []},
        {
            "TableName": "TestBookings",
            "IndexName": CUSTOMER_TIMESTAMP_INDEX,
            "KeyConditionExpression": "#pk = :pk AND #sk >= :lo",
            "ExpressionAttributeNames": {"#pk": "customerId", "#sk": "timestamp"},
            "ExpressionAttributeValues": {":pk": {"S": "JJ-1"}, ":lo": {"S": "2026-10-01"}},
            "ScanIndexForward": True,
        },
    )

    assert dynamo_store.query_index(
        Collection.BOOKINGS, CUSTOMER_TIMESTAMP_INDEX, "JJ-1", sort_range=("2026-10-01", None)
    ) == []


def test_scan_follows_pages_with_filters(dynamo_store, stubber):
    base = {
        "TableName": "TestJuiceOrders",
        "FilterExpression": "#f0 = :v0",
        "ExpressionAttributeNames": {"#f0": "customerId"},
        "ExpressionAttributeValues": {":v0": {"S": "JJ-1"}},
    }
    stubber.add_response(
        "scan",
        {"Items": [{"orderId": {"S": "j1"}}], "LastEvaluatedKey": {"orderId": {"S": "j1"}}},
        base,
    )
    stubber.add_response(
        "scan",
        {"Items": [{"orderId": {"S": "j2"}}]},
        {**base, "ExclusiveStartKey": {"orderId": {"S": "j1"}}},
    )

    items = dynamo_store.scan(Collection.JUICE_ORDERS, {"customerId": "JJ-1"})

    assert [item["orderId"] for item in items] == ["j1", "j2"]


def test_ensure_collections_creates_only_missing_tables(dynamo_store, stubber):
    stubber.add_response("list_tables", {"TableNames": ["TestCustomers"]}, {})
    stubber.add_response(
        "create_table",
        {"TableDescription": {"TableName": "TestBookings", "TableStatus": "CREATING"}},
        {
            "TableName": "TestBookings",
            "KeySchema": [{"AttributeName": "bookingId", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "bookingId", "AttributeType": "S"},
                {"AttributeName": "customerId", "AttributeType": "S"},
                {"AttributeName": "timestamp", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": CUSTOMER_TIMESTAMP_INDEX,
                    "KeySchema": [
                        {"AttributeName": "customerId", "KeyType": "HASH"},
                        {"AttributeName": "timestamp", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
        },
    )
    stubber.add_response(
        "describe_table",
        {"Table": {"TableName": "TestBookings", "TableStatus": "ACTIVE"}},
        {"TableName": "TestBookings"},
    )

    created = dynamo_store.ensure_collections(
        [get_spec(Collection.CUSTOMERS), get_spec(Collection.BOOKINGS)]
    )

    assert created == [Collection.BOOKINGS]
