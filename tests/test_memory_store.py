import pytest

from resort_shared.constants import CUSTOMER_TIMESTAMP_INDEX, MOBILE_INDEX, Collection
from resort_shared.errors import DataUnavailable
from resort_shared.store import COLLECTIONS, InMemoryDocumentStore, UpdateBuilder


@pytest.fixture
def store():
    return InMemoryDocumentStore()


def test_update_of_unknown_key_does_not_create(store):
    result = store.update(Collection.GAMES, "game_missing", UpdateBuilder({"rate": 10}))

    assert result is None
    assert store.get(Collection.GAMES, "game_missing") is None


def test_update_returns_full_record(store):
    store.put(Collection.GAMES, {"gameId": "game_1", "name": "PS-4", "rate": 200})

    result = store.update(Collection.GAMES, "game_1", UpdateBuilder({"rate": 250}))

    assert result == {"gameId": "game_1", "name": "PS-4", "rate": 250}


def test_records_are_copied_in_and_out(store):
    item = {"gameId": "game_1", "name": "PS-4", "tags": ["console"]}
    store.put(Collection.GAMES, item)
    item["tags"].append("mutated")

    fetched = store.get(Collection.GAMES, "game_1")
    fetched["tags"].append("again")

    assert store.get(Collection.GAMES, "game_1")["tags"] == ["console"]


def test_query_index_is_sparse_and_ordered(store):
    store.put(Collection.BOOKINGS, {"bookingId": "BK-1", "customerId": "c1", "timestamp": "2026-10-01T00:00:00.000Z"})
    store.put(Collection.BOOKINGS, {"bookingId": "BK-2", "customerId": "c1", "timestamp": "2026-10-03T00:00:00.000Z"})
    store.put(Collection.BOOKINGS, {"bookingId": "BK-3", "customerId": "c1"})
    store.put(Collection.BOOKINGS, {"bookingId": "BK-4", "customerId": "c2", "timestamp": "2026-10-02T00:00:00.000Z"})

    newest_first = store.query_index(
        Collection.BOOKINGS, CUSTOMER_TIMESTAMP_INDEX, "c1", descending=True
    )
    assert [b["bookingId"] for b in newest_first] == ["BK-2", "BK-1"]

    ranged = store.query_index(
        Collection.BOOKINGS,
        CUSTOMER_TIMESTAMP_INDEX,
        "c1",
        sort_range=("2026-10-02T00:00:00.000Z", None),
    )
    assert [b["bookingId"] for b in ranged] == ["BK-2"]


def test_query_unknown_index_raises(store):
    with pytest.raises(KeyError):
        store.query_index(Collection.GAMES, MOBILE_INDEX, "9876543210")


def test_scan_filters_on_equality(store):
    store.put(Collection.BAKERY_ORDERS, {"orderId": "o1", "customerId": "c1"})
    store.put(Collection.BAKERY_ORDERS, {"orderId": "o2", "customerId": "c2"})
    store.put(Collection.BAKERY_ORDERS, {"orderId": "o3"})

    assert [o["orderId"] for o in store.scan(Collection.BAKERY_ORDERS, {"customerId": "c1"})] == ["o1"]
    assert len(store.scan(Collection.BAKERY_ORDERS)) == 3


def test_delete_is_idempotent(store):
    store.put(Collection.ROOMS, {"roomId": "room_1", "name": "Family Suite"})
    store.delete(Collection.ROOMS, "room_1")
    store.delete(Collection.ROOMS, "room_1")
    assert store.get(Collection.ROOMS, "room_1") is None


def test_ensure_collections_reports_only_new_ones():
    store = InMemoryDocumentStore(create=False)

    created = store.ensure_collections(COLLECTIONS.values())
    assert set(created) == set(COLLECTIONS)

    assert store.ensure_collections(COLLECTIONS.values()) == []


def test_missing_collection_is_unavailable():
    store = InMemoryDocumentStore(create=False)
    with pytest.raises(DataUnavailable) as excinfo:
        store.scan(Collection.CUSTOMERS)
    assert excinfo.value.collection == "Customers"


def test_fail_on_makes_every_call_fail(store):
    store.fail_on.add(Collection.POOL_ORDERS)
    with pytest.raises(DataUnavailable) as excinfo:
        store.get(Collection.POOL_ORDERS, "pool_order_1")
    assert excinfo.value.log_context()["operation"] == "get"
