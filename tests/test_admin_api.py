from resort_shared.constants import Collection
from resort_shared.datetime_utils import now_iso


def test_stats_shape_and_totals(client, store):
    stamp = now_iso()
    store.put(Collection.BOOKINGS, {"bookingId": "BK-1", "totalAmount": 200, "service": "Games", "timestamp": stamp})
    store.put(Collection.MASSAGE_ORDERS, {"orderId": "m1", "totalAmount": 1500, "createdAt": stamp})

    resp = client.get("/api/admin/stats")

    assert resp.status_code == 200
    stats = resp.get_json()["data"]
    assert stats["totalOrders"] == 2
    for window in ("today", "week", "month", "year"):
        assert stats[window]["revenue"] == 1700
        assert stats[window]["orderCount"] == 2
        assert stats[window]["byService"] == {"Games": 200, "Massage": 1500}


def test_stats_without_orders(client):
    stats = client.get("/api/admin/stats").get_json()["data"]
    assert stats["totalOrders"] == 0
    assert stats["today"] == {"revenue": 0, "orderCount": 0, "byService": {}}


def test_orders_filtered_by_date(client, store):
    store.put(Collection.RESTAURANT_ORDERS, {"orderId": "r1", "createdAt": "2026-10-18T10:00:00.000Z"})
    store.put(Collection.POOL_ORDERS, {"orderId": "p1", "createdAt": "2026-10-10T10:00:00.000Z"})

    everything = client.get("/api/admin/orders").get_json()["data"]
    assert [o["orderId"] for o in everything] == ["r1", "p1"]
    assert [o["service"] for o in everything] == ["Restaurant", "Pool"]

    filtered = client.get("/api/admin/orders?startDate=2026-10-15&endDate=2026-10-18")
    assert [o["orderId"] for o in filtered.get_json()["data"]] == ["r1"]


def test_invalid_date_is_rejected(client):
    resp = client.get("/api/admin/orders?startDate=not-a-date")
    assert resp.status_code == 400
    assert resp.get_json()["details"] == {"startDate": "not-a-date"}


def test_store_failure_is_reported_generically(client, store):
    store.put(Collection.BOOKINGS, {"bookingId": "BK-1", "totalAmount": 200})
    store.fail_on.add(Collection.JUICE_ORDERS)

    for path in ("/api/admin/stats", "/api/admin/orders"):
        resp = client.get(path)
        assert resp.status_code == 500
        body = resp.get_json()
        assert body == {"status": "error", "data": None, "error": "Data temporarily unavailable"}
