def _create(client, **body):
    return client.post("/api/customers", json=body)


def test_create_and_fetch_customer(client):
    resp = _create(client, name="Asha", mobile="9876543210", walletAmount=500)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "success"
    customer = body["data"]
    assert customer["walletAmount"] == 500
    assert customer["status"] == "checked-in"

    fetched = client.get(f"/api/customers/{customer['customerId']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["data"] == customer

    by_mobile = client.get("/api/customers/mobile/9876543210")
    assert by_mobile.get_json()["data"]["customerId"] == customer["customerId"]


def test_duplicate_mobile_returns_conflict_with_existing_customer(client):
    existing = _create(client, name="Asha", mobile="9876543210").get_json()["data"]

    resp = _create(client, name="Imposter", mobile="9876543210")

    assert resp.status_code == 409
    body = resp.get_json()
    assert body["status"] == "error"
    assert body["details"]["customer"] == existing
    assert len(client.get("/api/customers").get_json()["data"]) == 1


def test_missing_fields_are_rejected(client):
    resp = _create(client, name="Asha")
    assert resp.status_code == 400
    assert resp.get_json()["details"] == {"missing": ["mobile"]}


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/customers", json=["Asha", "9876543210"])
    assert resp.status_code == 400


def test_search_update_checkout_delete(client):
    customer = _create(client, name="Asha Menon", mobile="9876543210").get_json()["data"]
    customer_id = customer["customerId"]

    assert client.get("/api/customers/search?q=MENON").get_json()["data"][0]["customerId"] == customer_id
    assert client.get("/api/customers/search").get_json()["data"] == []

    updated = client.put(f"/api/customers/{customer_id}", json={"walletAmount": 750, "customerId": "JJ-OTHER"})
    assert updated.status_code == 200
    assert updated.get_json()["data"]["walletAmount"] == 750
    assert updated.get_json()["data"]["customerId"] == customer_id

    checked_out = client.post(f"/api/customers/{customer_id}/checkout").get_json()["data"]
    assert checked_out["status"] == "checked-out"
    assert "checkoutTime" in checked_out

    assert client.delete(f"/api/customers/{customer_id}").status_code == 200
    assert client.delete(f"/api/customers/{customer_id}").status_code == 200
    assert client.get(f"/api/customers/{customer_id}").status_code == 404


def test_unknown_customer_is_not_found(client):
    assert client.get("/api/customers/JJ-NOPE").status_code == 404
    assert client.get("/api/customers/mobile/000").status_code == 404

    resp = client.put("/api/customers/JJ-NOPE", json={"name": "Ghost"})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Customer not found"

    assert client.post("/api/customers/JJ-NOPE/checkout").status_code == 404
