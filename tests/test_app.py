from conftest import make_config
from resort_api.app import create_app
from resort_shared.constants import Collection
from resort_shared.store import COLLECTIONS, InMemoryDocumentStore


def test_root_and_health(client):
    root = client.get("/").get_json()
    assert root["status"] == "success"
    assert root["data"]["status"] == "ok"

    health = client.get("/api/health").get_json()["data"]
    assert health["status"] == "healthy"
    assert health["uptime"] >= 0


def test_unknown_route_returns_json_404(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert resp.get_json()["status"] == "error"


def test_wrong_method_returns_json_405(client):
    resp = client.patch("/api/customers")
    assert resp.status_code == 405
    assert resp.get_json()["status"] == "error"


def test_cors_headers_on_api_routes(client):
    resp = client.get("/api/games", headers={"Origin": "http://pos.local"})
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_init_creates_and_seeds_missing_collections(config, object_store):
    store = InMemoryDocumentStore(create=False)
    client = create_app(config, store, object_store).test_client()

    first = client.post("/api/init")

    assert first.status_code == 200
    result = first.get_json()["data"]
    assert sorted(result["created"]) == sorted(c.value for c in COLLECTIONS)
    assert result["seeded"] == {
        Collection.GAMES.value: 14,
        Collection.MENU_ITEMS.value: 20,
        Collection.POOL_TYPES.value: 2,
        Collection.TAX_SETTINGS.value: 6,
        Collection.ROOMS.value: 13,
    }
    assert len(client.get("/api/tax-settings").get_json()["data"]) == 6

    second = client.post("/api/init").get_json()["data"]
    assert second == {"created": [], "seeded": {}}
    assert len(client.get("/api/games").get_json()["data"]) == 14


def test_auto_provision_at_startup(config, object_store):
    config.auto_provision_tables = True
    store = InMemoryDocumentStore(create=False)

    client = create_app(config, store, object_store).test_client()

    assert len(client.get("/api/menu").get_json()["data"]) == 20


def test_missing_collection_is_a_store_failure(config, object_store):
    client = create_app(config, InMemoryDocumentStore(create=False), object_store).test_client()

    resp = client.get("/api/customers")

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Data temporarily unavailable"


def test_cors_with_explicit_origins(object_store):
    config = make_config(cors_origins=["http://pos.local"])
    client = create_app(config, InMemoryDocumentStore(), object_store).test_client()

    allowed = client.get("/api/games", headers={"Origin": "http://pos.local"})
    other = client.get("/api/games", headers={"Origin": "http://elsewhere.local"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "http://pos.local"
    assert "Access-Control-Allow-Origin" not in other.headers
