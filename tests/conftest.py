import time
from datetime import datetime, timedelta, timezone

import pytest

from resort_api.app import create_app
from resort_shared.config import AppConfig
from resort_shared.services import build_services
from resort_shared.store import InMemoryDocumentStore, InMemoryObjectStore


def make_config(**overrides) -> AppConfig:
    values = {
        "app_name": "resort-api-test",
        "store_backend": "memory",
        "aws_region": "ap-south-1",
        "aws_access_key_id": "",
        "aws_secret_access_key": "",
        "dynamodb_endpoint_url": "",
        "table_prefix": "Test",
        "s3_bucket": "test-bucket",
        "upload_url_expires_seconds": 3600,
        "store_max_attempts": 1,
        "store_timeout_seconds": 1,
        "resort_timezone": "UTC",
        "log_level": "WARNING",
        "debug_mode": False,
        "auto_provision_tables": False,
        "port": 3000,
    }
    values.update(overrides)
    return AppConfig(**values)


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta):
        self.now = self.now + timedelta(**delta)
        return self.now


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def object_store():
    return InMemoryObjectStore("test-bucket", "ap-south-1")


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def services(store, object_store, config, clock):
    return build_services(store, object_store, config, clock=clock)


@pytest.fixture
def app(config, store, object_store):
    return create_app(config, store, object_store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def host_timezone(monkeypatch):
    """Switch the process-local zone (``TZ``) for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def switch(name: str):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()
