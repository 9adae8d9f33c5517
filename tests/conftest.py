from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from pytz import utc

from visitor_pass.config import Settings
from visitor_pass.main import create_app
from visitor_pass.services.pass_store import PassStore
from visitor_pass.services.passes import PassService


class FakeClock:
    """Управляемые часы для тестов со временем"""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current = self.current + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(utc.localize(datetime(2026, 10, 18, 9, 0, 0)))


@pytest.fixture
def store():
    return PassStore()


@pytest.fixture
def service(store, clock):
    return PassService(store, clock=clock)


@pytest.fixture
def token_service(store, clock):
    return PassService(store, key_policy="token", clock=clock)


@pytest.fixture
def config():
    config = Settings()
    config.PUBLIC_BASE_URL = ""
    config.TIMEZONE = "UTC"
    config.PASS_TTL_HOURS = 24
    config.PASS_KEY_POLICY = "request_id"
    config.CLEANUP_STALENESS_BASIS = "expires_at"
    config.CLEANUP_RETENTION_HOURS = 1
    return config


@pytest.fixture
def client(config, clock):
    app = create_app(config, clock=clock)
    with TestClient(app) as test_client:
        yield test_client
