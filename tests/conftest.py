import pytest
from fastapi.testclient import TestClient

from chatmock.config import Settings, get_settings
from chatmock.main import app

STREAM_INTERVAL = 0.02


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(stream_interval=STREAM_INTERVAL)


@pytest.fixture
def client(fast_settings):
    app.dependency_overrides[get_settings] = lambda: fast_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
