import pytest
from fastapi.testclient import TestClient

from gramgrab.main import app, limiter
from gramgrab.deps import get_density_resolver
from gramgrab.services.ingredient_density import DensityInfo, DensityResolver


class StubDensityResolver(DensityResolver):
    """Resolver answering from a fixed dict; records every lookup."""

    def __init__(self, densities=None):
        self.densities = densities or {}
        self.calls = []

    def resolve(self, ingredient_name):
        self.calls.append(ingredient_name)
        return self.densities.get(ingredient_name.lower().strip(), DensityInfo.declined())


@pytest.fixture
def stub_resolver():
    return StubDensityResolver({
        "flour": DensityInfo(is_dry_convertible=True, grams_per_cup=125, source="stub", kind="dry"),
        "milk": DensityInfo(is_dry_convertible=False, grams_per_cup=245, source="stub", kind="wet"),
        "mystery powder": DensityInfo(is_dry_convertible=True, grams_per_cup=None, source="stub"),
    })


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def stub_client(stub_resolver):
    """Test client whose endpoints use the stub density resolver."""
    app.dependency_overrides[get_density_resolver] = lambda: stub_resolver
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


import fakeredis
import fakeredis.aioredis
from gramgrab.infra import redis_client

@pytest.fixture(autouse=True)
def mock_redis(monkeypatch):
    server = fakeredis.FakeServer()
    # Create fake clients sharing the same server
    async_redis = fakeredis.aioredis.FakeRedis(server=server, decode_responses=True)
    sync_redis = fakeredis.FakeRedis(server=server, decode_responses=True)

    # Force the clients into the infra module
    redis_client._redis_async = async_redis
    redis_client._redis_sync = sync_redis

    yield sync_redis

    # Cleanup
    redis_client._redis_async = None
    redis_client._redis_sync = None
