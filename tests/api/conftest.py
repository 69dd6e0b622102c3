"""API test fixtures — app with fake capabilities + async HTTP client.

Invariants:
    - Every test gets a fresh app built from explicit Settings (no .env, no ambient env)
    - Runtime metrics and service metrics replaced via dependency_overrides

Design Decisions:
    - httpx ASGITransport: in-process, no socket, lifespan not run
    - client_for() lets a test spin up a second app (e.g. development mode)
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from tests.api.fakes import build_app, make_settings


@asynccontextmanager
async def _client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return build_app(settings)


@pytest.fixture
async def client(app):
    async with _client(app) as c:
        yield c


@pytest.fixture
def client_for():
    """Factory: `async with client_for(environment="development") as c: ...`."""
    def _factory(**overrides):
        return _client(build_app(make_settings(**overrides)))
    return _factory
