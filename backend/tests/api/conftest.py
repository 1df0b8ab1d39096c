"""API test fixtures — FastAPI test client wired to a respx-mocked store.

Invariants:
    - get_store_client overridden with a StoreClient over create_http_client(),
      so redirects and timeouts behave as in production
    - Store traffic goes through httpcore, so respx_mock intercepts it;
      test client traffic goes through ASGITransport and is never mocked
    - Overrides cleared after every test

Design Decisions:
    - Route tests never open the app lifespan: no logging setup, one pool per test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_store_client
from app.config import get_settings
from app.infrastructure.store_client import StoreClient, create_http_client
from app.main import app


@pytest.fixture
async def store_http():
    async with create_http_client(get_settings()) as http_client:
        yield http_client


@pytest.fixture
async def client(store_http):
    """FastAPI test client with the store client dependency overridden."""
    store = StoreClient(store_http, get_settings())
    app.dependency_overrides[get_store_client] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
