"""API test fixtures — FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets a fresh, empty StoreManager (counters at zero)
    - get_store dependency overridden so the lifespan singleton is never used

Design Decisions:
    - httpx AsyncClient over ASGITransport: no server process, no lifespan run
"""

import pytest
from httpx import ASGITransport, AsyncClient

from taskboard.infrastructure.memory_store import StoreManager, get_store
from taskboard.main import app


@pytest.fixture
def store():
    return StoreManager()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def board(client):
    """A freshly created board (id "0")."""
    res = await client.post(
        "/api/v1/boards", json={"name": "Planned", "description": "Todo"},
    )
    return res.json()
