"""Fallback & Health — 405 catch-all and liveness/readiness probes."""

import pytest

import taskboard.infrastructure.memory_store as store_module
from taskboard.infrastructure.memory_store import StoreManager


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/v1/unknown"),
    ("GET", "/"),
    ("POST", "/api/v1/boards/0"),
    ("PUT", "/api/v1/boards"),
    ("PUT", "/api/v1/boards/0/tasks/0"),
])
async def test_unsupported_operations_return_405(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 405
    assert res.json() == {"message": "Operation not supported."}


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_store_returns_503(client, monkeypatch):
    monkeypatch.setattr(store_module, "store_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503


async def test_readiness_reports_store_counts(client, monkeypatch):
    monkeypatch.setattr(store_module, "store_manager", StoreManager(seed=True))
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["store"] == {"boards": 3, "tasks": 4}


# ─── trailing slash & HEAD aliases ───────────────────────────────

async def test_board_list_with_trailing_slash(client, board):
    res = await client.get("/api/v1/boards/")
    assert res.status_code == 200
    assert res.json() == [{"id": "0", "name": "Planned", "description": "Todo"}]


async def test_single_board_with_trailing_slash(client, board):
    res = await client.get(f"/api/v1/boards/{board['id']}/")
    assert res.status_code == 200
    assert res.json()["id"] == board["id"]


async def test_task_create_with_trailing_slash(client, board):
    res = await client.post(
        f"/api/v1/boards/{board['id']}/tasks/", json={"taskName": "t"},
    )
    assert res.status_code == 201


@pytest.mark.parametrize("path", [
    "/api/v1/boards",
    "/api/v1/boards/0",
    "/api/v1/boards/0/tasks",
    "/api/v1/health",
])
async def test_head_answers_like_get(client, board, path):
    res = await client.head(path)
    assert res.status_code == 200


async def test_liveness_without_trailing_slash(client):
    res = await client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_unsupported_method_with_trailing_slash_still_405(client, board):
    res = await client.put("/api/v1/boards/")
    assert res.status_code == 405
