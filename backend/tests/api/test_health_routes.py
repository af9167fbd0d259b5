"""Health & Readiness — liveness always 200, readiness follows storage health."""

from unittest.mock import AsyncMock

from property_api.api import dependencies
from property_api.api.dependencies import get_readiness_repository
from property_api.config import Settings
from property_api.core.domain_types import StorageBackend
from property_api.main import app
import property_api.infrastructure.database as db_module


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database_up(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"storage": "healthy"}}


async def test_readiness_with_storage_down_returns_503(client):
    repository = AsyncMock()
    repository.health_check.return_value = False
    app.dependency_overrides[get_readiness_repository] = lambda: repository
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "storage_unavailable"


async def test_readiness_without_database_pool_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    monkeypatch.setattr(
        dependencies, "get_settings",
        lambda: Settings(storage_backend=StorageBackend.POSTGRES),
    )
    del app.dependency_overrides[get_readiness_repository]
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "storage_unavailable"}


def test_readiness_repository_is_none_until_pool_initialized(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    monkeypatch.setattr(
        dependencies, "get_settings",
        lambda: Settings(storage_backend=StorageBackend.POSTGRES),
    )
    assert dependencies.get_readiness_repository() is None


def test_readiness_repository_for_memory_backend(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    monkeypatch.setattr(
        dependencies, "get_settings",
        lambda: Settings(storage_backend=StorageBackend.MEMORY),
    )
    assert dependencies.get_readiness_repository() is not None
