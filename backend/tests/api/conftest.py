"""API test fixtures — FastAPI app over httpx ASGITransport.

Invariants:
    - get_property_repository and get_readiness_repository overridden per test;
      overrides cleared afterwards
    - client uses the SQL repository on in-memory SQLite; memory_client uses
      InMemoryPropertyRepository seeded with SEED_PROPERTIES

Design Decisions:
    - Lifespan is not run by ASGITransport, so no Postgres pool is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from property_api.api.dependencies import (
    get_property_repository, get_readiness_repository,
)
from property_api.core.domain_types import UpdateStrategy
from property_api.infrastructure.memory_property_repository import (
    InMemoryPropertyRepository,
)
from property_api.infrastructure.property_repository import SqlPropertyRepository
from property_api.main import app

from tests.property_fixtures import SEED_PROPERTIES


async def _client_for(repository):
    app.dependency_overrides[get_property_repository] = lambda: repository
    app.dependency_overrides[get_readiness_repository] = lambda: repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(db_manager):
    """Client backed by SqlPropertyRepository (in_place updates)."""
    async for c in _client_for(SqlPropertyRepository(db_manager)):
        yield c


@pytest.fixture
async def replace_client(db_manager):
    """Client backed by SqlPropertyRepository with delete-then-insert updates."""
    repository = SqlPropertyRepository(db_manager, UpdateStrategy.REPLACE)
    async for c in _client_for(repository):
        yield c


@pytest.fixture
async def memory_client():
    """Client backed by a seeded InMemoryPropertyRepository."""
    async for c in _client_for(InMemoryPropertyRepository(SEED_PROPERTIES)):
        yield c
