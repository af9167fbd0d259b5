"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that asks for test_engine gets a fresh in-memory SQLite database
    - db_manager fixture reuses that engine so repository code runs unmodified

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; model variants map
      ARRAY → JSON and BIGINT → INTEGER so the same ORM model works here
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from property_api.db.base import Base  # noqa: E402
from property_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
import property_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def db_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (skips pool construction)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager
