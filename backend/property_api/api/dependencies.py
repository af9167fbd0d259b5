"""Route Dependencies — per-request context and storage wiring for FastAPI.

Invariants:
    - Every request gets a fresh RequestContext (X-Request-ID honored when present)
    - Storage backend and update strategy come from Settings, never from the request
    - The in-memory repository is one instance per process so data survives between requests
    - The readiness probe gets None instead of an error while the database pool is not
      initialized

Design Decisions:
    - Wiring via Depends over module globals: tests swap the repository with
      app.dependency_overrides[get_property_repository]
"""

from functools import lru_cache

from fastapi import Depends, Header

from property_api.config import get_settings
from property_api.core.domain_types import StorageBackend, UpdateStrategy
from property_api.core.repository_protocols import (
    PropertyRepository, PropertyServiceLike,
)
from property_api.core.request_context import RequestContext
from property_api.infrastructure import database
from property_api.infrastructure.memory_property_repository import (
    InMemoryPropertyRepository,
)
from property_api.infrastructure.property_repository import SqlPropertyRepository
from property_api.services.property_service import PropertyService


def get_request_context(
    x_request_id: str | None = Header(None),
) -> RequestContext:
    settings = get_settings()
    return RequestContext.with_timeout(
        settings.request_timeout_seconds, request_id=x_request_id,
    )


@lru_cache
def _memory_repository(strategy: UpdateStrategy) -> InMemoryPropertyRepository:
    return InMemoryPropertyRepository(update_strategy=strategy)


def get_property_repository() -> PropertyRepository:
    settings = get_settings()
    if settings.storage_backend == StorageBackend.MEMORY:
        return _memory_repository(settings.update_strategy)
    return SqlPropertyRepository(database.get_db_manager(), settings.update_strategy)


def get_property_service(
    repository: PropertyRepository = Depends(get_property_repository),
) -> PropertyServiceLike:
    return PropertyService(repository)


def get_readiness_repository() -> PropertyRepository | None:
    settings = get_settings()
    if (
        settings.storage_backend == StorageBackend.POSTGRES
        and database.db_manager is None
    ):
        return None
    return get_property_repository()
