"""Service test fixtures — PropertyService over the in-memory repository.

Invariants:
    - Every test gets its own repository seeded with SEED_PROPERTIES
"""

import pytest

from property_api.core.request_context import RequestContext
from property_api.infrastructure.memory_property_repository import (
    InMemoryPropertyRepository,
)
from property_api.services.property_service import PropertyService

from tests.property_fixtures import SEED_PROPERTIES


@pytest.fixture
def ctx():
    return RequestContext.with_timeout(5.0)


@pytest.fixture
def repository():
    return InMemoryPropertyRepository(SEED_PROPERTIES)


@pytest.fixture
def service(repository):
    return PropertyService(repository)
