"""In-Memory Property Repository — parity with the SQL repository contract.

Tests cover:
    - Seeded ids are kept and new ids continue after the highest seed
    - Returned records are copies (caller mutation does not leak into storage)
    - Missing ids: get/update raise NotFoundError, delete returns False
    - Seed records without ids are rejected
"""

import pytest

from property_api.core.domain_types import PropertyId, UpdateStrategy
from property_api.core.errors import NotFoundError, RequestTimeoutError
from property_api.core.request_context import RequestContext
from property_api.infrastructure.memory_property_repository import (
    InMemoryPropertyRepository,
)

from tests.property_fixtures import SEED_PROPERTIES, make_record


@pytest.fixture
def ctx():
    return RequestContext()


async def test_new_ids_continue_after_seed(ctx):
    repository = InMemoryPropertyRepository(SEED_PROPERTIES)
    created = await repository.create(ctx, make_record())
    assert created.id == 9


async def test_ids_are_never_reused(ctx):
    repository = InMemoryPropertyRepository()
    first = await repository.create(ctx, make_record())
    await repository.delete_by_id(ctx, first.id)
    second = await repository.create(ctx, make_record())
    assert second.id > first.id


async def test_returned_records_do_not_alias_storage(ctx):
    repository = InMemoryPropertyRepository()
    created = await repository.create(ctx, make_record(image_urls=["a"]))
    created.image_urls.append("mutated")
    fetched = await repository.get_by_id(ctx, created.id)
    assert fetched.image_urls == ["a"]


async def test_missing_ids(ctx):
    repository = InMemoryPropertyRepository()
    with pytest.raises(NotFoundError):
        await repository.get_by_id(ctx, PropertyId(1))
    with pytest.raises(NotFoundError):
        await repository.update(ctx, PropertyId(1), make_record())
    assert await repository.delete_by_id(ctx, PropertyId(1)) is False


async def test_replace_strategy(ctx):
    repository = InMemoryPropertyRepository(
        SEED_PROPERTIES, update_strategy=UpdateStrategy.REPLACE,
    )
    updated = await repository.update(ctx, PropertyId(3), make_record(price=200))
    assert updated.id == 9
    assert [p.id for p in await repository.list_all(ctx)] == [4, 8, 9]


async def test_expired_context_raises_timeout():
    repository = InMemoryPropertyRepository()
    with pytest.raises(RequestTimeoutError):
        await repository.list_all(RequestContext(deadline=0.0))


def test_seed_without_id_rejected():
    with pytest.raises(ValueError):
        InMemoryPropertyRepository([make_record()])
