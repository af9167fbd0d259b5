"""Property Service — orchestration between the routes and the repository.

Invariants:
    - Wire ↔ domain conversion is a field-for-field copy: no renaming, no derived fields
    - Price rule checked BEFORE the repository is called; rejected writes never reach storage
    - Repository errors (NotFoundError, StorageError, RequestTimeoutError) propagate unchanged

Design Decisions:
    - Depends on the PropertyRepository Protocol, not a concrete class: routes and tests
      choose SQL or in-memory storage
    - create/update return the stored PropertyRead so the assigned id reaches the client
"""

import logging

from property_api.core.domain_types import PropertyId
from property_api.core.enforce_price import validate_price
from property_api.core.property_record import PropertyRecord
from property_api.core.repository_protocols import PropertyRepository
from property_api.core.request_context import RequestContext
from property_api.schemas.property import PropertyCreate, PropertyRead

logger = logging.getLogger(__name__)


def to_domain(payload: PropertyCreate) -> PropertyRecord:
    return PropertyRecord(**payload.model_dump())


def to_wire(record: PropertyRecord) -> PropertyRead:
    return PropertyRead(id=record.id, **record.field_values())


class PropertyService:
    """Validates listing payloads and forwards them to storage."""

    def __init__(self, repository: PropertyRepository):
        self.repository = repository

    async def list_all(self, ctx: RequestContext) -> list[PropertyRead]:
        records = await self.repository.list_all(ctx)
        return [to_wire(record) for record in records]

    async def get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> PropertyRead:
        record = await self.repository.get_by_id(ctx, property_id)
        return to_wire(record)

    async def create(
        self, ctx: RequestContext, payload: PropertyCreate,
    ) -> PropertyRead:
        validate_price(payload.price, ctx.error_context("create"))
        created = await self.repository.create(ctx, to_domain(payload))
        return to_wire(created)

    async def update(
        self, ctx: RequestContext, property_id: PropertyId, payload: PropertyCreate,
    ) -> PropertyRead:
        validate_price(payload.price, ctx.error_context("update", property_id))
        updated = await self.repository.update(
            ctx, property_id, to_domain(payload),
        )
        if updated.id != property_id:
            logger.warning(
                f"Property {property_id} replaced by {updated.id}",
                extra=ctx.log_extra(property_id=updated.id, operation="update"),
            )
        return to_wire(updated)

    async def delete_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> bool:
        deleted = await self.repository.delete_by_id(ctx, property_id)
        if not deleted:
            logger.info(
                f"Property {property_id} not deleted: no such row",
                extra=ctx.log_extra(property_id=property_id, operation="delete"),
            )
        return deleted
