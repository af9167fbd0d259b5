"""SQL Property Repository — PostgreSQL-backed implementation of PropertyRepository.

Invariants:
    - Each call acquires one pooled session and releases it on every exit path
    - Every statement is bounded by the RequestContext deadline
    - Absence raises NotFoundError; driver/query failures surface as StorageError
    - Multi-statement updates run in a single transaction (rollback on failure)

Design Decisions:
    - ORM rows converted to frozen PropertyRecord at the boundary: no ORM object
      escapes the repository
    - UpdateStrategy.REPLACE keeps the historical delete-then-insert identifier churn
      for clients that depend on it, but never leaves the row missing on failure
"""

import asyncio
import logging
from typing import Any, Coroutine, TypeVar

from sqlalchemy import delete, select

from property_api.core.domain_types import PropertyId, UpdateStrategy
from property_api.core.errors import NotFoundError, RequestTimeoutError
from property_api.core.property_record import PROPERTY_FIELDS, PropertyRecord
from property_api.core.request_context import RequestContext
from property_api.infrastructure.database import DatabaseSessionManager
from property_api.models.property import Property as PropertyModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_record(row: PropertyModel) -> PropertyRecord:
    """ORM row → domain record."""
    return PropertyRecord(
        id=PropertyId(row.id),
        location=row.location,
        price=row.price,
        title=row.title,
        description=row.description,
        bedrooms=row.bedrooms,
        bathrooms=row.bathrooms,
        square_feet=row.square_feet,
        agent_name=row.agent_name,
        agent_title=row.agent_title,
        image_urls=list(row.image_urls or []),
    )


def to_row(record: PropertyRecord) -> PropertyModel:
    """Domain record → new ORM row. Any record id is ignored."""
    return PropertyModel(**record.field_values())


class SqlPropertyRepository:
    """Property persistence over an async SQLAlchemy session pool."""

    def __init__(
        self,
        db_manager: DatabaseSessionManager,
        update_strategy: UpdateStrategy = UpdateStrategy.IN_PLACE,
    ):
        self.db_manager = db_manager
        self.update_strategy = update_strategy

    async def list_all(self, ctx: RequestContext) -> list[PropertyRecord]:
        return await self._bounded(ctx, "list", self._list_all())

    async def get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> PropertyRecord:
        return await self._bounded(
            ctx, "get", self._get_by_id(ctx, property_id),
        )

    async def create(
        self, ctx: RequestContext, record: PropertyRecord,
    ) -> PropertyRecord:
        created = await self._bounded(ctx, "create", self._create(record))
        logger.info(
            f"Property {created.id} created",
            extra=ctx.log_extra(property_id=created.id, operation="create"),
        )
        return created

    async def delete_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> bool:
        return await self._bounded(
            ctx, "delete", self._delete_by_id(property_id),
        )

    async def update(
        self, ctx: RequestContext, property_id: PropertyId, record: PropertyRecord,
    ) -> PropertyRecord:
        if self.update_strategy == UpdateStrategy.REPLACE:
            work = self._replace(ctx, property_id, record)
        else:
            work = self._update_in_place(ctx, property_id, record)
        updated = await self._bounded(ctx, "update", work)
        logger.info(
            f"Property {property_id} updated ({self.update_strategy.value}) "
            f"-> {updated.id}",
            extra=ctx.log_extra(property_id=updated.id, operation="update"),
        )
        return updated

    async def health_check(self) -> bool:
        return await self.db_manager.health_check()

    # ─── Units of work ──────────────────────────────────────────

    async def _list_all(self) -> list[PropertyRecord]:
        async with self.db_manager.session() as db:
            result = await db.execute(
                select(PropertyModel).order_by(PropertyModel.id),
            )
            rows = result.scalars().all()
        if not rows:
            logger.info("No properties found")
        return [to_record(row) for row in rows]

    async def _get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> PropertyRecord:
        async with self.db_manager.session() as db:
            row = await db.get(PropertyModel, property_id)
            if row is None:
                raise NotFoundError(
                    "Property", property_id,
                    ctx.error_context("get", property_id),
                )
            return to_record(row)

    async def _create(self, record: PropertyRecord) -> PropertyRecord:
        async with self.db_manager.session() as db:
            row = to_row(record)
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return to_record(row)

    async def _delete_by_id(self, property_id: PropertyId) -> bool:
        async with self.db_manager.session() as db:
            result = await db.execute(
                delete(PropertyModel).where(PropertyModel.id == property_id),
            )
            await db.commit()
            return result.rowcount > 0

    async def _update_in_place(
        self, ctx: RequestContext, property_id: PropertyId, record: PropertyRecord,
    ) -> PropertyRecord:
        async with self.db_manager.session() as db:
            row = await db.get(PropertyModel, property_id)
            if row is None:
                raise NotFoundError(
                    "Property", property_id,
                    ctx.error_context("update", property_id),
                )
            values = record.field_values()
            for name in PROPERTY_FIELDS:
                setattr(row, name, values[name])
            await db.commit()
            await db.refresh(row)
            return to_record(row)

    async def _replace(
        self, ctx: RequestContext, property_id: PropertyId, record: PropertyRecord,
    ) -> PropertyRecord:
        # delete and insert share one transaction: a failed insert restores the row
        async with self.db_manager.session() as db:
            result = await db.execute(
                delete(PropertyModel).where(PropertyModel.id == property_id),
            )
            if result.rowcount == 0:
                await db.rollback()
                raise NotFoundError(
                    "Property", property_id,
                    ctx.error_context("update", property_id),
                )
            row = to_row(record)
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return to_record(row)

    # ─── Deadline enforcement ───────────────────────────────────

    async def _bounded(
        self, ctx: RequestContext, operation: str, work: Coroutine[Any, Any, T],
    ) -> T:
        """Run one unit of work within the request's remaining time."""
        if ctx.expired:
            # never awaited; close it to avoid the "never awaited" warning
            work.close()
            raise RequestTimeoutError(operation, ctx.error_context(operation))
        try:
            return await asyncio.wait_for(work, timeout=ctx.remaining())
        except asyncio.TimeoutError:
            logger.error(
                f"Deadline exceeded during {operation}",
                extra=ctx.log_extra(operation=operation),
            )
            raise RequestTimeoutError(operation, ctx.error_context(operation))
