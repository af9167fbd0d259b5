"""In-Memory Property Repository — dict-backed PropertyRepository for tests and DB-less runs.

Invariants:
    - Identifiers are assigned from a monotonic counter and never reused
    - list_all returns records in identifier order (same as the SQL repository)
    - Stored records are copied on the way in and out: callers cannot mutate storage
    - Same NotFoundError / UpdateStrategy semantics as SqlPropertyRepository

Design Decisions:
    - No lock: every method completes without awaiting, so calls are atomic on the event loop
"""

import itertools
import logging

from property_api.core.domain_types import PropertyId, UpdateStrategy
from property_api.core.errors import NotFoundError
from property_api.core.property_record import PropertyRecord
from property_api.core.request_context import RequestContext

logger = logging.getLogger(__name__)


class InMemoryPropertyRepository:
    """Process-local property storage."""

    def __init__(
        self,
        initial: list[PropertyRecord] | None = None,
        update_strategy: UpdateStrategy = UpdateStrategy.IN_PLACE,
    ):
        self.update_strategy = update_strategy
        self._records: dict[PropertyId, PropertyRecord] = {}
        for record in initial or []:
            if record.id is None:
                raise ValueError("initial records must carry an id")
            self._records[record.id] = record.with_id(record.id)
        start = max(self._records, default=0) + 1
        self._ids = itertools.count(start)

    async def list_all(self, ctx: RequestContext) -> list[PropertyRecord]:
        ctx.ensure_active("list")
        return [
            record.with_id(property_id)
            for property_id, record in sorted(self._records.items())
        ]

    async def get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> PropertyRecord:
        ctx.ensure_active("get")
        record = self._records.get(property_id)
        if record is None:
            raise NotFoundError(
                "Property", property_id, ctx.error_context("get", property_id),
            )
        return record.with_id(property_id)

    async def create(
        self, ctx: RequestContext, record: PropertyRecord,
    ) -> PropertyRecord:
        ctx.ensure_active("create")
        return self._insert(record)

    async def delete_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> bool:
        ctx.ensure_active("delete")
        return self._records.pop(property_id, None) is not None

    async def update(
        self, ctx: RequestContext, property_id: PropertyId, record: PropertyRecord,
    ) -> PropertyRecord:
        ctx.ensure_active("update")
        if property_id not in self._records:
            raise NotFoundError(
                "Property", property_id, ctx.error_context("update", property_id),
            )
        if self.update_strategy == UpdateStrategy.REPLACE:
            del self._records[property_id]
            return self._insert(record)
        self._records[property_id] = record.with_id(property_id)
        return record.with_id(property_id)

    async def health_check(self) -> bool:
        return True

    def _insert(self, record: PropertyRecord) -> PropertyRecord:
        property_id = PropertyId(next(self._ids))
        self._records[property_id] = record.with_id(property_id)
        logger.debug(f"Stored property {property_id} in memory")
        return record.with_id(property_id)
