"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Every call receives the request's RequestContext explicitly

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Two implementations of PropertyRepository: SQL (production) and in-memory
      (tests, database-less runs), swapped in api/dependencies.py
"""

from typing import Protocol, TYPE_CHECKING

from property_api.core.domain_types import PropertyId
from property_api.core.property_record import PropertyRecord
from property_api.core.request_context import RequestContext

if TYPE_CHECKING:
    from property_api.schemas.property import PropertyCreate, PropertyRead


class PropertyRepository(Protocol):
    """Contract for property persistence — implemented by shell."""
    async def list_all(self, ctx: RequestContext) -> list[PropertyRecord]: ...
    async def get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> PropertyRecord: ...
    async def create(
        self, ctx: RequestContext, record: PropertyRecord,
    ) -> PropertyRecord: ...
    async def delete_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> bool: ...
    async def update(
        self, ctx: RequestContext, property_id: PropertyId, record: PropertyRecord,
    ) -> PropertyRecord: ...
    async def health_check(self) -> bool: ...


class PropertyServiceLike(Protocol):
    """Contract for the orchestration layer consumed by the routes."""
    async def list_all(self, ctx: RequestContext) -> list["PropertyRead"]: ...
    async def get_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> "PropertyRead": ...
    async def create(
        self, ctx: RequestContext, payload: "PropertyCreate",
    ) -> "PropertyRead": ...
    async def update(
        self, ctx: RequestContext, property_id: PropertyId, payload: "PropertyCreate",
    ) -> "PropertyRead": ...
    async def delete_by_id(
        self, ctx: RequestContext, property_id: PropertyId,
    ) -> bool: ...
