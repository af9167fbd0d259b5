"""Property Routes — the five CRUD endpoints for real-estate listings.

Invariants:
    - Routes never contain business logic (parse, delegate to PropertyServiceLike, map result)
    - POST → 201 and PUT → 200 with empty bodies; Location points at the stored row
    - Non-integer ids and ids outside BIGINT are rejected by FastAPI (400 via
      error_handlers), never looked up as 0
    - NotFoundError/StorageError are mapped by the global handlers (404 / 500)

Design Decisions:
    - Location header instead of a response body: keeps the empty-body contract while
      surfacing ids that change under UpdateStrategy.REPLACE
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from property_api.api.dependencies import get_property_service, get_request_context
from property_api.core.domain_types import INT64_MAX, INT64_MIN, PropertyId
from property_api.core.repository_protocols import PropertyServiceLike
from property_api.core.request_context import RequestContext
from property_api.schemas.property import DeleteResult, PropertyCreate, PropertyRead

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/properties", tags=["properties"])

PathId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


def _location(property_id: int) -> dict[str, str]:
    return {"Location": f"{router.prefix}/{property_id}"}


@router.get("", response_model=list[PropertyRead])
async def list_properties(
    ctx: RequestContext = Depends(get_request_context),
    service: PropertyServiceLike = Depends(get_property_service),
):
    """List every property."""
    return await service.list_all(ctx)


@router.get("/{property_id}", response_model=PropertyRead)
async def get_property(
    property_id: PathId,
    ctx: RequestContext = Depends(get_request_context),
    service: PropertyServiceLike = Depends(get_property_service),
):
    """Get one property by id."""
    return await service.get_by_id(ctx, PropertyId(property_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_property(
    body: PropertyCreate,
    ctx: RequestContext = Depends(get_request_context),
    service: PropertyServiceLike = Depends(get_property_service),
):
    """Create a property."""
    created = await service.create(ctx, body)
    return Response(
        status_code=status.HTTP_201_CREATED, headers=_location(created.id),
    )


@router.put("/{property_id}", status_code=status.HTTP_200_OK)
async def update_property(
    property_id: PathId,
    body: PropertyCreate,
    ctx: RequestContext = Depends(get_request_context),
    service: PropertyServiceLike = Depends(get_property_service),
):
    """Replace every field of a property."""
    updated = await service.update(ctx, PropertyId(property_id), body)
    return Response(
        status_code=status.HTTP_200_OK, headers=_location(updated.id),
    )


@router.delete("/{property_id}", response_model=DeleteResult)
async def delete_property(
    property_id: PathId,
    ctx: RequestContext = Depends(get_request_context),
    service: PropertyServiceLike = Depends(get_property_service),
):
    """Delete a property. Missing ids report deleted=false."""
    deleted = await service.delete_by_id(ctx, PropertyId(property_id))
    return DeleteResult(deleted=deleted)
