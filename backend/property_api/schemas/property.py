"""Property Schemas — Pydantic models for the property API boundary.

Invariants:
    - PropertyCreate carries every field except id; used for POST and PUT bodies
    - PropertyRead is PropertyCreate plus the store-assigned id
    - Wire names are snake_case and identical to column names
    - Shape errors (missing field, wrong type, integer outside BIGINT) fail here;
      the price rule lives in core/enforce_price.py

Design Decisions:
    - No PATCH schema: every update replaces every field
    - image_urls defaults to an empty list so listings without photos stay valid
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from property_api.core.domain_types import INT64_MAX, INT64_MIN

BigInt = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class PropertyCreate(BaseModel):
    """Listing payload for creation and full replacement."""
    model_config = ConfigDict(extra="ignore")

    location: str
    price: BigInt
    title: str
    description: str
    bedrooms: BigInt
    bathrooms: BigInt
    square_feet: BigInt
    agent_name: str
    agent_title: str
    image_urls: list[str] = Field(default_factory=list)


class PropertyRead(PropertyCreate):
    """Listing as returned to clients."""
    id: int


class DeleteResult(BaseModel):
    """DELETE response body."""
    deleted: bool
