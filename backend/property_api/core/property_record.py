"""Property Record — the domain representation exchanged with storage.

Invariants:
    - id is None until the store assigns one; never set by callers on create
    - image_urls keeps caller order exactly
    - PROPERTY_FIELDS lists every non-identifier column once, in schema order

Design Decisions:
    - Frozen dataclass: records are values, updates produce new records via with_id()
"""

from dataclasses import dataclass, field, replace

from property_api.core.domain_types import PropertyId


PROPERTY_FIELDS: tuple[str, ...] = (
    "location",
    "price",
    "title",
    "description",
    "bedrooms",
    "bathrooms",
    "square_feet",
    "agent_name",
    "agent_title",
    "image_urls",
)


@dataclass(frozen=True)
class PropertyRecord:
    """A real-estate listing as persisted."""
    location: str
    price: int
    title: str
    description: str
    bedrooms: int
    bathrooms: int
    square_feet: int
    agent_name: str
    agent_title: str
    image_urls: list[str] = field(default_factory=list)
    id: PropertyId | None = None

    def with_id(self, property_id: PropertyId) -> "PropertyRecord":
        return replace(self, id=property_id, image_urls=list(self.image_urls))

    def field_values(self) -> dict:
        """Column values without the identifier."""
        values = {name: getattr(self, name) for name in PROPERTY_FIELDS}
        values["image_urls"] = list(self.image_urls)
        return values
