"""Property fixtures — sample listings shared by repository, service, and route tests."""

from property_api.core.domain_types import PropertyId
from property_api.core.property_record import PropertyRecord


def make_record(**overrides) -> PropertyRecord:
    fields = {
        "location": "Istanbul, Turkey",
        "price": 2_500_000,
        "title": "Luxury Bosphorus Villa",
        "description": "Elegant villa with stunning views of the Bosphorus Strait in Istanbul.",
        "bedrooms": 5,
        "bathrooms": 4,
        "square_feet": 4000,
        "agent_name": "Mehmet Yilmaz",
        "agent_title": "Luxury Property Consultant",
        "image_urls": [
            "https://example.com/istanbul_villa1.jpg",
            "https://example.com/istanbul_villa2.jpg",
        ],
    }
    fields.update(overrides)
    return PropertyRecord(**fields)


def make_payload(**overrides) -> dict:
    """JSON body for POST/PUT."""
    return make_record(**overrides).field_values()


SEED_PROPERTIES: list[PropertyRecord] = [
    make_record(
        id=PropertyId(3),
        location="Antalya, Turkey",
        price=1_800_000,
        title="Seaside Penthouse in Antalya",
        description="Stunning penthouse apartment with panoramic sea views in the beautiful coastal city of Antalya.",
        bedrooms=3,
        bathrooms=2,
        square_feet=2200,
        agent_name="Ayse Kaya",
        agent_title="Luxury Property Specialist",
        image_urls=[
            "https://example.com/antalya_penthouse1.jpg",
            "https://example.com/antalya_penthouse2.jpg",
            "https://example.com/antalya_penthouse3.jpg",
        ],
    ),
    make_record(
        id=PropertyId(4),
        location="Bodrum, Turkey",
        price=3_500_000,
        title="Luxury Beach Villa in Bodrum",
        description="Stunning beachfront villa with private pool and direct access to the Aegean Sea.",
        bedrooms=6,
        bathrooms=5,
        square_feet=5000,
        agent_name="Mehmet Yilmaz",
        agent_title="Luxury Property Consultant",
        image_urls=[
            "https://example.com/bodrum_villa1.jpg",
            "https://example.com/bodrum_villa2.jpg",
        ],
    ),
    make_record(
        id=PropertyId(8),
        location="Bursa, Turkey",
        price=600_000,
        title="Traditional Ottoman House",
        description="Beautifully restored Ottoman-era house in the historic district of Bursa.",
        bedrooms=10,
        bathrooms=10,
        square_feet=1800,
        agent_name="Leyla Ozturk",
        agent_title="Historical Property Consultant",
        image_urls=[
            "https://example.com/bursa_ottoman1.jpg",
            "https://example.com/bursa_ottoman2.jpg",
        ],
    ),
]
