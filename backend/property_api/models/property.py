"""Property ORM — persists real-estate listings in the `properties` table.

Invariants:
    - id is a store-assigned BIGINT identity, never written by callers
    - price/bedrooms/bathrooms/square_feet are non-nullable BIGINTs
    - image_urls is a native TEXT[] on PostgreSQL; element order is preserved

Design Decisions:
    - ARRAY over JSON for image_urls: the column stays queryable with array operators
    - SQLite variants (JSON array, INTEGER key) let route and repository tests run on aiosqlite
"""

from sqlalchemy import BigInteger, Integer, Text, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from property_api.db.base import Base


class Property(Base):
    """A real-estate listing row."""
    __tablename__ = "properties"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True, autoincrement=True,
    )
    location: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    bedrooms: Mapped[int] = mapped_column(BigInteger, nullable=False)
    bathrooms: Mapped[int] = mapped_column(BigInteger, nullable=False)
    square_feet: Mapped[int] = mapped_column(BigInteger, nullable=False)
    agent_name: Mapped[str] = mapped_column(Text, nullable=False)
    agent_title: Mapped[str] = mapped_column(Text, nullable=False)
    image_urls: Mapped[list[str]] = mapped_column(
        ARRAY(Text()).with_variant(JSON(), "sqlite"),
        nullable=False, default=list,
    )
