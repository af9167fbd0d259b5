"""Properties table — real-estate listings with native TEXT[] image URLs.

Revision ID: 001_properties
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY

revision: str = "001_properties"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.BigInteger, sa.Identity(always=False), primary_key=True),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("price", sa.BigInteger, nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("bedrooms", sa.BigInteger, nullable=False),
        sa.Column("bathrooms", sa.BigInteger, nullable=False),
        sa.Column("square_feet", sa.BigInteger, nullable=False),
        sa.Column("agent_name", sa.Text, nullable=False),
        sa.Column("agent_title", sa.Text, nullable=False),
        sa.Column(
            "image_urls", ARRAY(sa.Text), nullable=False,
            server_default=sa.text("'{}'::text[]"),
        ),
    )


def downgrade() -> None:
    op.drop_table("properties")
