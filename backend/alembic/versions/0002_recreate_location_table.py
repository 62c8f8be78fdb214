"""recreate_location_table

Schema version 2. Drops the location table and creates it again; rows stored
under version 1 are discarded and the store reseeds the new table.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: Union[str, Sequence[str], None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_location_table() -> None:
    op.create_table(
        "location",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("address"),
        sqlite_autoincrement=True,
    )


def upgrade() -> None:
    """Drop and recreate the location table."""
    op.drop_table("location", if_exists=True)
    _create_location_table()


def downgrade() -> None:
    """Drop and recreate the location table at the version 1 shape."""
    op.drop_table("location", if_exists=True)
    _create_location_table()
