"""Create cats and dogs tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `cats` and `dogs` tables with their name checks and
       lookup indexes.
Rollback: downgrade() drops both tables (all records lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cats",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Full name: firstname + ' ' + lastname",
        ),
        sa.Column(
            "beds_owned",
            sa.Integer(),
            nullable=False,
            comment="Number of beds owned; incremented by POST /updateLast",
        ),
        sa.Column(
            "created_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this cat was created (UTC)",
        ),
        sa.CheckConstraint("name <> ''", name="ck_cats_name_not_empty"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Every "most recent cat" lookup is ORDER BY created_date DESC LIMIT 1
    op.create_index("idx_cats_created_date", "cats", [sa.text("created_date DESC")])
    op.create_index("idx_cats_name", "cats", ["name"])

    op.create_table(
        "dogs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("breed", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.CheckConstraint("name <> ''", name="ck_dogs_name_not_empty"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_dogs_name", "dogs", ["name"])


def downgrade() -> None:
    op.drop_index("idx_dogs_name", table_name="dogs")
    op.drop_table("dogs")
    op.drop_index("idx_cats_name", table_name="cats")
    op.drop_index("idx_cats_created_date", table_name="cats")
    op.drop_table("cats")
