"""
PetDemo: Cat SQLAlchemy Model
=============================

What:  ORM model for the `cats` table.
Who:   Used by CatService for queries/updates and by Alembic for migrations.

Table Design:
    - Integer surrogate key: doubles as the tie-breaker when two cats share
      a created_date
    - name: "firstname lastname"; duplicates allowed, never empty
    - beds_owned: user supplied, only ever changed by an atomic +1
    - created_date: UTC, set on insert, never updated

    Index on created_date DESC serves every "most recent cat" lookup.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from petdemo.database import Base


class Cat(Base):
    """A cat record. Created by POST /setName, never deleted."""

    __tablename__ = "cats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full name: firstname + ' ' + lastname",
    )

    beds_owned: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of beds owned; incremented by POST /updateLast",
    )

    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this cat was created (UTC)",
    )

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_cats_name_not_empty"),
        Index("idx_cats_created_date", created_date.desc()),
        Index("idx_cats_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Cat(id={self.id}, name='{self.name}', beds_owned={self.beds_owned})>"
