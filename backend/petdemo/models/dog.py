"""
PetDemo: Dog SQLAlchemy Model
=============================

What:  ORM model for the `dogs` table.
Note:  `age` is mutated by a search (POST /searchDogName adds one year).
"""

from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petdemo.database import Base


class Dog(Base):
    """A dog record. Created by POST /setDogName, aged by each search hit."""

    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_dogs_name_not_empty"),
        Index("idx_dogs_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Dog(id={self.id}, name='{self.name}', breed='{self.breed}', age={self.age})>"
