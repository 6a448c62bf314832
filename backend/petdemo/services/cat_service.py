"""
PetDemo: Cat Service
====================

What:  Every store operation the cat routes need.
How:   One query or one mutation per call against the session the route was
       given. Store failures are logged here and re-raised as DatabaseError
       carrying the per-operation client message; a None result becomes
       NotFoundError.
Who:   Called by routes/cats.py and routes/pages.py.

"Most recent" is always recomputed: ORDER BY created_date DESC, id DESC
LIMIT 1. Nothing is cached between requests.
"""

import logging
from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from petdemo.exceptions import DatabaseError, NotFoundError, ValidationError
from petdemo.models.cat import Cat
from petdemo.schemas.cat import CatNameResponse, CatRecord, CatResponse
from petdemo.services.fields import all_present, coerce_int

logger = logging.getLogger(__name__)


def _most_recent_cat_id():
    """Scalar subquery selecting the id of the most recently created cat."""
    # Aliased so it is not correlated against the UPDATE's own `cats`
    latest = aliased(Cat)
    return (
        select(latest.id)
        .order_by(latest.created_date.desc(), latest.id.desc())
        .limit(1)
        .scalar_subquery()
    )


class CatService:
    """
    Business logic for cat records.

    Responsibilities:
        - get_most_recent_name(): name of the newest cat
        - list_cats(): every cat, as lean records
        - create_cat(): presence check + insert
        - search_by_name(): first cat with an exact name
        - increment_most_recent_beds(): atomic +1 on the newest cat
    """

    async def get_most_recent_name(self, db: AsyncSession) -> CatNameResponse:
        """
        Return the name of the most recently created cat.

        Raises:
            NotFoundError: No cats stored (→ 404)
            DatabaseError: Query failed (→ 500)
        """
        try:
            result = await db.execute(
                select(Cat.name)
                .order_by(Cat.created_date.desc(), Cat.id.desc())
                .limit(1)
            )
            name = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching most recent cat: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Something went wrong contacting the database",
                context={"error_type": type(e).__name__},
            )

        if name is None:
            raise NotFoundError(message="No cat found", resource="cat")
        return CatNameResponse(name=name)

    async def list_cats(self, db: AsyncSession) -> List[CatRecord]:
        """Return all cats in insertion order."""
        try:
            result = await db.execute(select(Cat).order_by(Cat.id))
            cats = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing cats: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="failed to find cats",
                context={"error_type": type(e).__name__},
            )

        return [
            CatRecord(name=cat.name, beds=cat.beds_owned, created_date=cat.created_date)
            for cat in cats
        ]

    async def create_cat(
        self,
        db: AsyncSession,
        firstname,
        lastname,
        beds,
    ) -> CatResponse:
        """
        Store a new cat named "<firstname> <lastname>".

        created_date is filled in by the model default; callers never set it.

        Raises:
            ValidationError: A field is missing/empty, or beds is not an integer.
                Nothing is written in either case.
            DatabaseError: Insert or commit failed
        """
        if not all_present(firstname, lastname, beds):
            raise ValidationError(message="firstname, lastname and beds are all required")

        cat = Cat(
            name=f"{firstname} {lastname}",
            beds_owned=coerce_int(beds, "beds"),
        )

        try:
            db.add(cat)
            await db.commit()
        except Exception as e:
            logger.error("Database error creating cat: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="failed to create cat",
                context={"error_type": type(e).__name__},
            )

        logger.info("Created cat %s (beds=%d)", cat.name, cat.beds_owned)
        return CatResponse(name=cat.name, beds=cat.beds_owned)

    async def search_by_name(self, db: AsyncSession, name) -> CatResponse:
        """
        Find the first cat whose name matches exactly.

        Raises:
            ValidationError: name missing or empty
            NotFoundError: No cat has that name
            DatabaseError: Query failed
        """
        if not name:
            raise ValidationError(message="Name is required to perform a search", field="name")

        try:
            result = await db.execute(
                select(Cat).where(Cat.name == str(name)).order_by(Cat.id).limit(1)
            )
            cat = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error searching cat %r: %s", name, str(e), exc_info=True)
            raise DatabaseError(
                message="Something went wrong",
                context={"error_type": type(e).__name__},
            )

        if cat is None:
            raise NotFoundError(message="No cats found", resource="cat")
        return CatResponse(name=cat.name, beds=cat.beds_owned)

    async def increment_most_recent_beds(self, db: AsyncSession) -> CatResponse:
        """
        Add one bed to the most recently created cat and return it.

        A single UPDATE ... RETURNING statement: the store picks the row and
        applies the increment atomically, so concurrent calls never lose an
        increment.

        Raises:
            NotFoundError: No cats stored
            DatabaseError: Update or commit failed
        """
        stmt = (
            update(Cat)
            .where(Cat.id == _most_recent_cat_id())
            .values(beds_owned=Cat.beds_owned + 1)
            .returning(Cat.name, Cat.beds_owned)
            .execution_options(synchronize_session=False)
        )

        try:
            result = await db.execute(stmt)
            row = result.one_or_none()
            await db.commit()
        except Exception as e:
            logger.error("Database error updating most recent cat: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Something went wrong",
                context={"error_type": type(e).__name__},
            )

        if row is None:
            raise NotFoundError(message="No cat found", resource="cat")
        return CatResponse(name=row.name, beds=row.beds_owned)


cat_service = CatService()
