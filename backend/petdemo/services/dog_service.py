"""
PetDemo: Dog Service
====================

What:  Store operations for dog records: create, list, and the mutating
       search that ages the matched dog by one year.
How:   Same shape as CatService. The search is one atomic
       UPDATE ... RETURNING, so there is no find-then-save window where a
       concurrent increment could be lost, and the "no match" case is
       checked before any field of the result is read.
"""

import logging
from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from petdemo.exceptions import DatabaseError, NotFoundError, ValidationError
from petdemo.models.dog import Dog
from petdemo.schemas.dog import DogResponse
from petdemo.services.fields import all_present, coerce_int

logger = logging.getLogger(__name__)


class DogService:
    """Business logic for dog records."""

    async def list_dogs(self, db: AsyncSession) -> List[DogResponse]:
        try:
            result = await db.execute(select(Dog).order_by(Dog.id))
            dogs = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing dogs: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="failed to find dogs",
                context={"error_type": type(e).__name__},
            )

        return [DogResponse.model_validate(dog) for dog in dogs]

    async def create_dog(self, db: AsyncSession, name, breed, age) -> DogResponse:
        """
        Store a new dog.

        Raises:
            ValidationError: A field is missing/empty, or age is not an integer
            DatabaseError: Insert or commit failed
        """
        if not all_present(name, breed, age):
            raise ValidationError(message="name, breed and age are all required")

        dog = Dog(name=str(name), breed=str(breed), age=coerce_int(age, "age"))

        try:
            db.add(dog)
            await db.commit()
        except Exception as e:
            logger.error("Database error creating dog: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="failed to create dog",
                context={"error_type": type(e).__name__},
            )

        logger.info("Created dog %s (%s, age=%d)", dog.name, dog.breed, dog.age)
        return DogResponse(name=dog.name, breed=dog.breed, age=dog.age)

    async def search_and_age(self, db: AsyncSession, dogname) -> DogResponse:
        """
        Find the first dog with this exact name and add one to its age.

        The returned age is the persisted value after the increment.

        Raises:
            ValidationError: dogname missing or empty
            NotFoundError: No dog has that name (nothing is updated)
            DatabaseError: Update or commit failed
        """
        if not dogname:
            raise ValidationError(message="Name is required to perform a search", field="dogname")

        candidate = aliased(Dog)
        first_match = (
            select(candidate.id)
            .where(candidate.name == str(dogname))
            .order_by(candidate.id)
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            update(Dog)
            .where(Dog.id == first_match)
            .values(age=Dog.age + 1)
            .returning(Dog.name, Dog.breed, Dog.age)
            .execution_options(synchronize_session=False)
        )

        try:
            result = await db.execute(stmt)
            row = result.one_or_none()
            await db.commit()
        except Exception as e:
            logger.error("Database error searching dog %r: %s", dogname, str(e), exc_info=True)
            raise DatabaseError(
                message="Something went wrong",
                context={"error_type": type(e).__name__},
            )

        if row is None:
            raise NotFoundError(message="No dog found", resource="dog")
        return DogResponse(name=row.name, breed=row.breed, age=row.age)


dog_service = DogService()
