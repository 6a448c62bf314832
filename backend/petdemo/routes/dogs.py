"""
PetDemo: Dog Route Handlers
===========================

Route Inventory:
    POST /setDogName     → {name, breed, age}  201, create
    POST /searchDogName  → {name, breed, age}  find by `dogname`, age +1
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from petdemo.database import get_db_session
from petdemo.routes.body import read_body
from petdemo.schemas.common import ErrorResponse
from petdemo.schemas.dog import DogResponse
from petdemo.services.dog_service import dog_service

router = APIRouter(tags=["Dogs"])


@router.post(
    "/setDogName",
    status_code=201,
    response_model=DogResponse,
    responses={
        400: {"description": "name, breed or age missing", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a dog",
)
async def set_dog_name(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> DogResponse:
    body = await read_body(request)
    return await dog_service.create_dog(
        db,
        name=body.get("name"),
        breed=body.get("breed"),
        age=body.get("age"),
    )


@router.post(
    "/searchDogName",
    response_model=DogResponse,
    responses={
        400: {"description": "dogname missing", "model": ErrorResponse},
        404: {"description": "No dog with that name", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Find a dog by name and age it by one year",
)
async def search_dog_name(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> DogResponse:
    """
    Look up the first dog named `dogname`.

    Side effect: the matched dog's age is incremented and persisted before
    the response is sent; the response carries the new age.
    """
    body = await read_body(request)
    return await dog_service.search_and_age(db, body.get("dogname"))
