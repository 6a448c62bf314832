"""
PetDemo: Cat Route Handlers
===========================

What:  JSON endpoints for cat records.
How:   Thin handlers: read the query/body, call CatService, return the
       schema. Errors raised by the service are turned into
       `{"error": ...}` responses by the global handlers in main.py.

Route Inventory:
    GET  /getName        → {name}        most recent cat
    POST /setName        → {name, beds}  201, create
    GET  /searchName     → {name, beds}  first exact match
    POST /updateLast     → {name, beds}  +1 bed on the most recent cat
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from petdemo.database import get_db_session
from petdemo.routes.body import read_body
from petdemo.schemas.cat import CatNameResponse, CatResponse
from petdemo.schemas.common import ErrorResponse
from petdemo.services.cat_service import cat_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Cats"])


@router.get(
    "/getName",
    response_model=CatNameResponse,
    responses={
        404: {"description": "No cat stored", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Name of the most recently created cat",
)
async def get_name(db: AsyncSession = Depends(get_db_session)) -> CatNameResponse:
    return await cat_service.get_most_recent_name(db)


@router.post(
    "/setName",
    status_code=201,
    response_model=CatResponse,
    responses={
        400: {"description": "firstname, lastname or beds missing", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a cat",
)
async def set_name(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> CatResponse:
    """
    Create a cat from `firstname`, `lastname` and `beds`.

    Accepts a JSON body or a form post (page2 submits a form).
    """
    body = await read_body(request)
    return await cat_service.create_cat(
        db,
        firstname=body.get("firstname"),
        lastname=body.get("lastname"),
        beds=body.get("beds"),
    )


@router.get(
    "/searchName",
    response_model=CatResponse,
    responses={
        400: {"description": "name parameter missing", "model": ErrorResponse},
        404: {"description": "No cat with that name", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Find a cat by exact name",
)
async def search_name(
    name: Optional[str] = Query(default=None, description="Exact cat name"),
    db: AsyncSession = Depends(get_db_session),
) -> CatResponse:
    return await cat_service.search_by_name(db, name)


@router.post(
    "/updateLast",
    response_model=CatResponse,
    responses={
        404: {"description": "No cat stored", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Give the most recent cat one more bed",
)
async def update_last(db: AsyncSession = Depends(get_db_session)) -> CatResponse:
    return await cat_service.increment_most_recent_beds(db)
