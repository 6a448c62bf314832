"""
PetDemo: Page Routes
====================

What:  Server-rendered pages: home, cat list, two static pages, dog list.
How:   Each list page runs one query through the services and renders a
       template. A store failure on a list page answers with a JSON 500;
       the home page instead falls back to the name "unknown".

Route Inventory (each also answers HEAD):
    GET /        → index.html   (most recent cat's name)
    GET /page1   → page1.html   (all cats)
    GET /page2   → page2.html   (create-cat form)
    GET /page3   → page3.html   (search / update forms)
    GET /page4   → page4.html   (all dogs + dog forms)
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from petdemo.database import get_db_session
from petdemo.exceptions import DatabaseError, NotFoundError
from petdemo.schemas.common import ErrorResponse
from petdemo.services.cat_service import cat_service
from petdemo.services.dog_service import dog_service
from petdemo.views import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])

DEFAULT_NAME = "unknown"

PAGE_METHODS = ["GET", "HEAD"]


@router.api_route("/", methods=PAGE_METHODS, response_class=HTMLResponse, summary="Home page")
async def index(request: Request, db: AsyncSession = Depends(get_db_session)):
    """
    Render the home page with the most recently created cat's name.

    Always 200. With no cats, or when the store errors (already logged by
    the service), the page shows "unknown".
    """
    name = DEFAULT_NAME
    try:
        name = (await cat_service.get_most_recent_name(db)).name
    except NotFoundError:
        pass
    except DatabaseError:
        logger.warning("Home page rendered with default name after a store error")

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "currentName": name,
            "title": "Home",
            "pageName": "Home Page",
        },
    )


@router.api_route(
    "/page1",
    methods=PAGE_METHODS,
    response_class=HTMLResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all cats",
)
async def page1(request: Request, db: AsyncSession = Depends(get_db_session)):
    cats = await cat_service.list_cats(db)
    return templates.TemplateResponse(request, "page1.html", {"cats": cats})


@router.api_route("/page2", methods=PAGE_METHODS, response_class=HTMLResponse, summary="Create-cat page")
async def page2(request: Request):
    return templates.TemplateResponse(request, "page2.html", {})


@router.api_route("/page3", methods=PAGE_METHODS, response_class=HTMLResponse, summary="Search/update page")
async def page3(request: Request):
    return templates.TemplateResponse(request, "page3.html", {})


@router.api_route(
    "/page4",
    methods=PAGE_METHODS,
    response_class=HTMLResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all dogs",
)
async def page4(request: Request, db: AsyncSession = Depends(get_db_session)):
    dogs = await dog_service.list_dogs(db)
    return templates.TemplateResponse(request, "page4.html", {"dogs": dogs})
