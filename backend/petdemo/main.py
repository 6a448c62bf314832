"""
PetDemo: FastAPI Application Factory
====================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the store client, registers
       middleware, exception handlers, routes and static assets.
Who:   uvicorn (`uvicorn petdemo.main:app` or `python -m petdemo`) and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌─────────┐  │
    │  │  Req ID  │→│  Access Log │→│ CORS │→│  GZip   │  │
    │  └──────────┘ └─────────────┘ └──────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  pages (/, /page1-4) │ cats │ dogs │ /health        │
    │  /assets (static)    │ anything else → notFound     │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Database→500       │
    └─────────────────────────────────────────────────────┘

The store client lives on `app.state.database`. It is created here rather
than at import time so tests (and alternative deployments) can hand in
their own instance.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from petdemo import __version__
from petdemo.config import Settings, settings as default_settings
from petdemo.database import Database
from petdemo.exceptions import (
    PetDemoError,
    ValidationError,
    NotFoundError,
    DatabaseError,
)
from petdemo.middleware.request_id import RequestIDMiddleware, request_id_var
from petdemo.middleware.logging import RequestLoggingMiddleware
from petdemo.routes import cats, dogs, health, pages
from petdemo.views import STATIC_DIR, templates

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] petdemo.services.cat_service: message
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # These log every request/statement at INFO or DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, optionally create missing tables.
    Shutdown: dispose the store client's connection pool.
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(app_settings.log_level)
    logger.info("PetDemo %s starting up...", __version__)

    if app_settings.db_create_all:
        try:
            await database.create_all()
            logger.info("Database tables ready")
        except Exception as e:
            # Keep serving: every handler already answers store errors itself
            logger.error("Could not create database tables: %s", str(e))

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)

    yield

    logger.info("PetDemo shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 {"error": message}
        NotFoundError           → 404 {"error": message}
        DatabaseError           → 500 {"error": message}, context logged
        PetDemoError (base)     → its status_code
        HTTPException 404       → rendered notFound page (also 405)
        HTTPException (other)   → {"error": detail}
        Exception (fallback)    → 500 {"error": "Something went wrong"}

    Response bodies NEVER carry internal details (stack traces, SQL,
    driver messages). Details are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(PetDemoError)
    async def handle_app_error(request: Request, exc: PetDemoError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A method the path does not serve is an unmatched page too
        if exc.status_code in (404, 405):
            return not_found_page(request)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error(500, "Something went wrong")


def not_found_page(request: Request):
    """Render the 404 page naming the path (and query string) requested."""
    page = request.url.path
    if request.url.query:
        page = f"{page}?{request.url.query}"
    return templates.TemplateResponse(
        request,
        "notFound.html",
        {"page": page},
        status_code=404,
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded singleton)
        database:     Store client to inject (defaults to one built from settings)
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="PetDemo",
        description="Cat and dog records with server-rendered pages and a small JSON API.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database or Database.from_settings(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → CORS → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(pages.router)
    app.include_router(cats.router)
    app.include_router(dogs.router)
    app.include_router(health.router)

    app.mount("/assets", StaticFiles(directory=STATIC_DIR), name="assets")

    return app


# uvicorn expects `petdemo.main:app` to be importable
app = create_app()
