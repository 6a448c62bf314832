"""
PetDemo: Database Client and Session Management
===============================================

What:  The store client (`Database`), the declarative base, and the
       per-request session dependency.
How:   A `Database` instance owns an async engine and a session factory.
       It is constructed once by the app factory and stored on
       `app.state.database`; routes receive sessions through
       `Depends(get_db_session)`, never through a module-level engine.
Who:   Built by `create_app()`; used by route handlers and tests.

Connection Pooling Strategy (PostgreSQL):
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600
    SQLite URLs skip the pool options; aiosqlite manages its own connection.
"""

from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from petdemo.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object between the models, `Database.create_all`
    and Alembic's autogenerate.
    """
    pass


class Database:
    """
    Explicitly constructed store client.

    Attributes:
        url:             The SQLAlchemy URL this client connects to
        engine:          Async engine (owns the connection pool)
        session_factory: Produces one AsyncSession per request
    """

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_options)
        # expire_on_commit=False: attributes stay readable after commit,
        # so services can build responses from a just-saved row
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a client using the pool configuration from settings."""
        options: dict = {}
        if not settings.is_sqlite:
            options.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return cls(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
            **options,
        )

    async def create_all(self) -> None:
        """Create any missing tables registered on `Base.metadata`."""
        # Models register themselves on import
        import petdemo.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Round-trip a trivial query; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session comes from the `Database` attached to the running app.
    Services commit their own writes; anything left pending when a handler
    raises is rolled back here before the error handler responds.

    Example usage in a route:
        @router.get("/getName")
        async def get_name(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
