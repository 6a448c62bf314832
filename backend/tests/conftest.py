"""
PetDemo: Test Configuration (conftest.py)
=========================================

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── database:        Real SQLite store with tables created, per test
    ├── test_client:     HTTPX AsyncClient over an app wired to `database`
    └── broken_client:   HTTPX AsyncClient over an app whose store cannot
                         be opened (every query fails)
"""

import os

# Override settings BEFORE any petdemo import: petdemo.main builds a
# default app (and engine) at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_ALL"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from petdemo.database import Database
from petdemo.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_search(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = cat
            result = await cat_service.search_by_name(mock_db_session, "Tom Cat")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """A file-backed SQLite store with the cats and dogs tables created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'petdemo_test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into a fresh app instance.

    Usage:
        async def test_get_name(test_client):
            response = await test_client.get("/getName")
    """
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(tmp_path):
    """Client whose store points into a directory that does not exist."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'petdemo.db'}")
    app = create_app(database=db)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await db.dispose()
