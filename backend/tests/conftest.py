"""
Notes API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

The HTTP tests run against a real database: a throwaway SQLite file driven
through aiosqlite, i.e. the same async SQLAlchemy stack the service uses in
production. Each test gets freshly created tables seeded with INITIAL_NOTES,
and everything is dropped afterwards.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── initial_notes:   the seed data, for size and order assertions
    ├── seeded_db:       create tables, insert INITIAL_NOTES, drop afterwards
    ├── test_client:     HTTPX AsyncClient wired to the app (requires seeded_db)
    └── get_all_notes:   GET /api/notes helper returning (response, contents)
"""

import os
import tempfile

# Must be set before anything imports notes_api.config
_TEST_DIR = tempfile.mkdtemp(prefix="notes_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport, Response

from notes_api.database import Base, async_session_factory, engine
from notes_api.models.note import Note


INITIAL_NOTES = [
    {"content": "HTML is easy test", "important": False},
    {"content": "Browser can execute only JavaScript", "important": True},
]


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_note(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
            result = await note_service.get_note(mock_db_session, note_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def initial_notes() -> List[dict]:
    """The notes seeded_db inserts, in insertion order."""
    return [dict(note) for note in INITIAL_NOTES]


@pytest_asyncio.fixture
async def seeded_db():
    """
    Creates the schema and inserts INITIAL_NOTES; drops everything afterwards.

    The engine is disposed at teardown so no pooled connection outlives the
    event loop of the test that opened it.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    # One insert per commit keeps created_at ordering equal to list order
    for data in INITIAL_NOTES:
        async with async_session_factory() as session:
            session.add(Note(**data))
            await session.commit()

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(seeded_db):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app (no server).
    """
    from notes_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def get_all_notes(test_client):
    """Returns a coroutine fetching GET /api/notes as (response, contents)."""

    async def _get_all_notes() -> Tuple[Response, List[str]]:
        response = await test_client.get("/api/notes")
        assert response.status_code == 200
        return response, [note["content"] for note in response.json()]

    return _get_all_notes
