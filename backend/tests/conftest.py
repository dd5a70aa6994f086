"""
Pinnote Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── db_tables: Fresh in-memory SQLite schema for one test
    ├── db_session: Real AsyncSession on that schema
    ├── test_client: HTTPX AsyncClient wired to the FastAPI app
    ├── notes_api: NotesAPI using test_client
    └── board: NotesBoard using notes_api
"""

import os

# Override settings for testing BEFORE any pinnote imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from pinnote.client import NotesAPI, NotesBoard  # noqa: E402
from pinnote.database import (  # noqa: E402
    async_session_factory,
    dispose_engine,
    drop_models,
    init_models,
)
from pinnote.schemas.note import NoteResponse  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_edit(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
            result = await note_service.edit_note(mock_db_session, note_id, title="x")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_tables():
    """
    Creates the notes table in a fresh in-memory SQLite database.

    The engine uses a StaticPool, so the database lives as long as its one
    connection. Disposing the engine at teardown throws the database away.
    """
    await init_models()
    yield
    await drop_models()
    await dispose_engine()


@pytest_asyncio.fixture
async def db_session(db_tables):
    """A real AsyncSession bound to the test database."""
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app.
    The lifespan is not run; db_tables prepares the schema instead.
    """
    from pinnote.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def notes_api(test_client):
    api = NotesAPI(client=test_client)
    yield api
    await api.aclose()


@pytest.fixture
def board(notes_api):
    return NotesBoard(api=notes_api, toast_duration=3.0)


@pytest.fixture
def sample_note():
    """A NoteResponse as the server would return it."""
    return NoteResponse(
        id=uuid4(),
        title="Groceries",
        content="milk, eggs",
        tags=["home"],
        is_pinned=False,
        created_on=datetime.now(timezone.utc),
    )


@pytest.fixture
def make_note_row():
    """Factory for stand-ins of loaded Note ORM rows."""

    def _make(**overrides):
        row = MagicMock()
        row.id = overrides.get("id", uuid4())
        row.title = overrides.get("title", "Title")
        row.content = overrides.get("content", "Content")
        row.tags = overrides.get("tags", [])
        row.is_pinned = overrides.get("is_pinned", False)
        row.created_on = overrides.get("created_on", datetime.now(timezone.utc))
        return row

    return _make
