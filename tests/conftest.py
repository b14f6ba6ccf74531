"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database, seeded reference data, the FastAPI app bound to
the test database, and an httpx client driving it in-process.
Dependencies: pytest, pytest-asyncio, sqlalchemy, httpx
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from therapy_dashboard.boundary.db.base import Base
from therapy_dashboard.boundary.db.connection import get_async_db
from therapy_dashboard.boundary.db.seed_data import seed


def _future_iso(hours: float = 48) -> str:
    when = datetime.now(timezone.utc) + timedelta(hours=hours)
    return when.replace(microsecond=0).isoformat().replace("+00:00", "Z")


@pytest.fixture
def future_iso():
    """Factory for ISO 8601 UTC timestamps `hours` from now, with a Z suffix."""
    return _future_iso


@pytest.fixture
async def test_engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Database session for direct CRUD/service tests.

    Yields:
        AsyncSession: Session on the in-memory database
    """
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seeded_db(test_async_db):
    """
    Session on a database holding the reference data.

    Therapists 1-3, patients 1-4 and sessions 1-5 (in date order; session 3
    is Completed, the rest Scheduled).
    """
    await seed(test_async_db)
    return test_async_db


@pytest.fixture
def api_app(test_session_factory, seeded_db):
    """FastAPI app whose requests each open their own session on the test database."""
    from therapy_dashboard.api.main import create_app

    app = create_app()

    async def override_get_async_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(api_app):
    """httpx client calling the app in-process."""
    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
