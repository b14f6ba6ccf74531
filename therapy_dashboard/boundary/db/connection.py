"""
Database connection management.

One async engine and one session factory per process; each API request gets
its own AsyncSession through get_async_db.

Dependencies: sqlalchemy, therapy_dashboard.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from therapy_dashboard.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Build the engine for DATABASE_URL.

    Pool sizing and pre-ping apply to PostgreSQL only; SQLite keeps the
    driver's default pool.
    """
    db_config = get_settings().database
    if db_config.is_sqlite:
        return create_async_engine(db_config.async_database_url, echo=db_config.echo_sql)

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the process engine.

    expire_on_commit is off so rows read before a commit can still be
    serialised after it.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    Usage:
        @router.get("/sessions")
        async def list_sessions(db: AsyncSession = Depends(get_async_db)):
            ...
    """
    async with get_async_session_factory()() as session:
        yield session
