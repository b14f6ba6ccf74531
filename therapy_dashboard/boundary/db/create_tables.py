"""
Schema bootstrap for the therapists, patients and sessions tables.

Dependencies: sqlalchemy, therapy_dashboard.configs
System role: Database schema initialization

Usage:
    python -m therapy_dashboard.boundary.db.create_tables
    python -m therapy_dashboard.boundary.db.create_tables --reset   # development only
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from therapy_dashboard.boundary.db.base import Base
from therapy_dashboard.boundary.db.connection import get_async_engine

# Registers the tables on Base.metadata
from therapy_dashboard.boundary.db.models import (  # noqa: F401
    PatientModel,
    SessionModel,
    TherapistModel,
)
from therapy_dashboard.configs import get_settings
from therapy_dashboard.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """Create missing tables; existing tables and rows are left alone."""
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """Drop every dashboard table with its data."""
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main(reset: bool) -> None:
    if reset:
        environment = get_settings().environment
        if environment != "development":
            raise SystemExit(f"--reset refused in {environment} environment")
        await drop_all_tables()
    await create_all_tables()
    await get_async_engine().dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the dashboard tables")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(_main(args.reset))
