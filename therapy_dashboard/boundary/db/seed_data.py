"""
Reference data seeding script.

Inserts the sample therapists, patients and sessions used for local
development. Skips seeding when therapists already exist.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db
System role: Development data bootstrap

Usage:
    python -m therapy_dashboard.boundary.db.seed_data
"""

import asyncio
import logging
from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.connection import get_async_engine, get_async_session_factory
from therapy_dashboard.boundary.db.create_tables import create_all_tables
from therapy_dashboard.boundary.db.CRUD import patient_crud, session_crud, therapist_crud
from therapy_dashboard.boundary.db.models.session_model import SessionStatus
from therapy_dashboard.observability.logger import configure_logging

logger = logging.getLogger(__name__)

THERAPISTS = [
    ("Anna SLP", "Speech Therapy"),
    ("Becca OT", "Occupational Therapy"),
    ("Carlos PT", "Physical Therapy"),
]

PATIENTS = [
    ("Ariel Underwood", date(2018, 6, 15)),
    ("Nemo Fisher", date(2017, 3, 2)),
    ("Moana Lee", date(2016, 12, 25)),
    ("Elsa Frost", date(2019, 9, 10)),
]

# (therapist index, patient index, date, status); indexes into the lists above
SESSIONS = [
    (0, 0, datetime(2025, 11, 8, 9, 0), SessionStatus.SCHEDULED),
    (0, 1, datetime(2025, 11, 8, 10, 30), SessionStatus.SCHEDULED),
    (0, 2, datetime(2025, 11, 8, 13, 0), SessionStatus.COMPLETED),
    (1, 3, datetime(2025, 11, 9, 11, 0), SessionStatus.SCHEDULED),
    (2, 1, datetime(2025, 11, 9, 15, 30), SessionStatus.SCHEDULED),
]


async def seed(db: AsyncSession) -> bool:
    """
    Insert the reference rows.

    Args:
        db: Async database session

    Returns:
        bool: False when the database already had therapists
    """
    existing = await therapist_crud.get_all(db, limit=1)
    if existing:
        logger.info("Therapists already present, skipping seed")
        return False

    therapists = [
        await therapist_crud.create(db, name=name, specialty=specialty)
        for name, specialty in THERAPISTS
    ]
    patients = [
        await patient_crud.create(db, name=name, dob=dob)
        for name, dob in PATIENTS
    ]
    for therapist_idx, patient_idx, when, status in SESSIONS:
        await session_crud.create(
            db,
            therapist_id=therapists[therapist_idx].id,
            patient_id=patients[patient_idx].id,
            date=when,
            status=status.value,
        )
    await db.commit()

    logger.info(
        "Seed data inserted",
        extra={"therapists": len(THERAPISTS), "patients": len(PATIENTS), "sessions": len(SESSIONS)},
    )
    return True


async def _main() -> None:
    await create_all_tables()
    async with get_async_session_factory()() as db:
        await seed(db)
    await get_async_engine().dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(_main())
