"""
Directory service.

Read-only listings of therapists and patients for the create-session form.

Dependencies: therapy_dashboard.boundary.db.CRUD
System role: Therapist/patient use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.CRUD.directory_crud import patient_crud, therapist_crud
from therapy_dashboard.core.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class DirectoryService:
    """Therapist and patient listings."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_therapists(self) -> list[dict[str, Any]]:
        """Return all therapists ordered by name."""
        try:
            therapists = await therapist_crud.list_by_name(self.db)
        except SQLAlchemyError as e:
            logger.error("Failed to list therapists", extra={"error": str(e)})
            raise StorageUnavailableError("Failed to fetch therapists", operation="list_therapists") from e
        return [
            {"id": t.id, "name": t.name, "specialty": t.specialty}
            for t in therapists
        ]

    async def list_patients(self) -> list[dict[str, Any]]:
        """Return all patients ordered by name."""
        try:
            patients = await patient_crud.list_by_name(self.db)
        except SQLAlchemyError as e:
            logger.error("Failed to list patients", extra={"error": str(e)})
            raise StorageUnavailableError("Failed to fetch patients", operation="list_patients") from e
        return [
            {"id": p.id, "name": p.name, "dob": p.dob}
            for p in patients
        ]
