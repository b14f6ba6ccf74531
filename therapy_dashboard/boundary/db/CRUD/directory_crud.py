"""
Therapist and patient CRUD operations.

Both tables are read-mostly reference data listed by name.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.models
System role: Therapist/patient persistence operations
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.models.patient_model import PatientModel
from therapy_dashboard.boundary.db.models.therapist_model import TherapistModel
from therapy_dashboard.boundary.db.CRUD.base_crud import BaseCRUD


class TherapistCRUD(BaseCRUD[TherapistModel]):
    """CRUD operations for TherapistModel."""

    def __init__(self) -> None:
        super().__init__(TherapistModel)

    async def list_by_name(self, session: AsyncSession) -> Sequence[TherapistModel]:
        """Return all therapists ordered by name ascending."""
        return await self.get_all(session, TherapistModel.name.asc())


class PatientCRUD(BaseCRUD[PatientModel]):
    """CRUD operations for PatientModel."""

    def __init__(self) -> None:
        super().__init__(PatientModel)

    async def list_by_name(self, session: AsyncSession) -> Sequence[PatientModel]:
        """Return all patients ordered by name ascending."""
        return await self.get_all(session, PatientModel.name.asc())


therapist_crud = TherapistCRUD()
patient_crud = PatientCRUD()
