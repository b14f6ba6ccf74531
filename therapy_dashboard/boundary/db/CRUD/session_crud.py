"""
Session CRUD operations.

Provides Create, Read and status Update operations for SessionModel, plus
the SessionWithDetails join projection used by the dashboard list.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.models
System role: Session persistence operations
"""

from datetime import datetime
from typing import Sequence

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.models.patient_model import PatientModel
from therapy_dashboard.boundary.db.models.session_model import SessionModel, SessionStatus
from therapy_dashboard.boundary.db.models.therapist_model import TherapistModel
from therapy_dashboard.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with the detail join (therapist and patient names),
    creation with a forced Scheduled status, and status updates.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    def _details_query(self) -> Select:
        """
        Build the LEFT OUTER JOIN projection.

        Missing therapist/patient rows yield an empty-string name instead of
        dropping the session row.
        """
        return (
            select(
                SessionModel.id,
                SessionModel.therapist_id,
                SessionModel.patient_id,
                SessionModel.date,
                SessionModel.status,
                func.coalesce(TherapistModel.name, "").label("therapist_name"),
                func.coalesce(PatientModel.name, "").label("patient_name"),
            )
            .select_from(SessionModel)
            .outerjoin(TherapistModel, SessionModel.therapist_id == TherapistModel.id)
            .outerjoin(PatientModel, SessionModel.patient_id == PatientModel.id)
        )

    async def list_with_details(self, session: AsyncSession) -> Sequence[Row]:
        """
        Retrieve every session joined with therapist and patient names.

        Args:
            session: Async database session

        Returns:
            Rows ordered by appointment date ascending (id breaks ties)
        """
        stmt = self._details_query().order_by(SessionModel.date.asc(), SessionModel.id.asc())
        result = await session.execute(stmt)
        return result.all()

    async def get_with_details(self, session: AsyncSession, id: int) -> Row | None:
        """
        Retrieve one session joined with therapist and patient names.

        Args:
            session: Async database session
            id: Session id

        Returns:
            Joined row, None if not found
        """
        stmt = self._details_query().where(SessionModel.id == id)
        result = await session.execute(stmt)
        return result.one_or_none()

    async def create_scheduled(
        self,
        session: AsyncSession,
        therapist_id: int,
        patient_id: int,
        date: datetime,
    ) -> SessionModel:
        """
        Insert a new session. Status is always Scheduled.

        Args:
            session: Async database session
            therapist_id: Existing therapist id
            patient_id: Existing patient id
            date: Appointment time (naive UTC)

        Returns:
            Persisted SessionModel with server-assigned id
        """
        return await self.create(
            session,
            therapist_id=therapist_id,
            patient_id=patient_id,
            date=date,
            status=SessionStatus.SCHEDULED.value,
        )

    async def update_status(
        self,
        session: AsyncSession,
        id: int,
        status: SessionStatus,
    ) -> SessionModel | None:
        """
        Set a session's status.

        Args:
            session: Async database session
            id: Session id
            status: New status

        Returns:
            Updated SessionModel if found, None otherwise
        """
        return await self.update_by_id(session, id, status=SessionStatus(status).value)


session_crud = SessionCRUD()
