"""
Session service orchestrator.

Coordinates listing, creating and status-updating therapy sessions. This is
the only writer of session rows; every write is committed here.

Dependencies: therapy_dashboard.boundary.db.CRUD, therapy_dashboard.core
System role: Session use case orchestration
"""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db.CRUD.directory_crud import patient_crud, therapist_crud
from therapy_dashboard.boundary.db.CRUD.session_crud import session_crud
from therapy_dashboard.boundary.db.models.session_model import SessionModel, SessionStatus
from therapy_dashboard.core.exceptions import (
    InvalidReferenceError,
    SessionNotFoundError,
    StorageUnavailableError,
)
from therapy_dashboard.core.scheduling import to_naive_utc
from therapy_dashboard.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def _session_to_dict(session: SessionModel) -> dict[str, Any]:
    return {
        "id": session.id,
        "therapist_id": session.therapist_id,
        "patient_id": session.patient_id,
        "date": session.date,
        "status": session.status,
    }


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_sessions(self) -> list[dict[str, Any]]:
        """
        List every session with therapist and patient names.

        Returns:
            list[dict]: SessionWithDetails dicts ordered by date ascending

        Raises:
            StorageUnavailableError: If the query fails
        """
        try:
            rows = await session_crud.list_with_details(self.db)
        except SQLAlchemyError as e:
            logger.error("Failed to list sessions", extra={"error": str(e)})
            raise StorageUnavailableError("Failed to fetch sessions", operation="list_sessions") from e
        return [row._asdict() for row in rows]

    async def create_session(
        self,
        therapist_id: int,
        patient_id: int,
        date: datetime,
    ) -> dict[str, Any]:
        """
        Create a Scheduled session after checking both references exist.

        Args:
            therapist_id: Therapist id
            patient_id: Patient id
            date: Appointment time (any offset; stored as naive UTC)

        Returns:
            dict: The new session joined with therapist and patient names

        Raises:
            InvalidReferenceError: If the therapist or patient does not exist
            StorageUnavailableError: If the database operation fails
        """
        try:
            if not await therapist_crud.exists(self.db, therapist_id):
                raise InvalidReferenceError("therapist", therapist_id)
            if not await patient_crud.exists(self.db, patient_id):
                raise InvalidReferenceError("patient", patient_id)

            session = await session_crud.create_scheduled(
                self.db,
                therapist_id=therapist_id,
                patient_id=patient_id,
                date=to_naive_utc(date),
            )
            # Read before commit; a failed read rolls back the insert.
            row = await session_crud.get_with_details(self.db, session.id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to create session",
                extra={"error": str(e), "therapist_id": therapist_id, "patient_id": patient_id},
            )
            raise StorageUnavailableError("Failed to create session", operation="create_session") from e

        log_with_context(
            logger,
            logging.INFO,
            "Session created",
            session_id=session.id,
            therapist_id=therapist_id,
            patient_id=patient_id,
        )
        if row is None:
            # Names unavailable; answer with the bare row.
            return {**_session_to_dict(session), "therapist_name": "", "patient_name": ""}
        return row._asdict()

    async def update_status(
        self,
        session_id: int,
        status: SessionStatus | str,
    ) -> tuple[dict[str, Any], bool]:
        """
        Set a session's status.

        Requesting the status the session already has is a successful no-op.

        Args:
            session_id: Session id
            status: Target status

        Returns:
            tuple[dict, bool]: Session row and whether anything changed

        Raises:
            SessionNotFoundError: If no session has this id
            StorageUnavailableError: If the database operation fails
        """
        status = SessionStatus(status)
        try:
            existing = await session_crud.get_by_id(self.db, session_id)
            if existing is None:
                raise SessionNotFoundError(session_id)

            if existing.status == status.value:
                return _session_to_dict(existing), False

            updated = await session_crud.update_status(self.db, session_id, status)
            if updated is None:
                raise SessionNotFoundError(session_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to update session status",
                extra={"error": str(e), "session_id": session_id, "status": status.value},
            )
            raise StorageUnavailableError("Failed to update session", operation="update_status") from e

        logger.info(
            "Session status updated",
            extra={"session_id": session_id, "status": status.value},
        )
        return _session_to_dict(updated), True
