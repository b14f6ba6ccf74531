"""
Session ORM model.

Represents a scheduled therapy appointment between one therapist and one
patient. Sessions are created as Scheduled and only ever change status.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.base
System role: Appointment persistence
"""

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from therapy_dashboard.boundary.db.base import Base, IntegerIdMixin


class SessionStatus(str, enum.Enum):
    """
    Closed set of session states.

    SCHEDULED: Appointment booked, not yet held (initial state)
    COMPLETED: Appointment held
    """

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"


class SessionModel(Base, IntegerIdMixin):
    """
    Session ORM model for therapy appointments.

    The date column holds naive UTC timestamps. therapist_id and patient_id
    are declared as foreign keys, and the API additionally checks both ids
    exist before inserting.

    Attributes:
        id: Integer primary key (auto-generated)
        therapist_id: Referenced therapist
        patient_id: Referenced patient
        date: Appointment time (naive UTC)
        status: "Scheduled" or "Completed" (CHECK constrained)
    """

    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint(
            "status in ('Scheduled','Completed')",
            name="ck_sessions_status",
        ),
        Index("idx_sessions_date", "date"),
    )

    therapist_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("therapists.id"),
        nullable=False,
    )
    patient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("patients.id"),
        nullable=False,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SessionStatus.SCHEDULED.value,
        server_default=SessionStatus.SCHEDULED.value,
    )
