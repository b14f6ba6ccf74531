"""
Therapist ORM model.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.base
System role: Therapist persistence (seed/administrative inserts only)
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from therapy_dashboard.boundary.db.base import Base, IntegerIdMixin


class TherapistModel(Base, IntegerIdMixin):
    """
    Therapist ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Display name (required)
        specialty: Optional specialty tag, e.g. "Speech Therapy"
    """

    __tablename__ = "therapists"

    name: Mapped[str] = mapped_column(Text, nullable=False, doc="Display name")
    specialty: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Specialty tag",
    )
