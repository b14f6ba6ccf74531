"""
Patient ORM model.

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.base
System role: Patient persistence (seed/administrative inserts only)
"""

from datetime import date

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from therapy_dashboard.boundary.db.base import Base, IntegerIdMixin


class PatientModel(Base, IntegerIdMixin):
    """
    Patient ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Display name (required)
        dob: Optional date of birth
    """

    __tablename__ = "patients"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    dob: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
