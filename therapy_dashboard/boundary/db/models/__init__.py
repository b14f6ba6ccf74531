"""
Database models package.

Exports:
  - TherapistModel: Therapist ORM model
  - PatientModel: Patient ORM model
  - SessionModel, SessionStatus: Session ORM model and status enum

Dependencies: sqlalchemy, therapy_dashboard.boundary.db.base
System role: Database model definitions for domain entities
"""

from therapy_dashboard.boundary.db.models.therapist_model import TherapistModel
from therapy_dashboard.boundary.db.models.patient_model import PatientModel
from therapy_dashboard.boundary.db.models.session_model import SessionModel, SessionStatus

__all__ = [
    "TherapistModel",
    "PatientModel",
    "SessionModel",
    "SessionStatus",
]
