"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - TherapistModel, PatientModel, SessionModel: Domain entities
  - SessionStatus: Session state enum
  - session_crud, therapist_crud, patient_crud: CRUD operation singletons

Dependencies: sqlalchemy, therapy_dashboard.configs
System role: Database adapter providing persistent storage for therapists,
patients and sessions.
"""

from therapy_dashboard.boundary.db.base import Base, IntegerIdMixin
from therapy_dashboard.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from therapy_dashboard.boundary.db.models import (
    PatientModel,
    SessionModel,
    SessionStatus,
    TherapistModel,
)
from therapy_dashboard.boundary.db.CRUD import (
    BaseCRUD,
    PatientCRUD,
    SessionCRUD,
    TherapistCRUD,
    patient_crud,
    session_crud,
    therapist_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIdMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "TherapistModel",
    "PatientModel",
    "SessionModel",
    "SessionStatus",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "TherapistCRUD",
    "PatientCRUD",
    # CRUD singletons
    "session_crud",
    "therapist_crud",
    "patient_crud",
]
