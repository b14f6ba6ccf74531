"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from therapy_dashboard.boundary.db.CRUD import session_crud, therapist_crud

    # Use singleton instances
    rows = await session_crud.list_with_details(db)
"""

from therapy_dashboard.boundary.db.CRUD.base_crud import BaseCRUD
from therapy_dashboard.boundary.db.CRUD.directory_crud import (
    PatientCRUD,
    TherapistCRUD,
    patient_crud,
    therapist_crud,
)
from therapy_dashboard.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "TherapistCRUD",
    "therapist_crud",
    "PatientCRUD",
    "patient_crud",
]
