"""
Therapist and patient schemas.

Dependencies: pydantic
System role: Directory API contracts
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class TherapistResponse(BaseModel):
    """Therapist as returned by GET /api/therapists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty: str | None = None


class PatientResponse(BaseModel):
    """Patient as returned by GET /api/patients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    dob: date | None = None
