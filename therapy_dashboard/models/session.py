"""
Session domain models and schemas.

Request/response schemas for session operations. Request models are strict:
ids must be JSON integers and timestamps must carry an explicit offset.

Dependencies: pydantic
System role: Session API contracts
"""

from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from therapy_dashboard.boundary.db.models.session_model import SessionStatus
from therapy_dashboard.models.common import UtcDatetime

# Ids are 32-bit INTEGER columns.
MAX_ID = 2_147_483_647


class CreateSessionRequest(BaseModel):
    """Request schema for creating a new session."""

    model_config = ConfigDict(strict=True)

    therapist_id: int = Field(gt=0, le=MAX_ID, description="Existing therapist id")
    patient_id: int = Field(gt=0, le=MAX_ID, description="Existing patient id")
    date: AwareDatetime = Field(description="Appointment time, ISO 8601 with offset")


class UpdateSessionRequest(BaseModel):
    """Request schema for a session status change."""

    model_config = ConfigDict(strict=True)

    status: Literal["Scheduled", "Completed"]


class SessionResponse(BaseModel):
    """A persisted session row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    therapist_id: int
    patient_id: int
    date: UtcDatetime
    status: SessionStatus


class SessionWithDetailsResponse(SessionResponse):
    """Session joined with display names; names are empty when the reference is missing."""

    therapist_name: str = ""
    patient_name: str = ""


class UpdateSessionResponse(BaseModel):
    """Response schema for PATCH /api/sessions/{id}."""

    message: str
    session: SessionResponse
