"""API request/response schemas."""

from therapy_dashboard.models.common import ErrorDetail, ErrorResponse, HealthResponse
from therapy_dashboard.models.directory import PatientResponse, TherapistResponse
from therapy_dashboard.models.session import (
    CreateSessionRequest,
    SessionResponse,
    SessionStatus,
    SessionWithDetailsResponse,
    UpdateSessionRequest,
    UpdateSessionResponse,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "TherapistResponse",
    "PatientResponse",
    "SessionStatus",
    "CreateSessionRequest",
    "UpdateSessionRequest",
    "SessionResponse",
    "SessionWithDetailsResponse",
    "UpdateSessionResponse",
]
