"""
Session response mapping utilities.

Transforms service dictionaries into Pydantic response models.

Dependencies: therapy_dashboard.models.session
System role: Session response transformation
"""

from typing import Any

from therapy_dashboard.models.session import (
    SessionResponse,
    SessionWithDetailsResponse,
    UpdateSessionResponse,
)

UPDATED_MESSAGE = "Session updated successfully"
UNCHANGED_MESSAGE = "Session already has the requested status"


def map_session_with_details(session_data: dict[str, Any]) -> SessionWithDetailsResponse:
    """
    Transform a joined session dict into SessionWithDetailsResponse.

    Args:
        session_data: Keys id, therapist_id, patient_id, date, status,
            therapist_name, patient_name

    Returns:
        SessionWithDetailsResponse: Pydantic model for API response
    """
    return SessionWithDetailsResponse(**session_data)


def map_sessions_with_details(sessions_data: list[dict[str, Any]]) -> list[SessionWithDetailsResponse]:
    """Transform a list of joined session dicts, preserving order."""
    return [map_session_with_details(session) for session in sessions_data]


def map_status_update(session_data: dict[str, Any], changed: bool) -> UpdateSessionResponse:
    """
    Wrap an updated session row with the outcome message.

    Args:
        session_data: Session row dict
        changed: False when the session already had the requested status

    Returns:
        UpdateSessionResponse: Message plus session
    """
    return UpdateSessionResponse(
        message=UPDATED_MESSAGE if changed else UNCHANGED_MESSAGE,
        session=SessionResponse(**session_data),
    )
