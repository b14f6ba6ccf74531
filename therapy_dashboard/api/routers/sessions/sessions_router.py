"""
Session API endpoints.

Routes:
- GET /sessions - List sessions with therapist and patient names
- POST /sessions - Create a Scheduled session
- PATCH /sessions/{id} - Change a session's status

Bodies are read raw and validated here so that malformed input yields a
400 with field-level details, and the path id is checked before the body.

Dependencies: therapy_dashboard.application.services, therapy_dashboard.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from therapy_dashboard.application.services.session_service import SessionService
from therapy_dashboard.api.deps.dependencies import get_session_service
from therapy_dashboard.api.routers.router_utils import (
    NO_CACHE,
    SESSIONS_CACHE,
    SESSIONS_CDN_CACHE,
    handle_api_errors,
)
from therapy_dashboard.models.common import ErrorResponse
from therapy_dashboard.models.session import (
    CreateSessionRequest,
    SessionWithDetailsResponse,
    UpdateSessionRequest,
    UpdateSessionResponse,
)

from .session_responses import (
    map_session_with_details,
    map_sessions_with_details,
    map_status_update,
)
from .session_validators import (
    parse_session_id,
    validate_create_payload,
    validate_update_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _json_body(model: type) -> dict:
    """OpenAPI request body for routes that validate the raw body themselves."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.get("", response_model=list[SessionWithDetailsResponse], responses={500: {"model": ErrorResponse}})
@handle_api_errors("Failed to fetch sessions")
async def list_sessions(
    response: Response,
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionWithDetailsResponse]:
    """
    List all sessions joined with therapist and patient names.

    Returns:
        list[SessionWithDetailsResponse]: Sessions ordered by date ascending

    Raises:
        500: Retrieval failed
    """
    sessions = await session_service.list_sessions()

    logger.info("Sessions retrieved", extra={"count": len(sessions)})

    response.headers["Cache-Control"] = SESSIONS_CACHE
    response.headers["CDN-Cache-Control"] = SESSIONS_CDN_CACHE
    return map_sessions_with_details(sessions)


@router.post(
    "",
    response_model=SessionWithDetailsResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    openapi_extra=_json_body(CreateSessionRequest),
)
@handle_api_errors("Failed to create session")
async def create_session(
    request: Request,
    response: Response,
    session_service: SessionService = Depends(get_session_service),
) -> SessionWithDetailsResponse:
    """
    Create a new session. Status is always Scheduled.

    Raises:
        400: Validation failed, or therapist/patient does not exist
        500: Creation failed
    """
    payload = validate_create_payload(await request.body())

    logger.info(
        "Creating session",
        extra={"therapist_id": payload.therapist_id, "patient_id": payload.patient_id},
    )

    session = await session_service.create_session(
        therapist_id=payload.therapist_id,
        patient_id=payload.patient_id,
        date=payload.date,
    )

    response.headers["Cache-Control"] = NO_CACHE
    return map_session_with_details(session)


@router.patch(
    "/{session_id}",
    response_model=UpdateSessionResponse,
    responses={**_ERROR_RESPONSES, 404: {"model": ErrorResponse}},
    openapi_extra=_json_body(UpdateSessionRequest),
)
@handle_api_errors("Failed to update session")
async def update_session(
    session_id: str,
    request: Request,
    response: Response,
    session_service: SessionService = Depends(get_session_service),
) -> UpdateSessionResponse:
    """
    Change a session's status.

    Requesting the current status succeeds without writing.

    Raises:
        400: Invalid id format or invalid status
        404: Session not found
        500: Update failed
    """
    parsed_id = parse_session_id(session_id)
    payload = validate_update_payload(await request.body())

    session, changed = await session_service.update_status(parsed_id, payload.status)

    response.headers["Cache-Control"] = NO_CACHE
    return map_status_update(session, changed)
