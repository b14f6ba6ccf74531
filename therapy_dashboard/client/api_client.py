"""
Async HTTP client for the dashboard REST API.

Wraps httpx.AsyncClient. Responses are parsed into the API's pydantic models
immediately; failures are classified into ErrorKind values.

Dependencies: httpx, pydantic, therapy_dashboard.models
System role: Client transport adapter
"""

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from therapy_dashboard.configs import get_settings
from therapy_dashboard.core.exceptions import FieldError
from therapy_dashboard.core.scheduling import as_utc
from therapy_dashboard.models.common import ErrorResponse
from therapy_dashboard.models.directory import PatientResponse, TherapistResponse
from therapy_dashboard.models.session import (
    SessionStatus,
    SessionWithDetailsResponse,
    UpdateSessionResponse,
)
from therapy_dashboard.client.results import ApiResult, Err, ErrorKind, Ok

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error: Unable to connect to server"

_SESSIONS = TypeAdapter(list[SessionWithDetailsResponse])
_SESSION = TypeAdapter(SessionWithDetailsResponse)
_UPDATE = TypeAdapter(UpdateSessionResponse)
_THERAPISTS = TypeAdapter(list[TherapistResponse])
_PATIENTS = TypeAdapter(list[PatientResponse])

_KIND_BY_CODE = {
    "invalid_id": ErrorKind.INVALID_INPUT,
    "validation_failed": ErrorKind.INVALID_INPUT,
    "invalid_reference": ErrorKind.CONSTRAINT_VIOLATION,
    "not_found": ErrorKind.NOT_FOUND,
    "internal_error": ErrorKind.SERVER,
}


def _kind_for_status(status_code: int) -> ErrorKind:
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    if 400 <= status_code < 500:
        return ErrorKind.INVALID_INPUT
    return ErrorKind.SERVER


def classify_error_response(response: httpx.Response) -> Err:
    """
    Turn a non-2xx response into an Err.

    The body's `code` decides the kind when present; otherwise the HTTP
    status does.
    """
    try:
        body = ErrorResponse.model_validate_json(response.content)
    except ValidationError:
        return Err(
            kind=_kind_for_status(response.status_code),
            message=f"Request failed with status {response.status_code}",
            status_code=response.status_code,
        )

    kind = _KIND_BY_CODE.get(body.code) or _kind_for_status(response.status_code)
    details = tuple(FieldError(d.field, d.message) for d in body.details or [])
    return Err(kind=kind, message=body.error, details=details, status_code=response.status_code)


class DashboardApiClient:
    """
    Client for the sessions, therapists and patients endpoints.

    Usage:
        async with DashboardApiClient() as api:
            result = await api.list_sessions()
            if isinstance(result, Ok):
                ...
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root (defaults to DASHBOARD_API_BASE_URL)
            transport: Optional httpx transport (ASGI or mock transports in tests)
            timeout: Request timeout in seconds
        """
        self._client = httpx.AsyncClient(
            base_url=base_url or get_settings().client.api_base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "DashboardApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        adapter: TypeAdapter,
        json: dict | None = None,
    ) -> ApiResult:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(
                "API request failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            return Err(kind=ErrorKind.NETWORK, message=NETWORK_ERROR_MESSAGE)

        if not response.is_success:
            err = classify_error_response(response)
            logger.info(
                "API request rejected",
                extra={"method": method, "path": path, "status_code": response.status_code, "kind": err.kind.value},
            )
            return err

        try:
            return Ok(adapter.validate_json(response.content))
        except ValidationError as e:
            logger.warning(
                "Malformed API response",
                extra={"method": method, "path": path, "error": str(e)},
            )
            return Err(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message="Unexpected response from server",
                status_code=response.status_code,
            )

    async def list_sessions(self) -> ApiResult[list[SessionWithDetailsResponse]]:
        """GET /api/sessions."""
        return await self._request("GET", "/api/sessions", _SESSIONS)

    async def list_therapists(self) -> ApiResult[list[TherapistResponse]]:
        """GET /api/therapists."""
        return await self._request("GET", "/api/therapists", _THERAPISTS)

    async def list_patients(self) -> ApiResult[list[PatientResponse]]:
        """GET /api/patients."""
        return await self._request("GET", "/api/patients", _PATIENTS)

    async def create_session(
        self,
        therapist_id: int,
        patient_id: int,
        date: datetime,
    ) -> ApiResult[SessionWithDetailsResponse]:
        """
        POST /api/sessions.

        Args:
            therapist_id: Therapist id
            patient_id: Patient id
            date: Appointment time; naive values are taken as UTC
        """
        payload = {
            "therapist_id": therapist_id,
            "patient_id": patient_id,
            "date": as_utc(date).isoformat().replace("+00:00", "Z"),
        }
        return await self._request("POST", "/api/sessions", _SESSION, json=payload)

    async def update_session_status(
        self,
        session_id: int,
        status: SessionStatus,
    ) -> ApiResult[UpdateSessionResponse]:
        """PATCH /api/sessions/{id}."""
        return await self._request(
            "PATCH",
            f"/api/sessions/{session_id}",
            _UPDATE,
            json={"status": SessionStatus(status).value},
        )
