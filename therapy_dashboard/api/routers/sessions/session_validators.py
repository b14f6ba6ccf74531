"""
Session request validation.

Parses the path id and the raw JSON bodies of create/update requests. Every
failing field is reported, not just the first one.

Dependencies: pydantic, therapy_dashboard.models.session, therapy_dashboard.core
System role: Session request validation
"""

import re
from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, ValidationError

from therapy_dashboard.core.exceptions import (
    FieldError,
    InvalidInputError,
    InvalidSessionIdError,
    SessionNotFoundError,
)
from therapy_dashboard.core.scheduling import lead_time_error
from therapy_dashboard.models.session import MAX_ID, CreateSessionRequest, UpdateSessionRequest

_POSITIVE_INT = re.compile(r"[0-9]+")

_FIELD_LABELS = {
    "therapist_id": "Therapist",
    "patient_id": "Patient",
    "date": "Date",
    "status": "Status",
}


def parse_session_id(raw_id: str) -> int:
    """
    Parse a path-supplied session id.

    Args:
        raw_id: Path segment as received

    Returns:
        int: Positive session id

    Raises:
        InvalidSessionIdError: If raw_id is not a positive integer
        SessionNotFoundError: If the id is beyond the id column's range
    """
    if not _POSITIVE_INT.fullmatch(raw_id):
        raise InvalidSessionIdError(raw_id)
    session_id = int(raw_id)
    if session_id <= 0:
        raise InvalidSessionIdError(raw_id)
    if session_id > MAX_ID:
        raise SessionNotFoundError(session_id)
    return session_id


def _message_for(field: str, error: dict) -> str:
    label = _FIELD_LABELS.get(field)
    if label is None:
        return error["msg"]
    if error["type"] == "missing":
        return f"{label} is required"
    if field in ("therapist_id", "patient_id"):
        if error["type"] == "less_than_equal":
            return f"{label} ID is out of range"
        return f"{label} ID must be a positive integer"
    if field == "date":
        if error["type"] == "timezone_aware":
            return "Date must include a timezone offset"
        return "Date must be an ISO 8601 timestamp"
    if field == "status":
        return "Status must be 'Scheduled' or 'Completed'"
    return error["msg"]


def field_errors_from_validation(exc: ValidationError) -> list[FieldError]:
    """
    Translate a pydantic ValidationError into FieldError pairs.

    Errors without a location (malformed JSON, non-object body) are reported
    on the "body" field.
    """
    errors: list[FieldError] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or "body"
        if field == "body" and error["type"] == "json_invalid":
            message = "Request body must be valid JSON"
        elif field == "body":
            message = "Request body must be a JSON object"
        else:
            message = _message_for(field, error)
        errors.append(FieldError(field, message))
    return errors


class _DateOnly(BaseModel):
    """The date field alone, so the lead-time rule can run when other fields fail."""

    model_config = ConfigDict(strict=True, extra="ignore")

    date: AwareDatetime


def _parsed_date(body: bytes) -> datetime | None:
    """The body's date when it is well formed, whatever the other fields hold."""
    try:
        return _DateOnly.model_validate_json(body).date
    except ValidationError:
        return None


def _lead_time_errors(scheduled_for: datetime | None, now: datetime | None) -> list[FieldError]:
    if scheduled_for is None:
        return []
    message = lead_time_error(scheduled_for, now=now)
    return [FieldError("date", message)] if message else []


def validate_create_payload(body: bytes, now: datetime | None = None) -> CreateSessionRequest:
    """
    Validate a create-session request body.

    Args:
        body: Raw JSON request body
        now: Reference time for the lead-time rule (defaults to current UTC)

    Returns:
        CreateSessionRequest: Validated payload

    Raises:
        InvalidInputError: With one FieldError per failing field
    """
    body = body or b""
    try:
        payload = CreateSessionRequest.model_validate_json(body)
    except ValidationError as e:
        errors = field_errors_from_validation(e)
        if not any(err.field == "date" for err in errors):
            errors += _lead_time_errors(_parsed_date(body), now)
        raise InvalidInputError("Validation failed", errors) from e

    errors = _lead_time_errors(payload.date, now)
    if errors:
        raise InvalidInputError("Validation failed", errors)
    return payload


def validate_update_payload(body: bytes) -> UpdateSessionRequest:
    """
    Validate a status-update request body.

    Args:
        body: Raw JSON request body

    Returns:
        UpdateSessionRequest: Validated payload

    Raises:
        InvalidInputError: If status is missing or not an allowed value
    """
    try:
        return UpdateSessionRequest.model_validate_json(body or b"")
    except ValidationError as e:
        raise InvalidInputError("Validation failed", field_errors_from_validation(e)) from e
