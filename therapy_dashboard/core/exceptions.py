"""
Dashboard error types.

Each exception maps to one outcome of the taxonomy the API and client share:
invalid input (400), not found (404), constraint violation (400, unknown
therapist or patient) and storage failure (500). `details` holds log context
only; it is never sent to clients.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """One field that failed validation, with the message shown next to it."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class TherapyDashboardException(Exception):
    """Root of the dashboard's own exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({context})"


class InvalidInputError(TherapyDashboardException):
    """
    The request body or a path parameter failed validation.

    Args:
        message: Summary message ("Validation failed")
        errors: One FieldError per failing field
        details: Log context
    """

    def __init__(
        self,
        message: str,
        errors: list[FieldError] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.errors = list(errors or [])
        context = dict(details or {})
        if self.errors:
            context["fields"] = [e.field for e in self.errors]
        super().__init__(message, context)


class InvalidSessionIdError(InvalidInputError):
    """The `{id}` path segment is not a positive integer."""

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(
            "Invalid session ID format",
            errors=[FieldError("id", "Session ID must be a positive integer")],
            details={"raw_id": raw_id},
        )


class SessionNotFoundError(TherapyDashboardException):
    def __init__(self, session_id: int) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", {"session_id": session_id})


class InvalidReferenceError(TherapyDashboardException):
    """
    A new session names a therapist or patient that does not exist.

    Clients treat this as a constraint violation and reload their
    therapist/patient options.

    Args:
        entity: "therapist" or "patient"
        entity_id: The id that was not found
    """

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.field = f"{entity}_id"
        super().__init__(f"Invalid {entity} ID", {"field": self.field, "entity_id": entity_id})


class StorageUnavailableError(TherapyDashboardException):
    """
    The database could not be reached or a statement failed.

    Args:
        message: Client-facing failure message ("Failed to fetch sessions")
        operation: Service operation that failed, for the logs
        details: Extra log context
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        context = dict(details or {})
        if operation:
            context["operation"] = operation
        super().__init__(message, context)
