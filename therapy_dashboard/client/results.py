"""
Closed result type for dashboard API calls.

Every client call returns Ok(value) or Err(kind, message, details); transport
and parsing exceptions never escape the client.

Dependencies: None
System role: Client-side error taxonomy
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union

from therapy_dashboard.core.exceptions import FieldError

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to the dashboard."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"
    SERVER = "server"
    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    details: tuple[FieldError, ...] = field(default_factory=tuple)
    status_code: int | None = None

    def field_errors(self) -> dict[str, str]:
        """Field-level messages keyed by field name (first message wins)."""
        errors: dict[str, str] = {}
        for detail in self.details:
            errors.setdefault(detail.field, detail.message)
        return errors


ApiResult = Union[Ok[T], Err]
