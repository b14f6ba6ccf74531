"""
API error handling utilities.

Provides a decorator for consistent error handling across endpoints. Domain
exceptions are mapped to status codes and rendered as ErrorResponse bodies.

Dependencies: fastapi, therapy_dashboard.core.exceptions, therapy_dashboard.configs
System role: Exception-to-HTTP translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from therapy_dashboard.configs import get_settings
from therapy_dashboard.core.exceptions import (
    FieldError,
    InvalidInputError,
    InvalidReferenceError,
    InvalidSessionIdError,
    SessionNotFoundError,
)
from therapy_dashboard.models.common import ErrorDetail, ErrorResponse
from therapy_dashboard.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

VALIDATION_FAILED = "Validation failed"


def error_response(
    status_code: int,
    error: str,
    code: str,
    details: list[FieldError] | None = None,
    message: str | None = None,
) -> JSONResponse:
    """
    Build a JSON error response.

    Args:
        status_code: HTTP status
        error: Human-readable error summary
        code: Machine-readable category
        details: Field-level failures
        message: Diagnostic detail (only sent when present)

    Returns:
        JSONResponse: Rendered ErrorResponse
    """
    body = ErrorResponse(
        error=error,
        code=code,
        details=[ErrorDetail(**d.to_dict()) for d in details] if details else None,
        message=message,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def handle_api_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping dashboard exceptions to JSON error responses.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Uniform ErrorResponse bodies

    Args:
        failure_message: `error` text for unexpected (500) failures

    Returns:
        Decorator for async route handlers
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except InvalidSessionIdError as e:
                logger.warning("Invalid session id", extra={"raw_id": e.raw_id})
                return error_response(
                    status.HTTP_400_BAD_REQUEST, e.message, "invalid_id", e.errors
                )

            except InvalidInputError as e:
                logger.warning(
                    "Request validation failed",
                    extra={"fields": [err.field for err in e.errors]},
                )
                return error_response(
                    status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, "validation_failed", e.errors
                )

            except InvalidReferenceError as e:
                logger.warning(
                    "Invalid reference",
                    extra={"entity": e.entity, "entity_id": e.entity_id},
                )
                return error_response(
                    status.HTTP_400_BAD_REQUEST,
                    e.message,
                    "invalid_reference",
                    [FieldError(e.field, f"{e.entity.capitalize()} not found")],
                )

            except SessionNotFoundError as e:
                logger.warning("Session not found", extra={"session_id": e.session_id})
                return error_response(
                    status.HTTP_404_NOT_FOUND, "Session not found", "not_found"
                )

            except Exception as e:
                log_exception_with_context(logger, failure_message, e, handler=func.__name__)
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    failure_message,
                    "internal_error",
                    message=str(e) if get_settings().debug else None,
                )

        return wrapper  # type: ignore

    return decorator
