"""
Structured logging helpers.

Context values are flattened to short strings before they reach a log
record, and patient-identifying fields are masked.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

# Context keys whose values never reach the logs.
PATIENT_FIELDS = frozenset({"patient_name", "dob"})

MAX_VALUE_LENGTH = 200


def safe_log_value(key: str, value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render one context value for a log record.

    Mappings are reduced to their keys (request bodies may carry patient
    data), sequences to their length.

    Args:
        key: Context key
        value: Value to render
        max_length: Longer strings are truncated

    Returns:
        str: Log-safe representation
    """
    if key in PATIENT_FIELDS:
        return "<redacted>"
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return "{" + ", ".join(sorted(str(k) for k in value)) + "}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"<{len(value)} items>"

    text = str(value)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log `message` with every context value passed through safe_log_value."""
    extra = {key: safe_log_value(key, value) for key, value in context.items()}
    logger.log(level, message, extra=extra)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a handled exception with its traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: The exception being handled
        **context: Additional context (session_id, handler, ...)
    """
    extra = {key: safe_log_value(key, value) for key, value in context.items()}
    extra["error_type"] = type(exc).__name__
    logger.error(message, exc_info=exc, extra=extra)
