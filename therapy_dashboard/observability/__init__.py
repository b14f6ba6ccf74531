"""
Observability module.

Logging setup, correlation ID tracking and request logging middleware.
"""

from therapy_dashboard.observability.correlation import bind_correlation_id, get_correlation_id
from therapy_dashboard.observability.logger import configure_logging
from therapy_dashboard.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "bind_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
