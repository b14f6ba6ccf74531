"""
HTTP middleware for request tracing and access logging.

Dependencies: fastapi, starlette, therapy_dashboard.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from therapy_dashboard.observability.correlation import (
    bind_correlation_id,
    reset_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Liveness checks are polled constantly; log them at DEBUG.
QUIET_PATHS = frozenset({"/api/health"})


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One access-log line per request, at a level chosen by the response status."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} raised {type(e).__name__}",
                extra={"method": method, "path": path, "process_time_ms": _elapsed_ms(start)},
            )
            raise

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        elif path in QUIET_PATHS:
            level = logging.DEBUG
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{method} {path} {status}",
            extra={
                "method": method,
                "path": path,
                "status_code": status,
                "process_time_ms": _elapsed_ms(start),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for each request and echo it on the response."""

    async def dispatch(self, request: Request, call_next):
        correlation_id, token = bind_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            reset_correlation_id(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
