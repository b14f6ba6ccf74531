"""
Logging configuration for the API process.

Records go to stdout with the correlation ID of the request being served.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from therapy_dashboard.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(correlation_id)s] %(name)s: %(message)s"

# Third-party loggers held at WARNING unless the root level is DEBUG.
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "asyncpg")


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the current correlation ID ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Install the stdout handler on the root logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        level: Root log level name
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))

    level = level.upper()
    root.setLevel(level)
    root.addHandler(handler)

    if level != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
