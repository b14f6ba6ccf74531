"""FastAPI dependency providers."""

from therapy_dashboard.api.deps.dependencies import (
    get_directory_service,
    get_session_service,
)

__all__ = [
    "get_directory_service",
    "get_session_service",
]
