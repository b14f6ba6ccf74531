"""Service orchestrators."""

from .directory_service import DirectoryService
from .session_service import SessionService

__all__ = [
    "DirectoryService",
    "SessionService",
]
