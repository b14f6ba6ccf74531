"""Shared router helpers."""

from .cache_headers import DIRECTORY_CACHE, NO_CACHE, SESSIONS_CACHE, SESSIONS_CDN_CACHE
from .error_handling import error_response, handle_api_errors

__all__ = [
    "DIRECTORY_CACHE",
    "NO_CACHE",
    "SESSIONS_CACHE",
    "SESSIONS_CDN_CACHE",
    "error_response",
    "handle_api_errors",
]
