"""API routers."""

from .directory import patients_router, therapists_router
from .health import router as health_router
from .sessions import router as sessions_router

__all__ = [
    "health_router",
    "patients_router",
    "sessions_router",
    "therapists_router",
]
