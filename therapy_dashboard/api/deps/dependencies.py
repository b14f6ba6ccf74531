"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: therapy_dashboard.application, therapy_dashboard.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db import get_async_db
from therapy_dashboard.application.services import DirectoryService, SessionService


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service bound to this request's session
    """
    return SessionService(db=db)


def get_directory_service(db: AsyncSession = Depends(get_async_db)) -> DirectoryService:
    """
    Get directory service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DirectoryService: Therapist/patient listing service
    """
    return DirectoryService(db=db)
