"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: therapy_dashboard.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from therapy_dashboard.boundary.db import get_async_db
from therapy_dashboard.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
async def health_check_db(db: AsyncSession = Depends(get_async_db)):
    """Database health check; 503 when the database cannot be queried."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthResponse(status="unhealthy", message="Database unreachable").model_dump(),
        )
    return HealthResponse(status="healthy", message="Database connection OK")
