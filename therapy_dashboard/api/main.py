"""
FastAPI application with assembled routers.

Builds the app (middleware, routers under /api) and runs it with uvicorn.

Dependencies: fastapi, therapy_dashboard.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from therapy_dashboard import __version__
from therapy_dashboard.boundary.db import get_async_engine
from therapy_dashboard.configs import get_settings
from therapy_dashboard.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from .routers import (
    health_router,
    patients_router,
    sessions_router,
    therapists_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup; release pooled connections on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Therapy dashboard API starting",
        extra={"environment": settings.environment, "version": __version__},
    )

    yield

    await get_async_engine().dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Build the API application.

    Returns:
        FastAPI: App with middleware and the health, sessions, therapists and
        patients routers mounted under /api
    """
    settings = get_settings()
    app = FastAPI(
        title="Therapy Session Dashboard API",
        description="Scheduling and status tracking for therapy sessions",
        version=__version__,
        lifespan=lifespan,
    )

    # Credentials cannot be combined with a wildcard origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["Content-Type", "X-Correlation-ID"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in (health_router, sessions_router, therapists_router, patients_router):
        app.include_router(router, prefix="/api")

    return app


app = create_app()


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "therapy_dashboard.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
