"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.dependencies import get_service_cache
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    albums_router,
    health_router,
    images_router,
    reviews_router,
    snapshots_router,
    summary_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Opens the database context on startup and disposes it on shutdown.
    """
    cache = get_service_cache()
    ctx = cache.database
    if cache.settings.create_tables_on_startup:
        await ctx.create_all()
    logger.info("Database context ready")

    yield

    await cache.aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Album Store API",
        description="Album catalogue with reviews, live snapshots and AI review summaries",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(albums_router, prefix="/api/v1")
    app.include_router(reviews_router, prefix="/api/v1")
    app.include_router(images_router, prefix="/api/v1")
    app.include_router(summary_router, prefix="/api/v1")
    app.include_router(snapshots_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
