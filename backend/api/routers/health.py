"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: backend.boundary.db
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.api.deps.dependencies import get_database_context
from backend.boundary.db.connection import DatabaseContext

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(
    ctx: DatabaseContext = Depends(get_database_context),
) -> HealthResponse:
    """Database health check."""
    try:
        await ctx.ping()
    except Exception as e:
        logger.error("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unreachable",
        )
    return HealthResponse(status="healthy", message="Database connection OK")
