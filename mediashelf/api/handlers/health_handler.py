"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter, Request

from mediashelf.config.settings import settings
from mediashelf.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status and active storage backend
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
        backend="sql" if request.app.state.database_connected else "memory",
    )


@router.get("/ready")
async def readiness_check():
    """
    Readiness check for load balancers.

    The app serves from memory when the database is down, so it is
    always ready once started.
    """
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Liveness check."""
    return {"status": "alive"}
