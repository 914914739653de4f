"""Health check API routes."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from moviefav.api.dependencies import get_database_session
from moviefav.api.responses import ApiResponse
from moviefav.settings import get_settings
from .schemas import DetailedHealthResponse, HealthResponse, LivenessResponse

router = APIRouter(prefix="/health", tags=["Health Check"])

logger = logging.getLogger("moviefav")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get(
    "",
    response_model=ApiResponse[HealthResponse],
    summary="Basic health check",
    description="Simple health check endpoint.",
)
async def basic_health_check() -> ApiResponse[HealthResponse]:
    """
    Basic health check endpoint.

    Returns minimal health status information without dependency checks.
    Useful for load balancer health checks.
    """
    return ApiResponse(
        success=True,
        message="Service is healthy",
        data=HealthResponse(status="healthy", timestamp=_timestamp()),
    )


@router.get(
    "/detailed",
    response_model=ApiResponse[DetailedHealthResponse],
    summary="Detailed health check",
    description="Check the health status of the application and its database.",
)
async def detailed_health_check(
    session: AsyncSession = Depends(get_database_session),
) -> ApiResponse[DetailedHealthResponse]:
    """Perform a health check that includes database connectivity."""
    services = {}
    overall_status = "healthy"

    try:
        await session.execute(text("SELECT 1"))
        services["database"] = "healthy"
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        services["database"] = "unhealthy"
        overall_status = "unhealthy"

    return ApiResponse(
        success=overall_status == "healthy",
        message=f"Service is {overall_status}",
        data=DetailedHealthResponse(
            status=overall_status,
            timestamp=_timestamp(),
            services=services,
            version=get_settings().api_version,
        ),
    )


@router.get(
    "/live",
    response_model=ApiResponse[LivenessResponse],
    summary="Liveness check",
    description="Check if the application is alive and responsive.",
)
async def liveness_check() -> ApiResponse[LivenessResponse]:
    """
    Liveness probe for container deployments.

    Does not check dependencies.
    """
    return ApiResponse(
        success=True,
        message="Service is alive",
        data=LivenessResponse(alive=True, timestamp=_timestamp()),
    )
