"""
Health check route for the Infinity landing-site backend.

This endpoint is PUBLIC and provides a simple status check for the
hosting platform, monitoring and deployment verification. It does not
contact the email provider.
"""

from fastapi import APIRouter

from backend.schemas.health import HealthResponse
from backend.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "infinity-landing-backend"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
