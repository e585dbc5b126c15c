"""
Health check endpoints.

Provides health check endpoints for monitoring service status.
"""

from fastapi import APIRouter

from workforce import __version__
from workforce.di import InfrastructureFactoryDep
from workforce.models import HealthResponse

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint with a pointer to the documentation."""
    return {
        "name": "Workforce Backend",
        "version": __version__,
        "docs": "/docs",
    }


@router.get("/health", response_model=HealthResponse)
async def health_check(factory: InfrastructureFactoryDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status, version and the active repository provider
    """
    return HealthResponse(
        status="ok", version=__version__, infrastructure_provider=factory.provider
    )
