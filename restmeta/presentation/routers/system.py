"""System router for non-versioned application endpoints.

Provides root, health, and configuration endpoints. These endpoints are
lightweight and side-effect free to support health checks and basic
diagnostics.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from restmeta.core.config import Settings
from restmeta.metadata import MetadataConfiguration
from restmeta.presentation.dependencies import (
    get_app_settings,
    get_metadata_configuration,
    get_resources,
)


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}


@system_router.get("/config")
async def get_config(
    settings: Settings = Depends(get_app_settings),
    configuration: MetadataConfiguration = Depends(get_metadata_configuration),
    resources: dict = Depends(get_resources),
) -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Settings and metadata configuration summary.

    Raises:
        HTTPException: 403 outside development.
    """
    if not settings.is_development:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Config endpoint only available in development",
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "profile_path": settings.profile_path,
            },
            "metadata": configuration.to_dict(),
            "resources": sorted(resources),
        }
    )
