"""FastAPI dependencies for metadata routes.

The configuration, resource map and description resolver live on
``app.state`` (set by ``create_app``); these dependencies expose them to
handlers.

Usage:
    @router.get("/profile")
    async def profile_root(
        configuration: MetadataConfiguration = Depends(get_metadata_configuration),
    ) -> dict: ...
"""

from fastapi import Depends, HTTPException, Request, status
from pydantic import BaseModel

from restmeta.core.config import Settings
from restmeta.metadata import DescriptionResolver, MetadataConfiguration


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_metadata_configuration(request: Request) -> MetadataConfiguration:
    """Frozen metadata configuration of the application."""
    return request.app.state.metadata_configuration


def get_description_resolver(request: Request) -> DescriptionResolver:
    """Description resolver bound to the application's messages."""
    return request.app.state.description_resolver


def get_resources(request: Request) -> dict[str, type[BaseModel]]:
    """Exported resources: resource name to the pydantic model describing it."""
    return request.app.state.resources


def require_alps_enabled(
    configuration: MetadataConfiguration = Depends(get_metadata_configuration),
) -> MetadataConfiguration:
    """Reject the request with 404 when ALPS resources are not exposed.

    Raises:
        HTTPException: 404 if ``alps_enabled`` is False.
    """
    if not configuration.alps_enabled:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="ALPS profile resources are disabled",
        )
    return configuration
