"""Resource profile router.

Mounted under ``Settings.profile_path`` (default ``/profile``):

- ``GET {profile_path}``: profile root, linking to each exported resource's
  profile. This is the ALPS entry point and answers 404 when
  ``MetadataConfiguration.alps_enabled`` is False.
- ``GET {profile_path}/{resource}``: JSON schema of the resource, decorated
  with configured formats, patterns and descriptions
  (``application/schema+json``).
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from restmeta.core.container import get_logger
from restmeta.metadata import (
    DescriptionResolver,
    MetadataConfiguration,
    metadata_json_schema,
)
from restmeta.presentation.dependencies import (
    get_description_resolver,
    get_metadata_configuration,
    get_resources,
    require_alps_enabled,
)

SCHEMA_JSON_MEDIA_TYPE = "application/schema+json"

profile_router = APIRouter(tags=["Profile"])


@profile_router.get("", name="profile_root")
async def profile_root(
    request: Request,
    _: MetadataConfiguration = Depends(require_alps_enabled),
    resources: dict[str, type[BaseModel]] = Depends(get_resources),
) -> dict[str, Any]:
    """List links to the profile of every exported resource.

    Returns:
        dict[str, Any]: HAL-style ``_links`` document.
    """
    links: dict[str, dict[str, str]] = {"self": {"href": str(request.url)}}
    for name in resources:
        links[name] = {
            "href": str(request.url_for("profile_resource", resource=name))
        }
    return {"_links": links}


@profile_router.get("/{resource}", name="profile_resource")
async def profile_resource(
    resource: str,
    request: Request,
    configuration: MetadataConfiguration = Depends(get_metadata_configuration),
    resolver: DescriptionResolver = Depends(get_description_resolver),
    resources: dict[str, type[BaseModel]] = Depends(get_resources),
) -> JSONResponse:
    """Render the metadata JSON schema of one exported resource.

    Raises:
        HTTPException: 404 if the resource is not exported.
    """
    logger = get_logger().bind(request_path=request.url.path, resource=resource)
    model = resources.get(resource)
    if model is None:
        logger.warning("profile_resource_not_found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown resource '{resource}'",
        )

    schema = metadata_json_schema(model, configuration, resolver, resource=resource)
    logger.debug("profile_resource_rendered", model=model.__name__)
    return JSONResponse(content=schema, media_type=SCHEMA_JSON_MEDIA_TYPE)
