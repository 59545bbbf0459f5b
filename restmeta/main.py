"""
FastAPI application factory.

``create_app`` is the composition root of the metadata configuration:

1. Settings are loaded (or injected by the caller/tests).
2. A MetadataConfiguration is built from the METADATA_* settings.
3. The caller's ``configure_metadata`` callback registers formats and
   patterns. Configuration errors propagate: misconfiguration is fatal at
   startup.
4. The configuration is frozen and stored on ``app.state`` together with the
   exported resources and a DescriptionResolver.

Usage:
    ```python
    def configure(configuration: MetadataConfiguration) -> None:
        configuration.register_json_schema_format(JsonSchemaFormat.EMAIL, EmailStr)
        configuration.register_formatting_pattern_for(r"^[A-Z]{3}$", CurrencyCode)

    app = create_app(
        resources={"people": Person},
        messages={"rest.description.people": "A person"},
        configure_metadata=configure,
    )
    ```

Run with ``uvicorn restmeta.main:app``.
"""

from collections.abc import AsyncGenerator, Callable, Mapping
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import BaseModel

from restmeta.core.config import Settings, get_settings
from restmeta.core.container import get_logger
from restmeta.metadata import DescriptionResolver, MetadataConfiguration
from restmeta.presentation.errors import register_exception_handlers
from restmeta.presentation.routers import profile_router, system_router


def create_app(
    settings: Settings | None = None,
    *,
    resources: Mapping[str, type[BaseModel]] | None = None,
    messages: Mapping[str, str] | None = None,
    configure_metadata: Callable[[MetadataConfiguration], None] | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use. Defaults to the cached environment settings.
        resources: Exported resources (resource name to pydantic model).
        messages: Description messages keyed by ``rest.description.*`` keys.
        configure_metadata: Callback that populates the metadata configuration
            before it is frozen.

    Returns:
        FastAPI: Configured application.

    Raises:
        MetadataConfigurationError: If ``configure_metadata`` registers invalid
            formats or patterns.
    """
    settings = settings or get_settings()
    logger = get_logger()

    configuration = MetadataConfiguration.from_settings(settings)
    if configure_metadata is not None:
        configure_metadata(configuration)
    configuration.freeze()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "application_started",
            app_name=settings.app_name,
            environment=settings.environment.value,
            alps_enabled=configuration.alps_enabled,
            resource_count=len(app.state.resources),
        )
        yield
        logger.info("application_stopped", app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Metadata and profile documents for REST resources",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.metadata_configuration = configuration
    app.state.resources = dict(resources or {})
    app.state.description_resolver = DescriptionResolver(configuration, messages)

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(profile_router, prefix=settings.profile_path)

    return app


app = create_app()
