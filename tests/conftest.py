"""Pytest configuration for application tests.

Provides:
1. Settings fixtures isolated from the process environment
2. An app factory fixture building a fresh FastAPI app per test
3. Sample resource models and messages
"""

import numbers
from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from restmeta.core.config import Settings
from restmeta.core.enums import Environment
from restmeta.main import create_app
from restmeta.metadata import JsonSchemaFormat, MetadataConfiguration


class Person(BaseModel):
    first_name: str
    born: date | None = None
    updated: datetime | None = None
    score: int = 0
    code: str = Field(default="AAA", pattern=r"^[A-Z]{3}$")


MESSAGES = {
    "rest.description.people": "People known to the system",
    "rest.description.people.first_name": "Given name",
}


def configure_sample_metadata(configuration: MetadataConfiguration) -> None:
    """Registrations used by the API tests."""
    configuration.register_json_schema_format(JsonSchemaFormat.DATE, date, datetime)
    configuration.register_formatting_pattern_for(r"^\d+$", numbers.Number)


@pytest.fixture
def settings() -> Settings:
    """Development settings with metadata defaults."""
    return Settings(environment=Environment.DEVELOPMENT)


@pytest.fixture
def make_client(settings):
    """Factory building a TestClient around a fresh app.

    Usage:
        client = make_client(metadata_alps_enabled=False)
    """

    def _make_client(**overrides) -> TestClient:
        app_settings = settings.model_copy(update=overrides)
        app = create_app(
            app_settings,
            resources={"people": Person},
            messages=MESSAGES,
            configure_metadata=configure_sample_metadata,
        )
        return TestClient(app)

    return _make_client


@pytest.fixture
def client(make_client) -> TestClient:
    """TestClient with default settings."""
    return make_client()
