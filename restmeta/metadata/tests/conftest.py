"""Metadata component test configuration.

The metadata package is framework-agnostic, so these tests need no
application settings, database, or HTTP client.
"""

import numbers

import pytest

from restmeta.metadata import MetadataConfiguration


@pytest.fixture
def configuration() -> MetadataConfiguration:
    """Fresh, unfrozen configuration with default flags."""
    return MetadataConfiguration()


@pytest.fixture
def number_pattern_configuration(configuration) -> MetadataConfiguration:
    """Configuration with a digits-only pattern registered for numbers.Number."""
    configuration.register_formatting_pattern_for(r"\d+", numbers.Number)
    return configuration
