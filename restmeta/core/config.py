"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables, every field has a default
- Type validation via Pydantic
- Metadata flags seed MetadataConfiguration defaults (see from_settings)

Usage:
    from restmeta.core.config import get_settings

    settings = get_settings()
    if settings.metadata_alps_enabled:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restmeta.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="restmeta",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="API base URL, used to build problem type URIs",
    )
    profile_path: str = Field(
        default="/profile",
        description="Mount path of the resource profile (ALPS / JSON schema) routes",
    )

    # Metadata rendering defaults
    metadata_omit_unresolvable_description_keys: bool = Field(
        default=True,
        description="Omit documentation entries whose description key cannot be resolved",
    )
    metadata_alps_enabled: bool = Field(
        default=True,
        description="Expose the ALPS profile resources",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @field_validator("profile_path")
    @classmethod
    def validate_profile_path(cls, v: str) -> str:
        """
        Normalize the profile mount path.

        Args:
            v: Path, with or without leading/trailing slashes.

        Returns:
            str: Path with a single leading slash and no trailing slash.

        Raises:
            ValueError: If the path is empty or only slashes.
        """
        path = v.strip().strip("/")
        if not path:
            raise ValueError("profile_path must not be empty")
        return f"/{path}"

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded once per process. Tests call
    get_settings.cache_clear() after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
