"""Metadata exposure configuration.

MetadataConfiguration holds the policy used when rendering metadata for REST
resources (profile documents, JSON schemas, ALPS descriptors):

- whether documentation entries with unresolvable description keys are omitted
- whether the ALPS profile resources are exposed
- JSON schema ``format`` tags registered per exact type
- formatting/validation patterns registered per type, looked up with a
  supertype fallback

Lifecycle:
    Constructed once at startup, populated through the setters and
    ``register_*`` methods, then frozen with ``freeze()`` and shared read-only
    with request handlers. Registration is not synchronized; finish it before
    sharing the instance across threads.

Usage:
    ```python
    import numbers
    from datetime import datetime

    from restmeta.metadata import JsonSchemaFormat, MetadataConfiguration

    configuration = MetadataConfiguration()
    configuration.register_json_schema_format(JsonSchemaFormat.DATE_TIME, datetime)
    configuration.register_formatting_pattern_for(r"\\d+", numbers.Number)
    configuration.freeze()

    configuration.get_schema_format_for(datetime)  # JsonSchemaFormat.DATE_TIME
    configuration.get_pattern_for(int).pattern     # "\\d+" (via numbers.Number)
    ```
"""

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from restmeta.core.errors import (
    ConfigurationFrozenError,
    InvalidArgumentError,
    InvalidPatternError,
)
from restmeta.metadata.formats import JsonSchemaFormat
from restmeta.metadata.type_registry import TypeRegistry

if TYPE_CHECKING:
    from restmeta.core.config import Settings

logger = structlog.get_logger(__name__)


def _type_name(type_: type) -> str:
    return f"{type_.__module__}.{type_.__qualname__}"


class MetadataConfiguration:
    """Configuration for metadata exposure.

    Flags default to True. Both registries start empty.

    Thread Safety:
        Mutators are not synchronized. Readers are safe once configuration is
        complete; call ``freeze()`` to enforce that no further mutation happens.
    """

    def __init__(
        self,
        *,
        omit_unresolvable_description_keys: bool = True,
        alps_enabled: bool = True,
    ) -> None:
        self._omit_unresolvable_description_keys = bool(
            omit_unresolvable_description_keys
        )
        self._alps_enabled = bool(alps_enabled)
        self._schema_formats: TypeRegistry[JsonSchemaFormat] = TypeRegistry()
        self._patterns: TypeRegistry[re.Pattern[str]] = TypeRegistry()
        self._frozen = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "MetadataConfiguration":
        """Create a configuration whose flag defaults come from settings.

        Args:
            settings: Application settings (METADATA_* environment variables).

        Returns:
            MetadataConfiguration: New, unfrozen configuration.
        """
        return cls(
            omit_unresolvable_description_keys=settings.metadata_omit_unresolvable_description_keys,
            alps_enabled=settings.metadata_alps_enabled,
        )

    # =========================================================================
    # Flags
    # =========================================================================

    @property
    def omit_unresolvable_description_keys(self) -> bool:
        """Whether to omit documentation attributes for unresolvable description keys.

        Defaults to True, which means an unsuccessful attempt to resolve a
        description message causes no documentation entry to be rendered for
        the metadata resources.
        """
        return self._omit_unresolvable_description_keys

    @omit_unresolvable_description_keys.setter
    def omit_unresolvable_description_keys(self, value: bool) -> None:
        self._check_mutable("set omit_unresolvable_description_keys")
        self._omit_unresolvable_description_keys = bool(value)

    @property
    def alps_enabled(self) -> bool:
        """Whether the ALPS profile resources are exposed."""
        return self._alps_enabled

    @alps_enabled.setter
    def alps_enabled(self, value: bool) -> None:
        self._check_mutable("set alps_enabled")
        self._alps_enabled = bool(value)

    # =========================================================================
    # JSON schema formats (exact type match)
    # =========================================================================

    def register_json_schema_format(
        self, format: JsonSchemaFormat | str, *types: type
    ) -> None:
        """Register a JSON schema format for the given types.

        Each type's previous format, if any, is replaced. Registering no types
        is a no-op.

        Args:
            format: Format tag, or its JSON Schema keyword (e.g. "date-time").
            *types: Classes whose properties render with this format.

        Raises:
            ConfigurationFrozenError: If the configuration is frozen.
            InvalidArgumentError: If format is None or unknown, or any type
                is None or not a class. Nothing is registered in that case.
        """
        self._check_mutable("register a JSON schema format")

        if format is None:
            raise InvalidArgumentError(
                "JsonSchemaFormat must not be None!", argument="format"
            )
        if not isinstance(format, JsonSchemaFormat):
            try:
                format = JsonSchemaFormat(format)
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown JsonSchemaFormat: {format!r}", argument="format"
                ) from None

        for type_ in types:
            self._check_type(type_)

        for type_ in types:
            self._schema_formats.register(type_, format)
            logger.debug(
                "json_schema_format_registered",
                type=_type_name(type_),
                format=format.value,
            )

    def get_schema_format_for(self, type_: type) -> JsonSchemaFormat | None:
        """Return the format registered for exactly ``type_``, or None.

        No supertype fallback is applied.
        """
        return self._schema_formats.get(type_)

    # =========================================================================
    # Formatting patterns (supertype fallback)
    # =========================================================================

    def register_formatting_pattern_for(self, pattern: str, type_: type) -> None:
        """Register a formatting pattern for the given type.

        The pattern is compiled immediately. A previous pattern for the same
        type is replaced.

        Args:
            pattern: Regular expression text, must contain non-whitespace text.
            type_: Class the pattern applies to (and its subtypes).

        Raises:
            ConfigurationFrozenError: If the configuration is frozen.
            InvalidArgumentError: If pattern is None/empty or type_ is None
                or not a class.
            InvalidPatternError: If pattern is not a valid regular expression.
        """
        self._check_mutable("register a formatting pattern")

        if not isinstance(pattern, str) or not pattern.strip():
            raise InvalidArgumentError(
                "Pattern must not be None or empty!", argument="pattern"
            )
        self._check_type(type_)

        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e

        replaced = self._patterns.register(type_, compiled)
        logger.debug(
            "formatting_pattern_registered",
            type=_type_name(type_),
            pattern=pattern,
            replaced=replaced is not None,
        )

    def get_pattern_for(self, type_: type) -> re.Pattern[str] | None:
        """Return the pattern for ``type_`` or its nearest registered supertype.

        Resolution order: exact match, then the most specific registered
        type ``issubclass`` accepts, with ties broken by MRO position and
        then registration order. Returns None when nothing matches or
        ``type_`` is not a class.
        """
        return self._patterns.find(type_)

    # =========================================================================
    # Lifecycle / inspection
    # =========================================================================

    def freeze(self) -> "MetadataConfiguration":
        """Seal the configuration against further mutation.

        Idempotent.

        Returns:
            MetadataConfiguration: self, for chaining.
        """
        if not self._frozen:
            self._frozen = True
            logger.info(
                "metadata_configuration_frozen",
                omit_unresolvable_description_keys=self._omit_unresolvable_description_keys,
                alps_enabled=self._alps_enabled,
                schema_format_count=len(self._schema_formats),
                pattern_count=len(self._patterns),
            )
        return self

    @property
    def is_frozen(self) -> bool:
        """Whether freeze() has been called."""
        return self._frozen

    def schema_formats(self) -> Mapping[type, JsonSchemaFormat]:
        """Read-only snapshot of format registrations, in registration order."""
        return self._schema_formats.as_mapping()

    def formatting_patterns(self) -> Mapping[type, re.Pattern[str]]:
        """Read-only snapshot of pattern registrations, in registration order."""
        return self._patterns.as_mapping()

    def to_dict(self) -> dict[str, Any]:
        """Summarize the configuration as JSON-serializable data.

        Types are keyed by their qualified name (module.QualName).
        """
        return {
            "omit_unresolvable_description_keys": self._omit_unresolvable_description_keys,
            "alps_enabled": self._alps_enabled,
            "frozen": self._frozen,
            "schema_formats": {
                _type_name(t): f.value for t, f in self._schema_formats.as_mapping().items()
            },
            "formatting_patterns": {
                _type_name(t): p.pattern for t, p in self._patterns.as_mapping().items()
            },
        }

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise ConfigurationFrozenError(operation)

    @staticmethod
    def _check_type(type_: Any) -> None:
        if type_ is None:
            raise InvalidArgumentError("Type must not be None!", argument="type")
        if not isinstance(type_, type):
            raise InvalidArgumentError(
                f"Type must be a class, got {type_!r}", argument="type"
            )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"omit_unresolvable_description_keys={self._omit_unresolvable_description_keys}, "
            f"alps_enabled={self._alps_enabled}, "
            f"schema_formats={len(self._schema_formats)}, "
            f"patterns={len(self._patterns)}, "
            f"frozen={self._frozen})"
        )
