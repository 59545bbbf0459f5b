"""Configuration error types.

Metadata configuration errors are raised (not returned) because they signal
misconfiguration of the owning application. They surface at startup while the
configuration is being populated, never during request handling.

Error Types:
- MetadataConfigurationError: Base class for all configuration errors
- InvalidArgumentError: Missing, empty, or ill-typed required argument
- InvalidPatternError: Formatting pattern text that does not compile
- ConfigurationFrozenError: Mutation attempted after freeze()

Usage:
    from restmeta.core.errors import InvalidArgumentError

    if format is None:
        raise InvalidArgumentError("JsonSchemaFormat must not be None!", argument="format")
"""


class MetadataConfigurationError(ValueError):
    """Base exception for metadata configuration errors."""

    pass


class InvalidArgumentError(MetadataConfigurationError):
    """Raised when a required argument is None, empty, or of the wrong type."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        """Initialize invalid argument error.

        Args:
            message: Human-readable message.
            argument: Name of the offending argument.
        """
        super().__init__(message)
        self.argument = argument


class InvalidPatternError(MetadataConfigurationError):
    """Raised when a formatting pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        """Initialize invalid pattern error.

        Args:
            pattern: The pattern text that failed to compile.
            reason: Compiler error message.
        """
        super().__init__(f"Invalid formatting pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class ConfigurationFrozenError(MetadataConfigurationError):
    """Raised when a frozen configuration is mutated."""

    def __init__(self, operation: str) -> None:
        """Initialize frozen configuration error.

        Args:
            operation: Name of the rejected mutator.
        """
        super().__init__(
            f"Cannot {operation}: metadata configuration is frozen"
        )
        self.operation = operation
