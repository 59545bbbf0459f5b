"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the application layer while staying
backend-agnostic. Every call is a message plus key-value context.

Usage:
    from restmeta.core.container import get_logger
    from restmeta.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.info("metadata_configuration_frozen", pattern_count=3)

    request_logger = logger.bind(request_path=request.url.path)
    request_logger.warning("profile_resource_not_found", resource="people")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports debug, info, warning and error levels plus context binding
    for request-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or human-readable message.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
