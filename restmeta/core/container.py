"""Dependency container (composition root).

Application-scoped singletons:
- Logging (ConsoleAdapter behind LoggerProtocol)

The metadata configuration is deliberately NOT a container singleton: it is
constructed by the app factory, frozen, and carried on ``app.state`` so each
application (and each test) owns its own instance.

Usage:
    from restmeta.core.container import get_logger

    logger = get_logger()
    logger.info("application_started", app_name=settings.app_name)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from restmeta.core.config import get_settings

if TYPE_CHECKING:
    from restmeta.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from restmeta.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
