"""Logging adapters implementing LoggerProtocol."""

from restmeta.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
