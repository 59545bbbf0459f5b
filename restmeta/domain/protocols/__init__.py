"""Domain protocols (structural interfaces).

Usage:
    from restmeta.domain.protocols import LoggerProtocol
"""

from restmeta.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
