"""Core enums package.

Usage:
    from restmeta.core.enums import Environment
"""

from restmeta.core.enums.environment import Environment

__all__ = ["Environment"]
