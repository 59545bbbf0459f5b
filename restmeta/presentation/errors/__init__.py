"""RFC 9457 error responses.

Usage:
    from restmeta.presentation.errors import register_exception_handlers
"""

from restmeta.presentation.errors.exception_handlers import register_exception_handlers
from restmeta.presentation.errors.problem_details import ProblemDetails

__all__ = ["ProblemDetails", "register_exception_handlers"]
