"""Application routers.

Exports:
    system_router: Root, health and development config endpoints
    profile_router: Resource profile endpoints (mounted under Settings.profile_path)
"""

from restmeta.presentation.routers.profile import profile_router
from restmeta.presentation.routers.system import system_router

__all__ = ["profile_router", "system_router"]
