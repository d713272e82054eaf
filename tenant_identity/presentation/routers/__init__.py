"""Routers: the /api resource routers and the unversioned system endpoints."""

from tenant_identity.presentation.routers.api.v1 import api_router
from tenant_identity.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
