"""API routers.

Resources:
    /api/auth         - Sign-in / sign-up
    /api/users        - User lookup and deletion
    /api/permissions  - Permission checks, grants and revocations
    /api/tenants      - Tenant management
"""

from fastapi import APIRouter

from tenant_identity.presentation.routers.api.v1.auth import auth_router
from tenant_identity.presentation.routers.api.v1.permissions import permissions_router
from tenant_identity.presentation.routers.api.v1.tenants import tenants_router
from tenant_identity.presentation.routers.api.v1.users import users_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(permissions_router)
api_router.include_router(tenants_router)

__all__ = [
    "api_router",
]
