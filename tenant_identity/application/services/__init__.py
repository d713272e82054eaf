"""Application services.

Every public operation returns Result[T, DomainError].
"""

from tenant_identity.application.services.auth_service import AuthService
from tenant_identity.application.services.authorization_service import (
    AuthorizationService,
)
from tenant_identity.application.services.profile_service import ProfileService
from tenant_identity.application.services.tenant_service import TenantService
from tenant_identity.application.services.user_service import UserService

__all__ = [
    "AuthService",
    "AuthorizationService",
    "ProfileService",
    "TenantService",
    "UserService",
]
