"""SQLAlchemy repository adapters."""

from tenant_identity.infrastructure.persistence.repositories.permission_repository import (
    PermissionRepository,
)
from tenant_identity.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)
from tenant_identity.infrastructure.persistence.repositories.tenant_repository import (
    TenantRepository,
)
from tenant_identity.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "PermissionRepository",
    "ProfileRepository",
    "TenantRepository",
    "UserRepository",
]
