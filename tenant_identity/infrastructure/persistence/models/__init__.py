"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from tenant_identity.infrastructure.persistence.models.permission import (
    PermissionModel,
)
from tenant_identity.infrastructure.persistence.models.profile import ProfileModel
from tenant_identity.infrastructure.persistence.models.tenant import TenantModel
from tenant_identity.infrastructure.persistence.models.user import UserModel

__all__ = ["PermissionModel", "ProfileModel", "TenantModel", "UserModel"]
