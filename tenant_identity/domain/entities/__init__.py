"""Domain entities."""

from tenant_identity.domain.entities.profile import Profile
from tenant_identity.domain.entities.tenant import Tenant
from tenant_identity.domain.entities.user import User

__all__ = ["Profile", "Tenant", "User"]
