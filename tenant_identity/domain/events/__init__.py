"""Domain events.

Events are grouped by category. Each category tuple is what one event
handler subscribes to.

Usage:
    from tenant_identity.domain.events import UserCreated, USER_EVENTS
"""

from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.events.permission_events import (
    PermissionGranted,
    PermissionRevoked,
)
from tenant_identity.domain.events.profile_events import (
    ProfileCreated,
    ProfileDeleted,
)
from tenant_identity.domain.events.tenant_events import TenantCreated, TenantDeleted
from tenant_identity.domain.events.user_events import UserCreated, UserDeleted

USER_EVENTS: tuple[type[DomainEvent], ...] = (UserCreated, UserDeleted)
PROFILE_EVENTS: tuple[type[DomainEvent], ...] = (ProfileCreated, ProfileDeleted)
PERMISSION_EVENTS: tuple[type[DomainEvent], ...] = (
    PermissionGranted,
    PermissionRevoked,
)
TENANT_EVENTS: tuple[type[DomainEvent], ...] = (TenantCreated, TenantDeleted)

__all__ = [
    "DomainEvent",
    "PERMISSION_EVENTS",
    "PROFILE_EVENTS",
    "PermissionGranted",
    "PermissionRevoked",
    "ProfileCreated",
    "ProfileDeleted",
    "TENANT_EVENTS",
    "TenantCreated",
    "TenantDeleted",
    "USER_EVENTS",
    "UserCreated",
    "UserDeleted",
]
