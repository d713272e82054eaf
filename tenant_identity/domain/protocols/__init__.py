"""Domain protocols (ports).

Structural interfaces implemented by infrastructure adapters.
"""

from tenant_identity.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandlerProtocol,
    SubscriptionProtocol,
)
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.domain.protocols.permission_repository import (
    PermissionRepository,
)
from tenant_identity.domain.protocols.profile_repository import ProfileRepository
from tenant_identity.domain.protocols.tenant_repository import TenantRepository
from tenant_identity.domain.protocols.unit_of_work_protocol import (
    UnitOfWorkFactory,
    UnitOfWorkProtocol,
)
from tenant_identity.domain.protocols.user_repository import UserRepository

__all__ = [
    "EventBusProtocol",
    "EventHandlerProtocol",
    "LoggerProtocol",
    "PermissionRepository",
    "ProfileRepository",
    "SubscriptionProtocol",
    "TenantRepository",
    "UnitOfWorkFactory",
    "UnitOfWorkProtocol",
    "UserRepository",
]
