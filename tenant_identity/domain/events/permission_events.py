"""Authorization events.

Published only when storage actually changed: a grant that hit an
existing row does not produce PermissionGranted.
"""

from dataclasses import dataclass

from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.value_objects import Identifier, Permission


@dataclass(frozen=True, kw_only=True)
class PermissionGranted(DomainEvent):
    """Permission was inserted.

    Attributes:
        permission: The granted permission.
        granted_by: Requesting subject that held the same permission.
    """

    permission: Permission
    granted_by: Identifier


@dataclass(frozen=True, kw_only=True)
class PermissionRevoked(DomainEvent):
    """Permission was deleted.

    Attributes:
        permission: The revoked permission.
        revoked_by: Requesting subject that held the same permission.
    """

    permission: Permission
    revoked_by: Identifier
