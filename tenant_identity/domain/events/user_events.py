"""User lifecycle events."""

from dataclasses import dataclass

from tenant_identity.domain.entities import User
from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.value_objects import Identifier


@dataclass(frozen=True, kw_only=True)
class UserCreated(DomainEvent):
    """User, profile and owner permissions were committed.

    Attributes:
        user: The persisted user.
        tenant_id: Tenant supplied at sign-up (not validated against tenants).
    """

    user: User
    tenant_id: Identifier | None = None


@dataclass(frozen=True, kw_only=True)
class UserDeleted(DomainEvent):
    """User was deleted.

    Attributes:
        user_id: Identifier of the deleted user.
        deleted_by: Subject that performed the deletion.
    """

    user_id: Identifier
    deleted_by: Identifier
