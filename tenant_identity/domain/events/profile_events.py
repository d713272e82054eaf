"""Profile lifecycle events."""

from dataclasses import dataclass

from tenant_identity.domain.entities import Profile
from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.value_objects import Identifier


@dataclass(frozen=True, kw_only=True)
class ProfileCreated(DomainEvent):
    """A profile was created outside the create-user workflow."""

    profile: Profile


@dataclass(frozen=True, kw_only=True)
class ProfileDeleted(DomainEvent):
    """A profile was deleted."""

    user_id: Identifier
