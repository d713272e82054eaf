"""Tenant lifecycle events."""

from dataclasses import dataclass

from tenant_identity.domain.entities import Tenant
from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.value_objects import Identifier


@dataclass(frozen=True, kw_only=True)
class TenantCreated(DomainEvent):
    """Tenant and its creator's owner permissions were committed."""

    tenant: Tenant
    created_by: Identifier


@dataclass(frozen=True, kw_only=True)
class TenantDeleted(DomainEvent):
    """Tenant was deleted."""

    tenant: Tenant
    deleted_by: Identifier
