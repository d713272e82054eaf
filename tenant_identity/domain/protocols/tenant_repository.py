"""TenantRepository protocol (port)."""

from typing import Protocol

from tenant_identity.domain.entities import Tenant
from tenant_identity.domain.value_objects import Identifier


class TenantRepository(Protocol):
    """Tenant repository protocol (port)."""

    async def find_by_id(self, tenant_id: Identifier) -> Tenant | None:
        ...

    async def save(self, tenant: Tenant) -> Tenant:
        ...

    async def delete(self, tenant_id: Identifier) -> None:
        ...
