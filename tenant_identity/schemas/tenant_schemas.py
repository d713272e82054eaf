"""Tenant request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from tenant_identity.domain.entities import Tenant


class TenantCreateRequest(BaseModel):
    """Request schema for tenant creation.

    POST /api/tenants
    Returns: 201 Created
    """

    name: str = Field(
        ...,
        max_length=255,
        description="Tenant display name",
        examples=["Acme Corp"],
    )


class TenantResponse(BaseModel):
    """Tenant resource."""

    id: UUID = Field(..., description="Tenant ID")
    name: str = Field(..., description="Tenant display name")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(id=tenant.id.uuid, name=tenant.name, created_at=tenant.created_at)
