"""Tenant database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tenant_identity.infrastructure.persistence.base import BaseModel


class TenantModel(BaseModel):
    """Tenant model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when tenant was created (from BaseModel)
        name: Display name
    """

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
