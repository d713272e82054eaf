"""TenantRepository - SQLAlchemy implementation of TenantRepository protocol."""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_identity.domain.entities import Tenant
from tenant_identity.domain.value_objects import Identifier
from tenant_identity.infrastructure.persistence.base import as_utc
from tenant_identity.infrastructure.persistence.errors import translate_error
from tenant_identity.infrastructure.persistence.models import TenantModel


class TenantRepository:
    """SQLAlchemy implementation of TenantRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, tenant_id: Identifier) -> Tenant | None:
        stmt = select(TenantModel).where(TenantModel.id == tenant_id.uuid)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "tenants.find_by_id") from e
        tenant_model = result.scalar_one_or_none()
        if tenant_model is None:
            return None
        return Tenant(
            id=Identifier(tenant_model.id),
            name=tenant_model.name,
            created_at=as_utc(tenant_model.created_at),
        )

    async def save(self, tenant: Tenant) -> Tenant:
        self.session.add(
            TenantModel(
                id=tenant.id.uuid,
                name=tenant.name,
                created_at=tenant.created_at,
            )
        )
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise translate_error(e, "tenants.save") from e
        return tenant

    async def delete(self, tenant_id: Identifier) -> None:
        stmt = delete(TenantModel).where(TenantModel.id == tenant_id.uuid)
        try:
            await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "tenants.delete") from e
