"""Tenant service: create, find and delete tenants.

The creating user receives read-tenant and write-tenant on the new
tenant in the same transaction as the insert; deleting a tenant requires
write-tenant on it.
"""

from tenant_identity.application.services.authorization_service import (
    AuthorizationService,
)
from tenant_identity.application.services.common import (
    invalid_input,
    publish_after_commit,
    storage_failure,
)
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import AuthorizationError, DomainError, NotFoundError
from tenant_identity.core.result import Failure, Result, Success
from tenant_identity.domain.entities import Tenant
from tenant_identity.domain.enums import ResourceKind
from tenant_identity.domain.errors import ParseError, RepositoryError
from tenant_identity.domain.events import TenantCreated, TenantDeleted
from tenant_identity.domain.protocols.event_bus_protocol import EventBusProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from tenant_identity.domain.value_objects import (
    Actionable,
    Identifier,
    Permission,
    Resource,
)


class TenantService:
    """Tenant lifecycle service."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        authorization: AuthorizationService,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize tenant service with dependencies.

        Args:
            uow_factory: Creates a unit of work per operation.
            authorization: Used for the delete permission check.
            event_bus: Bus for post-commit events.
            logger: Structured logger.
        """
        self._uow_factory = uow_factory
        self._authorization = authorization
        self._event_bus = event_bus
        self._logger = logger

    async def create_tenant(
        self, acting_subject: str, name: str
    ) -> Result[Tenant, DomainError]:
        """Create a tenant owned by the acting subject.

        Returns:
            Success(Tenant), or Failure with ValidationError, NotFoundError
            (acting subject is not a user) or StorageError.
        """
        try:
            creator = Identifier.parse(acting_subject, field="acting_subject")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))
        try:
            tenant = Tenant.create(name)
        except ValueError as e:
            return Failure(error=invalid_input(e, field="name"))

        try:
            async with self._uow_factory() as uow:
                if await uow.users.find_by_id(creator) is None:
                    return Failure(
                        error=NotFoundError(
                            code=ErrorCode.USER_NOT_FOUND,
                            message="Acting subject is not a known user",
                            resource_type="User",
                            resource_id=str(creator),
                        )
                    )
                await uow.tenants.save(tenant)
                for permission in tenant.owner_permissions(creator):
                    await uow.permissions.save(permission)
                await uow.commit()
        except RepositoryError as e:
            self._logger.error("tenant_create_failed", error=e, operation=e.operation)
            return Failure(error=storage_failure(e, message="Failed to create tenant"))

        self._logger.info(
            "tenant_created", tenant_id=str(tenant.id), created_by=str(creator)
        )
        await publish_after_commit(
            self._event_bus,
            self._logger,
            TenantCreated(tenant=tenant, created_by=creator),
        )
        return Success(value=tenant)

    async def find_tenant(self, tenant_id: str) -> Result[Tenant, DomainError]:
        """Find a tenant by id."""
        try:
            identifier = Identifier.parse(tenant_id, field="tenant_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))

        try:
            async with self._uow_factory() as uow:
                tenant = await uow.tenants.find_by_id(identifier)
        except RepositoryError as e:
            self._logger.error("tenant_lookup_failed", error=e, tenant_id=tenant_id)
            return Failure(error=storage_failure(e))

        if tenant is None:
            return Failure(error=_tenant_not_found(identifier))
        return Success(value=tenant)

    async def delete_tenant(
        self, acting_subject: str, tenant_id: str
    ) -> Result[None, DomainError]:
        """Delete a tenant on behalf of a subject holding write-tenant on it.

        Returns:
            Success(None), or Failure with ValidationError,
            AuthorizationError (PERMISSION_DENIED), NotFoundError or
            StorageError.
        """
        try:
            actor = Identifier.parse(acting_subject, field="acting_subject")
            target = Identifier.parse(tenant_id, field="tenant_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))

        required = Permission(
            subject=actor,
            action=Actionable.write(ResourceKind.TENANT),
            resource=Resource.tenant(target),
        )
        check = await self._authorization.check(required)
        if isinstance(check, Failure):
            return check
        if not check.value:
            self._logger.warning("tenant_delete_denied", required=str(required))
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Acting subject may not delete this tenant",
                    required_permission=str(required),
                )
            )

        try:
            async with self._uow_factory() as uow:
                tenant = await uow.tenants.find_by_id(target)
                if tenant is None:
                    return Failure(error=_tenant_not_found(target))
                await uow.tenants.delete(target)
                await uow.commit()
        except RepositoryError as e:
            self._logger.error("tenant_delete_failed", error=e, tenant_id=str(target))
            return Failure(error=storage_failure(e, message="Failed to delete tenant"))

        self._logger.info("tenant_deleted", tenant_id=str(target), deleted_by=str(actor))
        await publish_after_commit(
            self._event_bus,
            self._logger,
            TenantDeleted(tenant=tenant, deleted_by=actor),
        )
        return Success(value=None)


def _tenant_not_found(tenant_id: Identifier) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.TENANT_NOT_FOUND,
        message="Tenant not found",
        resource_type="Tenant",
        resource_id=str(tenant_id),
    )
