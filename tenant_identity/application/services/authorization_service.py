"""Authorization service: permission checks, grants and revocations.

Authorization is self-hosting: the only way to grant or revoke a
permission is to already hold that same permission (same action on the
same resource). There is no administrator bypass; bootstrap permissions
are written directly when a resource is created (see UserService and
TenantService).

Flow (grant / revoke):
1. Parse all raw inputs (ValidationError, nothing touched yet)
2. Check the requester holds the permission being delegated
   (ACCESS_CHECK_FAILED if the check errors, UNAUTHORIZED if it is absent)
3. Insert / delete the receiver's permission in its own transaction
   (a duplicate insert is a successful no-op)
4. After commit, publish PermissionGranted / PermissionRevoked when a row
   actually changed

Architecture:
- Application layer ONLY imports from domain and core
- Storage is reached through the unit of work protocol
"""

from tenant_identity.application.services.common import (
    invalid_input,
    publish_after_commit,
    storage_failure,
)
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import AuthorizationError, DomainError
from tenant_identity.core.result import Failure, Result, Success
from tenant_identity.domain.errors import (
    DuplicateRecordError,
    ParseError,
    RepositoryError,
)
from tenant_identity.domain.events import PermissionGranted, PermissionRevoked
from tenant_identity.domain.protocols.event_bus_protocol import EventBusProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from tenant_identity.domain.value_objects import Identifier, Permission


class AuthorizationService:
    """Checks, grants and revokes permissions.

    Example:
        >>> result = await service.grant(
        ...     requesting_subject=str(owner.id),
        ...     receiving_subject=str(reader.id),
        ...     action="read-user",
        ...     resource_id=str(owner.id),
        ...     resource_kind="user",
        ... )
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            uow_factory: Creates a unit of work per operation.
            event_bus: Bus for post-commit events.
            logger: Structured logger.
        """
        self._uow_factory = uow_factory
        self._event_bus = event_bus
        self._logger = logger

    async def has_permission(
        self,
        subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> Result[bool, DomainError]:
        """Check whether a subject holds a permission.

        Args:
            subject: Subject identifier.
            action: "<verb>-<target>" string, e.g. "write-user".
            resource_id: Resource identifier.
            resource_kind: "user" or "tenant".

        Returns:
            Success(True/False), Failure(ValidationError) for malformed input,
            Failure(StorageError) if the lookup fails.
        """
        match await self.evaluate(subject, action, resource_id, resource_kind):
            case Success(value=(_, allowed)):
                return Success(value=allowed)
            case Failure(error=error):
                return Failure(error=error)

    async def evaluate(
        self,
        subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> Result[tuple[Permission, bool], DomainError]:
        """Like has_permission, but also returns the parsed permission.

        Callers echoing the permission back use its canonical form rather
        than the raw input (identifiers are lower-cased when parsed).
        """
        try:
            permission = Permission.from_parts(subject, action, resource_id, resource_kind)
        except ParseError as e:
            return Failure(error=invalid_input(e))
        match await self.check(permission):
            case Success(value=allowed):
                return Success(value=(permission, allowed))
            case Failure(error=error):
                return Failure(error=error)

    async def check(self, permission: Permission) -> Result[bool, DomainError]:
        """Check an already parsed permission.

        Returns:
            Success(bool), or Failure(StorageError) with code
            ACCESS_CHECK_FAILED if the lookup fails.
        """
        try:
            async with self._uow_factory() as uow:
                allowed = await uow.permissions.exists(permission)
        except RepositoryError as e:
            self._logger.error(
                "permission_check_failed", error=e, permission=str(permission)
            )
            return Failure(
                error=storage_failure(
                    e,
                    code=ErrorCode.ACCESS_CHECK_FAILED,
                    message="Permission check failed",
                )
            )
        return Success(value=allowed)

    async def grant(
        self,
        requesting_subject: str,
        receiving_subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> Result[Permission, DomainError]:
        """Grant a permission the requester already holds.

        Granting a permission the receiver already has is a no-op success.

        Args:
            requesting_subject: Subject delegating the permission.
            receiving_subject: Subject receiving the permission.
            action: "<verb>-<target>" string.
            resource_id: Resource identifier.
            resource_kind: "user" or "tenant".

        Returns:
            Success(Permission) held by the receiver, or Failure with
            ValidationError, AuthorizationError (UNAUTHORIZED) or
            StorageError (ACCESS_CHECK_FAILED / PERMISSION_CREATE_FAILED).
        """
        parsed = self._parse_delegation(
            requesting_subject, receiving_subject, action, resource_id, resource_kind
        )
        if isinstance(parsed, Failure):
            return parsed
        required, granted = parsed.value

        denied = await self._authorize(required)
        if denied is not None:
            return Failure(error=denied)

        try:
            async with self._uow_factory() as uow:
                await uow.permissions.save(granted)
                await uow.commit()
        except DuplicateRecordError:
            self._logger.debug("permission_already_granted", permission=str(granted))
            return Success(value=granted)
        except RepositoryError as e:
            self._logger.error(
                "permission_create_failed", error=e, permission=str(granted)
            )
            return Failure(
                error=storage_failure(
                    e,
                    code=ErrorCode.PERMISSION_CREATE_FAILED,
                    message="Failed to create permission",
                )
            )

        self._logger.info(
            "permission_granted",
            permission=str(granted),
            granted_by=str(required.subject),
        )
        await publish_after_commit(
            self._event_bus,
            self._logger,
            PermissionGranted(permission=granted, granted_by=required.subject),
        )
        return Success(value=granted)

    async def revoke(
        self,
        requesting_subject: str,
        receiving_subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> Result[Permission, DomainError]:
        """Revoke a permission the requester also holds.

        Revoking a permission that is not stored is a no-op success.

        Returns:
            Success(Permission) that is no longer held, or Failure with
            ValidationError, AuthorizationError (UNAUTHORIZED) or
            StorageError (ACCESS_CHECK_FAILED / PERMISSION_DELETE_FAILED).
        """
        parsed = self._parse_delegation(
            requesting_subject, receiving_subject, action, resource_id, resource_kind
        )
        if isinstance(parsed, Failure):
            return parsed
        required, revoked = parsed.value

        denied = await self._authorize(required)
        if denied is not None:
            return Failure(error=denied)

        try:
            async with self._uow_factory() as uow:
                removed = await uow.permissions.delete(revoked)
                await uow.commit()
        except RepositoryError as e:
            self._logger.error(
                "permission_delete_failed", error=e, permission=str(revoked)
            )
            return Failure(
                error=storage_failure(
                    e,
                    code=ErrorCode.PERMISSION_DELETE_FAILED,
                    message="Failed to delete permission",
                )
            )

        if not removed:
            self._logger.debug("permission_not_held", permission=str(revoked))
            return Success(value=revoked)

        self._logger.info(
            "permission_revoked",
            permission=str(revoked),
            revoked_by=str(required.subject),
        )
        await publish_after_commit(
            self._event_bus,
            self._logger,
            PermissionRevoked(permission=revoked, revoked_by=required.subject),
        )
        return Success(value=revoked)

    async def list_permissions(self, subject: str) -> Result[list[Permission], DomainError]:
        """List every permission held by a subject."""
        try:
            subject_id = Identifier.parse(subject, field="subject")
        except ParseError as e:
            return Failure(error=invalid_input(e))

        try:
            async with self._uow_factory() as uow:
                permissions = await uow.permissions.find_by_subject(subject_id)
        except RepositoryError as e:
            self._logger.error("permission_list_failed", error=e, subject=subject)
            return Failure(error=storage_failure(e))
        return Success(value=permissions)

    def _parse_delegation(
        self,
        requesting_subject: str,
        receiving_subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> Result[tuple[Permission, Permission], DomainError]:
        """Parse the requester's required permission and the receiver's."""
        try:
            required = Permission.from_parts(
                requesting_subject, action, resource_id, resource_kind
            )
            receiver = Identifier.parse(receiving_subject, field="receiving_subject")
        except ParseError as e:
            if e.field == "subject":
                e = e.with_field("requesting_subject")
            return Failure(error=invalid_input(e))
        return Success(value=(required, required.for_subject(receiver)))

    async def _authorize(self, required: Permission) -> DomainError | None:
        """Return the error that stops a delegation, or None if allowed."""
        match await self.check(required):
            case Failure(error=error):
                return error
            case Success(value=False):
                self._logger.warning("permission_denied", required=str(required))
                return AuthorizationError(
                    code=ErrorCode.UNAUTHORIZED,
                    message="Requester does not hold the permission being delegated",
                    required_permission=str(required),
                )
        return None
