"""User service: create, find and delete users.

create_user flow (one transaction):
1. Validate email and tenant id (ValidationError, no transaction opened)
2. Mint a User with a fresh id and a mocked external auth id
3. Insert the user, its profile and its two owner permissions
   (read-user, write-user on itself), written directly rather than
   through grant, since a brand-new subject cannot hold anything yet
4. Commit; any failure in 3-4 rolls back everything
5. After commit, publish UserCreated

delete_user flow:
1. The acting subject must hold write-user on the target user
   (PERMISSION_DENIED otherwise)
2. Delete the user row and commit; the schema cascades to the profile and
   to the permissions the user held
3. After commit, publish UserDeleted, then ProfileDeleted if the user had
   a profile

Event publication always follows the commit, so a subscriber that sees
UserCreated can already find the user. A publish failure is logged and
never undoes the committed work.
"""

from uuid import uuid4

from tenant_identity.application.services.authorization_service import (
    AuthorizationService,
)
from tenant_identity.application.services.common import (
    invalid_input,
    publish_after_commit,
    storage_failure,
)
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from tenant_identity.core.result import Failure, Result, Success
from tenant_identity.domain.entities import Profile, User
from tenant_identity.domain.enums import ResourceKind
from tenant_identity.domain.errors import (
    DuplicateRecordError,
    ParseError,
    RepositoryError,
)
from tenant_identity.domain.events import ProfileDeleted, UserCreated, UserDeleted
from tenant_identity.domain.protocols.event_bus_protocol import EventBusProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from tenant_identity.domain.value_objects import (
    Actionable,
    Email,
    Identifier,
    Permission,
    Resource,
)


def mock_auth_id() -> str:
    """Placeholder external authentication id until a credential provider exists."""
    return str(uuid4())


class UserService:
    """User lifecycle service.

    Follows hexagonal architecture:
    - Application layer (this service)
    - Domain layer (entities, value objects, protocols)
    - Infrastructure reached only through injected protocols
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        authorization: AuthorizationService,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize user service with dependencies.

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

    async def find_user(self, user_id: str) -> Result[User, DomainError]:
        """Find a user by id.

        Returns:
            Success(User), or Failure with ValidationError, NotFoundError
            or StorageError.
        """
        try:
            identifier = Identifier.parse(user_id, field="user_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))

        try:
            async with self._uow_factory() as uow:
                user = await uow.users.find_by_id(identifier)
        except RepositoryError as e:
            self._logger.error("user_lookup_failed", error=e, user_id=user_id)
            return Failure(error=storage_failure(e))

        if user is None:
            return Failure(error=_user_not_found(identifier))
        return Success(value=user)

    async def create_user(self, email: str, tenant_id: str) -> Result[User, DomainError]:
        """Create a user with its profile and owner permissions.

        The tenant id is checked for syntax only; tenant membership is
        not stored.

        Args:
            email: Raw email address.
            tenant_id: Tenant identifier supplied at sign-up.

        Returns:
            Success(User), or Failure with ValidationError, ConflictError
            (email already registered) or StorageError.
        """
        try:
            address = Email(email)
        except ValueError as e:
            return Failure(
                error=invalid_input(e, field="email", code=ErrorCode.INVALID_EMAIL)
            )
        try:
            tenant = Identifier.parse(tenant_id, field="tenant_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))

        user = User.create(auth_id=mock_auth_id())
        try:
            async with self._uow_factory() as uow:
                await uow.users.save(user)
                await uow.profiles.save(Profile(user_id=user.id, email=address))
                for permission in user.owner_permissions():
                    await uow.permissions.save(permission)
                await uow.commit()
        except DuplicateRecordError as e:
            self._logger.warning(
                "user_create_conflict", operation=e.operation, tenant_id=str(tenant)
            )
            return Failure(error=_conflict(e))
        except RepositoryError as e:
            self._logger.error("user_create_failed", error=e, operation=e.operation)
            return Failure(error=storage_failure(e, message="Failed to create user"))

        self._logger.info("user_created", user_id=str(user.id), tenant_id=str(tenant))
        await publish_after_commit(
            self._event_bus,
            self._logger,
            UserCreated(user=user, tenant_id=tenant),
        )
        return Success(value=user)

    async def delete_user(
        self, acting_subject: str, user_id: str
    ) -> Result[None, DomainError]:
        """Delete a user on behalf of a subject holding write-user on it.

        Args:
            acting_subject: Subject performing the deletion.
            user_id: User to delete.

        Returns:
            Success(None), or Failure with ValidationError,
            AuthorizationError (PERMISSION_DENIED), NotFoundError or
            StorageError.
        """
        try:
            actor = Identifier.parse(acting_subject, field="acting_subject")
            target = Identifier.parse(user_id, field="user_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))

        required = Permission(
            subject=actor,
            action=Actionable.write(ResourceKind.USER),
            resource=Resource.user(target),
        )
        match await self._authorization.check(required):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=False):
                self._logger.warning("user_delete_denied", required=str(required))
                return Failure(
                    error=AuthorizationError(
                        code=ErrorCode.PERMISSION_DENIED,
                        message="Acting subject may not delete this user",
                        required_permission=str(required),
                    )
                )

        try:
            async with self._uow_factory() as uow:
                if await uow.users.find_by_id(target) is None:
                    return Failure(error=_user_not_found(target))
                profile = await uow.profiles.find_by_user_id(target)
                await uow.users.delete(target)
                await uow.commit()
        except RepositoryError as e:
            self._logger.error("user_delete_failed", error=e, user_id=str(target))
            return Failure(error=storage_failure(e, message="Failed to delete user"))

        self._logger.info("user_deleted", user_id=str(target), deleted_by=str(actor))
        await publish_after_commit(
            self._event_bus,
            self._logger,
            UserDeleted(user_id=target, deleted_by=actor),
        )
        if profile is not None:
            await publish_after_commit(
                self._event_bus, self._logger, ProfileDeleted(user_id=target)
            )
        return Success(value=None)


def _user_not_found(user_id: Identifier) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
        resource_id=str(user_id),
    )


def _conflict(error: DuplicateRecordError) -> ConflictError:
    if error.operation == "profiles.save":
        return ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message="Email already registered",
            resource_type="Profile",
            conflicting_field="email",
        )
    return ConflictError(
        code=ErrorCode.USER_ALREADY_EXISTS,
        message="User already exists",
        resource_type="User",
    )
