"""Profile service: profile lookup and standalone profile creation.

Profiles are normally created together with their user by
UserService.create_user; create_profile covers users created without one.
"""

from tenant_identity.application.services.common import (
    invalid_input,
    publish_after_commit,
    storage_failure,
)
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import ConflictError, DomainError, NotFoundError
from tenant_identity.core.result import Failure, Result, Success
from tenant_identity.domain.entities import Profile
from tenant_identity.domain.errors import (
    DuplicateRecordError,
    ParseError,
    RepositoryError,
)
from tenant_identity.domain.events import ProfileCreated
from tenant_identity.domain.protocols.event_bus_protocol import EventBusProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from tenant_identity.domain.value_objects import Email, Identifier


class ProfileService:
    """Profile lookup and creation."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._event_bus = event_bus
        self._logger = logger

    async def find_profile(self, email: str) -> Result[Profile, DomainError]:
        """Find a profile by email (case-insensitive).

        Returns:
            Success(Profile), or Failure with ValidationError,
            NotFoundError or StorageError.
        """
        try:
            address = Email(email)
        except ValueError as e:
            return Failure(
                error=invalid_input(e, field="email", code=ErrorCode.INVALID_EMAIL)
            )

        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.find_by_email(address)
        except RepositoryError as e:
            self._logger.error("profile_lookup_failed", error=e)
            return Failure(error=storage_failure(e))

        if profile is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PROFILE_NOT_FOUND,
                    message="Profile not found",
                    resource_type="Profile",
                    resource_id=address.value,
                )
            )
        return Success(value=profile)

    async def create_profile(
        self, user_id: str, email: str
    ) -> Result[Profile, DomainError]:
        """Create the profile of an existing user.

        Returns:
            Success(Profile), or Failure with ValidationError, NotFoundError
            (unknown user), ConflictError (user already has a profile or the
            email is taken) or StorageError.
        """
        try:
            owner = Identifier.parse(user_id, field="user_id")
        except ParseError as e:
            return Failure(error=invalid_input(e, code=ErrorCode.INVALID_IDENTIFIER))
        try:
            address = Email(email)
        except ValueError as e:
            return Failure(
                error=invalid_input(e, field="email", code=ErrorCode.INVALID_EMAIL)
            )

        profile = Profile(user_id=owner, email=address)
        try:
            async with self._uow_factory() as uow:
                if await uow.users.find_by_id(owner) is None:
                    return Failure(
                        error=NotFoundError(
                            code=ErrorCode.USER_NOT_FOUND,
                            message="User not found",
                            resource_type="User",
                            resource_id=str(owner),
                        )
                    )
                await uow.profiles.save(profile)
                await uow.commit()
        except DuplicateRecordError:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="User already has a profile or email is taken",
                    resource_type="Profile",
                    conflicting_field="email",
                )
            )
        except RepositoryError as e:
            self._logger.error("profile_create_failed", error=e, user_id=str(owner))
            return Failure(error=storage_failure(e, message="Failed to create profile"))

        self._logger.info("profile_created", user_id=str(owner))
        await publish_after_commit(
            self._event_bus, self._logger, ProfileCreated(profile=profile)
        )
        return Success(value=profile)
