"""ProfileRepository - SQLAlchemy implementation of ProfileRepository protocol."""

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_identity.domain.entities import Profile
from tenant_identity.domain.value_objects import Email, Identifier
from tenant_identity.infrastructure.persistence.errors import translate_error
from tenant_identity.infrastructure.persistence.models import ProfileModel


class ProfileRepository:
    """SQLAlchemy implementation of ProfileRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_id(self, user_id: Identifier) -> Profile | None:
        """Find the profile owned by a user.

        Raises:
            RepositoryError: If the query fails.
        """
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id.uuid)
        return await self._find_one(stmt, "profiles.find_by_user_id")

    async def find_by_email(self, email: Email) -> Profile | None:
        """Find a profile by email.

        Stored emails are already lower-cased, so this is an exact match.

        Raises:
            RepositoryError: If the query fails.
        """
        stmt = select(ProfileModel).where(ProfileModel.email == email.value)
        return await self._find_one(stmt, "profiles.find_by_email")

    async def save(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            DuplicateRecordError: If the user already has a profile or the
                email is taken.
            RepositoryError: On any other storage failure.
        """
        self.session.add(
            ProfileModel(user_id=profile.user_id.uuid, email=profile.email.value)
        )
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise translate_error(e, "profiles.save") from e
        return profile

    async def delete(self, user_id: Identifier) -> None:
        """Delete the profile owned by a user (no-op if absent)."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id.uuid)
        try:
            await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "profiles.delete") from e

    async def _find_one(
        self, stmt: Select[tuple[ProfileModel]], operation: str
    ) -> Profile | None:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, operation) from e
        profile_model = result.scalar_one_or_none()
        if profile_model is None:
            return None
        return self._to_domain(profile_model)

    def _to_domain(self, profile_model: ProfileModel) -> Profile:
        return Profile(
            user_id=Identifier(profile_model.user_id),
            email=Email(profile_model.email),
        )
