"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_identity.domain.entities import User
from tenant_identity.domain.value_objects import Identifier
from tenant_identity.infrastructure.persistence.base import as_utc
from tenant_identity.infrastructure.persistence.errors import translate_error
from tenant_identity.infrastructure.persistence.models import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing). It never commits; the unit of work does.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with uow_factory() as uow:
        ...     user = await uow.users.find_by_id(user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: Identifier) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.

        Raises:
            RepositoryError: If the query fails.
        """
        stmt = select(UserModel).where(UserModel.id == user_id.uuid)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "users.find_by_id") from e
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def save(self, user: User) -> User:
        """Insert a new user and flush so constraint violations surface here.

        Args:
            user: Domain User entity to persist.

        Returns:
            The persisted user.

        Raises:
            DuplicateRecordError: If id or auth_id already exists.
            RepositoryError: On any other storage failure.
        """
        self.session.add(self._to_model(user))
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise translate_error(e, "users.save") from e
        return user

    async def delete(self, user_id: Identifier) -> None:
        """Delete user by ID (no-op if absent).

        Args:
            user_id: User's unique identifier.

        Raises:
            RepositoryError: If the delete fails.
        """
        stmt = delete(UserModel).where(UserModel.id == user_id.uuid)
        try:
            await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise translate_error(e, "users.delete") from e

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=Identifier(user_model.id),
            auth_id=user_model.auth_id,
            created_at=as_utc(user_model.created_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model.

        Args:
            user: Domain User entity.

        Returns:
            SQLAlchemy UserModel instance.
        """
        return UserModel(
            id=user.id.uuid,
            auth_id=user.auth_id,
            created_at=user.created_at,
        )
