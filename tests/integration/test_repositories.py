"""Integration tests for the SQLAlchemy repositories and unit of work.

Tests cover:
- User / profile / tenant / permission round trips
- Unique constraints surface as DuplicateRecordError
- Foreign keys are enforced (SQLite PRAGMA foreign_keys=ON)
- Cascades on user delete
- Rollback when a unit of work exits without commit

Architecture:
- Integration tests with a REAL SQLite database (fresh file per test)
"""

import pytest
from sqlalchemy import text

from tenant_identity.domain.entities import Profile, Tenant, User
from tenant_identity.domain.errors import DuplicateRecordError, RepositoryError
from tenant_identity.domain.value_objects import Email, Identifier, Permission
from tenant_identity.infrastructure.persistence.unit_of_work import (
    SqlAlchemyUnitOfWork,
)


async def insert_user(uow_factory, email: str | None = None) -> User:
    user = User.create(auth_id=str(Identifier.new()))
    async with uow_factory() as uow:
        await uow.users.save(user)
        if email is not None:
            await uow.profiles.save(Profile(user_id=user.id, email=Email(email)))
        await uow.commit()
    return user


@pytest.mark.integration
class TestUserAndProfileRepositories:
    """Test user and profile persistence."""

    async def test_user_round_trip(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory)

        # Act
        async with uow_factory() as uow:
            found = await uow.users.find_by_id(user.id)

        # Assert
        assert found == user

    async def test_missing_user_is_none(self, uow_factory):
        async with uow_factory() as uow:
            assert await uow.users.find_by_id(Identifier.new()) is None

    async def test_profile_lookup_by_email_and_user(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory, email="carol@example.com")

        # Act
        async with uow_factory() as uow:
            by_email = await uow.profiles.find_by_email(Email("CAROL@example.com"))
            by_user = await uow.profiles.find_by_user_id(user.id)

        # Assert
        assert by_email == by_user == Profile(
            user_id=user.id, email=Email("carol@example.com")
        )

    async def test_duplicate_email_raises_duplicate(self, uow_factory):
        # Arrange
        await insert_user(uow_factory, email="carol@example.com")

        # Act / Assert
        with pytest.raises(DuplicateRecordError) as exc_info:
            await insert_user(uow_factory, email="carol@example.com")
        assert exc_info.value.operation == "profiles.save"

    async def test_profile_requires_existing_user(self, uow_factory):
        profile = Profile(user_id=Identifier.new(), email=Email("dan@example.com"))

        with pytest.raises(RepositoryError) as exc_info:
            async with uow_factory() as uow:
                await uow.profiles.save(profile)
                await uow.commit()

        assert not isinstance(exc_info.value, DuplicateRecordError)


@pytest.mark.integration
class TestPermissionRepository:
    """Test permission persistence."""

    async def test_exists_matches_full_key_only(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory)
        stored = Permission.from_parts(str(user.id), "read-user", str(user.id), "user")
        async with uow_factory() as uow:
            await uow.permissions.save(stored)
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            held = await uow.permissions.exists(stored)
            other_verb = await uow.permissions.exists(
                Permission.from_parts(str(user.id), "write-user", str(user.id), "user")
            )
            other_kind = await uow.permissions.exists(
                Permission.from_parts(str(user.id), "read-user", str(user.id), "tenant")
            )

        # Assert
        assert held is True
        assert other_verb is False
        assert other_kind is False

    async def test_duplicate_permission_raises_duplicate(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory)
        permission = Permission.from_parts(
            str(user.id), "read-user", str(user.id), "user"
        )
        async with uow_factory() as uow:
            await uow.permissions.save(permission)
            await uow.commit()

        # Act / Assert
        with pytest.raises(DuplicateRecordError):
            async with uow_factory() as uow:
                await uow.permissions.save(permission)

    async def test_delete_reports_whether_a_row_was_removed(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory)
        permission = Permission.from_parts(
            str(user.id), "read-user", str(user.id), "user"
        )
        async with uow_factory() as uow:
            await uow.permissions.save(permission)
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            first = await uow.permissions.delete(permission)
            second = await uow.permissions.delete(permission)
            await uow.commit()

        # Assert
        assert first is True
        assert second is False

    async def test_find_by_subject(self, uow_factory):
        # Arrange
        user = await insert_user(uow_factory)
        expected = user.owner_permissions()
        async with uow_factory() as uow:
            for permission in expected:
                await uow.permissions.save(permission)
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            held = await uow.permissions.find_by_subject(user.id)

        # Assert
        assert set(held) == set(expected)


@pytest.mark.integration
class TestUnitOfWork:
    """Test transaction boundaries and cascades."""

    async def test_exit_without_commit_rolls_back(self, uow_factory):
        # Arrange
        user = User.create(auth_id="auth")

        # Act
        async with uow_factory() as uow:
            await uow.users.save(user)

        # Assert
        async with uow_factory() as uow:
            assert await uow.users.find_by_id(user.id) is None

    async def test_user_delete_cascades_to_profile_and_held_permissions(
        self, uow_factory, database
    ):
        # Arrange
        user = await insert_user(uow_factory, email="erin@example.com")
        async with uow_factory() as uow:
            for permission in user.owner_permissions():
                await uow.permissions.save(permission)
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            await uow.users.delete(user.id)
            await uow.commit()

        # Assert
        async with uow_factory() as uow:
            assert await uow.profiles.find_by_user_id(user.id) is None
            assert await uow.permissions.find_by_subject(user.id) == []

    async def test_tenant_round_trip_and_delete(self, uow_factory):
        # Arrange
        tenant = Tenant.create("Acme")
        async with uow_factory() as uow:
            await uow.tenants.save(tenant)
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            found = await uow.tenants.find_by_id(tenant.id)
            await uow.tenants.delete(tenant.id)
            await uow.commit()

        # Assert
        assert found == tenant
        async with uow_factory() as uow:
            assert await uow.tenants.find_by_id(tenant.id) is None

    async def test_use_outside_context_raises(self, database):
        uow = SqlAlchemyUnitOfWork(database)

        with pytest.raises(RuntimeError):
            await uow.commit()


@pytest.mark.integration
class TestDatabase:
    """Test Database helpers."""

    async def test_check_connection(self, database):
        assert await database.check_connection() is True

    async def test_foreign_keys_pragma_is_on(self, database):
        async with database.get_session() as session:
            result = await session.execute(text("PRAGMA foreign_keys"))

        assert result.scalar() == 1
