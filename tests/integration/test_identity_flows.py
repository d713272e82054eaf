"""End-to-end service flows against a real SQLite database.

Tests cover:
- Self-hosted grant / revoke between real users
- Idempotent grant (one row, one event)
- create_user atomicity (duplicate email leaves no user behind)
- delete_user authorization and cascade
- Events published only after commit, observed through the real bus
- Tenant create / delete with owner permissions
"""

import asyncio

import pytest
from sqlalchemy import text

from tenant_identity.application.services import (
    AuthorizationService,
    ProfileService,
    TenantService,
    UserService,
)
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.result import Failure, Success
from tenant_identity.domain.events import (
    PermissionGranted,
    ProfileDeleted,
    TenantCreated,
    UserCreated,
    UserDeleted,
)
from tenant_identity.infrastructure.events import EventBusClosed

TENANT_ID = "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f"


@pytest.fixture
def authorization(uow_factory, event_bus, mock_logger):
    return AuthorizationService(uow_factory, event_bus, mock_logger)


@pytest.fixture
def users(uow_factory, authorization, event_bus, mock_logger):
    return UserService(uow_factory, authorization, event_bus, mock_logger)


@pytest.fixture
def profiles(uow_factory, event_bus, mock_logger):
    return ProfileService(uow_factory, event_bus, mock_logger)


@pytest.fixture
def tenants(uow_factory, authorization, event_bus, mock_logger):
    return TenantService(uow_factory, authorization, event_bus, mock_logger)


async def sign_up(users: UserService, email: str):
    result = await users.create_user(email, TENANT_ID)
    assert isinstance(result, Success)
    return result.value


async def received(event_bus, subscription) -> list:
    """Close the bus and collect everything the subscription still holds."""
    await event_bus.close()
    events = []
    while True:
        try:
            events.append(await asyncio.wait_for(subscription.recv(), timeout=1))
        except EventBusClosed:
            return events


async def count_rows(database, table: str) -> int:
    async with database.get_session() as session:
        result = await session.execute(text(f"SELECT COUNT(*) FROM {table}"))
    return result.scalar_one()


@pytest.mark.integration
class TestCreateUserFlow:
    """Test user creation against storage."""

    async def test_new_user_holds_owner_permissions(self, users, authorization):
        # Arrange / Act
        user = await sign_up(users, "alice@example.com")

        # Assert
        for action in ("read-user", "write-user"):
            result = await authorization.has_permission(
                str(user.id), action, str(user.id), "user"
            )
            assert result == Success(value=True)

    async def test_duplicate_email_rolls_back_user(self, users, database, event_bus):
        # Arrange
        await sign_up(users, "alice@example.com")
        subscription = event_bus.subscribe()

        # Act
        result = await users.create_user("ALICE@example.com", TENANT_ID)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert await count_rows(database, "users") == 1
        assert await count_rows(database, "permissions") == 2
        assert await received(event_bus, subscription) == []

    async def test_profile_found_by_email(self, users, profiles):
        user = await sign_up(users, "bob@example.com")

        result = await profiles.find_profile("bob@example.com")

        assert isinstance(result, Success)
        assert result.value.user_id == user.id

    async def test_subscriber_sees_committed_user(self, users, event_bus):
        # Arrange
        subscription = event_bus.subscribe()

        # Act
        user = await sign_up(users, "carol@example.com")
        event = await asyncio.wait_for(subscription.recv(), timeout=1)

        # Assert
        assert isinstance(event, UserCreated)
        assert event.user == user
        assert await users.find_user(str(event.user.id)) == Success(value=user)


@pytest.mark.integration
class TestDeleteUserFlow:
    """Test user deletion against storage."""

    async def test_owner_deletes_self_with_cascade(
        self, users, profiles, database, event_bus
    ):
        # Arrange
        user = await sign_up(users, "dave@example.com")
        subscription = event_bus.subscribe()

        # Act
        result = await users.delete_user(str(user.id), str(user.id))

        # Assert
        assert result == Success(value=None)
        assert (await users.find_user(str(user.id))).error.code == (
            ErrorCode.USER_NOT_FOUND
        )
        assert (await profiles.find_profile("dave@example.com")).error.code == (
            ErrorCode.PROFILE_NOT_FOUND
        )
        assert await count_rows(database, "permissions") == 0
        events = await received(event_bus, subscription)
        assert [type(e) for e in events] == [UserDeleted, ProfileDeleted]

    async def test_other_user_cannot_delete(self, users):
        # Arrange
        victim = await sign_up(users, "victim@example.com")
        actor = await sign_up(users, "actor@example.com")

        # Act
        result = await users.delete_user(str(actor.id), str(victim.id))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert await users.find_user(str(victim.id)) == Success(value=victim)

    async def test_delegated_write_allows_delete(self, users, authorization):
        # Arrange
        victim = await sign_up(users, "victim@example.com")
        actor = await sign_up(users, "actor@example.com")
        await authorization.grant(
            str(victim.id), str(actor.id), "write-user", str(victim.id), "user"
        )

        # Act
        result = await users.delete_user(str(actor.id), str(victim.id))

        # Assert
        assert result == Success(value=None)


@pytest.mark.integration
class TestPermissionDelegation:
    """Test grant / revoke between two real users."""

    async def test_holder_can_grant_and_revoke(self, users, authorization):
        # Arrange
        owner = await sign_up(users, "owner@example.com")
        reader = await sign_up(users, "reader@example.com")
        args = (str(owner.id), str(reader.id), "read-user", str(owner.id), "user")
        check = (str(reader.id), "read-user", str(owner.id), "user")

        # Act
        granted = await authorization.grant(*args)
        held = await authorization.has_permission(*check)
        revoked = await authorization.revoke(*args)
        after = await authorization.has_permission(*check)

        # Assert
        assert isinstance(granted, Success)
        assert held == Success(value=True)
        assert isinstance(revoked, Success)
        assert after == Success(value=False)

    async def test_non_holder_cannot_grant(self, users, authorization):
        # Arrange
        owner = await sign_up(users, "owner@example.com")
        intruder = await sign_up(users, "intruder@example.com")

        # Act
        result = await authorization.grant(
            str(intruder.id), str(intruder.id), "write-user", str(owner.id), "user"
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        held = await authorization.has_permission(
            str(intruder.id), "write-user", str(owner.id), "user"
        )
        assert held == Success(value=False)

    async def test_double_grant_stores_one_row_and_publishes_once(
        self, users, authorization, uow_factory, event_bus
    ):
        # Arrange
        owner = await sign_up(users, "owner@example.com")
        reader = await sign_up(users, "reader@example.com")
        subscription = event_bus.subscribe()
        args = (str(owner.id), str(reader.id), "read-user", str(owner.id), "user")

        # Act
        first = await authorization.grant(*args)
        second = await authorization.grant(*args)

        # Assert
        assert first == second
        async with uow_factory() as uow:
            held = await uow.permissions.find_by_subject(reader.id)
        assert held.count(first.value) == 1
        events = await received(event_bus, subscription)
        assert [type(e) for e in events] == [PermissionGranted]


@pytest.mark.integration
class TestTenantFlow:
    """Test tenant lifecycle against storage."""

    async def test_creator_owns_and_can_delete_tenant(
        self, users, tenants, authorization, event_bus
    ):
        # Arrange
        creator = await sign_up(users, "founder@example.com")
        subscription = event_bus.subscribe()

        # Act
        created = await tenants.create_tenant(str(creator.id), "  Acme  ")
        tenant = created.value
        can_write = await authorization.has_permission(
            str(creator.id), "write-tenant", str(tenant.id), "tenant"
        )
        deleted = await tenants.delete_tenant(str(creator.id), str(tenant.id))

        # Assert
        assert tenant.name == "Acme"
        assert can_write == Success(value=True)
        assert deleted == Success(value=None)
        assert (await tenants.find_tenant(str(tenant.id))).error.code == (
            ErrorCode.TENANT_NOT_FOUND
        )
        events = await received(event_bus, subscription)
        assert isinstance(events[0], TenantCreated)

    async def test_unknown_creator_is_rejected(self, tenants):
        result = await tenants.create_tenant(TENANT_ID, "Acme")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND

    async def test_non_owner_cannot_delete_tenant(self, users, tenants):
        # Arrange
        creator = await sign_up(users, "founder@example.com")
        other = await sign_up(users, "other@example.com")
        tenant = (await tenants.create_tenant(str(creator.id), "Acme")).value

        # Act
        result = await tenants.delete_tenant(str(other.id), str(tenant.id))

        # Assert
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert await tenants.find_tenant(str(tenant.id)) == Success(value=tenant)
