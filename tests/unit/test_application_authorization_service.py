"""Unit tests for AuthorizationService.

Tests cover:
- has_permission / evaluate: parse failures, storage failures, allowed/denied
- grant: self-hosting pre-check, idempotent duplicate, storage failures,
  post-commit event publication
- revoke: pre-check, no-op when absent, event only on actual delete
- list_permissions

Architecture:
- Mocked unit of work, event bus and logger
"""

import pytest

from tenant_identity.application.services import AuthorizationService
from tenant_identity.core.enums import ErrorCode
from tenant_identity.core.errors import AuthorizationError, StorageError, ValidationError
from tenant_identity.core.result import Failure, Success
from tenant_identity.domain.errors import DuplicateRecordError, RepositoryError
from tenant_identity.domain.events import PermissionGranted, PermissionRevoked
from tenant_identity.domain.value_objects import Identifier, Permission

OWNER = "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f"
READER = "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e10"


@pytest.fixture
def service(fake_uow_factory, mock_event_bus, mock_logger) -> AuthorizationService:
    return AuthorizationService(
        uow_factory=fake_uow_factory,
        event_bus=mock_event_bus,
        logger=mock_logger,
    )


def grant_args(**overrides) -> dict[str, str]:
    args = {
        "requesting_subject": OWNER,
        "receiving_subject": READER,
        "action": "read-user",
        "resource_id": OWNER,
        "resource_kind": "user",
    }
    args.update(overrides)
    return args


@pytest.mark.unit
class TestHasPermission:
    """Test permission checks."""

    async def test_returns_true_when_stored(self, service, fake_uow):
        # Arrange
        fake_uow.permissions.exists.return_value = True

        # Act
        result = await service.has_permission(OWNER, "write-user", OWNER, "user")

        # Assert
        assert result == Success(value=True)
        checked = fake_uow.permissions.exists.call_args.args[0]
        assert checked == Permission.from_parts(OWNER, "write-user", OWNER, "user")

    async def test_returns_false_when_absent(self, service, fake_uow):
        fake_uow.permissions.exists.return_value = False

        result = await service.has_permission(OWNER, "write-user", OWNER, "user")

        assert result == Success(value=False)

    async def test_evaluate_returns_canonical_permission(self, service, fake_uow):
        # Arrange
        fake_uow.permissions.exists.return_value = True

        # Act
        result = await service.evaluate(OWNER.upper(), "write-user", OWNER, "user")

        # Assert
        permission, allowed = result.value
        assert allowed is True
        assert str(permission) == f"{OWNER}:write-user:{OWNER}:user"

    @pytest.mark.parametrize(
        ("subject", "action", "resource_kind", "field"),
        [
            ("nope", "write-user", "user", "subject"),
            (OWNER, "writeuser", "user", "action"),
            (OWNER, "write-user", "group", "resource_kind"),
        ],
    )
    async def test_malformed_input_is_validation_error(
        self, service, fake_uow, subject, action, resource_kind, field
    ):
        # Act
        result = await service.has_permission(subject, action, OWNER, resource_kind)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == field
        fake_uow.permissions.exists.assert_not_called()

    async def test_storage_failure_is_access_check_failed(self, service, fake_uow):
        # Arrange
        fake_uow.permissions.exists.side_effect = RepositoryError(
            "disk I/O error", operation="permissions.exists"
        )

        # Act
        result = await service.has_permission(OWNER, "write-user", OWNER, "user")

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, StorageError)
        assert result.error.code == ErrorCode.ACCESS_CHECK_FAILED
        assert result.error.operation == "permissions.exists"


@pytest.mark.unit
class TestGrant:
    """Test delegation of permissions."""

    async def test_grant_inserts_commits_and_publishes(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True

        # Act
        result = await service.grant(**grant_args())

        # Assert
        expected = Permission.from_parts(READER, "read-user", OWNER, "user")
        assert result == Success(value=expected)
        fake_uow.permissions.save.assert_awaited_once_with(expected)
        fake_uow.commit.assert_awaited_once()
        event = mock_event_bus.publish.call_args.args[0]
        assert isinstance(event, PermissionGranted)
        assert event.permission == expected
        assert event.granted_by == Identifier(OWNER)

    async def test_requester_must_hold_the_same_permission(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = False

        # Act
        result = await service.grant(**grant_args())

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        assert result.error.required_permission == f"{OWNER}:read-user:{OWNER}:user"
        fake_uow.permissions.save.assert_not_called()
        mock_event_bus.publish.assert_not_called()

    async def test_precheck_uses_requester_as_subject(self, service, fake_uow):
        fake_uow.permissions.exists.return_value = False

        await service.grant(**grant_args())

        checked = fake_uow.permissions.exists.call_args.args[0]
        assert checked.subject == Identifier(OWNER)

    async def test_precheck_storage_failure(self, service, fake_uow):
        # Arrange
        fake_uow.permissions.exists.side_effect = RepositoryError(
            "locked", operation="permissions.exists"
        )

        # Act
        result = await service.grant(**grant_args())

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCESS_CHECK_FAILED
        fake_uow.permissions.save.assert_not_called()

    async def test_duplicate_grant_is_silent_success(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        fake_uow.permissions.save.side_effect = DuplicateRecordError(
            "UNIQUE constraint failed", operation="permissions.save"
        )

        # Act
        result = await service.grant(**grant_args())

        # Assert
        assert isinstance(result, Success)
        mock_event_bus.publish.assert_not_called()

    async def test_insert_failure_is_permission_create_failed(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        fake_uow.permissions.save.side_effect = RepositoryError(
            "FOREIGN KEY constraint failed", operation="permissions.save"
        )

        # Act
        result = await service.grant(**grant_args())

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, StorageError)
        assert result.error.code == ErrorCode.PERMISSION_CREATE_FAILED
        mock_event_bus.publish.assert_not_called()

    async def test_invalid_requester_field_name(self, service):
        result = await service.grant(**grant_args(requesting_subject="bad"))

        assert isinstance(result, Failure)
        assert result.error.field == "requesting_subject"

    async def test_invalid_receiver_field_name(self, service):
        result = await service.grant(**grant_args(receiving_subject="bad"))

        assert isinstance(result, Failure)
        assert result.error.field == "receiving_subject"

    async def test_closed_bus_does_not_fail_grant(
        self, service, fake_uow, mock_event_bus, mock_logger
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        mock_event_bus.publish.return_value = False

        # Act
        result = await service.grant(**grant_args())

        # Assert
        assert isinstance(result, Success)
        warnings = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "event_publish_failed" in warnings


@pytest.mark.unit
class TestRevoke:
    """Test revocation."""

    async def test_revoke_deletes_and_publishes(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        fake_uow.permissions.delete.return_value = True

        # Act
        result = await service.revoke(**grant_args())

        # Assert
        expected = Permission.from_parts(READER, "read-user", OWNER, "user")
        assert result == Success(value=expected)
        fake_uow.permissions.delete.assert_awaited_once_with(expected)
        event = mock_event_bus.publish.call_args.args[0]
        assert isinstance(event, PermissionRevoked)
        assert event.revoked_by == Identifier(OWNER)

    async def test_revoking_absent_permission_is_noop_success(
        self, service, fake_uow, mock_event_bus
    ):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        fake_uow.permissions.delete.return_value = False

        # Act
        result = await service.revoke(**grant_args())

        # Assert
        assert isinstance(result, Success)
        mock_event_bus.publish.assert_not_called()

    async def test_revoke_requires_same_permission(self, service, fake_uow):
        fake_uow.permissions.exists.return_value = False

        result = await service.revoke(**grant_args())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNAUTHORIZED
        fake_uow.permissions.delete.assert_not_called()

    async def test_delete_failure_is_permission_delete_failed(self, service, fake_uow):
        # Arrange
        fake_uow.permissions.exists.return_value = True
        fake_uow.permissions.delete.side_effect = RepositoryError(
            "locked", operation="permissions.delete"
        )

        # Act
        result = await service.revoke(**grant_args())

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DELETE_FAILED


@pytest.mark.unit
class TestListPermissions:
    """Test listing."""

    async def test_lists_subject_permissions(self, service, fake_uow):
        # Arrange
        held = [Permission.from_parts(OWNER, "read-user", OWNER, "user")]
        fake_uow.permissions.find_by_subject.return_value = held

        # Act
        result = await service.list_permissions(OWNER)

        # Assert
        assert result == Success(value=held)
        fake_uow.permissions.find_by_subject.assert_awaited_once_with(Identifier(OWNER))

    async def test_invalid_subject(self, service):
        result = await service.list_permissions("nope")

        assert isinstance(result, Failure)
        assert result.error.field == "subject"
