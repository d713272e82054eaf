"""Unit tests for the permission model value objects.

Tests cover:
- Identifier canonicalization and field attribution
- Target character rules
- Actionable parsing (delimiter, verb, target)
- Resource validation
- Permission parse/format, uniqueness key, for_subject

Architecture:
- Pure domain tests, no dependencies
"""

from uuid import UUID

import pytest

from tenant_identity.domain.enums import ResourceKind, Verb
from tenant_identity.domain.errors import (
    InvalidIdentifierError,
    InvalidResourceIdError,
    InvalidResourceKindError,
    InvalidTargetError,
    MalformedPermissionStringError,
    MissingDelimiterError,
    ParseError,
    UnknownVerbError,
)
from tenant_identity.domain.value_objects import (
    Actionable,
    Identifier,
    Permission,
    Resource,
    Target,
)

SUBJECT = "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e0f"
OTHER = "0190f2a4-6b1e-7c3d-8e4f-5a6b7c8d9e10"


# =============================================================================
# Identifier
# =============================================================================


@pytest.mark.unit
class TestIdentifier:
    """Test Identifier parsing and canonical form."""

    def test_canonicalizes_upper_case(self):
        """Upper-case input is stored in lower-case hyphenated form."""
        identifier = Identifier(SUBJECT.upper())

        assert identifier.value == SUBJECT
        assert str(identifier) == SUBJECT

    def test_accepts_uuid_instance(self):
        """A UUID instance is accepted and round-trips through .uuid."""
        identifier = Identifier(UUID(SUBJECT))

        assert identifier.uuid == UUID(SUBJECT)

    def test_equal_for_different_spellings(self):
        """Equality follows the canonical value."""
        assert Identifier(SUBJECT) == Identifier(SUBJECT.replace("-", ""))

    def test_new_generates_distinct_ids(self):
        """new() mints unique identifiers."""
        assert Identifier.new() != Identifier.new()

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234"])
    def test_rejects_invalid(self, raw):
        """Non-UUID input raises InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError):
            Identifier(raw)

    def test_parse_attributes_failure_to_field(self):
        """parse() reports the caller-supplied field name."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            Identifier.parse("garbage", field="user_id")

        assert exc_info.value.field == "user_id"


# =============================================================================
# Target / Actionable
# =============================================================================


@pytest.mark.unit
class TestTarget:
    """Test Target character rules."""

    @pytest.mark.parametrize("name", ["user", "tenant", "billing-report", "v2"])
    def test_accepts_alphanumerics_and_dash(self, name):
        assert str(Target(name)) == name

    @pytest.mark.parametrize("name", ["", "us er", "user:x", "ünicode", "a_b"])
    def test_rejects_other_characters(self, name):
        with pytest.raises(InvalidTargetError):
            Target(name)


@pytest.mark.unit
class TestActionable:
    """Test Actionable parsing and formatting."""

    def test_parse_write_user(self):
        """'write-user' parses to Write on the user target."""
        action = Actionable.parse("write-user")

        assert action.verb is Verb.WRITE
        assert action.target == Target("user")
        assert str(action) == "write-user"

    def test_parse_splits_on_first_dash_only(self):
        """Everything after the first '-' belongs to the target."""
        action = Actionable.parse("execute-billing-report")

        assert action.verb is Verb.EXECUTE
        assert str(action.target) == "billing-report"

    def test_missing_delimiter(self):
        with pytest.raises(MissingDelimiterError) as exc_info:
            Actionable.parse("writeuser")

        assert exc_info.value.field == "action"

    def test_unknown_verb(self):
        with pytest.raises(UnknownVerbError):
            Actionable.parse("delete-user")

    def test_verbs_are_case_sensitive(self):
        with pytest.raises(UnknownVerbError):
            Actionable.parse("Write-user")

    def test_empty_target_reported_on_action_field(self):
        """An invalid target inside an action is attributed to 'action'."""
        with pytest.raises(InvalidTargetError) as exc_info:
            Actionable.parse("read-")

        assert exc_info.value.field == "action"

    def test_constructors_accept_resource_kind(self):
        assert str(Actionable.read(ResourceKind.TENANT)) == "read-tenant"
        assert str(Actionable.write("user")) == "write-user"
        assert Actionable.execute(Target("job")).verb is Verb.EXECUTE


# =============================================================================
# Resource
# =============================================================================


@pytest.mark.unit
class TestResource:
    """Test Resource validation."""

    def test_from_parts(self):
        resource = Resource.from_parts(SUBJECT, "tenant")

        assert resource.kind is ResourceKind.TENANT
        assert resource.id == SUBJECT
        assert resource.target == Target("tenant")

    def test_unknown_kind(self):
        with pytest.raises(InvalidResourceKindError) as exc_info:
            Resource.from_parts(SUBJECT, "group")

        assert exc_info.value.field == "resource_kind"

    @pytest.mark.parametrize("resource_id", ["", "a:b"])
    def test_invalid_id(self, resource_id):
        with pytest.raises(InvalidResourceIdError):
            Resource.from_parts(resource_id, "user")

    def test_user_accepts_identifier(self):
        assert Resource.user(Identifier(SUBJECT)).id == SUBJECT


# =============================================================================
# Permission
# =============================================================================


@pytest.mark.unit
class TestPermission:
    """Test Permission parsing, formatting and keys."""

    def test_parse_and_format_are_inverse(self):
        """Formatting a parsed canonical string gives the same string."""
        raw = f"{SUBJECT}:write-user:{OTHER}:user"

        permission = Permission.parse(raw)

        assert str(permission) == raw
        assert Permission.parse(str(permission)) == permission

    def test_parse_structure(self):
        permission = Permission.parse(f"{SUBJECT}:read-tenant:{OTHER}:tenant")

        assert permission.subject == Identifier(SUBJECT)
        assert permission.action == Actionable.read(ResourceKind.TENANT)
        assert permission.resource == Resource.tenant(OTHER)

    def test_format_uses_canonical_subject(self):
        """A non-canonical subject spelling is normalized on output."""
        permission = Permission.from_parts(SUBJECT.upper(), "read-user", OTHER, "user")

        assert str(permission).startswith(SUBJECT + ":")

    @pytest.mark.parametrize(
        "raw",
        [
            f"{SUBJECT}:write-user:{OTHER}",
            f"{SUBJECT}:write-user:{OTHER}:user:extra",
            "",
        ],
    )
    def test_wrong_segment_count(self, raw):
        with pytest.raises(MalformedPermissionStringError):
            Permission.parse(raw)

    @pytest.mark.parametrize(
        ("raw", "field"),
        [
            (f"nobody:write-user:{OTHER}:user", "subject"),
            (f"{SUBJECT}:writeuser:{OTHER}:user", "action"),
            (f"{SUBJECT}:delete-user:{OTHER}:user", "action"),
            (f"{SUBJECT}:write-user::user", "resource_id"),
            (f"{SUBJECT}:write-user:{OTHER}:group", "resource_kind"),
        ],
    )
    def test_errors_name_the_failing_segment(self, raw, field):
        with pytest.raises(ParseError) as exc_info:
            Permission.parse(raw)

        assert exc_info.value.field == field

    def test_key_is_the_four_segments(self):
        permission = Permission.from_parts(SUBJECT, "write-user", OTHER, "user")

        assert permission.key == (SUBJECT, "write-user", OTHER, "user")

    def test_for_subject_keeps_action_and_resource(self):
        permission = Permission.from_parts(SUBJECT, "write-user", OTHER, "user")

        moved = permission.for_subject(Identifier(OTHER))

        assert moved.subject == Identifier(OTHER)
        assert moved.action == permission.action
        assert moved.resource == permission.resource

    def test_permissions_are_hashable_values(self):
        a = Permission.from_parts(SUBJECT, "write-user", OTHER, "user")
        b = Permission.from_parts(SUBJECT, "write-user", OTHER, "user")

        assert a == b
        assert len({a, b}) == 1
