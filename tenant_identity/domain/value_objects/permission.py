"""Permission model: Resource, Actionable and the Permission aggregate.

A permission states that a subject may perform an action (verb + target)
on a specific resource. Its canonical string form is::

    <subject>:<verb>-<target>:<resource_id>:<resource_kind>

for example ``0190...:write-user:0190...:user``. The string form is only a
serialization boundary; inside the service permissions are always handled
as parsed values.

Parsing and formatting are exact inverses for every valid value:
``Permission.parse(str(p)) == p``.

Usage:
    >>> p = Permission.parse(f"{user_id}:write-user:{user_id}:user")
    >>> p.action.verb
    <Verb.WRITE: 'write'>
    >>> str(p) == f"{user_id}:write-user:{user_id}:user"
    True
"""

from dataclasses import dataclass

from tenant_identity.domain.enums import ResourceKind, Verb
from tenant_identity.domain.errors import (
    InvalidResourceIdError,
    InvalidResourceKindError,
    InvalidTargetError,
    MalformedPermissionStringError,
    MissingDelimiterError,
    UnknownVerbError,
)
from tenant_identity.domain.value_objects.identifier import Identifier
from tenant_identity.domain.value_objects.target import Target

SEGMENT_DELIMITER = ":"
ACTION_DELIMITER = "-"


@dataclass(frozen=True)
class Resource:
    """Entity instance a permission applies to, tagged by kind.

    Attributes:
        kind: Registered resource kind (user or tenant).
        id: Opaque identifier of the referenced entity.

    Raises:
        InvalidResourceKindError: If kind is not a ResourceKind.
        InvalidResourceIdError: If id is empty or contains ':'.
    """

    kind: ResourceKind
    id: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ResourceKind):
            raise InvalidResourceKindError(f"Unknown resource kind: {self.kind!r}")
        resource_id = str(self.id) if isinstance(self.id, Identifier) else self.id
        if not isinstance(resource_id, str) or not resource_id:
            raise InvalidResourceIdError("Resource id must be a non-empty string")
        if SEGMENT_DELIMITER in resource_id:
            raise InvalidResourceIdError(
                f"Resource id may not contain '{SEGMENT_DELIMITER}': {resource_id!r}"
            )
        object.__setattr__(self, "id", resource_id)

    @classmethod
    def user(cls, user_id: "Identifier | str") -> "Resource":
        """Build a User resource."""
        return cls(kind=ResourceKind.USER, id=str(user_id))

    @classmethod
    def tenant(cls, tenant_id: "Identifier | str") -> "Resource":
        """Build a Tenant resource."""
        return cls(kind=ResourceKind.TENANT, id=str(tenant_id))

    @classmethod
    def from_parts(cls, resource_id: str, kind: str) -> "Resource":
        """Build a resource from raw (id, kind) strings.

        Args:
            resource_id: Referenced entity id.
            kind: Resource kind name ("user" or "tenant").

        Returns:
            Resource: Parsed resource.

        Raises:
            InvalidResourceKindError: If kind is not a registered kind.
            InvalidResourceIdError: If resource_id is empty or contains ':'.
        """
        try:
            resource_kind = ResourceKind(kind)
        except ValueError as e:
            raise InvalidResourceKindError(f"Unknown resource kind: {kind!r}") from e
        return cls(kind=resource_kind, id=resource_id)

    @property
    def target(self) -> Target:
        """Target conventionally paired with this resource kind."""
        return Target(self.kind.value)


@dataclass(frozen=True)
class Actionable:
    """An action: a verb applied to a target category.

    Canonical form is ``"<verb>-<target>"``, e.g. ``"write-user"``.

    Attributes:
        verb: Read, write or execute.
        target: Category the verb applies to.
    """

    verb: Verb
    target: Target

    @classmethod
    def parse(cls, raw: str) -> "Actionable":
        """Parse ``"<verb>-<target>"``, splitting on the first '-'.

        Args:
            raw: Action string.

        Returns:
            Actionable: Parsed action.

        Raises:
            MissingDelimiterError: If raw has no '-'.
            UnknownVerbError: If the verb is not read, write or execute.
            InvalidTargetError: If the target segment is not a valid Target.
        """
        verb, delimiter, target = raw.partition(ACTION_DELIMITER)
        if not delimiter:
            raise MissingDelimiterError(
                f"Action must look like '<verb>{ACTION_DELIMITER}<target>': {raw!r}"
            )
        try:
            parsed_verb = Verb(verb)
        except ValueError as e:
            raise UnknownVerbError(f"Unknown verb: {verb!r}") from e
        try:
            parsed_target = Target(target)
        except InvalidTargetError as e:
            raise e.with_field("action") from e
        return cls(verb=parsed_verb, target=parsed_target)

    @classmethod
    def read(cls, target: "Target | ResourceKind | str") -> "Actionable":
        return cls(verb=Verb.READ, target=_as_target(target))

    @classmethod
    def write(cls, target: "Target | ResourceKind | str") -> "Actionable":
        return cls(verb=Verb.WRITE, target=_as_target(target))

    @classmethod
    def execute(cls, target: "Target | ResourceKind | str") -> "Actionable":
        return cls(verb=Verb.EXECUTE, target=_as_target(target))

    def __str__(self) -> str:
        return f"{self.verb.value}{ACTION_DELIMITER}{self.target}"


@dataclass(frozen=True)
class Permission:
    """Subject may perform action on resource.

    The action's target is expected to match ``resource.kind`` but that
    pairing is a convention, not enforced here. Permissions are immutable
    facts; uniqueness key is (subject, action, resource.id, resource.kind).

    Attributes:
        subject: Principal the permission is granted to.
        action: Verb and target.
        resource: Resource the permission applies to.
    """

    subject: Identifier
    action: Actionable
    resource: Resource

    @classmethod
    def from_parts(
        cls,
        subject: str,
        action: str,
        resource_id: str,
        resource_kind: str,
    ) -> "Permission":
        """Build a permission from its four raw segments.

        Args:
            subject: Subject identifier.
            action: ``"<verb>-<target>"`` string.
            resource_id: Resource identifier.
            resource_kind: Resource kind name.

        Returns:
            Permission: Parsed permission.

        Raises:
            ParseError: Subclass naming the segment that failed.
        """
        return cls(
            subject=Identifier.parse(subject, field="subject"),
            action=Actionable.parse(action),
            resource=Resource.from_parts(resource_id, resource_kind),
        )

    @classmethod
    def parse(cls, raw: str) -> "Permission":
        """Parse the canonical ``subject:action:resource_id:resource_kind`` form.

        Raises:
            MalformedPermissionStringError: If raw does not have exactly four segments.
            ParseError: Subclass naming the segment that failed.
        """
        segments = raw.split(SEGMENT_DELIMITER)
        if len(segments) != 4:
            raise MalformedPermissionStringError(
                f"Permission must have 4 '{SEGMENT_DELIMITER}'-delimited segments, "
                f"got {len(segments)}"
            )
        return cls.from_parts(*segments)

    @property
    def key(self) -> tuple[str, str, str, str]:
        """Uniqueness key used by storage."""
        return (
            str(self.subject),
            str(self.action),
            self.resource.id,
            self.resource.kind.value,
        )

    def for_subject(self, subject: Identifier) -> "Permission":
        """Return the same action/resource pair held by another subject."""
        return Permission(subject=subject, action=self.action, resource=self.resource)

    def __str__(self) -> str:
        return SEGMENT_DELIMITER.join(self.key)


def _as_target(target: "Target | ResourceKind | str") -> Target:
    if isinstance(target, Target):
        return target
    if isinstance(target, ResourceKind):
        return Target(target.value)
    return Target(target)
