"""User domain entity.

Pure business logic, no framework dependencies.

Ownership:
    - Exactly one Profile, created in the same transaction as the user
    - Read and write permission on its own User resource, seeded at creation
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from tenant_identity.domain.value_objects import (
    Actionable,
    Identifier,
    Permission,
    Resource,
)


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier (UUIDv7)
        auth_id: Identifier issued by the external authentication provider
        created_at: Timestamp when user was created

    Example:
        >>> user = User.create(auth_id="auth0|123")
        >>> [str(p.action) for p in user.owner_permissions()]
        ['read-user', 'write-user']
    """

    id: Identifier
    auth_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, auth_id: str) -> "User":
        """Mint a new user with a fresh identifier.

        Args:
            auth_id: External authentication provider identifier.

        Returns:
            User: New, not yet persisted user.
        """
        return cls(id=Identifier.new(), auth_id=auth_id)

    @property
    def resource(self) -> Resource:
        """This user as a permission resource."""
        return Resource.user(self.id)

    def owner_permissions(self) -> list[Permission]:
        """Permissions every user holds on itself from creation.

        These are written directly at creation time; no prior permission
        can exist for a brand-new subject, so they cannot go through grant.

        Returns:
            list[Permission]: read-user and write-user on this user.
        """
        return [
            Permission(
                subject=self.id,
                action=Actionable.read(self.resource.target),
                resource=self.resource,
            ),
            Permission(
                subject=self.id,
                action=Actionable.write(self.resource.target),
                resource=self.resource,
            ),
        ]
