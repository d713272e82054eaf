"""Tenant domain entity.

A tenant is an independent aggregate; it participates in authorization
only as a resource kind.
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
class Tenant:
    """Tenant domain entity.

    Attributes:
        id: Unique tenant identifier (UUIDv7)
        name: Display name
        created_at: Timestamp when tenant was created
    """

    id: Identifier
    name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name: str) -> "Tenant":
        """Mint a new tenant with a fresh identifier.

        Raises:
            ValueError: If name is blank.
        """
        name = name.strip()
        if not name:
            raise ValueError("Tenant name must not be blank")
        return cls(id=Identifier.new(), name=name)

    @property
    def resource(self) -> Resource:
        """This tenant as a permission resource."""
        return Resource.tenant(self.id)

    def owner_permissions(self, owner: Identifier) -> list[Permission]:
        """Read and write permission on this tenant for its creator."""
        return [
            Permission(
                subject=owner,
                action=Actionable.read(self.resource.target),
                resource=self.resource,
            ),
            Permission(
                subject=owner,
                action=Actionable.write(self.resource.target),
                resource=self.resource,
            ),
        ]
