"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from tenant_identity.domain.value_objects.email import Email
from tenant_identity.domain.value_objects.identifier import Identifier
from tenant_identity.domain.value_objects.permission import (
    Actionable,
    Permission,
    Resource,
)
from tenant_identity.domain.value_objects.target import Target

__all__ = [
    "Actionable",
    "Email",
    "Identifier",
    "Permission",
    "Resource",
    "Target",
]
