"""Domain enums."""

from tenant_identity.domain.enums.permission import ResourceKind, Verb

__all__ = ["ResourceKind", "Verb"]
