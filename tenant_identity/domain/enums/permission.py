"""Permission vocabulary enums.

Verbs and resource kinds are closed sets. Their string values are the
tokens used in the canonical permission string, e.g.
``"<subject>:write-user:<resource_id>:user"``.
"""

from enum import Enum


class Verb(str, Enum):
    """Action verbs a permission can carry."""

    READ = "read"
    WRITE = "write"
    EXECUTE = "execute"


class ResourceKind(str, Enum):
    """Registered resource kinds a permission can apply to.

    Each kind doubles as the conventional action target for that
    resource (``write-user`` on a ``user`` resource).
    """

    USER = "user"
    TENANT = "tenant"
