"""Profile domain entity (1:1 with User)."""

from dataclasses import dataclass

from tenant_identity.domain.value_objects import Email, Identifier


@dataclass
class Profile:
    """User profile.

    Attributes:
        user_id: Owning user's identifier (also the profile's identity)
        email: Validated, lower-cased email address
    """

    user_id: Identifier
    email: Email
