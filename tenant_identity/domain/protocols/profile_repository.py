"""ProfileRepository protocol (port)."""

from typing import Protocol

from tenant_identity.domain.entities import Profile
from tenant_identity.domain.value_objects import Email, Identifier


class ProfileRepository(Protocol):
    """Profile repository protocol (port)."""

    async def find_by_user_id(self, user_id: Identifier) -> Profile | None:
        """Find the profile owned by a user."""
        ...

    async def find_by_email(self, email: Email) -> Profile | None:
        """Find a profile by its (normalized) email address."""
        ...

    async def save(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Raises:
            DuplicateRecordError: If the user already has a profile or the
                email is taken.
            RepositoryError: On any other storage failure.
        """
        ...

    async def delete(self, user_id: Identifier) -> None:
        """Delete the profile owned by a user (no-op if absent)."""
        ...
