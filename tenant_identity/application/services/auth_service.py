"""Sign-in and sign-up.

Credential verification is out of scope: sign-in is a profile lookup by
email, sign-up delegates to UserService.create_user.
"""

from tenant_identity.application.services.profile_service import ProfileService
from tenant_identity.application.services.user_service import UserService
from tenant_identity.core.errors import DomainError
from tenant_identity.core.result import Result
from tenant_identity.domain.entities import Profile, User


class AuthService:
    """Entry points used by the auth routes."""

    def __init__(self, users: UserService, profiles: ProfileService) -> None:
        self._users = users
        self._profiles = profiles

    async def sign_in(self, email: str) -> Result[Profile, DomainError]:
        """Look up the profile registered under an email address."""
        return await self._profiles.find_profile(email)

    async def sign_up(self, email: str, tenant_id: str) -> Result[User, DomainError]:
        """Register a new user under a tenant."""
        return await self._users.create_user(email, tenant_id)
