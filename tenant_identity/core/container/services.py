"""Application service factories.

Services are stateless apart from their injected dependencies, so each is
an application-scoped singleton. Routers receive them through
``Depends(get_<name>_service)``; tests swap them with
``app.dependency_overrides``.
"""

from functools import lru_cache

from tenant_identity.application.services import (
    AuthorizationService,
    AuthService,
    ProfileService,
    TenantService,
    UserService,
)
from tenant_identity.core.container.events import get_event_bus
from tenant_identity.core.container.infrastructure import (
    get_logger,
    get_unit_of_work_factory,
)


@lru_cache()
def get_authorization_service() -> AuthorizationService:
    """Get authorization service singleton."""
    return AuthorizationService(
        uow_factory=get_unit_of_work_factory(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_user_service() -> UserService:
    """Get user service singleton."""
    return UserService(
        uow_factory=get_unit_of_work_factory(),
        authorization=get_authorization_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_profile_service() -> ProfileService:
    """Get profile service singleton."""
    return ProfileService(
        uow_factory=get_unit_of_work_factory(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_tenant_service() -> TenantService:
    """Get tenant service singleton."""
    return TenantService(
        uow_factory=get_unit_of_work_factory(),
        authorization=get_authorization_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_auth_service() -> AuthService:
    """Get auth service singleton (sign-in / sign-up)."""
    return AuthService(users=get_user_service(), profiles=get_profile_service())
