"""Container module - Centralized dependency injection.

The container is organized into modules by concern:
- infrastructure: database, logging, unit of work factory
- events: event bus and event processor
- services: application services

Every factory is an ``lru_cache`` singleton; ``reset_container()`` clears
them all (used by tests that swap settings).
"""

from tenant_identity.core.container.events import get_event_bus, get_event_processor
from tenant_identity.core.container.infrastructure import (
    get_database,
    get_logger,
    get_unit_of_work_factory,
)
from tenant_identity.core.container.services import (
    get_auth_service,
    get_authorization_service,
    get_profile_service,
    get_tenant_service,
    get_user_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    "get_unit_of_work_factory",
    # Events
    "get_event_bus",
    "get_event_processor",
    # Services
    "get_authorization_service",
    "get_user_service",
    "get_profile_service",
    "get_tenant_service",
    "get_auth_service",
    "reset_container",
]


def reset_container() -> None:
    """Drop every cached singleton so the next call rebuilds it."""
    for factory in (
        get_database,
        get_logger,
        get_unit_of_work_factory,
        get_event_bus,
        get_event_processor,
        get_authorization_service,
        get_user_service,
        get_profile_service,
        get_tenant_service,
        get_auth_service,
    ):
        factory.cache_clear()
