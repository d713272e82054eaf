"""Logging event handler for domain events.

One handler instance per event category (users, profiles, permissions,
tenants). Each runs in its own subscriber loop and logs the events of
its category at debug level, ignoring the rest of the stream.

Structured Fields:
    - handler: Handler name (bound by the processor)
    - event_type: Event class name (e.g., "UserCreated")
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - user_id / tenant_id / permission: Subject of the event

Usage:
    >>> handlers = default_handlers(logger=get_logger())
    >>> processor = EventProcessor(event_bus=bus, handlers=handlers, logger=logger)
"""

from typing import Any

from tenant_identity.domain.events import (
    PERMISSION_EVENTS,
    PROFILE_EVENTS,
    TENANT_EVENTS,
    USER_EVENTS,
    DomainEvent,
    PermissionGranted,
    PermissionRevoked,
    ProfileCreated,
    ProfileDeleted,
    TenantCreated,
    TenantDeleted,
    UserCreated,
    UserDeleted,
)
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Logs every event of one category.

    Attributes:
        name: Handler name (e.g. "users").
        event_types: Event classes this handler reacts to.
    """

    def __init__(
        self,
        name: str,
        event_types: tuple[type[DomainEvent], ...],
        logger: LoggerProtocol,
    ) -> None:
        """Initialize logging handler.

        Args:
            name: Handler name used in logs.
            event_types: Event classes to log; anything else is ignored.
            logger: Logger protocol implementation from container.
        """
        self.name = name
        self.event_types = event_types
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Log the event if it belongs to this handler's category.

        Args:
            event: Event received from the bus.
        """
        if not isinstance(event, self.event_types):
            return
        self._logger.debug(
            "event_received",
            handler=self.name,
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            **_describe(event),
        )


def _describe(event: DomainEvent) -> dict[str, Any]:
    match event:
        case UserCreated(user=user, tenant_id=tenant_id):
            return {
                "user_id": str(user.id),
                "tenant_id": str(tenant_id) if tenant_id else None,
            }
        case UserDeleted(user_id=user_id, deleted_by=deleted_by):
            return {"user_id": str(user_id), "deleted_by": str(deleted_by)}
        case ProfileCreated(profile=profile):
            return {"user_id": str(profile.user_id)}
        case ProfileDeleted(user_id=user_id):
            return {"user_id": str(user_id)}
        case PermissionGranted(permission=permission, granted_by=granted_by):
            return {"permission": str(permission), "granted_by": str(granted_by)}
        case PermissionRevoked(permission=permission, revoked_by=revoked_by):
            return {"permission": str(permission), "revoked_by": str(revoked_by)}
        case TenantCreated(tenant=tenant, created_by=created_by):
            return {"tenant_id": str(tenant.id), "created_by": str(created_by)}
        case TenantDeleted(tenant=tenant, deleted_by=deleted_by):
            return {"tenant_id": str(tenant.id), "deleted_by": str(deleted_by)}
    return {}


def default_handlers(logger: LoggerProtocol) -> list[LoggingEventHandler]:
    """Build the standard handler set, one per event category.

    Args:
        logger: Logger shared by all handlers.

    Returns:
        list[LoggingEventHandler]: users, profiles, permissions, tenants.
    """
    return [
        LoggingEventHandler(name="users", event_types=USER_EVENTS, logger=logger),
        LoggingEventHandler(name="profiles", event_types=PROFILE_EVENTS, logger=logger),
        LoggingEventHandler(
            name="permissions", event_types=PERMISSION_EVENTS, logger=logger
        ),
        LoggingEventHandler(name="tenants", event_types=TENANT_EVENTS, logger=logger),
    ]
