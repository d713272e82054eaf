"""Event handlers run by the EventProcessor."""

from tenant_identity.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
    default_handlers,
)

__all__ = ["LoggingEventHandler", "default_handlers"]
