"""Event bus and event processor factories.

Application-scoped singletons. The processor subscribes every default
handler to the bus; main.py starts it at startup and stops it at shutdown.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from tenant_identity.core.config import settings

if TYPE_CHECKING:
    from tenant_identity.infrastructure.events.broadcast_event_bus import (
        BroadcastEventBus,
    )
    from tenant_identity.infrastructure.events.event_processor import EventProcessor


@lru_cache()
def get_event_bus() -> "BroadcastEventBus":
    """Get event bus singleton (app-scoped).

    Capacity comes from EVENT_BUS_CAPACITY (alias EVENT_PROCESS_BUS_SIZE).

    Returns:
        Bounded broadcast bus implementing EventBusProtocol.

    Usage:
        # Application Layer (direct use)
        event_bus = get_event_bus()
        await event_bus.publish(UserCreated(...))
    """
    from tenant_identity.core.container.infrastructure import get_logger
    from tenant_identity.infrastructure.events.broadcast_event_bus import (
        BroadcastEventBus,
    )

    return BroadcastEventBus(
        capacity=settings.event_bus_capacity,
        logger=get_logger(),
    )


@lru_cache()
def get_event_processor() -> "EventProcessor":
    """Get event processor singleton (app-scoped).

    Wires the default logging handlers (users, profiles, permissions,
    tenants), one subscriber loop each.

    Returns:
        EventProcessor bound to the event bus singleton.
    """
    from tenant_identity.core.container.infrastructure import get_logger
    from tenant_identity.infrastructure.events.event_processor import EventProcessor
    from tenant_identity.infrastructure.events.handlers.logging_event_handler import (
        default_handlers,
    )

    logger = get_logger()
    return EventProcessor(
        event_bus=get_event_bus(),
        handlers=default_handlers(logger),
        logger=logger,
    )
