"""Event bus and event processing adapters."""

from tenant_identity.infrastructure.events.broadcast_event_bus import (
    BroadcastEventBus,
    EventBusClosed,
    Subscription,
    SubscriptionLagged,
)
from tenant_identity.infrastructure.events.event_processor import EventProcessor

__all__ = [
    "BroadcastEventBus",
    "EventBusClosed",
    "EventProcessor",
    "Subscription",
    "SubscriptionLagged",
]
