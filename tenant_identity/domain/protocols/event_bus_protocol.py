"""Event bus protocol (port) for domain events.

The bus is a bounded broadcast channel. Producers publish after their
transaction commits; every subscriber reads the same stream through its
own cursor, so a slow subscriber only ever loses its own oldest events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides BroadcastEventBus and EventProcessor

Usage:
    >>> event_bus = get_event_bus()
    >>> subscription = event_bus.subscribe()
    >>> await event_bus.publish(UserCreated(user=user))
    >>> event = await subscription.recv()
"""

from typing import Protocol

from tenant_identity.domain.events.base_event import DomainEvent


class SubscriptionProtocol(Protocol):
    """A single subscriber's read cursor into the bus."""

    async def recv(self) -> DomainEvent:
        """Wait for and return the next event for this subscriber.

        Raises:
            SubscriptionLagged: Subscriber fell behind; events were skipped.
            EventBusClosed: Bus closed and every buffered event was consumed.
        """
        ...


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Never blocks on subscribers**: publish only waits for the
           buffer's own lock.
        2. **Per-subscriber isolation**: each subscription has its own cursor.
        3. **Bounded**: the buffer keeps at most ``capacity`` events.
    """

    async def publish(self, event: DomainEvent) -> bool:
        """Append an event to the buffer.

        Args:
            event: Domain event to broadcast.

        Returns:
            bool: True if buffered, False if the bus is closed.
        """
        ...

    def subscribe(self) -> SubscriptionProtocol:
        """Register a subscriber whose cursor starts at the next event published."""
        ...

    async def close(self) -> None:
        """Close the bus; subscribers drain what is buffered, then stop."""
        ...


class EventHandlerProtocol(Protocol):
    """A long-lived consumer run by the event processor.

    Attributes:
        name: Handler name used in logs and task names.
    """

    name: str

    async def handle(self, event: DomainEvent) -> None:
        """Process one event. Exceptions are logged by the processor."""
        ...
