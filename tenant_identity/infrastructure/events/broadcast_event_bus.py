"""Bounded in-process broadcast event bus.

Every published event is appended to a ring buffer of fixed capacity and
stamped with a monotonically increasing sequence number. Each subscriber
holds its own cursor (the next sequence number it wants), so:

    - every subscriber sees every event, in publish order
    - a subscriber that falls more than ``capacity`` events behind loses
      its oldest unread events, and only its own (it is told how many)
    - publishers never wait for subscribers; publish only takes the
      buffer lock long enough to append

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - One asyncio.Condition guards the buffer and wakes waiting subscribers
    - Single process, single event loop

Usage:
    >>> bus = BroadcastEventBus(capacity=10, logger=logger)
    >>> subscription = bus.subscribe()
    >>> await bus.publish(UserCreated(user=user))
    >>> event = await subscription.recv()
"""

import asyncio
from collections import deque

from tenant_identity.domain.events.base_event import DomainEvent
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol


class SubscriptionLagged(Exception):
    """Subscriber fell behind and some events were dropped for it.

    The subscription has already moved its cursor to the oldest retained
    event; the next ``recv()`` continues from there.

    Attributes:
        skipped: Number of events this subscriber will never see.
    """

    def __init__(self, skipped: int) -> None:
        super().__init__(f"Subscriber lagged behind by {skipped} events")
        self.skipped = skipped


class EventBusClosed(Exception):
    """Bus is closed and every buffered event was consumed."""


class BroadcastEventBus:
    """Bounded multi-producer, multi-consumer broadcast channel.

    Attributes:
        capacity: Maximum number of events retained in the buffer.
    """

    def __init__(self, capacity: int, logger: LoggerProtocol) -> None:
        """Initialize the bus.

        Args:
            capacity: Ring buffer size; must be positive.
            logger: Logger for publish diagnostics.

        Raises:
            ValueError: If capacity is not positive.
        """
        if capacity <= 0:
            raise ValueError("Event bus capacity must be greater than 0")
        self.capacity = capacity
        self._buffer: deque[tuple[int, DomainEvent]] = deque(maxlen=capacity)
        self._next_seq = 0
        self._closed = False
        self._condition = asyncio.Condition()
        self._logger = logger

    @property
    def closed(self) -> bool:
        return self._closed

    async def publish(self, event: DomainEvent) -> bool:
        """Append an event and wake every waiting subscriber.

        When the buffer is full the oldest event is overwritten; only
        subscribers that had not read it yet are affected.

        Args:
            event: Domain event to broadcast.

        Returns:
            bool: True if buffered, False if the bus is closed.
        """
        async with self._condition:
            if self._closed:
                self._logger.warning(
                    "event_bus_closed_publish_dropped",
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                )
                return False
            seq = self._next_seq
            self._buffer.append((seq, event))
            self._next_seq += 1
            self._condition.notify_all()

        self._logger.debug(
            "event_published",
            event_type=event.event_type,
            event_id=str(event.event_id),
            sequence=seq,
        )
        return True

    def subscribe(self) -> "Subscription":
        """Register a subscriber.

        The cursor starts at the next event to be published; events
        already in the buffer are not replayed.

        Returns:
            Subscription: Independent read cursor.
        """
        return Subscription(self, cursor=self._next_seq)

    async def close(self) -> None:
        """Stop accepting events and wake subscribers so they can drain and exit."""
        async with self._condition:
            self._closed = True
            self._condition.notify_all()

    async def _receive(self, cursor: int) -> tuple[int, DomainEvent]:
        """Wait for the event at ``cursor``.

        Returns:
            Tuple of (next cursor, event).

        Raises:
            SubscriptionLagged: cursor points at an overwritten event.
            EventBusClosed: Bus closed and nothing left at or after cursor.
        """
        async with self._condition:
            await self._condition.wait_for(
                lambda: self._next_seq > cursor or self._closed
            )
            if self._next_seq <= cursor:
                raise EventBusClosed("Event bus is closed")

            oldest_seq = self._buffer[0][0]
            if cursor < oldest_seq:
                raise SubscriptionLagged(skipped=oldest_seq - cursor)

            _, event = self._buffer[cursor - oldest_seq]
            return cursor + 1, event

    def _oldest_sequence(self) -> int:
        return self._buffer[0][0] if self._buffer else self._next_seq


class Subscription:
    """One subscriber's cursor into a BroadcastEventBus.

    Not shared between tasks: each handler loop owns exactly one.
    """

    def __init__(self, bus: BroadcastEventBus, cursor: int) -> None:
        self._bus = bus
        self._cursor = cursor

    async def recv(self) -> DomainEvent:
        """Wait for and return the next event.

        Raises:
            SubscriptionLagged: Events were dropped for this subscriber;
                the cursor now points at the oldest retained event.
            EventBusClosed: Bus closed and this subscriber has drained it.
        """
        try:
            self._cursor, event = await self._bus._receive(self._cursor)
        except SubscriptionLagged:
            self._cursor = self._bus._oldest_sequence()
            raise
        return event
