"""Unit tests for BroadcastEventBus.

Tests cover:
- Every subscriber receives every event, in publish order
- Late subscribers do not see earlier events
- A lagging subscriber loses only its own oldest events and is told how many
- Publish never waits for subscribers
- Close: publish refused, subscribers drain then stop

Architecture:
- Real bus, mocked logger
- Async tests (single event loop)
"""

import asyncio

import pytest

from tenant_identity.domain.entities import User
from tenant_identity.domain.events import UserCreated
from tenant_identity.infrastructure.events.broadcast_event_bus import (
    BroadcastEventBus,
    EventBusClosed,
    SubscriptionLagged,
)


def make_events(count: int) -> list[UserCreated]:
    return [UserCreated(user=User.create(auth_id=f"auth-{i}")) for i in range(count)]


@pytest.mark.unit
class TestBroadcastDelivery:
    """Test fan-out and ordering."""

    async def test_every_subscriber_receives_every_event_in_order(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=10, logger=mock_logger)
        first, second = bus.subscribe(), bus.subscribe()
        events = make_events(3)

        # Act
        for event in events:
            assert await bus.publish(event) is True

        # Assert
        assert [await first.recv() for _ in events] == events
        assert [await second.recv() for _ in events] == events

    async def test_subscriber_only_sees_events_after_subscribing(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=10, logger=mock_logger)
        early, late_event = make_events(2)
        await bus.publish(early)

        # Act
        subscription = bus.subscribe()
        await bus.publish(late_event)

        # Assert
        assert await subscription.recv() is late_event

    async def test_recv_waits_for_publish(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=10, logger=mock_logger)
        subscription = bus.subscribe()
        (event,) = make_events(1)

        # Act
        receiver = asyncio.create_task(subscription.recv())
        await asyncio.sleep(0)
        assert not receiver.done()
        await bus.publish(event)

        # Assert
        assert await asyncio.wait_for(receiver, timeout=1) is event

    def test_rejects_non_positive_capacity(self, mock_logger):
        with pytest.raises(ValueError):
            BroadcastEventBus(capacity=0, logger=mock_logger)


@pytest.mark.unit
class TestBroadcastLag:
    """Test bounded buffering."""

    async def test_publish_never_blocks_on_slow_subscriber(self, mock_logger):
        """Publishing far beyond capacity completes without any reads."""
        # Arrange
        bus = BroadcastEventBus(capacity=2, logger=mock_logger)
        bus.subscribe()

        # Act
        results = [
            await asyncio.wait_for(bus.publish(event), timeout=1)
            for event in make_events(50)
        ]

        # Assert
        assert all(results)

    async def test_lagging_subscriber_is_told_how_many_it_missed(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=2, logger=mock_logger)
        subscription = bus.subscribe()
        events = make_events(5)
        for event in events:
            await bus.publish(event)

        # Act
        with pytest.raises(SubscriptionLagged) as exc_info:
            await subscription.recv()

        # Assert
        assert exc_info.value.skipped == 3
        # Resumes at the oldest retained event
        assert await subscription.recv() is events[3]
        assert await subscription.recv() is events[4]

    async def test_lag_is_isolated_to_the_slow_subscriber(self, mock_logger):
        """A fast subscriber keeps receiving everything while a slow one lags."""
        # Arrange
        bus = BroadcastEventBus(capacity=2, logger=mock_logger)
        fast, slow = bus.subscribe(), bus.subscribe()
        events = make_events(4)

        # Act
        received = []
        for event in events:
            await bus.publish(event)
            received.append(await fast.recv())

        # Assert
        assert received == events
        with pytest.raises(SubscriptionLagged) as exc_info:
            await slow.recv()
        assert exc_info.value.skipped == 2
        assert await slow.recv() is events[2]


@pytest.mark.unit
class TestBroadcastClose:
    """Test shutdown behaviour."""

    async def test_publish_after_close_is_refused(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=2, logger=mock_logger)
        await bus.close()

        # Act
        published = await bus.publish(make_events(1)[0])

        # Assert
        assert published is False
        assert bus.closed is True
        mock_logger.warning.assert_called_once()

    async def test_subscriber_drains_buffer_before_closed(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=5, logger=mock_logger)
        subscription = bus.subscribe()
        events = make_events(2)
        for event in events:
            await bus.publish(event)

        # Act
        await bus.close()

        # Assert
        assert await subscription.recv() is events[0]
        assert await subscription.recv() is events[1]
        with pytest.raises(EventBusClosed):
            await subscription.recv()

    async def test_close_wakes_waiting_subscriber(self, mock_logger):
        # Arrange
        bus = BroadcastEventBus(capacity=5, logger=mock_logger)
        subscription = bus.subscribe()
        receiver = asyncio.create_task(subscription.recv())
        await asyncio.sleep(0)

        # Act
        await bus.close()

        # Assert
        with pytest.raises(EventBusClosed):
            await asyncio.wait_for(receiver, timeout=1)
