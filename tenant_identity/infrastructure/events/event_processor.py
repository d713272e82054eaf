"""Event processor: one background loop per handler.

At startup every registered handler gets its own subscription and its
own asyncio task. A loop only ever touches its own cursor, so a slow or
failing handler cannot hold up the others or the publishers.

Failure policy (fail-open, as for the bus):
    - lag is logged as a warning and the loop continues
    - handler exceptions are logged and the loop continues
    - the loop ends when the bus is closed and drained

Usage:
    >>> processor = EventProcessor(event_bus=bus, handlers=handlers, logger=logger)
    >>> processor.start()
    >>> ...
    >>> await processor.stop()
"""

import asyncio
from collections.abc import Sequence

from tenant_identity.domain.protocols.event_bus_protocol import EventHandlerProtocol
from tenant_identity.domain.protocols.logger_protocol import LoggerProtocol
from tenant_identity.infrastructure.events.broadcast_event_bus import (
    BroadcastEventBus,
    EventBusClosed,
    Subscription,
    SubscriptionLagged,
)


class EventProcessor:
    """Runs every event handler as an independent subscriber loop.

    Attributes:
        handlers: Registered handlers, in registration order.
    """

    def __init__(
        self,
        event_bus: BroadcastEventBus,
        handlers: Sequence[EventHandlerProtocol],
        logger: LoggerProtocol,
        shutdown_timeout: float = 5.0,
    ) -> None:
        """Initialize the processor.

        Args:
            event_bus: Bus to subscribe to.
            handlers: Handlers to run, one loop each.
            logger: Logger for lag and handler failures.
            shutdown_timeout: Seconds stop() waits for loops to drain
                before cancelling them.
        """
        self.handlers = list(handlers)
        self._event_bus = event_bus
        self._logger = logger
        self._shutdown_timeout = shutdown_timeout
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    def start(self) -> None:
        """Subscribe every handler and spawn its loop.

        Must be called from inside a running event loop. Calling it again
        while loops are running does nothing.

        Raises:
            RuntimeError: If the bus has already been closed.
        """
        if self._event_bus.closed:
            raise RuntimeError("Cannot start event processor on a closed bus")
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(
                self._run(handler, self._event_bus.subscribe()),
                name=f"event-handler:{handler.name}",
            )
            for handler in self.handlers
        ]
        self._logger.info("event_processor_started", handler_count=len(self._tasks))

    async def stop(self) -> None:
        """Close the bus and join the loops, cancelling any that overrun."""
        await self._event_bus.close()
        if not self._tasks:
            return

        _, pending = await asyncio.wait(self._tasks, timeout=self._shutdown_timeout)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        self._logger.info(
            "event_processor_stopped",
            handler_count=len(self._tasks),
            cancelled=len(pending),
        )
        self._tasks = []

    async def _run(
        self, handler: EventHandlerProtocol, subscription: Subscription
    ) -> None:
        logger = self._logger.bind(handler=handler.name)
        while True:
            try:
                event = await subscription.recv()
            except SubscriptionLagged as lag:
                logger.warning("event_subscriber_lagged", skipped=lag.skipped)
                continue
            except EventBusClosed:
                logger.debug("event_subscriber_stopped")
                return

            try:
                await handler.handle(event)
            except Exception as e:
                # Fail-open: one bad event must not stop the loop
                logger.warning(
                    "event_handler_failed",
                    event_type=event.event_type,
                    event_id=str(event.event_id),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
