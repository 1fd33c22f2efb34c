"""In-process pub/sub for "book created" notifications.

Every subscriber gets its own :class:`asyncio.Queue`, so a slow consumer
only ever holds up itself. Publishing never awaits: events are put on
each queue without blocking, and a bounded queue that is full drops its
oldest pending event to make room.
"""

import asyncio
import threading
from typing import Any, Optional

import structlog

logger = structlog.get_logger(__name__)

_CLOSED = object()


class Subscription:
    """
    Handle for one subscriber.

    Iterate it with ``async for`` to receive events published after it
    was registered. Closing it (or leaving ``async with``) unregisters it
    and ends any pending iteration.
    """

    def __init__(self, bus: "EventBus", maxsize: int = 0) -> None:
        self._bus = bus
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self.dropped = 0
        try:
            self._loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            self._loop = None

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop receiving events."""
        self._bus.unsubscribe(self)

    def drain(self) -> list[Any]:
        """Return every queued event without waiting."""
        events = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return events
            if item is _CLOSED:
                # keep the end marker for whoever iterates next
                self._offer(_CLOSED)
                return events
            events.append(item)

    def _deliver(self, item: Any) -> None:
        loop = self._loop
        if loop is not None and loop.is_running() and not _running_in(loop):
            loop.call_soon_threadsafe(self._offer, item)
        else:
            self._offer(item)

    def _offer(self, item: Any) -> None:
        while True:
            try:
                self._queue.put_nowait(item)
                return
            except asyncio.QueueFull:
                self._queue.get_nowait()
                self.dropped += 1
                logger.warning("Subscriber queue full, dropped oldest event", dropped=self.dropped)

    def _mark_closed(self) -> None:
        self._closed = True
        self._deliver(_CLOSED)

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> Any:
        if self._closed and self._queue.empty():
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()


def _running_in(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False


class EventBus:
    """Registry of live subscribers. Delivery follows registration order."""

    def __init__(self, queue_size: int = 0) -> None:
        if queue_size < 0:
            raise ValueError("queue_size must be >= 0")
        self._queue_size = queue_size
        self._subscribers: list[Subscription] = []
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self) -> Subscription:
        """Register a subscriber. It sees only events published from now on."""
        subscription = Subscription(self, maxsize=self._queue_size)
        with self._lock:
            self._subscribers.append(subscription)
            count = len(self._subscribers)
        logger.debug("Subscriber registered", subscribers=count)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscriber. Unknown or already removed handles are ignored."""
        with self._lock:
            if subscription not in self._subscribers:
                return
            self._subscribers.remove(subscription)
            count = len(self._subscribers)
        subscription._mark_closed()
        logger.debug("Subscriber removed", subscribers=count)

    def publish(self, event: Any) -> int:
        """Queue the event for every current subscriber. Returns how many were reached."""
        with self._lock:
            subscribers = list(self._subscribers)
        for subscription in subscribers:
            subscription._deliver(event)
        return len(subscribers)
