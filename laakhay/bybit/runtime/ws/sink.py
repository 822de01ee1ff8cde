"""Event sinks: where decoded events leave the streaming loop.

Two forms are provided:
    - ``CallbackSink``: invokes a handler per event, synchronously from the
      reader loop. Handler failures are logged and otherwise ignored.
    - ``QueueSink``: unbounded ``asyncio.Queue`` producer. Publishing never
      suspends the reader, trading memory growth for liveness.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Callable
from typing import Any, Protocol

from ...core.exceptions import ChannelSendError
from ...models import WebsocketEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebsocketEvent], Any]


class EventSink(Protocol):
    """Protocol for anything that accepts decoded events."""

    async def publish(self, event: WebsocketEvent) -> None:
        """Deliver one event."""
        ...

    async def close(self) -> None:
        """Signal that no more events will be published."""
        ...


class CallbackSink:
    """Calls ``handler(event)`` for every event.

    The handler may be sync or async. A handler that returns ``False`` or
    raises is logged; the stream keeps going.
    """

    def __init__(self, handler: EventHandler) -> None:
        self._handler = handler
        self.failures = 0

    async def publish(self, event: WebsocketEvent) -> None:
        try:
            result = self._handler(event)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            self.failures += 1
            logger.error(f"Event handler failed for {event.kind.value}: {e}", exc_info=True)
            return
        if result is False:
            self.failures += 1
            logger.warning(f"Event handler reported failure for {event.kind.value}")

    async def close(self) -> None:
        return None


_END = object()


class QueueSink:
    """Unbounded queue of events, consumable with ``async for``."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def qsize(self) -> int:
        return self._queue.qsize()

    async def publish(self, event: WebsocketEvent) -> None:
        """Enqueue without waiting.

        Raises:
            ChannelSendError: If the sink was already closed
        """
        if self._closed:
            raise ChannelSendError("Cannot publish to a closed QueueSink")
        self._queue.put_nowait(event)

    async def fail(self, error: BaseException) -> None:
        """End the stream with a terminal error re-raised to the consumer."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(error)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_END)

    async def get(self) -> WebsocketEvent:
        """Next event.

        Raises:
            StopAsyncIteration: After the sink was closed and drained
            Exception: The terminal error passed to ``fail``
        """
        item = await self._queue.get()
        if item is _END:
            # Keep the sentinel so later readers also stop
            self._queue.put_nowait(_END)
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            self._queue.put_nowait(_END)
            raise item
        return item

    def __aiter__(self) -> AsyncIterator[WebsocketEvent]:
        return self

    async def __anext__(self) -> WebsocketEvent:
        return await self.get()
