"""Single reader loop per connection.

Architecture:
    One ``StreamSession`` owns one ``Connection`` together with its
    multiplexer, demultiplexer and ticker reconstructor. ``run()`` reads one
    frame at a time, decodes it, folds tickers into state and publishes to
    the sink, strictly in wire order. No state is shared with other sessions,
    so two sessions fed the same frames end in identical, independent states.

Failure semantics:
    - DecodeError: logged, frame skipped, loop continues
    - TransportError: state discarded, sink failed/closed, error re-raised
    - Any other error escaping the loop: same as TransportError, logged with
      its traceback
    - Cancellation: connection closed, state discarded
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ...core.enums import Channel, OrderOp
from ...core.exceptions import DecodeError, TransportError
from ...core.topics import Topic, channel_of
from ...models import ControlEvent, TickerEvent, TradeStreamEvent, WebsocketEvent
from .connection import Connection
from .demux import FrameDemultiplexer
from .multiplexer import SubscriptionMultiplexer
from .reconstructor import TickerReconstructor
from .sink import EventSink

logger = logging.getLogger(__name__)


class StreamSession:
    """Drives connection -> demux -> reconstructor -> sink."""

    def __init__(
        self,
        connection: Connection,
        sink: EventSink,
        *,
        demux: FrameDemultiplexer | None = None,
        recv_window: int | None = None,
    ) -> None:
        self.connection = connection
        self.sink = sink
        self.demux = demux or FrameDemultiplexer()
        self.multiplexer = SubscriptionMultiplexer(connection)
        self.tickers = TickerReconstructor()
        self.decode_errors = 0
        self.recv_window = recv_window

    async def subscribe(self, topics: Iterable[str | Topic]) -> list[str]:
        return await self.multiplexer.subscribe(topics)

    async def send_order(
        self,
        op: OrderOp | str,
        args: list[dict[str, Any]],
        recv_window: int | None = None,
    ) -> str:
        """Send an order-entry request; the ack arrives as a ``TradeStreamEvent``."""
        window = self.recv_window if recv_window is None else recv_window
        if window is None:
            return await self.connection.send_order(op, args)
        return await self.connection.send_order(op, args, window)

    async def unsubscribe(self, topics: Iterable[str | Topic]) -> list[str]:
        """Unsubscribe and drop any reconstructed ticker state for those topics."""
        removed = await self.multiplexer.unsubscribe(topics)
        for topic in removed:
            if channel_of(topic) is Channel.TICKERS:
                self.tickers.discard(topic)
        return removed

    async def handle_frame(self, frame: Any) -> WebsocketEvent | None:
        """Process one inbound frame and publish the resulting event, if any."""
        try:
            event = self.demux.decode(frame)
        except DecodeError as e:
            self.decode_errors += 1
            logger.warning(f"Skipping malformed frame on {e.topic or 'control'}: {e}")
            return None
        if event is None:
            return None

        if isinstance(event, TickerEvent):
            event = self.tickers.apply(event)
            if event is None:
                return None
        elif isinstance(event, ControlEvent) and not event.ok:
            logger.warning(f"Server rejected {event.op!r} (req_id={event.req_id}): {event.ret_msg}")
        elif isinstance(event, TradeStreamEvent) and not event.ok:
            logger.warning(
                f"Order request {event.op!r} (reqId={event.req_id}) rejected "
                f"with {event.ret_code}: {event.ret_msg}"
            )

        await self.sink.publish(event)
        return event

    async def run(self) -> None:
        """Read until the connection ends.

        Raises:
            TransportError: When the connection fails or is closed by the server
            Exception: Any other failure in the loop, after the sink has been failed
        """
        try:
            while True:
                frame = await self.connection.recv()
                await self.handle_frame(frame)
        except TransportError as e:
            logger.error(f"Stream on {self.connection.url} terminated: {e}")
            await self._fail_sink(e)
            raise
        except Exception as e:
            logger.error(f"Stream on {self.connection.url} crashed: {e}", exc_info=True)
            await self._fail_sink(e)
            raise
        finally:
            self._teardown()
            await self.connection.close()

    async def close(self) -> None:
        """Close the connection and the sink."""
        self._teardown()
        await self.connection.close()
        await self.sink.close()

    async def _fail_sink(self, error: Exception) -> None:
        fail = getattr(self.sink, "fail", None)
        if fail is not None:
            await fail(error)
        else:
            await self.sink.close()

    def _teardown(self) -> None:
        self.tickers.clear()
        self.multiplexer.clear()
