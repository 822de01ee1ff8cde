"""Bybit WebSocket connector.

This connector is the user-facing entry point for realtime data. Each call
opens its own connection, runs the connect -> authenticate -> subscribe
sequence, and then either feeds a callback or yields events as an async
iterator.

Architecture:
    Every stream owns one ``StreamSession``. Nothing is retried: when the
    connection drops, the stream ends with a ``TransportError`` and callers
    who want resilience open a new stream (which starts from fresh snapshots).
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Iterable

from laakhay.bybit.core import (
    BybitConfig,
    Category,
    Channel,
    ConfigurationError,
    Credentials,
    Topic,
    TransportConfig,
    TransportError,
    WebsocketAPI,
)
from laakhay.bybit.core.topics import channel_of
from laakhay.bybit.models import (
    ControlEvent,
    ExecutionData,
    ExecutionEvent,
    FastExecData,
    FastExecEvent,
    KlineEvent,
    LiquidationData,
    LiquidationEvent,
    OrderBookEvent,
    OrderData,
    OrderEvent,
    PositionData,
    PositionEvent,
    TickerData,
    TickerEvent,
    TradeEvent,
    WalletData,
    WalletEvent,
    WebsocketEvent,
    WsTrade,
)
from laakhay.bybit.runtime.ws import (
    CallbackSink,
    Connection,
    EventSink,
    FrameDemultiplexer,
    QueueSink,
    StreamSession,
)
from laakhay.bybit.runtime.ws.sink import EventHandler

logger = logging.getLogger(__name__)

# Only derivatives accounts publish per-category position topics
_POSITION_CATEGORIES = (None, Category.LINEAR, Category.INVERSE)


class BybitWSConnector:
    """Bybit v5 WebSocket connector.

    Public streams need no credentials. Private streams (positions, orders,
    executions, wallet) and order entry (``open_trade_session``) require
    ``credentials``.
    """

    def __init__(
        self,
        *,
        config: BybitConfig | None = None,
        credentials: Credentials | None = None,
        transport_config: TransportConfig | None = None,
        auth_window_ms: int | None = None,
    ) -> None:
        """Initialize Bybit WebSocket connector.

        Args:
            config: Endpoints and receive window (defaults to mainnet)
            credentials: API key pair, required for private streams
            transport_config: Socket tuning for ``websockets.connect``
            auth_window_ms: Validity window of the auth signature
        """
        self.config = config or BybitConfig.mainnet()
        self.credentials = credentials
        self.transport_config = transport_config or TransportConfig()
        self.auth_window_ms = auth_window_ms

    # Session plumbing

    async def open_session(
        self,
        api: WebsocketAPI,
        topics: Iterable[str | Topic],
        sink: EventSink,
    ) -> StreamSession:
        """Connect, authenticate if private, and subscribe.

        Raises:
            ConfigurationError: Private endpoint requested without credentials
            TransportError: If the connection cannot be established
        """
        if api.is_private and self.credentials is None:
            raise ConfigurationError("Private streams require credentials")

        connection = await Connection.connect(
            self.config.ws_url(api),
            private=api.is_private,
            config=self.transport_config,
        )
        session = StreamSession(
            connection,
            sink,
            demux=FrameDemultiplexer(),
            recv_window=self.config.recv_window,
        )
        try:
            if api.is_private:
                await connection.authenticate(self.credentials, self.auth_window_ms)
            await session.subscribe(topics)
        except TransportError:
            await connection.close()
            raise
        return session

    async def open_trade_session(self, sink: EventSink) -> StreamSession:
        """Open an authenticated order-entry session on ``/v5/trade``.

        Send requests with ``session.send_order`` and drive ``session.run()``;
        each reply reaches ``sink`` as a ``TradeStreamEvent``.

        Raises:
            ConfigurationError: If no credentials are configured
            TransportError: If the connection cannot be established
        """
        return await self.open_session(WebsocketAPI.TRADE, [], sink)

    async def subscribe(
        self,
        topics: Iterable[str | Topic],
        handler: EventHandler,
        *,
        category: Category = Category.LINEAR,
    ) -> None:
        """Run a callback stream until the connection ends.

        Args:
            topics: Topics to subscribe to
            handler: Called with each event; sync or async
            category: Selects the public endpoint; ignored for private topics

        Raises:
            TransportError: When the connection terminates
        """
        topics = list(topics)
        api = self._api_for(topics, category)
        session = await self.open_session(api, topics, CallbackSink(handler))
        await session.run()

    async def stream(
        self,
        topics: Iterable[str | Topic],
        *,
        category: Category = Category.LINEAR,
    ) -> AsyncIterator[WebsocketEvent]:
        """Yield every event decoded from the given topics.

        Raises:
            TransportError: When the connection terminates
        """
        topics = list(topics)
        sink = QueueSink()
        session = await self.open_session(self._api_for(topics, category), topics, sink)
        task = asyncio.create_task(session.run())
        try:
            async for event in sink:
                yield event
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, TransportError):
                await task
            await session.close()

    @staticmethod
    def _api_for(topics: list[str | Topic], category: Category) -> WebsocketAPI:
        channels = {channel_of(str(t)) for t in topics}
        if channels and all(c is not None and c.is_private for c in channels):
            return WebsocketAPI.PRIVATE
        if any(c is not None and c.is_private for c in channels):
            raise ValueError("Cannot mix public and private topics on one connection")
        return WebsocketAPI.for_category(category)

    async def ping(self, *, private: bool = False, timeout: float = 10.0) -> ControlEvent:
        """Open a connection, send ``ping`` and return the pong.

        Raises:
            TransportError: If the connection fails or no pong arrives in time
        """
        if private and self.credentials is None:
            raise ConfigurationError("Private ping requires credentials")
        api = WebsocketAPI.PRIVATE if private else WebsocketAPI.PUBLIC_LINEAR
        demux = FrameDemultiplexer()
        async with await Connection.connect(
            self.config.ws_url(api), private=private, config=self.transport_config
        ) as connection:
            if private:
                await connection.authenticate(self.credentials, self.auth_window_ms)
            await connection.ping()
            try:
                async with asyncio.timeout(timeout):
                    while True:
                        event = demux.decode(await connection.recv())
                        if isinstance(event, ControlEvent) and event.is_pong:
                            logger.debug(f"Pong received: {event.ret_msg or event.args}")
                            return event
            except TimeoutError as e:
                raise TransportError("No pong received", url=connection.url) from e

    # Public market data

    async def stream_orderbook(
        self,
        subs: list[tuple[int, str]],
        category: Category = Category.LINEAR,
    ) -> AsyncIterator[OrderBookEvent]:
        """Stream order book frames.

        Args:
            subs: ``(depth, symbol)`` pairs, e.g. ``[(50, "BTCUSDT")]``
            category: Product category

        Yields:
            OrderBookEvent objects (snapshot and delta frames)
        """
        topics = [Topic.orderbook(depth, symbol) for depth, symbol in subs]
        async for event in self.stream(topics, category=category):
            if isinstance(event, OrderBookEvent):
                yield event

    async def stream_trades(
        self, symbols: list[str], category: Category = Category.LINEAR
    ) -> AsyncIterator[WsTrade]:
        """Stream individual trade prints for the given symbols."""
        topics = [Topic.trades(symbol) for symbol in symbols]
        async for event in self.stream(topics, category=category):
            if isinstance(event, TradeEvent):
                for trade in event.data:
                    yield trade

    async def stream_tickers(
        self, symbols: list[str], category: Category = Category.LINEAR
    ) -> AsyncIterator[TickerData]:
        """Stream complete ticker views.

        Deltas are merged into the last snapshot before being yielded, so
        every item carries every field.
        """
        topics = [Topic.tickers(symbol) for symbol in symbols]
        async for event in self.stream(topics, category=category):
            if isinstance(event, TickerEvent):
                yield event.data

    async def stream_klines(
        self,
        subs: list[tuple[str, str]],
        category: Category = Category.LINEAR,
    ) -> AsyncIterator[KlineEvent]:
        """Stream kline frames.

        Args:
            subs: ``(interval, symbol)`` pairs, e.g. ``[("1", "ETHUSDT")]``
            category: Product category
        """
        topics = [Topic.kline(interval, symbol) for interval, symbol in subs]
        async for event in self.stream(topics, category=category):
            if isinstance(event, KlineEvent):
                yield event

    async def stream_liquidations(
        self, symbols: list[str], category: Category = Category.LINEAR
    ) -> AsyncIterator[LiquidationData]:
        topics = [Topic.liquidation(symbol) for symbol in symbols]
        async for event in self.stream(topics, category=category):
            if isinstance(event, LiquidationEvent):
                yield event.data

    # Private account data

    async def stream_positions(
        self, category: Category | None = None
    ) -> AsyncIterator[PositionData]:
        """Yield position updates, optionally for one derivatives category.

        Raises:
            ValueError: For categories without a position topic (spot, option)
        """
        if category not in _POSITION_CATEGORIES:
            raise ValueError(f"No position stream for category {category}")
        async for event in self.stream([Topic.private(Channel.POSITION, category)]):
            if isinstance(event, PositionEvent):
                for item in event.data:
                    yield item

    async def stream_executions(
        self, category: Category | None = None
    ) -> AsyncIterator[ExecutionData]:
        async for event in self.stream([Topic.private(Channel.EXECUTION, category)]):
            if isinstance(event, ExecutionEvent):
                for item in event.data:
                    yield item

    async def stream_fast_executions(
        self, category: Category | None = None
    ) -> AsyncIterator[FastExecData]:
        async for event in self.stream([Topic.private(Channel.FAST_EXECUTION, category)]):
            if isinstance(event, FastExecEvent):
                for item in event.data:
                    yield item

    async def stream_orders(self, category: Category | None = None) -> AsyncIterator[OrderData]:
        async for event in self.stream([Topic.private(Channel.ORDER, category)]):
            if isinstance(event, OrderEvent):
                for item in event.data:
                    yield item

    async def stream_wallet(self) -> AsyncIterator[WalletData]:
        async for event in self.stream([Topic.private(Channel.WALLET)]):
            if isinstance(event, WalletEvent):
                for item in event.data:
                    yield item
