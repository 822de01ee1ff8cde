"""Enumerations shared by the streaming and REST layers.

Architecture:
    String enums so values can be dropped straight into topic strings and
    JSON frames. Values match Bybit v5 wire spellings exactly.

Key Types:
    - Category: product line (spot, linear, inverse, option)
    - WebsocketAPI: websocket endpoint path per channel family
    - Channel: first segment of a topic string
    - FrameType: snapshot vs delta marker on topic frames
    - OrderOp: request ops of the order-entry endpoint
    - EventKind: tag of each typed event variant
    - TickDirection: last tick direction on ticker payloads
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Bybit v5 product category."""

    SPOT = "spot"
    LINEAR = "linear"
    INVERSE = "inverse"
    OPTION = "option"


class WebsocketAPI(str, Enum):
    """Websocket endpoint paths, relative to the configured ws base URL."""

    PUBLIC_SPOT = "/public/spot"
    PUBLIC_LINEAR = "/public/linear"
    PUBLIC_INVERSE = "/public/inverse"
    PUBLIC_OPTION = "/public/option"
    PRIVATE = "/private"
    TRADE = "/trade"

    @property
    def is_private(self) -> bool:
        """True for endpoints that require the ``auth`` handshake."""
        return self in (WebsocketAPI.PRIVATE, WebsocketAPI.TRADE)

    @classmethod
    def for_category(cls, category: Category) -> WebsocketAPI:
        """Public endpoint that serves market data for a category."""
        return {
            Category.SPOT: cls.PUBLIC_SPOT,
            Category.LINEAR: cls.PUBLIC_LINEAR,
            Category.INVERSE: cls.PUBLIC_INVERSE,
            Category.OPTION: cls.PUBLIC_OPTION,
        }[category]


class Channel(str, Enum):
    """Topic channel (leading topic segment).

    ``execution.fast`` is a channel of its own even though it shares the
    ``execution`` prefix.
    """

    ORDERBOOK = "orderbook"
    PUBLIC_TRADE = "publicTrade"
    TICKERS = "tickers"
    KLINE = "kline"
    LIQUIDATION = "liquidation"
    POSITION = "position"
    EXECUTION = "execution"
    FAST_EXECUTION = "execution.fast"
    ORDER = "order"
    WALLET = "wallet"

    @property
    def is_private(self) -> bool:
        return self in _PRIVATE_CHANNELS

    @property
    def has_granularity(self) -> bool:
        """True when topics carry a middle segment (depth or interval)."""
        return self in (Channel.ORDERBOOK, Channel.KLINE)


_PRIVATE_CHANNELS = frozenset(
    {
        Channel.POSITION,
        Channel.EXECUTION,
        Channel.FAST_EXECUTION,
        Channel.ORDER,
        Channel.WALLET,
    }
)


class OrderOp(str, Enum):
    """Request operations accepted by the order-entry (``/trade``) endpoint."""

    CREATE = "order.create"
    AMEND = "order.amend"
    CANCEL = "order.cancel"
    CREATE_BATCH = "order.create-batch"
    AMEND_BATCH = "order.amend-batch"
    CANCEL_BATCH = "order.cancel-batch"


class FrameType(str, Enum):
    """``type`` field of a public topic frame."""

    SNAPSHOT = "snapshot"
    DELTA = "delta"


class EventKind(str, Enum):
    """Tag for each variant of the typed event union."""

    ORDER_BOOK = "order_book"
    TRADE = "trade"
    TICKER = "ticker"
    KLINE = "kline"
    LIQUIDATION = "liquidation"
    POSITION = "position"
    EXECUTION = "execution"
    FAST_EXECUTION = "fast_execution"
    ORDER = "order"
    WALLET = "wallet"
    CONTROL = "control"
    ORDER_ACK = "order_ack"


class TickDirection(str, Enum):
    """Direction of the last price tick."""

    PLUS_TICK = "PlusTick"
    ZERO_PLUS_TICK = "ZeroPlusTick"
    MINUS_TICK = "MinusTick"
    ZERO_MINUS_TICK = "ZeroMinusTick"
