"""Data models for Bybit realtime streams.

Architecture:
    Pydantic v2 models mapping Bybit's JSON frames onto typed, immutable
    (frozen=True) Python objects. Each topic frame has an event envelope
    (``*Event``) wrapping its payload type (``*Data`` / ``Ws*``).

Design Decisions:
    - Decimal for prices and sizes: no float rounding on pass-through data
    - camelCase aliases: models validate raw frames directly
    - extra="ignore": new server fields never break decoding
    - Snapshot/Delta split for tickers: deltas keep every field optional

Model Categories:
    - Public market data: OrderBookEvent, TradeEvent, TickerEvent, KlineEvent,
      LiquidationEvent
    - Private account data: PositionEvent, ExecutionEvent, FastExecEvent,
      OrderEvent, WalletEvent
    - Order entry: TradeStreamEvent (acks of order.* requests)
    - Control plane: ControlEvent
"""

from .base import BybitModel
from .control import ControlEvent
from .events import EVENT_TYPES, WebsocketEvent
from .kline import KlineData, KlineEvent
from .liquidation import LiquidationData, LiquidationEvent
from .order_ack import OrderAck, TradeStreamEvent, TradeStreamHeader
from .order_book import OrderBookEvent, PriceLevel, WsOrderBook
from .private import (
    CoinData,
    ExecutionData,
    ExecutionEvent,
    FastExecData,
    FastExecEvent,
    OrderData,
    OrderEvent,
    PositionData,
    PositionEvent,
    WalletData,
    WalletEvent,
)
from .ticker import (
    LinearTickerDelta,
    LinearTickerSnapshot,
    SpotTicker,
    TickerData,
    TickerEvent,
)
from .trade import TradeEvent, WsTrade

__all__ = [
    "BybitModel",
    "CoinData",
    "ControlEvent",
    "EVENT_TYPES",
    "ExecutionData",
    "ExecutionEvent",
    "FastExecData",
    "FastExecEvent",
    "KlineData",
    "KlineEvent",
    "LinearTickerDelta",
    "LinearTickerSnapshot",
    "LiquidationData",
    "LiquidationEvent",
    "OrderAck",
    "OrderBookEvent",
    "OrderData",
    "OrderEvent",
    "PositionData",
    "PositionEvent",
    "PriceLevel",
    "SpotTicker",
    "TickerData",
    "TickerEvent",
    "TradeEvent",
    "TradeStreamEvent",
    "TradeStreamHeader",
    "WalletData",
    "WalletEvent",
    "WebsocketEvent",
    "WsOrderBook",
    "WsTrade",
]
