"""Typed event union produced by the frame demultiplexer."""

from __future__ import annotations

from typing import Union

from .control import ControlEvent
from .kline import KlineEvent
from .liquidation import LiquidationEvent
from .order_ack import TradeStreamEvent
from .order_book import OrderBookEvent
from .private import (
    ExecutionEvent,
    FastExecEvent,
    OrderEvent,
    PositionEvent,
    WalletEvent,
)
from .ticker import TickerEvent
from .trade import TradeEvent

WebsocketEvent = Union[
    OrderBookEvent,
    TradeEvent,
    TickerEvent,
    KlineEvent,
    LiquidationEvent,
    PositionEvent,
    ExecutionEvent,
    FastExecEvent,
    OrderEvent,
    WalletEvent,
    TradeStreamEvent,
    ControlEvent,
]

EVENT_TYPES: tuple[type, ...] = WebsocketEvent.__args__
