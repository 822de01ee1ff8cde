"""Laakhay Bybit - Bybit v5 realtime streaming client."""

from .auth import sign, sign_rest, sign_ws_auth
from .connectors import BybitRESTClient, BybitWSConnector
from .core import (
    BybitConfig,
    BybitError,
    Category,
    Channel,
    ChannelSendError,
    ConfigurationError,
    Credentials,
    DecodeError,
    EventKind,
    FrameType,
    OrderOp,
    ProviderError,
    RateLimitError,
    TickDirection,
    Topic,
    TransportConfig,
    TransportError,
    WebsocketAPI,
)
from .models import (
    ControlEvent,
    ExecutionEvent,
    FastExecEvent,
    KlineEvent,
    LinearTickerDelta,
    LinearTickerSnapshot,
    LiquidationEvent,
    OrderBookEvent,
    OrderEvent,
    PositionEvent,
    SpotTicker,
    TickerEvent,
    TradeEvent,
    TradeStreamEvent,
    WalletEvent,
    WebsocketEvent,
)
from .runtime import (
    CallbackSink,
    Connection,
    EventSink,
    FrameDemultiplexer,
    QueueSink,
    SnapshotState,
    StreamSession,
    SubscriptionMultiplexer,
    TickerReconstructor,
    apply_partial,
)

__version__ = "0.1.0"

__all__ = [
    # Config & enums
    "BybitConfig",
    "Credentials",
    "TransportConfig",
    "Category",
    "Channel",
    "EventKind",
    "FrameType",
    "OrderOp",
    "TickDirection",
    "Topic",
    "WebsocketAPI",
    # Signing
    "sign",
    "sign_rest",
    "sign_ws_auth",
    # Connectors
    "BybitRESTClient",
    "BybitWSConnector",
    # Runtime
    "CallbackSink",
    "Connection",
    "EventSink",
    "FrameDemultiplexer",
    "QueueSink",
    "SnapshotState",
    "StreamSession",
    "SubscriptionMultiplexer",
    "TickerReconstructor",
    "apply_partial",
    # Events
    "ControlEvent",
    "ExecutionEvent",
    "FastExecEvent",
    "KlineEvent",
    "LinearTickerDelta",
    "LinearTickerSnapshot",
    "LiquidationEvent",
    "OrderBookEvent",
    "OrderEvent",
    "PositionEvent",
    "SpotTicker",
    "TickerEvent",
    "TradeEvent",
    "TradeStreamEvent",
    "WalletEvent",
    "WebsocketEvent",
    # Exceptions
    "BybitError",
    "ChannelSendError",
    "ConfigurationError",
    "DecodeError",
    "ProviderError",
    "RateLimitError",
    "TransportError",
]
