"""Core components."""

from .config import (
    DEFAULT_RECV_WINDOW_MS,
    BybitConfig,
    Credentials,
    TransportConfig,
)
from .enums import (
    Category,
    Channel,
    EventKind,
    FrameType,
    OrderOp,
    TickDirection,
    WebsocketAPI,
)
from .exceptions import (
    BybitError,
    ChannelSendError,
    ConfigurationError,
    DecodeError,
    ProviderError,
    RateLimitError,
    TransportError,
)
from .topics import Topic, channel_of, symbol_of

__all__ = [
    # Config
    "BybitConfig",
    "Credentials",
    "TransportConfig",
    "DEFAULT_RECV_WINDOW_MS",
    # Enums
    "Category",
    "Channel",
    "EventKind",
    "FrameType",
    "OrderOp",
    "TickDirection",
    "WebsocketAPI",
    # Exceptions
    "BybitError",
    "ChannelSendError",
    "ConfigurationError",
    "DecodeError",
    "ProviderError",
    "RateLimitError",
    "TransportError",
    # Topics
    "Topic",
    "channel_of",
    "symbol_of",
]
