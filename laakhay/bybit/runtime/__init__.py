"""Runtime layer: connection, subscription, decoding and delivery."""

from .ws import (
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

__all__ = [
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
]
