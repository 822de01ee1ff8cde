"""Realtime websocket runtime."""

from .connection import Connection, generate_req_id
from .demux import DemuxStats, FrameDemultiplexer
from .multiplexer import SubscriptionMultiplexer
from .reconstructor import SnapshotState, TickerReconstructor, apply_partial
from .session import StreamSession
from .sink import CallbackSink, EventSink, QueueSink

__all__ = [
    "CallbackSink",
    "Connection",
    "DemuxStats",
    "EventSink",
    "FrameDemultiplexer",
    "QueueSink",
    "SnapshotState",
    "StreamSession",
    "SubscriptionMultiplexer",
    "TickerReconstructor",
    "apply_partial",
    "generate_req_id",
]
