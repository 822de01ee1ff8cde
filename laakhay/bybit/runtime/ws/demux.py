"""Inbound frame demultiplexing into typed events.

Architecture:
    Decoding is explicitly two-step. First the envelope is inspected for
    its discriminants only (``op`` for control frames and order acks,
    ``topic`` + ``type`` for data frames). Then a decoder is picked from a lookup table keyed on
    ``(Channel, FrameType | None)`` and run on the full frame. Nothing is
    decoded by trial-and-error across the whole event union.

Failure semantics:
    - Unknown channel, missing topic, non-object frame: dropped, no error
    - Known channel whose payload fails validation: ``DecodeError`` for that
      frame only; the caller logs it and moves on
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from ...core.enums import Channel, FrameType
from ...core.exceptions import DecodeError
from ...core.topics import channel_of
from ...models import (
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
    TickerData,
    TickerEvent,
    TradeEvent,
    TradeStreamEvent,
    WalletEvent,
    WebsocketEvent,
)

logger = logging.getLogger(__name__)

Decoder = Callable[[dict[str, Any]], WebsocketEvent]
DispatchKey = tuple[Channel, FrameType | None]

# Replies to order-entry requests; every other op is a control frame
ORDER_OP_PREFIX = "order."


def _decode_ticker_data(data: Any, frame_type: FrameType | None) -> TickerData:
    if not isinstance(data, dict):
        raise DecodeError("Ticker data must be an object")
    # Spot tickers are always complete and carry the USD index price
    if "usdIndexPrice" in data:
        return SpotTicker.model_validate(data)
    if frame_type is FrameType.SNAPSHOT:
        return LinearTickerSnapshot.model_validate(data)
    if frame_type is FrameType.DELTA:
        return LinearTickerDelta.model_validate(data)
    # No marker: prefer a full record, fall back to a partial one
    try:
        return LinearTickerSnapshot.model_validate(data)
    except ValidationError:
        return LinearTickerDelta.model_validate(data)


def _ticker_decoder(frame_type: FrameType | None) -> Decoder:
    def decode(frame: dict[str, Any]) -> TickerEvent:
        data = _decode_ticker_data(frame.get("data"), frame_type)
        inferred = FrameType.DELTA if isinstance(data, LinearTickerDelta) else FrameType.SNAPSHOT
        return TickerEvent(
            topic=frame["topic"],
            event_type=frame.get("type") or inferred.value,
            timestamp=frame.get("ts", 0),
            cs=frame.get("cs"),
            data=data,
        )

    return decode


def _build_table() -> dict[DispatchKey, Decoder]:
    table: dict[DispatchKey, Decoder] = {}

    whole_frame: dict[Channel, type] = {
        Channel.ORDERBOOK: OrderBookEvent,
        Channel.PUBLIC_TRADE: TradeEvent,
        Channel.KLINE: KlineEvent,
        Channel.LIQUIDATION: LiquidationEvent,
    }
    for channel, model in whole_frame.items():
        for frame_type in (FrameType.SNAPSHOT, FrameType.DELTA, None):
            table[(channel, frame_type)] = model.model_validate

    for frame_type in (FrameType.SNAPSHOT, FrameType.DELTA, None):
        table[(Channel.TICKERS, frame_type)] = _ticker_decoder(frame_type)

    private: dict[Channel, type] = {
        Channel.POSITION: PositionEvent,
        Channel.EXECUTION: ExecutionEvent,
        Channel.FAST_EXECUTION: FastExecEvent,
        Channel.ORDER: OrderEvent,
        Channel.WALLET: WalletEvent,
    }
    for channel, model in private.items():
        table[(channel, None)] = model.model_validate

    return table


@dataclass
class DemuxStats:
    """Per-demultiplexer frame counters."""

    decoded: int = 0
    dropped: int = 0
    failed: int = 0


class FrameDemultiplexer:
    """Routes parsed frames to one of the typed event variants."""

    def __init__(self, table: dict[DispatchKey, Decoder] | None = None) -> None:
        self._table = dict(table) if table is not None else _build_table()
        self.stats = DemuxStats()

    @property
    def table(self) -> dict[DispatchKey, Decoder]:
        return dict(self._table)

    def route(self, frame: Any) -> DispatchKey | None:
        """Pick the dispatch key for a data frame, or None if it is not routable."""
        if not isinstance(frame, dict):
            return None
        topic = frame.get("topic")
        if not isinstance(topic, str):
            return None
        channel = channel_of(topic)
        if channel is None:
            return None
        try:
            frame_type = FrameType(frame["type"]) if "type" in frame else None
        except ValueError:
            frame_type = None
        key = (channel, frame_type)
        if key in self._table:
            return key
        fallback = (channel, None)
        return fallback if fallback in self._table else None

    def decode(self, frame: Any) -> WebsocketEvent | None:
        """Decode one frame.

        Returns:
            The typed event, or None when the frame is not recognised

        Raises:
            DecodeError: If the frame was routed but its payload is malformed
        """
        if isinstance(frame, dict) and "op" in frame and "topic" not in frame:
            if str(frame["op"]).startswith(ORDER_OP_PREFIX):
                return self._run(TradeStreamEvent.model_validate, frame, topic=None)
            return self._run(ControlEvent.model_validate, frame, topic=None)

        key = self.route(frame)
        if key is None:
            self.stats.dropped += 1
            topic = frame.get("topic") if isinstance(frame, dict) else None
            logger.debug(f"Dropping unrecognised frame (topic={topic!r})")
            return None
        return self._run(self._table[key], frame, topic=frame["topic"])

    def _run(self, decoder: Decoder, frame: dict[str, Any], topic: str | None) -> WebsocketEvent:
        try:
            event = decoder(frame)
        except ValidationError as e:
            self.stats.failed += 1
            raise DecodeError(
                f"Malformed frame for {topic or 'control'}: {e.error_count()} validation errors",
                topic=topic,
            ) from e
        except DecodeError as e:
            self.stats.failed += 1
            e.topic = topic
            raise
        self.stats.decoded += 1
        return event
