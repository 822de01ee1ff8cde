"""Kline (candlestick) payloads (``kline.<interval>.<symbol>``)."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from ..core.enums import EventKind
from .base import BybitModel


class KlineData(BybitModel):
    """One candle; ``confirm`` is True once the interval has closed."""

    start: int
    end: int
    interval: str
    open: Decimal
    close: Decimal
    high: Decimal
    low: Decimal
    volume: Decimal
    turnover: Decimal
    confirm: bool
    timestamp: int


class KlineEvent(BybitModel):
    """Kline frame."""

    kind: ClassVar[EventKind] = EventKind.KLINE

    topic: str
    event_type: str = Field(alias="type")
    timestamp: int = Field(default=0, alias="ts")
    data: list[KlineData]
