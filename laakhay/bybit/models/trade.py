"""Public trade payloads (``publicTrade.<symbol>``)."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from ..core.enums import EventKind
from .base import BybitModel, OptStr


class WsTrade(BybitModel):
    """Single trade print."""

    timestamp: int = Field(..., alias="T")
    symbol: str = Field(..., alias="s")
    side: str = Field(..., alias="S")
    volume: Decimal = Field(..., alias="v")
    price: Decimal = Field(..., alias="p")
    tick_direction: OptStr = Field(default=None, alias="L")
    id: str = Field(..., alias="i")
    block_trade: bool = Field(default=False, alias="BT")

    @property
    def notional(self) -> Decimal:
        return self.price * self.volume


class TradeEvent(BybitModel):
    """Trade frame; may batch several prints."""

    kind: ClassVar[EventKind] = EventKind.TRADE

    topic: str
    event_type: str = Field(alias="type")
    timestamp: int = Field(default=0, alias="ts")
    data: list[WsTrade]
