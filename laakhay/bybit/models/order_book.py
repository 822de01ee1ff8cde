"""Order book payloads (``orderbook.<depth>.<symbol>``)."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field, field_validator

from ..core.enums import EventKind
from .base import BybitModel

PriceLevel = tuple[Decimal, Decimal]


class WsOrderBook(BybitModel):
    """Bids and asks for one symbol.

    On ``snapshot`` frames the levels are the full book; on ``delta`` frames
    they are changed levels only, with size ``0`` meaning the level was removed.
    """

    symbol: str = Field(..., alias="s")
    bids: list[PriceLevel] = Field(default_factory=list, alias="b")
    asks: list[PriceLevel] = Field(default_factory=list, alias="a")
    update_id: int = Field(..., alias="u")
    seq: int = 0

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def _levels(cls, v: object) -> object:
        if v is None:
            return []
        return v

    @property
    def best_bid(self) -> PriceLevel | None:
        return self.bids[0] if self.bids else None

    @property
    def best_ask(self) -> PriceLevel | None:
        return self.asks[0] if self.asks else None


class OrderBookEvent(BybitModel):
    """Order book frame."""

    kind: ClassVar[EventKind] = EventKind.ORDER_BOOK

    topic: str
    event_type: str = Field(alias="type")
    timestamp: int = Field(default=0, alias="ts")
    cts: int | None = None
    data: WsOrderBook

    @property
    def is_snapshot(self) -> bool:
        return self.event_type == "snapshot"
