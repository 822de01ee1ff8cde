"""Ticker payloads.

Linear (and inverse) tickers arrive as one ``snapshot`` followed by
``delta`` frames carrying only changed fields. Spot tickers are always
full snapshots.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, ClassVar

from pydantic import BeforeValidator, Field

from ..core.enums import EventKind, TickDirection
from .base import BybitModel, Num, OptInt, OptNum, OptStr

_TICK_DIRECTIONS = frozenset(d.value for d in TickDirection)


def _known_tick_direction(value: Any) -> Any:
    # Blank or unrecognised directions must not reject the whole ticker
    if isinstance(value, TickDirection):
        return value
    if isinstance(value, str) and value in _TICK_DIRECTIONS:
        return value
    return None


OptTickDirection = Annotated[TickDirection | None, BeforeValidator(_known_tick_direction)]


class LinearTickerSnapshot(BybitModel):
    """Complete ticker view for a derivatives instrument.

    Only ``symbol`` is mandatory; every other field defaults when absent so
    that a partial first frame still yields a complete record.
    """

    symbol: str = Field(..., min_length=1)
    tick_direction: OptTickDirection = None
    price_24h_pcnt: Num = Decimal("0")
    last_price: Num = Decimal("0")
    prev_price_24h: Num = Decimal("0")
    high_price_24h: Num = Decimal("0")
    low_price_24h: Num = Decimal("0")
    prev_price_1h: Num = Decimal("0")
    mark_price: Num = Decimal("0")
    index_price: Num = Decimal("0")
    open_interest: Num = Decimal("0")
    open_interest_value: Num = Decimal("0")
    turnover_24h: Num = Decimal("0")
    volume_24h: Num = Decimal("0")
    funding_rate: Num = Decimal("0")
    next_funding_time: int = 0
    bid_price: Num = Field(default=Decimal("0"), alias="bid1Price")
    bid_size: Num = Field(default=Decimal("0"), alias="bid1Size")
    ask_price: Num = Field(default=Decimal("0"), alias="ask1Price")
    ask_size: Num = Field(default=Decimal("0"), alias="ask1Size")
    pre_open_price: OptNum = None
    pre_qty: OptNum = None
    cur_pre_listing_phase: OptStr = None


class LinearTickerDelta(BybitModel):
    """Partial ticker update; any field may be missing."""

    symbol: str | None = None
    tick_direction: OptTickDirection = None
    price_24h_pcnt: OptNum = None
    last_price: OptNum = None
    prev_price_24h: OptNum = None
    high_price_24h: OptNum = None
    low_price_24h: OptNum = None
    prev_price_1h: OptNum = None
    mark_price: OptNum = None
    index_price: OptNum = None
    open_interest: OptNum = None
    open_interest_value: OptNum = None
    turnover_24h: OptNum = None
    volume_24h: OptNum = None
    funding_rate: OptNum = None
    next_funding_time: OptInt = None
    bid_price: OptNum = Field(default=None, alias="bid1Price")
    bid_size: OptNum = Field(default=None, alias="bid1Size")
    ask_price: OptNum = Field(default=None, alias="ask1Price")
    ask_size: OptNum = Field(default=None, alias="ask1Size")
    pre_open_price: OptNum = None
    pre_qty: OptNum = None
    cur_pre_listing_phase: OptStr = None

    @property
    def is_empty(self) -> bool:
        """True when the delta carries no field besides the symbol."""
        return all(
            getattr(self, name) is None for name in type(self).model_fields if name != "symbol"
        )


class SpotTicker(BybitModel):
    """Spot ticker; always delivered as a full snapshot."""

    symbol: str = Field(..., min_length=1)
    last_price: Num = Decimal("0")
    high_price_24h: Num = Decimal("0")
    low_price_24h: Num = Decimal("0")
    prev_price_24h: Num = Decimal("0")
    volume_24h: Num = Decimal("0")
    turnover_24h: Num = Decimal("0")
    price_24h_pcnt: Num = Decimal("0")
    usd_index_price: Num = Decimal("0")


TickerData = LinearTickerSnapshot | LinearTickerDelta | SpotTicker


class TickerEvent(BybitModel):
    """``tickers.<symbol>`` frame."""

    kind: ClassVar[EventKind] = EventKind.TICKER

    topic: str
    event_type: str = Field(alias="type")
    timestamp: int = Field(default=0, alias="ts")
    cs: int | None = None
    data: TickerData

    @property
    def symbol(self) -> str | None:
        return self.data.symbol

    @property
    def is_delta(self) -> bool:
        return isinstance(self.data, LinearTickerDelta)
