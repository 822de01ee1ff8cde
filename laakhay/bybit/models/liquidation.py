"""Liquidation payloads (``liquidation.<symbol>``)."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from ..core.enums import EventKind
from .base import BybitModel


class LiquidationData(BybitModel):
    updated_time: int
    symbol: str
    side: str
    size: Decimal
    price: Decimal


class LiquidationEvent(BybitModel):
    """Liquidation frame."""

    kind: ClassVar[EventKind] = EventKind.LIQUIDATION

    topic: str
    event_type: str = Field(alias="type")
    timestamp: int = Field(default=0, alias="ts")
    data: LiquidationData
