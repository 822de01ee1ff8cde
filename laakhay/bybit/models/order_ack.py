"""Replies from the order-entry endpoint (``/v5/trade``)."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator

from ..core.enums import EventKind
from .base import BybitModel, OptInt, OptStr


class OrderAck(BybitModel):
    """Ids of the order the request acted on; blank when it was rejected."""

    order_id: str = ""
    order_link_id: str = ""


class TradeStreamHeader(BybitModel):
    """Rate-limit headers echoed with each reply."""

    limit: OptInt = Field(default=None, alias="X-Bapi-Limit")
    limit_status: OptInt = Field(default=None, alias="X-Bapi-Limit-Status")
    limit_reset_timestamp: OptInt = Field(default=None, alias="X-Bapi-Limit-Reset-Timestamp")
    trace_id: OptStr = Field(default=None, alias="Traceid")
    time_now: OptInt = Field(default=None, alias="Timenow")


class TradeStreamEvent(BybitModel):
    """Acknowledgement of an ``order.*`` request.

    ``req_id`` matches the value returned by ``Connection.send_order``.
    A non-zero ``ret_code`` means the exchange rejected the request.
    """

    kind: ClassVar[EventKind] = EventKind.ORDER_ACK

    req_id: str | None = None
    ret_code: int
    ret_msg: str = ""
    op: str
    data: OrderAck = Field(default_factory=OrderAck)
    header: TradeStreamHeader = Field(default_factory=TradeStreamHeader)
    conn_id: str = ""

    @field_validator("data", "header", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def ok(self) -> bool:
        return self.ret_code == 0

    @property
    def order_id(self) -> str:
        return self.data.order_id
