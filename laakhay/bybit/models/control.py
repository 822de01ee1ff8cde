"""Control-plane frames: pong, auth and subscribe acknowledgements."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import AliasChoices, Field

from ..core.enums import EventKind
from .base import BybitModel


class ControlEvent(BybitModel):
    """Response to an ``op`` request.

    Public endpoints answer with ``success``/``ret_msg``; the private endpoint
    answers pings with ``ret_code`` instead, so both are optional. The
    order-entry endpoint spells the same keys in camelCase.
    """

    kind: ClassVar[EventKind] = EventKind.CONTROL

    op: str
    success: bool | None = None
    ret_code: int | None = Field(default=None, validation_alias=AliasChoices("ret_code", "retCode"))
    ret_msg: str = Field(default="", validation_alias=AliasChoices("ret_msg", "retMsg"))
    conn_id: str = Field(default="", validation_alias=AliasChoices("conn_id", "connId"))
    req_id: str | None = Field(default=None, validation_alias=AliasChoices("req_id", "reqId"))
    args: list[str] | None = None
    data: Any = None

    model_config = BybitModel.model_config | {"alias_generator": None}

    @property
    def ok(self) -> bool:
        """False only when the server explicitly reported failure."""
        if self.success is not None:
            return self.success
        if self.ret_code is not None:
            return self.ret_code == 0
        return True

    @property
    def is_pong(self) -> bool:
        return self.op in ("pong", "ping")
