"""Shared model base and wire-value coercions.

Bybit encodes numbers as JSON strings and uses ``""`` for "no value". The
annotated types here turn those into ``Decimal`` / ``None`` before pydantic
validation runs.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def to_wire_name(name: str) -> str:
    """snake_case to Bybit camelCase; digits keep their case (price24hPcnt)."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _blank_to_none(value: Any) -> Any:
    if value == "":
        return None
    return value


def _blank_to_zero(value: Any) -> Any:
    if value is None or value == "":
        return Decimal("0")
    return value


# Number that is always present; blank wire values read as zero
Num = Annotated[Decimal, BeforeValidator(_blank_to_zero)]
# Number that may be absent; blank wire values read as None
OptNum = Annotated[Decimal | None, BeforeValidator(_blank_to_none)]
OptInt = Annotated[int | None, BeforeValidator(_blank_to_none)]
OptStr = Annotated[str | None, BeforeValidator(_blank_to_none)]


class BybitModel(BaseModel):
    """Immutable model reading Bybit's camelCase wire names."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_wire_name,
        extra="ignore",
    )
