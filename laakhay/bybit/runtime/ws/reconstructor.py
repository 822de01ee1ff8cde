"""Snapshot + delta state reconstruction.

Architecture:
    ``apply_partial`` is a pure function (old value, delta) -> new value and
    holds all merge logic. ``SnapshotState`` is the per-key state machine
    ``Unseen -> Known(v)`` built on top of it. ``TickerReconstructor`` wires
    the two to ticker events.

Policy for a delta arriving before any snapshot (``Unseen``): drop it and
wait for the next snapshot. Bybit sends a snapshot right after subscribe, so
only deltas racing a fresh subscription are affected.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel

from ...models import LinearTickerDelta, LinearTickerSnapshot, TickerEvent

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=BaseModel)

# Identity fields never overwritten by a delta
_KEY_FIELDS = frozenset({"symbol"})


def apply_partial(base: V, delta: BaseModel) -> V:
    """Overlay every non-None field of ``delta`` onto ``base``.

    Only fields that exist on ``base`` are considered. A delta with all
    fields None returns ``base`` unchanged. No cross-field validation is done.
    """
    base_fields = type(base).model_fields
    update = {
        name: value
        for name in type(delta).model_fields
        if name in base_fields
        and name not in _KEY_FIELDS
        and (value := getattr(delta, name)) is not None
    }
    if not update:
        return base
    return base.model_copy(update=update)


class SnapshotState(Generic[K, V]):
    """Last fully-known value per key.

    Owned by a single stream session; not shared across tasks.
    """

    def __init__(self) -> None:
        self._values: dict[K, V] = {}
        self.dropped_deltas = 0

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[K]:
        return iter(self._values)

    def get(self, key: K) -> V | None:
        return self._values.get(key)

    def snapshot(self, key: K, value: V) -> V:
        """Replace the baseline for ``key`` (Unseen/Known -> Known(value))."""
        self._values[key] = value
        return value

    def delta(self, key: K, delta: BaseModel) -> V | None:
        """Merge a delta into the known value.

        Returns:
            The merged value, or None if ``key`` has no snapshot yet
        """
        current = self._values.get(key)
        if current is None:
            self.dropped_deltas += 1
            logger.debug(f"Dropping delta for {key!r}: no snapshot yet")
            return None
        merged = apply_partial(current, delta)
        self._values[key] = merged
        return merged

    def discard(self, key: K) -> None:
        self._values.pop(key, None)

    def clear(self) -> None:
        self._values.clear()


class TickerReconstructor:
    """Turns ticker snapshot/delta events into complete ticker events.

    Keyed by topic, so the same symbol on two categories stays separate.
    """

    def __init__(self) -> None:
        self.state: SnapshotState[str, LinearTickerSnapshot] = SnapshotState()

    def apply(self, event: TickerEvent) -> TickerEvent | None:
        """Fold one ticker event into state.

        Returns:
            An event whose ``data`` is a complete record, or None when a delta
            arrived before its snapshot
        """
        data = event.data
        if isinstance(data, LinearTickerDelta):
            merged = self.state.delta(event.topic, data)
            if merged is None:
                return None
            return event.model_copy(update={"data": merged})
        if isinstance(data, LinearTickerSnapshot):
            self.state.snapshot(event.topic, data)
        # Spot tickers are always complete and need no state
        return event

    def current(self, topic: str) -> LinearTickerSnapshot | None:
        return self.state.get(topic)

    def discard(self, topic: str) -> None:
        self.state.discard(topic)

    def clear(self) -> None:
        self.state.clear()
