"""Topic subscriptions multiplexed over one connection."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...core.topics import Topic
from .connection import Connection, generate_req_id

logger = logging.getLogger(__name__)


class SubscriptionMultiplexer:
    """Tracks the active topic set of a connection and sends control frames.

    Fire-and-forget: acks are not awaited. Subscribing to a topic that is
    already active is a no-op, so the set of active topics stays unique.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._active: set[str] = set()

    @property
    def active(self) -> frozenset[str]:
        return frozenset(self._active)

    def is_active(self, topic: str | Topic) -> bool:
        return str(topic) in self._active

    async def subscribe(self, topics: Iterable[str | Topic]) -> list[str]:
        """Subscribe to every topic not yet active.

        Returns:
            Topics actually sent (empty when nothing new was requested)
        """
        fresh = self._new_topics(topics)
        if not fresh:
            return []
        await self._connection.send_json(
            {"req_id": generate_req_id(), "op": "subscribe", "args": fresh}
        )
        self._active.update(fresh)
        logger.debug(f"Subscribed to {len(fresh)} topics: {fresh}")
        return fresh

    async def unsubscribe(self, topics: Iterable[str | Topic]) -> list[str]:
        """Unsubscribe from active topics; unknown topics are ignored.

        Returns:
            Topics actually removed
        """
        stale = [t for t in dict.fromkeys(str(t) for t in topics) if t in self._active]
        if not stale:
            return []
        await self._connection.send_json(
            {"req_id": generate_req_id(), "op": "unsubscribe", "args": stale}
        )
        self._active.difference_update(stale)
        logger.debug(f"Unsubscribed from {len(stale)} topics: {stale}")
        return stale

    def clear(self) -> None:
        """Forget all topics (connection teardown)."""
        self._active.clear()

    def _new_topics(self, topics: Iterable[str | Topic]) -> list[str]:
        # Preserve caller order, drop duplicates within the call and already-active topics
        return [t for t in dict.fromkeys(str(t) for t in topics) if t and t not in self._active]
