"""Precise unit tests for event sinks."""

from __future__ import annotations

import pytest

from laakhay.bybit.core import ChannelSendError, TransportError
from laakhay.bybit.models import ControlEvent
from laakhay.bybit.runtime.ws import CallbackSink, QueueSink


def _control(n: int) -> ControlEvent:
    return ControlEvent(op="ping", req_id=str(n), success=True)


class TestCallbackSink:
    """Test CallbackSink."""

    @pytest.mark.asyncio
    async def test_sync_handler(self):
        """Test sync handler receives events in order."""
        seen = []
        sink = CallbackSink(seen.append)
        for n in range(3):
            await sink.publish(_control(n))
        assert [e.req_id for e in seen] == ["0", "1", "2"]

    @pytest.mark.asyncio
    async def test_async_handler(self):
        """Test async handler is awaited."""
        seen = []

        async def handler(event):
            seen.append(event)

        await CallbackSink(handler).publish(_control(1))
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_handler_errors_tolerated(self):
        """Test raising or False-returning handler does not stop publishing."""
        calls = []

        def handler(event):
            calls.append(event)
            if event.req_id == "0":
                raise RuntimeError("boom")
            return False

        sink = CallbackSink(handler)
        await sink.publish(_control(0))
        await sink.publish(_control(1))
        assert len(calls) == 2
        assert sink.failures == 2


class TestQueueSink:
    """Test QueueSink."""

    @pytest.mark.asyncio
    async def test_ordering_and_end_of_stream(self):
        """Test events come out in publish order, then iteration stops."""
        sink = QueueSink()
        for n in range(3):
            await sink.publish(_control(n))
        await sink.close()

        received = [event.req_id async for event in sink]
        assert received == ["0", "1", "2"]
        assert sink.closed

    @pytest.mark.asyncio
    async def test_end_seen_by_later_readers(self):
        """Test a drained sink keeps signalling end-of-stream."""
        sink = QueueSink()
        await sink.close()
        with pytest.raises(StopAsyncIteration):
            await sink.get()
        with pytest.raises(StopAsyncIteration):
            await sink.get()

    @pytest.mark.asyncio
    async def test_publish_after_close(self):
        """Test publishing to a closed sink raises ChannelSendError."""
        sink = QueueSink()
        await sink.close()
        with pytest.raises(ChannelSendError):
            await sink.publish(_control(0))

    @pytest.mark.asyncio
    async def test_fail_reraises(self):
        """Test terminal error reaches the consumer after queued events."""
        sink = QueueSink()
        await sink.publish(_control(0))
        await sink.fail(TransportError("gone"))
        await sink.close()

        assert (await sink.get()).req_id == "0"
        with pytest.raises(TransportError):
            await sink.get()
        with pytest.raises(StopAsyncIteration):
            await sink.get()

    @pytest.mark.asyncio
    async def test_qsize(self):
        """Test publish never blocks and grows the queue."""
        sink = QueueSink()
        for n in range(100):
            await sink.publish(_control(n))
        assert sink.qsize() == 100
