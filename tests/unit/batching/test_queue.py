"""Unit tests for AsyncBatchQueue."""

from __future__ import annotations

import asyncio
import logging

import pytest

from clientlog.batching import AsyncBatchQueue
from clientlog.kernel.errors import InvalidSettingValueError


class Collector:
    def __init__(self) -> None:
        self.batches: list[list[int]] = []

    def __call__(self, items: list[int]) -> None:
        self.batches.append(items)


# ---------------------------------------------------------------------------
# Triggers
# ---------------------------------------------------------------------------


class TestTriggers:
    def test_size_trigger_flushes_in_push_order(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(2, 100, sink)
            queue.push(1)
            assert sink.batches == []
            queue.push(2)
            await queue.join()
            assert sink.batches == [[1, 2]]
            assert len(queue) == 0
            assert queue.timer_pending is False

        asyncio.run(run())

    def test_timer_trigger_flushes_single_item(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(2, 100, sink)
            queue.push(1)
            assert queue.timer_pending is True
            await asyncio.sleep(0.15)
            await queue.join()
            assert sink.batches == [[1]]
            assert queue.timer_pending is False

        asyncio.run(run())

    def test_timer_armed_once_per_batch(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(10, 100, sink)
            queue.push(1)
            await asyncio.sleep(0.01)
            queue.push(2)
            assert queue.timer_pending is True
            await asyncio.sleep(0.15)
            await queue.join()
            assert sink.batches == [[1, 2]]

        asyncio.run(run())

    def test_timer_rearmed_on_next_event_loop(self) -> None:
        sink = Collector()
        queue = AsyncBatchQueue(10, 50, sink)

        async def first() -> None:
            queue.push(1)

        async def second() -> None:
            assert queue.timer_pending is False
            queue.push(2)
            assert queue.timer_pending is True
            await asyncio.sleep(0.2)
            await queue.join()

        asyncio.run(first())
        asyncio.run(second())
        assert sink.batches == [[1, 2]]
        assert len(queue) == 0

    def test_manual_flush_drains_partial_buffer_and_cancels_timer(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(5, 100, sink)
            queue.push(1)
            queue.push(2)
            await queue.flush()
            assert sink.batches == [[1, 2]]
            assert queue.timer_pending is False
            await asyncio.sleep(0.15)
            assert sink.batches == [[1, 2]]

        asyncio.run(run())

    def test_flush_on_empty_buffer_is_noop(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(5, 100, sink)
            await queue.flush()

        asyncio.run(run())
        assert sink.batches == []

    def test_ordering_and_retention_across_batches(self) -> None:
        sink = Collector()

        async def run() -> None:
            queue = AsyncBatchQueue(3, 1000, sink)
            for i in range(7):
                queue.push(i)
            await queue.join()
            await queue.flush()

        asyncio.run(run())
        assert sink.batches[0] == [0, 1, 2]
        assert [i for batch in sink.batches for i in batch] == list(range(7))

    def test_async_flush_callback_is_awaited(self) -> None:
        seen: list[list[int]] = []

        async def slow(items: list[int]) -> None:
            await asyncio.sleep(0.01)
            seen.append(items)

        async def run() -> None:
            queue = AsyncBatchQueue(10, 100, slow)
            queue.push(1)
            await queue.flush()
            assert seen == [[1]]

        asyncio.run(run())


# ---------------------------------------------------------------------------
# At most one flush in flight
# ---------------------------------------------------------------------------


class TestInFlight:
    def test_concurrent_flush_is_skipped_and_new_items_retained(self) -> None:
        seen: list[list[int]] = []

        async def run() -> None:
            gate = asyncio.Event()

            async def blocked(items: list[int]) -> None:
                seen.append(items)
                await gate.wait()

            queue = AsyncBatchQueue(10, 1000, blocked)
            queue.push(1)
            first = asyncio.create_task(queue.flush())
            await asyncio.sleep(0)
            assert queue.in_flight is True

            queue.push(2)
            await queue.flush()  # returns at once, does not wait for the first
            assert seen == [[1]]
            assert len(queue) == 1

            gate.set()
            await first
            assert queue.in_flight is False
            await queue.flush()
            assert seen == [[1], [2]]

        asyncio.run(run())

    def test_callback_failure_propagates_and_releases_flag(self) -> None:
        calls: list[list[int]] = []

        def flaky(items: list[int]) -> None:
            calls.append(items)
            if len(calls) == 1:
                raise RuntimeError("sink down")

        async def run() -> None:
            queue = AsyncBatchQueue(10, 1000, flaky)
            queue.push(1)
            with pytest.raises(RuntimeError, match="sink down"):
                await queue.flush()
            assert queue.in_flight is False
            queue.push(2)
            await queue.flush()

        asyncio.run(run())
        assert calls == [[1], [2]]

    def test_background_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def broken(items: list[int]) -> None:
            raise RuntimeError("nope")

        async def run() -> None:
            queue = AsyncBatchQueue(1, 1000, broken)
            queue.push(1)
            await queue.join()
            assert queue.in_flight is False

        with caplog.at_level(logging.ERROR, logger="clientlog.batching.queue"):
            asyncio.run(run())
        assert any("batch_queue.flush_failed" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# Without a running event loop
# ---------------------------------------------------------------------------


class TestWithoutLoop:
    def test_size_trigger_delivers_synchronously(self) -> None:
        sink = Collector()
        queue = AsyncBatchQueue(1, 100, sink)
        queue.push(1)
        assert sink.batches == [[1]]
        assert queue.in_flight is False

    def test_no_timer_without_loop(self) -> None:
        sink = Collector()
        queue = AsyncBatchQueue(2, 100, sink)
        queue.push(1)
        assert queue.timer_pending is False
        assert len(queue) == 1
        asyncio.run(queue.flush())
        assert sink.batches == [[1]]


class TestValidation:
    def test_batch_size_must_be_positive(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AsyncBatchQueue(0, 100, Collector())

    def test_interval_must_not_be_negative(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            AsyncBatchQueue(1, -1, Collector())

    def test_zero_interval_allowed(self) -> None:
        queue = AsyncBatchQueue(1, 0, Collector())
        assert queue.interval_ms == 0
