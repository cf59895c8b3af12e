"""Batching – AsyncBatchQueue.

Buffers items and hands them to a flush callback once ``batch_size`` items
are waiting or ``interval_ms`` has passed since the first unflushed push.
At most one flush is in flight at a time; a flush requested while another
one runs is skipped rather than queued.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from clientlog.kernel.errors import InvalidSettingValueError

T = TypeVar("T")
logger = logging.getLogger(__name__)

type FlushCallback[T] = Callable[[list[T]], Awaitable[None] | None]


class AsyncBatchQueue(Generic[T]):
    """FIFO buffer with size and timer flush triggers.

    Typical usage::

        queue = AsyncBatchQueue(20, 1500, send_batch)
        queue.push(item)          # synchronous, never blocks
        await queue.flush()       # drain whatever is buffered

    Triggered flushes (size reached, timer fired) run as background tasks
    on the running loop; their failures are logged, not raised. Use
    :meth:`join` to wait for them. When no loop is running, a size trigger
    delivers the batch synchronously with :func:`asyncio.run` and no timer
    is armed.

    Parameters
    ----------
    batch_size:
        Number of buffered items that triggers an immediate flush (>= 1).
    interval_ms:
        Maximum delay before buffered items are flushed (>= 0).
    flush_fn:
        Receives each batch in push order. May be sync or async.
    """

    def __init__(
        self,
        batch_size: int,
        interval_ms: float,
        flush_fn: FlushCallback[T],
    ) -> None:
        if batch_size < 1:
            raise InvalidSettingValueError("batch.size", batch_size, "must be >= 1")
        if interval_ms < 0:
            raise InvalidSettingValueError("batch.interval_ms", interval_ms, "must be >= 0")
        self._batch_size = batch_size
        self._interval_ms = interval_ms
        self._flush_fn = flush_fn
        self._buffer: list[T] = []
        self._timer: asyncio.TimerHandle | None = None
        self._timer_loop: asyncio.AbstractEventLoop | None = None
        self._flushing = False
        self._tasks: set[asyncio.Task[None]] = set()

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    @property
    def in_flight(self) -> bool:
        return self._flushing

    @property
    def timer_pending(self) -> bool:
        return (
            self._timer is not None
            and self._timer_loop is not None
            and not self._timer_loop.is_closed()
        )

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    def push(self, item: T) -> None:
        """Append *item*; trigger a flush or arm the timer as needed."""
        self._buffer.append(item)
        if len(self._buffer) >= self._batch_size:
            self._trigger()
            return
        self._arm_timer()

    def _arm_timer(self) -> None:
        """Arm the interval timer unless one is already pending on the running loop.

        A handle left behind by a loop that has since closed (one
        ``asyncio.run`` after another) never fires and is replaced.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        if self._timer is not None and self._timer_loop is loop and not loop.is_closed():
            return
        self._cancel_timer()
        self._timer = loop.call_later(self._interval_ms / 1000.0, self._on_timer)
        self._timer_loop = loop

    def _on_timer(self) -> None:
        self._timer = None
        self._timer_loop = None
        self._trigger()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._timer_loop = None

    def _trigger(self) -> None:
        batch = self._take()
        if batch is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                asyncio.run(self._deliver(batch))
            except Exception:
                logger.exception("batch_queue.flush_failed size=%d", len(batch))
            return
        task = loop.create_task(self._deliver(batch))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("batch_queue.flush_failed error=%r", exc, exc_info=exc)

    # ------------------------------------------------------------------
    # Flushing
    # ------------------------------------------------------------------

    def _take(self) -> list[T] | None:
        """Cancel the timer and claim the buffer, or ``None`` if nothing to do."""
        self._cancel_timer()
        if self._flushing or not self._buffer:
            return None
        self._flushing = True
        batch = self._buffer
        self._buffer = []
        return batch

    async def _deliver(self, batch: list[T]) -> None:
        try:
            result = self._flush_fn(batch)
            if inspect.isawaitable(result):
                await result
        finally:
            self._flushing = False

    async def flush(self) -> None:
        """Deliver everything buffered right now.

        No-op when the buffer is empty or another flush is in flight.
        Errors raised by the flush callback propagate to the caller.
        """
        batch = self._take()
        if batch is None:
            return
        await self._deliver(batch)

    async def join(self) -> None:
        """Wait until background deliveries started by triggers complete."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["AsyncBatchQueue", "FlushCallback"]
