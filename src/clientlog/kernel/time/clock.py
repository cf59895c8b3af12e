"""Kernel time – millisecond clocks for record timestamps and rate-limit windows."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


class Clock(Protocol):
    def now_ms(self) -> int: ...


class SystemClock:
    """Wall clock, integer milliseconds since the Unix epoch."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FrozenClock:
    """Test clock pinned to *fixed*; moves only through :meth:`advance`."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now_ms(self) -> int:
        return (self._fixed - _EPOCH) // _ONE_MS

    def advance(self, **kwargs: int | float) -> None:
        """Move forward by ``timedelta(**kwargs)``."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
