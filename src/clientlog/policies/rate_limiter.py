"""Policies – fixed-window rate limiter.

Tracks how many records a logger emitted in the current window. The window
starts when the limiter is created and resets lazily: only the first call
made ``window_ms`` or more after the window start begins a new one. Calls
straddling a boundary can therefore admit up to ``2 * max_per_window``
records within ``window_ms``.
"""

from __future__ import annotations

from clientlog.kernel.errors import InvalidSettingValueError
from clientlog.kernel.time import Clock, SystemClock

WINDOW_MS = 60_000


class FixedWindowRateLimiter:
    """Admit at most *max_per_window* calls per window.

    Every call counts, including the rejected ones.
    """

    def __init__(
        self,
        max_per_window: int,
        *,
        window_ms: int = WINDOW_MS,
        clock: Clock | None = None,
    ) -> None:
        if max_per_window < 0:
            raise InvalidSettingValueError("rate_limit.max_per_min", max_per_window, "must be >= 0")
        self._limit = max_per_window
        self._window_ms = window_ms
        self._clock = clock or SystemClock()
        self._count = 0
        self._window_start = self._clock.now_ms()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def count(self) -> int:
        return self._count

    @property
    def remaining(self) -> int:
        return max(0, self._limit - self._count)

    def allow(self) -> bool:
        now = self._clock.now_ms()
        if now - self._window_start >= self._window_ms:
            self._window_start = now
            self._count = 0
        self._count += 1
        return self._count <= self._limit

    __call__ = allow

    def reset(self) -> None:
        self._count = 0
        self._window_start = self._clock.now_ms()


def make_rate_limiter(max_per_min: int, clock: Clock | None = None) -> FixedWindowRateLimiter:
    """Limiter admitting *max_per_min* records per 60-second window."""
    return FixedWindowRateLimiter(max_per_min, clock=clock)


__all__ = ["FixedWindowRateLimiter", "WINDOW_MS", "make_rate_limiter"]
