"""Transports – SentryTransport, records as breadcrumbs, errors as events."""
from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from clientlog.records import LogLevel, LogRecord

_SENTRY_LEVELS: dict[LogLevel, str] = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}

_CAPTURED = frozenset({LogLevel.ERROR, LogLevel.FATAL})


def _require_sentry() -> Any:
    try:
        import sentry_sdk  # type: ignore[import-untyped]
        return sentry_sdk
    except ImportError as exc:
        raise ImportError("Install 'clientlog[sentry]' to use the Sentry transport") from exc


class SentryTransport:
    """Forward records to the Sentry SDK configured by the host application.

    Every record becomes a breadcrumb; ``error`` and ``fatal`` records are
    also sent as events with :func:`sentry_sdk.capture_message`. ``flush()``
    waits up to *flush_timeout* seconds for pending events. Calling
    ``sentry_sdk.init`` is left to the application.
    """

    def __init__(self, flush_timeout: float = 2.0, name: str = "sentry") -> None:
        self._sentry = _require_sentry()
        self.name = name
        self.flush_timeout = flush_timeout

    def write(self, batch: Sequence[LogRecord]) -> None:
        sentry = self._sentry
        for record in batch:
            data = {
                **(record.context or {}),
                "namespace": record.namespace,
                "correlation_id": record.correlation_id,
                "device": record.device,
            }
            level = _SENTRY_LEVELS[record.level]
            sentry.add_breadcrumb(
                category=record.namespace or "log",
                message=record.message,
                level=level,
                data=data,
            )
            if record.level in _CAPTURED:
                sentry.capture_message(record.message, level=level, extras=data)

    async def flush(self) -> None:
        await asyncio.to_thread(self._sentry.flush, self.flush_timeout)


__all__ = ["SentryTransport"]
