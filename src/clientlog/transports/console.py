"""Transports – ConsoleTransport, renders records through structlog."""
from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import structlog

from clientlog.records import LogLevel, LogRecord

_METHODS: dict[LogLevel, str] = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}


def _iso(ts_ms: int) -> str:
    return datetime.fromtimestamp(ts_ms / 1000, UTC).isoformat(timespec="milliseconds")


class ConsoleTransport:
    """Emit each record as a structlog event.

    ``trace`` and ``debug`` map to ``debug``, ``warn`` to ``warning`` and
    ``fatal`` to ``critical``. Output format is whatever structlog is
    configured with; pass *logger* to use a specific bound logger.
    """

    def __init__(self, logger: Any = None, name: str = "console") -> None:
        self.name = name
        self._log = logger if logger is not None else structlog.get_logger("clientlog.console")

    def write(self, batch: Sequence[LogRecord]) -> None:
        for record in batch:
            method = getattr(self._log, _METHODS[record.level])
            method(
                record.message,
                ts=_iso(record.timestamp),
                namespace=record.namespace or "-",
                correlation_id=record.correlation_id,
                device=record.device,
                context=record.context,
            )


__all__ = ["ConsoleTransport"]
