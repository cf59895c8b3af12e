"""Unit tests for ConsoleTransport."""
from __future__ import annotations

import structlog
from structlog.testing import capture_logs

from clientlog.records import LogLevel, LogRecord
from clientlog.transports import ConsoleTransport

TS = 1_767_268_800_000  # 2026-01-01T12:00:00Z


def _record(level: LogLevel, **kwargs: object) -> LogRecord:
    return LogRecord(timestamp=TS, level=level, message=f"{level.value} message", **kwargs)  # type: ignore[arg-type]


class TestConsoleTransport:
    def test_level_mapping(self) -> None:
        with capture_logs() as logs:
            transport = ConsoleTransport()
            transport.write([_record(level) for level in LogLevel])
        assert [entry["log_level"] for entry in logs] == [
            "debug", "debug", "info", "warning", "error", "critical",
        ]
        assert logs[0]["event"] == "trace message"

    def test_fields_rendered(self) -> None:
        record = _record(
            LogLevel.INFO,
            namespace="app:auth",
            context={"userId": 1},
            correlation_id="cid-1",
            device={"os": "linux"},
        )
        with capture_logs() as logs:
            ConsoleTransport().write([record])
        entry = logs[0]
        assert entry["ts"] == "2026-01-01T12:00:00.000+00:00"
        assert entry["namespace"] == "app:auth"
        assert entry["context"] == {"userId": 1}
        assert entry["correlation_id"] == "cid-1"
        assert entry["device"] == {"os": "linux"}

    def test_missing_namespace_rendered_as_dash(self) -> None:
        with capture_logs() as logs:
            ConsoleTransport().write([_record(LogLevel.WARN)])
        assert logs[0]["namespace"] == "-"
        assert logs[0]["context"] is None

    def test_explicit_logger(self) -> None:
        with capture_logs() as logs:
            bound = structlog.get_logger("custom").bind(app="demo")
            ConsoleTransport(logger=bound, name="stdout").write([_record(LogLevel.ERROR)])
        assert logs[0]["app"] == "demo"

    def test_empty_batch(self) -> None:
        with capture_logs() as logs:
            ConsoleTransport().write([])
        assert logs == []
