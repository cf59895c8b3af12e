"""Records – LogRecord, the immutable value built for every accepted log call."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

from clientlog.records.level import LogLevel

type ContextValue = (
    None
    | bool
    | int
    | float
    | str
    | Sequence[ContextValue]
    | Mapping[str, ContextValue]
)
type Context = Mapping[str, ContextValue]


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """Structured log entry.

    ``context`` is owned by the record: the logger hands it a fresh mapping
    and redaction replaces the record rather than editing it in place.
    """

    timestamp: int
    level: LogLevel
    message: str
    namespace: str | None = None
    context: Context | None = None
    correlation_id: str | None = None
    device: Mapping[str, Any] | None = None

    def with_context(self, context: Context | None) -> "LogRecord":
        return dataclasses.replace(self, context=context)

    def to_dict(self) -> dict[str, Any]:
        """Wire form shared by the file and HTTP transports.

        Absent optional fields are omitted.
        """
        payload: dict[str, Any] = {
            "ts": self.timestamp,
            "level": self.level.value,
            "msg": self.message,
        }
        if self.namespace is not None:
            payload["ns"] = self.namespace
        if self.context is not None:
            payload["ctx"] = self.context
        if self.correlation_id is not None:
            payload["correlationId"] = self.correlation_id
        if self.device is not None:
            payload["device"] = self.device
        return payload


__all__ = ["Context", "ContextValue", "LogRecord"]
