"""Transports – InMemoryTransport."""
from __future__ import annotations

from collections.abc import Sequence

from clientlog.records import LogRecord


class InMemoryTransport:
    """Keeps every batch it receives; useful in tests and for in-app log viewers."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self.batches: list[list[LogRecord]] = []
        self.flush_count = 0
        self.dispose_count = 0

    @property
    def records(self) -> list[LogRecord]:
        return [record for batch in self.batches for record in batch]

    def write(self, batch: Sequence[LogRecord]) -> None:
        self.batches.append(list(batch))

    async def flush(self) -> None:
        self.flush_count += 1

    async def dispose(self) -> None:
        self.dispose_count += 1

    def clear(self) -> None:
        self.batches.clear()


__all__ = ["InMemoryTransport"]
