"""Transports – FileTransport, newline-delimited JSON with size-based rotation."""
from __future__ import annotations

import asyncio
import json
import logging
import threading
import time
from collections.abc import Sequence
from pathlib import Path

from clientlog.records import LogRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 512 * 1024


class FileTransport:
    """Append every batch to *path*, one JSON object per line.

    Before each append, a file already larger than *max_bytes* is renamed
    to ``<path>.<epoch-ms>`` and a fresh file is started. Rotated files are
    never deleted here. I/O errors are logged and swallowed so a full disk
    cannot break the application.
    """

    def __init__(
        self,
        path: str | Path,
        max_bytes: int = DEFAULT_MAX_BYTES,
        name: str = "file",
    ) -> None:
        self.name = name
        self.path = Path(path)
        self.max_bytes = max_bytes
        self._lock = threading.Lock()

    async def write(self, batch: Sequence[LogRecord]) -> None:
        if not batch:
            return
        lines = "".join(json.dumps(r.to_dict(), ensure_ascii=False, default=str) + "\n" for r in batch)
        await asyncio.to_thread(self._append, lines)

    async def flush(self) -> None:
        """Appends are not buffered; nothing to do."""

    def _append(self, lines: str) -> None:
        with self._lock:
            try:
                self._rotate_if_needed()
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("a", encoding="utf-8") as fh:
                    fh.write(lines)
            except OSError as exc:
                logger.warning("file_transport.write_failed path=%s error=%s", self.path, exc)

    def _rotate_if_needed(self) -> None:
        try:
            size = self.path.stat().st_size
        except FileNotFoundError:
            return
        if size > self.max_bytes:
            rotated = self.path.with_name(f"{self.path.name}.{int(time.time() * 1000)}")
            self.path.rename(rotated)
            logger.info("file_transport.rotated path=%s rotated=%s", self.path, rotated)


__all__ = ["DEFAULT_MAX_BYTES", "FileTransport"]
