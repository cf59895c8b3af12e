"""Logger – level gating, policy pipeline, batching and transport fan-out."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from clientlog.batching import AsyncBatchQueue
from clientlog.kernel.errors import TransportDispatchError, TransportError
from clientlog.logger.config import LoggerConfig
from clientlog.logger.console import ConsolePatch
from clientlog.policies import FixedWindowRateLimiter, Sampler
from clientlog.records import Context, LogLevel, LogRecord, is_enabled
from clientlog.transports.protocol import (
    Transport,
    call_maybe_async,
    supports_dispose,
    supports_flush,
    transport_name,
)

logger = logging.getLogger(__name__)


class Logger:
    """Structured logger with namespaces, redaction, sampling and batching.

    Every log method is synchronous: it either returns immediately (level
    below threshold, rate limited, sampled out) or pushes one record onto
    this logger's queue. Records reach the transports when the queue
    flushes, on size, on timer, or through :meth:`flush`.

    Example::

        log = Logger(LoggerConfig(transports=[ConsoleTransport()], level="debug"))
        auth = log.child("auth")
        auth.info("login ok", {"user_id": 42})
        await log.dispose()

    A logger created with ``patch_console=True`` replaces ``print`` and the
    module-level ``logging`` helpers for the whole process until it is
    disposed.

    Using a logger after :meth:`dispose` is a contract violation; records
    may be queued but are never guaranteed to reach a transport.
    """

    def __init__(self, config: LoggerConfig) -> None:
        self._config = config.copy()
        self._rate_limiter: FixedWindowRateLimiter | None = None
        if config.rate_limit is not None:
            self._rate_limiter = FixedWindowRateLimiter(
                config.rate_limit.max_per_min, clock=config.clock
            )
        self._sampler: Sampler | None = None
        if config.sampling is not None:
            self._sampler = Sampler(config.sampling.rate, config.sampling.random_source)
        self._queue: AsyncBatchQueue[LogRecord] = AsyncBatchQueue(
            config.batch.size, config.batch.interval_ms, self._dispatch
        )
        self._console_patch: ConsolePatch | None = None
        if config.patch_console:
            self._console_patch = ConsolePatch(self)
            self._console_patch.apply()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        return self._config.level  # type: ignore[return-value]

    @property
    def namespace(self) -> str | None:
        return self._config.namespace

    @property
    def correlation_id(self) -> str | None:
        return self._config.correlation_id

    @property
    def transports(self) -> list[Transport]:
        return self._config.transports

    @property
    def pending(self) -> int:
        """Records accepted but not yet handed to the transports."""
        return len(self._queue)

    def set_level(self, level: LogLevel | str) -> None:
        self._config.level = LogLevel.parse(level)

    def set_correlation_id(self, correlation_id: str | None = None) -> None:
        """Set, or clear with ``None``, the id stamped on subsequent records."""
        self._config.correlation_id = correlation_id

    def child(self, namespace: str) -> "Logger":
        """Return an independent logger for ``<namespace>:<suffix>``.

        The child gets a copy of this logger's current configuration, its
        own queue, and the same transport list.
        """
        return Logger(self._config.derive(namespace))

    def is_enabled(self, level: LogLevel | str) -> bool:
        return is_enabled(LogLevel.parse(level), self.level)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        level: LogLevel | str,
        message: str,
        context: Context | None = None,
        /,
        **fields: Any,
    ) -> None:
        level = LogLevel.parse(level)
        if not is_enabled(level, self.level):
            return
        self._process(self._build_record(level, message, context, fields))

    def trace(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.TRACE, message, context, **fields)

    def debug(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, message, context, **fields)

    def info(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.INFO, message, context, **fields)

    def warn(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.WARN, message, context, **fields)

    warning = warn

    def error(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.ERROR, message, context, **fields)

    def fatal(self, message: str, context: Context | None = None, /, **fields: Any) -> None:
        self.log(LogLevel.FATAL, message, context, **fields)

    def _build_record(
        self,
        level: LogLevel,
        message: str,
        context: Context | None,
        fields: Mapping[str, Any],
    ) -> LogRecord:
        merged: dict[str, Any] = {**(context or {}), **fields}
        cfg = self._config
        return LogRecord(
            timestamp=cfg.clock.now_ms(),
            level=level,
            message=message,
            namespace=cfg.namespace,
            context=merged or None,
            correlation_id=cfg.correlation_id,
            device=cfg.device,
        )

    def _process(self, record: LogRecord) -> None:
        if self._config.redactor is not None:
            record = self._config.redactor(record)
        if self._rate_limiter is not None and not self._rate_limiter.allow():
            return
        if self._sampler is not None and not self._sampler(record.level):
            return
        self._queue.push(record)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    async def _dispatch(self, batch: list[LogRecord]) -> None:
        await self._fan_out("write", list(self.transports), lambda t: t.write, batch)

    async def _fan_out(
        self,
        operation: str,
        transports: Sequence[Any],
        method: Callable[[Any], Callable[..., Any]],
        *args: Any,
    ) -> None:
        if not transports:
            return
        results = await asyncio.gather(
            *(call_maybe_async(method(t), *args) for t in transports),
            return_exceptions=True,
        )
        errors: list[TransportError] = []
        for transport, result in zip(transports, results):
            if isinstance(result, Exception):
                errors.append(TransportError(transport_name(transport), operation, cause=result))
            elif isinstance(result, BaseException):
                raise result
        if errors:
            raise TransportDispatchError(operation, errors)

    async def flush(self) -> None:
        """Drain the queue, then flush every transport that supports it."""
        await self._queue.join()
        await self._queue.flush()
        flushable = [t for t in self.transports if supports_flush(t)]
        await self._fan_out("flush", flushable, lambda t: t.flush)

    async def dispose(self) -> None:
        """Flush, then dispose every transport that supports it."""
        try:
            await self.flush()
            disposable = [t for t in self.transports if supports_dispose(t)]
            await self._fan_out("dispose", disposable, lambda t: t.dispose)
        finally:
            if self._console_patch is not None:
                self._console_patch.restore()
                self._console_patch = None
            logger.debug("logger.disposed namespace=%s", self.namespace)

    async def __aenter__(self) -> "Logger":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.dispose()

    def __repr__(self) -> str:
        return f"Logger(namespace={self.namespace!r}, level={self.level.value!r})"


__all__ = ["Logger"]
