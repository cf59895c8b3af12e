"""Transports – the contract the logger depends on.

A transport must have a ``name`` and a ``write(batch)`` method. ``flush()``
and ``dispose()`` are optional capabilities; the logger checks for them
with :func:`supports_flush` / :func:`supports_dispose` before calling.
Each method may return ``None`` or an awaitable.
"""
from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from clientlog.records import LogRecord


@runtime_checkable
class Transport(Protocol):
    """Sink receiving batches of records, in the order they were accepted."""

    name: str

    def write(self, batch: Sequence[LogRecord]) -> Awaitable[None] | None: ...


@runtime_checkable
class FlushableTransport(Protocol):
    def flush(self) -> Awaitable[None] | None: ...


@runtime_checkable
class DisposableTransport(Protocol):
    def dispose(self) -> Awaitable[None] | None: ...


def supports_flush(transport: object) -> bool:
    return isinstance(transport, FlushableTransport)


def supports_dispose(transport: object) -> bool:
    return isinstance(transport, DisposableTransport)


async def call_maybe_async(fn: Callable[..., Any], *args: Any) -> None:
    """Call *fn* and await the result when it is awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        await result


def transport_name(transport: object) -> str:
    return str(getattr(transport, "name", type(transport).__name__))


__all__ = [
    "DisposableTransport",
    "FlushableTransport",
    "Transport",
    "call_maybe_async",
    "supports_dispose",
    "supports_flush",
    "transport_name",
]
