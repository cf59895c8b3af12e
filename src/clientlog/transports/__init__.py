"""Transports – the sink contract and reference implementations.

``HttpTransport`` (``http`` extra, httpx) and ``SentryTransport`` (``sentry``
extra, sentry-sdk) are imported from ``clientlog.transports.http`` and
``clientlog.transports.sentry`` directly.
"""
from clientlog.transports.console import ConsoleTransport
from clientlog.transports.file import FileTransport
from clientlog.transports.memory import InMemoryTransport
from clientlog.transports.protocol import (
    DisposableTransport,
    FlushableTransport,
    Transport,
    call_maybe_async,
    supports_dispose,
    supports_flush,
    transport_name,
)

__all__ = [
    "ConsoleTransport",
    "DisposableTransport",
    "FileTransport",
    "FlushableTransport",
    "InMemoryTransport",
    "Transport",
    "call_maybe_async",
    "supports_dispose",
    "supports_flush",
    "transport_name",
]
