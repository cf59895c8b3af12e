"""Unit tests for LoggerRegistry and the module-level helpers."""

from __future__ import annotations

import asyncio

import pytest

import clientlog
from clientlog.kernel.errors import ConfigError, LoggerNotInitializedError
from clientlog.kernel.types import Err, Ok
from clientlog.logger import BatchConfig, LoggerConfig, LoggerRegistry
from clientlog.testing import InMemoryTransport


def _config(transport: InMemoryTransport | None = None, **kwargs: object) -> LoggerConfig:
    return LoggerConfig(
        transports=[transport or InMemoryTransport()],
        batch=BatchConfig(size=1, interval_ms=0),
        **kwargs,  # type: ignore[arg-type]
    )


class TestLoggerRegistry:
    def test_get_logger_before_initialize_raises(self) -> None:
        registry = LoggerRegistry()
        with pytest.raises(LoggerNotInitializedError) as exc_info:
            registry.get_logger()
        assert isinstance(exc_info.value, ConfigError)
        assert exc_info.value.code == "logger_not_initialized"

    def test_try_get_logger_returns_err(self) -> None:
        result = LoggerRegistry().try_get_logger("x")
        assert isinstance(result, Err)
        assert isinstance(result.error, LoggerNotInitializedError)

    def test_root_returned_without_namespace(self) -> None:
        registry = LoggerRegistry()
        root = registry.initialize(_config())
        assert registry.get_logger() is root
        assert registry.get_logger("") is root
        assert registry.is_initialized is True

    def test_try_get_logger_returns_ok(self) -> None:
        registry = LoggerRegistry()
        root = registry.initialize(_config())
        result = registry.try_get_logger()
        assert isinstance(result, Ok)
        assert result.unwrap() is root

    def test_namespace_returns_new_child_each_time(self) -> None:
        registry = LoggerRegistry()
        registry.initialize(_config())
        a1 = registry.get_logger("auth")
        a2 = registry.get_logger("auth")
        assert a1 is not a2
        assert a1.namespace == a2.namespace == "auth"

    def test_reinitialize_replaces_root(self) -> None:
        registry = LoggerRegistry()
        first = registry.initialize(_config(level="info"))
        second = registry.initialize(_config(level="error"))
        assert registry.get_logger() is second
        assert first is not second
        assert registry.get_logger().level.value == "error"

    def test_shutdown_disposes_and_clears(self) -> None:
        transport = InMemoryTransport()
        registry = LoggerRegistry()
        registry.initialize(_config(transport))
        asyncio.run(registry.shutdown())
        assert transport.dispose_count == 1
        assert registry.is_initialized is False
        with pytest.raises(LoggerNotInitializedError):
            registry.get_logger()


class TestModuleLevelHelpers:
    def setup_method(self) -> None:
        asyncio.run(clientlog.shutdown())

    def teardown_method(self) -> None:
        asyncio.run(clientlog.shutdown())

    def test_uninitialized(self) -> None:
        with pytest.raises(LoggerNotInitializedError):
            clientlog.get_logger()
        assert isinstance(clientlog.try_get_logger(), Err)

    def test_child_of_child_namespace(self) -> None:
        transport = InMemoryTransport()
        clientlog.initialize(_config(transport))
        clientlog.get_logger().child("a").child("b").info("x")
        assert transport.records[0].namespace == "a:b"

    def test_get_logger_with_namespace(self) -> None:
        transport = InMemoryTransport()
        clientlog.initialize(_config(transport, namespace="app"))
        clientlog.get_logger("net").info("x")
        assert transport.records[0].namespace == "app:net"
