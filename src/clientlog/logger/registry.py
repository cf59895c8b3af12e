"""Logger – process-wide registry holding the root logger.

``initialize()`` must run before ``get_logger()``. A second
``initialize()`` replaces the root logger; the previous one is not disposed
and keeps working for whoever still holds a reference to it. Child loggers
handed out by ``get_logger(namespace)`` are not tracked.
"""
from __future__ import annotations

from clientlog.kernel.errors import LoggerNotInitializedError
from clientlog.kernel.types import Err, Ok, Result
from clientlog.logger.config import LoggerConfig
from clientlog.logger.logger import Logger


class LoggerRegistry:
    """A single slot for the root :class:`Logger`.

    Applications that prefer explicit wiring can create their own registry
    and pass it around instead of using the module-level helpers.
    """

    def __init__(self) -> None:
        self._root: Logger | None = None

    @property
    def is_initialized(self) -> bool:
        return self._root is not None

    def initialize(self, config: LoggerConfig) -> Logger:
        self._root = Logger(config)
        return self._root

    def try_get_logger(self, namespace: str | None = None) -> Result[Logger, LoggerNotInitializedError]:
        if self._root is None:
            return Err(LoggerNotInitializedError())
        return Ok(self._root.child(namespace) if namespace else self._root)

    def get_logger(self, namespace: str | None = None) -> Logger:
        """Return the root logger, or a child of it when *namespace* is given.

        Raises:
            LoggerNotInitializedError: ``initialize()`` was never called.
        """
        return self.try_get_logger(namespace).unwrap()

    async def shutdown(self) -> None:
        """Dispose the root logger and empty the slot."""
        root, self._root = self._root, None
        if root is not None:
            await root.dispose()


_default = LoggerRegistry()


def default_registry() -> LoggerRegistry:
    return _default


def initialize(config: LoggerConfig) -> Logger:
    """Create the process-wide root logger, replacing any previous one."""
    return _default.initialize(config)


def get_logger(namespace: str | None = None) -> Logger:
    return _default.get_logger(namespace)


def try_get_logger(namespace: str | None = None) -> Result[Logger, LoggerNotInitializedError]:
    return _default.try_get_logger(namespace)


def is_initialized() -> bool:
    return _default.is_initialized


async def shutdown() -> None:
    await _default.shutdown()


__all__ = [
    "LoggerRegistry",
    "default_registry",
    "get_logger",
    "initialize",
    "is_initialized",
    "shutdown",
    "try_get_logger",
]
