"""Logger – orchestration, configuration, console patching and the registry."""
from clientlog.logger.config import (
    BatchConfig,
    LoggerConfig,
    RateLimitConfig,
    SamplingConfig,
    join_namespace,
)
from clientlog.logger.console import ConsolePatch
from clientlog.logger.logger import Logger
from clientlog.logger.registry import (
    LoggerRegistry,
    default_registry,
    get_logger,
    initialize,
    is_initialized,
    shutdown,
    try_get_logger,
)

__all__ = [
    "BatchConfig",
    "ConsolePatch",
    "Logger",
    "LoggerConfig",
    "LoggerRegistry",
    "RateLimitConfig",
    "SamplingConfig",
    "default_registry",
    "get_logger",
    "initialize",
    "is_initialized",
    "join_namespace",
    "shutdown",
    "try_get_logger",
]
