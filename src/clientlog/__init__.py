"""
clientlog – client-side structured logging with batching and pluggable transports.

Import path convention::

    from clientlog import initialize, get_logger, LoggerConfig, BatchConfig
    from clientlog.transports import ConsoleTransport, FileTransport
    from clientlog.transports.http import HttpTransport
    from clientlog.policies import make_redactor
"""

from clientlog.kernel.errors import (
    ConfigError,
    LoggerNotInitializedError,
    TransportDispatchError,
    TransportError,
)
from clientlog.logger import (
    BatchConfig,
    ConsolePatch,
    Logger,
    LoggerConfig,
    LoggerRegistry,
    RateLimitConfig,
    SamplingConfig,
    get_logger,
    initialize,
    shutdown,
    try_get_logger,
)
from clientlog.policies import make_rate_limiter, make_redactor, should_sample
from clientlog.records import LogLevel, LogRecord
from clientlog.transports import Transport

__version__ = "0.1.0"
__all__ = [
    "BatchConfig",
    "ConfigError",
    "ConsolePatch",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LoggerConfig",
    "LoggerNotInitializedError",
    "LoggerRegistry",
    "RateLimitConfig",
    "SamplingConfig",
    "Transport",
    "TransportDispatchError",
    "TransportError",
    "__version__",
    "get_logger",
    "initialize",
    "make_rate_limiter",
    "make_redactor",
    "should_sample",
    "shutdown",
    "try_get_logger",
]
