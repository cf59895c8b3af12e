"""Config validation – error types (defined in the kernel, re-exported here)."""
from clientlog.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    LoggerNotInitializedError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "LoggerNotInitializedError",
    "MissingRequiredSettingError",
]
