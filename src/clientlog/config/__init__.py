"""Config – env-driven settings and validation errors."""

from clientlog.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggerSettings,
    Settings,
    SettingsLoader,
    load_logger_config,
)
from clientlog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_logger_config",
]
