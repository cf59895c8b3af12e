"""Application-layer errors – misuse of the logging API by the host app."""

from __future__ import annotations

from clientlog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class LoggerNotInitializedError(ConfigError):
    """A logger was requested from the registry before ``initialize()``."""

    default_code = "logger_not_initialized"

    def __init__(self) -> None:
        super().__init__("Logger not initialised. Call initialize() first.")


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "LoggerNotInitializedError",
    "MissingRequiredSettingError",
]
