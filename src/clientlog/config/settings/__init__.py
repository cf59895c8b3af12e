"""Config settings – 12-factor env-based configuration."""
from clientlog.config.settings.base import Settings
from clientlog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from clientlog.config.settings.logger_settings import LoggerSettings, load_logger_config

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LoggerSettings",
    "Settings",
    "SettingsLoader",
    "load_logger_config",
]
