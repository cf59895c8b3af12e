"""Config settings – LoggerSettings, the env-driven subset of LoggerConfig.

Transports, device metadata and custom policy callables cannot come from
the environment; they are supplied in code when building the config::

    settings = EnvSettingsLoader().load(LoggerSettings)
    initialize(settings.to_config([ConsoleTransport()], device={"app": "demo"}))
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from clientlog.config.settings.base import Settings
from clientlog.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from clientlog.kernel.errors import InvalidSettingValueError
from clientlog.logger import BatchConfig, LoggerConfig, RateLimitConfig, SamplingConfig
from clientlog.policies import make_redactor
from clientlog.records import LogLevel
from clientlog.transports.protocol import Transport


@dataclasses.dataclass
class LoggerSettings(Settings):
    """``CLIENTLOG_*`` environment variables.

    ``rate_limit_per_min = 0`` disables rate limiting and
    ``sampling_rate = 1.0`` disables sampling.
    """

    _prefix: ClassVar[str] = "CLIENTLOG"

    level: str = "info"
    namespace: str = ""
    sampling_rate: float = 1.0
    rate_limit_per_min: int = 0
    batch_size: int = 20
    batch_interval_ms: int = 1500
    redact: bool = True
    redact_keys: list[str] = dataclasses.field(default_factory=list)
    correlation_id: str = ""
    patch_console: bool = False

    def _validate(self) -> None:
        LogLevel.parse(self.level)
        if not 0.0 <= self.sampling_rate <= 1.0:
            raise InvalidSettingValueError("sampling_rate", self.sampling_rate, "must be between 0 and 1")
        if self.rate_limit_per_min < 0:
            raise InvalidSettingValueError("rate_limit_per_min", self.rate_limit_per_min, "must be >= 0")
        if self.batch_size < 1:
            raise InvalidSettingValueError("batch_size", self.batch_size, "must be >= 1")
        if self.batch_interval_ms < 0:
            raise InvalidSettingValueError("batch_interval_ms", self.batch_interval_ms, "must be >= 0")

    def to_config(
        self,
        transports: Sequence[Transport],
        *,
        device: Mapping[str, Any] | None = None,
    ) -> LoggerConfig:
        return LoggerConfig(
            transports=list(transports),
            level=LogLevel.parse(self.level),
            namespace=self.namespace or None,
            redactor=make_redactor(self.redact_keys) if self.redact else None,
            sampling=SamplingConfig(self.sampling_rate) if self.sampling_rate < 1.0 else None,
            rate_limit=RateLimitConfig(self.rate_limit_per_min) if self.rate_limit_per_min else None,
            batch=BatchConfig(self.batch_size, self.batch_interval_ms),
            device=device,
            correlation_id=self.correlation_id or None,
            patch_console=self.patch_console,
        )


def load_logger_config(
    transports: Sequence[Transport],
    *,
    loader: SettingsLoader | None = None,
    device: Mapping[str, Any] | None = None,
) -> LoggerConfig:
    """Read :class:`LoggerSettings` with *loader* (env by default) and build a config."""
    settings = (loader or EnvSettingsLoader()).load(LoggerSettings)
    return settings.to_config(transports, device=device)


__all__ = ["LoggerSettings", "load_logger_config"]
