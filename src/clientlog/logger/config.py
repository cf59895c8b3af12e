"""Logger – LoggerConfig and its option groups."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from clientlog.kernel.errors import InvalidSettingValueError
from clientlog.kernel.time import Clock, SystemClock
from clientlog.policies import RandomSource, Redactor
from clientlog.records import LogLevel
from clientlog.transports.protocol import Transport

NAMESPACE_SEPARATOR = ":"


@dataclasses.dataclass(frozen=True)
class BatchConfig:
    """Queue flush triggers."""

    size: int = 20
    interval_ms: float = 1500

    def __post_init__(self) -> None:
        if self.size < 1:
            raise InvalidSettingValueError("batch.size", self.size, "must be >= 1")
        if self.interval_ms < 0:
            raise InvalidSettingValueError("batch.interval_ms", self.interval_ms, "must be >= 0")


@dataclasses.dataclass(frozen=True)
class SamplingConfig:
    """Keep ``trace``/``debug``/``info`` records with probability *rate*."""

    rate: float = 1.0
    random_source: RandomSource | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.rate <= 1.0:
            raise InvalidSettingValueError("sampling.rate", self.rate, "must be between 0 and 1")


@dataclasses.dataclass(frozen=True)
class RateLimitConfig:
    """Hard cap on records per minute for one logger instance."""

    max_per_min: int

    def __post_init__(self) -> None:
        if self.max_per_min < 0:
            raise InvalidSettingValueError("rate_limit.max_per_min", self.max_per_min, "must be >= 0")


def join_namespace(parent: str | None, suffix: str) -> str:
    return f"{parent}{NAMESPACE_SEPARATOR}{suffix}" if parent else suffix


@dataclasses.dataclass
class LoggerConfig:
    """Configuration owned by a single :class:`~clientlog.logger.Logger`.

    ``transports`` is the one field shared between a logger and its
    children: :meth:`derive` copies everything else but keeps the same list
    object, so the whole family writes to the same destinations.
    """

    transports: list[Transport]
    level: LogLevel | str = LogLevel.INFO
    namespace: str | None = None
    redactor: Redactor | None = None
    sampling: SamplingConfig | None = None
    rate_limit: RateLimitConfig | None = None
    batch: BatchConfig = dataclasses.field(default_factory=BatchConfig)
    device: Mapping[str, Any] | None = None
    correlation_id: str | None = None
    patch_console: bool = False
    clock: Clock = dataclasses.field(default_factory=SystemClock)

    def __post_init__(self) -> None:
        self.level = LogLevel.parse(self.level)

    def copy(self) -> "LoggerConfig":
        return dataclasses.replace(self)

    def derive(self, suffix: str) -> "LoggerConfig":
        """Config for a child logger named ``<namespace>:<suffix>``.

        Console patching is left to the logger that asked for it.
        """
        return dataclasses.replace(
            self,
            namespace=join_namespace(self.namespace, suffix),
            patch_console=False,
        )


__all__ = [
    "BatchConfig",
    "LoggerConfig",
    "NAMESPACE_SEPARATOR",
    "RateLimitConfig",
    "SamplingConfig",
    "join_namespace",
]
