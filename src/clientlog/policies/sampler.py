"""Policies – probabilistic sampling of low-severity records.

``warn``, ``error`` and ``fatal`` are never sampled out; ``trace``,
``debug`` and ``info`` are kept with probability *rate*.
"""
from __future__ import annotations

import random
from collections.abc import Callable

from clientlog.kernel.errors import InvalidSettingValueError
from clientlog.records import LogLevel

ALWAYS_KEPT: frozenset[LogLevel] = frozenset({LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL})

type RandomSource = Callable[[], float]


def should_sample(
    level: LogLevel | str,
    rate: float = 1.0,
    random_source: RandomSource = random.random,
) -> bool:
    """Return ``True`` if a record at *level* should be kept."""
    if LogLevel.parse(level) in ALWAYS_KEPT:
        return True
    return random_source() < rate


class Sampler:
    """Binds a sampling *rate* and a random source.

    Inject *random_source* (any zero-arg callable returning a float in
    ``[0, 1)``) for reproducible tests.
    """

    def __init__(self, rate: float = 1.0, random_source: RandomSource | None = None) -> None:
        if not 0.0 <= rate <= 1.0:
            raise InvalidSettingValueError("sampling.rate", rate, "must be between 0 and 1")
        self.rate = rate
        self._random = random_source or random.random

    def __call__(self, level: LogLevel) -> bool:
        return should_sample(level, self.rate, self._random)


__all__ = ["ALWAYS_KEPT", "RandomSource", "Sampler", "should_sample"]
