"""Records – LogLevel ordering."""
from __future__ import annotations

from enum import Enum

from clientlog.kernel.errors import InvalidSettingValueError

_ALIASES = {
    "warning": "warn",
    "critical": "fatal",
}


class LogLevel(str, Enum):
    """Severity levels, ordered from most verbose to most severe."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Coerce *value* to a :class:`LogLevel`.

        Accepts members, case-insensitive names and the stdlib-style
        aliases ``warning`` and ``critical``.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise InvalidSettingValueError("level", value, "unknown log level") from None

    def __str__(self) -> str:
        return self.value


_ORDER: tuple[LogLevel, ...] = tuple(LogLevel)


def is_enabled(level: LogLevel, threshold: LogLevel) -> bool:
    """Return ``True`` when *level* is at or above *threshold*."""
    return level.rank >= threshold.rank


__all__ = ["LogLevel", "is_enabled"]
