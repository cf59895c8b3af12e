"""Records – levels and the LogRecord value type."""
from clientlog.records.level import LogLevel, is_enabled
from clientlog.records.record import Context, ContextValue, LogRecord

__all__ = ["Context", "ContextValue", "LogLevel", "LogRecord", "is_enabled"]
