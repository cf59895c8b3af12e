"""Policies – KeyRedactor, masks sensitive context values before enqueue."""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from clientlog.records import LogRecord

DEFAULT_SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password", "pass", "token", "authorization", "secret",
    "otp", "pin", "creditcard", "sessionid",
})

REDACTED = "[REDACTED]"

type Redactor = Callable[[LogRecord], LogRecord]


class KeyRedactor:
    """Replace values of sensitive keys in a record's context with ``[REDACTED]``.

    Keys are compared lower-cased. Traversal recurses through nested
    mappings and sequences (strings and bytes are treated as scalars), so a
    ``token`` inside a list of dicts is masked too. Keys are never removed
    and the input record is left untouched.
    """

    REDACTED = REDACTED

    def __init__(self, extra_keys: Iterable[str] = ()) -> None:
        self._keys = frozenset(
            k.lower() for k in (*DEFAULT_SENSITIVE_KEYS, *extra_keys)
        )

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._keys

    def redact_value(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {
                k: (self.REDACTED if self.is_sensitive(str(k)) else self.redact_value(v))
                for k, v in value.items()
            }
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            return [self.redact_value(v) for v in value]
        return value

    def __call__(self, record: LogRecord) -> LogRecord:
        if record.context is None:
            return record
        return record.with_context(self.redact_value(record.context))


def make_redactor(extra_keys: Iterable[str] = ()) -> KeyRedactor:
    """Build a redactor for the default sensitive keys plus *extra_keys*."""
    return KeyRedactor(extra_keys)


__all__ = ["DEFAULT_SENSITIVE_KEYS", "KeyRedactor", "REDACTED", "Redactor", "make_redactor"]
