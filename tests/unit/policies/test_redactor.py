"""Unit tests for KeyRedactor / make_redactor."""

from __future__ import annotations

from typing import Any

from clientlog.policies import DEFAULT_SENSITIVE_KEYS, REDACTED, KeyRedactor, make_redactor
from clientlog.records import LogLevel, LogRecord


def _record(context: dict[str, Any] | None) -> LogRecord:
    return LogRecord(timestamp=0, level=LogLevel.INFO, message="m", context=context)


class TestKeyRedactor:
    def test_masks_top_level_and_nested(self) -> None:
        redact = make_redactor()
        out = redact(_record({"password": "x", "nested": {"token": "y"}, "safe": "z"}))
        assert out.context == {"password": REDACTED, "nested": {"token": REDACTED}, "safe": "z"}

    def test_idempotent(self) -> None:
        redact = make_redactor()
        record = _record({"password": "x", "nested": {"token": "y"}, "items": [{"pin": 1}], "safe": "z"})
        once = redact(record)
        twice = redact(once)
        assert once.context == twice.context

    def test_all_default_keys(self) -> None:
        redact = make_redactor()
        out = redact(_record({key: "v" for key in DEFAULT_SENSITIVE_KEYS}))
        assert out.context is not None
        assert set(out.context.values()) == {REDACTED}

    def test_case_insensitive(self) -> None:
        out = make_redactor()(_record({"Authorization": "Bearer x", "SessionId": "s", "ok": 1}))
        assert out.context == {"Authorization": REDACTED, "SessionId": REDACTED, "ok": 1}

    def test_extra_keys_lowercased(self) -> None:
        redact = make_redactor(["ApiKey"])
        out = redact(_record({"apikey": "k", "APIKEY": "k2"}))
        assert out.context == {"apikey": REDACTED, "APIKEY": REDACTED}
        assert "apikey" in redact.keys

    def test_sequences_are_traversed(self) -> None:
        out = make_redactor()(_record({"users": [{"name": "a", "otp": "1"}, "plain", 3]}))
        assert out.context == {"users": [{"name": "a", "otp": REDACTED}, "plain", 3]}

    def test_sensitive_container_value_replaced_whole(self) -> None:
        out = make_redactor()(_record({"secret": {"inner": 1}}))
        assert out.context == {"secret": REDACTED}

    def test_keys_never_removed(self) -> None:
        context = {"password": None, "a": 1}
        out = make_redactor()(_record(context))
        assert out.context is not None
        assert set(out.context) == set(context)

    def test_strings_are_scalars(self) -> None:
        assert KeyRedactor().redact_value("password") == "password"

    def test_record_without_context_passes_through(self) -> None:
        record = _record(None)
        assert make_redactor()(record) is record

    def test_input_record_untouched(self) -> None:
        context = {"password": "x", "nested": {"token": "y"}}
        record = _record(context)
        make_redactor()(record)
        assert record.context == {"password": "x", "nested": {"token": "y"}}
        assert context["nested"]["token"] == "y"

    def test_other_fields_preserved(self) -> None:
        record = LogRecord(
            timestamp=9, level=LogLevel.ERROR, message="boom", namespace="a",
            context={"pass": "p"}, correlation_id="c", device={"d": 1},
        )
        out = make_redactor()(record)
        assert (out.timestamp, out.level, out.message, out.namespace) == (9, LogLevel.ERROR, "boom", "a")
        assert out.correlation_id == "c"
        assert out.device == {"d": 1}
