"""Unit tests for testing fakes."""

from __future__ import annotations

import pytest

from clientlog.testing import FakeClock, ScriptedRandom


class TestFakeClock:
    def test_pinned(self) -> None:
        clock = FakeClock()
        assert clock.now_ms() == 1_767_268_800_000

    def test_instances_are_independent(self) -> None:
        a, b = FakeClock(), FakeClock()
        a.advance(seconds=1)
        assert a.now_ms() - b.now_ms() == 1000


class TestScriptedRandom:
    def test_cycles_values(self) -> None:
        rnd = ScriptedRandom([0.1, 0.9])
        assert [rnd() for _ in range(5)] == [0.1, 0.9, 0.1, 0.9, 0.1]
        assert rnd.calls == 5

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            ScriptedRandom([])
