"""Testing helpers – fakes for deterministic logger tests."""
from clientlog.kernel.time import FrozenClock
from clientlog.testing.fakes import FakeClock, ScriptedRandom
from clientlog.transports.memory import InMemoryTransport

__all__ = ["FakeClock", "FrozenClock", "InMemoryTransport", "ScriptedRandom"]
