"""
Shared test fixtures.
"""
import pytest

from perfutils.services.timer_registry import TimerRegistry


class FakeClock:
    """Manually advanced clock returning milliseconds."""
    
    def __init__(self, now: float = 0.0):
        self.now = now
        self.calls = 0
    
    def __call__(self) -> float:
        self.calls += 1
        return self.now
    
    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    """Fake clock starting 1000ms after process start."""
    return FakeClock(now=1000.0)


@pytest.fixture
def registry(clock):
    """Registry driven by the fake clock."""
    return TimerRegistry(clock=clock)
