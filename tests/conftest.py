import pytest

from custom_components.dose_tracker.const import MS_PER_MINUTE

T0 = 1_700_000_000_000


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, minutes: int = 0, ms: int = 0) -> int:
        self.now += minutes * MS_PER_MINUTE + ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()
