import pytest

from custom_components.dose_tracker.const import EXPIRY_MS, MS_PER_MINUTE
from custom_components.dose_tracker.elapsed import (
    ElapsedKind,
    ElapsedState,
    elapsed_display,
)

T = 1_700_000_000_000


@pytest.mark.parametrize("now", [0, T, T + EXPIRY_MS * 10])
def test_never_dosed(now):
    state = elapsed_display(None, now)
    assert state.kind is ElapsedKind.NEVER
    assert state.display == "—"


def test_same_instant_is_zero():
    state = elapsed_display(T, T)
    assert state == ElapsedState(ElapsedKind.ELAPSED, 0, 0)
    assert state.display == "00:00"


def test_twelve_hours_exactly_is_not_expired():
    state = elapsed_display(T, T + EXPIRY_MS)
    assert state.kind is ElapsedKind.ELAPSED
    assert state.display == "12:00"


def test_just_over_twelve_hours_is_expired():
    state = elapsed_display(T, T + EXPIRY_MS + 1)
    assert state.kind is ElapsedKind.EXPIRED
    assert state.display == ">12h"


def test_partial_minutes_are_floored():
    state = elapsed_display(T, T + 65 * MS_PER_MINUTE + 59_999)
    assert (state.hours, state.minutes) == (1, 5)
    assert state.display == "01:05"


def test_future_timestamp_clamps_to_zero():
    state = elapsed_display(T + 5 * MS_PER_MINUTE, T)
    assert state.display == "00:00"


def test_epoch_zero_is_a_real_dose():
    assert elapsed_display(0, 30 * MS_PER_MINUTE).display == "00:30"
