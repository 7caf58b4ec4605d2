"""Elapsed time since the last dose."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from .const import DISPLAY_EXPIRED, DISPLAY_NEVER, EXPIRY_MS, MS_PER_MINUTE


class ElapsedKind(StrEnum):
    NEVER = "never"
    ELAPSED = "elapsed"
    EXPIRED = "expired"


@dataclass(frozen=True)
class ElapsedState:
    kind: ElapsedKind
    hours: int = 0
    minutes: int = 0

    @property
    def display(self) -> str:
        if self.kind is ElapsedKind.NEVER:
            return DISPLAY_NEVER
        if self.kind is ElapsedKind.EXPIRED:
            return DISPLAY_EXPIRED
        return f"{self.hours:02d}:{self.minutes:02d}"


NEVER = ElapsedState(ElapsedKind.NEVER)
EXPIRED = ElapsedState(ElapsedKind.EXPIRED)


def elapsed_display(last_timestamp: Optional[int], now: int) -> ElapsedState:
    """Classify the time between the last dose and now.

    Exactly twelve hours still shows as 12:00; only a longer gap is expired.
    A timestamp in the future (clock skew) counts as no time elapsed.
    """
    if last_timestamp is None:
        return NEVER
    delta = max(0, now - last_timestamp)
    if delta > EXPIRY_MS:
        return EXPIRED
    total_minutes = delta // MS_PER_MINUTE
    return ElapsedState(ElapsedKind.ELAPSED, hours=total_minutes // 60, minutes=total_minutes % 60)
