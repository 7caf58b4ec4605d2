"""Dose log model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional

from homeassistant.util import dt as dt_util

from .const import Medication
from .exceptions import InvalidMedication


def utc_now_ms() -> int:
    return int(dt_util.utcnow().timestamp() * 1000)


def coerce_medication(value) -> Medication:
    """Return the Medication for a member or its string value."""
    if isinstance(value, Medication):
        return value
    try:
        return Medication(value)
    except ValueError as err:
        raise InvalidMedication(f"Unknown medication: {value!r}") from err


@dataclass(frozen=True)
class DoseEvent:
    medication: Medication
    time: int


class DoseLog:
    """Dose events held most-recent-first.

    New events always go to the head, so the first match for a medication
    is its latest dose no matter what was recorded for the other one.
    """

    def __init__(self, events: Iterable[DoseEvent] = (), clock: Callable[[], int] = utc_now_ms) -> None:
        self._events: List[DoseEvent] = list(events)
        self._clock = clock

    def record(self, medication) -> DoseEvent:
        event = DoseEvent(medication=coerce_medication(medication), time=self._clock())
        self._events.insert(0, event)
        return event

    def most_recent(self, medication) -> Optional[DoseEvent]:
        medication = coerce_medication(medication)
        for event in self._events:
            if event.medication is medication:
                return event
        return None

    def all(self) -> tuple[DoseEvent, ...]:
        return tuple(self._events)

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[DoseEvent]:
        return iter(tuple(self._events))
