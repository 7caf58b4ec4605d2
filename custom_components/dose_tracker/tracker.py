"""Dose tracker service tying the log, storage and elapsed display together."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Dict, Optional

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.dispatcher import async_dispatcher_send
from homeassistant.util import dt as dt_util

from .const import HISTORY_TIME_FORMAT, SIGNAL_TRACKER_UPDATED, Medication
from .elapsed import NEVER, ElapsedState, elapsed_display
from .history import DoseEvent, DoseLog, coerce_medication, utc_now_ms
from .storage import DoseLogStore

_LOGGER = logging.getLogger(__name__)


def format_dose_time(time_ms: int) -> str:
    local = dt_util.as_local(dt_util.utc_from_timestamp(time_ms / 1000))
    return local.strftime(HISTORY_TIME_FORMAT)


@dataclass(frozen=True)
class HistoryEntry:
    medication: Medication
    time: int
    display_time: str

    def as_dict(self) -> Dict[str, object]:
        return {"medication": self.medication.value, "time": self.time, "display_time": self.display_time}


@dataclass(frozen=True)
class TrackerView:
    history: tuple[HistoryEntry, ...] = ()
    states: Dict[Medication, ElapsedState] = field(
        default_factory=lambda: {med: NEVER for med in Medication}
    )


class DoseTracker:
    """Owns the dose log for one config entry and publishes its view."""

    def __init__(self, hass: HomeAssistant, store: DoseLogStore, clock: Callable[[], int] = utc_now_ms) -> None:
        self.hass = hass
        self._store = store
        self._clock = clock
        self._log = DoseLog(clock=clock)
        self._view = TrackerView()

    @property
    def log(self) -> DoseLog:
        return self._log

    @property
    def view(self) -> TrackerView:
        return self._view

    def state_for(self, medication) -> ElapsedState:
        return self._view.states[coerce_medication(medication)]

    async def async_initialize(self) -> None:
        events = await self._store.async_load()
        self._log = DoseLog(events, clock=self._clock)
        self._refresh(self._clock())

    async def async_record_dose(self, medication) -> DoseEvent:
        event = self._log.record(medication)
        _LOGGER.debug("Recorded %s at %s", event.medication, event.time)
        self._refresh(self._clock())
        await self._store.async_save(self._log.all())
        return event

    @callback
    def tick(self, now: Optional[int] = None) -> None:
        self._refresh(self._clock() if now is None else now)

    async def async_clear_all(self) -> None:
        self._log.clear()
        self._refresh(self._clock())
        await self._store.async_clear()
        _LOGGER.debug("Dose history cleared")

    @callback
    def _refresh(self, now: int) -> None:
        states: Dict[Medication, ElapsedState] = {}
        for med in Medication:
            last = self._log.most_recent(med)
            states[med] = elapsed_display(None if last is None else last.time, now)
        history = tuple(
            HistoryEntry(medication=e.medication, time=e.time, display_time=format_dose_time(e.time))
            for e in self._log.all()
        )
        self._view = TrackerView(history=history, states=states)
        async_dispatcher_send(self.hass, SIGNAL_TRACKER_UPDATED, self._view)
