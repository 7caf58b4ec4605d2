"""Persistence of the dose log in Home Assistant storage."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from .const import STORAGE_KEY, STORAGE_VERSION, Medication
from .exceptions import LoadError, PersistError
from .history import DoseEvent

_LOGGER = logging.getLogger(__name__)


class _DoseLogStore(Store):
    """Store that remembers the last write failure.

    Store logs and swallows write errors itself, so the failure is kept here
    for DoseLogStore to report.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.write_error: Optional[Exception] = None

    async def _async_write_data(self, path: str, data: dict) -> None:
        try:
            await super()._async_write_data(path, data)
        except HomeAssistantError as err:
            self.write_error = err
            raise

    async def _async_migrate_func(self, old_major_version: int, old_minor_version: int, old_data: Any) -> Any:
        # Version 1 was the bare list of events
        if old_major_version == 1 and isinstance(old_data, list):
            return {"events": old_data}
        raise NotImplementedError(f"Cannot migrate dose log from version {old_major_version}")


def serialize(entries: Iterable[DoseEvent]) -> Dict[str, Any]:
    return {"events": [{"medication": e.medication.value, "time": e.time} for e in entries]}


def deserialize(data: Any) -> List[DoseEvent]:
    """Rebuild events from stored data; raise LoadError on anything unexpected."""
    if not isinstance(data, dict) or not isinstance(data.get("events"), list):
        raise LoadError("Stored dose log has no event list")
    out: List[DoseEvent] = []
    for raw in data["events"]:
        if not isinstance(raw, dict):
            raise LoadError(f"Malformed dose event: {raw!r}")
        time = raw.get("time")
        if isinstance(time, bool) or not isinstance(time, int):
            raise LoadError(f"Malformed dose time: {time!r}")
        try:
            medication = Medication(raw.get("medication"))
        except ValueError as err:
            raise LoadError(f"Unknown medication in dose log: {raw.get('medication')!r}") from err
        out.append(DoseEvent(medication=medication, time=time))
    return out


class DoseLogStore:
    """Reads and writes whole dose log snapshots under a single key.

    Saves and removals are serialized, so a write still in flight can never
    land after a later clear.
    """

    def __init__(self, hass: HomeAssistant) -> None:
        self.hass = hass
        self._store: _DoseLogStore = _DoseLogStore(hass, STORAGE_VERSION, STORAGE_KEY)
        self._lock = asyncio.Lock()

    async def async_load(self) -> List[DoseEvent]:
        try:
            events = await self._async_read()
        except LoadError as err:
            _LOGGER.error("Could not load dose log, starting empty: %s", err)
            return []
        _LOGGER.debug("Loaded %d dose events", len(events))
        return events

    async def _async_read(self) -> List[DoseEvent]:
        try:
            data = await self._store.async_load()
        except (HomeAssistantError, NotImplementedError, ValueError, TypeError, KeyError) as err:
            raise LoadError(str(err)) from err
        if data is None:
            return []
        return deserialize(data)

    async def async_save(self, entries: Iterable[DoseEvent]) -> bool:
        data = serialize(entries)
        try:
            async with self._lock:
                await self._async_write(data)
        except PersistError as err:
            _LOGGER.error("Dose log not saved, keeping in-memory copy: %s", err)
            return False
        return True

    async def _async_write(self, data: Dict[str, Any]) -> None:
        self._store.write_error = None
        try:
            await self._store.async_save(data)
        except (HomeAssistantError, OSError, TypeError, ValueError) as err:
            raise PersistError(str(err)) from err
        write_error = self._store.write_error
        if write_error is not None:
            raise PersistError(str(write_error)) from write_error

    async def async_clear(self) -> None:
        try:
            async with self._lock:
                await self._async_remove()
        except PersistError as err:
            _LOGGER.error("Could not remove stored dose log: %s", err)

    async def _async_remove(self) -> None:
        try:
            await self._store.async_remove()
        except (HomeAssistantError, OSError) as err:
            raise PersistError(str(err)) from err
