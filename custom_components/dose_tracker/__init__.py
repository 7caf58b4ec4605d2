"""Dose Tracker integration for Home Assistant."""
from __future__ import annotations

from datetime import datetime
import logging

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, ServiceCall, callback
from homeassistant.exceptions import HomeAssistantError
import homeassistant.helpers.config_validation as cv
from homeassistant.helpers.event import async_track_time_interval

from .const import (
    ATTR_CONFIRM,
    ATTR_MEDICATION,
    DOMAIN,
    SERVICE_CLEAR_HISTORY,
    SERVICE_RECORD_DOSE,
    TICK_INTERVAL,
    Medication,
)
from .storage import DoseLogStore
from .tracker import DoseTracker

_LOGGER = logging.getLogger(__name__)

PLATFORMS = ["sensor"]

RECORD_DOSE_SCHEMA = vol.Schema(
    {vol.Required(ATTR_MEDICATION): vol.All(cv.string, vol.In([m.value for m in Medication]))}
)
CLEAR_HISTORY_SCHEMA = vol.Schema({vol.Required(ATTR_CONFIRM): cv.boolean})


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Dose Tracker from a config entry."""
    store = hass.data.setdefault(DOMAIN, {})
    tracker = DoseTracker(hass, DoseLogStore(hass))
    await tracker.async_initialize()
    store["tracker"] = tracker

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.debug("%s: sensor platform forwarded for entry %s", DOMAIN, entry.entry_id)

    @callback
    def _handle_tick(now: datetime) -> None:
        tracker.tick(int(now.timestamp() * 1000))

    entry.async_on_unload(async_track_time_interval(hass, _handle_tick, TICK_INTERVAL))

    async def record_dose(call: ServiceCall):
        await tracker.async_record_dose(call.data[ATTR_MEDICATION])

    async def clear_history(call: ServiceCall):
        if not call.data[ATTR_CONFIRM]:
            raise HomeAssistantError("Clearing dose history requires confirm: true")
        await tracker.async_clear_all()

    hass.services.async_register(DOMAIN, SERVICE_RECORD_DOSE, record_dose, schema=RECORD_DOSE_SCHEMA)
    hass.services.async_register(DOMAIN, SERVICE_CLEAR_HISTORY, clear_history, schema=CLEAR_HISTORY_SCHEMA)
    _LOGGER.debug("%s: services registered", DOMAIN)

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if not ok:
        return False

    for svc in (SERVICE_RECORD_DOSE, SERVICE_CLEAR_HISTORY):
        if hass.services.has_service(DOMAIN, svc):
            hass.services.async_remove(DOMAIN, svc)
    hass.data.get(DOMAIN, {}).pop("tracker", None)
    return True
