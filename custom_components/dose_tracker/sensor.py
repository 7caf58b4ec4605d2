"""Sensor platform for Dose Tracker."""
from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity import async_generate_entity_id
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import (
    ATTR_ELAPSED_STATE,
    ATTR_ENTRIES,
    ATTR_HOURS,
    ATTR_LAST_DOSE,
    ATTR_MINUTES,
    DOMAIN,
    Medication,
)
from .elapsed import ElapsedKind
from .entity import DoseTrackerEntity
from .tracker import DoseTracker, format_dose_time


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
) -> None:
    tracker: DoseTracker = hass.data[DOMAIN]["tracker"]
    entities: list[DoseTrackerEntity] = [ElapsedSensor(hass, tracker, med) for med in Medication]
    entities.append(DoseHistorySensor(hass, tracker))
    async_add_entities(entities)


class ElapsedSensor(DoseTrackerEntity):
    """Time since the last dose of one medication."""

    def __init__(self, hass: HomeAssistant, tracker: DoseTracker, medication: Medication):
        super().__init__(tracker)
        self._medication = medication
        slug = medication.value.lower()
        self._attr_name = f"{medication.value} since last dose"
        self._attr_unique_id = f"{DOMAIN}_{slug}"
        self.entity_id = async_generate_entity_id("sensor.{}", f"{DOMAIN}_{slug}", hass=hass)

    @property
    def native_value(self):
        return self._tracker.state_for(self._medication).display

    @property
    def icon(self):
        if self._tracker.state_for(self._medication).kind is ElapsedKind.EXPIRED:
            return "mdi:pill-off"
        return "mdi:pill"

    @property
    def extra_state_attributes(self):
        state = self._tracker.state_for(self._medication)
        last = self._tracker.log.most_recent(self._medication)
        elapsed = state.kind is ElapsedKind.ELAPSED
        return {
            ATTR_ELAPSED_STATE: state.kind.value,
            ATTR_HOURS: state.hours if elapsed else None,
            ATTR_MINUTES: state.minutes if elapsed else None,
            ATTR_LAST_DOSE: None if last is None else format_dose_time(last.time),
        }


class DoseHistorySensor(DoseTrackerEntity):
    """Number of recorded doses, with the full history as an attribute."""

    _attr_icon = "mdi:history"

    def __init__(self, hass: HomeAssistant, tracker: DoseTracker):
        super().__init__(tracker)
        self._attr_name = "Dose history"
        self._attr_unique_id = f"{DOMAIN}_history"
        self.entity_id = async_generate_entity_id("sensor.{}", f"{DOMAIN}_history", hass=hass)

    @property
    def native_value(self):
        return len(self._tracker.view.history)

    @property
    def extra_state_attributes(self):
        return {ATTR_ENTRIES: [entry.as_dict() for entry in self._tracker.view.history]}
