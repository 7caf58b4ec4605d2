"""Entity base for Dose Tracker."""
from homeassistant.components.sensor import SensorEntity
from homeassistant.core import callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect

from .const import DOMAIN, SIGNAL_TRACKER_UPDATED
from .tracker import DoseTracker, TrackerView


class DoseTrackerEntity(SensorEntity):
    """Sensor that re-renders whenever the tracker publishes a new view."""

    _attr_should_poll = False

    def __init__(self, tracker: DoseTracker):
        self._tracker = tracker
        self._attr_device_info = {
            "identifiers": {(DOMAIN, "dose_tracker")},
            "name": "Dose Tracker",
        }

    async def async_added_to_hass(self) -> None:
        @callback
        def _updated(view: TrackerView):
            self.async_write_ha_state()

        self.async_on_remove(async_dispatcher_connect(self.hass, SIGNAL_TRACKER_UPDATED, _updated))
