"""Config flow for Dose Tracker integration."""
from __future__ import annotations

import voluptuous as vol
from homeassistant import config_entries

from .const import DOMAIN


class DoseTrackerConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input=None):
        # Both medications are fixed, so there is nothing to ask beyond confirmation
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()
        if user_input is not None:
            return self.async_create_entry(title="Dose Tracker", data={})
        return self.async_show_form(step_id="user", data_schema=vol.Schema({}))
