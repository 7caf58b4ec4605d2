"""Constants for Dose Tracker."""
from datetime import timedelta
from enum import StrEnum

# Integration domain must match the folder name under custom_components
DOMAIN = "dose_tracker"


class Medication(StrEnum):
    """The two tracked substances."""

    PARACETAMOL = "Paracetamol"
    IBUPROFEN = "Ibuprofen"


# Storage constants
STORAGE_KEY = f"{DOMAIN}.log"
STORAGE_VERSION = 2

# Timing
TICK_INTERVAL = timedelta(seconds=60)
EXPIRY_MS = 12 * 60 * 60 * 1000
MS_PER_MINUTE = 60 * 1000

# Display placeholders
DISPLAY_NEVER = "—"
DISPLAY_EXPIRED = ">12h"
HISTORY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Services
SERVICE_RECORD_DOSE = "record_dose"
SERVICE_CLEAR_HISTORY = "clear_history"
ATTR_MEDICATION = "medication"
ATTR_CONFIRM = "confirm"

# Common attribute keys
ATTR_ELAPSED_STATE = "elapsed_state"
ATTR_HOURS = "hours"
ATTR_MINUTES = "minutes"
ATTR_LAST_DOSE = "last_dose"
ATTR_ENTRIES = "entries"

SIGNAL_TRACKER_UPDATED = f"{DOMAIN}_updated"
