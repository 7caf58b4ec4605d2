"""Errors raised by Dose Tracker."""
from homeassistant.exceptions import HomeAssistantError


class DoseTrackerError(HomeAssistantError):
    """Base class for Dose Tracker errors."""


class LoadError(DoseTrackerError):
    """Persisted dose log could not be read."""


class PersistError(DoseTrackerError):
    """Dose log could not be written or removed."""


class InvalidMedication(DoseTrackerError, ValueError):
    """Medication is not one of the tracked identifiers."""
