# app/services/settings_store.py
"""
In-memory user settings (preferred area + notifications toggle).
Lives for the lifetime of the process; one instance is created per app in
app/main.py and handed to routes through a dependency.
"""

import threading

from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SETTINGS = {"preferredArea": "Melbourne CBD", "notificationsEnabled": True}


class SettingsStore:
    def __init__(self, initial: dict = None):
        self._lock = threading.Lock()
        self._data = dict(DEFAULT_SETTINGS)
        if initial:
            self._apply(initial)

    def get(self) -> dict:
        with self._lock:
            return dict(self._data)

    def update(self, payload: dict) -> dict:
        """
        Apply the fields of `payload` that have the right type.
        Wrongly typed or unknown fields are ignored, never an error.
        """
        with self._lock:
            self._apply(payload or {})
            return dict(self._data)

    def _apply(self, payload: dict):
        area = payload.get("preferredArea")
        if isinstance(area, str):
            self._data["preferredArea"] = area
        elif area is not None:
            logger.debug(f"Ignoring non-string preferredArea: {area!r}")

        enabled = payload.get("notificationsEnabled")
        if isinstance(enabled, bool):
            self._data["notificationsEnabled"] = enabled
        elif enabled is not None:
            logger.debug(f"Ignoring non-boolean notificationsEnabled: {enabled!r}")
