"""
QSettings-backed configuration for the reminder runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QSettings

from lock_reminder import logger as app_logger

_LOGGER = app_logger.get_logger()

LOCK_TIME_KEY = "lock_time"
REMIND_TIME_KEY = "remind_time"

DEFAULT_LOCK_MINUTES = 20
DEFAULT_REMIND_MINUTES = 1
MIN_LOCK_MINUTES = 2
MAX_LOCK_MINUTES = 999
MIN_REMIND_MINUTES = 1


@dataclass(eq=True)
class ReminderSettings:
    lock_minutes: int = DEFAULT_LOCK_MINUTES
    remind_minutes: int = DEFAULT_REMIND_MINUTES

    @property
    def remind_delay_minutes(self) -> int:
        """Minutes from timer start until the reminder fires."""
        return self.lock_minutes - self.remind_minutes


def clamp_settings(settings: ReminderSettings) -> ReminderSettings:
    """Force both values into range so that remind < lock always holds."""
    lock = max(MIN_LOCK_MINUTES, min(MAX_LOCK_MINUTES, settings.lock_minutes))
    remind = max(MIN_REMIND_MINUTES, min(lock - 1, settings.remind_minutes))
    return ReminderSettings(lock_minutes=lock, remind_minutes=remind)


class ReminderSettingsManager:
    """Loads and stores the lock/remind pair, clamping invalid data on read."""

    def __init__(self, *, settings: Optional[QSettings] = None) -> None:
        self._settings = settings if settings is not None else QSettings()

    def read_settings(self) -> ReminderSettings:
        raw = ReminderSettings(
            lock_minutes=self._read_int(LOCK_TIME_KEY, DEFAULT_LOCK_MINUTES),
            remind_minutes=self._read_int(REMIND_TIME_KEY, DEFAULT_REMIND_MINUTES),
        )
        clamped = clamp_settings(raw)
        if clamped != raw:
            _LOGGER.warning(
                "Stored reminder settings {} out of bounds. Clamping to {}.",
                raw,
                clamped,
            )
        return clamped

    def write_settings(self, settings: ReminderSettings) -> None:
        self._settings.setValue(LOCK_TIME_KEY, int(settings.lock_minutes))
        self._settings.setValue(REMIND_TIME_KEY, int(settings.remind_minutes))
        self._settings.sync()
        _LOGGER.debug(
            "Persisted settings lock={} remind={}",
            settings.lock_minutes,
            settings.remind_minutes,
        )

    def _read_int(self, name: str, default: int) -> int:
        raw = self._settings.value(name)
        if raw is None:
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            _LOGGER.warning("Setting {} has unexpected value {!r}. Using default {}.", name, raw, default)
            return default
