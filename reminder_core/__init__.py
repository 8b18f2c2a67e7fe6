"""
Runtime pieces of the Lock Reminder: settings, countdowns, tray and locking.
"""

from .reminder_timers import TimerPair  # noqa: F401
from .settings import ReminderSettings, ReminderSettingsManager  # noqa: F401
