"""
Reminder controller coordinating settings, countdowns, and screen locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject

from lock_reminder import logger as app_logger
from reminder_core.app_context import ApplicationContext
from reminder_core.dialogs import Dialogs, PromptResult
from reminder_core.lock_screen import ScreenLocker
from reminder_core.reminder_timers import TimerPair
from reminder_core.settings import ReminderSettings, ReminderSettingsManager
from reminder_core.settings_window import SettingsWindow
from reminder_core.tray import ReminderTray

APP_NAME = "Lock Reminder"
ORGANIZATION_NAME = "LockReminder"
APP_VERSION = "1.0.0"

CONTINUE_PROMPT = "Ready to continue?"
LOCK_UNAVAILABLE_MESSAGE = "Your lock screen is not available."
TRAY_UNSUPPORTED_MESSAGE = "Your system tray is not supported."
FATAL_EXIT_CODE = 1


class ReminderState(Enum):
    STOPPED = "Stopped"
    RUNNING = "Running"
    PROMPTING = "Prompting"
    TERMINATED = "Terminated"


@dataclass(eq=False)
class ReminderController(QObject):
    settings_manager: ReminderSettingsManager = field(default_factory=ReminderSettingsManager)
    screen_locker: ScreenLocker = field(default_factory=ScreenLocker)
    context: ApplicationContext = field(default_factory=lambda: ApplicationContext(APP_NAME))
    dialogs: Optional[Dialogs] = None
    tray: Optional[ReminderTray] = None
    timers: Optional[TimerPair] = None

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()

        self._settings = ReminderSettings()
        self._state = ReminderState.STOPPED

        self._window = SettingsWindow(self.context.name())
        if self.dialogs is None:
            self.dialogs = Dialogs(self._window)
        if self.tray is None:
            self.tray = ReminderTray(self)
        if self.timers is None:
            self.timers = TimerPair(self)

        self._window.applyRequested.connect(self.save_configuration)
        self._window.restoreRequested.connect(self.load_configuration)

        self.timers.lockReached.connect(self.on_lock_timer_fired)
        self.timers.remindReached.connect(self.on_remind_timer_fired)

        self.tray.resetRequested.connect(self.restart_timers)
        self.tray.stopRequested.connect(self.stop_timers)
        self.tray.settingsRequested.connect(self.show_settings)
        self.tray.exitRequested.connect(self.shutdown)

    def start(self) -> bool:
        """Bring up the tray and settings window; False if the desktop cannot host us."""
        self._logger.info("Starting {} v{}.", self.context.name(), APP_VERSION)
        if not self.tray.is_supported():
            self._logger.error("System tray or tray messages unavailable.")
            self._fail(TRAY_UNSUPPORTED_MESSAGE)
            return False

        self.load_configuration()
        self._set_active(False)
        self.tray.show()
        self.show_settings()
        return True

    def shutdown(self) -> None:
        self._logger.info("Shutting down application on user request.")
        self.timers.stop()
        self._window.hide()
        self.tray.hide()
        self._state = ReminderState.TERMINATED
        self.context.terminate(0)

    @property
    def state(self) -> ReminderState:
        return self._state

    @property
    def active(self) -> bool:
        return self.tray.active

    @property
    def settings(self) -> ReminderSettings:
        return self._settings

    @property
    def window(self) -> SettingsWindow:
        return self._window

    def load_configuration(self) -> None:
        self._settings = self.settings_manager.read_settings()
        self._window.set_values(self._settings)
        self._logger.debug(
            "Loaded configuration lock={} remind={}",
            self._settings.lock_minutes,
            self._settings.remind_minutes,
        )

    def save_configuration(self) -> None:
        self._settings = self._window.values()
        self.settings_manager.write_settings(self._settings)
        self._logger.info(
            "Applied configuration lock={} remind={}",
            self._settings.lock_minutes,
            self._settings.remind_minutes,
        )
        self._window.hide()
        self.restart_timers()

    def restart_timers(self) -> None:
        if self._state is ReminderState.PROMPTING:
            self._logger.debug("Reset ignored while the continue prompt is open.")
            return
        self.timers.start(self._settings.lock_minutes, self._settings.remind_minutes)
        self._state = ReminderState.RUNNING
        self._set_active(True)
        self._logger.info(
            "Timers started: remind in {} min, lock in {} min.",
            self._settings.remind_delay_minutes,
            self._settings.lock_minutes,
        )

    def stop_timers(self) -> None:
        if self._state is ReminderState.PROMPTING:
            self._logger.debug("Stop ignored while the continue prompt is open.")
            return
        self.timers.stop()
        self._state = ReminderState.STOPPED
        self._set_active(False)
        self._logger.info("Timers stopped.")

    def show_settings(self) -> None:
        self._window.show_centered()

    def on_remind_timer_fired(self) -> None:
        text = f"{self._settings.remind_minutes} min. left"
        self._logger.info("Reminder: {}", text)
        self.tray.show_message(self.context.name(), text)

    def on_lock_timer_fired(self) -> None:
        self.stop_timers()
        self._logger.info("Lock delay reached; locking screen.")

        if not self.screen_locker.lock():
            self._fail(LOCK_UNAVAILABLE_MESSAGE)
            return

        self._state = ReminderState.PROMPTING
        result = self.dialogs.ask(self.context.name(), CONTINUE_PROMPT)
        self._logger.info("Continue prompt answered: {}", result.value)
        if self._state is not ReminderState.PROMPTING:
            # Exit was chosen from the tray while the prompt was open.
            return

        self._state = ReminderState.STOPPED
        if result is PromptResult.CONFIRMED:
            self.restart_timers()
        else:
            self.stop_timers()

    def _set_active(self, active: bool) -> None:
        icon = self.tray.set_active(active)
        self._window.setWindowIcon(icon)
        self.tray.set_tooltip(f"{self.context.name()} ({'active' if active else 'stopped'})")

    def _fail(self, message: str) -> None:
        self.timers.stop()
        self._state = ReminderState.TERMINATED
        self.dialogs.critical(self.context.name(), message)
        self.context.terminate(FATAL_EXIT_CODE)
