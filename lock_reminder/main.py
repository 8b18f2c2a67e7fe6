"""
Entry point for the Lock Reminder tray application.
"""

from __future__ import annotations

import sys
from typing import Iterable

from PySide6.QtWidgets import QApplication

from lock_reminder import logger as app_logger
from reminder_core.app import APP_NAME, APP_VERSION, FATAL_EXIT_CODE, ORGANIZATION_NAME, ReminderController

_LOGGER = app_logger.get_logger()


def _create_application(argv: Iterable[str]) -> QApplication:
    app = QApplication(list(argv))
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    # Hiding the settings window must not end the process.
    app.setQuitOnLastWindowClosed(False)
    return app


def main() -> int:
    """Launch the tray application and run the Qt event loop."""
    app = _create_application(sys.argv)
    controller = ReminderController()
    if not controller.start():
        _LOGGER.error("Environment unsupported; exiting before the event loop starts.")
        return FATAL_EXIT_CODE
    exit_code = app.exec()
    _LOGGER.info("Event loop finished with exit code {}.", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
