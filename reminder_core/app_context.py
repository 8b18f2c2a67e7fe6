"""
Application-wide lookups handed to the controller instead of global access.
"""

from __future__ import annotations

from PySide6.QtWidgets import QApplication

from lock_reminder import logger as app_logger


class ApplicationContext:
    def __init__(self, fallback_name: str = "") -> None:
        self._fallback_name = fallback_name
        self._logger = app_logger.get_logger()

    def name(self) -> str:
        app = QApplication.instance()
        if app is not None and app.applicationName():
            return app.applicationName()
        return self._fallback_name

    def terminate(self, exit_code: int = 0) -> None:
        """Leave the event loop with ``exit_code``."""
        self._logger.info("Terminating application with exit code {}.", exit_code)
        QApplication.exit(exit_code)
