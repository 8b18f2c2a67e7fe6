"""
System tray icon with the Reset / Stop / Settings / Exit menu.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, QSize, Signal
from PySide6.QtGui import QAction, QIcon
from PySide6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

_ICON_SIZE = QSize(64, 64)


def _build_icons() -> tuple[QIcon, QIcon]:
    active = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon)
    inactive = QIcon(active.pixmap(_ICON_SIZE, QIcon.Mode.Disabled))
    return active, inactive


class ReminderTray(QObject):
    resetRequested = Signal()
    stopRequested = Signal()
    settingsRequested = Signal()
    exitRequested = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._active_icon, self._inactive_icon = _build_icons()
        self._active = False

        self._tray = QSystemTrayIcon(self)
        self._tray.setIcon(self._inactive_icon)

        # Kept on self so the menu outlives __init__.
        self._menu = QMenu()
        reset_action = QAction("&Reset", self._menu)
        stop_action = QAction("Sto&p", self._menu)
        settings_action = QAction("&Settings", self._menu)
        exit_action = QAction("E&xit", self._menu)
        self._menu.addAction(reset_action)
        self._menu.addAction(stop_action)
        self._menu.addAction(settings_action)
        self._menu.addSeparator()
        self._menu.addAction(exit_action)
        self._tray.setContextMenu(self._menu)

        reset_action.triggered.connect(self.resetRequested)  # type: ignore[arg-type]
        stop_action.triggered.connect(self.stopRequested)  # type: ignore[arg-type]
        settings_action.triggered.connect(self.settingsRequested)  # type: ignore[arg-type]
        exit_action.triggered.connect(self.exitRequested)  # type: ignore[arg-type]

        self._activation_handlers = {
            QSystemTrayIcon.ActivationReason.Trigger: self.settingsRequested.emit,
        }
        self._tray.activated.connect(self._on_activated)

    @staticmethod
    def is_supported() -> bool:
        return QSystemTrayIcon.isSystemTrayAvailable() and QSystemTrayIcon.supportsMessages()

    @property
    def active(self) -> bool:
        return self._active

    def set_active(self, active: bool) -> QIcon:
        """Switch icon variant and return the icon now displayed."""
        self._active = active
        icon = self._active_icon if active else self._inactive_icon
        self._tray.setIcon(icon)
        return icon

    def set_tooltip(self, text: str) -> None:
        self._tray.setToolTip(text)

    def show(self) -> None:
        self._tray.show()

    def hide(self) -> None:
        self._tray.hide()

    def show_message(self, title: str, text: str) -> None:
        self._tray.showMessage(title, text, QSystemTrayIcon.MessageIcon.Information)

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        handler = self._activation_handlers.get(reason)
        if handler is not None:
            handler()
