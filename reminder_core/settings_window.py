"""
Settings window holding the lock delay and remind lead time inputs.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QAbstractButton,
    QApplication,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .settings import (
    MAX_LOCK_MINUTES,
    MIN_LOCK_MINUTES,
    MIN_REMIND_MINUTES,
    ReminderSettings,
)


class SettingsWindow(QWidget):
    """
    Two spin boxes and a Restore Defaults / Apply button box. The remind
    field's maximum always tracks ``lock - 1``. Closing only hides the window.
    """

    applyRequested = Signal()
    restoreRequested = Signal()

    def __init__(self, title: str = "", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("SettingsWindow")
        self.setWindowTitle(title)
        self.setWindowFlags(
            Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
            | Qt.WindowType.WindowCloseButtonHint
        )
        self._build_ui()

        self._button_handlers = {
            QDialogButtonBox.StandardButton.RestoreDefaults: self.restoreRequested.emit,
            QDialogButtonBox.StandardButton.Apply: self.applyRequested.emit,
        }
        self._button_box.clicked.connect(self._on_button_clicked)  # type: ignore[arg-type]
        self._lock_spin.valueChanged.connect(self.change_remind_upper_bound)  # type: ignore[arg-type]
        self.change_remind_upper_bound(self._lock_spin.value())

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 16)
        layout.setSpacing(10)

        form_layout = QFormLayout()
        form_layout.setHorizontalSpacing(16)
        form_layout.setVerticalSpacing(12)

        self._lock_spin = QSpinBox()
        self._lock_spin.setRange(MIN_LOCK_MINUTES, MAX_LOCK_MINUTES)
        self._lock_spin.setSuffix(" min")
        form_layout.addRow("Lock screen after", self._lock_spin)

        self._remind_spin = QSpinBox()
        self._remind_spin.setMinimum(MIN_REMIND_MINUTES)
        self._remind_spin.setSuffix(" min")
        form_layout.addRow("Remind before", self._remind_spin)

        layout.addLayout(form_layout)

        self._button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.RestoreDefaults | QDialogButtonBox.StandardButton.Apply
        )
        layout.addWidget(self._button_box)

    @property
    def lock_spin(self) -> QSpinBox:
        return self._lock_spin

    @property
    def remind_spin(self) -> QSpinBox:
        return self._remind_spin

    @property
    def button_box(self) -> QDialogButtonBox:
        return self._button_box

    def set_values(self, settings: ReminderSettings) -> None:
        # Lock first so the remind maximum is already widened.
        self._lock_spin.setValue(settings.lock_minutes)
        self.change_remind_upper_bound(self._lock_spin.value())
        self._remind_spin.setValue(settings.remind_minutes)

    def values(self) -> ReminderSettings:
        return ReminderSettings(
            lock_minutes=self._lock_spin.value(),
            remind_minutes=self._remind_spin.value(),
        )

    def change_remind_upper_bound(self, lock_minutes: int) -> None:
        self._remind_spin.setMaximum(lock_minutes - 1)

    def show_centered(self) -> None:
        self.adjustSize()
        self._center_on_screen()
        self.show()
        self.raise_()
        self.activateWindow()

    def _center_on_screen(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        x = geometry.center().x() - self.width() // 2
        y = geometry.center().y() - self.height() // 2
        self.move(QPoint(x, y))

    def _on_button_clicked(self, button: QAbstractButton) -> None:
        handler = self._button_handlers.get(self._button_box.standardButton(button))
        if handler is not None:
            handler()

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self.hide()
        event.ignore()
