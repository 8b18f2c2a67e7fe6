from __future__ import annotations

from PySide6.QtWidgets import QDialogButtonBox

from reminder_core.settings import ReminderSettings
from reminder_core.settings_window import SettingsWindow


def _window(qtbot) -> SettingsWindow:
    window = SettingsWindow("Lock Reminder")
    qtbot.addWidget(window)
    return window


def test_lock_change_clamps_remind_maximum(qtbot):
    window = _window(qtbot)
    window.set_values(ReminderSettings(lock_minutes=20, remind_minutes=10))

    window.lock_spin.setValue(5)

    assert window.remind_spin.maximum() == 4
    assert window.remind_spin.value() == 4


def test_clamp_is_idempotent(qtbot):
    window = _window(qtbot)
    window.lock_spin.setValue(30)

    window.change_remind_upper_bound(30)
    window.change_remind_upper_bound(30)

    assert window.remind_spin.maximum() == 29


def test_raising_lock_widens_remind_range(qtbot):
    window = _window(qtbot)
    window.set_values(ReminderSettings(lock_minutes=3, remind_minutes=2))

    window.set_values(ReminderSettings(lock_minutes=60, remind_minutes=45))

    assert window.values() == ReminderSettings(lock_minutes=60, remind_minutes=45)


def test_apply_and_restore_buttons_emit_signals(qtbot):
    window = _window(qtbot)

    with qtbot.waitSignal(window.applyRequested, timeout=1000):
        window.button_box.button(QDialogButtonBox.StandardButton.Apply).click()
    with qtbot.waitSignal(window.restoreRequested, timeout=1000):
        window.button_box.button(QDialogButtonBox.StandardButton.RestoreDefaults).click()


def test_close_hides_instead_of_closing(qtbot):
    window = _window(qtbot)
    window.show_centered()
    assert window.isVisible()

    window.close()

    assert not window.isVisible()
