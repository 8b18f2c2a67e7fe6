from __future__ import annotations

import os
import tempfile

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOCK_REMINDER_LOG_DIR", tempfile.mkdtemp(prefix="lock-reminder-logs-"))

import subprocess  # noqa: E402
from typing import List, Sequence  # noqa: E402

import pytest  # noqa: E402
from PySide6.QtCore import QObject, QSettings, Signal  # noqa: E402
from PySide6.QtGui import QIcon  # noqa: E402

from reminder_core.dialogs import PromptResult  # noqa: E402
from reminder_core.settings import ReminderSettingsManager  # noqa: E402


class FakeTray(QObject):
    resetRequested = Signal()
    stopRequested = Signal()
    settingsRequested = Signal()
    exitRequested = Signal()

    def __init__(self, supported: bool = True) -> None:
        super().__init__()
        self.supported = supported
        self.active = False
        self.visible = False
        self.messages: List[tuple[str, str]] = []
        self.tooltip = ""

    def is_supported(self) -> bool:
        return self.supported

    def set_active(self, active: bool) -> QIcon:
        self.active = active
        return QIcon()

    def set_tooltip(self, text: str) -> None:
        self.tooltip = text

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def show_message(self, title: str, text: str) -> None:
        self.messages.append((title, text))


class FakeDialogs:
    def __init__(self, answer: PromptResult = PromptResult.CONFIRMED) -> None:
        self.answer = answer
        self.questions: List[tuple[str, str]] = []
        self.errors: List[tuple[str, str]] = []

    def ask(self, title: str, text: str) -> PromptResult:
        self.questions.append((title, text))
        return self.answer

    def critical(self, title: str, text: str) -> None:
        self.errors.append((title, text))


class FakeContext:
    def __init__(self) -> None:
        self.exit_codes: List[int] = []

    def name(self) -> str:
        return "Lock Reminder"

    def terminate(self, exit_code: int = 0) -> None:
        self.exit_codes.append(exit_code)


class FakeLocker:
    def __init__(self, succeeds: bool = True) -> None:
        self.succeeds = succeeds
        self.calls = 0

    def lock(self) -> bool:
        self.calls += 1
        return self.succeeds


class RecordingRunner:
    """Stands in for subprocess.run, answering with a scripted exit code per program."""

    def __init__(self, results: dict) -> None:
        self.results = results
        self.calls: List[Sequence[str]] = []

    def __call__(self, args, **kwargs):
        self.calls.append(tuple(args))
        outcome = self.results.get(args[0], 1)
        if isinstance(outcome, BaseException):
            raise outcome
        return subprocess.CompletedProcess(args, outcome, "", "")


@pytest.fixture
def qsettings(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "reminder.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def settings_manager(qsettings) -> ReminderSettingsManager:
    return ReminderSettingsManager(settings=qsettings)


@pytest.fixture
def fake_context() -> FakeContext:
    return FakeContext()
