"""
Blocking message boxes used for confirmation and fatal errors.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from PySide6.QtWidgets import QMessageBox, QWidget


class PromptResult(Enum):
    CONFIRMED = "Confirmed"
    DECLINED = "Declined"
    DISMISSED = "Dismissed"


_BUTTON_RESULTS = {
    QMessageBox.StandardButton.Yes: PromptResult.CONFIRMED,
    QMessageBox.StandardButton.No: PromptResult.DECLINED,
}


class Dialogs:
    """Modal dialogs that suspend the caller until the user responds."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self.parent = parent

    def ask(self, title: str, text: str) -> PromptResult:
        """
        Ask a Yes/No question. Escape and the close button resolve to No, so
        they come back as DECLINED; DISMISSED covers a box that returns
        without any button, e.g. when it is torn down from outside.
        """
        answer = QMessageBox.question(
            self.parent,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return _BUTTON_RESULTS.get(answer, PromptResult.DISMISSED)

    def critical(self, title: str, text: str) -> None:
        QMessageBox.critical(self.parent, title, text, QMessageBox.StandardButton.Ok)
