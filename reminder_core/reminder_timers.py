"""
Lock and remind countdowns sharing a single start/stop lifecycle.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal

MILLISECONDS_PER_MINUTE = 60_000


class TimerPair(QObject):
    """
    Two single-shot timers: ``lockReached`` fires after the lock delay and
    ``remindReached`` fires ``remind`` minutes earlier. Starting or stopping
    always affects both timers.
    """

    lockReached = Signal()
    remindReached = Signal()

    def __init__(self, parent: QObject | None = None, *, minute_ms: int = MILLISECONDS_PER_MINUTE) -> None:
        super().__init__(parent)
        self._minute_ms = minute_ms

        self._lock_timer = QTimer(self)
        self._lock_timer.setSingleShot(True)
        self._lock_timer.timeout.connect(self.lockReached)  # type: ignore[arg-type]

        self._remind_timer = QTimer(self)
        self._remind_timer.setSingleShot(True)
        self._remind_timer.timeout.connect(self.remindReached)  # type: ignore[arg-type]

    def start(self, lock_minutes: int, remind_minutes: int) -> None:
        """(Re)start both countdowns from zero."""
        lock_ms = max(0, lock_minutes * self._minute_ms)
        # A lead time >= lock delay leaves nothing to wait for; fire at once.
        remind_ms = max(0, (lock_minutes - remind_minutes) * self._minute_ms)
        self._lock_timer.start(lock_ms)
        self._remind_timer.start(remind_ms)

    def stop(self) -> None:
        self._lock_timer.stop()
        self._remind_timer.stop()

    @property
    def is_active(self) -> bool:
        return self._lock_timer.isActive() or self._remind_timer.isActive()

    @property
    def lock_interval_ms(self) -> int:
        return self._lock_timer.interval()

    @property
    def remind_interval_ms(self) -> int:
        return self._remind_timer.interval()

    def lock_remaining_ms(self) -> int:
        """Milliseconds until lock, or -1 when the lock timer is idle."""
        return self._lock_timer.remainingTime()

    def remind_remaining_ms(self) -> int:
        return self._remind_timer.remainingTime()
