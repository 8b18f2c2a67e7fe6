from __future__ import annotations

from reminder_core.reminder_timers import MILLISECONDS_PER_MINUTE, TimerPair


def test_start_sets_both_intervals(qtbot):
    timers = TimerPair()

    timers.start(20, 1)

    assert timers.lock_interval_ms == 20 * MILLISECONDS_PER_MINUTE
    assert timers.remind_interval_ms == 19 * MILLISECONDS_PER_MINUTE
    assert timers.is_active
    timers.stop()


def test_stop_halts_both_timers(qtbot):
    timers = TimerPair()
    timers.start(20, 1)

    timers.stop()

    assert not timers.is_active
    assert timers.lock_remaining_ms() == -1
    assert timers.remind_remaining_ms() == -1


def test_restart_begins_fresh_countdown(qtbot):
    timers = TimerPair()
    timers.start(20, 1)
    qtbot.wait(50)

    timers.stop()
    timers.start(20, 1)

    assert timers.lock_remaining_ms() > 20 * MILLISECONDS_PER_MINUTE - 1000
    timers.stop()


def test_remind_fires_before_lock(qtbot):
    timers = TimerPair(minute_ms=20)
    fired = []
    timers.remindReached.connect(lambda: fired.append("remind"))
    timers.lockReached.connect(lambda: fired.append("lock"))

    with qtbot.waitSignal(timers.lockReached, timeout=2000):
        timers.start(5, 2)

    assert fired == ["remind", "lock"]


def test_remind_not_before_lock_fires_immediately(qtbot):
    timers = TimerPair()

    with qtbot.waitSignal(timers.remindReached, timeout=1000):
        timers.start(3, 3)

    assert timers.remind_interval_ms == 0
    assert timers.is_active
    timers.stop()
