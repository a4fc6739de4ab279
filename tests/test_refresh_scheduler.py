"""Tests for the refresh scheduler lifecycle and ticking."""
from datetime import datetime, timezone

from core.clock.scheduler import DEFAULT_REFRESH_INTERVAL_MS, RefreshScheduler


class FakeClock:
    """Deterministic time source that advances a minute per sample."""

    def __init__(self):
        self.samples = 0

    def __call__(self):
        self.samples += 1
        return datetime(2024, 6, 1, 0, self.samples - 1, tzinfo=timezone.utc)


def test_default_interval_is_one_minute(qt_app):
    scheduler = RefreshScheduler()
    assert scheduler.interval_ms == DEFAULT_REFRESH_INTERVAL_MS == 60000
    assert scheduler.is_running() is False


def test_start_samples_immediately(qt_app, qtbot):
    clock = FakeClock()
    scheduler = RefreshScheduler(clock=clock)

    with qtbot.waitSignal(scheduler.ticked, timeout=1000) as blocker:
        scheduler.start()

    assert blocker.args[0] == datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)
    assert scheduler.is_running() is True
    scheduler.stop()


def test_recurring_ticks(qt_app, qtbot):
    clock = FakeClock()
    scheduler = RefreshScheduler(interval_ms=20, clock=clock)
    received = []
    scheduler.ticked.connect(received.append)

    scheduler.start()
    qtbot.waitUntil(lambda: len(received) >= 3, timeout=2000)
    scheduler.stop()

    assert received[:3] == [
        datetime(2024, 6, 1, 0, minute, tzinfo=timezone.utc) for minute in range(3)
    ]


def test_stop_cancels_timer(qt_app, qtbot):
    clock = FakeClock()
    scheduler = RefreshScheduler(interval_ms=20, clock=clock)
    scheduler.start()
    scheduler.stop()
    assert scheduler.is_running() is False

    samples = clock.samples
    qtbot.wait(100)
    assert clock.samples == samples


def test_start_and_stop_are_idempotent(qt_app):
    clock = FakeClock()
    scheduler = RefreshScheduler(clock=clock)

    scheduler.start()
    scheduler.start()
    assert clock.samples == 1

    scheduler.stop()
    scheduler.stop()
    assert scheduler.is_running() is False


def test_clock_errors_do_not_stop_timer(qt_app):
    def broken_clock():
        raise RuntimeError("clock unavailable")

    scheduler = RefreshScheduler(clock=broken_clock)
    scheduler.start()
    assert scheduler.is_running() is True
    scheduler.stop()
