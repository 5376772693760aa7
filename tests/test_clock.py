"""Tests for DigitalClock updates and formatting."""

from datetime import datetime, timedelta

import pytest

from studycheck.clock import DigitalClock, format_clock


def test_format_clock_24h():
    assert format_clock(datetime(2024, 5, 1, 9, 5, 7)) == "09:05:07"
    assert format_clock(datetime(2024, 5, 1, 23, 59, 59)) == "23:59:59"


class FakeNow:
    def __init__(self, start):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(seconds=1)
        return value


def test_start_updates_immediately_then_every_second(root):
    shown = []
    clock = DigitalClock(root, shown.append, now=FakeNow(datetime(2024, 1, 1, 12, 0, 0)))
    clock.start()
    assert shown == ["12:00:00"]
    root.advance_seconds(2)
    assert shown == ["12:00:00", "12:00:01", "12:00:02"]


def test_start_twice_keeps_single_job(root):
    shown = []
    clock = DigitalClock(root, shown.append)
    clock.start()
    clock.start()
    assert root.pending == 1
    assert len(shown) == 1


def test_stop_cancels_pending_job(root):
    shown = []
    clock = DigitalClock(root, shown.append)
    clock.start()
    assert clock.running
    clock.stop()
    assert not clock.running
    assert root.pending == 0
    root.advance_seconds(5)
    assert len(shown) == 1


def test_stop_from_update_callback(root):
    shown = []
    holder = {}

    def on_update(text):
        shown.append(text)
        if len(shown) == 2:
            holder["clock"].stop()

    clock = DigitalClock(root, on_update)
    holder["clock"] = clock
    clock.start()
    root.advance_seconds(5)
    assert len(shown) == 2
    assert not clock.running
    assert root.pending == 0


def test_restart_after_stop(root):
    shown = []
    clock = DigitalClock(root, shown.append)
    clock.start()
    clock.stop()
    clock.start()
    root.advance_seconds(1)
    assert len(shown) == 3
    assert root.pending == 1


def test_non_positive_interval_rejected(root):
    with pytest.raises(ValueError):
        DigitalClock(root, print, interval_ms=-1)
