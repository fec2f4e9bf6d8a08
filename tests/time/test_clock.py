from __future__ import annotations

# Standard Library Imports
import time

# Third Party Imports
import pytest

# Walltime Imports
from walltime.time import clock
from walltime.time.clock import CalendarFields, localCalendar, systemClock
from walltime.time.micros import MICROS_PER_SECOND


def testSystemClock():
    """Test the wall clock reading is a normalized pair close to ``time.time``."""
    before = time.time_ns() // 1000
    seconds, micros = systemClock()
    after = time.time_ns() // 1000

    assert isinstance(seconds, int)
    assert 0 <= micros < MICROS_PER_SECOND
    assert before <= seconds * MICROS_PER_SECOND + micros <= after


def testSystemClockSplit(monkeypatch: pytest.MonkeyPatch):
    """Test nanoseconds are truncated to microseconds before splitting."""
    monkeypatch.setattr(clock.time, "time_ns", lambda: 1_700_000_000_250_000_999)
    assert systemClock() == (1_700_000_000, 250_000)


@pytest.mark.parametrize("seconds", [0, 86_399, 951_782_400, 1_700_000_000])
def testLocalCalendar(seconds: int):
    """Test calendar fields follow the ``struct tm`` convention."""
    expected = time.localtime(seconds)
    fields = localCalendar(seconds)
    assert isinstance(fields, CalendarFields)
    assert fields == (
        expected.tm_year - 1900,
        expected.tm_mon - 1,
        expected.tm_mday,
        expected.tm_hour,
        expected.tm_min,
        expected.tm_sec,
    )
    assert 0 <= fields.month <= 11
