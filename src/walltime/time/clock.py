"""Adapters for the host wall clock and the host local-time conversion.

These two functions are the only places walltime touches the host environment. Time values look
them up at call time, so a replacement can be passed explicitly or patched onto this module.
"""

from __future__ import annotations

# Standard Library Imports
import time
from typing import NamedTuple

# Local Imports
from .micros import MICROS_PER_SECOND, checkedSeconds

# Offset between ``time.struct_time.tm_year`` and the ``struct tm`` year convention.
TM_YEAR_BASE: int = 1900


class CalendarFields(NamedTuple):
    """Calendar fields of an instant in local time, in the ``struct tm`` convention."""

    year: int
    """Years since 1900."""
    month: int
    """Month of the year, 0-based (January is 0)."""
    day: int
    """Day of the month, 1-31."""
    hour: int
    minute: int
    second: int


def systemClock() -> tuple[int, int]:
    """Read the host wall clock.

    The wall clock is subject to adjustment by the host, so successive reads are not guaranteed
    to be non-decreasing.

    Returns:
        ``tuple``: seconds since the epoch and the microseconds remainder
    """
    seconds, micros = divmod(time.time_ns() // 1000, MICROS_PER_SECOND)
    return checkedSeconds(seconds), micros


def localCalendar(seconds: int) -> CalendarFields:
    """Map epoch `seconds` to calendar fields in the host's configured local time zone.

    Args:
        seconds (``int``): seconds since the epoch

    Returns:
        :class:`.CalendarFields`: fields with a 0-based month and years counted from 1900
    """
    fields = time.localtime(seconds)
    return CalendarFields(
        year=fields.tm_year - TM_YEAR_BASE,
        month=fields.tm_mon - 1,
        day=fields.tm_mday,
        hour=fields.tm_hour,
        minute=fields.tm_min,
        second=fields.tm_sec,
    )
