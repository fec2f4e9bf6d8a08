"""Helper functions that convert between walltime values and the standard ``datetime`` types."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone

# Local Imports
from .absolute import AbsoluteTime
from .elapsed import ElapsedTime
from .micros import SECONDS_PER_DAY

UNIX_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""The epoch as a timezone-aware ``datetime``."""


def _timedeltaParts(delta: timedelta) -> tuple[int, int]:
    # ``timedelta`` keeps seconds and microseconds non-negative and signs the days.
    return delta.days * SECONDS_PER_DAY + delta.seconds, delta.microseconds


def datetimeToAbsoluteTime(date_time: datetime) -> AbsoluteTime:
    """Convert a ``datetime`` object to an :class:`.AbsoluteTime`.

    Args:
        date_time (datetime): ``datetime`` object to be converted. Naive values are taken as UTC.

    Returns:
        AbsoluteTime: the same instant, exact to the microsecond
    """
    if not isinstance(date_time, datetime):
        raise TypeError(f"datetimeToAbsoluteTime: expected a `datetime`, got {type(date_time).__name__}")

    if date_time.tzinfo is None:
        date_time = date_time.replace(tzinfo=timezone.utc)

    return AbsoluteTime(*_timedeltaParts(date_time - UNIX_EPOCH))


def absoluteTimeToDatetime(absolute_time: AbsoluteTime) -> datetime:
    """Convert an :class:`.AbsoluteTime` to a timezone-aware UTC ``datetime`` object."""
    if not isinstance(absolute_time, AbsoluteTime):
        raise TypeError(
            f"absoluteTimeToDatetime: expected an `AbsoluteTime`, got {type(absolute_time).__name__}",
        )

    return UNIX_EPOCH + timedelta(seconds=absolute_time.seconds, microseconds=absolute_time.micros)


def timedeltaToElapsedTime(delta: timedelta) -> ElapsedTime:
    """Convert a ``timedelta`` object to an :class:`.ElapsedTime`."""
    if not isinstance(delta, timedelta):
        raise TypeError(f"timedeltaToElapsedTime: expected a `timedelta`, got {type(delta).__name__}")

    return ElapsedTime(*_timedeltaParts(delta))


def elapsedTimeToTimedelta(elapsed: ElapsedTime) -> timedelta:
    """Convert an :class:`.ElapsedTime` to a ``timedelta`` object."""
    if not isinstance(elapsed, ElapsedTime):
        raise TypeError(f"elapsedTimeToTimedelta: expected an `ElapsedTime`, got {type(elapsed).__name__}")

    return timedelta(seconds=elapsed.seconds, microseconds=elapsed.micros)
