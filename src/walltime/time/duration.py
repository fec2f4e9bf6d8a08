"""Defines :class:`.DurationView`, the elapsed-time display adapter."""

from __future__ import annotations

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from .micros import (
    MICROS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TimeValue,
)


class DurationView:
    """Read-only snapshot of a time value, rendered as an elapsed span.

    The view copies the seconds and microseconds of the value it is built from, so later changes
    to that value do not affect it:

    .. code-block:: python

        str(DurationView(AbsoluteTime(45)))  # '0:00:45'
        str(DurationView(AbsoluteTime(3661, 500000), show_sub_second=True))  # '1:01:01.500000'
        str(DurationView(AbsoluteTime(90061)))  # '1d 1:01:01'

    The hour field is not padded, so it can grow past two digits. Negative spans are rendered as
    ``-`` followed by their magnitude.
    """

    __slots__ = ("_seconds", "_micros", "_show_sub_second")

    def __init__(self, value: TimeValue, show_sub_second: bool | None = None):
        """Snapshot `value` for display.

        Args:
            value (:class:`.TimeValue`): instant or span whose fields are displayed
            show_sub_second (``bool``, optional): whether to append the microseconds. Defaults to
                ``None``, which uses the ``[time] DurationSubSecond`` configuration.
        """
        if not isinstance(value, TimeValue):
            raise TypeError(f"DurationView: expected a time value, got {type(value).__name__}")

        if show_sub_second is None:
            show_sub_second = BehavioralConfig.getConfig().time.DurationSubSecond

        self._seconds = value.seconds
        self._micros = value.micros
        self._show_sub_second = bool(show_sub_second)

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def micros(self) -> int:
        return self._micros

    @property
    def show_sub_second(self) -> bool:
        return self._show_sub_second

    def format(self) -> str:
        """Return the ``[<days>d ]<h>:<mm>:<ss>[.<micros>]`` text of the snapshot."""
        seconds, micros = self._seconds, self._micros
        sign = ""
        if seconds < 0:
            sign = "-"
            # Display is not bounded by the 64-bit seconds field.
            seconds, micros = divmod(-(seconds * MICROS_PER_SECOND + micros), MICROS_PER_SECOND)

        days = ""
        if seconds >= SECONDS_PER_DAY:
            whole_days, seconds = divmod(seconds, SECONDS_PER_DAY)
            days = f"{whole_days}d "

        hours, seconds = divmod(seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(seconds, SECONDS_PER_MINUTE)
        text = f"{sign}{days}{hours}:{minutes:02d}:{seconds:02d}"
        if self._show_sub_second:
            text += f".{micros:06d}"

        return text

    def writeTo(self, sink):
        """Write the formatted span to `sink`, any object with a ``write`` method."""
        sink.write(self.format())
        return sink

    def __str__(self):
        return self.format()

    def __repr__(self):
        """Return a string representation of this :class:`.DurationView`."""
        return (
            f"DurationView(seconds={self._seconds}, micros={self._micros}, "
            f"show_sub_second={self._show_sub_second})"
        )
