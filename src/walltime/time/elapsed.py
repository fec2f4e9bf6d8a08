"""Defines :class:`.ElapsedTime`, a span of time with microsecond precision."""

from __future__ import annotations

# Local Imports
from .duration import DurationView
from .micros import TimeValue


class ElapsedTime(TimeValue):
    """Class representing a span of time in whole seconds and microseconds.

    An :class:`.ElapsedTime` shares its representation and arithmetic with :class:`.AbsoluteTime`
    but has no calendar fields. It combines with other spans and with raw microsecond offsets;
    adding it to an :class:`.AbsoluteTime` must be written with the instant on the left:

    .. code-block:: python

        deadline = AbsoluteTime.now() + ElapsedTime(30)  # works
        ElapsedTime(30) + AbsoluteTime.now()  # raises TypeError
    """

    __slots__ = ()

    def display(self, show_sub_second: bool | None = None) -> DurationView:
        """Return a :class:`.DurationView` of this span."""
        return DurationView(self, show_sub_second=show_sub_second)
