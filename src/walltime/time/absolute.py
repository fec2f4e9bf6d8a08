"""Defines :class:`.AbsoluteTime`, a wall-clock instant with microsecond precision.

An :class:`.AbsoluteTime` counts whole seconds and microseconds since the Unix epoch. Values are
built from an explicit pair, from a raw microsecond count, or from the host wall clock:

.. code-block:: python

    start = AbsoluteTime.now()
    deadline = AbsoluteTime.future(30)
    lunch = AbsoluteTime(1_700_000_000, 250_000)

    str(AbsoluteTime.fromMicros(5_250_000))  # '5.250000s'

Two instants may be added or subtracted as in the classic ``timeval`` arithmetic, which is how
elapsed times are usually formatted:

.. code-block:: python

    print(DurationView(AbsoluteTime.now() - start, show_sub_second=True))

:meth:`.AbsoluteTime.elapsedSince` returns the same difference as an :class:`.ElapsedTime`, which
keeps instants and spans apart in the type system.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.logger import walltimeLogDebug
from . import clock as _clock
from .duration import DurationView
from .elapsed import ElapsedTime
from .micros import TimeValue, checkedSeconds, checkInteger

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any

    # Local Imports
    from .clock import CalendarFields


class AbsoluteTime(TimeValue):
    """Class representing an instant as seconds and microseconds since the epoch."""

    __slots__ = ()

    @classmethod
    def now(cls, clock: Callable[[], tuple[int, int]] | None = None) -> AbsoluteTime:
        """Return the current instant according to `clock`.

        Args:
            clock (``callable``, optional): returns ``(seconds, micros)`` since the epoch. Defaults
                to :func:`.systemClock`.
        """
        seconds, micros = (clock or _clock.systemClock)()
        walltimeLogDebug(f"AbsoluteTime: read clock ({seconds}, {micros})")
        return cls(seconds, micros)

    @classmethod
    def future(cls, seconds: int, clock: Callable[[], tuple[int, int]] | None = None) -> AbsoluteTime:
        """Return the instant `seconds` whole seconds after now.

        A negative count moves into the past, so ``future(-n) == past(n)``.

        Raises:
            TypeError: if `seconds` is not an integer
            TimeOverflowError: if the result leaves the 64-bit seconds range
        """
        inst = cls.now(clock)
        inst._shiftSeconds(checkInteger(seconds, "seconds"))
        return inst

    @classmethod
    def past(cls, seconds: int, clock: Callable[[], tuple[int, int]] | None = None) -> AbsoluteTime:
        """Return the instant `seconds` whole seconds before now."""
        inst = cls.now(clock)
        inst._shiftSeconds(-checkInteger(seconds, "seconds"))
        return inst

    def _shiftSeconds(self, seconds: int):
        # Whole seconds never disturb the microseconds field.
        self._seconds = checkedSeconds(self._seconds + seconds)

    def _coerceOperand(self, other: Any, operation: str) -> TimeValue | None:
        if isinstance(other, ElapsedTime):
            return other
        return super()._coerceOperand(other, operation)

    def elapsedSince(self, earlier: AbsoluteTime) -> ElapsedTime:
        """Return the span from `earlier` to this instant.

        Raises:
            TypeError: if `earlier` is not an :class:`.AbsoluteTime`
        """
        if not isinstance(earlier, AbsoluteTime):
            raise TypeError(f"AbsoluteTime: elapsedSince() expects an AbsoluteTime, got {type(earlier).__name__}")

        difference = self - earlier
        return ElapsedTime._fromParts(difference.seconds, difference.micros)

    def localtime(self, localtime: Callable[[int], CalendarFields] | None = None) -> CalendarFields:
        """Return the local calendar fields of this instant.

        Args:
            localtime (``callable``, optional): maps epoch seconds to :class:`.CalendarFields`.
                Defaults to :func:`.localCalendar`.
        """
        return (localtime or _clock.localCalendar)(self._seconds)

    @property
    def hour(self) -> int:
        return self.localtime().hour

    @property
    def minute(self) -> int:
        return self.localtime().minute

    @property
    def second(self) -> int:
        return self.localtime().second

    @property
    def day(self) -> int:
        """``int``: day of the month, 1-31."""
        return self.localtime().day

    @property
    def month(self) -> int:
        """``int``: month of the year, 0-based."""
        return self.localtime().month

    @property
    def year(self) -> int:
        """``int``: years since 1900."""
        return self.localtime().year

    def display(self, show_sub_second: bool | None = None) -> DurationView:
        """Return a :class:`.DurationView` of this value's fields."""
        return DurationView(self, show_sub_second=show_sub_second)
