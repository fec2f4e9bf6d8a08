"""Defines the shared ``(seconds, microseconds)`` representation behind every time value.

Both :class:`.AbsoluteTime` and :class:`.ElapsedTime` store a whole-seconds count and a
microseconds remainder. This module owns that layout: the normalization that carries overflow of
the microseconds field into seconds (and borrows underflow from it), the bounds-checked narrowing
into the signed 64-bit seconds field, and the :class:`.TimeValue` base class implementing
comparison and arithmetic once for both types.

The microseconds field always satisfies ``0 <= micros < 1_000_000``, so negative values carry
their sign in the seconds field:

.. code-block:: python

    normalize(5, 1_250_000)  # (6, 250000)
    normalize(5, -1)  # (4, 999999)
    normalize(0, -1)  # (-1, 999999)
"""

from __future__ import annotations

# Standard Library Imports
import numbers
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import iinfo, int64

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import InvalidArgumentError, TimeOverflowError
from ..common.logger import walltimeLogDebug, walltimeLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


MICROS_PER_SECOND: Final[int] = 1_000_000
MICROS_PER_MILLI: Final[int] = 1_000

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR

SECONDS_MIN: Final[int] = int(iinfo(int64).min)
"""Smallest value the signed 64-bit seconds field holds."""

SECONDS_MAX: Final[int] = int(iinfo(int64).max)
"""Largest value the signed 64-bit seconds field holds."""


def checkInteger(value: Any, name: str) -> int:
    """Return `value` as a plain ``int``, rejecting floats and booleans.

    Raises:
        TypeError: if `value` is not an integral number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")

    return int(value)


def checkedSeconds(seconds: int) -> int:
    """Narrow `seconds` into the signed 64-bit seconds field.

    Raises:
        :class:`.TimeOverflowError`: if `seconds` is outside ``[SECONDS_MIN, SECONDS_MAX]``
    """
    if not SECONDS_MIN <= seconds <= SECONDS_MAX:
        msg = f"Seconds value {seconds} does not fit a signed 64-bit field"
        walltimeLogError(msg)
        raise TimeOverflowError(msg)

    return seconds


def normalize(seconds: int, micros: int) -> tuple[int, int]:
    """Carry or borrow `micros` into `seconds` so the remainder lies in ``[0, 1_000_000)``.

    Args:
        seconds (``int``): whole seconds
        micros (``int``): microseconds, any sign or magnitude

    Returns:
        ``tuple``: bounds-checked seconds and the normalized microseconds remainder
    """
    carry, micros = divmod(micros, MICROS_PER_SECOND)
    return checkedSeconds(seconds + carry), micros


def splitMicros(total_micros: int) -> tuple[int, int]:
    """Split a flattened microsecond count into a normalized ``(seconds, micros)`` pair."""
    return normalize(0, total_micros)


def truncDiv(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero rather than flooring."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def truncMod(numerator: int, denominator: int) -> int:
    """Remainder matching :func:`.truncDiv`; it takes the sign of `numerator`."""
    return numerator - denominator * truncDiv(numerator, denominator)


class TimeValue:
    """Mutable ``(seconds, microseconds)`` value with exact integer arithmetic.

    Instances compare and combine only with instances of the same kind, with plain ``int``
    microsecond offsets, and with whatever :meth:`._coerceOperand` accepts in a subclass.
    Mixing two different kinds of time value raises a ``TypeError`` instead of silently treating
    an instant as a span.

    Compound assignment (``+=``, ``-=``, ``*=``, ``/=``, ``//=``) mutates the receiver, so
    instances are not hashable.
    """

    __slots__ = ("_seconds", "_micros")

    __hash__ = None

    def __init__(self, seconds: int = 0, microseconds: int = 0):
        """Construct a time value from an explicit pair.

        Microseconds outside ``[0, 1_000_000)`` are carried into seconds, unless the
        ``[time] InvalidMicrosPolicy`` configuration is ``raise``.

        Args:
            seconds (``int``): whole seconds
            microseconds (``int``): fractional remainder in microseconds

        Raises:
            :class:`.InvalidArgumentError`: out-of-range `microseconds` under the ``raise`` policy
            :class:`.TimeOverflowError`: `seconds` leaves the signed 64-bit range
        """
        seconds = checkInteger(seconds, "seconds")
        microseconds = checkInteger(microseconds, "microseconds")
        if not 0 <= microseconds < MICROS_PER_SECOND:
            if BehavioralConfig.getConfig().time.InvalidMicrosPolicy == "raise":
                msg = f"{type(self).__name__}: microseconds {microseconds} outside [0, {MICROS_PER_SECOND})"
                walltimeLogError(msg)
                raise InvalidArgumentError(msg)
            walltimeLogDebug(f"{type(self).__name__}: carrying microseconds {microseconds} into seconds")

        self._seconds, self._micros = normalize(seconds, microseconds)

    @classmethod
    def fromMicros(cls, micros: int):
        """Construct a time value from a non-negative count of microseconds.

        Raises:
            :class:`.InvalidArgumentError`: if `micros` is negative
        """
        micros = checkInteger(micros, "micros")
        if micros < 0:
            msg = f"{cls.__name__}: microsecond count must be non-negative, got {micros}"
            walltimeLogError(msg)
            raise InvalidArgumentError(msg)

        return cls._fromParts(*splitMicros(micros))

    @classmethod
    def _fromParts(cls, seconds: int, micros: int):
        """Build an instance from an already-normalized pair without re-validating it."""
        inst = cls.__new__(cls)
        inst._seconds = seconds
        inst._micros = micros
        return inst

    @property
    def seconds(self) -> int:
        """``int``: whole seconds."""
        return self._seconds

    @property
    def millis(self) -> int:
        """``int``: the microseconds remainder in whole milliseconds, truncated."""
        return self._micros // MICROS_PER_MILLI

    @property
    def micros(self) -> int:
        """``int``: the microseconds remainder, in ``[0, 1_000_000)``."""
        return self._micros

    @property
    def total_micros(self) -> int:
        """``int``: ``seconds * 1_000_000 + micros``, the scalar used for comparison."""
        return self._seconds * MICROS_PER_SECOND + self._micros

    def copy(self):
        """Return an independent value holding the same fields."""
        return self._fromParts(self._seconds, self._micros)

    def _assign(self, other: TimeValue):
        self._seconds = other._seconds
        self._micros = other._micros
        return self

    def _checkKind(self, other: Any, operation: str) -> bool:
        """Return whether `other` is the same kind of time value as this one.

        Raises:
            TypeError: if `other` is a time value of a different kind
        """
        if isinstance(other, type(self)):
            return True

        if isinstance(other, TimeValue):
            raise TypeError(
                f"{type(self).__name__}: Cannot {operation} {type(self).__name__}/{type(other).__name__} objects, "
                "use conversion methods.",
            )

        return False

    def _coerceOperand(self, other: Any, operation: str) -> TimeValue | None:
        """Return `other` as a time value usable in additive arithmetic, or ``None``.

        Plain integers are raw, non-negative microsecond offsets.
        """
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return type(self).fromMicros(other)

        if self._checkKind(other, operation):
            return other

        return None

    def _combine(self, operand: TimeValue, sign: int):
        return self._fromParts(
            *normalize(
                self._seconds + sign * operand._seconds,
                self._micros + sign * operand._micros,
            ),
        )

    def add(self, other):
        """Return the sum of this value and `other`, carrying microseconds into seconds.

        Args:
            other: a compatible time value, or a non-negative ``int`` count of microseconds

        Raises:
            TypeError: `other` is not a compatible operand
            :class:`.InvalidArgumentError`: `other` is a negative ``int``
        """
        result = self.__add__(other)
        if result is NotImplemented:
            raise TypeError(f"{type(self).__name__}: cannot add {type(other).__name__}")

        return result

    def subtract(self, other):
        """Return this value minus `other`, borrowing microseconds from seconds.

        Args:
            other: a compatible time value, or a non-negative ``int`` count of microseconds

        Raises:
            TypeError: `other` is not a compatible operand
            :class:`.InvalidArgumentError`: `other` is a negative ``int``
        """
        result = self.__sub__(other)
        if result is NotImplemented:
            raise TypeError(f"{type(self).__name__}: cannot subtract {type(other).__name__}")

        return result

    def scaleBy(self, multiplier: int):
        """Return this value multiplied by an integer.

        The microseconds field is multiplied first. Only a product strictly greater than one
        second is split into carried seconds and a remainder; the result is then normalized, so a
        product of exactly one second still ends up in the seconds field.

        Raises:
            TypeError: if `multiplier` is not an integer
        """
        multiplier = checkInteger(multiplier, "multiplier")
        carry = 0
        micros = self._micros * multiplier
        if micros > MICROS_PER_SECOND:
            carry, micros = divmod(micros, MICROS_PER_SECOND)

        return self._fromParts(*normalize(self._seconds * multiplier + carry, micros))

    def divideBy(self, denominator: int):
        """Return this value divided by an integer, truncating toward zero.

        When the seconds field is at least `denominator`, seconds are divided on their own and
        only their remainder is folded into the microseconds before dividing those. Otherwise the
        whole value is flattened to microseconds and divided, leaving zero seconds before
        normalization.

        Raises:
            TypeError: if `denominator` is not an integer
            :class:`.InvalidArgumentError`: if `denominator` is zero
        """
        denominator = checkInteger(denominator, "denominator")
        if denominator == 0:
            msg = f"{type(self).__name__}: cannot divide by a zero denominator"
            walltimeLogError(msg)
            raise InvalidArgumentError(msg)

        if self._seconds >= denominator:
            seconds = truncDiv(self._seconds, denominator)
            remainder = truncMod(self._seconds, denominator)
            micros = truncDiv(remainder * MICROS_PER_SECOND + self._micros, denominator)
        else:
            seconds = 0
            micros = truncDiv(self._seconds * MICROS_PER_SECOND + self._micros, denominator)

        return self._fromParts(*normalize(seconds, micros))

    def writeTo(self, sink):
        """Write the canonical text of this value to `sink`, any object with a ``write`` method."""
        sink.write(str(self))
        return sink

    def __eq__(self, other):
        """Exact equality of total microseconds."""
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros == other.total_micros

    def __ne__(self, other):
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros != other.total_micros

    def __lt__(self, other):
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros < other.total_micros

    def __le__(self, other):
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros <= other.total_micros

    def __gt__(self, other):
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros > other.total_micros

    def __ge__(self, other):
        if not self._checkKind(other, "compare"):
            return NotImplemented
        return self.total_micros >= other.total_micros

    def __add__(self, other):
        operand = self._coerceOperand(other, "add")
        if operand is None:
            return NotImplemented
        return self._combine(operand, 1)

    def __sub__(self, other):
        operand = self._coerceOperand(other, "subtract")
        if operand is None:
            return NotImplemented
        return self._combine(operand, -1)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        return self.scaleBy(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        return self.divideBy(other)

    __floordiv__ = __truediv__

    def __iadd__(self, other):
        result = self.__add__(other)
        return result if result is NotImplemented else self._assign(result)

    def __isub__(self, other):
        result = self.__sub__(other)
        return result if result is NotImplemented else self._assign(result)

    def __imul__(self, other):
        result = self.__mul__(other)
        return result if result is NotImplemented else self._assign(result)

    def __itruediv__(self, other):
        result = self.__truediv__(other)
        return result if result is NotImplemented else self._assign(result)

    __ifloordiv__ = __itruediv__

    def __str__(self):
        """Return the canonical ``<seconds>.<micros>s`` text, e.g. ``5.250000s``."""
        return f"{self._seconds}.{self._micros:06d}s"

    def __repr__(self):
        """Return a string representation of this time value."""
        return f"{type(self).__name__}(seconds={self._seconds}, micros={self._micros})"
