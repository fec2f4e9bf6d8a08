"""Contains all the custom-defined exceptions used in walltime."""

from __future__ import annotations


class WalltimeError(Exception):
    """Base exception for errors raised by walltime value types."""


class InvalidArgumentError(WalltimeError, ValueError):
    """Exception indicating an argument is outside the domain of an operation.

    Raised for zero denominators, negative microsecond counts or offsets, and out-of-range
    microseconds when the configured policy refuses to normalize them.
    """


class TimeOverflowError(WalltimeError, OverflowError):
    """Exception indicating a seconds value does not fit the signed 64-bit seconds field."""
