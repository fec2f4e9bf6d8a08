"""Support code shared by the walltime packages: behaviour config, logging and exceptions."""

from __future__ import annotations

from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return `dt` as an ISO timestamp usable in a file name.

    Colons become dashes and the fractional-second dot is dropped, so ``12:30:05.250000`` is written
    as ``12-30-05250000``. Defaults to the current local time.
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")
