"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = "custom_behavior.config"

# 2023-11-14T22:13:20.250000Z
FIXED_CLOCK_SECONDS: int = 1_700_000_000
FIXED_CLOCK_MICROS: int = 250_000


def fixedClock() -> tuple[int, int]:
    """Stand-in wall clock that always reads :data:`.FIXED_CLOCK_SECONDS`."""
    return FIXED_CLOCK_SECONDS, FIXED_CLOCK_MICROS
