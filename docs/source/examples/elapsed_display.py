"""
Timing A Task
=============

Measure and display how long a piece of work takes.

This example demonstrates how :class:`.AbsoluteTime`, :class:`.ElapsedTime` and
:class:`.DurationView` work together.
"""

# %%
# Imports
# -------

# Standard Library Imports
import sys

# Walltime Imports
from walltime.common.logger import PACKAGE_LOGGER_NAME, Logger
from walltime.time.absolute import AbsoluteTime
from walltime.time.duration import DurationView
from walltime.time.elapsed import ElapsedTime

# %%
# Publish Library Logs
# --------------------
#
# walltime reports to the ``walltime`` logger without attaching a handler. Wrapping it in a
# :class:`.Logger` prints its records, including the debug line for each clock read, to stdout.

Logger(PACKAGE_LOGGER_NAME)

# %%
# Take A Start Time
# -----------------
#
# Read the wall clock before starting. A fixed clock is passed here so the output is stable; in
# real code call :meth:`.AbsoluteTime.now` without arguments.

start = AbsoluteTime.now(clock=lambda: (1_700_000_000, 250_000))
print(start)

# %%
# Simulate The Work
# -----------------
#
# Pretend the task took a little over a day, in three equal stages.

stage = ElapsedTime(30_020, 333_333)
stop = start + stage * 3
print(stop)

# %%
# Display The Elapsed Time
# ------------------------
#
# The difference of two instants can be shown directly, or kept as a typed span first.

print(DurationView(stop - start))
elapsed = stop.elapsedSince(start)
elapsed.display(show_sub_second=True).writeTo(sys.stdout)
print()

# %%
# Average Stage Length
# --------------------
#
# Integer division truncates the microseconds.

print((elapsed / 3).display(show_sub_second=True))
