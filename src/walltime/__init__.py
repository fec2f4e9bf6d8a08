"""Main Module Documentation.

``walltime`` provides value types for wall-clock instants and elapsed spans with microsecond
precision, plus human-readable formatting of both:

.. code-block:: python

    from walltime.time.absolute import AbsoluteTime
    from walltime.time.duration import DurationView

    start = AbsoluteTime.now()
    ...
    print(DurationView(AbsoluteTime.now() - start, show_sub_second=True))

Behavior is tuned through :class:`.BehavioralConfig`, see :mod:`.behavioral_config`.
"""

from __future__ import annotations

__version__ = "1.0.0"
