"""Defines the :class:`.ElapsedClock` class."""

from __future__ import annotations

# Standard Library Imports
from time import monotonic


class ElapsedClock:
    """Monotonic stopwatch measuring wall time since it was started.

    A clock is owned by whoever creates it, so independent runs keep independent origins.
    """

    def __init__(self):
        """Start the clock."""
        self._start = monotonic()

    def secondsSinceStart(self) -> float:
        """Return the seconds elapsed since the clock started or was last reset."""
        return monotonic() - self._start

    def reset(self):
        """Restart the clock from zero."""
        self._start = monotonic()
