"""Contains all the custom-defined exceptions used in stellartime.

Conversions and ΔT models never raise: malformed strings are reported through a success
flag and uncovered epochs evaluate to zero. These errors only surface at the command line
and configuration boundary.
"""

from __future__ import annotations


class UnknownDeltaTModelError(ValueError):
    """Exception indicating a ΔT model name that doesn't match any :class:`.DeltaTModel`."""


class EpochParseError(ValueError):
    """Exception indicating that an epoch string is neither a valid date string nor a Julian day."""
