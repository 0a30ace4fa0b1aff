"""Global math & astronomical time constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to a single ΔT model remain in :mod:`.deltat`.

References:
    #. :cite:t:`meeus_1998_algorithms`
    #. :cite:t:`press_1992_numerical`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
PI = pi
TWOPI = 2.0 * pi
DAYS2SEC = 24.0 * 3600
SEC2DAYS = 1.0 / DAYS2SEC
DEG2RAD = pi / 180.0
RAD2DEG = 180.0 / pi
HOUR2RAD = pi / 12.0
RAD2HOUR = 12.0 / pi
ARCSEC2RAD = pi / 648000.0
ARCMIN2RAD = pi / 10800.0
TIMESEC2RAD = pi / 43200.0
KM2M = 1000.0

# Astronomical constants
AU2KM = 149597870.691  # Astronomical Unit to kilometer
GM_SUN = 1.32712440018e20  # Heliocentric gravitational constant, (m^3/s^2)

# Time scale constants
JULIAN_CENTURY: float = 36525.0
"""``float``: days in a Julian century."""

JULIAN_YEAR: float = 365.25
"""``float``: days in a Julian year."""

J2000_JD: float = 2451545.0
"""``float``: Julian day of J2000.0, 2000-jan-1.5."""

GREGORIAN_REFORM_JD: int = 2299161
"""``int``: Julian day number of 1582-10-15, the first day of the Gregorian calendar."""

GREGORIAN_REFORM_YEAR: int = 1582
"""``int``: year of the Gregorian calendar reform."""
