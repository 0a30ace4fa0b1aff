"""Orbital period helpers used when converting orbit sizes to time spans."""

from __future__ import annotations

# Third Party Imports
from numpy import sqrt

# Local Imports
from . import constants as const


def calculateSiderealPeriod(semi_major_axis: float) -> float:
    r"""Calculate the heliocentric sidereal period from Kepler's third law.

    .. math::

        T = 2\pi\sqrt{\frac{a^3}{GM_{\odot}}}

    Args:
        semi_major_axis (``float``): semi-major axis of the orbit, AU.

    Returns:
        ``float``: sidereal period, days.
    """
    axis_m = semi_major_axis * const.AU2KM * const.KM2M
    period = const.TWOPI * sqrt(axis_m**3 / const.GM_SUN)
    return period * const.SEC2DAYS
