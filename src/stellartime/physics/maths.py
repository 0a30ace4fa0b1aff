"""General mathematics functions that provided extended capability to `numpy` and `scipy`.

* `scipy docs <https://docs.scipy.org/doc/scipy/index.html>`_
* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Third Party Imports
import numpy as np
from numpy import arcsin, arctan2, array, cos, fmod, log, ndarray, sin, sqrt, tan
from scipy.linalg import norm

# Local Imports
from . import constants as const


def wrapAngleNegPiPi(angle: float) -> float:
    r"""Force angle into range of :math:`(-\pi, \pi]`."""
    angle = wrapAngle2Pi(angle)
    if angle > const.PI:
        angle -= const.TWOPI
    return angle


def wrapAngle2Pi(angle: float) -> float:
    r"""Force angle into range of :math:`[0, 2\pi)`."""
    # Fmod takes sign of dividend (first arg)
    if (angle := fmod(angle, const.TWOPI)) < 0:
        angle += const.TWOPI
    return angle


def spheToRect(lng: float, lat: float) -> ndarray:
    r"""Convert spherical coordinates to a unit rectangular vector.

    Args:
        lng (``float``): longitude (or right ascension), radians.
        lat (``float``): latitude (or declination), radians.

    Returns:
        ``ndarray``: 3x1 unit vector.
    """
    cos_lat = cos(lat)
    return array([cos(lng) * cos_lat, sin(lng) * cos_lat, sin(lat)])


def rectToSphe(vector: ndarray) -> tuple[float, float]:
    r"""Convert a rectangular vector to spherical longitude & latitude.

    This is the exact inverse of :func:`.spheToRect` for any non-zero vector; the vector is
    normalized first so its length doesn't matter.

    Note:
        A zero-length vector has no direction, and the latitude is returned as ``nan`` rather than
        raising. Callers that can produce degenerate vectors must check with ``numpy.isnan()``.

    Args:
        vector (``ndarray``): 3x1 rectangular vector.

    Returns:
        ``tuple``: longitude in :math:`(-\pi, \pi]` and latitude in :math:`[-\pi/2, \pi/2]`, radians.
    """
    vector = np.asarray(vector, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        lat = arcsin(vector[2] / norm(vector))
    lng = arctan2(vector[1], vector[0])
    return lng, lat


def ctRadec2Ecl(ra: float, dec: float, obliquity: float) -> tuple[float, float]:
    r"""Convert equatorial coordinates to ecliptic coordinates.

    References:
        :cite:t:`meeus_1998_algorithms`, Eqn 13.1 & 13.2

    Args:
        ra (``float``): right ascension, radians.
        dec (``float``): declination, radians.
        obliquity (``float``): obliquity of the ecliptic, radians.

    Returns:
        ``tuple``: ecliptic longitude & latitude, radians.
    """
    lam = arctan2(sin(ra) * cos(obliquity) + tan(dec) * sin(obliquity), cos(ra))
    beta = arcsin(sin(dec) * cos(obliquity) - cos(dec) * sin(obliquity) * sin(ra))
    return lam, beta


def asinh(value: float) -> float:
    r"""Calculate the inverse hyperbolic sine, :math:`\ln(z + \sqrt{z^2 + 1})`."""
    return log(value + sqrt(value * value + 1))
