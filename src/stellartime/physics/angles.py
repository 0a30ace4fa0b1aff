"""Conversion of angles to and from sexagesimal components & display strings.

Angles are always radians. Right ascension style angles are split into hours, minutes, and
seconds of time, while declination style angles are split into a sign, degrees, arcminutes,
and arcseconds.

Every formatter rounds the seconds field for display, so it carries a rounded-up ``60``
seconds into the minutes, ``60`` minutes into the hours (or degrees), and wraps ``24h00m00s``
back to ``0h00m00s``.
"""

from __future__ import annotations

# Standard Library Imports
import re

# Third Party Imports
from numpy import fmod

# Local Imports
from ..common.logger import stellartimeLogDebug
from . import constants as const
from .maths import wrapAngle2Pi
from .time.conversions import ParseResult

DMS_PATTERN = re.compile(r"([+\-])(\d+)d(\d+)'(\d+)\"")
"""``re.Pattern``: strict ``+DDdMM'SS"`` strings, as written by :func:`.radToDmsStr`."""

SEXAGESIMAL_PATTERN = re.compile(
    r"\s*([+\-])?\s*(\d+)\s*([hHDdº°])\s*(\d+)\s*['Mm]\s*(\d+(?:\.\d+)?)\s*[\"Ss]\s*([NSEWnsew])?\s*",
)
"""``re.Pattern``: degree or hour angle strings like ``+12d30'15.5"N`` or ``5h30m00s``."""

DECIMAL_PATTERN = re.compile(r"\s*([+\-])?\s*(\d+(?:\.\d+)?).?([NSEWnsew])?\s*")
"""``re.Pattern``: decimal degree strings like ``-12.5`` or ``47.3°N``."""


def hmsToRad(hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes, & seconds of time to an angle, radians."""
    return hours * const.HOUR2RAD + minutes * const.HOUR2RAD / 60.0 + seconds * const.TIMESEC2RAD


def dmsToRad(degrees: int, minutes: int, seconds: float) -> float:
    """Convert degrees, arcminutes, & arcseconds to an angle, radians.

    The sign of `degrees` applies to the whole angle.
    """
    magnitude = abs(degrees) * const.DEG2RAD + minutes * const.ARCMIN2RAD + seconds * const.ARCSEC2RAD
    return magnitude if degrees >= 0 else -magnitude


def radToHms(angle: float) -> tuple[int, int, float]:
    """Split an angle into hours, minutes, & seconds of time.

    Args:
        angle (``float``): angle, radians. Wrapped into [0, 2pi) first.

    Returns:
        ``tuple``: hours, minutes, & seconds
    """
    angle = wrapAngle2Pi(angle) * const.RAD2HOUR

    hours = int(angle)
    minutes = int((angle - hours) * 60)
    seconds = (angle - hours) * 3600.0 - 60.0 * minutes
    return hours, minutes, float(seconds)


def radToDms(angle: float) -> tuple[bool, int, int, float]:
    """Split an angle into a sign, degrees, arcminutes, & arcseconds.

    Seconds above 59.9 are rounded up into the arcminutes.

    Args:
        angle (``float``): angle, radians. Reduced into (-2pi, 2pi) first.

    Returns:
        ``tuple``: whether the angle is positive, degrees, arcminutes, & arcseconds
    """
    angle = fmod(angle, const.TWOPI)
    positive = bool(angle >= 0)
    angle = abs(angle) * const.RAD2DEG

    degrees = int(angle)
    minutes = int((angle - degrees) * 60)
    seconds = float((angle - degrees) * 3600 - 60 * minutes)
    if seconds > 59.9:
        seconds = 0.0
        minutes += 1
    if minutes == 60:
        minutes = 0
        degrees += 1

    return positive, degrees, minutes, seconds


def _carry(major: int, minutes: int, seconds: float, precision: int) -> tuple[int, int, float]:
    """Carry seconds that display as ``60`` into the minutes, and ``60`` minutes into `major`."""
    if f"{seconds:.{precision}f}" == f"{60:.{precision}f}":
        seconds = 0.0
        minutes += 1
    if minutes == 60:
        minutes = 0
        major += 1
    return major, minutes, seconds


def _hmsForDisplay(angle: float, precision: int) -> tuple[int, int, float]:
    """Split `angle` into carried & wrapped hours, minutes, & seconds of time."""
    hours, minutes, seconds = radToHms(angle + 0.005 * const.TIMESEC2RAD)
    hours, minutes, seconds = _carry(hours, minutes, seconds, precision)
    if hours == 24 and minutes == 0 and seconds == 0:
        hours = 0
    return hours, minutes, seconds


def _dmsForDisplay(angle: float, precision: int) -> tuple[str, int, int, float]:
    """Split `angle` into a sign character and carried degrees, arcminutes, & arcseconds."""
    rounding = 0.005 * const.ARCSEC2RAD
    positive, degrees, minutes, seconds = radToDms(angle + (-rounding if angle < 0 else rounding))
    degrees, minutes, seconds = _carry(degrees, minutes, seconds, precision)
    return "+" if positive else "-", degrees, minutes, seconds


def radToHmsStr(angle: float, decimal: bool = False) -> str:
    """Format an angle as ``16h29m55s``, or ``16h29m55.3s`` when `decimal` is set."""
    width, precision = (4, 1) if decimal else (2, 0)
    hours, minutes, seconds = _hmsForDisplay(angle, precision)
    return f"{hours}h{minutes:02d}m{seconds:0{width}.{precision}f}s"


def radToHmsStrAdapt(angle: float) -> str:
    """Format an angle as ``h``/``m``/``s`` text, dropping trailing fields that are zero.

    Seconds are printed with a tenth when they have a fractional part of at least a
    hundredth, as a whole number when they are non-zero, and are otherwise omitted along
    with zero minutes.
    """
    hours, minutes, seconds = _hmsForDisplay(angle, 1)

    text = f"{hours}h"
    if abs(seconds * 100 - int(seconds) * 100) >= 1:
        text += f"{minutes}m{seconds:04.1f}s"
    elif int(seconds) != 0:
        text += f"{minutes}m{int(seconds)}s"
    elif minutes != 0:
        text += f"{minutes}m"
    return text


def radToDmsStr(angle: float, decimal: bool = False, use_d: bool = True) -> str:
    """Format an angle as ``+12d05'09"``, or ``+12d05'09.4"`` when `decimal` is set.

    Args:
        angle (``float``): angle, radians
        decimal (``bool``, optional): print tenths of arcseconds.
        use_d (``bool``, optional): use ``d`` as the degree sign rather than ``°``.

    Returns:
        ``str``: formatted angle
    """
    degree_sign = "d" if use_d else "°"
    width, precision = (4, 1) if decimal else (2, 0)
    sign, degrees, minutes, seconds = _dmsForDisplay(angle, precision)
    return f"{sign}{degrees}{degree_sign}{minutes:02d}'{seconds:0{width}.{precision}f}\""


def radToDmsStrAdapt(angle: float, use_d: bool = True) -> str:
    """Format an angle as ``d``/``'``/``"`` text, dropping trailing fields that are zero.

    See Also:
        :func:`.radToHmsStrAdapt` for the rules on which fields are printed.
    """
    degree_sign = "d" if use_d else "°"
    sign, degrees, minutes, seconds = _dmsForDisplay(angle, 2)

    text = f"{sign}{degrees}{degree_sign}"
    if abs(seconds * 100 - int(seconds) * 100) >= 1:
        text += f"{minutes}'{seconds:05.2f}\""
    elif int(seconds) != 0:
        text += f"{minutes}'{int(seconds)}\""
    elif minutes != 0:
        text += f"{minutes}'"
    return text


def hoursToHmsStr(hours: float) -> str:
    """Format a signed number of hours as ``-1h30m0.0s``."""
    sign = "-" if hours < 0 else ""
    hours = abs(hours)

    whole_hours = int(hours)
    minutes = int((hours - whole_hours) * 60)
    seconds = ((hours - whole_hours) * 60 - minutes) * 60
    return f"{sign}{whole_hours}h{minutes}m{seconds:.1f}s"


def dmsStrToRad(text: str) -> ParseResult:
    """Parse a strict ``+DDdMM'SS"`` string, as written by :func:`.radToDmsStr`.

    Returns:
        :class:`.ParseResult`: angle in radians, or ``0.0`` if `text` is malformed
    """
    if (match := DMS_PATTERN.fullmatch(text)) is None:
        return ParseResult(0.0, False)

    sign, degrees, minutes, seconds = match.groups()
    angle = dmsToRad(int(degrees), int(minutes), int(seconds))
    return ParseResult(-angle if sign == "-" else angle, True)


def getDecAngle(text: str) -> ParseResult:
    """Parse a free-form angle string into radians.

    Accepted forms are sexagesimal degrees or hours, like ``+12d30'15.5"``, ``12°30'15"S``,
    or ``5h30m0s``, and decimal degrees, like ``-12.5`` or ``47.3°N``. A ``S`` or ``W``
    cardinal negates the angle, as does a leading ``-``.

    Returns:
        :class:`.ParseResult`: angle in radians, or ``0.0`` if `text` is malformed
    """
    if match := SEXAGESIMAL_PATTERN.fullmatch(text):
        sign, degrees, unit, minutes, seconds, cardinal = match.groups()
        degrees, minutes, seconds = float(degrees), float(minutes), float(seconds)
        if unit.upper() == "H":
            degrees, minutes, seconds = 15 * degrees, 15 * minutes, 15 * seconds
        angle = degrees + minutes / 60 + seconds / 3600

    elif match := DECIMAL_PATTERN.fullmatch(text):
        sign, degrees, cardinal = match.groups()
        angle = float(degrees)

    else:
        stellartimeLogDebug(f"Failed to parse angle string: {text!r}")
        return ParseResult(0.0, False)

    if sign == "-" or (cardinal and cardinal.upper() in ("S", "W")):
        angle = -angle
    return ParseResult(angle * const.DEG2RAD, True)
