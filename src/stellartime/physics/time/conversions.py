"""Helper functions that convert between Julian days and time strings or time objects."""

from __future__ import annotations

# Standard Library Imports
import datetime
import re
from typing import NamedTuple

# Third Party Imports
from numpy import floor

# Local Imports
from ...common.logger import stellartimeLogDebug
from .. import constants as const
from .stardate import CivilDateTime, JulianDate

ISO8601_PATTERN = re.compile(r"([+\-]?\d+)[:\-](\d\d)[:\-](\d\d)T(\d?\d):(\d\d):(\d\d(?:\.\d*)?)")
"""``re.Pattern``: ``[+-]Y-MM-DDTHH:MM:SS[.sss]`` date strings, ``:`` is allowed as a date separator."""


class ParseResult(NamedTuple):
    """Value parsed from a string, and whether parsing succeeded."""

    value: float
    """``float``: parsed value, ``0.0`` if parsing failed."""

    ok: bool
    """``bool``: whether the string was well formed."""


def julianDayToISO8601String(julian_day: float) -> str:
    """Format a Julian day as a ``[-]YYYY-MM-DDTHH:MM:SS`` string.

    Args:
        julian_day (``float``): Julian day to format

    Returns:
        ``str``: ISO 8601 date string, with a four digit year at least
    """
    return JulianDate(julian_day).toISO8601()


def getDateTimeFromISO8601String(iso_date: str) -> tuple[bool, CivilDateTime | None]:
    """Parse a ``[+-]Y-MM-DDTHH:MM:SS[.sss]`` date string.

    The components are not range checked, pass them through :func:`.normalizeDateTime` if
    they need to be.

    Args:
        iso_date (``str``): date string to parse

    Returns:
        ``tuple``: whether `iso_date` was well formed, and the parsed :class:`.CivilDateTime`
    """
    if (match := ISO8601_PATTERN.fullmatch(iso_date)) is None:
        stellartimeLogDebug(f"Not an ISO 8601 date string: {iso_date!r}")
        return False, None

    year, month, day, hour, minute = (int(group) for group in match.groups()[:5])
    return True, CivilDateTime(year, month, day, hour, minute, float(match.group(6)))


def getJulianDayFromISO8601String(iso_date: str) -> ParseResult:
    """Parse a ``[+-]Y-MM-DDTHH:MM:SS[.sss]`` date string into a Julian day.

    Args:
        iso_date (``str``): date string to parse

    Returns:
        :class:`.ParseResult`: Julian day, or ``0.0`` if `iso_date` was malformed
    """
    ok, civil = getDateTimeFromISO8601String(iso_date)
    if not ok:
        return ParseResult(0.0, False)

    return ParseResult(JulianDate.fromCivil(civil), True)


def timeToJulianDayFraction(time: datetime.time) -> float:
    """Convert a civil time of day to the fraction of a Julian day, which starts at noon.

    Returns:
        ``float``: day fraction in [-0.5, 0.5)
    """
    seconds = time.hour * 3600 + time.minute * 60 + time.second + time.microsecond / 1e6
    return seconds / const.DAYS2SEC - 0.5


def julianDayFractionToTime(julian_day: float) -> datetime.time:
    """Convert the fraction of a Julian day to the civil time of day, to the minute."""
    shifted = julian_day + 0.5
    hours = (shifted - floor(shifted)) * 24
    minutes = (hours - int(hours)) * 60
    return datetime.time(int(hours), int(minutes))
