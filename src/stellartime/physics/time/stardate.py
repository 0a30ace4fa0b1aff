"""Defines :class:`.JulianDate` & :class:`.CivilDateTime` classes and supporting functions.

The classes defined in this module are used to rigidly differentiate between a continuous
Julian Day count and a broken-down civil calendar date. Julian days are always `float`
objects, so :class:`.JulianDate` subclasses `float`: a developer can still pass a
:class:`.JulianDate` anywhere a `float` is expected, but calling `type` on the variable
reveals what kind of time value it holds.

All conversions use the hybrid Julian/Gregorian calendar with astronomical year numbering.
Dates up to 1582-10-04 are Julian calendar dates, dates from 1582-10-15 are Gregorian, and
year 0 is 1 BCE.

.. code-block:: python

    julian_date = JulianDate.getJulianDate(2000, 1, 1, 12, 0, 0)
    assert julian_date == 2451545.0
    assert julian_date.calendar_date == (2000, 1, 1)
    assert julian_date.time_of_day == (12, 0, 0)

"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

# Third Party Imports
from numpy import floor

# Local Imports
from ...common.logger import stellartimeLogError, stellartimeLogWarning
from .. import constants as const

GREGORIAN_CUTOVER_INDEX: int = 15 + 31 * (10 + 12 * const.GREGORIAN_REFORM_YEAR)
"""``int``: linear index ``day + 31 * (month + 12 * year)`` of 1582-10-15, first day of the Gregorian calendar."""

PRECISION_WARNING_THRESHOLD: float = 1e9
"""``float``: Julian day magnitude past which day fractions lose sub-second precision."""


@dataclass(frozen=True)
class CivilDateTime:
    """Broken-down civil date & time in UTC.

    Components are not validated on construction: out-of-range values are legal input to
    :func:`.dateToJulianDay` and :func:`.normalizeDateTime`.
    """

    year: int
    """``int``: astronomical year, year 0 is 1 BCE."""

    month: int
    """``int``: month of the year, nominally 1-12."""

    day: int
    """``int``: day of the month, nominally 1-31."""

    hour: int = 0
    """``int``: hour of the day, nominally 0-23."""

    minute: int = 0
    """``int``: minute of the hour, nominally 0-59."""

    second: float = 0.0
    """``float``: second of the minute, nominally [0, 60)."""

    def isoformat(self) -> str:
        """Return the ``[-]YYYY-MM-DDTHH:MM:SS`` representation of this date & time.

        The year is zero-padded to four digits and negative years are prefixed with ``-``.
        Non-integral seconds keep their fraction to the microsecond.
        """
        sign = "-" if self.year < 0 else ""
        if float(self.second).is_integer():
            seconds = f"{int(self.second):02d}"
        else:
            seconds = f"{self.second:09.6f}"
        return (
            f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{seconds}"
        )


def _truncatedDivision(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, as opposed to Python's floor division."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def isLeapYear(year: int) -> bool:
    """Determine if `year` is a leap year in the hybrid calendar.

    The Gregorian rule applies to years after 1582, the Julian rule to 1582 and before.
    """
    if year > const.GREGORIAN_REFORM_YEAR:
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return year % 4 == 0


def daysInMonth(month: int, year: int) -> int:
    """Return the number of days in `month` of `year`.

    Month ``0`` aliases December of the previous year and month ``13`` aliases January of
    the next year, so callers can borrow from adjacent years while normalizing.

    Args:
        month (``int``): month of the year, 0-13.
        year (``int``): astronomical year.

    Returns:
        ``int``: days in the month, or 0 if `month` is outside 0-13.
    """
    if month in (0, 1, 3, 5, 7, 8, 10, 12, 13):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if isLeapYear(year) else 28
    return 0


def dateToJulianDay(year, month, day, hour=0, minute=0, second=0.0) -> JulianDate:
    """Convert a civil date & time in UTC to a Julian day.

    This conversion is permissive: out-of-range components are not rejected, they simply
    extend the arithmetic linearly. Use :func:`.normalizeDateTime` first to obtain the
    calendar-correct Julian day of an overflowing date.

    References:
        #. :cite:t:`meeus_1998_algorithms`, Chapter 7
        #. :cite:t:`press_1992_numerical`, Section 1.1

    Args:
        year (``int``): astronomical year
        month (``int``): month of the year
        day (``int``): day of the month
        hour (``int``, optional): hours in the day (UTC)
        minute (``int``, optional): minutes in the hour (UTC)
        second (``float``, optional): seconds in the minute (UTC)

    Returns:
        :class:`.JulianDate`: corresponding Julian day
    """
    day_fraction = hour / 24.0 + minute / 1440.0 + second / const.DAYS2SEC - 0.5
    is_gregorian = day + 31 * (month + 12 * year) >= GREGORIAN_CUTOVER_INDEX

    if month > 2:
        shifted_year, shifted_month = year, month + 1
    else:
        shifted_year, shifted_month = year - 1, month + 13

    if year > 0:
        julian_day = floor(365.25 * (shifted_year + 4716)) + floor(30.6001 * shifted_month) + day - 1524
        if is_gregorian:
            century = floor(shifted_year / 100)
            julian_day += 2 - century + floor(century / 4)

    else:
        # Integer arithmetic, floor division keeps negative years exact
        julian_day = (1461 * shifted_year) // 4 + (306001 * shifted_month) // 10000 + day + 1720995
        if is_gregorian:
            century = shifted_year // 100
            julian_day += 2 - century + century // 4

    return JulianDate(float(julian_day) + day_fraction)


def julianDayToDate(julian_day: float) -> tuple[int, int, int]:
    """Convert a Julian day to a calendar date in the hybrid calendar.

    References:
        :cite:t:`press_1992_numerical`, Section 1.1, converted to integer math

    Args:
        julian_day (``float``): Julian day to convert

    Returns:
        ``tuple``: year, month, & day of the month
    """
    if abs(julian_day) > PRECISION_WARNING_THRESHOLD:
        stellartimeLogWarning(f"Julian day {julian_day} is too large for sub-second precision")

    julian = int(floor(julian_day + 0.5))
    if julian >= const.GREGORIAN_REFORM_JD:
        alpha = (4 * (julian - 1867216) - 1) // 146097
        shifted = julian + 1 + alpha - alpha // 4
    elif julian < 0:
        # Shift by whole Julian centuries so the remaining arithmetic is non-negative
        shifted = julian + 36525 * (1 - _truncatedDivision(julian, 36525))
    else:
        shifted = julian

    tb = shifted + 1524
    tc = (tb * 20 - 2442) // 7305
    td = 365 * tc + tc // 4
    te = ((tb - td) * 10000) // 306001

    day = tb - td - (306001 * te) // 10000
    month = te - 1
    if month > 12:
        month -= 12
    year = tc - 4715
    if month > 2:
        year -= 1
    if julian < 0:
        year -= 100 * (1 - _truncatedDivision(julian, 36525))

    return year, month, day


def julianDayToTime(julian_day: float) -> tuple[int, int, int]:
    """Convert a Julian day to the civil (midnight-based) time of day.

    Julian days start at noon, so the day fraction is shifted by twelve hours.

    Args:
        julian_day (``float``): Julian day to convert

    Returns:
        ``tuple``: hour, minute, & integer second
    """
    fraction = julian_day - floor(julian_day)
    # Offset fixes floating point truncation just below a whole second
    seconds = int(floor(fraction * const.DAYS2SEC + 0.0001))

    return (seconds // 3600 + 12) % 24, (seconds // 60) % 60, seconds % 60


def decimalYear(year: int, month: int, day: int) -> float:
    """Approximate a calendar date as a decimal year.

    This is the approximation used throughout the ΔT literature, where every month is 30.5
    days long. Only a full 31st day advances the year past the start of its month.

    Args:
        year (``int``): astronomical year
        month (``int``): month of the year
        day (``int``): day of the month

    Returns:
        ``float``: decimal year
    """
    return year + ((month - 1) * 30.5 + (day // 31) * 30.5) / 366.0


def julianDayToDecimalYear(julian_day: float) -> float:
    """Convert a Julian day to a decimal year, see :func:`.decimalYear`."""
    return decimalYear(*julianDayToDate(julian_day))


class JulianDate(float):
    """Class representing a Julian date in floating point form.

    This class allows better introspection and conversion to other time formats. No bounds
    are enforced, but very large magnitudes lose precision.
    """

    @classmethod
    def getJulianDate(cls, year, month, day, hour=0, minute=0, second=0.0):
        """From a datetime in UTC [ymdhms], return the :class:`.JulianDate`.

        See Also:
            :func:`.dateToJulianDay` for the permissive conversion rules.

        Args:
            year (int): Calendar year
            month (int): Month of the year
            day (int): Day of the month
            hour (int): Hours in the day (UTC)
            minute (int): Minutes in the hour (UTC)
            second (float): Seconds in the minute (UTC)

        Returns:
            :class:`.JulianDate`: corresponding datetime in Julian date format
        """
        return cls(dateToJulianDay(year, month, day, hour, minute, second))

    @classmethod
    def fromCivil(cls, civil: CivilDateTime):
        """Build a :class:`.JulianDate` from a :class:`.CivilDateTime`."""
        return cls.getJulianDate(
            civil.year,
            civil.month,
            civil.day,
            civil.hour,
            civil.minute,
            civil.second,
        )

    @property
    def calendar_date(self) -> tuple[int, int, int]:
        """``tuple``: year, month, & day of this Julian date."""
        return julianDayToDate(self)

    @property
    def time_of_day(self) -> tuple[int, int, int]:
        """``tuple``: civil hour, minute, & second of this Julian date."""
        return julianDayToTime(self)

    @property
    def civil(self) -> CivilDateTime:
        """:class:`.CivilDateTime`: broken-down date & time of this Julian date."""
        return CivilDateTime(*self.calendar_date, *self.time_of_day)

    def toISO8601(self) -> str:
        """Return the ``[-]YYYY-MM-DDTHH:MM:SS`` representation of this Julian date."""
        return self.civil.isoformat()

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return f"JulianDate({float(self)}, ISO={self.toISO8601()})"

    def __str__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        return self.__repr__()


def datetimeToJulianDate(date_time: datetime) -> JulianDate:
    """Convert a ``datetime`` object to a :class:`.JulianDate`.

    Timezone-aware objects are converted to UTC first; naive objects are assumed to be UTC.
    The fields are interpreted through the hybrid calendar, so dates before 1582-10-15 are
    read as Julian calendar dates.

    Args:
        date_time (datetime): ``datetime`` object to be converted.

    Returns:
        JulianDate: Converted :class:`.JulianDate` object.
    """
    if date_time.tzinfo is not None:
        date_time = date_time.astimezone(timezone.utc)

    return JulianDate.getJulianDate(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second + date_time.microsecond / 1e6,
    )


def julianDateToDatetime(julian_date: float) -> datetime:
    """Convert a :class:`.JulianDate` to a naive UTC ``datetime`` object.

    Args:
        julian_date (JulianDate): Julian date to be converted.

    Raises:
        ValueError: the calendar year is outside the range ``datetime`` supports.

    Returns:
        datetime: Converted ``datetime`` object.
    """
    year, month, day = julianDayToDate(julian_date)
    if not 1 <= year <= 9999:
        msg = f"Julian date {float(julian_date)} is year {year}, outside of datetime range"
        stellartimeLogError(msg)
        raise ValueError(msg)

    shifted = float(julian_date) + 0.5
    fraction = shifted - floor(shifted)
    return datetime(year, month, day) + timedelta(microseconds=round(fraction * const.DAYS2SEC * 1e6))


def currentJulianDate() -> JulianDate:
    """Return the :class:`.JulianDate` of the current system time in UTC."""
    return datetimeToJulianDate(datetime.now(timezone.utc))
