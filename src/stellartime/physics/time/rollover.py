"""Normalization of out-of-range civil date & time components."""

from __future__ import annotations

# Local Imports
from ...common.logger import stellartimeLogDebug
from .. import constants as const
from .stardate import CivilDateTime, daysInMonth


def normalizeDateTime(year, month, day, hour, minute, second) -> tuple[bool, CivilDateTime]:
    """Roll over out-of-range date & time components into a valid calendar date.

    Each unit is carried into the next larger one in order: seconds, minutes, hours, days,
    then months. Months outside 0-13 are carried into years before the days. Days borrow the
    length of the month they are carried into, which may be month 0 or 13 of the current year
    (see :func:`.daysInMonth`). Finally, any date that falls in the Gregorian
    calendar gap (1582-10-05 to 1582-10-14) is moved to 1582-10-15.

    Args:
        year (``int``): astronomical year
        month (``int``): month of the year
        day (``int``): day of the month
        hour (``int``): hours in the day
        minute (``int``): minutes in the hour
        second (``float``): seconds in the minute

    Returns:
        ``tuple``: whether any component changed, and the normalized :class:`.CivilDateTime`
    """
    original = (year, month, day, hour, minute, second)

    while second >= 60:
        second -= 60
        minute += 1
    while second < 0:
        second += 60
        minute -= 1

    while minute > 59:
        minute -= 60
        hour += 1
    while minute < 0:
        minute += 60
        hour -= 1

    while hour > 23:
        hour -= 24
        day += 1
    while hour < 0:
        hour += 24
        day -= 1

    # Months past the 0 & 13 aliases have no length to borrow
    while month > 13:
        month -= 12
        year += 1
    while month < 0:
        month += 12
        year -= 1

    while day > daysInMonth(month, year):
        day -= daysInMonth(month, year)
        month += 1
        if month > 12:
            month -= 12
            year += 1
    while day < 1:
        day += daysInMonth(month - 1, year)
        month -= 1
        if month < 1:
            month += 12
            year -= 1

    while month > 12:
        month -= 12
        year += 1
    while month < 1:
        month += 12
        year -= 1

    if year == const.GREGORIAN_REFORM_YEAR and month == 10 and 4 < day < 15:
        day = 15

    changed = (year, month, day, hour, minute, second) != original
    if changed:
        stellartimeLogDebug(f"Normalized {original} to {(year, month, day, hour, minute, second)}")

    return changed, CivilDateTime(year, month, day, hour, minute, second)
