"""Estimation of ΔT, the difference between Terrestrial Time and Universal Time (TT - UT).

Every model is an empirical fit published in the literature, valid over a limited span of
years. A model is made of one or more :class:`.EpochSegment` polynomials, each covering a
range of calendar years. Segments of the same model are tested in order and a later matching
segment overrides an earlier one, exactly as the published sequential conditions read. An
epoch outside every segment of a model evaluates to ``0.0``.

References:
    #. :cite:t:`espenak_2006_canon`
    #. :cite:t:`meeus_1998_algorithms`, Chapter 10
    #. :cite:t:`meeus_2000_polynomial`
    #. :cite:t:`montenbruck_2000_astronomy`

.. code-block:: python

    julian_date = JulianDate.getJulianDate(2000, 1, 1, 12, 0, 0)
    evaluateDeltaT(DeltaTModel.ESPENAK_MEEUS, julian_date)  # 63.86 seconds

"""

from __future__ import annotations

# Standard Library Imports
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, unique
from math import inf

# Third Party Imports
from numpy import cos
from numpy.polynomial.polynomial import polyval

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import UnknownDeltaTModelError
from ...common.logger import stellartimeLogError
from .. import constants as const
from .stardate import decimalYear, julianDayToDate

ELP2000_MOON_NDOT: float = -23.8946
"""``float``: secular acceleration of the Moon in ELP2000-82B, arcsec/century^2."""


@unique
class SegmentVariable(str, Enum):
    """Defines the time argument a segment polynomial is evaluated with."""

    JULIAN_DAY: str = "julian_day"
    """``str``: the Julian day itself."""

    DECIMAL_YEAR: str = "decimal_year"
    """``str``: the decimal year, see :func:`.decimalYear`."""


@dataclass(frozen=True)
class EpochSegment:
    r"""Single polynomial piece of a ΔT model.

    The polynomial is evaluated at :math:`u = offset + (x - epoch) / scale`, where :math:`x`
    is the segment's :attr:`variable`.
    """

    coefficients: tuple[float, ...]
    """``tuple``: polynomial coefficients in ascending order of degree, seconds."""

    epoch: float = 0.0
    """``float``: reference epoch subtracted from the time argument."""

    scale: float = 1.0
    """``float``: divisor applied after subtracting the epoch."""

    offset: float = 0.0
    """``float``: constant added to the scaled time argument."""

    variable: SegmentVariable = SegmentVariable.DECIMAL_YEAR
    """:class:`.SegmentVariable`: time argument of the polynomial."""

    lower: float = -inf
    """``float``: lower bound of the years this segment covers."""

    upper: float = inf
    """``float``: upper bound of the years this segment covers."""

    lower_closed: bool = True
    """``bool``: whether :attr:`lower` itself is covered."""

    upper_closed: bool = False
    """``bool``: whether :attr:`upper` itself is covered."""

    def contains(self, year: float) -> bool:
        """Determine if `year` lies within this segment's bounds."""
        above = year >= self.lower if self.lower_closed else year > self.lower
        below = year <= self.upper if self.upper_closed else year < self.upper
        return above and below

    def evaluate(self, julian_day: float, decimal_year: float) -> float:
        """Evaluate this segment's polynomial, without checking its bounds."""
        if self.variable is SegmentVariable.JULIAN_DAY:
            argument = julian_day
        else:
            argument = decimal_year
        return float(polyval(self.offset + (argument - self.epoch) / self.scale, self.coefficients))


def _centuries(coefficients, epoch, **bounds) -> EpochSegment:
    """Build a segment evaluated in Julian centuries of the Julian day since `epoch`."""
    return EpochSegment(
        coefficients,
        epoch=epoch,
        scale=const.JULIAN_CENTURY,
        variable=SegmentVariable.JULIAN_DAY,
        **bounds,
    )


def _evaluateSegments(segments, julian_day: float, bound_by_decimal_year: bool = False) -> float:
    """Evaluate the last segment in `segments` that covers `julian_day`, or ``0.0`` if none do.

    Args:
        segments (``tuple``): :class:`.EpochSegment` objects in declaration order.
        julian_day (``float``): epoch to evaluate at.
        bound_by_decimal_year (``bool``, optional): compare bounds to the decimal year rather
            than the integer calendar year.

    Returns:
        ``float``: ΔT, seconds
    """
    year, month, day = julianDayToDate(julian_day)
    decimal_year = decimalYear(year, month, day)
    bound = decimal_year if bound_by_decimal_year else year

    delta_t = 0.0
    for segment in segments:
        if segment.contains(bound):
            delta_t = segment.evaluate(julian_day, decimal_year)
    return delta_t


# Espenak & Meeus (2006), "Five Millennium Canon of Solar Eclipses"
ESPENAK_MEEUS_SEGMENTS: tuple[EpochSegment, ...] = (
    EpochSegment((-20.0, 0.0, 32.0), epoch=1820, scale=100, upper=-500),
    EpochSegment(
        (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521),
        scale=100,
        lower=-500,
        upper=500,
    ),
    EpochSegment(
        (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073),
        epoch=1000,
        scale=100,
        lower=500,
        upper=1600,
    ),
    EpochSegment((120.0, -0.9808, -0.01532, 1 / 7129), epoch=1600, lower=1600, upper=1700),
    EpochSegment(
        (8.83, 0.1603, -0.0059285, 0.00013336, -1 / 1174000),
        epoch=1700,
        lower=1700,
        upper=1800,
    ),
    EpochSegment(
        (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875),
        epoch=1800,
        lower=1800,
        upper=1860,
    ),
    EpochSegment(
        (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1 / 233174),
        epoch=1860,
        lower=1860,
        upper=1900,
    ),
    EpochSegment(
        (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197),
        epoch=1900,
        lower=1900,
        upper=1920,
    ),
    EpochSegment((21.20, 0.84493, -0.076100, 0.0020936), epoch=1920, lower=1920, upper=1941),
    EpochSegment((29.07, 0.407, -1 / 233, 1 / 2547), epoch=1950, lower=1941, upper=1961),
    EpochSegment((45.45, 1.067, -1 / 260, -1 / 718), epoch=1975, lower=1961, upper=1986),
    EpochSegment(
        (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599),
        epoch=2000,
        lower=1986,
        upper=2005,
    ),
    EpochSegment((62.92, 0.32217, 0.005589), epoch=2000, lower=2005, upper=2050),
    # -20 + 32u^2 - 0.5628 * (2150 - y), expanded in u
    EpochSegment((-205.724, 56.28, 32.0), epoch=1820, scale=100, lower=2050, upper=2150),
    EpochSegment((-20.0, 0.0, 32.0), epoch=1820, scale=100, lower=2150),
)
"""``tuple``: segments of the Espenak & Meeus model, bounded by decimal year."""

SCHOCH_SEGMENTS = (_centuries((-36.28, 0.0, 36.28), 2378496.0),)
CLEMENCE_SEGMENTS = (_centuries((8.72, 26.75, 11.22), 2415020.0),)
IAU_SEGMENTS = (_centuries((24.349, 72.3165, 29.949), 2415020.0),)
ASTRONOMICAL_EPHEMERIS_SEGMENTS = (_centuries((24.349, 72.318, 29.950), 2415020.0),)
TUCKERMAN_GOLDSTINE_SEGMENTS = (_centuries((4.87, 35.06, 36.79), 2415020.0),)
MULLER_STEPHENSON_SEGMENTS = (_centuries((66.0, 120.38, 45.78), 2415020.0),)
STEPHENSON_1978_SEGMENTS = (_centuries((20.0, 114.0, 38.30), 2415020.0),)
STEPHENSON_1997_SEGMENTS = (_centuries((-20.0, 0.0, 35.0), 2354755.0),)
MORRISON_STEPHENSON_1982_SEGMENTS = (_centuries((-15.0, 0.0, 32.50), 2382148.0),)
STEPHENSON_MORRISON_1995_SEGMENTS = (_centuries((-20.0, 0.0, 31.0), 2385800.0),)
ESPENAK_SEGMENTS = (_centuries((67.0, 61.0, 64.3), const.J2000_JD),)
BORKOWSKI_SEGMENTS = (_centuries((40.0, 0.0, 35.0), 2314579.0),)
MORRISON_STEPHENSON_2004_SEGMENTS = (_centuries((-20.0, 0.0, 32.0), 2385800.0),)

SCHMADEL_ZECH_1979_SEGMENTS = (
    _centuries(
        (
            -0.000029, 0.001233, 0.003081, -0.013867, -0.020446, 0.076929, 0.075456,
            -0.200097, -0.159732, 0.247433, 0.185489, -0.117389, -0.089491,
        ),
        2415020.0,
    ),
)  # fmt: skip

SCHMADEL_ZECH_1988_SEGMENTS = (
    _centuries(
        (
            -0.000014, 0.001148, 0.003357, -0.012462, -0.022542, 0.062971, 0.079441,
            -0.146960, -0.149279, 0.161416, 0.145932, -0.067471, -0.058091,
        ),
        2415020.0,
    ),
)  # fmt: skip

STEPHENSON_MORRISON_1984_SEGMENTS = (
    EpochSegment((1360.0, 320.0, 44.3), epoch=1800, scale=100, lower=-391, upper=948, lower_closed=False, upper_closed=True),
    EpochSegment((0.0, 0.0, 25.5), epoch=1800, scale=100, lower=948, upper=1600, lower_closed=False, upper_closed=True),
)  # fmt: skip

STEPHENSON_HOULDEN_SEGMENTS = (
    EpochSegment((1830.0, -405.0, 46.5), epoch=948, scale=100, upper=948, upper_closed=True),
    EpochSegment((0.0, 0.0, 25.5), epoch=1850, scale=100, lower=948, upper=1600, lower_closed=False, upper_closed=True),
)  # fmt: skip

CHAPRONT_TOUZE_SEGMENTS = (
    _centuries((2177.0, -495.0, 42.4), const.J2000_JD, lower=-391, upper=948, lower_closed=False, upper_closed=True),
    _centuries((102.0, 100.0, 23.6), const.J2000_JD, lower=948, upper=1600, lower_closed=False, upper_closed=True),
)  # fmt: skip

CHAPRONT_FRANCOU_SEGMENTS = (
    _centuries((2177.0, -497.0, 44.1), const.J2000_JD, upper=948, upper_closed=True),
    _centuries((102.0, 102.0, 25.3), const.J2000_JD, lower=948, upper=1600, lower_closed=False, upper_closed=True),
    _centuries((102.0, 102.0, 25.3), const.J2000_JD, lower=2000, lower_closed=False),
)  # fmt: skip

JPL_HORIZONS_SEGMENTS = (
    _centuries((0.0, 0.0, 31.0), 2385800.0, lower=-2999, upper=948, lower_closed=False),
    _centuries((50.6, 67.5, 22.5), const.J2000_JD, lower=948, upper=1620, lower_closed=False, upper_closed=True),
)  # fmt: skip

MEEUS_SEGMENTS = (
    _centuries((2177.0, 497.0, 44.1), const.J2000_JD, upper=948),
    _centuries((102.0, 102.0, 25.3), const.J2000_JD, lower=948, upper=1620),
    _centuries((102.0, 102.0, 25.3), const.J2000_JD, lower=2000),
)
"""``tuple``: polynomial segments of the Meeus model, the table covers 1620 to 2000."""

MONTENBRUCK_PFLEGER_SEGMENTS = (
    EpochSegment((10.4, -80.8, 413.9, -572.3), epoch=1825, scale=100, lower=1825, upper=1850),
    EpochSegment((6.6, 46.3, -358.4, 18.8), epoch=1850, scale=100, lower=1850, upper=1875),
    EpochSegment((-3.9, -10.8, -166.2, 867.4), epoch=1875, scale=100, lower=1875, upper=1900),
    EpochSegment((-2.6, 114.1, 327.5, -1467.4), epoch=1900, scale=100, lower=1900, upper=1925),
    EpochSegment((24.2, -6.3, -8.2, 483.4), epoch=1925, scale=100, lower=1925, upper=1950),
    EpochSegment((29.3, 32.5, -3.8, 550.7), epoch=1950, scale=100, lower=1950, upper=1975),
    EpochSegment((45.3, 130.5, -570.5, 1516.7), epoch=1975, scale=100, lower=1975, upper=2000, upper_closed=True),
)  # fmt: skip

MEEUS_SIMONS_SEGMENTS = (
    EpochSegment((40.3, -107.0, 50.0, -454.0, 1244.0), epoch=2000, scale=100, offset=3.45, lower=1620, upper=1690),
    EpochSegment((10.2, 11.3, -1.0, -16.0, 70.0), epoch=2000, scale=100, offset=2.70, lower=1690, upper=1770),
    EpochSegment((14.7, -18.8, -22.0, 173.0, 6.0), epoch=2000, scale=100, offset=2.05, lower=1770, upper=1820),
    EpochSegment((5.7, 12.7, 111.0, -534.0, 1654.0), epoch=2000, scale=100, offset=1.55, lower=1820, upper=1870),
    EpochSegment((-5.8, -14.6, 27.0, 101.0, 8234.0), epoch=2000, scale=100, offset=1.15, lower=1870, upper=1900),
    EpochSegment((21.4, 67.0, 443.0, 19.0, 4441.0), epoch=2000, scale=100, offset=0.80, lower=1900, upper=1940),
    EpochSegment((36.2, 74.0, 189.0, -140.0, -1883.0), epoch=2000, scale=100, offset=0.35, lower=1940, upper=1990),
    # Overrides the two previous segments for the whole twentieth century
    EpochSegment((60.8, 82.0, 188.0, -5034.0), epoch=2000, scale=100, offset=0.05, lower=1900, upper=2000, upper_closed=True),
)  # fmt: skip

MEEUS_DELTA_T_TABLE: tuple[int, ...] = (
    1210, 1120, 1030, 950, 880, 820, 770, 720, 680, 630, 600, 560, 530, 510, 480,
    460, 440, 420, 400, 380, 350, 330, 310, 290, 260, 240, 220, 200, 180, 160,
    140, 120, 110, 100, 90, 80, 70, 70, 70, 70,
    70, 70, 80, 80, 90, 90, 90, 90, 90, 100, 100, 100, 100, 100, 100, 100, 100, 110, 110, 110, 110, 110, 120, 120, 120,
    120, 130, 130, 130, 140, 140, 140, 140, 150, 150, 150, 150, 150, 160, 160, 160, 160, 160, 160, 160, 160, 150, 150, 140, 130,
    131, 125, 122, 120, 120, 120, 120, 120, 120, 119, 116, 110, 102, 92, 82, 71, 62, 56, 54, 53, 54, 56, 59, 62, 65,
    68, 71, 73, 75, 76, 77, 73, 62, 52, 27, 14, -12, -28, -38, -48, -55, -53, -56, -57, -59, -60, -63, -65, -62, -47,
    -28, -1, 26, 53, 77, 104, 133, 160, 182, 202, 211, 224, 235, 238, 243, 240, 239, 239, 237, 240, 243, 253, 262, 273, 282,
    291, 300, 307, 314, 322, 331, 340, 350, 365, 383, 402, 422, 445, 465, 485, 505, 522, 538, 549, 558, 569, 583, 600, 616, 630, 650,
)  # fmt: skip
"""``tuple``: ΔT in tenths of a second, every two years from 1620 to 2000, from :cite:t:`meeus_1998_algorithms`."""

MEEUS_TABLE_START_YEAR: int = 1620
"""``int``: year of the first entry of :data:`.MEEUS_DELTA_T_TABLE`."""


def getDeltaTByEspenakMeeus(julian_day: float) -> float:
    """ΔT by Espenak & Meeus (2006), the default model, valid from -1999 to 3000."""
    return _evaluateSegments(ESPENAK_MEEUS_SEGMENTS, julian_day, bound_by_decimal_year=True)


def getDeltaTBySchoch(julian_day: float) -> float:
    """ΔT by Schoch (1931)."""
    return _evaluateSegments(SCHOCH_SEGMENTS, julian_day)


def getDeltaTByClemence(julian_day: float) -> float:
    """ΔT by Clemence (1948)."""
    return _evaluateSegments(CLEMENCE_SEGMENTS, julian_day)


def getDeltaTByIAU(julian_day: float) -> float:
    """ΔT by the IAU (1952), as adopted from Spencer Jones (1939)."""
    return _evaluateSegments(IAU_SEGMENTS, julian_day)


def getDeltaTByAstronomicalEphemeris(julian_day: float) -> float:
    """ΔT by the Astronomical Ephemeris (1960)."""
    return _evaluateSegments(ASTRONOMICAL_EPHEMERIS_SEGMENTS, julian_day)


def getDeltaTByTuckermanGoldstine(julian_day: float) -> float:
    """ΔT by Tuckerman (1962, 1964) & Goldstine (1973)."""
    return _evaluateSegments(TUCKERMAN_GOLDSTINE_SEGMENTS, julian_day)


def getDeltaTByMullerStephenson(julian_day: float) -> float:
    """ΔT by Muller & Stephenson (1975)."""
    return _evaluateSegments(MULLER_STEPHENSON_SEGMENTS, julian_day)


def getDeltaTByStephenson1978(julian_day: float) -> float:
    """ΔT by Stephenson (1978)."""
    return _evaluateSegments(STEPHENSON_1978_SEGMENTS, julian_day)


def getDeltaTByStephenson1997(julian_day: float) -> float:
    """ΔT by Stephenson (1997)."""
    return _evaluateSegments(STEPHENSON_1997_SEGMENTS, julian_day)


def getDeltaTBySchmadelZech1979(julian_day: float) -> float:
    """ΔT by Schmadel & Zech (1979), valid from 1800 to 1975."""
    return _evaluateSegments(SCHMADEL_ZECH_1979_SEGMENTS, julian_day)


def getDeltaTByMorrisonStephenson1982(julian_day: float) -> float:
    """ΔT by Morrison & Stephenson (1982)."""
    return _evaluateSegments(MORRISON_STEPHENSON_1982_SEGMENTS, julian_day)


def getDeltaTByStephensonMorrison1984(julian_day: float) -> float:
    """ΔT by Stephenson & Morrison (1984), valid from -390 to 1600."""
    return _evaluateSegments(STEPHENSON_MORRISON_1984_SEGMENTS, julian_day)


def getDeltaTByStephensonMorrison1995(julian_day: float) -> float:
    """ΔT by Stephenson & Morrison (1995)."""
    return _evaluateSegments(STEPHENSON_MORRISON_1995_SEGMENTS, julian_day)


def getDeltaTByStephensonHoulden(julian_day: float) -> float:
    """ΔT by Stephenson & Houlden (1986), valid up to 1600."""
    return _evaluateSegments(STEPHENSON_HOULDEN_SEGMENTS, julian_day)


def getDeltaTByEspenak(julian_day: float) -> float:
    """ΔT by Espenak (1987, 1989)."""
    return _evaluateSegments(ESPENAK_SEGMENTS, julian_day)


def getDeltaTByBorkowski(julian_day: float) -> float:
    """ΔT by Borkowski (1988)."""
    return _evaluateSegments(BORKOWSKI_SEGMENTS, julian_day)


def getDeltaTBySchmadelZech1988(julian_day: float) -> float:
    """ΔT by Schmadel & Zech (1988), valid from 1700 to 1988."""
    return _evaluateSegments(SCHMADEL_ZECH_1988_SEGMENTS, julian_day)


def getDeltaTByChaprontTouze(julian_day: float) -> float:
    """ΔT by Chapront-Touzé & Chapront (1991), valid from -390 to 1600."""
    return _evaluateSegments(CHAPRONT_TOUZE_SEGMENTS, julian_day)


def getDeltaTByChaprontFrancou(julian_day: float) -> float:
    """ΔT by Chapront, Chapront-Touzé & Francou (1997).

    After 2000 the model is extrapolated with a linear correction of 0.37 s/yr relative to
    2100, and no upper limit.
    """
    delta_t = _evaluateSegments(CHAPRONT_FRANCOU_SEGMENTS, julian_day)
    year = julianDayToDate(julian_day)[0]
    if year > 2000:
        delta_t += 0.37 * (year - 2100)
    return delta_t


def getDeltaTByJPLHorizons(julian_day: float) -> float:
    """ΔT as used by JPL Horizons, valid from -2999 to 1620.

    Note:
        The published conditions leave the year 948 uncovered, which evaluates to ``0.0``.
    """
    return _evaluateSegments(JPL_HORIZONS_SEGMENTS, julian_day)


def getDeltaTByMorrisonStephenson2004(julian_day: float) -> float:
    """ΔT by Morrison & Stephenson (2004, 2005)."""
    return _evaluateSegments(MORRISON_STEPHENSON_2004_SEGMENTS, julian_day)


def getDeltaTByReijs(julian_day: float) -> float:
    r"""ΔT by Reijs (2006), a parabola with a 1443 year periodic term.

    .. math::

        \Delta T = \frac{365.25}{1000}\left(\frac{1.8\,O^2}{200} +
            \frac{1443 \times 3.76}{2\pi}\left(\cos\frac{2\pi O}{1443} - 1\right)\right)

    where :math:`O` is the offset in Julian years from 1820.0.
    """
    offset_year = (2385800.0 - julian_day) / const.JULIAN_YEAR
    periodic = 1443 * 3.76 / const.TWOPI * (cos(const.TWOPI * offset_year / 1443) - 1)
    return float((1.8 * offset_year**2 / 200 + periodic) * const.JULIAN_YEAR / 1000)


def getDeltaTByMeeus(julian_day: float) -> float:
    """ΔT by Meeus (1998), interpolating :data:`.MEEUS_DELTA_T_TABLE` between 1620 and 2000.

    Between 2000 and 2100 the polynomial carries a linear correction of 0.37 s/yr relative to
    2100.
    """
    year, month, day = julianDayToDate(julian_day)
    if MEEUS_TABLE_START_YEAR <= year < 2000:
        position = (year - MEEUS_TABLE_START_YEAR) // 2
        start = MEEUS_DELTA_T_TABLE[position]
        end = MEEUS_DELTA_T_TABLE[position + 1]
        elapsed = decimalYear(year, month, day) - (2 * position + MEEUS_TABLE_START_YEAR)
        return (start + elapsed * 0.5 * (end - start)) / 10.0

    delta_t = _evaluateSegments(MEEUS_SEGMENTS, julian_day)
    if 2000 <= year < 2100:
        delta_t += 0.37 * (year - 2100)
    return delta_t


def getDeltaTByMontenbruckPfleger(julian_day: float) -> float:
    """ΔT by Montenbruck & Pfleger (2000), valid from 1825 to 2000."""
    return _evaluateSegments(MONTENBRUCK_PFLEGER_SEGMENTS, julian_day)


def getDeltaTByMeeusSimons(julian_day: float) -> float:
    """ΔT by Meeus & Simons (2000), valid from 1620 to 2000."""
    return _evaluateSegments(MEEUS_SIMONS_SEGMENTS, julian_day)


def getMoonSecularAcceleration(julian_day: float, ndot: float) -> float:
    r"""Correction to ΔT for a lunar theory with a different secular acceleration of the Moon.

    Models are fit against a given value of :math:`\dot{n}`; this adapts them to a lunar
    theory that uses `ndot` instead of the ELP2000-82B value.

    References:
        :cite:t:`espenak_2006_canon`

    Args:
        julian_day (``float``): epoch to evaluate at.
        ndot (``float``): secular acceleration of the Moon, arcsec/century^2.

    Returns:
        ``float``: correction to add to ΔT, seconds
    """
    t = (decimalYear(*julianDayToDate(julian_day)) - 1955.5) / 100
    return -0.91072 * (ELP2000_MOON_NDOT + abs(ndot)) * t**2


def getDeltaTStandardError(julian_day: float) -> float:
    r"""Standard error :math:`\sigma = 0.8u^2` of ΔT between -1000 and 1600.

    Returns:
        ``float``: standard error, seconds, or ``-1.0`` outside of the covered years
    """
    year, month, day = julianDayToDate(julian_day)
    if -1000 <= year <= 1600:
        return 0.8 * ((decimalYear(year, month, day) - 1820.0) / 100) ** 2
    return -1.0


@unique
class DeltaTModel(str, Enum):
    """Defines valid labels for ΔT models."""

    ESPENAK_MEEUS: str = "EspenakMeeus"
    """``str``: Espenak & Meeus (2006), the default model."""

    SCHOCH: str = "Schoch"
    """``str``: Schoch (1931)."""

    CLEMENCE: str = "Clemence"
    """``str``: Clemence (1948)."""

    IAU: str = "IAU"
    """``str``: IAU (1952)."""

    ASTRONOMICAL_EPHEMERIS: str = "AstronomicalEphemeris"
    """``str``: Astronomical Ephemeris (1960)."""

    TUCKERMAN_GOLDSTINE: str = "TuckermanGoldstine"
    """``str``: Tuckerman (1962, 1964) & Goldstine (1973)."""

    MULLER_STEPHENSON: str = "MullerStephenson"
    """``str``: Muller & Stephenson (1975)."""

    STEPHENSON_1978: str = "Stephenson1978"
    """``str``: Stephenson (1978)."""

    STEPHENSON_1997: str = "Stephenson1997"
    """``str``: Stephenson (1997)."""

    SCHMADEL_ZECH_1979: str = "SchmadelZech1979"
    """``str``: Schmadel & Zech (1979)."""

    MORRISON_STEPHENSON_1982: str = "MorrisonStephenson1982"
    """``str``: Morrison & Stephenson (1982)."""

    STEPHENSON_MORRISON_1984: str = "StephensonMorrison1984"
    """``str``: Stephenson & Morrison (1984)."""

    STEPHENSON_MORRISON_1995: str = "StephensonMorrison1995"
    """``str``: Stephenson & Morrison (1995)."""

    STEPHENSON_HOULDEN: str = "StephensonHoulden"
    """``str``: Stephenson & Houlden (1986)."""

    ESPENAK: str = "Espenak"
    """``str``: Espenak (1987, 1989)."""

    BORKOWSKI: str = "Borkowski"
    """``str``: Borkowski (1988)."""

    SCHMADEL_ZECH_1988: str = "SchmadelZech1988"
    """``str``: Schmadel & Zech (1988)."""

    CHAPRONT_TOUZE: str = "ChaprontTouze"
    """``str``: Chapront-Touzé & Chapront (1991)."""

    CHAPRONT_FRANCOU: str = "ChaprontFrancou"
    """``str``: Chapront, Chapront-Touzé & Francou (1997)."""

    JPL_HORIZONS: str = "JPLHorizons"
    """``str``: JPL Horizons."""

    MORRISON_STEPHENSON_2004: str = "MorrisonStephenson2004"
    """``str``: Morrison & Stephenson (2004, 2005)."""

    REIJS: str = "Reijs"
    """``str``: Reijs (2006)."""

    MEEUS: str = "Meeus"
    """``str``: Meeus (1998), with the 1620-2000 table."""

    MONTENBRUCK_PFLEGER: str = "MontenbruckPfleger"
    """``str``: Montenbruck & Pfleger (2000)."""

    MEEUS_SIMONS: str = "MeeusSimons"
    """``str``: Meeus & Simons (2000)."""

    @classmethod
    def fromName(cls, name: str) -> DeltaTModel:
        """Look up a model by its member name or its value, ignoring case.

        Raises:
            :exc:`.UnknownDeltaTModelError`: `name` doesn't match any model.
        """
        if isinstance(name, cls):
            return name

        for model in cls:
            if name.upper() in (model.name, model.value.upper()):
                return model

        msg = f"Unknown ΔT model: {name!r}"
        stellartimeLogError(msg)
        raise UnknownDeltaTModelError(msg)

    def evaluate(self, julian_day: float) -> float:
        """Evaluate this model's ΔT at `julian_day`, seconds."""
        return _MODEL_FUNCTIONS[self](julian_day)


_MODEL_FUNCTIONS: dict[DeltaTModel, Callable[[float], float]] = {
    DeltaTModel.ESPENAK_MEEUS: getDeltaTByEspenakMeeus,
    DeltaTModel.SCHOCH: getDeltaTBySchoch,
    DeltaTModel.CLEMENCE: getDeltaTByClemence,
    DeltaTModel.IAU: getDeltaTByIAU,
    DeltaTModel.ASTRONOMICAL_EPHEMERIS: getDeltaTByAstronomicalEphemeris,
    DeltaTModel.TUCKERMAN_GOLDSTINE: getDeltaTByTuckermanGoldstine,
    DeltaTModel.MULLER_STEPHENSON: getDeltaTByMullerStephenson,
    DeltaTModel.STEPHENSON_1978: getDeltaTByStephenson1978,
    DeltaTModel.STEPHENSON_1997: getDeltaTByStephenson1997,
    DeltaTModel.SCHMADEL_ZECH_1979: getDeltaTBySchmadelZech1979,
    DeltaTModel.MORRISON_STEPHENSON_1982: getDeltaTByMorrisonStephenson1982,
    DeltaTModel.STEPHENSON_MORRISON_1984: getDeltaTByStephensonMorrison1984,
    DeltaTModel.STEPHENSON_MORRISON_1995: getDeltaTByStephensonMorrison1995,
    DeltaTModel.STEPHENSON_HOULDEN: getDeltaTByStephensonHoulden,
    DeltaTModel.ESPENAK: getDeltaTByEspenak,
    DeltaTModel.BORKOWSKI: getDeltaTByBorkowski,
    DeltaTModel.SCHMADEL_ZECH_1988: getDeltaTBySchmadelZech1988,
    DeltaTModel.CHAPRONT_TOUZE: getDeltaTByChaprontTouze,
    DeltaTModel.CHAPRONT_FRANCOU: getDeltaTByChaprontFrancou,
    DeltaTModel.JPL_HORIZONS: getDeltaTByJPLHorizons,
    DeltaTModel.MORRISON_STEPHENSON_2004: getDeltaTByMorrisonStephenson2004,
    DeltaTModel.REIJS: getDeltaTByReijs,
    DeltaTModel.MEEUS: getDeltaTByMeeus,
    DeltaTModel.MONTENBRUCK_PFLEGER: getDeltaTByMontenbruckPfleger,
    DeltaTModel.MEEUS_SIMONS: getDeltaTByMeeusSimons,
}


def evaluateDeltaT(model: DeltaTModel | str, julian_day: float) -> float:
    """Evaluate ΔT with `model` at `julian_day`.

    Args:
        model (:class:`.DeltaTModel` | ``str``): model, or its name, see :meth:`.DeltaTModel.fromName`.
        julian_day (``float``): epoch to evaluate at.

    Returns:
        ``float``: ΔT, seconds, or ``0.0`` outside of the model's years
    """
    return DeltaTModel.fromName(model).evaluate(julian_day)


def getDeltaT(julian_day: float, model: DeltaTModel | str | None = None, ndot: float | None = None) -> float:
    """Evaluate ΔT with the configured defaults.

    Args:
        julian_day (``float``): epoch to evaluate at.
        model (:class:`.DeltaTModel` | ``str``, optional): model to use. Defaults to the
            ``deltat.DefaultModel`` config setting.
        ndot (``float``, optional): secular acceleration of the Moon to correct for. Defaults
            to the ``deltat.MoonNDot`` config setting if ``deltat.ApplySecularAcceleration``
            is set, otherwise no correction is applied.

    Returns:
        ``float``: ΔT, seconds
    """
    config = BehavioralConfig.getConfig()
    if model is None:
        model = config.deltat.DefaultModel
    if ndot is None and config.deltat.ApplySecularAcceleration:
        ndot = config.deltat.MoonNDot

    delta_t = evaluateDeltaT(model, julian_day)
    if ndot is not None:
        delta_t += getMoonSecularAcceleration(julian_day, ndot)
    return delta_t
