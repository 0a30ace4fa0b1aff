from __future__ import annotations

# Standard Library Imports
import logging
import os
from math import inf

# Third Party Imports
import pytest
from numpy import isclose

# stellartime Imports
from stellartime.common.behavioral_config import BehavioralConfig
from stellartime.common.exceptions import UnknownDeltaTModelError
from stellartime.physics.time.deltat import (
    CHAPRONT_FRANCOU_SEGMENTS,
    MEEUS_DELTA_T_TABLE,
    MEEUS_SIMONS_SEGMENTS,
    DeltaTModel,
    EpochSegment,
    evaluateDeltaT,
    getDeltaT,
    getDeltaTByChaprontFrancou,
    getDeltaTByEspenakMeeus,
    getDeltaTByJPLHorizons,
    getDeltaTByMeeus,
    getDeltaTByMeeusSimons,
    getDeltaTStandardError,
    getMoonSecularAcceleration,
)
from stellartime.physics.time.stardate import dateToJulianDay, decimalYear

# Local Imports
from ... import CUSTOM_CONFIG_FILE, FIXTURE_DATA_DIR, J2000_JD

FIVE_CENTURIES_BEFORE_J2000 = J2000_JD - 5 * 36525


def noon(year, month=1, day=1):
    """Julian day of noon on a calendar date."""
    return dateToJulianDay(year, month, day, 12)


@pytest.mark.parametrize(
    ("model", "julian_day", "expected"),
    [
        # Values at each model's reference epoch, or a whole number of centuries from it
        (DeltaTModel.ESPENAK_MEEUS, J2000_JD, 63.86),
        (DeltaTModel.SCHOCH, 2378496.0, -36.28),
        (DeltaTModel.CLEMENCE, 2415020.0, 8.72),
        (DeltaTModel.IAU, 2415020.0, 24.349),
        (DeltaTModel.ASTRONOMICAL_EPHEMERIS, 2415020.0, 24.349),
        (DeltaTModel.TUCKERMAN_GOLDSTINE, 2415020.0, 4.87),
        (DeltaTModel.MULLER_STEPHENSON, 2415020.0, 66.0),
        (DeltaTModel.STEPHENSON_1978, 2415020.0, 20.0),
        (DeltaTModel.STEPHENSON_1997, 2354755.0, -20.0),
        (DeltaTModel.SCHMADEL_ZECH_1979, 2415020.0, -0.000029),
        (DeltaTModel.MORRISON_STEPHENSON_1982, 2382148.0, -15.0),
        (DeltaTModel.STEPHENSON_MORRISON_1984, noon(1000), 1632.0),
        (DeltaTModel.STEPHENSON_MORRISON_1995, 2385800.0, -20.0),
        (DeltaTModel.STEPHENSON_HOULDEN, noon(1000), 1842.375),
        (DeltaTModel.ESPENAK, J2000_JD, 67.0),
        (DeltaTModel.BORKOWSKI, 2314579.0, 40.0),
        (DeltaTModel.SCHMADEL_ZECH_1988, 2415020.0, -0.000014),
        (DeltaTModel.CHAPRONT_TOUZE, FIVE_CENTURIES_BEFORE_J2000, 192.0),
        (DeltaTModel.CHAPRONT_FRANCOU, FIVE_CENTURIES_BEFORE_J2000, 224.5),
        (DeltaTModel.JPL_HORIZONS, FIVE_CENTURIES_BEFORE_J2000, 275.6),
        (DeltaTModel.MORRISON_STEPHENSON_2004, 2385800.0, -20.0),
        (DeltaTModel.REIJS, 2385800.0, 0.0),
        (DeltaTModel.MEEUS, FIVE_CENTURIES_BEFORE_J2000, 224.5),
        (DeltaTModel.MONTENBRUCK_PFLEGER, noon(1975), 45.3),
        (DeltaTModel.MEEUS_SIMONS, noon(1650), 40.3 + 107.0 * 0.05 + 50.0 * 0.05**2 + 454.0 * 0.05**3 + 1244.0 * 0.05**4),
    ],
)
def testModels(model, julian_day, expected):
    """Test every model against its polynomial evaluated by hand."""
    assert isclose(model.evaluate(julian_day), expected)
    assert isclose(evaluateDeltaT(model, julian_day), expected)
    assert isclose(evaluateDeltaT(model.value, julian_day), expected)


def testModelCount():
    """Test that every model is labelled."""
    assert len(DeltaTModel) == 25
    assert all(isinstance(model.evaluate(J2000_JD), float) for model in DeltaTModel)


def testEspenakMeeus():
    """Test the default model, including the long-term parabola and a decimal year boundary."""
    assert isclose(getDeltaTByEspenakMeeus(noon(-600)), 18720.48)

    # The 31st of December 1985 is decimal year 1986.0, so the 1986-2005 polynomial applies
    assert decimalYear(1985, 12, 31) == 1986.0
    u = -14.0
    late = 63.86 + 0.3345 * u - 0.060374 * u**2 + 0.0017275 * u**3 + 0.000651814 * u**4 + 0.00002373599 * u**5
    assert isclose(getDeltaTByEspenakMeeus(noon(1985, 12, 31)), late)


def testMeeusTable():
    """Test linear interpolation of the biennial table."""
    assert len(MEEUS_DELTA_T_TABLE) == 191
    assert MEEUS_DELTA_T_TABLE[101] == 110
    assert isclose(getDeltaTByMeeus(noon(1620)), 121.0)
    assert isclose(getDeltaTByMeeus(noon(1700)), 7.0)
    assert isclose(getDeltaTByMeeus(noon(1901)), -1.45)


def testMeeusCorrection():
    """Test the linear correction between 2000 and 2100."""
    assert isclose(getDeltaTByMeeus(J2000_JD), 102.0 - 37.0)


def testChaprontFrancouCorrection():
    """Test the linear correction after 2000, which has no upper limit."""
    assert getDeltaTByChaprontFrancou(J2000_JD) == 0.0

    julian_day = noon(2050)
    expected = CHAPRONT_FRANCOU_SEGMENTS[-1].evaluate(julian_day, decimalYear(2050, 1, 1)) + 0.37 * (2050 - 2100)
    assert isclose(getDeltaTByChaprontFrancou(julian_day), expected)


def testUncoveredYears():
    """Test that epochs outside every segment evaluate to zero."""
    assert getDeltaTByJPLHorizons(noon(948)) == 0.0
    assert getDeltaTByJPLHorizons(J2000_JD) == 0.0
    assert DeltaTModel.MONTENBRUCK_PFLEGER.evaluate(noon(1800)) == 0.0
    assert DeltaTModel.STEPHENSON_MORRISON_1984.evaluate(J2000_JD) == 0.0


def testLastMatchingSegmentWins():
    """Test that the twentieth century polynomial overrides the earlier Meeus & Simons pieces."""
    for year in (1920, 1950, 1980):
        julian_day = noon(year)
        expected = MEEUS_SIMONS_SEGMENTS[-1].evaluate(julian_day, decimalYear(year, 1, 1))
        assert isclose(getDeltaTByMeeusSimons(julian_day), expected)


def testEpochSegmentBounds():
    """Test open & closed segment bounds."""
    segment = EpochSegment((1.0,), lower=948, upper=1600, lower_closed=False, upper_closed=True)
    assert not segment.contains(948)
    assert segment.contains(949)
    assert segment.contains(1600)
    assert not segment.contains(1601)

    unbounded = EpochSegment((1.0,))
    assert unbounded.contains(-inf)
    assert not unbounded.contains(inf)


def testStandardError():
    """Test the standard error parabola and its limits."""
    assert isclose(getDeltaTStandardError(noon(1000)), 53.792)
    assert isclose(getDeltaTStandardError(noon(-1000)), 0.8 * 28.2**2)
    assert getDeltaTStandardError(noon(-1001)) == -1.0
    assert getDeltaTStandardError(J2000_JD) == -1.0


def testMoonSecularAcceleration():
    """Test that no correction applies for the lunar theory the models were fit with."""
    assert getMoonSecularAcceleration(J2000_JD, -23.8946) == 0.0
    assert getMoonSecularAcceleration(J2000_JD, 23.8946) == 0.0

    t = (2000.0 - 1955.5) / 100
    assert isclose(getMoonSecularAcceleration(J2000_JD, -26.0), -0.91072 * (-23.8946 + 26.0) * t**2)


@pytest.mark.parametrize(
    ("name", "model"),
    [
        ("EspenakMeeus", DeltaTModel.ESPENAK_MEEUS),
        ("espenakmeeus", DeltaTModel.ESPENAK_MEEUS),
        ("ESPENAK_MEEUS", DeltaTModel.ESPENAK_MEEUS),
        ("jpl_horizons", DeltaTModel.JPL_HORIZONS),
        ("Meeus", DeltaTModel.MEEUS),
        (DeltaTModel.REIJS, DeltaTModel.REIJS),
    ],
)
def testFromName(name, model):
    """Test looking up models by name or value, ignoring case."""
    assert DeltaTModel.fromName(name) is model


def testUnknownModel(caplog: pytest.LogCaptureFixture):
    """Test that unknown model names are logged and raised."""
    caplog.set_level(logging.ERROR, logger="stellartime")
    with pytest.raises(UnknownDeltaTModelError, match="Ptolemy"):
        DeltaTModel.fromName("Ptolemy")
    with pytest.raises(ValueError, match="Ptolemy"):
        evaluateDeltaT("Ptolemy", J2000_JD)
    assert caplog.record_tuples[0][:2] == ("stellartime", logging.ERROR)


def testGetDeltaTDefaults():
    """Test the default model with no secular acceleration correction."""
    assert isclose(getDeltaT(J2000_JD), 63.86)
    assert isclose(getDeltaT(J2000_JD, model="Espenak"), 67.0)
    assert isclose(
        getDeltaT(J2000_JD, ndot=-26.0),
        63.86 + getMoonSecularAcceleration(J2000_JD, -26.0),
    )


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testGetDeltaTConfigured(datafiles: str):
    """Test the model & secular acceleration from a config file."""
    BehavioralConfig(os.path.join(datafiles, CUSTOM_CONFIG_FILE))

    expected = getDeltaTByMeeus(J2000_JD) + getMoonSecularAcceleration(J2000_JD, -26.0)
    assert isclose(getDeltaT(J2000_JD), expected)

    # Explicit arguments override the config
    assert isclose(getDeltaT(J2000_JD, model=DeltaTModel.ESPENAK_MEEUS, ndot=-23.8946), 63.86)
