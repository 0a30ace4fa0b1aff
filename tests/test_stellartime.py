from __future__ import annotations

# Standard Library Imports
import logging
import os
import sys

# Third Party Imports
import pytest
from numpy import isclose

# stellartime Imports
import stellartime
from stellartime import main, runStellartime
from stellartime.common.exceptions import EpochParseError
from stellartime.physics.time.deltat import DeltaTModel, getDeltaTByMeeus, getMoonSecularAcceleration

# Local Imports
from . import CUSTOM_CONFIG_FILE, FIXTURE_DATA_DIR, J2000_JD


def testVersion():
    """Test the package version."""
    assert stellartime.__version__ == "1.0.0"


def testRunStellartime(capsys: pytest.CaptureFixture):
    """Test converting a date string with the default model."""
    delta_t = runStellartime("2000-01-01T12:00:00")
    assert isclose(delta_t, 63.86)

    lines = capsys.readouterr().out.splitlines()
    assert "JD: 2451545.000000" in lines
    assert "Date: 2000-01-01T12:00:00" in lines
    assert "Delta T (EspenakMeeus): 63.86 s" in lines
    # No standard error is defined after 1600
    assert not any(line.startswith("Delta T standard error") for line in lines)


def testRunStellartimeJulianDay(capsys: pytest.CaptureFixture):
    """Test converting a Julian day with an explicit model, and the standard error."""
    delta_t = runStellartime("2086308.0", is_julian_day=True, model="StephensonMorrison1984")
    assert delta_t > 0

    output = capsys.readouterr().out
    assert "JD: 2086308.000000" in output
    assert "Date: 1000-01-01T12:00:00" in output
    assert "Delta T (StephensonMorrison1984): 1632.00 s" in output
    assert "Delta T standard error: 53.79 s" in output


def testRunStellartimeNow(capsys: pytest.CaptureFixture):
    """Test that the current time is used without an epoch."""
    runStellartime()
    assert "Date: 20" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("epoch", "is_julian_day"),
    [
        ("yesterday", False),
        ("2000-01-01", False),
        ("2000-01-01T12:00:00", True),
        ("nan", True),
        ("inf", True),
        ("-inf", True),
    ],
)
def testBadEpoch(epoch, is_julian_day, caplog: pytest.LogCaptureFixture):
    """Test that malformed and non-finite epochs are logged and raised."""
    caplog.set_level(logging.ERROR, logger="stellartime")
    with pytest.raises(EpochParseError):
        runStellartime(epoch, is_julian_day=is_julian_day)
    assert caplog.record_tuples[-1][:2] == ("stellartime", logging.ERROR)


def testBadModel():
    """Test that unknown model names are raised."""
    with pytest.raises(ValueError, match="Ptolemy"):
        runStellartime("2000-01-01T12:00:00", model="Ptolemy")


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testRunStellartimeConfig(datafiles: str, capsys: pytest.CaptureFixture):
    """Test that the config file selects the model & secular acceleration."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)

    delta_t = runStellartime(
        "2000-01-01T12:00:00",
        config_path=os.path.join(datafiles, CUSTOM_CONFIG_FILE),
    )
    os.chdir(saved_cwd)

    expected = getDeltaTByMeeus(J2000_JD) + getMoonSecularAcceleration(J2000_JD, -26.0)
    assert isclose(delta_t, expected)
    assert "Delta T (Meeus)" in capsys.readouterr().out


def testMain(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test the command line entry point."""
    monkeypatch.setattr(sys, "argv", ["stellartime", "--jd", "2451545", "-m", "espenak"])
    main()
    output = capsys.readouterr().out
    assert "Date: 2000-01-01T12:00:00" in output
    assert "Delta T (Espenak): 67.00 s" in output


def testMainListModels(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test listing the available models."""
    monkeypatch.setattr(sys, "argv", ["stellartime", "--list-models"])
    main()
    assert capsys.readouterr().out.splitlines() == [model.value for model in DeltaTModel]


def testMainBadModel(monkeypatch: pytest.MonkeyPatch):
    """Test that the parser exits on unknown model names."""
    monkeypatch.setattr(sys, "argv", ["stellartime", "-m", "Ptolemy"])
    with pytest.raises(SystemExit):
        main()
