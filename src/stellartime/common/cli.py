"""Define the command line interface for the stellartime conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from ..physics.time.deltat import DeltaTModel
from .logger import stellartimeLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        stellartimeLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def modelChecker(name):
    """Checks for valid ΔT model names passed to the CLI parser.

    Args:
        name (``str``): model name given to CLI parser, see :meth:`.DeltaTModel.fromName`.

    Raises:
        ValueError: if the name doesn't match any model

    Returns:
        :class:`.DeltaTModel`: matching model
    """
    return DeltaTModel.fromName(name)


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="stellartime Command Line Interface")
    deltat_group = parser.add_argument_group("Delta T")

    parser.add_argument(
        "epoch",
        metavar="EPOCH",
        nargs="?",
        default=None,
        type=str,
        help="Date string like 2000-01-01T12:00:00, or a Julian day with --jd. DEFAULT: now",
    )

    parser.add_argument(
        "--jd",
        dest="is_julian_day",
        action="store_true",
        default=False,
        help="Read EPOCH as a Julian day number",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavioral config file",
    )

    deltat_group.add_argument(
        "-m",
        "--model",
        dest="model",
        metavar="MODEL",
        default=None,
        type=modelChecker,
        help="Delta T model name. DEFAULT: deltat.DefaultModel config setting",
    )

    deltat_group.add_argument(
        "--ndot",
        dest="ndot",
        metavar="NDOT",
        default=None,
        type=float,
        help="Secular acceleration of the Moon to correct Delta T for, arcsec/cy^2",
    )

    deltat_group.add_argument(
        "--list-models",
        dest="list_models",
        action="store_true",
        default=False,
        help="Print the available Delta T models and exit",
    )

    return parser
