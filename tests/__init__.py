"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = "deltat.config"

# Common julian dates
J2000_JD: float = 2451545.0
"""``float``: Julian day of 2000-01-01T12:00:00."""

GREGORIAN_START_JD: float = 2299161.0
"""``float``: Julian day of 1582-10-15T12:00:00, first day of the Gregorian calendar."""
