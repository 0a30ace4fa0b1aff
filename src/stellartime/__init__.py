"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting an epoch to a Julian day and estimating its ΔT.
"""

from __future__ import annotations

__version__ = "1.0.0"


def _parseEpoch(epoch: str | None, is_julian_day: bool = False):
    """Convert a command line epoch to a :class:`.JulianDate`.

    Raises:
        :exc:`.EpochParseError`: `epoch` is malformed
    """
    # Third Party Imports
    from numpy import isfinite

    # Local Imports
    from .common.exceptions import EpochParseError
    from .common.logger import stellartimeLogError
    from .physics.time.conversions import getJulianDayFromISO8601String
    from .physics.time.stardate import JulianDate, currentJulianDate

    if epoch is None:
        return currentJulianDate()

    if is_julian_day:
        try:
            julian_day = float(epoch)
        except ValueError as err:
            msg = f"Epoch is not a Julian day: {epoch!r}"
            stellartimeLogError(msg)
            raise EpochParseError(msg) from err

        if not isfinite(julian_day):
            msg = f"Epoch is not a finite Julian day: {epoch!r}"
            stellartimeLogError(msg)
            raise EpochParseError(msg)

        return JulianDate(julian_day)

    julian_day, ok = getJulianDayFromISO8601String(epoch)
    if not ok:
        msg = f"Epoch is not a date string like 2000-01-01T12:00:00: {epoch!r}"
        stellartimeLogError(msg)
        raise EpochParseError(msg)

    return JulianDate(julian_day)


def runStellartime(
    epoch: str | None = None,
    is_julian_day: bool = False,
    model: str | None = None,
    ndot: float | None = None,
    config_path: str | None = None,
) -> float:
    """Convert `epoch` to a Julian day and print its date & ΔT.

    Args:
        epoch (``str``, optional): date string like ``2000-01-01T12:00:00``, or a Julian day
            if `is_julian_day` is set. Defaults to ``None``, which uses the current time.
        is_julian_day (``bool``, optional): whether `epoch` is a Julian day number
        model (``str``, optional): ΔT model, see :class:`.DeltaTModel`. Defaults to ``None``,
            which uses the ``deltat.DefaultModel`` config setting.
        ndot (``float``, optional): secular acceleration of the Moon to correct ΔT for.
            Defaults to ``None``, which defers to the ``deltat`` config settings.
        config_path (``str``, optional): path to a behavioral config file. Defaults to ``None``,
            which uses the shared config.

    Returns:
        ``float``: ΔT of `epoch`, seconds
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.logger import Logger
    from .physics.time.clock import ElapsedClock
    from .physics.time.deltat import DeltaTModel, getDeltaT, getDeltaTStandardError

    clock = ElapsedClock()
    config = BehavioralConfig(config_path) if config_path else BehavioralConfig.getConfig()
    logger = Logger("stellartime")

    julian_date = _parseEpoch(epoch, is_julian_day=is_julian_day)
    model = DeltaTModel.fromName(model or config.deltat.DefaultModel)
    delta_t = getDeltaT(julian_date, model=model, ndot=ndot)

    print(f"JD: {float(julian_date):.6f}")
    print(f"Date: {julian_date.toISO8601()}")
    print(f"Delta T ({model.value}): {delta_t:.2f} s")
    if (sigma := getDeltaTStandardError(julian_date)) >= 0:
        print(f"Delta T standard error: {sigma:.2f} s")

    logger.debug(f"Converted epoch {epoch!r} in {clock.secondsSinceStart():.6f} s")
    return delta_t


def main() -> None:
    """Stellartime main entry point.

    This is the function that the :command:`stellartime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser
    from .physics.time.deltat import DeltaTModel

    # Parse command line arguments and pass them to runStellartime
    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    if cli_args.list_models:
        for model in DeltaTModel:
            print(model.value)
        return

    runStellartime(
        cli_args.epoch,
        is_julian_day=cli_args.is_julian_day,
        model=cli_args.model,
        ndot=cli_args.ndot,
        config_path=cli_args.config_path,
    )
