"""Defines the :class:`.Logger` class and one-line logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from .behavioral_config import BehavioralConfig

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by stdout and file handlers."""


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a path-safe time stamp of `dt`, used to build log file names.

    Args:
        dt (``datetime``, optional): time to stamp. Defaults to ``None``, which uses now.

    Returns:
        ``str``: ISO-8601 time stamp without colons or decimal points
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")


class Logger:
    """Extended logger wraps the standard Python logging package.

    It also creates a standard file name and log format for any log files that are saved.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig()
        if not level:
            level = config.logging.Level
        if not path:
            path = config.logging.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = config.logging.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if not self.logger.handlers or allow_multiple_handlers is True:
            if path == "stdout":
                self.filename = "stdout"
                handler = logging.StreamHandler(sys.stdout)

            else:
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                self.filename = join(path, f"{name}_{pathSafeTime()}.log")
                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=config.logging.MaxFileSize,
                    backupCount=config.logging.MaxFileCount,
                )

            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Defer everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _stellartimeLog(message: str, level: int):
    """Log a message to the top-level ``"stellartime"`` log record.

    This provides a simple one-liner that doesn't require pre-initializing a logger object,
    which is what the pure conversion functions use.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger("stellartime").log(msg=message, level=level)


def stellartimeLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _stellartimeLog(message, level=logging.CRITICAL)


def stellartimeLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _stellartimeLog(message, level=logging.ERROR)


def stellartimeLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _stellartimeLog(message, level=logging.WARNING)


def stellartimeLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _stellartimeLog(message, level=logging.INFO)


def stellartimeLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._stellartimeLog`
    """
    _stellartimeLog(message, level=logging.DEBUG)
