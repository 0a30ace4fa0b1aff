from __future__ import annotations

# Standard Library Imports
import logging
import os
from datetime import datetime

# Third Party Imports
import pytest

# stellartime Imports
from stellartime.common.logger import (
    Logger,
    pathSafeTime,
    stellartimeLogCritical,
    stellartimeLogDebug,
    stellartimeLogError,
    stellartimeLogInfo,
    stellartimeLogWarning,
)

# Local Imports
from .. import FIXTURE_DATA_DIR

CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str | int]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStdout(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to `sys.stdout`."""
    logger = Logger("test")
    assert logger.filename == "stdout"
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    line_count = 0
    for item, record_tuple in enumerate(caplog.record_tuples):
        assert record_tuple == tuple(CORRECT_OUTPUT[item])
        line_count += 1

    assert line_count == 5


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLogfile(datafiles: str):
    """Test the logger's output to a logfile."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    file_logger = Logger("logfile-test", path="logs/")

    file_logger.debug("This is a debug message.")
    file_logger.info("This is an info message.")
    file_logger.warning("This is a warning message.")
    file_logger.error("This is an error message.")
    file_logger.critical("This is a critical message.")

    with open(file_logger.filename, encoding="utf-8") as logfile:
        line_count = 0
        for item, line in enumerate(logfile):
            assert line.split(" - ")[1:] == CORRECT_FILE_OUTPUT[item]
            line_count += 1

        assert line_count == 5

    os.chdir(saved_cwd)


def testHelpers(caplog: pytest.LogCaptureFixture):
    """Test the one-liner helpers log to the top-level logger at the right level."""
    caplog.set_level(logging.DEBUG, logger="stellartime")
    stellartimeLogDebug("debug")
    stellartimeLogInfo("info")
    stellartimeLogWarning("warning")
    stellartimeLogError("error")
    stellartimeLogCritical("critical")

    assert caplog.record_tuples == [
        ("stellartime", logging.DEBUG, "debug"),
        ("stellartime", logging.INFO, "info"),
        ("stellartime", logging.WARNING, "warning"),
        ("stellartime", logging.ERROR, "error"),
        ("stellartime", logging.CRITICAL, "critical"),
    ]


def testPathSafeTime():
    """Test that time stamps don't contain characters that are unsafe in file names."""
    stamp = pathSafeTime(datetime(2024, 3, 1, 12, 30, 15, 250))
    assert stamp == "2024-03-01T12-30-15000250"
    assert ":" not in pathSafeTime()
