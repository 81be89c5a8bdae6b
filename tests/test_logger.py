import io

import pytest

from poppingpenguin.logger import ConsoleLogger, LogLevel, new_logger


@pytest.mark.parametrize(
    ("verbosity", "expected"),
    [
        (0, LogLevel.ERROR),
        (1, LogLevel.WARNING),
        (2, LogLevel.INFO),
        (3, LogLevel.DEBUG),
        (4, LogLevel.ERROR),
        (-1, LogLevel.ERROR),
    ],
)
def test_new_logger_maps_verbosity(verbosity, expected):
    assert new_logger(verbosity).level == expected


def test_debug_message_is_formatted_with_prefix():
    stream = io.StringIO()
    logger = ConsoleLogger(LogLevel.DEBUG, stream)
    logger.debug("Found %d files to process", 5)
    assert stream.getvalue() == "DEBUG: Found 5 files to process\n"


def test_lower_levels_are_suppressed():
    stream = io.StringIO()
    logger = ConsoleLogger(LogLevel.WARNING, stream)
    logger.debug("hidden")
    logger.info("hidden")
    assert stream.getvalue() == ""


def test_levels_at_or_above_threshold_are_written():
    stream = io.StringIO()
    logger = ConsoleLogger(LogLevel.INFO, stream)
    logger.info("a")
    logger.warning("b")
    logger.error("c")
    assert stream.getvalue().splitlines() == ["INFO: a", "WARNING: b", "ERROR: c"]


def test_error_is_always_written():
    stream = io.StringIO()
    new_logger(0, stream).error("Failed to process %s: %s", "x.png", "boom")
    assert stream.getvalue() == "ERROR: Failed to process x.png: boom\n"


def test_message_without_args_is_not_formatted():
    stream = io.StringIO()
    ConsoleLogger(LogLevel.ERROR, stream).error("100%")
    assert stream.getvalue() == "ERROR: 100%\n"


def test_default_stream_is_stderr(capsys):
    new_logger(1).warning("careful")
    captured = capsys.readouterr()
    assert captured.err == "WARNING: careful\n"
    assert captured.out == ""