"""Levelled console logging for progress and diagnostic messages."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity threshold; a logger emits messages at or below its level."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


class ConsoleLogger:
    """Writes prefixed, printf-style formatted messages to a text stream."""

    def __init__(self, level: LogLevel = LogLevel.ERROR, stream: TextIO | None = None) -> None:
        self.level = LogLevel(level)
        self.stream = stream

    def _emit(self, threshold: LogLevel, prefix: str, message: str, args: tuple) -> None:
        if self.level < threshold:
            return
        text = message % args if args else message
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(f"{prefix}: {text}\n")

    def debug(self, message: str, *args: object) -> None:
        """Log a debug message."""
        self._emit(LogLevel.DEBUG, "DEBUG", message, args)

    def info(self, message: str, *args: object) -> None:
        """Log an informational message."""
        self._emit(LogLevel.INFO, "INFO", message, args)

    def warning(self, message: str, *args: object) -> None:
        """Log a warning."""
        self._emit(LogLevel.WARNING, "WARNING", message, args)

    def error(self, message: str, *args: object) -> None:
        """Log an error."""
        self._emit(LogLevel.ERROR, "ERROR", message, args)


_VERBOSITY_LEVELS = {
    1: LogLevel.WARNING,
    2: LogLevel.INFO,
    3: LogLevel.DEBUG,
}


def new_logger(verbosity: int = 0, stream: TextIO | None = None) -> ConsoleLogger:
    """Create a logger for a ``-v`` count; unknown counts log errors only."""
    return ConsoleLogger(_VERBOSITY_LEVELS.get(verbosity, LogLevel.ERROR), stream)