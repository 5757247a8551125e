from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a processing message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4
    # Threshold only: nothing is ever logged at this level.
    NONE = 5

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        key = name.strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: '{name}'. Valid levels: {[l.name for l in cls]}") from None

    def to_logging(self) -> int:
        """Matching standard ``logging`` level."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.NONE: logging.CRITICAL + 10,
}
