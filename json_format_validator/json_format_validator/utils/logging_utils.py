import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "json_format_validator"

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Let through only records strictly below ``threshold``."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


def _stream_handler(stream: TextIO, formatter: logging.Formatter, level: int = logging.NOTSET) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Attach a stdout handler and a stderr handler to a logger.

    Records below ``stderr_level`` are written to stdout, the rest to stderr.
    Handlers from an earlier call are replaced, so calling this twice does not
    duplicate output.
    """
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.setLevel(level)

    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = _stream_handler(sys.stdout, formatter)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    logger.addHandler(stdout_handler)
    logger.addHandler(_stream_handler(sys.stderr, formatter, stderr_level))
    return logger


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"warning"`` into a logging level."""
    if not name:
        return default
    value = getattr(logging, name.strip().upper(), None)
    return value if isinstance(value, int) else default
