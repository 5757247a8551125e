import logging

import pytest

from json_format_validator.config import ValidatorConfig
from json_format_validator.exceptions import ProcessingError
from json_format_validator.report.log_level import LogLevel
from json_format_validator.report.message import ProcessingMessage
from json_format_validator.utils.logging_utils import (
    PACKAGE_LOGGER_NAME,
    configure_split_stream_logging,
    level_from_name,
)


def test_defaults_from_empty_environment(monkeypatch):
    for name in ("LOG_LEVEL", "PRINT_LEVEL", "REPORT_LEVEL", "EXCEPTION_LEVEL", "DRAFT", "CACHE_ENABLED", "MAX_CACHE_SIZE"):
        monkeypatch.delenv(f"JSON_FORMAT_VALIDATOR_{name}", raising=False)

    config = ValidatorConfig.from_env()

    assert config == ValidatorConfig()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSON_FORMAT_VALIDATOR_DRAFT", "draftv3")
    monkeypatch.setenv("JSON_FORMAT_VALIDATOR_CACHE_ENABLED", "False")
    monkeypatch.setenv("JSON_FORMAT_VALIDATOR_MAX_CACHE_SIZE", "7")
    monkeypatch.setenv("JSON_FORMAT_VALIDATOR_EXCEPTION_LEVEL", "error")

    config = ValidatorConfig.from_env()

    assert config.draft == "draftv3"
    assert config.cache_enabled is False
    assert config.max_cache_size == 7
    assert config.exception_level == "error"


def test_new_report_uses_thresholds():
    report = ValidatorConfig(report_level="warn", exception_level="error").new_report()

    report.info(ProcessingMessage("dropped"))
    report.warn(ProcessingMessage("kept"))

    assert [m.text for m in report] == ["kept"]
    assert report.log_level is LogLevel.WARNING
    with pytest.raises(ProcessingError):
        report.error(ProcessingMessage("boom"))


def test_split_stream_logging(capsys):
    logger = configure_split_stream_logging(level=logging.DEBUG, stderr_level=logging.WARNING)

    logging.getLogger(f"{PACKAGE_LOGGER_NAME}.test").info("to stdout")
    logger.warning("to stderr")

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "to stdout" not in captured.err
    assert "to stderr" in captured.err
    assert "to stderr" not in captured.out


def test_configure_twice_does_not_duplicate_handlers():
    configure_split_stream_logging()
    logger = configure_split_stream_logging()

    assert len(logger.handlers) == 2


@pytest.mark.parametrize("name,expected", [
    ("debug", logging.DEBUG),
    (" WARNING ", logging.WARNING),
    ("", logging.INFO),
    ("nonsense", logging.INFO),
])
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected
