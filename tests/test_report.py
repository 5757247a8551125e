"""Tests for processing messages and reports."""

import logging

import pytest

from json_format_validator.exceptions import ProcessingError
from json_format_validator.messages import FormatMessages
from json_format_validator.report.log_level import LogLevel
from json_format_validator.report.message import ProcessingMessage, new_message
from json_format_validator.report.processing_report import ListProcessingReport, LoggingProcessingReport


class TestProcessingMessage:

    def test_fields_keep_insertion_order(self):
        msg = ProcessingMessage(FormatMessages.FORMAT_NOT_SUPPORTED).put("domain", "validation").put("keyword", "format")

        assert msg.as_dict() == {
            "level": "info",
            "message": "format attribute not supported",
            "domain": "validation",
            "keyword": "format",
        }

    def test_reserved_field_names(self):
        with pytest.raises(ValueError):
            ProcessingMessage("x").put("message", "y")

    def test_new_message_shortcut(self):
        assert new_message("hello", attribute="uri") == ProcessingMessage("hello").put("attribute", "uri")

    def test_as_exception_keeps_message(self):
        msg = ProcessingMessage("boom")
        error = msg.as_exception()

        assert isinstance(error, ProcessingError)
        assert error.processing_message is msg


class TestListProcessingReport:

    def test_levels_are_assigned_by_the_report(self):
        report = ListProcessingReport(log_level=LogLevel.DEBUG)
        report.debug(ProcessingMessage("d"))
        report.info(ProcessingMessage("i"))
        report.warn(ProcessingMessage("w"))
        report.error(ProcessingMessage("e"))

        assert [m.log_level for m in report.messages] == [
            LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR,
        ]
        assert [m.text for m in report.warnings] == ["w"]
        assert [m.text for m in report.errors] == ["e"]

    def test_messages_below_log_level_are_dropped(self):
        report = ListProcessingReport(log_level=LogLevel.WARNING)
        report.info(ProcessingMessage("i"))
        report.warn(ProcessingMessage("w"))

        assert [m.text for m in report] == ["w"]

    def test_success_tracks_errors_even_when_dropped(self):
        report = ListProcessingReport(log_level=LogLevel.NONE)
        report.warn(ProcessingMessage("w"))
        assert report.is_success()

        report.error(ProcessingMessage("e"))
        assert not report.is_success()
        assert len(report) == 0

    def test_exception_threshold(self):
        report = ListProcessingReport(exception_threshold=LogLevel.ERROR)
        report.warn(ProcessingMessage("w"))

        with pytest.raises(ProcessingError, match="boom"):
            report.error(ProcessingMessage("boom"))

    def test_merge(self):
        first = ListProcessingReport()
        second = ListProcessingReport()
        first.warn(ProcessingMessage("a"))
        second.error(ProcessingMessage("b"))

        first.merge(second)

        assert [m.text for m in first] == ["a", "b"]
        assert not first.is_success()

    def test_as_dict(self):
        report = ListProcessingReport()
        report.warn(ProcessingMessage("w").put("attribute", "foo"))

        assert report.as_dict() == {
            "success": True,
            "errors": 0,
            "warnings": 1,
            "messages": [{"level": "warning", "message": "w", "attribute": "foo"}],
        }


def test_logging_report_forwards_to_logger(caplog):
    logger = logging.getLogger("test.report")
    report = LoggingProcessingReport(logger)

    with caplog.at_level(logging.DEBUG, logger="test.report"):
        report.warn(ProcessingMessage(FormatMessages.FORMAT_NOT_SUPPORTED).put("attribute", "foo"))

    assert caplog.records[0].levelno == logging.WARNING
    assert "format attribute not supported" in caplog.records[0].getMessage()
    assert "attribute='foo'" in caplog.records[0].getMessage()


def test_log_level_names():
    assert LogLevel.from_name("warn") is LogLevel.WARNING
    assert LogLevel.from_name("Error") is LogLevel.ERROR
    with pytest.raises(ValueError):
        LogLevel.from_name("loud")
