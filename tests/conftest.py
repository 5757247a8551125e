"""Shared fixtures for the test suite."""

import logging
from unittest import mock

import pytest

from json_format_validator.report.processing_report import ListProcessingReport, ProcessingReport
from json_format_validator.utils.logging_utils import PACKAGE_LOGGER_NAME


@pytest.fixture
def report():
    """Mock report recording every interaction."""
    return mock.MagicMock(spec=ProcessingReport)


@pytest.fixture
def list_report():
    return ListProcessingReport()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to captured streams by CLI runs."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
