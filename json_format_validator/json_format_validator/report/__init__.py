"""Processing reports and messages."""

from .log_level import LogLevel
from .message import ProcessingMessage, new_message
from .processing_report import ListProcessingReport, LoggingProcessingReport, ProcessingReport

__all__ = [
    "LogLevel",
    "ProcessingMessage",
    "new_message",
    "ProcessingReport",
    "ListProcessingReport",
    "LoggingProcessingReport",
]
