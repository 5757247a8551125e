"""Validation of JSON instances against the ``format`` keyword of JSON Schema."""

__version__ = "0.1.0"

from .api import build_validation_processor, validate_formats
from .exceptions import (
    DocumentLoadError,
    DuplicateKeyError,
    FormatValidatorError,
    FrozenDictionaryError,
    ProcessingError,
    SchemaStructureError,
)
from .format import FormatAttribute, get_format_dictionary
from .library import Dictionary, DictionaryBuilder
from .processing.format import FormatProcessor, FormatValidator
from .report import ListProcessingReport, LogLevel, ProcessingMessage, ProcessingReport
from .utils.node_type import NodeType

__all__ = [
    "__version__",
    "build_validation_processor",
    "validate_formats",
    "DocumentLoadError",
    "DuplicateKeyError",
    "FormatValidatorError",
    "FrozenDictionaryError",
    "ProcessingError",
    "SchemaStructureError",
    "FormatAttribute",
    "get_format_dictionary",
    "Dictionary",
    "DictionaryBuilder",
    "FormatProcessor",
    "FormatValidator",
    "ListProcessingReport",
    "LogLevel",
    "ProcessingMessage",
    "ProcessingReport",
    "NodeType",
]
