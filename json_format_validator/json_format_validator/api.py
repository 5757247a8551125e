"""Convenience entry points for validating documents."""

from __future__ import annotations

from typing import Any, Optional

from .format.attribute import FormatAttribute
from .format.library import DRAFTV4, get_format_dictionary
from .library.dictionary import Dictionary
from .processing.format.format_processor import FormatProcessor
from .processing.validation_data import ValidationData
from .processing.validation_processor import ValidationProcessor
from .report.processing_report import ListProcessingReport, ProcessingReport
from .tree.json_tree import JsonTree, SchemaTree


def build_validation_processor(
    dictionary: Optional[Dictionary[FormatAttribute]] = None,
    draft: str = DRAFTV4,
) -> ValidationProcessor:
    """Pipeline checking ``format`` with *dictionary* (default: *draft* formats)."""
    if dictionary is None:
        dictionary = get_format_dictionary(draft)
    return ValidationProcessor(FormatProcessor(dictionary))


def validate_formats(
    schema: Any,
    instance: Any,
    *,
    dictionary: Optional[Dictionary[FormatAttribute]] = None,
    draft: str = DRAFTV4,
    report: Optional[ProcessingReport] = None,
    schema_pointer: str = "",
    instance_pointer: str = "",
) -> ProcessingReport:
    """Check *instance* against the ``format`` of *schema*.

    Returns:
        The report passed in, or a new :class:`ListProcessingReport`.

    Raises:
        SchemaStructureError: If the schema ``format`` is not a string.
    """
    if report is None:
        report = ListProcessingReport()
    data = ValidationData(
        SchemaTree(schema, schema_pointer),
        JsonTree(instance, instance_pointer),
    )
    return build_validation_processor(dictionary, draft).process(report, data)
