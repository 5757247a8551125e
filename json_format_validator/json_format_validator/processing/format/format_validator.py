from __future__ import annotations

from dataclasses import dataclass

from ...format.attribute import FormatAttribute
from ...keyword.validator import KeywordValidator
from ...report.processing_report import ProcessingReport
from ..processor import Processor
from ..validation_data import ValidationData


@dataclass(frozen=True)
class FormatValidator(KeywordValidator):
    """Deferred ``format`` check.

    ``data`` is the validation data that made the attribute applicable; the
    check itself runs on whatever data the pipeline passes to :meth:`validate`.
    """

    attribute: FormatAttribute
    data: ValidationData

    def validate(self, processor: Processor, report: ProcessingReport, data: ValidationData) -> None:
        self.attribute.validate(report, data)
