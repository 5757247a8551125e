from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..processing.processor import Processor
    from ..processing.validation_data import ValidationData
    from ..report.processing_report import ProcessingReport


class KeywordValidator(ABC):
    """A constructed, not yet executed, check for one schema keyword."""

    @abstractmethod
    def validate(
        self,
        processor: "Processor",
        report: "ProcessingReport",
        data: "ValidationData",
    ) -> None:
        """Check *data* and report failures to *report*.

        *processor* is the pipeline running the validator; keywords with
        subschemas use it to validate children.
        """
        pass
