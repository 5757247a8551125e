"""Processing stages and the data flowing between them."""

from .processor import Processor, ProcessorChain
from .validation_context import FullValidationContext
from .validation_data import ValidationData

__all__ = [
    "Processor",
    "ProcessorChain",
    "FullValidationContext",
    "ValidationData",
]
