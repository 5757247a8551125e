from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from ..keyword.validator import KeywordValidator
from .validation_data import ValidationData


@dataclass(frozen=True)
class FullValidationContext:
    """Validation data plus the validators collected for it so far.

    Iterating the context yields the pending validators in collection order.
    """

    data: ValidationData
    validators: Tuple[KeywordValidator, ...] = ()

    def with_validator(self, validator: KeywordValidator) -> "FullValidationContext":
        """Return a new context with *validator* appended last."""
        return replace(self, validators=self.validators + (validator,))

    def __iter__(self) -> Iterator[KeywordValidator]:
        return iter(self.validators)

    def __len__(self) -> int:
        return len(self.validators)
