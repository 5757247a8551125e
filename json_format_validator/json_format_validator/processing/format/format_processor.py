# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Pipeline stage building the validator for the ``format`` keyword."""

import logging

from ...exceptions import SchemaStructureError
from ...format.attribute import FormatAttribute
from ...library.dictionary import Dictionary
from ...messages import FormatMessages
from ...report.message import ProcessingMessage
from ...report.processing_report import ProcessingReport
from ..processor import Processor
from ..validation_context import FullValidationContext
from .format_validator import FormatValidator

logger = logging.getLogger(__name__)

FORMAT_KEYWORD = "format"


class FormatProcessor(Processor):
    """Resolve the schema's ``format`` against a dictionary of attributes.

    For each context the processor appends at most one :class:`FormatValidator`:

    - no ``format`` in the schema: context returned untouched
    - unknown format: one warning, context returned untouched
    - attribute does not support the instance type: context returned untouched
    - otherwise: a validator for the attribute is appended

    Type mismatches are deliberately silent; a format only constrains the
    value kinds it is defined for.
    """

    def __init__(self, dictionary: Dictionary[FormatAttribute]):
        self.attributes = dictionary

    def process(self, report: ProcessingReport, input: FullValidationContext) -> FullValidationContext:
        """Return *input*, possibly with a format validator appended.

        Raises:
            SchemaStructureError: If ``format`` is present but not a string.
        """
        data = input.data
        schema = data.schema

        if not schema.has_keyword(FORMAT_KEYWORD):
            return input

        fmt = schema.get_keyword(FORMAT_KEYWORD)
        if not isinstance(fmt, str):
            raise SchemaStructureError(
                f"Keyword '{FORMAT_KEYWORD}' must be a string, got {type(fmt).__name__}: {fmt!r} "
                f"(schema pointer: '{schema.pointer}')"
            )

        attribute = self.attributes.get(fmt)
        if attribute is None:
            logger.debug(f"Format attribute '{fmt}' not found in dictionary")
            report.warn(self._unsupported_message(fmt))
            return input

        types = attribute.supported_types()
        node_type = data.instance.node_type

        if node_type not in types:
            logger.debug(f"Format attribute '{fmt}' does not apply to {node_type} instances")
            return input

        return input.with_validator(FormatValidator(attribute, data))

    @staticmethod
    def _unsupported_message(fmt: str) -> ProcessingMessage:
        return (
            ProcessingMessage(FormatMessages.FORMAT_NOT_SUPPORTED)
            .put("domain", "validation")
            .put("keyword", FORMAT_KEYWORD)
            .put("attribute", fmt)
        )

    def __str__(self) -> str:
        return f"format processor ({len(self.attributes)} attributes)"
