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

"""Pipeline running keyword stages and then their collected validators."""

import logging

from ..report.processing_report import ProcessingReport
from .processor import Processor
from .validation_context import FullValidationContext
from .validation_data import ValidationData

logger = logging.getLogger(__name__)


class ValidationProcessor(Processor):
    """Validate one schema node against one instance node.

    ``builder`` is the stage (or chain of stages) that turns an empty
    :class:`FullValidationContext` into one holding the keyword validators.
    The validators then run in collection order against the same data.
    """

    def __init__(self, builder: Processor):
        self.builder = builder

    def build(self, report: ProcessingReport, data: ValidationData) -> FullValidationContext:
        return self.builder.process(report, FullValidationContext(data))

    def process(self, report: ProcessingReport, input: ValidationData) -> ProcessingReport:
        logger.debug(
            f"Validating instance '{input.instance.pointer}' against schema '{input.schema.pointer}'"
        )
        context = self.build(report, input)
        for validator in context:
            validator.validate(self, report, input)
        return report

    def __str__(self) -> str:
        return f"validation processor [{self.builder}]"
