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

"""Generic processing stage contract."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Tuple, TypeVar

from ..report.processing_report import ProcessingReport

logger = logging.getLogger(__name__)

IN = TypeVar("IN")
OUT = TypeVar("OUT")


class Processor(ABC, Generic[IN, OUT]):
    """One pipeline stage: ``(report, input) -> output``."""

    @abstractmethod
    def process(self, report: ProcessingReport, input: IN) -> OUT:
        pass

    def __str__(self) -> str:
        return type(self).__name__


class ProcessorChain(Processor):
    """Stages run left to right, each one fed the previous output."""

    def __init__(self, *processors: Processor):
        if not processors:
            raise ValueError("A processor chain needs at least one processor")
        self.processors: Tuple[Processor, ...] = tuple(processors)

    def then(self, processor: Processor) -> "ProcessorChain":
        """Return a new chain with *processor* appended."""
        return ProcessorChain(*self.processors, processor)

    def process(self, report: ProcessingReport, input):
        value = input
        for processor in self.processors:
            logger.debug(f"Running processor {processor}")
            value = processor.process(report, value)
        return value

    def __str__(self) -> str:
        return " -> ".join(str(p) for p in self.processors)
