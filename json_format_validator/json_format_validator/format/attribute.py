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

"""Format attribute interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, FrozenSet

from ..processing.validation_data import ValidationData
from ..report.message import ProcessingMessage
from ..report.processing_report import ProcessingReport
from ..utils.node_type import NodeType


class FormatAttribute(ABC):
    """Checker for one value of the ``format`` keyword."""

    @abstractmethod
    def supported_types(self) -> FrozenSet[NodeType]:
        """Node types this attribute applies to; other types are never checked."""
        pass

    @abstractmethod
    def validate(self, report: ProcessingReport, data: ValidationData) -> None:
        """Check the instance node of *data*, reporting failures to *report*.

        A value that does not conform is reported, never raised.
        """
        pass


class AbstractFormatAttribute(FormatAttribute):
    """Base class for attributes with a fixed name and set of types."""

    def __init__(self, name: str, *types: NodeType):
        if not name:
            raise ValueError("Format attribute name must not be empty")
        self.name = name
        self._types: FrozenSet[NodeType] = frozenset(types)

    def supported_types(self) -> FrozenSet[NodeType]:
        return self._types

    def new_message(self, data: ValidationData, message: Any) -> ProcessingMessage:
        """Message pre-filled with the format keyword context and the value."""
        return (
            ProcessingMessage(message)
            .put("domain", "validation")
            .put("keyword", "format")
            .put("attribute", self.name)
            .put("pointer", data.instance.pointer)
            .put("value", data.instance.node)
        )

    def __repr__(self) -> str:
        types = sorted(str(t) for t in self._types)
        return f"{type(self).__name__}(name={self.name!r}, types={types})"
