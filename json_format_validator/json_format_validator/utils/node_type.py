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

"""JSON value kinds and their classification.

Classification follows the JSON Schema type names. Python ``bool`` is a
subclass of ``int``, so booleans are tested first; floats are always
``number`` even when integral (``1.0``), matching how a parsed JSON document
keeps the distinction between ``1`` and ``1.0``.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any


class NodeType(str, Enum):
    """The seven JSON value kinds."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "NodeType":
        """Return the NodeType whose JSON Schema name is *name*."""
        try:
            return cls(name)
        except ValueError:
            valid = [t.value for t in cls]
            raise ValueError(f"Unknown node type: '{name}'. Valid types: {valid}") from None

    @classmethod
    def of(cls, value: Any) -> "NodeType":
        """Classify a Python JSON value."""
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, (float, Decimal)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        if isinstance(value, Mapping):
            return cls.OBJECT
        raise ValueError(f"Value of type {type(value).__name__} is not a JSON value: {value!r}")


def get_node_type(value: Any) -> NodeType:
    return NodeType.of(value)
