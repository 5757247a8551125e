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

"""Schema and instance trees.

A tree is a whole JSON document plus a JSON Pointer to the node currently
under evaluation. Trees never copy the document; moving to a child returns a
new tree sharing the same base node.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ..utils.json_pointer import JsonPointer, join_pointer, resolve_pointer
from ..utils.node_type import NodeType


@dataclass(frozen=True)
class JsonTree:
    """An instance document with a pointer to the current node."""

    base_node: Any
    pointer: JsonPointer = ""
    node: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "node", resolve_pointer(self.base_node, self.pointer))

    @property
    def node_type(self) -> NodeType:
        return NodeType.of(self.node)

    def append(self, token: Any) -> "JsonTree":
        """Return a tree pointing at child *token* of the current node."""
        return replace(self, pointer=join_pointer(self.pointer, token))

    def as_dict(self) -> dict:
        return {"pointer": self.pointer}


@dataclass(frozen=True)
class SchemaTree(JsonTree):
    """A schema document with a pointer to the schema node being evaluated."""

    def has_keyword(self, keyword: str) -> bool:
        # Non-object schemas (e.g. boolean schemas) carry no keywords.
        return isinstance(self.node, Mapping) and keyword in self.node

    def get_keyword(self, keyword: str, default: Any = None) -> Any:
        if not isinstance(self.node, Mapping):
            return default
        return self.node.get(keyword, default)
