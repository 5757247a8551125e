from __future__ import annotations

from dataclasses import dataclass

from ..tree.json_tree import JsonTree, SchemaTree


@dataclass(frozen=True)
class ValidationData:
    """The schema node being evaluated and the instance node it applies to."""

    schema: SchemaTree
    instance: JsonTree

    def with_schema(self, schema: SchemaTree) -> "ValidationData":
        return ValidationData(schema, self.instance)

    def with_instance(self, instance: JsonTree) -> "ValidationData":
        return ValidationData(self.schema, instance)
