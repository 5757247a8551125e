"""Small helpers shared across the package."""

from .node_type import NodeType, get_node_type
from .json_pointer import JsonPointer, join_pointer, resolve_pointer, split_pointer

__all__ = [
    "NodeType",
    "get_node_type",
    "JsonPointer",
    "join_pointer",
    "resolve_pointer",
    "split_pointer",
]
