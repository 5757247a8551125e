from .json_tree import JsonTree, SchemaTree

__all__ = ["JsonTree", "SchemaTree"]
