"""Sample instance values, several per JSON value kind."""

from decimal import Decimal

from json_format_validator.utils.node_type import NodeType

SAMPLES = {
    NodeType.NULL: [None],
    NodeType.BOOLEAN: [True, False],
    NodeType.INTEGER: [0, -1, 42, 2 ** 70],
    NodeType.NUMBER: [1.0, -2.5, 3.14, Decimal("1.5")],
    NodeType.STRING: ["", "hello", "2013-01-01T00:00:00Z"],
    NodeType.ARRAY: [[], [1, "two", None], ("a", "b")],
    NodeType.OBJECT: [{}, {"a": 1}, {"nested": {"b": [1, 2]}}],
}


def samples(types):
    """All sample values whose kind is in *types*."""
    return [value for node_type in types for value in SAMPLES[node_type]]


def samples_except(types):
    """All sample values whose kind is not in *types*."""
    return samples([t for t in NodeType if t not in types])
