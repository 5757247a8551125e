import pytest

from json_format_validator.tree.json_tree import JsonTree, SchemaTree
from json_format_validator.utils.node_type import NodeType, get_node_type

from node_samples import SAMPLES


@pytest.mark.parametrize(
    "node_type,value",
    [(t, v) for t, values in SAMPLES.items() for v in values],
    ids=repr,
)
def test_every_sample_maps_to_its_type(node_type, value):
    assert get_node_type(value) is node_type


def test_booleans_are_not_integers():
    assert NodeType.of(True) is NodeType.BOOLEAN
    assert NodeType.of(1) is NodeType.INTEGER


def test_integral_float_is_a_number():
    assert NodeType.of(1.0) is NodeType.NUMBER


@pytest.mark.parametrize("value", [object(), {1, 2}, b"bytes"])
def test_non_json_values_are_rejected(value):
    with pytest.raises(ValueError, match="not a JSON value"):
        NodeType.of(value)


def test_from_name():
    assert NodeType.from_name("integer") is NodeType.INTEGER
    with pytest.raises(ValueError, match="Unknown node type"):
        NodeType.from_name("float")


class TestTrees:

    def test_pointer_resolution(self):
        tree = JsonTree({"a": [10, {"b/c": "x"}]}, "/a/1/b~1c")

        assert tree.node == "x"
        assert tree.node_type is NodeType.STRING

    def test_append_shares_the_document(self):
        document = {"a": [1, 2]}
        child = JsonTree(document).append("a").append(1)

        assert child.pointer == "/a/1"
        assert child.node == 2
        assert child.base_node is document

    def test_missing_pointer_target(self):
        with pytest.raises(KeyError):
            JsonTree({"a": 1}, "/b")

    def test_schema_keywords(self):
        schema = SchemaTree({"format": "uri"})

        assert schema.has_keyword("format")
        assert schema.get_keyword("format") == "uri"
        assert not SchemaTree(False).has_keyword("format")
