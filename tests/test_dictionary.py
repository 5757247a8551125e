"""Tests for immutable dictionaries and their builders."""

import pytest

from json_format_validator.exceptions import DuplicateKeyError, FrozenDictionaryError
from json_format_validator.library.dictionary import Dictionary


class TestBuilder:

    def test_add_entry_is_fluent(self):
        builder = Dictionary.new_builder()
        assert builder.add_entry("a", 1) is builder

    def test_duplicate_key_fails_fast(self):
        builder = Dictionary.new_builder().add_entry("a", 1)

        with pytest.raises(DuplicateKeyError, match="'a'"):
            builder.add_entry("a", 2)

    @pytest.mark.parametrize("name", ["", None, 3])
    def test_invalid_keys_are_rejected(self, name):
        with pytest.raises(ValueError):
            Dictionary.new_builder().add_entry(name, 1)

    def test_none_values_are_rejected(self):
        with pytest.raises(ValueError):
            Dictionary.new_builder().add_entry("a", None)

    def test_remove_entry(self):
        dictionary = Dictionary.new_builder().add_entry("a", 1).add_entry("b", 2).remove_entry("a").freeze()

        assert "a" not in dictionary
        assert dictionary.get("b") == 2

    def test_remove_absent_entry_is_a_no_op(self):
        dictionary = Dictionary.new_builder().add_entry("a", 1).remove_entry("zz").freeze()

        assert list(dictionary) == ["a"]

    def test_add_all_respects_duplicates(self):
        base = Dictionary.new_builder().add_entry("a", 1).freeze()

        with pytest.raises(DuplicateKeyError):
            Dictionary.new_builder().add_entry("a", 2).add_all(base)


class TestFreeze:

    def test_lookup(self):
        dictionary = Dictionary.new_builder().add_entry("a", 1).freeze()

        assert dictionary.get("a") == 1
        assert dictionary.get("missing") is None
        assert len(dictionary) == 1

    def test_builder_is_closed_after_freeze(self):
        builder = Dictionary.new_builder().add_entry("a", 1)
        dictionary = builder.freeze()

        with pytest.raises(FrozenDictionaryError):
            builder.add_entry("b", 2)
        with pytest.raises(FrozenDictionaryError):
            builder.remove_entry("a")
        with pytest.raises(FrozenDictionaryError):
            builder.freeze()

        assert dictionary.get("b") is None
        assert dictionary.get("a") == 1

    def test_entries_view_is_read_only(self):
        dictionary = Dictionary.new_builder().add_entry("a", 1).freeze()

        with pytest.raises(TypeError):
            dictionary.entries()["b"] = 2

    def test_thaw_gives_independent_builder(self):
        dictionary = Dictionary.new_builder().add_entry("a", 1).freeze()

        extended = dictionary.thaw().add_entry("b", 2).freeze()

        assert "b" in extended
        assert "b" not in dictionary
        assert extended.get("a") == 1
