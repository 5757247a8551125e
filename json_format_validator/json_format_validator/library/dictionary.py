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

"""Immutable string-keyed dictionaries and their builders.

A :class:`Dictionary` is built once through a :class:`DictionaryBuilder` and
is read-only from then on, so it can be shared between threads without
locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Generic, Iterator, Mapping, Optional, TypeVar

from ..exceptions import DuplicateKeyError, FrozenDictionaryError

T = TypeVar("T")


class Dictionary(Generic[T]):
    """Frozen mapping from names to values."""

    def __init__(self, entries: Mapping[str, T]):
        # Private copy: later changes to *entries* are not visible here.
        self._entries: Mapping[str, T] = MappingProxyType(dict(entries))

    @staticmethod
    def new_builder() -> "DictionaryBuilder[T]":
        return DictionaryBuilder()

    def get(self, name: str) -> Optional[T]:
        """Return the value registered under *name*, or None."""
        return self._entries.get(name)

    def entries(self) -> Mapping[str, T]:
        """Read-only view of all entries."""
        return self._entries

    def thaw(self) -> "DictionaryBuilder[T]":
        """Return a new open builder holding a copy of the entries."""
        builder: DictionaryBuilder[T] = DictionaryBuilder()
        return builder.add_all(self)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary({sorted(self._entries)!r})"


class DictionaryBuilder(Generic[T]):
    """Fluent builder for a :class:`Dictionary`."""

    def __init__(self):
        self._entries: Dict[str, T] = {}
        self._frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise FrozenDictionaryError("Dictionary builder was already frozen")

    def add_entry(self, name: str, value: T) -> "DictionaryBuilder[T]":
        """Register *value* under *name*.

        Raises:
            DuplicateKeyError: If *name* is already registered.
            ValueError: If *name* is empty or *value* is None.
        """
        self._check_open()
        if not name or not isinstance(name, str):
            raise ValueError(f"Dictionary key must be a non-empty string, got: {name!r}")
        if value is None:
            raise ValueError(f"Dictionary value for '{name}' must not be None")
        if name in self._entries:
            raise DuplicateKeyError(f"Duplicate dictionary key '{name}'")
        self._entries[name] = value
        return self

    def add_all(self, dictionary: Dictionary[T]) -> "DictionaryBuilder[T]":
        for name, value in dictionary.entries().items():
            self.add_entry(name, value)
        return self

    def remove_entry(self, name: str) -> "DictionaryBuilder[T]":
        self._check_open()
        self._entries.pop(name, None)
        return self

    def freeze(self) -> Dictionary[T]:
        """Return the frozen dictionary and close this builder."""
        self._check_open()
        self._frozen = True
        return Dictionary(self._entries)
