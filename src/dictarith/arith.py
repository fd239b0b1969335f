"""Arithmetic over mappings: ``+`` merges, ``-`` removes keys.

The operator-equivalent functions work on any mapping.  ``ArithDict`` binds
them to ``+``, ``+=``, ``-`` and ``-=`` without touching the built-in dict::

    >>> import re
    >>> h = ArithDict(a=1, b=2)
    >>> h - ["a"]
    {'b': 2}
    >>> h += {"abc": 4}
    >>> h - [re.compile("a")]
    {'b': 2}
    >>> h -= ["b"]
    >>> h
    {'a': 1, 'abc': 4}
"""
from __future__ import annotations

from collections import UserDict
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable

from .filters.resolver import (
    EntryPredicate,
    copy_mapping,
    reject,
    reject_by,
    reject_in_place,
)


def subtract(mapping: Mapping[Any, Any], specs: Iterable[Any] | None) -> Any:
    """Non-destructive removal of every key matched by ``specs``."""
    return reject(mapping, specs)


def subtract_in_place(
    mapping: MutableMapping[Any, Any], specs: Iterable[Any] | None
) -> MutableMapping[Any, Any]:
    """Destructive removal: ``mapping`` keeps only the keys ``specs`` spares."""
    return reject_in_place(mapping, specs)


def union(mapping: Mapping[Any, Any], other: Mapping[Any, Any]) -> Any:
    """Return a copy of ``mapping`` with the entries of ``other`` merged in."""
    result = copy_mapping(mapping)
    result.update(other)
    return result


def union_in_place(
    mapping: MutableMapping[Any, Any], other: Mapping[Any, Any]
) -> MutableMapping[Any, Any]:
    """Merge ``other`` into ``mapping`` and return it."""
    mapping.update(other)
    return mapping


class ArithDict(UserDict):
    """Dict wrapper supporting key-filter subtraction and merge addition.

    The right operand of ``-`` is a filter list: strings, Enum members,
    compiled regexes or filter specs.  A single bare item is accepted too.
    """

    def reject(
        self,
        specs: Iterable[Any] | None = None,
        fallback: EntryPredicate | None = None,
    ) -> "ArithDict":
        return reject(self, specs, fallback)

    def reject_by(self, predicate: EntryPredicate) -> "ArithDict":
        """Plain single-predicate removal: drop entries where predicate(k, v)."""
        return reject_by(self, predicate)

    def reject_in_place(
        self,
        specs: Iterable[Any] | None,
        fallback: EntryPredicate | None = None,
    ) -> "ArithDict":
        reject_in_place(self, specs, fallback)
        return self

    def __sub__(self, specs: Any) -> "ArithDict":
        return subtract(self, specs)

    def __isub__(self, specs: Any) -> "ArithDict":
        subtract_in_place(self, specs)
        return self

    def __add__(self, other: Any) -> "ArithDict":
        if not isinstance(other, Mapping):
            return NotImplemented
        return union(self, other)

    def __iadd__(self, other: Any) -> "ArithDict":
        if not isinstance(other, Mapping):
            return NotImplemented
        union_in_place(self, other)
        return self
