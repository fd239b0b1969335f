"""Resolve filter lists into key-removal predicates and apply them.

``reject`` never touches its input; ``reject_in_place`` replaces the
contents of a mutable mapping with the same result.  Callers must hold
exclusive access to the mapping for the duration of an in-place call.
"""
from __future__ import annotations

import copy
import logging
from collections import ChainMap, UserDict
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterable, TypeVar

from .specs import FilterSpec, as_items, as_specs, key_text

logger = logging.getLogger(__name__)

KeyPredicate = Callable[[str], bool]
EntryPredicate = Callable[[Any, Any], bool]

M = TypeVar("M", bound=Mapping)


def resolve(spec: FilterSpec) -> KeyPredicate:
    """Return the key-text predicate that selects entries for removal."""
    return spec.matches


def copy_mapping(mapping: Mapping[Any, Any]) -> Any:
    """Return an independent, mutable shallow copy of ``mapping``.

    dict and UserDict subclasses keep their type; any other mapping (a
    ChainMap, a read-only proxy, ...) is flattened into a plain dict.
    """
    if isinstance(mapping, (dict, UserDict)):
        return copy.copy(mapping)
    return dict(mapping)


def _delete_matching(
    result: MutableMapping[Any, Any], predicate: KeyPredicate
) -> int:
    doomed = [k for k in result if predicate(key_text(k))]
    for k in doomed:
        del result[k]
    return len(doomed)


def reject_by(mapping: M, predicate: EntryPredicate) -> M:
    """Return a copy of ``mapping`` without entries where predicate(key, value) is true."""
    result = copy_mapping(mapping)
    doomed = [k for k, v in result.items() if predicate(k, v)]
    for k in doomed:
        del result[k]
    return result


def reject(
    mapping: M,
    specs: Iterable[Any] | None = None,
    fallback: EntryPredicate | None = None,
) -> M:
    """Return a copy of ``mapping`` with every key matched by ``specs`` removed.

    A non-empty ``specs`` always wins over ``fallback``, even when none of
    its items is a recognized filter.  Only when ``specs`` is None or empty
    is ``fallback`` (if given) used as a plain per-entry removal predicate.
    With neither, the result is an unmodified copy.
    """
    items = as_items(specs)
    if not items:
        if fallback is not None:
            return reject_by(mapping, fallback)
        return copy_mapping(mapping)

    resolved = as_specs(items)
    result = copy_mapping(mapping)
    removed = 0
    for spec in resolved:
        removed += _delete_matching(result, resolve(spec))
    logger.debug("Removed %d of %d keys using %d filters", removed, len(mapping), len(resolved))
    return result


def reject_in_place(
    mapping: MutableMapping[Any, Any],
    specs: Iterable[Any] | None,
    fallback: EntryPredicate | None = None,
) -> MutableMapping[Any, Any]:
    """Destructive ``reject``: replace the contents of ``mapping`` and return it.

    A ChainMap with parent maps is refused, since only its first map can be
    cleared.
    """
    if not isinstance(mapping, MutableMapping):
        raise TypeError(f"{type(mapping).__name__} does not support in-place removal")
    if isinstance(mapping, ChainMap) and len(mapping.maps) > 1:
        raise TypeError("ChainMap with parent maps does not support in-place removal")
    result = reject(mapping, specs, fallback)
    mapping.clear()
    mapping.update(result)
    return mapping
