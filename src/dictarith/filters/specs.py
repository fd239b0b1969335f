"""Filter specifications for key removal.

A filter list is a sequence of heterogeneous items.  Each item is resolved
once into one of three spec kinds:

    Pattern       — regex searched anywhere in the key text
    SymbolicName  — exact match against an Enum member's name (or a str)
    TextName      — exact match against a plain string

Keys are always compared through ``key_text()``; values are never inspected.
"""
from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)


def key_text(key: Any) -> str:
    """Return the canonical textual form of a mapping key."""
    if isinstance(key, enum.Enum):
        return key.name
    if isinstance(key, bytes):
        return key.decode("utf-8", errors="replace")
    return str(key)


@dataclass(frozen=True)
class Pattern:
    """Remove every key whose text contains a match for ``regex``."""

    regex: re.Pattern[str]

    @classmethod
    def compile(cls, source: str, flags: int = 0) -> "Pattern":
        return cls(re.compile(source, flags))

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def __str__(self) -> str:
        return f"/{self.regex.pattern}/"


@dataclass(frozen=True)
class SymbolicName:
    """Remove the key whose text equals the symbol's name."""

    name: Union[enum.Enum, str]

    @property
    def text(self) -> str:
        return key_text(self.name)

    def matches(self, text: str) -> bool:
        return text == self.text

    def __str__(self) -> str:
        return f":{self.text}"


@dataclass(frozen=True)
class TextName:
    """Remove the key whose text equals ``text``."""

    text: str

    def matches(self, text: str) -> bool:
        return text == self.text

    def __str__(self) -> str:
        return repr(self.text)


FilterSpec = Union[Pattern, SymbolicName, TextName]

_SPEC_TYPES = (Pattern, SymbolicName, TextName)


def as_spec(item: Any) -> FilterSpec | None:
    """Coerce a raw filter item into a spec.

    Returns None for items of an unrecognized kind — those contribute no
    removals.  Regexes compiled from bytes cannot search key text and are
    unrecognized too.
    """
    if isinstance(item, re.Pattern):
        item = Pattern(item)
    if isinstance(item, Pattern) and isinstance(item.regex.pattern, bytes):
        logger.debug("Ignoring bytes pattern filter: %r", item.regex)
        return None
    if isinstance(item, _SPEC_TYPES):
        return item
    if isinstance(item, enum.Enum):
        return SymbolicName(item)
    if isinstance(item, str):
        return TextName(item)
    logger.debug("Ignoring unrecognized filter item: %r", item)
    return None


def as_items(items: Any) -> list[Any]:
    """Return the raw filter items of a filter list, uncoerced.

    None is an empty list.  A bare item (str, Enum member, compiled regex,
    spec, or anything not iterable) is a one-item list.
    """
    if items is None:
        return []
    if isinstance(items, (str, bytes, enum.Enum, re.Pattern) + _SPEC_TYPES):
        return [items]
    if not isinstance(items, Iterable):
        return [items]
    return list(items)


def as_specs(items: Any) -> list[FilterSpec]:
    """Coerce a filter list, dropping unrecognized items."""
    specs: list[FilterSpec] = []
    for item in as_items(items):
        spec = as_spec(item)
        if spec is not None:
            specs.append(spec)
    return specs


def parse_spec(text: str, flags: int = 0) -> FilterSpec:
    """Parse the textual notation used on the command line.

    ``/regex/`` is a Pattern, ``:name`` a SymbolicName, anything else a
    TextName.  Raises ``re.error`` for an invalid regex.
    """
    if len(text) >= 2 and text.startswith("/") and text.endswith("/"):
        return Pattern.compile(text[1:-1], flags)
    if len(text) >= 2 and text.startswith(":"):
        return SymbolicName(text[1:])
    return TextName(text)
