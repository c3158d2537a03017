"""Keyed-form access over a parsed tree.

A root such as ``( (one 1) (two 2) )`` reads as a sequence of
``(key value)`` pairs.
"""

from __future__ import annotations

from typing import Iterator

from .errors import SexprError
from .values import Arr, Str, Value, short_repr


def pairs(value: Value) -> Iterator[tuple[str, Value]]:
    """Yield ``(key, value)`` for each keyed form in *value*.

    Stops at the first child that is not an array of two or more items
    headed by a string.
    """
    if not isinstance(value, Arr):
        raise SexprError(f"cannot take pairs of {short_repr(value)}")
    return _iter_pairs(value)


def _iter_pairs(value: Arr) -> Iterator[tuple[str, Value]]:
    for child in value.items:
        if not (isinstance(child, Arr) and len(child.items) >= 2):
            return
        head = child.items[0]
        if not isinstance(head, Str):
            return
        yield head.value, child.items[1]


def lookup(value: Value, key: str) -> Value | None:
    """Return the value of the first pair named *key*, or None."""
    for name, item in pairs(value):
        if name == key:
            return item
    return None
