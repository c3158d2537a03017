"""Value types for sexpr_core.

A value tree is built from four variants.  ``repr()`` is the debug form,
``str()`` the parenthesized display form (diagnostics only; it does not
escape strings, so it will not always parse back to the same tree).
"""

from __future__ import annotations

import math
import reprlib
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union


@dataclass(slots=True)
class Number:
    value: float

    def __str__(self) -> str:
        return format_number(self.value) + " "


@dataclass(slots=True)
class Str:
    value: str

    def __str__(self) -> str:
        return self.value + " "


@dataclass(slots=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower() + " "


@dataclass(slots=True)
class Arr:
    items: list[Value] = field(default_factory=list)

    def __str__(self) -> str:
        return "(" + "".join(str(v) for v in self.items) + ")"


Value = Union[Number, Str, Bool, Arr]

# Deepest tree the reader will build or the evaluator will walk.  Display,
# repr and evaluation each take about two Python frames per level.
DEFAULT_MAX_DEPTH = 256


def format_number(v: float) -> str:
    """Shortest round-trip digits, always positional (``1e20`` prints in full)."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    if v == 0.0:
        return "-0" if math.copysign(1.0, v) < 0 else "0"
    text = repr(v)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def depth(value: Value) -> int:
    """Nesting depth of *value*: 0 for atoms, 1 for a flat array."""
    deepest = 0
    todo = [(value, 1)]
    while todo:
        node, level = todo.pop()
        if isinstance(node, Arr):
            deepest = max(deepest, level)
            todo.extend((child, level + 1) for child in node.items)
    return deepest


class _ValueRepr(reprlib.Repr):
    """repr() cut off a few levels down, for error messages."""

    def __init__(self) -> None:
        super().__init__()
        self.maxlevel = 4
        self.maxlist = 8
        self.maxother = 60

    def repr_Arr(self, value: Arr, level: int) -> str:
        if not value.items:
            return "Arr(items=[])"
        if level <= 0:
            return "Arr(items=[...])"
        shown = [self.repr1(v, level - 1) for v in value.items[:self.maxlist]]
        if len(value.items) > self.maxlist:
            shown.append("...")
        return "Arr(items=[" + ", ".join(shown) + "])"


short_repr = _ValueRepr().repr
