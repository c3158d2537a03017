"""Evaluator: reduces a value tree to a float."""

from __future__ import annotations

import math

from .errors import EvalError, RecursionDepthError
from .values import DEFAULT_MAX_DEPTH, Arr, Number, Str, Value, short_repr


OPERATORS = ("+", "-", "*", "/")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(value: Value, max_depth: int = DEFAULT_MAX_DEPTH) -> float:
    """Evaluate *value* as an arithmetic expression.

    ``(+ a b ...)`` and ``(* a b ...)`` fold over every argument;
    ``(- a b)`` and ``(/ a b)`` use the first two and ignore the rest.
    The tree is never modified, so evaluating it again gives the same
    result.
    """
    return _eval(value, 0, max_depth)


# ---------------------------------------------------------------------------
# Recursive walk
# ---------------------------------------------------------------------------

def _eval(value: Value, level: int, max_depth: int) -> float:
    if level > max_depth:
        raise RecursionDepthError(max_depth)

    if isinstance(value, Number):
        return value.value

    if isinstance(value, Arr) and len(value.items) > 2:
        head = value.items[0]
        if not isinstance(head, Str):
            raise EvalError(f"operator must be string {short_repr(head)}", head)
        return _apply(head.value, value.items[1:], level + 1, max_depth)

    raise EvalError(f"cannot convert {short_repr(value)} to number", value)


def _apply(op: str, args: list[Value], level: int, max_depth: int) -> float:
    if op == "+":
        total = 0.0
        for arg in args:
            total += _eval(arg, level, max_depth)
        return total

    if op == "*":
        product = 1.0
        for arg in args:
            product *= _eval(arg, level, max_depth)
        return product

    if op == "-":
        x = _eval(args[0], level, max_depth)
        y = _eval(args[1], level, max_depth)
        return x - y

    if op == "/":
        x = _eval(args[0], level, max_depth)
        y = _eval(args[1], level, max_depth)
        return _divide(x, y)

    raise EvalError(f"unknown operator {op!r}", Str(op))


def _divide(x: float, y: float) -> float:
    """IEEE-754 division: a zero divisor gives inf or nan, not an error."""
    if y != 0.0:
        return x / y
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)
