"""End-to-end tests: text → tree → number."""

import math

import pytest

from sexpr_core import (
    Arr,
    Builder,
    BuilderError,
    EvalError,
    Number,
    Str,
    evaluate,
    lookup,
    pairs,
    parse,
)
from sexpr_core.values import depth


def test_empty_document_cannot_evaluate():
    """( ) → Arr([]), which is not a number."""
    tree = parse("( )")
    assert tree == Arr([])
    with pytest.raises(EvalError, match="cannot convert"):
        evaluate(tree)


def test_keyed_document():
    """The demo document parses, displays and reads as pairs."""
    tree = parse("( (one 1) (two 2) (three 3) )")
    assert str(tree) == "((one 1 )(two 2 )(three 3 ))"
    assert dict(pairs(tree)) == {
        "one": Number(1.0),
        "two": Number(2.0),
        "three": Number(3.0),
    }
    assert lookup(tree, "three") == Number(3.0)


def test_mismatched_close_returns_no_tree():
    with pytest.raises(BuilderError, match="mismatched open/close"):
        parse("( one ) )")


def test_push_before_open():
    with pytest.raises(BuilderError, match="not open!"):
        Builder().s("x").value()


@pytest.mark.parametrize("text, expected", [
    ("(+ 2 3 4)", 9.0),
    ("(- 10 3)", 7.0),
    ("(* 1.5 2 2)", 6.0),
    ("(/ 9 3)", 3.0),
    ("(+ 1 (* 2 3) (- 10 (/ 8 2)))", 13.0),
    ("(+(* 2 3)(* 4 5)1)", 27.0),
    ("(- -1 -2)", 1.0),
    ("(* 1e3 2 1)", 2000.0),
])
def test_arithmetic_from_text(text, expected):
    assert evaluate(parse(text)) == expected


def test_division_by_zero_from_text():
    assert evaluate(parse("(/ 1 0)")) == math.inf


def test_unknown_operator_from_text():
    with pytest.raises(EvalError, match="unknown operator 'mod'"):
        evaluate(parse("(mod 7 2)"))


def test_boolean_operand_cannot_evaluate():
    with pytest.raises(EvalError, match="cannot convert Bool"):
        evaluate(parse("(+ 1 T 2)"))


def test_depth_equals_nesting():
    text = "(+ 1 (+ 1 (+ 1 (+ 1 0))))"
    tree = parse(text)
    assert depth(tree) == 4
    assert evaluate(tree) == 4.0


def test_builder_tree_evaluates_like_parsed_tree():
    built = Builder().open().s("*").n(2).open().s("+").n(1).n(2).close().close().value()
    assert built == parse("(* 2 (+ 1 2))")
    assert evaluate(built) == 6.0
    assert built.items[0] == Str("*")
