"""Tests for the Builder and its error latch."""

import pytest

from sexpr_core.builder import Builder, MISMATCHED, NOT_OPEN, TOO_DEEP
from sexpr_core.errors import BuilderError
from sexpr_core.values import Arr, Bool, Number, Str


# ---------------------------------------------------------------------------
# Chained building
# ---------------------------------------------------------------------------

def test_build_flat():
    tree = Builder().open().s("one").n(1).b(True).close().value()
    assert tree == Arr([Str("one"), Number(1.0), Bool(True)])

def test_build_nested():
    tree = (
        Builder()
        .open()
            .s("one")
            .open()
                .s("two")
                .b(True)
                .open().s("four").n(1.0).close()
            .close()
        .close()
        .value()
    )
    assert tree == Arr([
        Str("one"),
        Arr([Str("two"), Bool(True), Arr([Str("four"), Number(1.0)])]),
    ])

def test_build_empty_root():
    assert Builder().open().close().value() == Arr([])

def test_n_stores_float():
    tree = Builder().open().n(3).close().value()
    assert tree.items[0] == Number(3.0)
    assert isinstance(tree.items[0].value, float)

def test_push_generic_value():
    tree = Builder().open().push(Arr([Str("x")])).close().value()
    assert tree == Arr([Arr([Str("x")])])


# ---------------------------------------------------------------------------
# open / close bookkeeping
# ---------------------------------------------------------------------------

def test_first_open_is_structural_noop():
    b = Builder().open()
    assert b.is_open
    assert b.stack == []
    assert b.depth == 1

def test_depth_tracks_nesting():
    b = Builder()
    assert b.depth == 0
    b.open().open().open()
    assert b.depth == 3
    b.close()
    assert b.depth == 2

def test_root_close_clears_open():
    b = Builder().open().close()
    assert not b.is_open
    assert b.error is None


# ---------------------------------------------------------------------------
# Error latch
# ---------------------------------------------------------------------------

def test_push_before_open_fails():
    with pytest.raises(BuilderError, match="not open!"):
        Builder().s("x").value()

def test_push_before_open_latches_message():
    b = Builder().n(1.0)
    assert b.error == NOT_OPEN
    assert b.current == []

def test_extra_close_is_mismatched():
    b = Builder().open().s("one").close().close()
    assert b.error == MISMATCHED
    with pytest.raises(BuilderError, match="mismatched open/close"):
        b.value()

def test_close_without_open_is_mismatched():
    assert Builder().close().error == MISMATCHED

def test_second_root_form_is_mismatched():
    b = Builder().open().s("a").close().open()
    assert b.error == MISMATCHED

def test_unclosed_nested_level_is_mismatched():
    b = Builder().open().open().s("a")
    with pytest.raises(BuilderError, match="mismatched open/close"):
        b.value()

def test_unclosed_root_is_accepted():
    assert Builder().open().s("a").value() == Arr([Str("a")])

def test_latch_is_sticky():
    b = Builder().s("x")            # latches "not open!"
    b.open().s("y").close().close()  # all no-ops now
    assert b.error == NOT_OPEN
    assert b.current == []
    assert b.stack == []

def test_first_error_wins():
    b = Builder().close().s("x")
    assert b.error == MISMATCHED

def test_value_raises_every_time():
    b = Builder().s("x")
    for _ in range(2):
        with pytest.raises(BuilderError):
            b.value()


# ---------------------------------------------------------------------------
# value() moves content out
# ---------------------------------------------------------------------------

def test_value_moves_current_out():
    b = Builder().open().s("a").close()
    first = b.value()
    assert first == Arr([Str("a")])
    assert b.current == []
    assert b.value() == Arr([])


# ---------------------------------------------------------------------------
# Nesting limit
# ---------------------------------------------------------------------------

def test_nesting_up_to_limit():
    tree = Builder(max_depth=2).open().open().s("x").close().close().value()
    assert tree == Arr([Arr([Str("x")])])

def test_nesting_past_limit_latches():
    b = Builder(max_depth=2).open().open().open()
    assert b.error == TOO_DEEP.format(2)
    assert b.depth == 2
    with pytest.raises(BuilderError, match="nesting deeper than 2 levels"):
        b.value()

def test_nesting_limit_stops_growth():
    b = Builder(max_depth=5)
    for _ in range(3000):
        b.open()
    assert len(b.stack) == 4
    assert b.error == TOO_DEEP.format(5)
