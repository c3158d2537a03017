"""Builder — incremental, stack-based assembly of a value tree.

The reader drives a Builder with ``open`` / ``close`` / push events while it
scans.  The first structural fault is latched in ``error``; from then on
every mutator is a no-op, and ``value()`` raises the latched message.
Opening more than ``max_depth`` levels latches ``nesting deeper than N
levels``, so the reader never hands out a tree too deep to walk.

Usage::

    tree = (
        Builder()
        .open()
            .s("one")
            .open().s("two").b(True).close()
        .close()
        .value()
    )
"""

from __future__ import annotations

import logging

from .errors import BuilderError
from .values import DEFAULT_MAX_DEPTH, Arr, Bool, Number, Str, Value

logger = logging.getLogger(__name__)

NOT_OPEN = "not open!"
MISMATCHED = "mismatched open/close"
TOO_DEEP = "nesting deeper than {} levels"


class Builder:
    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth
        self.stack: list[list[Value]] = []
        self.current: list[Value] = []
        self.is_open: bool = False
        self._root_closed = False
        self._error: str | None = None

    # -- State -----------------------------------------------------------

    @property
    def error(self) -> str | None:
        """The latched error message, or ``None``."""
        return self._error

    @property
    def depth(self) -> int:
        """Number of currently open levels (0 before the root is opened)."""
        if not self.is_open:
            return 0
        return len(self.stack) + 1

    def _latch(self, message: str) -> None:
        if self._error is None:
            logger.debug("builder latched error: %s", message)
            self._error = message

    # -- Structure -------------------------------------------------------

    def open(self) -> Builder:
        if self._error is not None:
            return self
        if not self.is_open:
            if self._root_closed:
                # a second root form
                self._latch(MISMATCHED)
            else:
                self.is_open = True
            return self
        if self.depth >= self.max_depth:
            self._latch(TOO_DEEP.format(self.max_depth))
            return self
        self.stack.append(self._extract_current([]))
        return self

    def close(self) -> Builder:
        if self._error is not None:
            return self
        if self.stack:
            finished = self._extract_current(self.stack.pop())
            self.current.append(Arr(finished))
        elif self.is_open:
            self.is_open = False
            self._root_closed = True
        else:
            self._latch(MISMATCHED)
        return self

    # -- Values ----------------------------------------------------------

    def push(self, value: Value) -> Builder:
        if not self.is_open:
            self._latch(NOT_OPEN)
        if self._error is None:
            self.current.append(value)
        return self

    def s(self, text: str) -> Builder:
        return self.push(Str(text))

    def b(self, flag: bool) -> Builder:
        return self.push(Bool(flag))

    def n(self, number: float) -> Builder:
        return self.push(Number(float(number)))

    # -- Finalization ----------------------------------------------------

    def value(self) -> Arr:
        """Move the assembled root array out, or raise the latched error."""
        if self._error is None and self.stack:
            logger.debug("builder finalized with %d unclosed level(s)", len(self.stack))
            self._latch(MISMATCHED)
        if self._error is not None:
            raise BuilderError(self._error)
        return Arr(self._extract_current([]))

    def _extract_current(self, replacement: list[Value]) -> list[Value]:
        current = self.current
        self.current = replacement
        return current
