"""Reader layer: scans S-expression text into a value tree."""

from __future__ import annotations

import logging
import re

from .builder import Builder
from .errors import ParseError
from .values import DEFAULT_MAX_DEPTH, Arr


logger = logging.getLogger(__name__)

_DIGITS = "0123456789"

# Literal spellings accepted for numbers.  Python's float() alone would also
# take digit separators ("1_000"), non-ASCII digits and surrounding whitespace.
_NUMBER_RE = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)$",
    re.IGNORECASE | re.ASCII,
)


# ---------------------------------------------------------------------------
# Word classification
# ---------------------------------------------------------------------------

def parse_number(word: str) -> float:
    """Convert a numeric literal, raising ParseError if it is malformed."""
    if not _NUMBER_RE.match(word):
        raise ParseError(f"invalid float literal {word!r}")
    try:
        return float(word)
    except ValueError as exc:
        raise ParseError(f"invalid float literal {word!r}") from exc


def parse_word(builder: Builder, word: str) -> None:
    """Classify a non-empty token and push it into *builder*.

    - ``T`` / ``F``                        → Bool
    - leading digit or ``-`` (except ``-``) → Number
    - anything else                        → Str, verbatim
    """
    first = word[0]
    if word == "T" or word == "F":
        builder.b(word == "T")
    elif (first in _DIGITS or first == "-") and word != "-":
        builder.n(parse_number(word))
    else:
        builder.s(word)


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Arr:
    """Parse *text* into its root array.

    Structural faults surface as BuilderError when the builder is
    finalized (including forms nested deeper than *max_depth*); a
    malformed number raises ParseError straight away.
    """
    builder = Builder(max_depth)
    word: list[str] = []

    def flush() -> None:
        if word:
            parse_word(builder, "".join(word))
            word.clear()

    for ch in text:
        if ch.isspace():
            flush()
        elif ch == "(":
            flush()
            builder.open()
        elif ch == ")":
            flush()
            builder.close()
        else:
            word.append(ch)

    if word:
        # after the root form this latches "not open!"
        logger.debug("flushing trailing token %r", "".join(word))
    flush()
    return builder.value()
