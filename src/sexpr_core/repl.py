"""SexprRepl — parse-and-evaluate session for interactive use.

Also provides the ``sexpr`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .config import SexprConfig, load_config
from .errors import ConfigError, SexprError
from .evaluator import evaluate
from .log_support import setup_loggers
from .reader import parse
from .values import Arr, format_number

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SexprRepl class (programmatic use)
# ---------------------------------------------------------------------------

class SexprRepl:
    """Evaluates one expression per call and remembers what it saw.

    Usage::

        repl = SexprRepl()
        repl.eval("(+ 1 (* 2 3))")   # → 7.0
        repl.last_tree               # → Arr([...])
        repl.results                 # → [7.0]
        repl.reset()
    """

    def __init__(self, config: SexprConfig | None = None) -> None:
        self.config = config or SexprConfig()
        self.last_tree: Arr | None = None
        self.results: list[float] = []

    def parse(self, text: str) -> Arr:
        """Parse *text* and keep the tree as ``last_tree``."""
        self.last_tree = parse(text, max_depth=self.config.max_depth)
        return self.last_tree

    def eval(self, text: str) -> float:
        """Parse and evaluate *text*, appending the number to ``results``."""
        result = evaluate(self.parse(text), max_depth=self.config.max_depth)
        self.results.append(result)
        return result

    def reset(self) -> None:
        """Forget the last tree and all results."""
        self.last_tree = None
        self.results = []


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _show_tree(repl: SexprRepl, dest: IO[str], display: bool = False) -> None:
    if repl.last_tree is None:
        print("  (nothing parsed yet)", file=dest)
        return
    print(str(repl.last_tree) if display else repr(repl.last_tree), file=dest)


def _show_results(repl: SexprRepl, dest: IO[str]) -> None:
    if not repl.results:
        print("  (no results)", file=dest)
        return
    for i, result in enumerate(repl.results, 1):
        print(f"  {i}: {format_number(result)}", file=dest)


def _eval_line(repl: SexprRepl, text: str, dest: IO[str]) -> None:
    try:
        result = repl.eval(text)
    except SexprError as exc:
        print(f"error: {exc}", file=dest)
        return
    print(format_number(result), file=dest)


def _process_line(repl: SexprRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":tree":
        _show_tree(repl, dest)
        return True

    if line == ":show":
        _show_tree(repl, dest, display=True)
        return True

    if line == ":results":
        _show_results(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                for file_line in fh:
                    if not _process_line(repl, file_line.rstrip("\n"), dest):
                        break
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    # ── Expression ────────────────────────────────────────────────────────
    _eval_line(repl, line, dest)
    return True


def run_once(repl: SexprRepl, text: str, dest: IO[str], err: IO[str]) -> int:
    """Parse, show and evaluate *text*; the exit status is returned."""
    try:
        tree = repl.parse(text)
    except SexprError as exc:
        print(f"error: {exc}", file=err)
        return 1

    print(repr(tree), file=dest)
    print(str(tree), file=dest)

    try:
        result = evaluate(tree, max_depth=repl.config.max_depth)
    except SexprError as exc:
        print(f"result is error: {exc}", file=dest)
        return 1
    repl.results.append(result)
    print(f"result is {format_number(result)}", file=dest)
    return 0


def interact(repl: SexprRepl, dest: IO[str]) -> None:
    print("sexpr REPL  (:q to quit  |  :tree  :show  :results  :reset  |  ?<< <file>)", file=dest)

    while True:
        try:
            line = input("sexpr> ")
        except EOFError:
            print(file=dest)
            break
        except KeyboardInterrupt:
            print(file=dest)
            continue

        if not _process_line(repl, line, dest):
            break


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sexpr",
        description="Parse and evaluate an arithmetic S-expression.",
    )
    parser.add_argument(
        'expr',
        nargs='?',
        help='Expression to evaluate (default: the configured demo expression).',
    )
    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help='Start a read-eval-print loop instead of evaluating EXPR.',
    )
    parser.add_argument(
        '-c', '--config',
        help='TOML file with a [sexpr] table.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr.',
    )
    parser.add_argument(
        '--log-file',
        help='Also write the log to this file.',
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """``sexpr`` command line / ``python -m sexpr_core.repl``."""
    ctx = parse_args(argv)

    try:
        config = load_config(ctx.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    level = logging.DEBUG if ctx.verbose else config.level
    setup_loggers(level, ctx.log_file or config.log_file)
    logger.debug("config: %s", config)

    repl = SexprRepl(config)
    if ctx.interactive:
        interact(repl, sys.stdout)
        return 0

    text = ctx.expr if ctx.expr is not None else config.default_expr
    return run_once(repl, text, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
