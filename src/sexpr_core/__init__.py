"""sexpr_core — S-expression reader and arithmetic evaluator."""

from .builder import Builder
from .config import SexprConfig, load_config
from .errors import (
    BuilderError,
    ConfigError,
    EvalError,
    ParseError,
    RecursionDepthError,
    SexprError,
)
from .evaluator import evaluate
from .pairs import lookup, pairs
from .reader import parse, parse_word
from .values import Arr, Bool, Number, Str, Value
from .repl import SexprRepl

__version__ = "0.1.0"

__all__ = [
    "parse",
    "parse_word",
    "evaluate",
    "pairs",
    "lookup",
    "Builder",
    "Value",
    "Number",
    "Str",
    "Bool",
    "Arr",
    "SexprConfig",
    "load_config",
    "SexprError",
    "BuilderError",
    "ParseError",
    "EvalError",
    "RecursionDepthError",
    "ConfigError",
    "SexprRepl",
]
