"""Exception types for sexpr_core."""

from __future__ import annotations


class SexprError(Exception):
    """Base class for every error raised by sexpr_core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BuilderError(SexprError):
    """A structural fault latched by the Builder (``not open!`` etc.)."""


class ParseError(SexprError):
    """A malformed numeric literal found while scanning."""


class EvalError(SexprError):
    """A tree that cannot be reduced to a number."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class RecursionDepthError(EvalError):
    """Nesting deeper than the evaluator's configured limit."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"nesting deeper than {max_depth} levels")
        self.max_depth = max_depth


class ConfigError(SexprError):
    """Unreadable or invalid configuration."""
