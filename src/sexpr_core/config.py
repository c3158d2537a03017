"""Configuration loading for sexpr_core.

Settings live in a TOML file, either as a ``[sexpr]`` table or as
``[tool.sexpr]`` inside ``pyproject.toml``::

    [sexpr]
    max_depth = 128
    log_level = "DEBUG"
    log_file = "sexpr.log"
"""

from __future__ import annotations

import logging
import sys
import tomllib
from dataclasses import dataclass, fields

from .errors import ConfigError
from .values import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

DEFAULT_EXPR = "( (one 1) (two 2) (three 3) )"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def max_depth_limit() -> int:
    """Largest usable max_depth: walking a tree costs about two frames a level."""
    return sys.getrecursionlimit() // 3


@dataclass
class SexprConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"
    log_file: str | None = None
    default_expr: str = DEFAULT_EXPR

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_depth > max_depth_limit():
            raise ConfigError(
                f"max_depth must be at most {max_depth_limit()}, got {self.max_depth}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LEVELS:
            raise ConfigError(f"unknown log_level {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigError(f"log_file must be a string, got {self.log_file!r}")
        if not isinstance(self.default_expr, str):
            raise ConfigError(f"default_expr must be a string, got {self.default_expr!r}")

    @property
    def level(self) -> int:
        """The numeric logging level for ``log_level``."""
        return getattr(logging, self.log_level)


def load_config(path: str | None = None) -> SexprConfig:
    """Read a SexprConfig from *path*; defaults when *path* is None."""
    if path is None:
        return SexprConfig()

    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"could not read config {path!r}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"could not parse config {path!r}: {exc}") from exc

    table = data.get("sexpr")
    if table is None:
        table = data.get("tool", {}).get("sexpr", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[sexpr] in {path!r} must be a table")

    known = {f.name for f in fields(SexprConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"unknown config option(s): {', '.join(unknown)}")

    logger.debug("loaded config from %s: %s", path, table)
    return SexprConfig(**table)
