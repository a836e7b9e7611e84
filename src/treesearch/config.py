"""
Engine configuration.

Defaults used by TreeEngine when a search call omits them, plus
logging and error-reporting switches. Values can be taken from the
environment (and a local .env file):

    TREESEARCH_ALGORITHM      default algorithm (e.g. "a_star", "bfs")
    TREESEARCH_MAX_DEPTH      default depth bound ("" or "none" = unbounded)
    TREESEARCH_VERBOSE        log search summaries at INFO ("1", "true", ...)
    TREESEARCH_REPORT_ERRORS  report caller exceptions to Sentry
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .algorithms import Algorithm

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class EngineConfig:
    """
    Configuration for TreeEngine.

    Attributes:
        default_algorithm: Algorithm used when search() gets none (A*).
        default_max_depth: Depth bound used when search() gets none (None = unbounded).
        verbose: Log per-search summaries and IDS progress at INFO instead of DEBUG.
        report_errors: Report exceptions raised by caller functions to Sentry.
    """
    default_algorithm: Algorithm = Algorithm.A_STAR
    default_max_depth: Optional[int] = None
    verbose: bool = False
    report_errors: bool = True

    def __post_init__(self):
        self.default_algorithm = Algorithm.parse(self.default_algorithm)
        if self.default_max_depth is not None and self.default_max_depth < 0:
            raise ValueError(f"default_max_depth cannot be negative ({self.default_max_depth})")

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "EngineConfig":
        """
        Build a config from TREESEARCH_* environment variables.

        Args:
            dotenv: Load a .env file found from the working directory
                first (existing variables win).

        Raises:
            ValueError: If a variable holds an unparseable value.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        config = cls()

        algorithm = os.getenv("TREESEARCH_ALGORITHM")
        if algorithm:
            config.default_algorithm = Algorithm.parse(algorithm)

        max_depth = os.getenv("TREESEARCH_MAX_DEPTH")
        if max_depth is not None and max_depth.strip().lower() not in ("", "none"):
            try:
                config.default_max_depth = int(max_depth)
            except ValueError:
                raise ValueError(f"TREESEARCH_MAX_DEPTH must be an integer, got {max_depth!r}")
            if config.default_max_depth < 0:
                raise ValueError(f"TREESEARCH_MAX_DEPTH cannot be negative ({max_depth})")

        config.verbose = _env_flag("TREESEARCH_VERBOSE", config.verbose)
        config.report_errors = _env_flag("TREESEARCH_REPORT_ERRORS", config.report_errors)
        return config


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


__all__ = ['EngineConfig']
