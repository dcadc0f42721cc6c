"""Command line argument parsing for the confined application launcher."""

from __future__ import annotations

__version__ = "0.3.0"

from launcher_args.common import (
    ARGS_DOMAIN,
    ARGS_ERR_GENERIC,
    ARGS_ERR_USAGE,
    ArgsRef,
    ParsedArguments,
    ParseError,
    ParseOutcome,
    ReleasedArgumentsError,
    UsageError,
    release_args,
)
from launcher_args.parser import parse_args

__all__ = [
    "ARGS_DOMAIN",
    "ARGS_ERR_GENERIC",
    "ARGS_ERR_USAGE",
    "ArgsRef",
    "ParseError",
    "ParseOutcome",
    "ParsedArguments",
    "ReleasedArgumentsError",
    "UsageError",
    "__version__",
    "parse_args",
    "release_args",
]
