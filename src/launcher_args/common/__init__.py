"""Shared models and exceptions."""

from .exceptions import (
    ARGS_DOMAIN,
    ARGS_ERR_GENERIC,
    ARGS_ERR_USAGE,
    ParseError,
    ReleasedArgumentsError,
    UsageError,
)
from .models import ArgsRef, ParsedArguments, ParseOutcome, release_args

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
    "release_args",
]
