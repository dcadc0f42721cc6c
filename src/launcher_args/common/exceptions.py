"""Custom exceptions for command exit mapping."""

from __future__ import annotations

ARGS_DOMAIN = "args"

ARGS_ERR_GENERIC = 0
ARGS_ERR_USAGE = 1


class ParseError(Exception):
    """Raised when the argument vector cannot be parsed.

    ``str(error)`` is the message meant for the end user, verbatim.
    """

    domain = ARGS_DOMAIN

    def __init__(self, message: str, code: int = ARGS_ERR_GENERIC) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain!r}, code={self.code}, message={self.message!r})"


class UsageError(ParseError):
    """Raised when the user supplied command line is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ARGS_ERR_USAGE)


class ReleasedArgumentsError(RuntimeError):
    """Raised when parsed arguments are read after they were released."""
