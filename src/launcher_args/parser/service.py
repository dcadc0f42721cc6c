"""Launcher argument vector parser.

The accepted grammar is fixed::

    prog [--classic] <security-tag> <executable> [args for executable...]
    prog --version

Everything after the executable belongs to the launched program and is
returned untouched as a fresh argument vector.
"""

from __future__ import annotations

from typing import Sequence

from launcher_args.common import ParsedArguments, ParseError, ParseOutcome, UsageError
from launcher_args.config import DEFAULT_PARSER_CONFIG, ParserConfig
from launcher_args.observability import get_logger

logger = get_logger(__name__)

VERSION_SWITCH = "--version"
CLASSIC_SWITCH = "--classic"


def parse_args(argv: Sequence[str] | None, *, config: ParserConfig | None = None) -> ParseOutcome:
    """Parses a raw argument vector, argv[0] included.

    Raises ``ParseError`` for an unusable vector and ``UsageError`` for a
    malformed command line. The input sequence is never modified.
    """

    if argv is None:
        raise ParseError("cannot parse arguments, argc or argv are NULL")
    if len(argv) == 0:
        raise ParseError("cannot parse arguments, argc is zero")
    if not all(isinstance(token, str) for token in argv):
        raise ParseError("cannot parse arguments, argv contains non-string elements")

    if config is None:
        config = DEFAULT_PARSER_CONFIG

    ignore_first_tag = _is_legacy_invocation(argv[0], config)
    if ignore_first_tag:
        logger.debug("legacy invocation via %s, first positional argument is ignored", argv[0])

    security_tag: str | None = None
    executable: str | None = None
    is_version_query = False
    is_classic_confinement = False

    index = 1
    while index < len(argv):
        token = argv[index]
        if token.startswith("-"):
            if token == VERSION_SWITCH:
                is_version_query = True
                break
            if token == CLASSIC_SWITCH:
                is_classic_confinement = True
            else:
                raise UsageError(f"unrecognized command line option: {token}")
        elif security_tag is None:
            if ignore_first_tag:
                ignore_first_tag = False
            else:
                security_tag = token
        else:
            executable = token
            break
        index += 1

    if not is_version_query:
        if security_tag is None:
            raise UsageError("application or hook security tag was not provided")
        if executable is None:
            raise UsageError("executable name was not provided")
        if security_tag == "":
            raise UsageError("application or hook security tag cannot be empty")
        if executable == "":
            raise UsageError("executable name cannot be empty")

    # argv[0] stays in place, everything past the stop position follows it.
    remaining_argv = (argv[0], *argv[index + 1 :])
    logger.debug("scanning stopped at index %d, %d argument(s) left", index, len(remaining_argv) - 1)

    arguments = ParsedArguments(
        security_tag=security_tag,
        executable=executable,
        is_version_query=is_version_query,
        is_classic_confinement=is_classic_confinement,
    )
    return ParseOutcome(arguments=arguments, remaining_argv=remaining_argv)


def _is_legacy_invocation(program: str, config: ParserConfig) -> bool:
    basename = program.rpartition("/")[2]
    return basename in config.legacy_program_names
