"""Entry point for the launcher argument parser CLI."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from launcher_args import __version__
from launcher_args.cli import describe_launch, format_usage, format_version
from launcher_args.common import ParseError, UsageError
from launcher_args.config import DEFAULT_PARSER_CONFIG, load_parser_config
from launcher_args.observability import setup_logging
from launcher_args.parser import parse_args

logger = logging.getLogger(__name__)

CONFIG_ENV = "LAUNCHER_ARGS_CONFIG"
LOG_CONFIG_ENV = "LAUNCHER_ARGS_LOG_CONFIG"
DEBUG_ENV = "LAUNCHER_ARGS_DEBUG"


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(_env_path(LOG_CONFIG_ENV), debug=os.environ.get(DEBUG_ENV, "") not in ("", "0"))

    config_path = _env_path(CONFIG_ENV)
    config = load_parser_config(config_path) if config_path is not None else DEFAULT_PARSER_CONFIG

    raw_argv = list(argv) if argv is not None else sys.argv
    program = raw_argv[0] if raw_argv else "launcher-args"

    try:
        outcome = parse_args(raw_argv, config=config)
    except UsageError as exc:
        logger.error("error: %s", exc)
        print(format_usage(program), file=sys.stderr)
        return 1
    except ParseError as exc:
        logger.error("%s", exc)
        return 2
    except Exception as exc:
        logger.error("argument parsing failed: %s", exc)
        return 2

    with outcome:
        if outcome.arguments.is_version_query:
            print(format_version(program, __version__))
            return 0
        print(json.dumps(describe_launch(outcome), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
