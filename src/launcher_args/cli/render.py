"""Text shown by the diagnostic front end."""

from __future__ import annotations

import os
from typing import Any

from launcher_args.common import ParseOutcome


def _program_name(program: str) -> str:
    return os.path.basename(program) or program


def format_usage(program: str) -> str:
    prog = _program_name(program)
    return (
        f"usage: {prog} [--classic] <security-tag> <executable> [args...]\n"
        f"       {prog} --version"
    )


def format_version(program: str, version: str) -> str:
    return f"{_program_name(program)} {version}"


def describe_launch(outcome: ParseOutcome) -> dict[str, Any]:
    """실행 계획을 JSON 직렬화 가능한 dict로 변환한다."""
    arguments = outcome.arguments
    return {
        "security_tag": arguments.security_tag,
        "executable": arguments.executable,
        "confinement": "classic" if arguments.is_classic_confinement else "strict",
        "argv": list(outcome.remaining_argv),
    }
