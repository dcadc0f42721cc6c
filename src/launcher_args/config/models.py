"""파서 설정 모델."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """런처 인자 파서 설정 (launcher/args.yaml)."""

    # Program names whose first positional argument is a redundant security tag.
    legacy_program_names: tuple[str, ...] = ("ubuntu-core-launcher",)
