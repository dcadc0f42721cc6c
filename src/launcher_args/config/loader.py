"""YAML 기반 파서 설정 로딩."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import ParserConfig

logger = logging.getLogger(__name__)

DEFAULT_PARSER_CONFIG = ParserConfig()


def load_parser_config(config_path: Path) -> ParserConfig:
    """launcher/args.yaml 로딩. 실패 시 기본값 반환."""
    data = _safe_load_yaml(config_path)
    if data is None:
        return DEFAULT_PARSER_CONFIG

    launcher: Any = data.get("launcher", {})
    if not isinstance(launcher, dict):
        logger.warning("launcher section is not a mapping, using defaults: %s", config_path)
        return DEFAULT_PARSER_CONFIG

    names: Any = launcher.get("legacy_program_names", list(DEFAULT_PARSER_CONFIG.legacy_program_names))
    if not isinstance(names, list) or not all(isinstance(n, str) and n and "/" not in n for n in names):
        logger.warning("invalid legacy_program_names, using defaults: %s", config_path)
        return DEFAULT_PARSER_CONFIG

    return ParserConfig(legacy_program_names=tuple(names))


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """YAML 파일을 안전하게 로딩. 실패 시 None 반환."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        logger.warning("YAML 로딩 실패: %s", path)
        return None
    if isinstance(result, dict):
        return result
    logger.warning("YAML root is not a mapping: %s", path)
    return None
