"""로깅 설정."""

from __future__ import annotations

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any

import yaml

PACKAGE_LOGGER = "launcher_args"


def setup_logging(config_path: Path | None = None, debug: bool = False) -> None:
    """로깅 초기화. config_path YAML 로딩 실패 시 기본 설정 적용.

    debug가 켜지면 파서의 스캔 추적 로그(DEBUG)까지 출력한다.
    """
    if config_path is not None and _apply_yaml_config(config_path):
        if debug:
            logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)
        return

    # stdout belongs to the launch plan output
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    if debug:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


def _apply_yaml_config(config_path: Path) -> bool:
    try:
        with open(config_path, encoding="utf-8") as f:
            config: dict[str, Any] = yaml.safe_load(f)
        logging.config.dictConfig(config)
    except (OSError, yaml.YAMLError, AttributeError, ImportError, TypeError, ValueError):
        return False
    return True


def get_logger(name: str) -> logging.Logger:
    """표준 로거 반환."""
    return logging.getLogger(name)
