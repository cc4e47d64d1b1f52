"""로깅 설정."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config_path: Path | None = None, level: int = logging.INFO) -> None:
    """로깅 초기화. config_path YAML 로딩 실패 시 기본 설정(level) 적용."""
    failure: Exception | None = None
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f)
            logging.config.dictConfig(config)
            return
        except (OSError, yaml.YAMLError, TypeError, ValueError) as exc:
            failure = exc

    logging.basicConfig(level=level, format=_DEFAULT_FORMAT)
    if failure is not None:
        get_logger(__name__).warning(
            "logging config load failed, using defaults: %s (%s)", config_path, failure
        )


def get_logger(name: str) -> logging.Logger:
    """표준 로거 반환."""
    return logging.getLogger(name)
