"""Uvicorn 기본 포맷을 따르는 애플리케이션 로깅 설정."""

from __future__ import annotations

import copy
import logging.config
import os
from typing import Any

from uvicorn.config import LOGGING_CONFIG as UVICORN_LOGGING_CONFIG


def _resolve_log_level(level: str | None = None) -> str:
    if level:
        return level.upper()
    return os.getenv("LOG_LEVEL", "INFO").upper()


def build_logging_config(level: str | None = None) -> dict[str, Any]:
    """root와 uvicorn 로거의 레벨을 맞춘 dictConfig를 생성합니다.

    `wayfarer.*` 로거는 설정에 넣지 않습니다. 이름이 등록된 로거의 하위 로거는 dictConfig가
    핸들러를 비우므로, 모듈 로거는 `get_logger`가 붙인 핸들러를 그대로 유지해야 합니다.
    """
    log_level = _resolve_log_level(level)
    config = copy.deepcopy(UVICORN_LOGGING_CONFIG)

    config["root"] = {"handlers": ["default"], "level": log_level}
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        config["loggers"][name]["level"] = log_level

    return config


def configure_logging(level: str | None = None) -> None:
    """dictConfig로 로깅을 구성합니다."""
    logging.config.dictConfig(build_logging_config(level))
