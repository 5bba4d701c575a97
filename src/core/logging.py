"""
Logging setup.

모든 모듈은 logger = logging.getLogger(__name__) 사용.
진입점(app lifespan, scripts)에서만 configure_logging 호출.
"""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int | None) -> int:
    """
    로그 레벨 문자열 → logging 상수.

    알 수 없는 값은 INFO.
    """
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO

    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | int | None = "INFO") -> None:
    """
    루트 로거 설정.

    Args:
        level: "DEBUG", "INFO" 등 또는 logging 상수
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def configure_logging_from_config(config: dict[str, Any]) -> None:
    """default.yaml의 logging 섹션으로 설정."""
    logging_config = config.get("logging") or {}
    configure_logging(logging_config.get("level", "INFO"))
