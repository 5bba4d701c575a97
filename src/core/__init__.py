"""
Core layer: 순수 함수 + 파일시스템 헬퍼.

역할:
- URL 정규화 (urls.py)
- 원자적 파일 쓰기 (files.py)
- 로깅 설정 (logging.py)
"""

from .files import atomic_write_bytes
from .logging import configure_logging, configure_logging_from_config
from .urls import is_absolute_url, resolve_url

__all__ = [
    # urls
    "resolve_url",
    "is_absolute_url",
    # files
    "atomic_write_bytes",
    # logging
    "configure_logging",
    "configure_logging_from_config",
]
