"""
Templates layer: 템플릿 카탈로그 모듈.

주의: 폴더 구분
- src/templates/ → 코드 (이 모듈)
- templates/ (루트) → 데이터 저장소 (*.json)
"""

from .catalog import (
    TemplateCatalog,
    summarize_template,
    validate_template_id,
)

__all__ = [
    "TemplateCatalog",
    "summarize_template",
    "validate_template_id",
]
