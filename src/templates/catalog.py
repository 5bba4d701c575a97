"""
템플릿 카탈로그: templates/*.json 목록 + 조회.

구조:
templates/
├── versus-duo.json     # {"name": ..., "description": ..., "preview": ..., ...}
└── bullets-cards.json

규칙:
- 디렉터리 없음 → 빈 목록
- 파싱 실패 파일은 로그 남기고 건너뜀 (목록 전체를 실패시키지 않음)
- template_id = 파일명 (확장자 제외)
"""

import json
import logging
from pathlib import Path
from typing import Any

from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import TemplateSummary

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".json"
FORBIDDEN_CHARS = set('/\\:*?"<>|')


def validate_template_id(template_id: str) -> None:
    """
    template_id 유효성 검증.

    경로 구분자 등 금지 문자가 있으면 templates/ 밖을 읽을 수 있으므로 reject.

    Raises:
        TemplateError: INVALID_TEMPLATE_ID
    """
    if not template_id or template_id in (".", ".."):
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            "template_id cannot be empty",
        )

    found_forbidden = set(template_id) & FORBIDDEN_CHARS
    if found_forbidden:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            f"template_id contains forbidden characters: {sorted(found_forbidden)}",
            template_id=template_id,
        )


def summarize_template(template_id: str, data: dict[str, Any]) -> TemplateSummary:
    """템플릿 JSON → 목록 항목."""
    return TemplateSummary(
        id=template_id,
        name=str(data.get("name") or template_id),
        description=str(data.get("description") or ""),
        preview=data.get("preview") or None,
    )


class TemplateCatalog:
    """templates/ 디렉터리의 JSON 템플릿 조회."""

    def __init__(self, templates_root: Path):
        """
        Args:
            templates_root: templates/ 루트 경로
        """
        self.templates_root = templates_root

    def list_templates(self) -> list[TemplateSummary]:
        """
        템플릿 목록 조회.

        Returns:
            파일명 순 TemplateSummary 목록
        """
        if not self.templates_root.exists():
            return []

        results = []
        for path in sorted(self.templates_root.glob(f"*{TEMPLATE_SUFFIX}")):
            if not path.is_file():
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                # ValueError: JSONDecodeError, UnicodeDecodeError
                logger.error(f"Error reading template {path.name}: {e}")
                continue
            if not isinstance(data, dict):
                logger.error(f"Template {path.name} is not a JSON object, skipping")
                continue
            results.append(summarize_template(path.stem, data))

        return results

    def get(self, template_id: str) -> dict[str, Any]:
        """
        템플릿 JSON 전체 조회.

        Args:
            template_id: 템플릿 ID (파일명, 확장자 제외)

        Returns:
            템플릿 데이터

        Raises:
            TemplateError: INVALID_TEMPLATE_ID, TEMPLATE_NOT_FOUND, TEMPLATE_READ_FAILED
        """
        validate_template_id(template_id)

        path = self.templates_root / f"{template_id}{TEMPLATE_SUFFIX}"
        if not path.is_file():
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"Template '{template_id}' not found",
                template_id=template_id,
            )

        try:
            data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error reading template {path.name}: {e}")
            raise TemplateError(
                ErrorCodes.TEMPLATE_READ_FAILED,
                f"Template '{template_id}' could not be read",
                template_id=template_id,
            ) from e
        return data
