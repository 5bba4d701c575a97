"""
Error definitions for asset handling.

규칙:
- 조용한 실패 금지 → AssetError로 명시적 실패
- 검증 실패는 I/O 전에 reject
- 디렉터리 없음은 에러가 아님 (빈 목록)
"""

from typing import Any


class AssetError(Exception):
    """
    에셋 목록/업로드 중 발생하는 에러.

    Usage:
        raise AssetError("INVALID_EXTENSION", "Invalid file type", filename=name)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    @property
    def is_client_error(self) -> bool:
        """요청 입력 문제(400)인지 여부."""
        return self.code in ErrorCodes.CLIENT_ERRORS

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class TemplateError(Exception):
    """템플릿 카탈로그 관련 에러."""

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Upload (400) ===
    MISSING_FILE = "MISSING_FILE"
    INVALID_FILENAME = "INVALID_FILENAME"
    INVALID_EXTENSION = "INVALID_EXTENSION"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"

    # === Filesystem (500) ===
    WRITE_FAILED = "WRITE_FAILED"
    LIST_FAILED = "LIST_FAILED"

    # === Templates ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    INVALID_TEMPLATE_ID = "INVALID_TEMPLATE_ID"
    TEMPLATE_READ_FAILED = "TEMPLATE_READ_FAILED"

    # === Layout (warning, not raised) ===
    TARGET_NOT_FOUND = "TARGET_NOT_FOUND"
    MAX_ATTEMPTS_REACHED = "MAX_ATTEMPTS_REACHED"

    CLIENT_ERRORS = frozenset({
        MISSING_FILE,
        INVALID_FILENAME,
        INVALID_EXTENSION,
        FILE_TOO_LARGE,
    })
