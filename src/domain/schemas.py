"""
Data schemas for assets and image modules.

규칙:
- 필드명: Python 쪽은 snake_case, JSON 입력은 camelCase도 허용
- AssetRecord는 목록 조회 때마다 새로 생성 (저장된 인덱스 없음)
- ContentImageData는 호출자 소유, composer는 읽기만 함
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.constants import ASSET_KIND_FONTS, ASSET_KIND_LOGOS

# =============================================================================
# Assets
# =============================================================================

class AssetKind(str, Enum):
    """에셋 종류 (= public/ 하위 디렉터리 이름)."""
    FONTS = ASSET_KIND_FONTS
    LOGOS = ASSET_KIND_LOGOS


@dataclass(frozen=True)
class AssetRecord:
    """폰트/로고 파일 하나의 메타데이터."""
    name: str  # 확장자 제외 파일명
    filename: str
    url: str  # 공개 경로 (/fonts/xxx.ttf)
    extension: str  # 디스크상의 확장자 (대소문자 유지)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "filename": self.filename,
            "url": self.url,
            "extension": self.extension,
        }


@dataclass(frozen=True)
class UploadResult:
    """업로드 결과."""
    filename: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"filename": self.filename, "url": self.url}


# =============================================================================
# Content Image Module
# =============================================================================

class ContentImageMode(str, Enum):
    """표시 모드."""
    SINGLE = "single"
    COMPARISON = "comparison"  # 2장 나란히


@dataclass
class ContentImageShadow:
    """이미지 그림자 설정."""
    enabled: bool = False
    blur: float = 20
    spread: float = 0
    color: str = "rgba(0, 0, 0, 0.3)"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ContentImageShadow":
        if not data:
            return cls()
        return cls(
            enabled=bool(data.get("enabled", False)),
            blur=data.get("blur", 20),
            spread=data.get("spread", 0),
            color=data.get("color", "rgba(0, 0, 0, 0.3)"),
        )


@dataclass
class ContentImageData:
    """
    Content Image 모듈 데이터.

    mode는 문자열 그대로 보관한다. "single" 외의 값은 composer에서
    comparison으로 렌더링된다.
    """
    enabled: bool = True
    mode: str = ContentImageMode.SINGLE.value
    url: str = ""
    url2: str = ""

    # === 스타일 ===
    border_radius: float = 20  # px
    max_width: float = 100  # %
    max_height: float = 100  # %
    object_fit: str = "cover"  # cover, contain, fill
    position: str = "center"  # top, center, bottom
    shadow: ContentImageShadow = field(default_factory=ContentImageShadow)
    comparison_gap: float = 40  # px
    layout_width: str = "50%"
    align_self: str = "stretch"

    @property
    def is_single(self) -> bool:
        return self.mode == ContentImageMode.SINGLE.value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentImageData":
        """camelCase/snake_case 키 모두 허용."""

        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        mode = data.get("mode", ContentImageMode.SINGLE.value)
        if isinstance(mode, ContentImageMode):
            mode = mode.value

        return cls(
            enabled=bool(data.get("enabled", True)),
            mode=mode,
            url=data.get("url") or "",
            url2=data.get("url2") or "",
            border_radius=pick("border_radius", "borderRadius", 20),
            max_width=pick("max_width", "maxWidth", 100),
            max_height=pick("max_height", "maxHeight", 100),
            object_fit=pick("object_fit", "objectFit", "cover"),
            position=data.get("position", "center"),
            shadow=ContentImageShadow.from_dict(data.get("shadow")),
            comparison_gap=pick("comparison_gap", "comparisonGap", 40),
            layout_width=pick("layout_width", "layoutWidth", "50%"),
            align_self=pick("align_self", "alignSelf", "stretch"),
        )


@dataclass(frozen=True)
class RenderContext:
    """렌더 호출별 컨텍스트. base_url은 상대 URL → 절대 URL 변환에만 사용."""
    base_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "RenderContext":
        if not data:
            return cls()
        return cls(base_url=data.get("base_url") or data.get("baseUrl"))


# =============================================================================
# Templates
# =============================================================================

@dataclass(frozen=True)
class TemplateSummary:
    """templates/*.json 목록 항목."""
    id: str
    name: str
    description: str = ""
    preview: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "preview": self.preview,
        }
