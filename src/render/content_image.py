"""
Content Image 모듈 렌더러: HTML + CSS 조각 생성.

모드:
- single: 이미지 1장
- comparison: 이미지 2장 나란히 ("single" 외의 모든 값)

규칙:
- enabled=false 또는 url/url2 모두 비어 있으면 HTML은 빈 문자열
- url/url2는 RenderContext.base_url 기준 절대 URL로 변환
- 순수 함수: 파일/네트워크 I/O 없음
"""

import html
import logging
from typing import Any

from src.core.urls import resolve_url
from src.domain.schemas import (
    ContentImageData,
    ContentImageMode,
    ContentImageShadow,
    RenderContext,
)

logger = logging.getLogger(__name__)

KNOWN_MODES = {mode.value for mode in ContentImageMode}

ALIGN_ITEMS = {
    "top": "flex-start",
    "bottom": "flex-end",
}


def _attr(value: str) -> str:
    """HTML 속성값 escape."""
    return html.escape(value, quote=True)


def _coerce(data: ContentImageData | dict[str, Any]) -> ContentImageData:
    if isinstance(data, ContentImageData):
        return data
    return ContentImageData.from_dict(data)


# =============================================================================
# HTML
# =============================================================================

def render_content_image_html(
    data: ContentImageData | dict[str, Any],
    context: RenderContext | None = None,
) -> str:
    """
    Content Image 섹션 HTML 생성.

    Args:
        data: 모듈 데이터 (ContentImageData 또는 dict)
        context: 렌더 컨텍스트 (base_url)

    Returns:
        HTML 조각 (숨김 조건이면 빈 문자열)
    """
    content_image = _coerce(data)

    if not content_image.enabled:
        return ""

    # url/url2 모두 없으면 섹션 숨김
    if not content_image.url and not content_image.url2:
        return ""

    base_url = context.base_url if context else None
    absolute_url = resolve_url(content_image.url, base_url)
    absolute_url2 = resolve_url(content_image.url2 or "", base_url)

    if content_image.is_single:
        return f"""
      <!-- ===== CONTENT IMAGE SECTION ===== -->
      <div class="content-image-section">
        <img class="content-image" src="{_attr(absolute_url)}" alt="Content" />
      </div>
    """

    if content_image.mode not in KNOWN_MODES:
        logger.warning(
            f"Unknown content image mode {content_image.mode!r}, rendering as comparison"
        )

    return f"""
    <!-- ===== CONTENT IMAGE SECTION - COMPARISON MODE ===== -->
    <div class="content-image-section">
      <div class="comparison-row">
        <div class="comparison-image">
          <img src="{_attr(absolute_url)}" alt="Image 1" />
        </div>
        <div class="comparison-image">
          <img src="{_attr(absolute_url2)}" alt="Image 2" />
        </div>
      </div>
    </div>
  """


# =============================================================================
# CSS
# =============================================================================

def align_items_for(position: str) -> str:
    """position (top/center/bottom) → CSS align-items."""
    return ALIGN_ITEMS.get(position, "center")


def shadow_css(shadow: ContentImageShadow) -> str:
    """box-shadow 값."""
    if not shadow.enabled:
        return "none"
    return f"0 0 {shadow.blur}px {shadow.spread}px {shadow.color}"


def render_content_image_css(data: ContentImageData | dict[str, Any]) -> str:
    """
    Content Image 섹션 CSS 생성.

    Args:
        data: 모듈 데이터

    Returns:
        CSS 문자열
    """
    content_image = _coerce(data)

    if not content_image.enabled:
        return """
      /* Content Image Module - Disabled */
      .content-image-section {
        display: none;
      }
    """

    box_shadow = shadow_css(content_image.shadow)
    align_items = align_items_for(content_image.position)
    layout_width = content_image.layout_width or "auto"
    align_self = content_image.align_self or "stretch"

    if content_image.is_single:
        display = "flex" if content_image.url else "none"
        return f"""
      /* ===== CONTENT IMAGE MODULE (z-index: 5) ===== */
      .content-image-section {{
        flex: 1 1 auto;
        flex-basis: {layout_width};
        align-self: {align_self};
        min-width: 0;
        flex-shrink: 1;
        z-index: 5;
        position: relative;
        display: {display};
        min-height: 0;
        align-items: {align_items};
        justify-content: center;
      }}

      .content-image {{
        max-width: {content_image.max_width}%;
        max-height: {content_image.max_height}%;
        width: auto;
        height: auto;
        object-fit: {content_image.object_fit};
        object-position: {content_image.position};
        border-radius: {content_image.border_radius}px;
        box-shadow: {box_shadow};
        display: block;
      }}

      .content-image[src=""] {{
        display: none;
      }}
    """

    display = "flex" if content_image.url or content_image.url2 else "none"
    return f"""
    /* ===== CONTENT IMAGE MODULE - COMPARISON MODE (z-index: 5) ===== */
    .content-image-section {{
      flex: 1 1 auto;
      flex-basis: {layout_width};
      align-self: {align_self};
      min-width: 0;
      flex-shrink: 1;
      z-index: 5;
      position: relative;
      display: {display};
      min-height: 0;
    }}

    .comparison-row {{
      width: 100%;
      height: 100%;
      display: flex;
      gap: {content_image.comparison_gap}px;
      align-items: {align_items};
      justify-content: center;
    }}

    .comparison-image {{
      flex: 1;
      max-width: {content_image.max_width}%;
      max-height: {content_image.max_height}%;
      border-radius: {content_image.border_radius}px;
      position: relative;
      display: flex;
      align-items: {align_items};
      justify-content: center;
    }}

    .comparison-image img {{
      width: 100%;
      height: 100%;
      object-fit: {content_image.object_fit};
      object-position: {content_image.position};
      box-shadow: {box_shadow};
      display: block;
    }}

    .comparison-image img[src=""] {{
      display: none;
    }}
  """


def render_content_image(
    data: ContentImageData | dict[str, Any],
    context: RenderContext | None = None,
) -> dict[str, str]:
    """HTML + CSS 한 번에 생성 (API 응답용)."""
    content_image = _coerce(data)
    return {
        "html": render_content_image_html(content_image, context),
        "css": render_content_image_css(content_image),
    }
