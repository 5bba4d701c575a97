"""
Layout layer: 렌더된 페이지의 시각 보정 루틴.

역할:
- text_fit: 한 줄 텍스트 font-size 자동 축소
- title_arrow: 제목-화살표 간격 확보
- dom: 측정/스타일 host Protocol
- playwright_host: 실제 브라우저용 host (playwright 선택 의존성)
"""

from .dom import BoundingBox, LayoutDocument, LayoutElement, parse_px
from .text_fit import (
    FitOutcome,
    TextFitConfig,
    TextFitResult,
    fit_text_to_single_line,
    init_text_fit,
)
from .title_arrow import (
    TitleArrowConfig,
    TitleArrowResult,
    adjust_title_arrow,
    apply_after_settle,
)

__all__ = [
    # dom
    "BoundingBox",
    "LayoutDocument",
    "LayoutElement",
    "parse_px",
    # text_fit
    "FitOutcome",
    "TextFitConfig",
    "TextFitResult",
    "fit_text_to_single_line",
    "init_text_fit",
    # title_arrow
    "TitleArrowConfig",
    "TitleArrowResult",
    "adjust_title_arrow",
    "apply_after_settle",
]
