"""
Layout host interface: "렌더된 박스 측정" + "스타일 적용" 추상화.

레이아웃 보정 루틴(text_fit, title_arrow)은 이 Protocol에만 의존한다.
구현체:
- playwright_host.PlaywrightDocument (실제 브라우저)
- 테스트의 fake element (고정 측정값)
"""

import re
from dataclasses import dataclass
from typing import Any, Protocol

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class BoundingBox:
    """getBoundingClientRect() 결과 (viewport 기준 px)."""
    top: float
    bottom: float
    left: float = 0.0
    right: float = 0.0

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def width(self) -> float:
        return self.right - self.left


class LayoutElement(Protocol):
    """측정/스타일 변경이 가능한 요소 하나."""

    def computed_style(self, prop: str) -> str:
        """계산된 CSS 값 (예: "64px", "normal")."""
        ...

    def set_style(self, prop: str, value: str) -> None:
        """inline style 설정."""
        ...

    def bounding_box(self) -> BoundingBox:
        ...

    def scroll_height(self) -> float:
        ...

    def reflow(self) -> None:
        """강제 레이아웃 (다음 측정값을 최신으로)."""
        ...

    def get_property(self, name: str) -> Any:
        """DOM 프로퍼티 (예: img.src는 해석된 절대 URL)."""
        ...


class LayoutDocument(Protocol):
    """페이지 하나."""

    @property
    def url(self) -> str:
        ...

    def query_selector(self, selector: str) -> LayoutElement | None:
        ...

    def get_element_by_id(self, element_id: str) -> LayoutElement | None:
        ...

    def wait_for_fonts(self) -> None:
        """document.fonts.ready 대기."""
        ...


def parse_px(value: str | float | None) -> float | None:
    """
    CSS 길이 → 숫자 (parseFloat 동작).

    "64px" → 64.0, "1.5" → 1.5, "normal" → None
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)

    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    return float(match.group(1))
