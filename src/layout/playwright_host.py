"""
Playwright 기반 layout host.

실제 브라우저(Chromium 등) 페이지에서 text_fit / title_arrow를 실행하기 위한
LayoutDocument / LayoutElement 구현.

Usage:
    with sync_playwright() as p:
        page = p.chromium.launch().new_page()
        page.set_content(html)
        document = PlaywrightDocument(page)
        init_text_fit(document, TextFitConfig())
        apply_after_settle(document)
"""

from typing import TYPE_CHECKING, Any

from src.layout.dom import BoundingBox

if TYPE_CHECKING:
    from playwright.sync_api import ElementHandle, Page

_COMPUTED_STYLE_JS = "(el, prop) => getComputedStyle(el).getPropertyValue(prop)"
_SET_STYLE_JS = "(el, [prop, value]) => el.style.setProperty(prop, value)"
_BOUNDING_BOX_JS = """el => {
    const r = el.getBoundingClientRect();
    return {top: r.top, bottom: r.bottom, left: r.left, right: r.right};
}"""
_FONTS_READY_JS = "() => document.fonts ? document.fonts.ready.then(() => true) : true"


class PlaywrightElement:
    """ElementHandle 래퍼."""

    def __init__(self, handle: "ElementHandle"):
        self._handle = handle

    def computed_style(self, prop: str) -> str:
        value: str = self._handle.evaluate(_COMPUTED_STYLE_JS, prop)
        return value

    def set_style(self, prop: str, value: str) -> None:
        self._handle.evaluate(_SET_STYLE_JS, [prop, value])

    def bounding_box(self) -> BoundingBox:
        rect = self._handle.evaluate(_BOUNDING_BOX_JS)
        return BoundingBox(
            top=rect["top"],
            bottom=rect["bottom"],
            left=rect["left"],
            right=rect["right"],
        )

    def scroll_height(self) -> float:
        return float(self._handle.evaluate("el => el.scrollHeight"))

    def reflow(self) -> None:
        # offsetHeight 읽기 = 강제 레이아웃
        self._handle.evaluate("el => el.offsetHeight")

    def get_property(self, name: str) -> Any:
        return self._handle.get_property(name).json_value()


class PlaywrightDocument:
    """Page 래퍼."""

    def __init__(self, page: "Page"):
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    def query_selector(self, selector: str) -> PlaywrightElement | None:
        handle = self._page.query_selector(selector)
        return PlaywrightElement(handle) if handle is not None else None

    def get_element_by_id(self, element_id: str) -> PlaywrightElement | None:
        handle = self._page.evaluate_handle(
            "id => document.getElementById(id)", element_id
        ).as_element()
        return PlaywrightElement(handle) if handle is not None else None

    def wait_for_fonts(self) -> None:
        self._page.evaluate(_FONTS_READY_JS)
