"""
Layout 테스트용 fake host.

브라우저 없이 측정값을 고정해 text_fit / title_arrow 알고리즘만 검증.
"""

from collections.abc import Callable
from typing import Any

import pytest

from src.layout.dom import BoundingBox, parse_px


class FakeTextElement:
    """
    font-size가 fits_at 이하일 때만 한 줄이 되는 텍스트 요소.

    line-height: normal (= font-size × 1.2)
    - 한 줄: scroll_height = 1.2 × fs  (<= 1.8 × fs → fits)
    - 두 줄: scroll_height = 2.4 × fs  (> 1.8 × fs → wraps)
    """

    def __init__(self, font_size: float, fits_at: float, line_height: str = "normal"):
        self.styles = {"font-size": f"{font_size:g}px", "line-height": line_height}
        self.fits_at = fits_at
        self.reflows = 0
        self.style_writes: list[str] = []

    @property
    def font_size(self) -> float:
        value = parse_px(self.styles["font-size"])
        assert value is not None
        return value

    def computed_style(self, prop: str) -> str:
        return self.styles.get(prop, "")

    def set_style(self, prop: str, value: str) -> None:
        self.styles[prop] = value
        self.style_writes.append(value)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(top=0, bottom=self.scroll_height())

    def scroll_height(self) -> float:
        lines = 1 if self.font_size <= self.fits_at else 2
        return lines * self.font_size * 1.2

    def reflow(self) -> None:
        self.reflows += 1

    def get_property(self, name: str) -> Any:
        return None


class FakeBoxElement:
    """고정 bounding box + style/property 저장."""

    def __init__(
        self,
        top: float = 0,
        bottom: float = 0,
        styles: dict[str, str] | None = None,
        properties: dict[str, Any] | None = None,
    ):
        self.box = BoundingBox(top=top, bottom=bottom)
        self.styles = dict(styles or {})
        self.properties = dict(properties or {})

    def computed_style(self, prop: str) -> str:
        return self.styles.get(prop, "")

    def set_style(self, prop: str, value: str) -> None:
        self.styles[prop] = value

    def bounding_box(self) -> BoundingBox:
        return self.box

    def scroll_height(self) -> float:
        return self.box.height

    def reflow(self) -> None:
        pass

    def get_property(self, name: str) -> Any:
        return self.properties.get(name)


class FakeContainer(FakeBoxElement):
    """
    padding-bottom이 늘어난 만큼 title을 위로 올리는 컨테이너.

    (flex column + justify-content: flex-end 레이아웃 흉내)
    """

    def __init__(self, title: FakeBoxElement, padding_bottom: str = "60px"):
        super().__init__(styles={"padding-bottom": padding_bottom})
        self.title = title

    def set_style(self, prop: str, value: str) -> None:
        if prop == "padding-bottom":
            old = parse_px(self.styles.get("padding-bottom")) or 0.0
            new = parse_px(value) or 0.0
            delta = new - old
            self.title.box = BoundingBox(
                top=self.title.box.top - delta,
                bottom=self.title.box.bottom - delta,
            )
        super().set_style(prop, value)


class FakeDocument:
    """selector / #id → element 매핑."""

    def __init__(self, elements: dict[str, Any], url: str = "http://localhost/render"):
        self.elements = elements
        self._url = url
        self.fonts_waited = False

    @property
    def url(self) -> str:
        return self._url

    def query_selector(self, selector: str) -> Any:
        return self.elements.get(selector)

    def get_element_by_id(self, element_id: str) -> Any:
        return self.elements.get(f"#{element_id}")

    def wait_for_fonts(self) -> None:
        self.fonts_waited = True


@pytest.fixture
def make_text_element() -> Callable[..., FakeTextElement]:
    return FakeTextElement


@pytest.fixture
def make_box() -> Callable[..., FakeBoxElement]:
    return FakeBoxElement


@pytest.fixture
def make_container() -> Callable[..., FakeContainer]:
    return FakeContainer


@pytest.fixture
def make_document() -> Callable[..., FakeDocument]:
    return FakeDocument


@pytest.fixture
def arrow_page() -> Callable[..., FakeDocument]:
    """
    화살표/제목/컨테이너가 있는 페이지 생성기.

    Usage:
        document = arrow_page(arrow_top=200, title_bottom=190)
    """

    def build(
        arrow_top: float = 200,
        title_bottom: float = 190,
        padding_bottom: str = "60px",
        arrow_src: str | None = "http://localhost/arrows/down.svg",
        with_title: bool = True,
        with_container: bool = True,
    ) -> FakeDocument:
        title = FakeBoxElement(top=title_bottom - 80, bottom=title_bottom)
        arrow = FakeBoxElement(
            top=arrow_top,
            bottom=arrow_top + 100,
            properties={"src": arrow_src},
        )
        elements: dict[str, Any] = {"#arrowImage": arrow}
        if with_title:
            elements[".title"] = title
        if with_container:
            elements[".container"] = FakeContainer(title, padding_bottom)
        return FakeDocument(elements)

    return build
