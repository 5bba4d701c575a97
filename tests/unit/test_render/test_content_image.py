"""
test_content_image.py - Content Image 모듈 렌더 테스트

검증:
- single / comparison HTML
- 숨김 조건 (disabled, url 없음)
- base_url 기준 절대 URL
- CSS: disabled / single / comparison
"""

from src.domain.schemas import ContentImageData, ContentImageShadow, RenderContext
from src.render.content_image import (
    align_items_for,
    render_content_image,
    render_content_image_css,
    render_content_image_html,
    shadow_css,
)

CDN = RenderContext(base_url="https://cdn.example.com/")

# =============================================================================
# HTML
# =============================================================================

class TestRenderHtml:
    """HTML 조각 테스트."""

    def test_single_mode(self):
        html = render_content_image_html(
            ContentImageData(mode="single", url="https://a.com/x.png")
        )

        assert '<img class="content-image" src="https://a.com/x.png" alt="Content" />' in html
        assert "comparison-row" not in html

    def test_single_resolves_relative_url(self):
        html = render_content_image_html(
            {"enabled": True, "mode": "single", "url": "photo.png"}, CDN
        )

        assert 'src="https://cdn.example.com/photo.png"' in html

    def test_comparison_mode(self):
        html = render_content_image_html(
            {"mode": "comparison", "url": "a.png", "url2": "b.png"}, CDN
        )

        assert html.count('<div class="comparison-image">') == 2
        assert '<img src="https://cdn.example.com/a.png" alt="Image 1" />' in html
        assert '<img src="https://cdn.example.com/b.png" alt="Image 2" />' in html

    def test_comparison_image_order(self):
        html = render_content_image_html(
            ContentImageData(mode="comparison", url="first.png", url2="second.png")
        )

        assert html.index("first.png") < html.index("second.png")

    def test_unknown_mode_renders_comparison(self, caplog):
        html = render_content_image_html(
            ContentImageData(mode="carousel", url="a.png", url2="b.png")
        )

        assert "comparison-row" in html
        assert "carousel" in caplog.text

    def test_disabled_returns_empty(self):
        assert render_content_image_html(
            ContentImageData(enabled=False, url="a.png")
        ) == ""

    def test_no_urls_returns_empty(self):
        assert render_content_image_html(ContentImageData(mode="single")) == ""
        assert render_content_image_html(ContentImageData(mode="comparison")) == ""

    def test_comparison_with_only_second_url(self):
        """url2만 있어도 섹션 표시, 빈 url은 src=""."""
        html = render_content_image_html(
            ContentImageData(mode="comparison", url2="https://a.com/b.png")
        )

        assert 'src="" alt="Image 1"' in html
        assert 'src="https://a.com/b.png" alt="Image 2"' in html

    def test_absolute_url_ignores_base(self):
        html = render_content_image_html(
            ContentImageData(url="http://other.com/x.png"), CDN
        )

        assert 'src="http://other.com/x.png"' in html

    def test_attribute_escaped(self):
        html = render_content_image_html(
            ContentImageData(url='x.png" onerror="alert(1)')
        )

        assert 'onerror="alert' not in html
        assert "&quot;" in html

    def test_input_not_mutated(self):
        data = {"mode": "single", "url": "photo.png"}

        render_content_image_html(data, CDN)

        assert data == {"mode": "single", "url": "photo.png"}


# =============================================================================
# CSS
# =============================================================================

class TestRenderCss:
    """CSS 조각 테스트."""

    def test_disabled_hides_section(self):
        css = render_content_image_css(ContentImageData(enabled=False))

        assert "display: none;" in css
        assert ".content-image-section" in css

    def test_single_defaults(self):
        css = render_content_image_css(ContentImageData(url="a.png"))

        assert "display: flex;" in css
        assert "border-radius: 20px;" in css
        assert "object-fit: cover;" in css
        assert "box-shadow: none;" in css
        assert "flex-basis: 50%;" in css

    def test_single_without_url_hidden(self):
        css = render_content_image_css(ContentImageData(url=""))

        assert "display: none;" in css

    def test_comparison_gap(self):
        css = render_content_image_css(
            {"mode": "comparison", "url": "a.png", "comparisonGap": 24}
        )

        assert ".comparison-row" in css
        assert "gap: 24px;" in css

    def test_position_alignment(self):
        css = render_content_image_css(
            ContentImageData(url="a.png", position="top")
        )

        assert "align-items: flex-start;" in css
        assert "object-position: top;" in css

    def test_shadow(self):
        css = render_content_image_css({
            "url": "a.png",
            "shadow": {"enabled": True, "blur": 10, "spread": 2, "color": "#000"},
        })

        assert "box-shadow: 0 0 10px 2px #000;" in css


class TestHelpers:
    def test_align_items(self):
        assert align_items_for("top") == "flex-start"
        assert align_items_for("bottom") == "flex-end"
        assert align_items_for("center") == "center"
        assert align_items_for("unknown") == "center"

    def test_shadow_disabled(self):
        assert shadow_css(ContentImageShadow()) == "none"


class TestRenderContentImage:
    def test_returns_html_and_css(self):
        result = render_content_image({"url": "a.png"}, CDN)

        assert set(result) == {"html", "css"}
        assert "https://cdn.example.com/a.png" in result["html"]
