"""
@font-face CSS 생성: 업로드된 폰트 → 이미지 생성 HTML에 주입.

흐름:
1. 모듈 데이터에서 font-family 수집 (시스템 폰트 제외)
2. 폰트 이름 → public/fonts/ 파일 매칭 (weight/style 키워드 인식)
3. @font-face 규칙 생성 → <head>에 주입
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import quote

from src.core.urls import resolve_url
from src.domain.schemas import AssetRecord

# @font-face 없이 쓸 수 있는 폰트
SYSTEM_FONTS = (
    "Arial", "Helvetica", "Times New Roman", "Times", "Courier New",
    "Courier", "Verdana", "Georgia", "Palatino", "Garamond",
    "Comic Sans MS", "Trebuchet MS", "Impact", "Tahoma", "Geneva",
    "sans-serif", "serif", "monospace", "cursive", "fantasy",
    "system-ui", "-apple-system", "BlinkMacSystemFont", "Segoe UI",
    "Roboto", "Oxygen", "Ubuntu", "Cantarell", "Fira Sans",
    "Droid Sans", "Helvetica Neue",
)

# 긴(구체적인) 키워드가 먼저 와야 함: extrabold ⊃ bold, semibold ⊃ bold
WEIGHT_KEYWORDS = (
    ("thin", 100),
    ("extralight", 200),
    ("ultralight", 200),
    ("light", 300),
    ("regular", 400),
    ("normal", 400),
    ("medium", 500),
    ("semibold", 600),
    ("demibold", 600),
    ("extrabold", 800),
    ("ultrabold", 800),
    ("bold", 700),
    ("black", 900),
    ("heavy", 900),
)
STYLE_KEYWORDS = ("italic", "oblique")

FONT_FORMATS = {
    ".ttf": "truetype",
    ".otf": "opentype",
    ".woff": "woff",
    ".woff2": "woff2",
}

FONT_FAMILY_DECLARATION = re.compile(r"font-family\s*:\s*([^;]+)", re.IGNORECASE)


@dataclass(frozen=True)
class FontDefinition:
    """@font-face 한 개."""
    family: str
    filename: str
    weight: int | None = None
    style: str | None = None


# =============================================================================
# font-family 파싱
# =============================================================================

def is_system_font(font_name: str) -> bool:
    clean_name = font_name.strip().lower()
    return any(sf.lower() in clean_name for sf in SYSTEM_FONTS)


def parse_font_family(font_family: str) -> list[str]:
    """
    CSS font-family 값 → 폰트 이름 목록.

    Example:
        >>> parse_font_family("'Gilroy Black', Arial, sans-serif")
        ['Gilroy Black', 'Arial', 'sans-serif']
    """
    fonts = []
    for font in font_family.split(","):
        name = font.strip().strip("'\"")
        if name:
            fonts.append(name)
    return fonts


def extract_custom_fonts(data: Any) -> set[str]:
    """
    모듈 데이터(중첩 dict/list)에서 커스텀 폰트 이름 수집.

    - dict의 fontFamily / font_family 값
    - 문자열 안의 "font-family: ..." 선언
    """
    custom_fonts: set[str] = set()

    def add_family(font_family: str) -> None:
        for font in parse_font_family(font_family):
            if not is_system_font(font):
                custom_fonts.add(font)

    def visit(value: Any) -> None:
        if isinstance(value, str):
            match = FONT_FAMILY_DECLARATION.search(value)
            if match:
                add_family(match.group(1))
        elif isinstance(value, dict):
            for key in ("fontFamily", "font_family"):
                family = value.get(key)
                if isinstance(family, str):
                    add_family(family)
            for nested in value.values():
                visit(nested)
        elif isinstance(value, (list, tuple)):
            for nested in value:
                visit(nested)

    visit(data)
    return custom_fonts


# =============================================================================
# weight / style 감지
# =============================================================================

def detect_font_weight(filename: str) -> int:
    """파일명 키워드로 font-weight 추정 (기본 400)."""
    lower = filename.lower()
    for keyword, weight in WEIGHT_KEYWORDS:
        if keyword in lower:
            return weight
    return 400


def detect_font_style(filename: str) -> str:
    lower = filename.lower()
    for keyword in STYLE_KEYWORDS:
        if keyword in lower:
            return keyword
    return "normal"


def normalize_font_name(font_name: str) -> FontDefinition:
    """
    폰트 이름에서 weight/style 키워드 제거.

    "Product Sans Bold Italic" → family="Product Sans", weight=700, style="italic"
    filename은 비워 둔다.
    """
    family = font_name
    weight = None
    style = None

    for keyword, keyword_weight in WEIGHT_KEYWORDS:
        pattern = re.compile(rf"\b{keyword}\b", re.IGNORECASE)
        if pattern.search(family):
            weight = keyword_weight
            family = pattern.sub("", family).strip()

    for keyword in STYLE_KEYWORDS:
        pattern = re.compile(rf"\b{keyword}\b", re.IGNORECASE)
        if pattern.search(family):
            style = keyword
            family = pattern.sub("", family).strip()

    # "Gilroy-Black" → "Gilroy-" → "Gilroy"
    family = re.sub(r"\s+", " ", family).strip(" -_")
    return FontDefinition(family=family, filename="", weight=weight, style=style)


def _compact(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name.lower())


def map_font_name_to_file(
    font_name: str,
    available_fonts: Iterable[str],
) -> FontDefinition | None:
    """
    폰트 이름 → 업로드된 폰트 파일 매칭.

    우선순위:
    1. 정확히 일치 (영숫자만 비교)
    2. <이름>...regular (italic 제외)
    3. 부분 일치

    Returns:
        FontDefinition (매칭 실패 시 None)
    """
    files = list(available_fonts)
    normalized = normalize_font_name(font_name)
    clean_name = _compact(font_name)

    matched = next((f for f in files if _compact(Path(f).stem) == clean_name), None)

    if matched is None:
        regular_pattern = re.compile(rf"^{re.escape(clean_name)}.*regular", re.IGNORECASE)
        matched = next(
            (
                f for f in files
                if regular_pattern.search(_compact(Path(f).stem))
                and "italic" not in f.lower()
            ),
            None,
        )

    if matched is None:
        for f in files:
            stem = _compact(Path(f).stem)
            if stem and (clean_name in stem or stem in clean_name):
                matched = f
                break

    if matched is None:
        return None

    return FontDefinition(
        family=normalized.family,
        filename=matched,
        weight=normalized.weight or detect_font_weight(matched),
        style=normalized.style or detect_font_style(matched),
    )


def font_definitions_from_records(records: Iterable[AssetRecord]) -> list[FontDefinition]:
    """업로드된 폰트 목록 → 파일별 FontDefinition."""
    definitions = []
    for record in records:
        normalized = normalize_font_name(record.name)
        definitions.append(
            FontDefinition(
                family=normalized.family or record.name,
                filename=record.filename,
                weight=normalized.weight or detect_font_weight(record.filename),
                style=normalized.style or detect_font_style(record.filename),
            )
        )
    return definitions


# =============================================================================
# CSS 생성 / 주입
# =============================================================================

def css_format_for(filename: str) -> str:
    return FONT_FORMATS.get(Path(filename).suffix.lower(), "truetype")


def css_string(value: str) -> str:
    """작은따옴표 CSS 문자열 내부용 escape ("O'Neil" → "O\\'Neil")."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def generate_font_face_css(
    fonts: Iterable[FontDefinition],
    base_url: str | None = None,
) -> str:
    """
    @font-face 규칙 생성.

    Args:
        fonts: FontDefinition 목록
        base_url: 폰트 URL 절대화 기준 (없으면 /fonts/... 상대 경로)

    Returns:
        빈 줄로 구분된 @font-face 규칙들
    """
    rules = []
    for font in fonts:
        url = resolve_url(f"/fonts/{quote(font.filename, safe='')}", base_url)
        rules.append(
            "@font-face {\n"
            f"  font-family: '{css_string(font.family)}';\n"
            f"  src: url('{url}') format('{css_format_for(font.filename)}');\n"
            f"  font-weight: {font.weight or 'normal'};\n"
            f"  font-style: {font.style or 'normal'};\n"
            "  font-display: swap;\n"
            "}"
        )
    return "\n\n".join(rules)


def build_font_face_css(
    records: Iterable[AssetRecord],
    base_url: str | None = None,
) -> str:
    """업로드된 폰트 전체에 대한 스타일시트."""
    return generate_font_face_css(font_definitions_from_records(records), base_url)


def inject_font_face(html_doc: str, font_face_css: str) -> str:
    """
    HTML에 @font-face CSS 주입.

    </head> 앞 → 기존 <style> 시작 → 문서 맨 앞 순으로 시도.
    """
    if not font_face_css:
        return html_doc

    if "</head>" in html_doc:
        return html_doc.replace("</head>", f"\n<style>\n{font_face_css}\n</style>\n</head>", 1)

    if "<style>" in html_doc:
        return html_doc.replace("<style>", f"<style>\n{font_face_css}\n", 1)

    return f"<style>\n{font_face_css}\n</style>\n{html_doc}"
