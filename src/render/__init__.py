"""
Render layer: 이미지 생성용 HTML/CSS 조각.

역할:
- 모듈 데이터 + RenderContext → HTML/CSS 문자열
- 업로드 폰트 → @font-face CSS
"""

from .content_image import (
    render_content_image,
    render_content_image_css,
    render_content_image_html,
)
from .font_faces import (
    FontDefinition,
    build_font_face_css,
    extract_custom_fonts,
    generate_font_face_css,
    inject_font_face,
    map_font_name_to_file,
)

__all__ = [
    # content_image
    "render_content_image",
    "render_content_image_html",
    "render_content_image_css",
    # font_faces
    "FontDefinition",
    "build_font_face_css",
    "extract_custom_fonts",
    "generate_font_face_css",
    "inject_font_face",
    "map_font_name_to_file",
]
