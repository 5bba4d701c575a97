"""
Domain Constants: 에셋/모듈 전역 상수.

허용 확장자, 업로드 용량 제한, 경로 상수 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Asset Kinds (에셋 종류)
# =============================================================================
# public/
# ├── fonts/   # .ttf .otf .woff .woff2
# └── logos/   # .svg .png .jpg .jpeg .webp .gif

ASSET_KIND_FONTS = "fonts"
ASSET_KIND_LOGOS = "logos"

# =============================================================================
# Allowed Extensions (허용 확장자, 소문자)
# =============================================================================

FONT_ALLOWED_EXTENSIONS = (".ttf", ".otf", ".woff", ".woff2")
LOGO_ALLOWED_EXTENSIONS = (".svg", ".png", ".jpg", ".jpeg", ".webp", ".gif")

ASSET_ALLOWED_EXTENSIONS = {
    ASSET_KIND_FONTS: FONT_ALLOWED_EXTENSIONS,
    ASSET_KIND_LOGOS: LOGO_ALLOWED_EXTENSIONS,
}

# =============================================================================
# Upload Limits (업로드 용량 제한)
# =============================================================================

ASSET_MAX_SIZE_MB = {
    ASSET_KIND_FONTS: 10,
    ASSET_KIND_LOGOS: 10,
}


# =============================================================================
# Paths (작업 디렉터리 기준)
# =============================================================================

DEFAULT_PUBLIC_ROOT = "public"
DEFAULT_TEMPLATES_ROOT = "templates"
DEFAULT_CONFIG_FILENAME = "default.yaml"
