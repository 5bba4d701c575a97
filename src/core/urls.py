"""
URL 정규화: 상대 에셋 URL → 절대 URL.

이미지 생성용 HTML은 별도 렌더러(headless 브라우저 등)에서 열리므로
/fonts/..., logo.png 같은 상대 경로를 base_url 기준 절대 URL로 바꿔야 한다.
"""

ABSOLUTE_SCHEMES = ("http://", "https://")


def is_absolute_url(url: str) -> bool:
    """http:// 또는 https:// 로 시작하는지 여부."""
    return url.startswith(ABSOLUTE_SCHEMES)


def resolve_url(url: str, base_url: str | None = None) -> str:
    """
    상대 URL을 base_url 기준 절대 URL로 변환.

    규칙:
    - 이미 절대 URL이면 그대로 반환
    - base_url이 없으면 그대로 반환 (상대 경로 유지)
    - base_url 끝의 / 하나 제거 + url 앞에 / 정확히 하나

    Args:
        url: 변환할 URL
        base_url: scheme + host (예: "https://cdn.example.com/")

    Returns:
        변환된 URL (예외 없음)

    Example:
        >>> resolve_url("logo.png", "https://cdn.example.com/")
        'https://cdn.example.com/logo.png'
    """
    if is_absolute_url(url):
        return url

    if not base_url:
        return url

    clean_base = base_url[:-1] if base_url.endswith("/") else base_url
    clean_url = url if url.startswith("/") else f"/{url}"

    return f"{clean_base}{clean_url}"
