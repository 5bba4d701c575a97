"""
Modules Routes: 이미지 모듈 HTML/CSS 조각 생성.

- POST /api/modules/content-image  {data, context} → {success, html, css}
- GET  /api/modules/layout-config  → 클라이언트 레이아웃 스크립트 설정
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from src.domain.schemas import ContentImageData, RenderContext
from src.layout.text_fit import TextFitConfig
from src.layout.title_arrow import TitleArrowConfig
from src.render.content_image import render_content_image

logger = logging.getLogger(__name__)

api_router = APIRouter()


def _validate_content_image(data: dict[str, Any]) -> None:
    """url/url2/mode는 문자열이어야 함."""
    for key in ("url", "url2", "mode"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")


def _validate_context(context: Any) -> None:
    """context는 객체, base_url/baseUrl은 문자열 또는 null."""
    if context is None:
        return
    if not isinstance(context, dict):
        raise ValueError("'context' must be an object")
    for key in ("base_url", "baseUrl"):
        value = context.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"'{key}' must be a string")


@api_router.post("/content-image")
async def content_image(
    request: Request,
    payload: dict[str, Any] = Body(...),
) -> Any:
    """
    Content Image 모듈 렌더.

    payload:
        data: ContentImageData (camelCase/snake_case)
        context: {baseUrl} (선택)
    """
    raw_data = payload.get("data")
    if not isinstance(raw_data, dict):
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "'data' must be an object"},
        )

    try:
        _validate_content_image(raw_data)
        _validate_context(payload.get("context"))
        data = ContentImageData.from_dict(raw_data)
        context = RenderContext.from_dict(payload.get("context"))
    except (TypeError, ValueError, AttributeError) as e:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": f"Invalid module data: {e}"},
        )

    try:
        rendered = render_content_image(data, context)
    except Exception as e:
        logger.error(f"Error rendering content image: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to render module"},
        )

    return {"success": True, **rendered}


@api_router.get("/layout-config")
async def layout_config(request: Request) -> dict[str, Any]:
    """
    레이아웃 보정 설정.

    페이지가 window.textFitConfig 등으로 주입할 값 (camelCase).
    """
    config = request.app.state.config
    text_fit = TextFitConfig.from_dict(config.get("text_fit") or {})
    title_arrow = TitleArrowConfig.from_dict(config.get("title_arrow"))

    return {
        "success": True,
        "textFit": {
            "enabled": text_fit.enabled,
            "targets": text_fit.targets,
            "minFontSize": text_fit.min_font_size,
            "step": text_fit.step,
            "maxAttempts": text_fit.max_attempts,
        },
        "titleArrow": {
            "requiredGap": title_arrow.required_gap,
            "defaultPaddingBottom": title_arrow.default_padding_bottom,
            "settleDelayMs": round(title_arrow.settle_delay * 1000),
        },
    }
