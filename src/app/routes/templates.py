"""
Templates Routes: 템플릿 갤러리.

- GET /templates               → 템플릿 갤러리 화면
- GET /api/templates           → {success, templates}
- GET /api/templates/{id}      → {success, template}
"""

import html
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from src.domain.errors import ErrorCodes, TemplateError
from src.templates.catalog import TemplateCatalog

logger = logging.getLogger(__name__)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def get_catalog(request: Request) -> TemplateCatalog:
    """Request에서 TemplateCatalog 가져오기."""
    return request.app.state.template_catalog


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("", response_class=HTMLResponse)
async def templates_page(request: Request) -> HTMLResponse:
    """템플릿 갤러리 화면."""
    templates = get_catalog(request).list_templates()

    if not templates:
        cards = "<p class='empty'>등록된 템플릿이 없습니다.</p>"
    else:
        cards = "<ul class='template-gallery'>"
        for template in templates:
            preview = (
                f"<img src=\"{html.escape(template.preview, quote=True)}\" alt=\"\" />"
                if template.preview
                else ""
            )
            cards += f"""
            <li>
                {preview}
                <strong>{html.escape(template.name)}</strong>
                <p>{html.escape(template.description)}</p>
                <code>{html.escape(template.id)}</code>
            </li>
            """
        cards += "</ul>"

    return HTMLResponse(content=f"""
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>템플릿</title>
</head>
<body>
    <div class="container">
        <header>
            <h1>🖼️ 템플릿</h1>
            <a href="/dashboard/fonts" class="button">폰트 관리</a>
        </header>
        {cards}
    </div>
</body>
</html>
    """)


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_templates(request: Request) -> Any:
    """템플릿 목록."""
    try:
        templates = get_catalog(request).list_templates()
    except Exception as e:
        logger.error(f"Error reading templates: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to load templates"},
        )

    return {
        "success": True,
        "templates": [template.to_dict() for template in templates],
    }


@api_router.get("/{template_id}")
async def get_template(request: Request, template_id: str) -> Any:
    """템플릿 상세 조회."""
    try:
        template = get_catalog(request).get(template_id)
    except TemplateError as e:
        if e.code == ErrorCodes.TEMPLATE_NOT_FOUND:
            status_code = 404
        elif e.code == ErrorCodes.TEMPLATE_READ_FAILED:
            status_code = 500
        else:
            status_code = 400
        return JSONResponse(
            status_code=status_code,
            content={"success": False, "error": e.message, "code": e.code},
        )

    return {"success": True, "template": template}
