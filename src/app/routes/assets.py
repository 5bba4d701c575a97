"""
Assets Routes: 폰트/로고 목록 및 업로드.

- GET  /dashboard/fonts       → 폰트 관리 화면
- GET  /dashboard/fonts/list  → 폰트 목록 (HTML 조각, HTMX)
- GET  /assets/fonts          → {success, fonts}
- GET  /assets/logos          → {success, logos}
- POST /assets/fonts          → multipart field "font"
- POST /assets/logos          → multipart field "logo"
- GET  /assets/fonts.css      → 업로드 폰트 @font-face 스타일시트

모든 에러는 여기서 {success: false, error} JSON으로 변환한다.
"""

import html
import logging
from typing import Any

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, Response

from src.app.services.assets import AssetDirectoryService
from src.domain.errors import AssetError
from src.domain.schemas import AssetKind
from src.render.font_faces import build_font_face_css, css_string

logger = logging.getLogger(__name__)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def get_asset_service(request: Request) -> AssetDirectoryService:
    """Request에서 AssetDirectoryService 가져오기."""
    return request.app.state.asset_service


def error_response(status_code: int, error: str, code: str | None = None) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "error": error}
    if code:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def asset_error_response(e: AssetError) -> JSONResponse:
    status_code = 400 if e.is_client_error else 500
    return error_response(status_code, e.message, e.code)


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("/fonts", response_class=HTMLResponse)
async def fonts_page(request: Request) -> HTMLResponse:
    """폰트 관리 화면."""
    return HTMLResponse(content="""
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>폰트 관리</title>
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
    <link rel="stylesheet" href="/assets/fonts.css">
</head>
<body>
    <div class="container">
        <header>
            <h1>🔤 폰트 관리</h1>
        </header>

        <form hx-post="/assets/fonts"
              hx-encoding="multipart/form-data"
              hx-target="#result">
            <div class="form-group">
                <label>폰트 파일</label>
                <input type="file" name="font" accept=".ttf,.otf,.woff,.woff2" required>
                <small>.ttf, .otf, .woff, .woff2 (최대 10MB)</small>
            </div>
            <button type="submit">업로드</button>
        </form>

        <div id="result"></div>

        <div id="font-list"
             hx-get="/dashboard/fonts/list"
             hx-trigger="load"
             hx-swap="innerHTML">
            로딩 중...
        </div>
    </div>
</body>
</html>
    """)


@router.get("/fonts/list", response_class=HTMLResponse)
async def fonts_list_fragment(request: Request) -> HTMLResponse:
    """
    폰트 목록 (HTML 조각).

    HTMX용 부분 렌더링. 각 폰트는 자기 font-family로 미리보기.
    """
    try:
        fonts = get_asset_service(request).list_assets(AssetKind.FONTS)
    except AssetError as e:
        logger.error(f"Error listing fonts: {e}")
        return HTMLResponse(content="<p class='error'>폰트 목록을 불러오지 못했습니다.</p>")

    if not fonts:
        return HTMLResponse(content="<p class='empty'>업로드된 폰트가 없습니다.</p>")

    items = "".join(
        f"""
        <li>
            <strong style="font-family: '{html.escape(css_string(font.name))}'">{html.escape(font.name)}</strong>
            <code>{html.escape(font.filename)}</code>
        </li>
        """
        for font in fonts
    )
    return HTMLResponse(content=f"<ul class='font-list'>{items}</ul>")


# =============================================================================
# API Routes
# =============================================================================

def _list_response(request: Request, kind: AssetKind) -> JSONResponse | dict[str, Any]:
    try:
        records = get_asset_service(request).list_assets(kind)
    except AssetError as e:
        logger.error(f"Error listing {kind.value}: {e}")
        return error_response(500, f"Failed to list {kind.value}", e.code)
    except Exception as e:
        logger.error(f"Error listing {kind.value}: {e}", exc_info=True)
        return error_response(500, f"Failed to list {kind.value}")

    return {
        "success": True,
        kind.value: [record.to_dict() for record in records],
    }


async def _upload_response(
    request: Request,
    kind: AssetKind,
    upload: UploadFile | None,
) -> JSONResponse | dict[str, Any]:
    service = get_asset_service(request)
    try:
        filename = upload.filename if upload is not None else None
        if upload is not None and filename and upload.size is not None:
            # 본문을 메모리로 읽기 전에 용량/확장자 거부
            service.validate_upload(kind, filename, upload.size)
        file_bytes = await upload.read() if upload is not None and filename else b""
        result = service.upload(kind, filename, file_bytes)
    except AssetError as e:
        if e.is_client_error:
            logger.warning(f"Rejected {kind.value} upload: {e}")
        else:
            logger.error(f"Error uploading {kind.value}: {e}")
        return asset_error_response(e)
    except Exception as e:
        logger.error(f"Error uploading {kind.value}: {e}", exc_info=True)
        return error_response(500, str(e) or f"Failed to upload {kind.value}")

    return {"success": True, **result.to_dict()}


@api_router.get("/fonts")
async def list_fonts(request: Request) -> Any:
    """폰트 목록."""
    return _list_response(request, AssetKind.FONTS)


@api_router.get("/logos")
async def list_logos(request: Request) -> Any:
    """로고 목록."""
    return _list_response(request, AssetKind.LOGOS)


@api_router.post("/fonts")
async def upload_font(
    request: Request,
    font: UploadFile | None = File(None),
) -> Any:
    """
    폰트 업로드.

    1. 확장자 / 용량 검증 (I/O 전)
    2. public/fonts/ 생성 (없으면)
    3. 저장 (같은 이름은 덮어씀)
    """
    return await _upload_response(request, AssetKind.FONTS, font)


@api_router.post("/logos")
async def upload_logo(
    request: Request,
    logo: UploadFile | None = File(None),
) -> Any:
    """로고 업로드."""
    return await _upload_response(request, AssetKind.LOGOS, logo)


@api_router.get("/fonts.css")
async def fonts_stylesheet(request: Request, base_url: str | None = None) -> Response:
    """업로드된 모든 폰트의 @font-face 스타일시트."""
    try:
        records = get_asset_service(request).list_assets(AssetKind.FONTS)
    except AssetError as e:
        logger.error(f"Error building font stylesheet: {e}")
        records = []

    css = build_font_face_css(records, base_url)
    return Response(content=css, media_type="text/css")
