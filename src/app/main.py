"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app

경로(public/, templates/, default.yaml)는 작업 디렉터리 기준.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.app.routes import assets, modules, templates
from src.app.services.assets import AssetDirectoryService
from src.core.logging import configure_logging_from_config
from src.domain.constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_PUBLIC_ROOT,
    DEFAULT_TEMPLATES_ROOT,
)
from src.domain.schemas import AssetKind
from src.templates.catalog import TemplateCatalog

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드 (없으면 빈 dict)."""
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
        return data


def resolve_path(value: str | Path | None, default: str) -> Path:
    """설정 경로 → 절대 경로 (상대 경로는 작업 디렉터리 기준)."""
    path = Path(value or default)
    return path if path.is_absolute() else Path.cwd() / path


def get_public_root(config: dict[str, Any]) -> Path:
    return resolve_path((config.get("paths") or {}).get("public_root"), DEFAULT_PUBLIC_ROOT)


def get_templates_root(config: dict[str, Any]) -> Path:
    return resolve_path(
        (config.get("paths") or {}).get("templates_root"), DEFAULT_TEMPLATES_ROOT
    )


def build_asset_service(config: dict[str, Any]) -> AssetDirectoryService:
    """설정 → AssetDirectoryService."""
    assets_config = config.get("assets") or {}
    return AssetDirectoryService(
        get_public_root(config),
        max_size_mb=assets_config.get("max_upload_mb"),
    )


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict[str, Any] | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 dict (None이면 default.yaml 로드)
    """
    config = load_config() if config is None else config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 로깅 설정, 서비스 초기화
        """
        configure_logging_from_config(config)
        app.state.config = config
        app.state.asset_service = build_asset_service(config)
        app.state.template_catalog = TemplateCatalog(get_templates_root(config))

        yield

    app = FastAPI(
        title="Social Graphics Studio",
        description="폰트/로고 에셋 관리 + 이미지 모듈 HTML 생성",
        version="0.1.0",
        lifespan=lifespan,
    )

    # 업로드된 에셋 정적 서빙 (/fonts/<file>, /logos/<file>)
    public_root = get_public_root(config)
    for kind in AssetKind:
        app.mount(
            f"/{kind.value}",
            StaticFiles(directory=public_root / kind.value, check_dir=False),
            name=kind.value,
        )

    # 페이지 라우트 (HTML)
    app.include_router(assets.router, prefix="/dashboard", tags=["Dashboard"])
    app.include_router(templates.router, prefix="/templates", tags=["Templates"])

    # API 라우트
    app.include_router(assets.api_router, prefix="/assets", tags=["Assets API"])
    app.include_router(
        templates.api_router, prefix="/api/templates", tags=["Templates API"]
    )
    app.include_router(modules.api_router, prefix="/api/modules", tags=["Modules API"])

    @app.get("/")
    async def root() -> dict[str, Any]:
        """엔드포인트 안내."""
        return {
            "message": "Social Graphics Studio",
            "endpoints": {
                "fonts": "/assets/fonts",
                "logos": "/assets/logos",
                "templates": "/templates",
                "dashboard": "/dashboard/fonts",
            },
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
