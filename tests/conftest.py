"""
Pytest fixtures for the studio tests.

테스트 구성:
- public/, templates/ 는 tmp_path 아래에 생성 (작업 디렉터리 오염 없음)
- API 테스트는 create_app(config)로 격리된 앱 사용
"""

import json
import threading
import time
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import uvicorn
import yaml
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.app.services.assets import AssetDirectoryService

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def public_root(tmp_path: Path) -> Path:
    """빈 public/ 디렉터리 (fonts/, logos/ 는 없음)."""
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """빈 templates/ 디렉터리."""
    root = tmp_path / "templates"
    root.mkdir()
    return root


# =============================================================================
# Asset Fixtures
# =============================================================================

@pytest.fixture
def asset_service(public_root: Path) -> AssetDirectoryService:
    """tmp public/ 기반 AssetDirectoryService."""
    return AssetDirectoryService(public_root)


@pytest.fixture
def make_asset(public_root: Path) -> Callable[..., Path]:
    """
    에셋 파일 생성기.

    Usage:
        make_asset("fonts", "Gilroy-Black.ttf")
    """

    def create(kind: str, filename: str, content: bytes = b"fake asset") -> Path:
        directory = public_root / kind
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_bytes(content)
        return path

    return create


@pytest.fixture
def make_template(templates_root: Path) -> Callable[..., Path]:
    """
    템플릿 JSON 생성기.

    Usage:
        make_template("versus-duo", {"name": "Versus Duo"})
    """

    def create(template_id: str, data: Any) -> Path:
        path = templates_root / f"{template_id}.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return create


# =============================================================================
# Config / App Fixtures
# =============================================================================

@pytest.fixture
def test_config(public_root: Path, templates_root: Path) -> dict:
    """테스트용 설정."""
    return {
        "paths": {
            "public_root": str(public_root),
            "templates_root": str(templates_root),
        },
        "assets": {
            "max_upload_mb": {"fonts": 10, "logos": 10},
        },
        "text_fit": {
            "enabled": True,
            "targets": [".text-1"],
            "min_font_size": 48,
            "step": 4,
            "max_attempts": 20,
        },
        "title_arrow": {
            "required_gap": 20,
            "default_padding_bottom": 60,
            "settle_delay": 0.1,
        },
        "logging": {"level": "WARNING"},
    }


@pytest.fixture
def client(test_config: dict) -> Generator[TestClient, None, None]:
    """격리된 앱의 TestClient."""
    with TestClient(create_app(test_config)) as client:
        yield client


# =============================================================================
# Browser Test Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def live_server(tmp_path_factory: pytest.TempPathFactory) -> Generator[str, None, None]:
    """
    FastAPI 앱을 백그라운드에서 실행하는 fixture.

    Returns:
        서버 URL (예: "http://127.0.0.1:8765")
    """
    root = tmp_path_factory.mktemp("live")
    app = create_app({
        "paths": {
            "public_root": str(root / "public"),
            "templates_root": str(root / "templates"),
        },
        "logging": {"level": "ERROR"},
    })

    # 테스트용 포트
    port = 8765
    host = "127.0.0.1"

    # 별도 스레드에서 서버 실행
    config = uvicorn.Config(app, host=host, port=port, log_level="error")
    server = uvicorn.Server(config)

    def run_server() -> None:
        import asyncio
        asyncio.run(server.serve())

    thread = threading.Thread(target=run_server, daemon=True)
    thread.start()

    # 서버가 준비될 때까지 대기
    base_url = f"http://{host}:{port}"
    max_attempts = 30
    for _ in range(max_attempts):
        try:
            import httpx
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.HTTPError:
            time.sleep(0.1)
    else:
        raise RuntimeError("Failed to start test server")

    yield base_url

    # 서버 종료
    server.should_exit = True
