"""
E2E 테스트용 Playwright 설정.

설정 항목:
- 기본 타임아웃: 30초
- 뷰포트: 1280x720
- 실패 시 디버깅 정보 저장 (스크린샷, HTML 덤프, 콘솔 로그)

브라우저 테스트는 `browser` 마커로 구분되며 기본 실행에서 제외된다:
    uv run pytest -m browser tests/e2e
"""

import importlib.util
from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page

# =============================================================================
# 상수
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"
PLAYWRIGHT_AVAILABLE = importlib.util.find_spec("playwright") is not None

# =============================================================================
# Playwright 기본 설정 (Playwright가 설치된 경우에만 활성화)
# =============================================================================

if PLAYWRIGHT_AVAILABLE:

    @pytest.fixture(scope="session")
    def browser_context_args(browser_context_args: dict) -> dict:
        """브라우저 컨텍스트 설정."""
        return {
            **browser_context_args,
            "viewport": {"width": 1280, "height": 720},
        }

    @pytest.fixture
    def context(
        browser: "Browser", browser_context_args: dict
    ) -> "Generator[BrowserContext, None, None]":
        """브라우저 컨텍스트 생성."""
        context = browser.new_context(**browser_context_args)
        yield context
        context.close()

    @pytest.fixture
    def page(context: "BrowserContext") -> "Generator[Page, None, None]":
        """페이지 fixture with 타임아웃 + 콘솔 로그 수집."""
        page = context.new_page()
        page.set_default_timeout(30000)
        page.set_default_navigation_timeout(30000)

        console_logs: list[str] = []
        page.on("console", lambda msg: console_logs.append(f"[{msg.type}] {msg.text}"))
        page.on("pageerror", lambda err: console_logs.append(f"[PAGE_ERROR] {err}"))
        page._console_logs = console_logs  # type: ignore[attr-defined]

        yield page

        page.close()


# =============================================================================
# 실패 시 디버깅 정보 저장
# =============================================================================


def _generate_artifact_name(item_name: str) -> str:
    """고유한 artifact 파일명 (테스트명 + 타임스탬프)."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # 테스트 파라미터 제거 (예: test_foo[chromium] -> test_foo)
    clean_name = item_name.split("[")[0]
    return f"{clean_name}_{timestamp}"


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """테스트 실패 시 스크린샷/HTML/콘솔 로그 저장."""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if not page:
        return

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    base_name = _generate_artifact_name(item.name)

    try:
        page.screenshot(path=str(ARTIFACTS_DIR / f"{base_name}.png"), full_page=True)
        (ARTIFACTS_DIR / f"{base_name}.html").write_text(page.content(), encoding="utf-8")
        console_logs = getattr(page, "_console_logs", [])
        if console_logs:
            (ARTIFACTS_DIR / f"{base_name}.log").write_text(
                "\n".join(console_logs), encoding="utf-8"
            )
    except Exception as e:
        print(f"\n⚠️ Artifact capture failed: {e}")
