"""
Title-Arrow Positioning: 제목 아래와 화살표 위 사이 최소 간격 확보.

화살표는 고정, 컨테이너 padding-bottom을 늘려 제목을 위로 올린다.
페이지 로드당 한 번 실행 (폰트 로드 + settle delay 이후).

재실행 시 이미 간격이 충분하면 아무것도 바꾸지 않는다.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.domain.errors import ErrorCodes
from src.layout.dom import LayoutDocument, parse_px

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_GAP = 20  # px
DEFAULT_PADDING_BOTTOM = 60  # px, padding-bottom 파싱 실패 시
DEFAULT_SETTLE_DELAY = 0.1  # 초


@dataclass(frozen=True)
class TitleArrowConfig:
    required_gap: float = DEFAULT_REQUIRED_GAP
    default_padding_bottom: float = DEFAULT_PADDING_BOTTOM
    settle_delay: float = DEFAULT_SETTLE_DELAY
    arrow_id: str = "arrowImage"
    container_selector: str = ".container"
    title_selector: str = ".title"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "TitleArrowConfig":
        if not data:
            return cls()
        defaults = cls()
        return cls(
            required_gap=data.get("required_gap", defaults.required_gap),
            default_padding_bottom=data.get(
                "default_padding_bottom", defaults.default_padding_bottom
            ),
            settle_delay=data.get("settle_delay", defaults.settle_delay),
            arrow_id=data.get("arrow_id", defaults.arrow_id),
            container_selector=data.get("container_selector", defaults.container_selector),
            title_selector=data.get("title_selector", defaults.title_selector),
        )


@dataclass(frozen=True)
class TitleArrowResult:
    adjusted: bool
    gap: float | None = None
    previous_padding: float | None = None
    new_padding: float | None = None
    skipped_reason: str | None = None


def _skip(reason: str) -> TitleArrowResult:
    logger.info(f"[Title-Arrow] Skipping positioning adjustment: {reason}")
    return TitleArrowResult(adjusted=False, skipped_reason=reason)


def has_valid_source(src: str | None, page_url: str) -> bool:
    """
    화살표 이미지 src 유효성.

    img.src는 빈 속성일 때 페이지 URL로 해석되므로 그 경우도 무효.
    """
    if not src:
        return False
    if src == page_url:
        return False
    return not src.endswith("/")


def adjust_title_arrow(
    document: LayoutDocument,
    config: TitleArrowConfig | None = None,
) -> TitleArrowResult:
    """
    제목-화살표 간격 보정 (한 번).

    Args:
        document: 대상 페이지
        config: 간격/selector 설정

    Returns:
        TitleArrowResult (adjusted=False면 skipped_reason 또는 간격 충분)
    """
    config = config or TitleArrowConfig()

    arrow = document.get_element_by_id(config.arrow_id)
    container = document.query_selector(config.container_selector)

    if arrow is None or container is None:
        logger.warning(
            f"[Title-Arrow] {ErrorCodes.TARGET_NOT_FOUND}: "
            f"hasArrow={arrow is not None}, hasContainer={container is not None}"
        )
        return _skip("missing arrow or container")

    if not has_valid_source(arrow.get_property("src"), document.url):
        return _skip("arrow has no valid src")

    title = document.query_selector(config.title_selector)
    if title is None:
        logger.warning(f"[Title-Arrow] {ErrorCodes.TARGET_NOT_FOUND}: {config.title_selector}")
        return _skip("missing title")

    arrow_box = arrow.bounding_box()
    title_box = title.bounding_box()
    gap = arrow_box.top - title_box.bottom

    logger.debug(
        f"[Title-Arrow] titleBottom={title_box.bottom}, arrowTop={arrow_box.top}, "
        f"currentGap={gap}, requiredGap={config.required_gap}"
    )

    if gap >= config.required_gap:
        logger.info(
            f"[Title-Arrow] Current gap is sufficient "
            f"({gap}px >= {config.required_gap}px), no adjustment needed"
        )
        return TitleArrowResult(adjusted=False, gap=gap)

    current_padding = parse_px(container.computed_style("padding-bottom"))
    if current_padding is None:
        current_padding = float(config.default_padding_bottom)

    new_padding = current_padding + (config.required_gap - gap)
    container.set_style("padding-bottom", f"{new_padding:g}px")

    logger.info(
        f"[Title-Arrow] Title position adjusted - padding-bottom "
        f"{current_padding:g}px -> {new_padding:g}px"
    )
    return TitleArrowResult(
        adjusted=True,
        gap=gap,
        previous_padding=current_padding,
        new_padding=new_padding,
    )


def apply_after_settle(
    document: LayoutDocument,
    config: TitleArrowConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> TitleArrowResult:
    """
    폰트 로드 완료 + settle delay 후 보정 실행.

    Args:
        document: 대상 페이지
        config: 설정 (settle_delay 포함)
        sleep: 대기 함수 (테스트에서 교체)
    """
    config = config or TitleArrowConfig()

    document.wait_for_fonts()
    if config.settle_delay > 0:
        sleep(config.settle_delay)

    return adjust_title_arrow(document, config)
