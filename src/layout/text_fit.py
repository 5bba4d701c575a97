"""
Text Auto-Fit: 한 줄에 들어갈 때까지 font-size 축소.

짧은 텍스트(단어 하나, 짧은 제목)가 두 줄로 넘어가면
step(px)씩 줄이며 다시 측정한다.

종료 조건:
- 한 줄에 들어감 (scroll_height <= line_height × 1.5)
- 최소 font-size 도달
- 최대 시도 횟수 도달 (경고, 마지막 크기 유지)
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.errors import ErrorCodes
from src.layout.dom import LayoutDocument, LayoutElement, parse_px

logger = logging.getLogger(__name__)

DEFAULT_MIN_FONT_SIZE = 48
DEFAULT_STEP = 4
DEFAULT_MAX_ATTEMPTS = 20
DEFAULT_TARGETS = (".text-1",)

# line-height가 "normal"일 때 font-size 대비 비율
NORMAL_LINE_HEIGHT_RATIO = 1.2
# 한 줄 판정 허용치
SINGLE_LINE_TOLERANCE = 1.5


class FitOutcome(str, Enum):
    """종료 사유."""
    FITS = "fits"
    MIN_FONT_SIZE = "min_font_size"
    MAX_ATTEMPTS = "max_attempts"
    NO_ELEMENT = "no_element"


@dataclass(frozen=True)
class TextFitResult:
    initial_font_size: float | None
    final_font_size: float | None
    attempts: int
    outcome: FitOutcome


@dataclass
class TextFitConfig:
    """
    Auto-Fit 설정.

    0/None 같은 falsy 수치는 기본값으로 대체된다.
    """
    enabled: bool = True
    targets: list[str] = field(default_factory=lambda: list(DEFAULT_TARGETS))
    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    step: float = DEFAULT_STEP
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextFitConfig":
        """snake_case / camelCase (minFontSize 등) 모두 허용."""

        def pick(snake: str, camel: str, default: Any) -> Any:
            return data.get(snake) or data.get(camel) or default

        return cls(
            enabled=bool(data.get("enabled", False)),
            targets=list(data.get("targets") or DEFAULT_TARGETS),
            min_font_size=pick("min_font_size", "minFontSize", DEFAULT_MIN_FONT_SIZE),
            step=pick("step", "step", DEFAULT_STEP),
            max_attempts=int(pick("max_attempts", "maxAttempts", DEFAULT_MAX_ATTEMPTS)),
        )


def _line_height(element: LayoutElement, font_size: float) -> float:
    line_height = parse_px(element.computed_style("line-height"))
    return line_height or font_size * NORMAL_LINE_HEIGHT_RATIO


def fit_text_to_single_line(
    element: LayoutElement | None,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
    step: float = DEFAULT_STEP,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> TextFitResult:
    """
    텍스트 요소를 한 줄에 맞춤.

    매 시도마다 reflow → font-size/line-height/scroll_height 재측정.
    넘치면 font-size를 step만큼 줄이고 inline style로 적용한다.

    Args:
        element: 대상 요소 (None이면 경고 후 종료)
        min_font_size: 이 크기 이하로는 줄이지 않음 (px)
        step: 한 번에 줄이는 크기 (px)
        max_attempts: 최대 축소 횟수

    Returns:
        TextFitResult
    """
    if element is None:
        logger.warning("[Text Fit] No element provided")
        return TextFitResult(None, None, 0, FitOutcome.NO_ELEMENT)

    attempts = 0
    initial_font_size: float | None = None
    font_size: float | None = None
    outcome = FitOutcome.MAX_ATTEMPTS

    while attempts < max_attempts:
        element.reflow()

        font_size = parse_px(element.computed_style("font-size")) or 0.0
        if initial_font_size is None:
            initial_font_size = font_size

        expected_height = _line_height(element, font_size) * SINGLE_LINE_TOLERANCE
        actual_height = element.scroll_height()

        logger.debug(
            f"[Text Fit] Attempt {attempts + 1}: fontSize={font_size}px, "
            f"actualHeight={actual_height}px, expectedHeight={expected_height}px"
        )

        if actual_height <= expected_height:
            logger.info(f"[Text Fit] Text fits in single line at {font_size}px")
            outcome = FitOutcome.FITS
            break

        if font_size <= min_font_size:
            logger.info(f"[Text Fit] Reached minimum font size ({min_font_size}px), stopping")
            outcome = FitOutcome.MIN_FONT_SIZE
            break

        new_font_size = font_size - step
        element.set_style("font-size", f"{new_font_size:g}px")
        logger.debug(f"[Text Fit] Reducing font size: {font_size}px -> {new_font_size}px")
        font_size = new_font_size
        attempts += 1

    if outcome is FitOutcome.MAX_ATTEMPTS:
        logger.warning(
            f"[Text Fit] {ErrorCodes.MAX_ATTEMPTS_REACHED}: "
            f"max attempts ({max_attempts}) reached at {font_size}px"
        )

    return TextFitResult(
        initial_font_size=initial_font_size,
        final_font_size=font_size,
        attempts=attempts,
        outcome=outcome,
    )


def init_text_fit(
    document: LayoutDocument,
    config: TextFitConfig | None = None,
) -> dict[str, TextFitResult]:
    """
    설정된 모든 target에 Auto-Fit 적용.

    Args:
        document: 대상 페이지
        config: 설정 (None이면 아무것도 하지 않음)

    Returns:
        selector → TextFitResult (찾지 못한 selector는 제외)
    """
    if config is None:
        logger.info("[Text Fit] No configuration found, skipping")
        return {}

    if not config.enabled:
        logger.info("[Text Fit] Text fit is disabled")
        return {}

    results: dict[str, TextFitResult] = {}
    targets: Sequence[str] = config.targets or DEFAULT_TARGETS

    for selector in targets:
        element = document.query_selector(selector)
        if element is None:
            logger.warning(f"[Text Fit] {ErrorCodes.TARGET_NOT_FOUND}: {selector}")
            continue

        logger.info(f"[Text Fit] Processing target: {selector}")
        results[selector] = fit_text_to_single_line(
            element,
            min_font_size=config.min_font_size,
            step=config.step,
            max_attempts=config.max_attempts,
        )

    return results
