"""
레이아웃 프리셋: default / horizontal / inline.

configure(layout, overrides)
- 레이아웃 프리셋 dict 생성
- overrides를 deep merge (override 우선, 중첩 dict는 키 단위 병합)
- 알 수 없는 layout → default
"""

from typing import Any

from src.core.merge import deep_merge
from src.domain.constants import (
    CONTROL_LABEL_CLASS,
    DEFAULT_HORIZONTAL_CSS_CLASSES,
    DEFAULT_TEMPLATE,
    ERROR_BLOCK_CLASS,
    FORM_CONTROL_CLASS,
    FORM_GROUP_CLASS,
    HELP_BLOCK_CLASS,
    HORIZONTAL_TEMPLATE,
    SR_ONLY_CLASS,
)
from src.domain.schemas import Layout


def _join_classes(*classes: str | None) -> str:
    return " ".join(c for c in classes if c)


def _base_preset() -> dict[str, Any]:
    """모든 레이아웃 공통 프리셋."""
    return {
        "template": DEFAULT_TEMPLATE,
        "options": {"class": FORM_GROUP_CLASS},
        "input_options": {"class": FORM_CONTROL_CLASS},
        "label_options": {"class": CONTROL_LABEL_CLASS},
        "hint_options": {"tag": "p", "class": HELP_BLOCK_CLASS},
        "error_options": {"tag": "p", "class": ERROR_BLOCK_CLASS},
        "enable_error": True,
    }


def _horizontal_preset(overrides: dict[str, Any]) -> dict[str, Any]:
    """
    horizontal 프리셋.

    grid 클래스는 override의 horizontal_css_classes를 먼저 반영한 뒤
    label/wrapper/error/hint 옵션을 계산한다.
    """
    css = deep_merge(
        DEFAULT_HORIZONTAL_CSS_CLASSES,
        overrides.get("horizontal_css_classes") or {},
    )
    return {
        "template": HORIZONTAL_TEMPLATE,
        "horizontal_css_classes": css,
        "wrapper_options": {"class": css["wrapper"]},
        "label_options": {"class": _join_classes(CONTROL_LABEL_CLASS, css["label"])},
        "error_options": {"class": _join_classes(ERROR_BLOCK_CLASS, css["error"])},
        "hint_options": {"class": _join_classes(HELP_BLOCK_CLASS, css["hint"])},
    }


def layout_preset(layout: Layout | str | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    레이아웃 고정 프리셋 (override 미반영).

    horizontal의 label/wrapper 클래스는 overrides의 horizontal_css_classes에서 계산되므로
    overrides를 함께 받는다.
    """
    resolved = Layout.resolve(layout)
    preset = _base_preset()

    if resolved is Layout.HORIZONTAL:
        # 레이아웃 옵션은 공통 옵션을 교체 (병합 아님)
        preset.update(_horizontal_preset(overrides or {}))
    elif resolved is Layout.INLINE:
        preset["label_options"] = {"class": SR_ONLY_CLASS}
        preset["enable_error"] = False

    return preset


def configure(layout: Layout | str | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    레이아웃 기본 설정 + override.

    Args:
        layout: "default" | "horizontal" | "inline" (그 외/None → default)
        overrides: 사용자 설정 (override 우선, 중첩 dict는 키 단위 병합)

    Returns:
        FieldOptions.from_dict()에 넘길 설정 dict
    """
    overrides = overrides or {}
    return deep_merge(layout_preset(layout, overrides), overrides)
