"""
Data schemas for the form renderer.

규칙:
- 설정 키는 명시적 필드로 선언 (열린 dict 금지)
- 각 필드는 기본값을 가짐
- HTML 속성 dict (options 류)만 열린 매핑 허용
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from src.domain.constants import (
    CHECKBOX_TEMPLATE,
    DEFAULT_HORIZONTAL_CSS_CLASSES,
    DEFAULT_TEMPLATE,
    HORIZONTAL_CHECKBOX_TEMPLATE,
    HORIZONTAL_RADIO_TEMPLATE,
    INLINE_CHECKBOX_LIST_TEMPLATE,
    INLINE_RADIO_LIST_TEMPLATE,
    RADIO_TEMPLATE,
)
from src.domain.errors import ErrorCodes, FormError

logger = logging.getLogger(__name__)

# =============================================================================
# Layout
# =============================================================================

class Layout(str, Enum):
    """폼 레이아웃."""
    DEFAULT = "default"
    HORIZONTAL = "horizontal"
    INLINE = "inline"

    @classmethod
    def resolve(cls, value: "Layout | str | None") -> "Layout":
        """
        레이아웃 값 정규화.

        None/빈 값 → DEFAULT, 알 수 없는 값 → DEFAULT (경고 로그).
        """
        if isinstance(value, Layout):
            return value
        if not value:
            return cls.DEFAULT
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown form layout {value!r}, falling back to 'default'")
            return cls.DEFAULT


# =============================================================================
# Field Options
# =============================================================================

@dataclass
class HorizontalCssClasses:
    """horizontal 레이아웃 grid 클래스."""
    offset: str = DEFAULT_HORIZONTAL_CSS_CLASSES["offset"]
    label: str = DEFAULT_HORIZONTAL_CSS_CLASSES["label"]
    wrapper: str = DEFAULT_HORIZONTAL_CSS_CLASSES["wrapper"]
    error: str = DEFAULT_HORIZONTAL_CSS_CLASSES["error"]
    hint: str = DEFAULT_HORIZONTAL_CSS_CLASSES["hint"]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HorizontalCssClasses":
        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise FormError(
                ErrorCodes.INVALID_FIELD_CONFIG,
                "unknown horizontal_css_classes keys",
                keys=sorted(unknown),
            )
        return cls(**{k: v or "" for k, v in data.items()})


# 값 타입 검증 대상 (flag 류는 truthiness로만 사용)
_TEXT_FIELDS = frozenset({
    "template",
    "checkbox_template",
    "radio_template",
    "horizontal_checkbox_template",
    "horizontal_radio_template",
    "inline_checkbox_list_template",
    "inline_radio_list_template",
})
_OPTIONAL_TEXT_FIELDS = frozenset({"input_template", "input_before"})
_OPTION_FIELDS = frozenset({
    "options",
    "input_options",
    "label_options",
    "wrapper_options",
    "error_options",
    "hint_options",
})


@dataclass
class FieldOptions:
    """
    ActiveField 설정.

    configure()가 만든 레이아웃 프리셋 + 사용자 override를
    이 구조로 변환한다. 알 수 없는 키는 FormError.
    """
    # === Templates ===
    template: str = DEFAULT_TEMPLATE
    input_template: str | None = None  # {input}을 감싸는 템플릿 (input group 등)
    checkbox_template: str = CHECKBOX_TEMPLATE
    radio_template: str = RADIO_TEMPLATE
    horizontal_checkbox_template: str = HORIZONTAL_CHECKBOX_TEMPLATE
    horizontal_radio_template: str = HORIZONTAL_RADIO_TEMPLATE
    inline_checkbox_list_template: str = INLINE_CHECKBOX_LIST_TEMPLATE
    inline_radio_list_template: str = INLINE_RADIO_LIST_TEMPLATE

    # === Tag options (HTML 속성) ===
    options: dict[str, Any] = field(default_factory=dict)  # 컨테이너 태그
    input_options: dict[str, Any] = field(default_factory=dict)
    label_options: dict[str, Any] = field(default_factory=dict)
    wrapper_options: dict[str, Any] = field(default_factory=dict)
    error_options: dict[str, Any] = field(default_factory=dict)
    hint_options: dict[str, Any] = field(default_factory=dict)
    horizontal_css_classes: HorizontalCssClasses = field(default_factory=HorizontalCssClasses)

    # === Flags ===
    enable_label: bool = True
    enable_error: bool = True
    inline: bool = False  # checkbox_list/radio_list inline 렌더
    placeholder: bool = True  # attribute label을 input placeholder로 사용
    input_before: str | None = None  # wrapper 시작 직후 삽입되는 HTML
    input_feedback: bool = False  # 입력 상태 아이콘 표시

    @classmethod
    def check(cls, data: Mapping[str, Any]) -> None:
        """
        설정 키/값 타입 검증 (configure() 전에 호출 가능).

        Raises:
            FormError: INVALID_FIELD_CONFIG
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise FormError(
                ErrorCodes.INVALID_FIELD_CONFIG,
                "unknown field configuration keys",
                keys=sorted(unknown),
            )

        for key, value in data.items():
            if key in _TEXT_FIELDS:
                valid = isinstance(value, str)
            elif key in _OPTIONAL_TEXT_FIELDS:
                valid = value is None or isinstance(value, str)
            elif key in _OPTION_FIELDS:
                valid = isinstance(value, Mapping)
            elif key == "horizontal_css_classes":
                valid = isinstance(value, Mapping) and all(
                    v is None or isinstance(v, str) for v in value.values()
                )
            else:
                continue
            if not valid:
                raise FormError(
                    ErrorCodes.INVALID_FIELD_CONFIG,
                    "invalid field configuration value",
                    key=key,
                    type=type(value).__name__,
                )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FieldOptions":
        cls.check(data)

        values = dict(data)
        css = values.get("horizontal_css_classes")
        if isinstance(css, Mapping):
            values["horizontal_css_classes"] = HorizontalCssClasses.from_dict(dict(css))
        return cls(**values)
