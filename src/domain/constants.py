"""
Domain Constants: 레이아웃 프리셋, 템플릿, placeholder 이름.

폼 필드 렌더링 전반에서 사용되는 고정 값들.
"""

# =============================================================================
# Placeholder Parts (템플릿 슬롯)
# =============================================================================
# 템플릿 안에서 {name} 형태로 사용.
# 이 목록에 없는 토큰은 렌더 시 제거됨.

PART_LABEL = "label"
PART_BEGIN_LABEL = "beginLabel"
PART_LABEL_TITLE = "labelTitle"
PART_END_LABEL = "endLabel"
PART_BEGIN_WRAPPER = "beginWrapper"
PART_END_WRAPPER = "endWrapper"
PART_INPUT = "input"
PART_ERROR = "error"
PART_HINT = "hint"
PART_BEGIN_CHECKBOX_WRAPPER = "beginCheckboxWrapper"
PART_END_CHECKBOX_WRAPPER = "endCheckboxWrapper"

PART_NAMES = frozenset({
    PART_LABEL,
    PART_BEGIN_LABEL,
    PART_LABEL_TITLE,
    PART_END_LABEL,
    PART_BEGIN_WRAPPER,
    PART_END_WRAPPER,
    PART_INPUT,
    PART_ERROR,
    PART_HINT,
    PART_BEGIN_CHECKBOX_WRAPPER,
    PART_END_CHECKBOX_WRAPPER,
})

LABEL_PARTS = (PART_LABEL, PART_BEGIN_LABEL, PART_LABEL_TITLE, PART_END_LABEL)

# =============================================================================
# Templates (레이아웃별 기본 템플릿)
# =============================================================================

DEFAULT_TEMPLATE = "{label}\n{input}\n{hint}\n{error}"

HORIZONTAL_TEMPLATE = "{label}\n{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"

CHECKBOX_TEMPLATE = (
    "{beginCheckboxWrapper}\n{beginLabel}\n{input}\n"
    '<div class="checkbox-label"><i class="fa fa-check"></i></div>\n'
    "{labelTitle}\n{endLabel}\n{endCheckboxWrapper}\n{error}\n{hint}"
)

RADIO_TEMPLATE = (
    '<div class="radio">\n{beginLabel}\n{input}\n{labelTitle}\n{endLabel}\n'
    "{error}\n{hint}\n</div>"
)

HORIZONTAL_CHECKBOX_TEMPLATE = (
    "{beginWrapper}\n{beginCheckboxWrapper}\n{beginLabel}\n{input}\n"
    "{labelTitle}\n{endLabel}\n{endCheckboxWrapper}\n{error}\n{endWrapper}\n{hint}"
)

HORIZONTAL_RADIO_TEMPLATE = (
    '{beginWrapper}\n<div class="radio">\n{beginLabel}\n{input}\n{labelTitle}\n'
    "{endLabel}\n</div>\n{error}\n{endWrapper}\n{hint}"
)

INLINE_CHECKBOX_LIST_TEMPLATE = "{label}\n{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"

INLINE_RADIO_LIST_TEMPLATE = "{label}\n{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"

# =============================================================================
# Horizontal Grid Classes
# =============================================================================
# offset: label이 없을 때 wrapper에 추가 (grid 정렬 유지)

DEFAULT_HORIZONTAL_CSS_CLASSES = {
    "offset": "col-sm-offset-3",
    "label": "col-sm-3",
    "wrapper": "col-sm-6",
    "error": "",
    "hint": "col-sm-3",
}

# =============================================================================
# CSS Classes
# =============================================================================

FORM_GROUP_CLASS = "form-group"
FORM_CONTROL_CLASS = "form-control"
CONTROL_LABEL_CLASS = "control-label"
HELP_BLOCK_CLASS = "help-block"
ERROR_BLOCK_CLASS = "help-block help-block-error"
HAS_ERROR_CLASS = "has-error"
HAS_FEEDBACK_CLASS = "has-feedback"
SR_ONLY_CLASS = "sr-only"
CHECKBOX_INLINE_CLASS = "checkbox-inline"
RADIO_INLINE_CLASS = "radio-inline"

# =============================================================================
# Switch Defaults
# =============================================================================

SWITCH_ON_VALUE = 1
SWITCH_OFF_VALUE = 0

# checkbox/radio 기본 값
CHECK_VALUE = "1"
UNCHECK_VALUE = "0"

# =============================================================================
# Rich-text Editor
# =============================================================================

EDITOR_TOOLBAR_PARTIAL = "quill_toolbar.html"
EDITOR_MIN_HEIGHT = "300px"

# =============================================================================
# Sidebar
# =============================================================================

SIDEBAR_ID_PREFIX = "sidebar"
SIDEBAR_CLASS = "aurora-sidebar"
