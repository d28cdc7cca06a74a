"""
ActiveField: 레이아웃별 폼 필드 렌더러.

흐름:
1. 생성: 레이아웃 프리셋 + form.field_config + 필드 config → FieldOptions
2. 설정: label()/error()/hint()/inline() 및 input 종류 메서드
   (checkbox, radio, switch, datepicker_input, editor_input, ...)
   → parts[{name}]와 template을 채움
3. render(): 비어 있는 part를 기본값으로 채운 뒤 template 한 번 치환

지원 placeholder:
- {label}, {input}, {error}, {hint}
- {beginLabel}, {labelTitle}, {endLabel}: label을 input 주변에 직접 배치할 때
- {beginWrapper}, {endWrapper}: horizontal grid wrapper
- {beginCheckboxWrapper}, {endCheckboxWrapper}: checkbox 장식 wrapper

주의:
- inline()은 checkbox_list()/radio_list() 전에 호출해야 효과가 있음
- render()는 로컬 사본만 변경 → 여러 번 호출해도 같은 결과
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from src.core.html import (
    add_css_class,
    begin_tag,
    check_input,
    end_tag,
    escape,
    hidden_input,
    input_tag,
    is_selected,
    select_tag,
    tag,
    textarea,
    to_str,
)
from src.core.merge import deep_merge
from src.domain.constants import (
    CHECK_VALUE,
    CHECKBOX_INLINE_CLASS,
    EDITOR_MIN_HEIGHT,
    HAS_ERROR_CLASS,
    HAS_FEEDBACK_CLASS,
    LABEL_PARTS,
    PART_BEGIN_CHECKBOX_WRAPPER,
    PART_BEGIN_LABEL,
    PART_BEGIN_WRAPPER,
    PART_END_CHECKBOX_WRAPPER,
    PART_END_LABEL,
    PART_END_WRAPPER,
    PART_ERROR,
    PART_HINT,
    PART_INPUT,
    PART_LABEL,
    PART_LABEL_TITLE,
    RADIO_INLINE_CLASS,
    SWITCH_OFF_VALUE,
    SWITCH_ON_VALUE,
    UNCHECK_VALUE,
)
from src.domain.schemas import FieldOptions, Layout
from src.forms.layout import configure
from src.forms.model import ModelAdapter
from src.forms.template import replace_token, substitute
from src.widgets.editor import build_editor_script
from src.widgets.toolbar import QuillToolbar

if TYPE_CHECKING:
    from src.forms.active_form import ActiveForm

# item(index, label, name, checked, value) -> HTML
ItemRenderer = Callable[[int, str, str, bool, Any], str]


# =============================================================================
# List Item Renderers
# =============================================================================

def render_checkbox_item(index: int, label: str, name: str, checked: bool, value: Any) -> str:
    """checkbox_list 기본 항목 (aurora 스타일 체크 아이콘)."""
    box = tag(
        "div",
        check_input("checkbox", name, checked, {"value": value})
        + '<div class="checkbox-label"><i class="fa fa-check"></i></div>',
        {"class": "checkbox active" if checked else "checkbox", "data-toggle": "checkbox"},
    )
    return tag("div", box + tag("label", escape(label)), {"class": "row"})


def render_radio_item(index: int, label: str, name: str, checked: bool, value: Any) -> str:
    """radio_list 기본 항목."""
    box = tag(
        "div",
        check_input("radio", name, checked, {"value": value})
        + '<label class="radio-label"></label>',
        {"class": "radio", "data-toggle": "radio"},
    )
    return tag("div", box + tag("label", escape(label)), {"class": "row"})


class ActiveField:
    """
    하나의 폼 필드.

    Usage:
        form = ActiveForm(view, layout="horizontal")
        html = form.field(model, "email").render()

        # label 없는 필드
        form.field(model, "demo").label(False).render()

        # inline radio list
        form.field(model, "gender").inline().radio_list({"m": "Male", "f": "Female"})

        # input group
        form.field(model, "email", input_template='<div class="input-group">{input}</div>')
    """

    def __init__(
        self,
        form: "ActiveForm",
        model: ModelAdapter,
        attribute: str,
        **config: Any,
    ) -> None:
        """
        Args:
            form: 소속 ActiveForm (layout, view, field_config 제공)
            model: 모델 어댑터
            attribute: attribute 이름
            **config: FieldOptions 필드 override

        Raises:
            FormError: INVALID_FIELD_CONFIG (알 수 없는 설정 키)
        """
        self.form = form
        self.model = model
        self.attribute = attribute
        self.layout = Layout.resolve(form.layout)
        overrides = deep_merge(form.field_config, config)
        FieldOptions.check(overrides)
        self.config = FieldOptions.from_dict(configure(self.layout, overrides))
        self.parts: dict[str, str] = {}

        self._hint: str | None = None
        self._skip_label_for = False

        if self.config.placeholder:
            self.config.input_options.setdefault(
                "placeholder", self.model.get_label(attribute)
            )

    # =========================================================================
    # Render
    # =========================================================================

    def render(self, content: str | None = None) -> str:
        """
        필드 HTML 생성.

        Args:
            content: 컨테이너 안에 넣을 HTML (None이면 template 치환 결과)

        Returns:
            컨테이너 태그로 감싼 HTML
        """
        if content is None:
            template, parts = self._resolve_parts()
            content = substitute(template, parts)

        options = dict(self.config.options)
        tag_name = options.pop("tag", "div")
        add_css_class(options, f"field-{self.model.input_id(self.attribute)}")
        if self.config.input_feedback:
            add_css_class(options, HAS_FEEDBACK_CLASS)
        if self.model.has_error(self.attribute):
            add_css_class(options, HAS_ERROR_CLASS)

        return f"{begin_tag(tag_name, options)}\n{content}\n{end_tag(tag_name)}"

    def __str__(self) -> str:
        return self.render()

    def _resolve_parts(self) -> tuple[str, dict[str, str]]:
        """render용 template과 parts 사본 (self 상태 불변)."""
        template = self.config.template
        parts = dict(self.parts)

        if self.config.input_before:
            before = tag("span", self.config.input_before, {"class": "form-control-before"})
            template = replace_token(template, PART_BEGIN_WRAPPER, "{beginWrapper}" + before)

        if self.config.input_feedback:
            feedback = tag(
                "span",
                '<i class="fa fa-check"></i><i class="fa fa-times"></i>',
                {"class": "form-control-feedback"},
            )
            template = replace_token(template, PART_END_WRAPPER, feedback + "{endWrapper}")

        if PART_BEGIN_WRAPPER not in parts:
            wrapper_options = dict(self.config.wrapper_options)
            wrapper_tag = wrapper_options.pop("tag", "div")
            parts[PART_BEGIN_WRAPPER] = begin_tag(wrapper_tag, wrapper_options)
            parts[PART_END_WRAPPER] = end_tag(wrapper_tag)

        if not self.config.enable_label:
            for name in LABEL_PARTS:
                parts[name] = ""
        else:
            if PART_BEGIN_LABEL not in parts:
                label_parts = self._label_parts()
                parts[PART_BEGIN_LABEL] = label_parts[PART_BEGIN_LABEL]
                parts[PART_END_LABEL] = label_parts[PART_END_LABEL]
                parts.setdefault(PART_LABEL_TITLE, label_parts[PART_LABEL_TITLE])
            if PART_LABEL not in parts:
                parts[PART_LABEL] = (
                    parts[PART_BEGIN_LABEL] + parts[PART_LABEL_TITLE] + parts[PART_END_LABEL]
                )

        if not self.config.enable_error:
            parts[PART_ERROR] = ""
        elif PART_ERROR not in parts:
            parts[PART_ERROR] = self._render_error()

        if PART_HINT not in parts:
            parts[PART_HINT] = self._render_hint()

        if PART_INPUT not in parts:
            name, attrs = self._input_attributes(self.config.input_options)
            parts[PART_INPUT] = input_tag(
                "text", name, self.model.get_value(self.attribute), attrs
            )

        if self.config.input_template:
            parts[PART_INPUT] = replace_token(
                self.config.input_template, PART_INPUT, parts[PART_INPUT]
            )

        return template, parts

    # =========================================================================
    # Label / Error / Hint
    # =========================================================================

    def label(self, label: str | bool | None = None, options: dict[str, Any] | None = None) -> "ActiveField":
        """
        label 설정.

        Args:
            label: False → label 비활성 (horizontal이면 wrapper에 offset 클래스 추가)
                   True → 활성 (label(False)로 비운 part만 복원, 명시 label 유지)
                   str → 이 텍스트로 label 생성 (HTML 그대로)
            options: label 태그 옵션
        """
        if isinstance(label, bool):
            self.config.enable_label = label
            if label is False:
                for name in LABEL_PARTS:
                    self.parts[name] = ""
                if self.layout is Layout.HORIZONTAL:
                    add_css_class(
                        self.config.wrapper_options,
                        self.config.horizontal_css_classes.offset,
                    )
            else:
                # label(False)가 비운 part만 복원 (checkbox label 등 명시값 유지)
                for name in LABEL_PARTS:
                    if self.parts.get(name) == "":
                        del self.parts[name]
            return self

        self.config.enable_label = True
        label_parts = self._label_parts(label, options)
        self.parts[PART_BEGIN_LABEL] = label_parts[PART_BEGIN_LABEL]
        self.parts[PART_END_LABEL] = label_parts[PART_END_LABEL]
        self.parts[PART_LABEL_TITLE] = label_parts[PART_LABEL_TITLE]
        self.parts[PART_LABEL] = (
            label_parts[PART_BEGIN_LABEL] + label_parts[PART_LABEL_TITLE] + label_parts[PART_END_LABEL]
        )
        return self

    def _label_parts(self, label: str | None = None, options: dict[str, Any] | None = None) -> dict[str, str]:
        """
        label 조각 생성.

        label이 None이면 options["label"] → 모델 label(escape) 순서로 사용.
        """
        label_options = {**self.config.label_options, **(options or {})}
        option_label = label_options.pop("label", None)
        if label is None:
            label = option_label if option_label is not None else escape(
                self.model.get_label(self.attribute)
            )

        if self._skip_label_for:
            label_options["for"] = None
        else:
            label_options.setdefault("for", self.model.input_id(self.attribute))

        return {
            PART_BEGIN_LABEL: begin_tag("label", label_options),
            PART_LABEL_TITLE: label,
            PART_END_LABEL: end_tag("label"),
        }

    def error(self, options: dict[str, Any] | bool | None = None) -> "ActiveField":
        """
        에러 표시 설정.

        Args:
            options: False → 에러 비활성 / dict → 에러 태그 옵션 병합
        """
        if options is False:
            self.config.enable_error = False
            self.parts[PART_ERROR] = ""
        elif options is True:
            self.config.enable_error = True
            self.parts.pop(PART_ERROR, None)
        elif options:
            self.config.error_options.update(options)
        return self

    def _render_error(self) -> str:
        message = self.model.first_error(self.attribute)
        if not message:
            return ""
        options = dict(self.config.error_options)
        error_tag = options.pop("tag", "div")
        return tag(error_tag, escape(message), options)

    def hint(self, content: str | bool | None, options: dict[str, Any] | None = None) -> "ActiveField":
        """
        hint 설정.

        Args:
            content: hint HTML (False → hint 비활성)
            options: hint 태그 옵션
        """
        if content is False:
            self.parts[PART_HINT] = ""
            return self
        self.parts.pop(PART_HINT, None)
        self._hint = content
        if options:
            self.config.hint_options.update(options)
        return self

    def _render_hint(self) -> str:
        content = self._hint
        if content is None:
            content = escape(self.model.get_hint(self.attribute))
        if not content:
            return ""
        options = dict(self.config.hint_options)
        hint_tag = options.pop("tag", "div")
        return tag(hint_tag, content, options)

    def inline(self, value: bool = True) -> "ActiveField":
        """
        checkbox_list()/radio_list()를 inline으로 렌더.

        list 메서드 호출 전에 설정해야 효과가 있음.
        """
        self.config.inline = bool(value)
        return self

    # =========================================================================
    # Input Helpers
    # =========================================================================

    def _input_attributes(self, options: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """(name, 속성 dict) - id/name 기본값 채움."""
        attrs = {"id": self.model.input_id(self.attribute), **options}
        name = attrs.pop("name", None) or self.model.input_name(self.attribute)
        return name, attrs

    def _adjust_label_for(self, options: Mapping[str, Any]) -> None:
        """input id가 직접 지정되면 label for도 맞춤."""
        if options.get("id") and "for" not in self.config.label_options:
            self.config.label_options["for"] = options["id"]

    def _merged_input_options(self, options: Mapping[str, Any] | None) -> dict[str, Any]:
        merged = {**self.config.input_options, **(options or {})}
        self._adjust_label_for(merged)
        return merged

    def _active_input(self, input_type: str, options: Mapping[str, Any] | None) -> "ActiveField":
        name, attrs = self._input_attributes(self._merged_input_options(options))
        value = None if input_type == "password" else self.model.get_value(self.attribute)
        self.parts[PART_INPUT] = input_tag(input_type, name, value, attrs)
        return self

    # =========================================================================
    # Plain Inputs
    # =========================================================================

    def text_input(self, options: dict[str, Any] | None = None) -> "ActiveField":
        return self._active_input("text", options)

    def password_input(self, options: dict[str, Any] | None = None) -> "ActiveField":
        return self._active_input("password", options)

    def input(self, input_type: str, options: dict[str, Any] | None = None) -> "ActiveField":
        """임의 type의 <input> (email, number, ...)."""
        return self._active_input(input_type, options)

    def hidden_input(self, options: dict[str, Any] | None = None) -> "ActiveField":
        name, attrs = self._input_attributes(options or {})
        self.parts[PART_INPUT] = hidden_input(name, self.model.get_value(self.attribute), attrs)
        return self

    def textarea(self, options: dict[str, Any] | None = None) -> "ActiveField":
        name, attrs = self._input_attributes(self._merged_input_options(options))
        attrs.pop("value", None)
        self.parts[PART_INPUT] = textarea(name, self.model.get_value(self.attribute), attrs)
        return self

    def dropdown_list(self, items: Mapping[Any, Any], options: dict[str, Any] | None = None) -> "ActiveField":
        name, attrs = self._input_attributes(self._merged_input_options(options))
        attrs.pop("placeholder", None)
        self.parts[PART_INPUT] = select_tag(
            name, self.model.get_value(self.attribute), items, attrs
        )
        return self

    # =========================================================================
    # Checkbox / Radio
    # =========================================================================

    def _is_checked(self, options: Mapping[str, Any]) -> bool:
        return to_str(self.model.get_value(self.attribute)) == to_str(options["value"])

    def _prepare_enclosed(self, options: dict[str, Any], default: str, horizontal: str) -> None:
        """label로 감싸는 checkbox/radio 공통 준비."""
        template = options.pop("template", None)
        if template is None:
            template = horizontal if self.layout is Layout.HORIZONTAL else default
        self.config.template = template

        label = options.pop("label", None)
        if label is not None:
            self.parts[PART_LABEL_TITLE] = label
        if self.layout is Layout.HORIZONTAL:
            add_css_class(
                self.config.wrapper_options,
                self.config.horizontal_css_classes.offset,
            )
        self.config.label_options["class"] = None

    def _check_input(self, input_type: str, options: dict[str, Any]) -> None:
        """label 없이 checkbox/radio input만 parts["input"]에 기록."""
        options.pop("template", None)
        label = options.pop("label", None)
        label_options = options.pop("label_options", None)
        if label is not None and PART_LABEL not in self.parts:
            self.parts[PART_LABEL] = label
            if label_options:
                self.config.label_options = label_options

        options.setdefault("uncheck", UNCHECK_VALUE)
        checked = self._is_checked(options)
        name, attrs = self._input_attributes(options)
        self._adjust_label_for(attrs)
        self.parts[PART_INPUT] = check_input(input_type, name, checked, attrs)

    def checkbox(self, options: dict[str, Any] | None = None, enclosed_by_label: bool = True) -> "ActiveField":
        """
        checkbox.

        Args:
            options:
                - value: 체크 값 (기본 "1")
                - uncheck: 미체크 시 전송 값 (기본 "0", None이면 hidden 생략)
                - label: label 텍스트
                - template: 이 필드 전용 template
            enclosed_by_label: label이 input을 감싸는 aurora 템플릿 사용 여부
        """
        options = dict(options or {})
        options.setdefault("value", CHECK_VALUE)

        if enclosed_by_label:
            self._prepare_enclosed(
                options,
                self.config.checkbox_template,
                self.config.horizontal_checkbox_template,
            )
            checked = self._is_checked(options)
            self.parts[PART_BEGIN_CHECKBOX_WRAPPER] = begin_tag(
                "div",
                {"class": "checkbox active" if checked else "checkbox", "data-toggle": "checkbox"},
            )
            self.parts[PART_END_CHECKBOX_WRAPPER] = end_tag("div")

        self._check_input("checkbox", options)
        return self

    def radio(self, options: dict[str, Any] | None = None, enclosed_by_label: bool = True) -> "ActiveField":
        """radio (options는 checkbox와 동일)."""
        options = dict(options or {})
        options.setdefault("value", CHECK_VALUE)

        if enclosed_by_label:
            self._prepare_enclosed(
                options,
                self.config.radio_template,
                self.config.horizontal_radio_template,
            )

        self._check_input("radio", options)
        return self

    # =========================================================================
    # Lists
    # =========================================================================

    def checkbox_list(self, items: Mapping[Any, str], options: dict[str, Any] | None = None) -> "ActiveField":
        """
        checkbox 목록.

        Args:
            items: 값 → label
            options:
                - item: 항목 렌더 함수 item(index, label, name, checked, value)
                - item_options: 기본 항목의 input 옵션 (label_options 포함)
                - template: inline일 때 사용할 template
                - unselect: 아무것도 선택 안 했을 때 전송 값 (기본 "")
        """
        options = dict(options or {})
        if self.config.inline:
            template = options.pop("template", None)
            self.config.template = template or self.config.inline_checkbox_list_template
            options.setdefault("item_options", {"label_options": {"class": CHECKBOX_INLINE_CLASS}})
        elif "item" not in options:
            options["item"] = render_checkbox_item

        self.parts[PART_INPUT] = self._render_list("checkbox", items, options)
        return self

    def radio_list(self, items: Mapping[Any, str], options: dict[str, Any] | None = None) -> "ActiveField":
        """radio 목록 (options는 checkbox_list와 동일)."""
        options = dict(options or {})
        if self.config.inline:
            template = options.pop("template", None)
            self.config.template = template or self.config.inline_radio_list_template
            options.setdefault("item_options", {"label_options": {"class": RADIO_INLINE_CLASS}})
        elif "item" not in options:
            options["item"] = render_radio_item

        self.parts[PART_INPUT] = self._render_list("radio", items, options)
        return self

    def _render_list(self, input_type: str, items: Mapping[Any, str], options: dict[str, Any]) -> str:
        """목록 컨테이너 + 항목들. label for는 생략 (단일 input이 아니므로)."""
        self._skip_label_for = True

        item: ItemRenderer | None = options.pop("item", None)
        item_options = dict(options.pop("item_options", None) or {})
        unselect = options.pop("unselect", "")
        separator = options.pop("separator", "\n")
        container_tag = options.pop("tag", "div")

        name, attrs = self._input_attributes(options)
        selection = self.model.get_value(self.attribute)

        rendered: list[str] = []
        for index, (value, label) in enumerate(items.items()):
            checked = is_selected(value, selection)
            if item is not None:
                rendered.append(item(index, label, name, checked, value))
                continue
            input_options = dict(item_options)
            label_options = input_options.pop("label_options", {})
            element = check_input(input_type, name, checked, {**input_options, "value": value})
            rendered.append(tag("label", f"{element} {escape(label)}", label_options))

        hidden = hidden_input(name, unselect) if unselect is not None else ""
        return hidden + tag(container_tag, separator.join(rendered), attrs)

    # =========================================================================
    # Aurora Inputs
    # =========================================================================

    def switch(self, options: dict[str, Any] | None = None) -> "ActiveField":
        """
        on/off 스위치.

        Args:
            options:
                - on_value: 켜짐 값 (기본 1)
                - off_value: 꺼짐 값 (기본 0)
                - 그 외: hidden input 속성
        """
        options = dict(options or {})
        on_value = options.pop("on_value", None)
        off_value = options.pop("off_value", None)
        if on_value is None:
            on_value = SWITCH_ON_VALUE
        if off_value is None:
            off_value = SWITCH_OFF_VALUE

        name, attrs = self._input_attributes(self._merged_input_options(options))
        value = self.model.get_value(self.attribute)
        active = to_str(value) == to_str(on_value)

        switch_label = tag(
            "div",
            tag("div", "", {"class": "switchbutton"}),
            {"class": "switch-label"},
        )
        self.parts[PART_INPUT] = tag(
            "div",
            hidden_input(name, value, attrs) + switch_label,
            {
                "class": "switch active" if active else "switch",
                "data-toggle": "switch",
                "data-on-value": on_value,
                "data-off-value": off_value,
            },
        )
        return self

    def datepicker_input(self, options: dict[str, Any] | None = None) -> "ActiveField":
        """datepicker trigger가 붙은 text input."""
        merged = deep_merge(self._merged_input_options(options), {"data-toggle": "datepicker"})
        name, attrs = self._input_attributes(merged)
        self.parts[PART_INPUT] = input_tag(
            "text", name, self.model.get_value(self.attribute), attrs
        )
        return self

    def editor_input(self, options: dict[str, Any] | None = None) -> "ActiveField":
        """
        rich-text editor (Quill).

        hidden input에 HTML 내용이 저장되고, toolbar + editor div가 뒤따른다.
        quill asset bundle과 초기화 스크립트를 form.view에 등록한다.

        Args:
            options:
                - upload: upload 플러그인 옵션 dict (있으면 upload 버튼 표시)
                - placeholder: 비어 있을 때 표시할 텍스트
                - 그 외: hidden input 속성
        """
        options = dict(options or {})
        upload = options.pop("upload", None)

        name, attrs = self._input_attributes(self._merged_input_options(options))
        placeholder = attrs.pop("placeholder", "")
        input_id = attrs["id"]
        toolbar_id = f"{input_id}-toolbar"
        editor_id = f"{input_id}-editor"

        view = self.form.view
        toolbar = QuillToolbar(view, upload=upload).render()
        editor = tag(
            "div",
            "",
            {
                "id": editor_id,
                "class": "quill-editor",
                "style": f"min-height: {EDITOR_MIN_HEIGHT}",
                "data-placeholder": placeholder,
            },
        )

        view.register_asset_bundle("jquery")
        view.register_asset_bundle("quill")
        view.register_js(
            build_editor_script(input_id, toolbar_id, editor_id, upload),
            key=f"editor-{input_id}",
        )

        self.parts[PART_INPUT] = (
            hidden_input(name, self.model.get_value(self.attribute), attrs)
            + tag("div", toolbar, {"id": toolbar_id})
            + editor
        )
        return self
