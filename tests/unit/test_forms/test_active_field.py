"""
test_active_field.py - ActiveField 렌더링 테스트

DoD:
- 레이아웃별 기본 필드 마크업
- label(False) → label 마크업 없음, horizontal이면 offset 클래스
- checkbox/switch active 상태는 값 비교로만 결정
- render()는 여러 번 호출해도 같은 결과
- 알 수 없는 설정 키 → FormError
"""

from dataclasses import dataclass

import pytest

from src.domain.errors import ErrorCodes, FormError
from src.forms.model import ModelAdapter

EMAIL_INPUT = (
    '<input type="text" name="email" value="a@b.com" id="email" '
    'class="form-control" placeholder="Email">'
)


# =============================================================================
# 기본 텍스트 필드
# =============================================================================


class TestTextField:
    """레이아웃별 기본 텍스트 필드."""

    def test_default_layout_markup(self, make_form, model):
        """default: label → input → hint → error."""
        html = make_form().field(model, "email").render()

        assert html == (
            '<div class="form-group field-email">\n'
            '<label class="control-label" for="email">Email</label>\n'
            f"{EMAIL_INPUT}\n"
            "\n"
            "\n"
            "</div>"
        )

    def test_horizontal_layout_markup(self, make_form, model):
        """horizontal: input과 error가 grid wrapper 안에 위치."""
        html = make_form("horizontal").field(model, "email").render()

        assert html == (
            '<div class="form-group field-email">\n'
            '<label class="control-label col-sm-3" for="email">Email</label>\n'
            '<div class="col-sm-6">\n'
            f"{EMAIL_INPUT}\n"
            "\n"
            "</div>\n"
            "\n"
            "</div>"
        )

    def test_horizontal_no_error_block_without_error(self, make_form, model):
        """에러 없으면 에러 블록 없음."""
        html = make_form("horizontal").field(model, "email").render()

        assert "help-block-error" not in html
        assert "has-error" not in html

    def test_inline_layout_label_is_screen_reader_only(self, make_form, model):
        """inline: label은 sr-only."""
        html = make_form("inline").field(model, "email").render()

        assert '<label class="sr-only" for="email">Email</label>' in html

    def test_unknown_layout_falls_back_to_default(self, make_form, model):
        """알 수 없는 레이아웃 → default와 동일."""
        expected = make_form().field(model, "email").render()

        assert make_form("grid").field(model, "email").render() == expected

    def test_form_name_prefixes_name_and_id(self, make_form):
        """모델 클래스 이름 → name/id 접두어."""

        @dataclass
        class LoginForm:
            email: str = "a@b.com"

        html = make_form().field(ModelAdapter(LoginForm()), "email").render()

        assert 'name="LoginForm[email]"' in html
        assert 'id="loginform-email"' in html
        assert 'class="form-group field-loginform-email"' in html

    def test_placeholder_disabled(self, make_form, model):
        """placeholder=False → placeholder 속성 없음."""
        html = make_form().field(model, "email", placeholder=False).render()

        assert "placeholder=" not in html

    def test_field_config_from_form(self, make_form, model):
        """form field_config의 grid 클래스가 필드에 반영."""
        form = make_form(
            "horizontal",
            field_config={"horizontal_css_classes": {"wrapper": "col-sm-8"}},
        )

        html = form.field(model, "email").render()

        assert '<div class="col-sm-8">' in html
        assert '<label class="control-label col-sm-3" for="email">' in html

    def test_unknown_config_key_raises(self, make_form, model):
        """알 수 없는 설정 키 → INVALID_FIELD_CONFIG."""
        with pytest.raises(FormError) as exc_info:
            make_form().field(model, "email", bogus=1)

        assert exc_info.value.code == ErrorCodes.INVALID_FIELD_CONFIG
        assert exc_info.value.context["keys"] == ["bogus"]

    def test_render_is_idempotent(self, make_form, model):
        """render() 반복 호출 → 같은 결과."""
        field = make_form("horizontal").field(model, "email").label(False).hint("Help")

        assert field.render() == field.render()
        assert str(field) == field.render()


# =============================================================================
# Label / Error / Hint
# =============================================================================


class TestLabel:
    """label() 설정."""

    def test_label_false_removes_label(self, make_form, model):
        """label(False) → <label> 없음."""
        html = make_form().field(model, "email").label(False).render()

        assert "<label" not in html

    def test_label_false_adds_offset_in_horizontal(self, make_form, model):
        """horizontal + label(False) → wrapper에 offset 클래스."""
        html = make_form("horizontal").field(model, "email").label(False).render()

        assert '<div class="col-sm-6 col-sm-offset-3">' in html

    def test_label_false_twice_is_same_as_once(self, make_form, model):
        """label(False) 두 번 → 한 번과 동일 (offset 중복 없음)."""
        form = make_form("horizontal")
        once = form.field(model, "email").label(False).render()
        twice = form.field(model, "email").label(False).label(False).render()

        assert once == twice
        assert twice.count("col-sm-offset-3") == 1

    def test_label_true_restores_label(self, make_form, model):
        """label(False) 후 label(True) → 모델 label 복원."""
        html = make_form().field(model, "email").label(False).label(True).render()

        assert '<label class="control-label" for="email">Email</label>' in html

    def test_label_true_keeps_checkbox_label(self, make_form, model):
        """label(True)는 checkbox에 지정한 label 텍스트를 지우지 않음."""
        html = make_form().field(model, "agree").checkbox({"label": "Remember"}).label(True).render()

        assert "Remember\n</label>" in html
        assert "Agree\n</label>" not in html

    def test_label_false_then_checkbox_label_then_true(self, make_form, model):
        """label(False) → checkbox label → label(True): 비운 part만 복원."""
        html = (
            make_form()
            .field(model, "agree")
            .label(False)
            .checkbox({"label": "Remember"})
            .label(True)
            .render()
        )

        assert '<label for="agree">' in html
        assert "Remember\n</label>" in html

    def test_custom_label_text(self, make_form, model):
        """str label → 그대로 사용."""
        html = make_form().field(model, "email").label("E-mail <b>address</b>").render()

        assert (
            '<label class="control-label" for="email">E-mail <b>address</b></label>' in html
        )

    def test_explicit_model_label(self, make_form, sample_values):
        """모델에 지정된 label 우선."""
        model = ModelAdapter(sample_values, labels={"email": "Your email"})

        html = make_form().field(model, "email").render()

        assert ">Your email</label>" in html
        assert 'placeholder="Your email"' in html


class TestError:
    """에러 표시."""

    def test_first_error_shown(self, make_form, model_with_errors):
        """첫 번째 에러만 표시 + has-error 클래스."""
        html = make_form().field(model_with_errors, "email").render()

        assert '<p class="help-block help-block-error">Email is invalid.</p>' in html
        assert "Email is taken." not in html
        assert '<div class="form-group field-email has-error">' in html

    def test_error_disabled(self, make_form, model_with_errors):
        """error(False) → 에러 블록 없음."""
        html = make_form().field(model_with_errors, "email").error(False).render()

        assert "help-block-error" not in html

    def test_inline_layout_hides_error(self, make_form, model_with_errors):
        """inline 레이아웃은 에러 블록 비활성."""
        html = make_form("inline").field(model_with_errors, "email").render()

        assert "help-block-error" not in html

    def test_error_message_escaped(self, make_form, sample_values):
        """에러 메시지는 escape."""
        model = ModelAdapter(sample_values, errors={"email": "<script>"})

        html = make_form().field(model, "email").render()

        assert "&lt;script&gt;" in html
        assert "<script>" not in html


class TestHint:
    """hint() 설정."""

    def test_explicit_hint(self, make_form, model):
        html = make_form().field(model, "email").hint("We never share it.").render()

        assert '<p class="help-block">We never share it.</p>' in html

    def test_model_hint(self, make_form, sample_values):
        """모델 hint 사용."""
        model = ModelAdapter(sample_values, hints={"email": "Work address"})

        html = make_form().field(model, "email").render()

        assert '<p class="help-block">Work address</p>' in html

    def test_hint_disabled(self, make_form, sample_values):
        """hint(False) → 모델 hint도 표시 안 함."""
        model = ModelAdapter(sample_values, hints={"email": "Work address"})

        html = make_form().field(model, "email").hint(False).render()

        assert "help-block" not in html

    def test_horizontal_hint_uses_grid_class(self, make_form, model):
        html = make_form("horizontal").field(model, "email").hint("Help").render()

        assert '<div class="help-block col-sm-3">Help</div>' in html


# =============================================================================
# 템플릿 변형
# =============================================================================


class TestTemplateOptions:
    """input_template / input_before / input_feedback."""

    def test_input_template_wraps_input(self, make_form, model):
        """input_template의 {input} 자리에 input 삽입."""
        html = make_form().field(
            model,
            "email",
            input_template='<div class="input-group">{input}</div>',
        ).render()

        assert f'<div class="input-group">{EMAIL_INPUT}</div>' in html

    def test_custom_template_with_unknown_token(self, make_form, model):
        """알 수 없는 토큰은 제거."""
        html = make_form().field(model, "email", template="{input}{mystery}").render()

        assert "{mystery}" not in html
        assert EMAIL_INPUT in html

    def test_input_before(self, make_form, model):
        """wrapper 시작 직후 삽입."""
        html = make_form("horizontal").field(model, "email", input_before="@").render()

        assert '<div class="col-sm-6"><span class="form-control-before">@</span>\n' in html

    def test_input_feedback(self, make_form, model):
        """wrapper 끝 직전 아이콘 + has-feedback 클래스."""
        html = make_form("horizontal").field(model, "email", input_feedback=True).render()

        assert (
            '<span class="form-control-feedback">'
            '<i class="fa fa-check"></i><i class="fa fa-times"></i></span></div>'
        ) in html
        assert '<div class="form-group field-email has-feedback">' in html


# =============================================================================
# Plain Inputs
# =============================================================================


class TestPlainInputs:
    """text/password/textarea/dropdown."""

    def test_input_with_type(self, make_form, model):
        html = make_form().field(model, "email").input("email").render()

        assert '<input type="email" name="email" value="a@b.com"' in html

    def test_password_does_not_echo_value(self, make_form):
        model = ModelAdapter({"password": "secret"})

        html = make_form().field(model, "password").password_input().render()

        assert (
            '<input type="password" name="password" id="password" '
            'class="form-control" placeholder="Password">'
        ) in html
        assert "secret" not in html

    def test_textarea_escapes_content(self, make_form, model):
        html = make_form().field(model, "bio").textarea().render()

        assert (
            '<textarea name="bio" id="bio" class="form-control" placeholder="Bio">'
            "&lt;p&gt;Hello&lt;/p&gt;</textarea>"
        ) in html

    def test_dropdown_selects_model_value(self, make_form, model):
        items = {"kr": "Korea", "us": "United States"}

        html = make_form().field(model, "country").dropdown_list(items).render()

        assert '<select name="country" id="country" class="form-control">' in html
        assert '<option value="kr" selected>Korea</option>' in html
        assert '<option value="us">United States</option>' in html

    def test_hidden_input(self, make_form, model):
        html = make_form().field(model, "email").hidden_input().render()

        assert '<input type="hidden" name="email" value="a@b.com" id="email">' in html

    def test_explicit_input_id_updates_label_for(self, make_form, model):
        """input id를 지정하면 label for도 같은 id."""
        html = make_form().field(model, "email").text_input({"id": "custom"}).render()

        assert 'for="custom"' in html
        assert 'id="custom"' in html


# =============================================================================
# Checkbox / Radio
# =============================================================================


class TestCheckbox:
    """checkbox()."""

    def test_checked_when_value_matches(self, make_form, model):
        """모델 값 "1" == value "1" → active."""
        html = make_form().field(model, "agree").checkbox({"value": "1"}).render()

        assert '<div class="checkbox active" data-toggle="checkbox">' in html
        assert (
            '<input type="hidden" name="agree" value="0" id="agree-hidden">'
            '<input type="checkbox" name="agree" value="1" id="agree" checked>'
        ) in html

    def test_unchecked_when_value_differs(self, make_form, model):
        """모델 값 "0" → active 아님."""
        html = make_form().field(model, "newsletter").checkbox({"value": "1"}).render()

        assert '<div class="checkbox" data-toggle="checkbox">' in html
        assert "checked" not in html

    def test_loose_equality_with_int(self, make_form):
        """정수 1과 문자열 "1"은 같은 값."""
        model = ModelAdapter({"agree": 1})

        html = make_form().field(model, "agree").checkbox().render()

        assert "checkbox active" in html

    def test_label_encloses_input(self, make_form, model):
        """label 태그가 input과 label 텍스트를 감쌈."""
        html = make_form().field(model, "agree").checkbox({"label": "I agree"}).render()

        assert '<label for="agree">\n<input type="hidden"' in html
        assert "I agree\n</label>" in html

    def test_uncheck_none_omits_hidden(self, make_form, model):
        html = make_form().field(model, "agree").checkbox({"uncheck": None}).render()

        assert 'type="hidden"' not in html

    def test_horizontal_checkbox_has_offset(self, make_form, model):
        html = make_form("horizontal").field(model, "agree").checkbox().render()

        assert '<div class="col-sm-6 col-sm-offset-3">' in html

    def test_checkbox_without_label(self, make_form, model):
        """label(False) → label 태그 없음."""
        html = make_form().field(model, "agree").label(False).checkbox().render()

        assert "<label" not in html
        assert 'type="checkbox"' in html

    def test_not_enclosed_by_label(self, make_form, model):
        """enclosed_by_label=False → 일반 템플릿."""
        html = make_form().field(model, "agree").checkbox(enclosed_by_label=False).render()

        assert "data-toggle" not in html
        assert '<label class="control-label" for="agree">Agree</label>' in html

    def test_not_enclosed_template_option_not_an_attribute(self, make_form, model):
        """enclosed_by_label=False여도 template 옵션은 input 속성으로 새지 않음."""
        html = (
            make_form()
            .field(model, "agree")
            .checkbox({"template": "{input}"}, enclosed_by_label=False)
            .render()
        )

        assert "template=" not in html
        assert 'type="checkbox"' in html


class TestRadio:
    """radio()."""

    def test_checked_radio(self, make_form):
        model = ModelAdapter({"plan": "1"})

        html = make_form().field(model, "plan").radio({"label": "Basic"}).render()

        assert html.startswith('<div class="form-group field-plan">\n<div class="radio">\n')
        assert '<input type="radio" name="plan" value="1" id="plan" checked>' in html
        assert "Basic\n</label>" in html

    def test_unchecked_radio(self, make_form):
        model = ModelAdapter({"plan": "2"})

        html = make_form().field(model, "plan").radio().render()

        assert "checked" not in html


# =============================================================================
# Lists
# =============================================================================

INTERESTS = {"forms": "Forms", "widgets": "Widgets", "themes": "Themes"}
GENDERS = {"m": "Male", "f": "Female"}


class TestCheckboxList:
    """checkbox_list()."""

    def test_aurora_items(self, make_form, model):
        """기본 항목: aurora 체크 아이콘 + 선택 항목 active."""
        html = make_form().field(model, "interests").checkbox_list(INTERESTS).render()

        assert '<input type="hidden" name="interests" value=""><div id="interests">' in html
        assert (
            '<div class="row"><div class="checkbox active" data-toggle="checkbox">'
            '<input type="checkbox" name="interests" value="forms" checked>'
            '<div class="checkbox-label"><i class="fa fa-check"></i></div></div>'
            "<label>Forms</label></div>"
        ) in html
        assert '<input type="checkbox" name="interests" value="widgets">' in html

    def test_label_has_no_for(self, make_form, model):
        """목록 label은 for 속성 없음."""
        html = make_form().field(model, "interests").checkbox_list(INTERESTS).render()

        assert '<label class="control-label">Interests</label>' in html
        assert 'for="interests"' not in html

    def test_inline_items(self, make_form, model):
        html = (
            make_form().field(model, "interests").inline().checkbox_list(INTERESTS).render()
        )

        assert (
            '<label class="checkbox-inline">'
            '<input type="checkbox" name="interests" value="forms" checked> Forms</label>'
        ) in html

    def test_custom_item_renderer(self, make_form, model):
        def item(index, label, name, checked, value):
            return f"<span>{index}:{value}:{int(checked)}</span>"

        html = (
            make_form()
            .field(model, "interests")
            .checkbox_list(INTERESTS, {"item": item, "unselect": None})
            .render()
        )

        assert "<span>0:forms:1</span>\n<span>1:widgets:0</span>" in html
        assert 'type="hidden"' not in html


class TestRadioList:
    """radio_list()."""

    def test_inline_radio_list(self, make_form, model):
        """inline() 후 radio_list → radio-inline 항목."""
        html = make_form().field(model, "gender").inline().radio_list(GENDERS).render()

        assert (
            '<label class="radio-inline">'
            '<input type="radio" name="gender" value="f" checked> Female</label>'
        ) in html
        assert (
            '<label class="radio-inline">'
            '<input type="radio" name="gender" value="m"> Male</label>'
        ) in html
        assert 'data-toggle="radio"' not in html

    def test_inline_after_list_has_no_effect(self, make_form, model):
        """radio_list 후 inline() → 이미 렌더된 항목은 그대로."""
        field = make_form().field(model, "gender").radio_list(GENDERS)
        field.inline()

        html = field.render()

        assert 'data-toggle="radio"' in html
        assert "radio-inline" not in html

    def test_default_radio_items(self, make_form, model):
        html = make_form().field(model, "gender").radio_list(GENDERS).render()

        assert (
            '<div class="radio" data-toggle="radio">'
            '<input type="radio" name="gender" value="f" checked>'
            '<label class="radio-label"></label></div>'
        ) in html


# =============================================================================
# Aurora Inputs
# =============================================================================


class TestSwitch:
    """switch()."""

    def test_active_with_default_values(self, make_form, model):
        """기본 on/off = 1/0, 모델 값 "1" → active."""
        html = make_form().field(model, "notifications").switch().render()

        assert (
            '<div class="switch active" data-toggle="switch" '
            'data-on-value="1" data-off-value="0">'
        ) in html
        assert '<div class="switch-label"><div class="switchbutton"></div></div>' in html

    def test_inactive_when_value_differs(self, make_form):
        model = ModelAdapter({"mode": "no"})

        html = make_form().field(model, "mode").switch({"on_value": "yes", "off_value": "no"}).render()

        assert (
            '<div class="switch" data-toggle="switch" '
            'data-on-value="yes" data-off-value="no">'
        ) in html

    def test_inactive_when_value_missing(self, make_form):
        html = make_form().field(ModelAdapter({}), "notifications").switch().render()

        assert 'class="switch active"' not in html
        assert 'name="notifications" value=""' in html

    def test_hidden_input_carries_value(self, make_form, model):
        html = make_form().field(model, "notifications").switch().render()

        assert '<input type="hidden" name="notifications" value="1" id="notifications"' in html


class TestDatepicker:
    """datepicker_input()."""

    def test_datepicker_toggle(self, make_form, model):
        html = make_form().field(model, "birthday").datepicker_input().render()

        assert (
            '<input type="text" name="birthday" value="2024-01-15" id="birthday" '
            'class="form-control" placeholder="Birthday" data-toggle="datepicker">'
        ) in html


class TestEditor:
    """editor_input()."""

    def test_editor_markup(self, make_form, model):
        html = make_form().field(model, "bio").editor_input().render()

        assert (
            '<input type="hidden" name="bio" value="&lt;p&gt;Hello&lt;/p&gt;" '
            'id="bio" class="form-control">'
        ) in html
        assert '<div id="bio-toolbar"><div class="ql-format-group">' in html
        assert (
            '<div id="bio-editor" class="quill-editor" style="min-height: 300px" '
            'data-placeholder="Bio"></div>'
        ) in html

    def test_editor_registers_assets_and_script(self, make_form, model, view):
        make_form().field(model, "bio").editor_input().render()

        assert list(view.bundles) == ["jquery", "quill"]
        assert "editor-bio" in view.js
        assert 'document.getElementById("bio-editor")' in view.js["editor-bio"]

    def test_two_editors_on_one_page(self, make_form, view):
        model = ModelAdapter({"intro": "", "outro": ""})
        form = make_form()

        form.field(model, "intro").editor_input().render()
        form.field(model, "outro").editor_input().render()

        assert set(view.js) == {"editor-intro", "editor-outro"}

    def test_upload_button_only_with_upload(self, make_form, model):
        form = make_form()

        plain = form.field(model, "bio").editor_input().render()
        upload = form.field(model, "bio").editor_input({"upload": {"url": "/upload"}}).render()

        assert 'data-toggle="upload"' not in plain
        assert 'data-toggle="upload"' in upload

    def test_custom_placeholder(self, make_form, model):
        html = make_form().field(model, "bio").editor_input({"placeholder": "Write..."}).render()

        assert 'data-placeholder="Write..."' in html
