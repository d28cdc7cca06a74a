"""
HTML 태그 빌더.

규칙:
- 속성 값과 텍스트 내용은 항상 escape
- tag()의 content는 이미 완성된 HTML로 취급 (escape 안 함)
- 속성 순서는 dict 삽입 순서 유지 (골든 비교 안정성)
- True → 값 없는 속성, False/None → 생략
- "data" dict → data-* 속성으로 전개
"""

import html as html_escape_module
import json
from collections.abc import Iterable, Mapping
from typing import Any

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


def escape(value: Any) -> str:
    """HTML 이스케이프 (None → 빈 문자열)."""
    if value is None:
        return ""
    return html_escape_module.escape(str(value), quote=True)


def to_str(value: Any) -> str:
    """
    느슨한 문자열 비교용 변환.

    - None → ""
    - True → "1", False → ""
    - 그 외 str()
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def _attribute_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value if v)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return to_str(value)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """
    태그 속성 문자열 생성 (앞에 공백 포함).

    Args:
        attributes: 속성 dict

    Returns:
        ' id="x" class="a b"' 형태 문자열 (속성 없으면 "")
    """
    if not attributes:
        return ""

    rendered: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if name == "data" and isinstance(value, Mapping):
            for data_name, data_value in value.items():
                if data_value is None or data_value is False:
                    continue
                rendered.append(
                    f' data-{data_name}="{escape(_attribute_value(data_value))}"'
                )
            continue
        if value is True:
            rendered.append(f" {name}")
            continue
        if name == "class":
            value = _attribute_value(value)
            if not value:
                continue
        rendered.append(f' {name}="{escape(_attribute_value(value))}"')
    return "".join(rendered)


def begin_tag(name: str, attributes: Mapping[str, Any] | None = None) -> str:
    """여는 태그."""
    return f"<{name}{render_attributes(attributes)}>"


def end_tag(name: str) -> str:
    """닫는 태그."""
    return f"</{name}>"


def tag(name: str, content: str = "", attributes: Mapping[str, Any] | None = None) -> str:
    """
    완성된 태그.

    content는 HTML로 그대로 삽입된다. 텍스트라면 호출 측에서 escape().
    """
    if name in VOID_ELEMENTS:
        return begin_tag(name, attributes)
    return f"{begin_tag(name, attributes)}{content}{end_tag(name)}"


def add_css_class(options: dict[str, Any], css_class: str | None) -> None:
    """
    options["class"]에 CSS 클래스 추가 (in-place, 중복 무시).
    """
    if not css_class:
        return
    existing = options.get("class") or ""
    if isinstance(existing, (list, tuple)):
        existing = " ".join(existing)
    classes = existing.split()
    for name in css_class.split():
        if name not in classes:
            classes.append(name)
    options["class"] = " ".join(classes)


# =============================================================================
# Inputs
# =============================================================================

def input_tag(
    input_type: str,
    name: str | None = None,
    value: Any = None,
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """<input> 태그."""
    attrs: dict[str, Any] = {"type": input_type}
    if name is not None:
        attrs["name"] = name
    if value is not None:
        attrs["value"] = to_str(value)
    attrs.update(attributes or {})
    return begin_tag("input", attrs)


def hidden_input(name: str, value: Any = None, attributes: Mapping[str, Any] | None = None) -> str:
    """<input type="hidden">."""
    return input_tag("hidden", name, "" if value is None else value, attributes)


def textarea(name: str, value: Any = None, attributes: Mapping[str, Any] | None = None) -> str:
    """<textarea>."""
    attrs = {"name": name, **(attributes or {})}
    return tag("textarea", escape(to_str(value)), attrs)


def check_input(
    input_type: str,
    name: str,
    checked: bool,
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """
    checkbox/radio <input>.

    attributes의 "uncheck" 키가 있으면 앞에 hidden input을 붙여
    체크 해제 상태도 전송되게 한다.
    """
    attrs = dict(attributes or {})
    uncheck = attrs.pop("uncheck", None)
    value = attrs.pop("value", "1")

    hidden = ""
    if uncheck is not None:
        hidden_attrs = {"id": f"{attrs['id']}-hidden"} if attrs.get("id") else None
        hidden = hidden_input(name, uncheck, hidden_attrs)

    attrs["checked"] = bool(checked)
    return hidden + input_tag(input_type, name, value, attrs)


def is_selected(value: Any, selection: Any) -> bool:
    """선택 여부 (느슨한 문자열 비교, selection은 단일 값 또는 iterable)."""
    if selection is None:
        return False
    if isinstance(selection, Iterable) and not isinstance(selection, (str, bytes)):
        return to_str(value) in {to_str(s) for s in selection}
    return to_str(value) == to_str(selection)


def select_tag(
    name: str,
    selection: Any,
    items: Mapping[Any, Any],
    attributes: Mapping[str, Any] | None = None,
) -> str:
    """<select> + <option> 목록."""
    attrs = dict(attributes or {})
    prompt = attrs.pop("prompt", None)

    options: list[str] = []
    if prompt is not None:
        options.append(tag("option", escape(prompt), {"value": ""}))
    for value, label in items.items():
        options.append(
            tag(
                "option",
                escape(label),
                {"value": to_str(value), "selected": is_selected(value, selection)},
            )
        )
    return tag("select", "\n" + "\n".join(options) + "\n", {"name": name, **attrs})
