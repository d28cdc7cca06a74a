"""
Form Routes: 데모 페이지 + 필드 미리보기 API.

- GET / → 모든 입력 종류를 쓰는 데모 폼 (레이아웃은 ?layout= 또는 설정값)
- POST /api/fields/preview → 필드 하나를 렌더한 HTML + 필요한 asset URL
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.domain.errors import ErrorCodes, FormError
from src.forms.active_field import ActiveField
from src.forms.active_form import ActiveForm
from src.forms.model import ModelAdapter
from src.render.view import View
from src.widgets.sidebar import SideBar

logger = logging.getLogger(__name__)

# Jinja2 템플릿 설정
_templates_dir = Path(__file__).parent.parent / "templates"
jinja_templates = Jinja2Templates(directory=_templates_dir)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints

INPUT_KINDS = (
    "text",
    "password",
    "textarea",
    "dropdown",
    "checkbox",
    "radio",
    "checkbox_list",
    "radio_list",
    "switch",
    "datepicker",
    "editor",
)


# =============================================================================
# Demo Model
# =============================================================================

@dataclass
class ProfileForm:
    """데모용 모델."""
    email: str = "jane@example.com"
    password: str = ""
    remember_me: str = "1"
    notifications: int = 1
    birthday: str = "1990-01-01"
    gender: str = "f"
    interests: list[str] = field(default_factory=lambda: ["forms"])
    country: str = "kr"
    bio: str = "<p>Hello</p>"


GENDERS = {"m": "Male", "f": "Female"}
INTERESTS = {"forms": "Forms", "widgets": "Widgets", "themes": "Themes"}
COUNTRIES = {"kr": "Korea", "us": "United States", "de": "Germany"}


def _config(request: Request) -> dict[str, Any]:
    return getattr(request.app.state, "config", None) or {}


def _view(config: dict[str, Any]) -> View:
    base_url = config.get("assets", {}).get("base_url", "/static")
    return View(asset_base_url=base_url)


def build_demo_form(form: ActiveForm, model: ModelAdapter) -> list[str]:
    """데모 폼의 필드 HTML 목록."""
    return [
        form.field(model, "email").input("email").render(),
        form.field(model, "password").password_input().hint("At least 8 characters").render(),
        form.field(model, "country").dropdown_list(COUNTRIES).render(),
        form.field(model, "remember_me").checkbox().render(),
        form.field(model, "notifications").switch({"on_value": 1, "off_value": 0}).render(),
        form.field(model, "birthday").datepicker_input().render(),
        form.field(model, "gender").inline().radio_list(GENDERS).render(),
        form.field(model, "interests").checkbox_list(INTERESTS).render(),
        form.field(model, "bio").editor_input({"placeholder": "Tell us about yourself"}).render(),
    ]


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("/", response_class=HTMLResponse)
async def demo_page(request: Request, layout: str | None = None) -> HTMLResponse:
    """데모 폼 화면."""
    config = _config(request)
    form_config = config.get("form", {})
    view = _view(config)

    form = ActiveForm(
        view,
        layout=layout or form_config.get("layout"),
        field_config=form_config.get("field_config"),
        action="/",
    )
    model = ModelAdapter(
        ProfileForm(),
        hints={"email": "We never share your email."},
    )

    form_html = "\n".join([form.begin(), *build_demo_form(form, model), form.end()])
    sidebar_html = SideBar(config.get("sidebar", {}).get("column", {})).render()

    return jinja_templates.TemplateResponse(
        request,
        "demo.html",
        {
            "title": config.get("app", {}).get("title", "Aurora Forms"),
            "layout": form.layout.value,
            "form_html": form_html,
            "sidebar_html": sidebar_html,
            "head": view.head(),
            "body_end": view.body_end(),
        },
    )


# =============================================================================
# API Routes
# =============================================================================

# payload 키 → 허용 타입 (None은 항상 허용)
_PAYLOAD_TYPES: dict[str, tuple[type, ...]] = {
    "attribute": (str,),
    "kind": (str,),
    "layout": (str,),
    "form_name": (str,),
    "label": (bool, str),
    "error": (str,),
    "hint": (str,),
    "options": (dict,),
    "items": (dict,),
    "config": (dict,),
}

# options 안에서 타입이 정해진 키
_OPTION_TYPES: dict[str, tuple[type, ...]] = {
    "template": (str,),
    "separator": (str,),
    "label": (str,),
    "item_options": (dict,),
    "label_options": (dict,),
}


def _invalid(key: str, value: Any, expected: tuple[type, ...]) -> FormError:
    return FormError(
        ErrorCodes.INVALID_FIELD_CONFIG,
        "invalid preview payload value",
        key=key,
        type=type(value).__name__,
        expected=[t.__name__ for t in expected],
    )


def _check_payload(payload: dict[str, Any]) -> None:
    """
    미리보기 payload 타입 검증.

    Raises:
        FormError: INVALID_FIELD_CONFIG
    """
    for key, expected in _PAYLOAD_TYPES.items():
        value = payload.get(key)
        if value is not None and not isinstance(value, expected):
            raise _invalid(key, value, expected)

    options = payload.get("options") or {}
    if "item" in options:
        # 항목 렌더 함수는 JSON으로 받을 수 없음
        raise FormError(
            ErrorCodes.INVALID_FIELD_CONFIG,
            "item renderer cannot be set from a preview payload",
            key="options.item",
        )
    for key, expected in _OPTION_TYPES.items():
        value = options.get(key)
        if value is not None and not isinstance(value, expected):
            raise _invalid(f"options.{key}", value, expected)


def render_preview(payload: dict[str, Any]) -> dict[str, Any]:
    """
    미리보기 요청 → 렌더 결과.

    payload:
        attribute (str, 필수), value, kind (기본 "text"), layout,
        options (input 옵션), items (list 종류), config (필드 설정),
        label (False/str), error (에러 메시지), hint, inline, form_name

    Raises:
        FormError: UNKNOWN_INPUT_KIND, INVALID_FIELD_CONFIG
    """
    _check_payload(payload)

    attribute = payload.get("attribute") or "value"
    kind = payload.get("kind") or "text"
    if kind not in INPUT_KINDS:
        raise FormError(
            ErrorCodes.UNKNOWN_INPUT_KIND,
            "unknown input kind",
            kind=kind,
            available=list(INPUT_KINDS),
        )

    error = payload.get("error")
    model = ModelAdapter(
        {attribute: payload.get("value")},
        form_name=payload.get("form_name", ""),
        errors={attribute: [error]} if error else None,
    )
    view = View()
    form = ActiveForm(view, layout=payload.get("layout"))
    field_ = form.field(model, attribute, **(payload.get("config") or {}))

    if "label" in payload:
        field_.label(payload["label"])
    if payload.get("hint"):
        field_.hint(payload["hint"])
    if payload.get("inline"):
        field_.inline()

    _apply_kind(field_, kind, payload.get("options") or {}, payload.get("items") or {})
    logger.debug(f"Preview rendered: kind={kind}, layout={form.layout.value}")

    return {
        "html": field_.render(),
        "layout": form.layout.value,
        "assets": {"css": view.css_urls(), "js": view.js_urls()},
    }


def _apply_kind(field_: ActiveField, kind: str, options: dict[str, Any], items: dict[str, Any]) -> None:
    if kind == "text":
        field_.text_input(options)
    elif kind == "password":
        field_.password_input(options)
    elif kind == "textarea":
        field_.textarea(options)
    elif kind == "dropdown":
        field_.dropdown_list(items, options)
    elif kind == "checkbox":
        field_.checkbox(options)
    elif kind == "radio":
        field_.radio(options)
    elif kind == "checkbox_list":
        field_.checkbox_list(items, options)
    elif kind == "radio_list":
        field_.radio_list(items, options)
    elif kind == "switch":
        field_.switch(options)
    elif kind == "datepicker":
        field_.datepicker_input(options)
    elif kind == "editor":
        field_.editor_input(options)


@api_router.post("/preview")
async def preview_field(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """필드 하나 렌더."""
    try:
        return render_preview(payload)
    except FormError as e:
        raise HTTPException(status_code=400, detail=e.to_dict()) from e
