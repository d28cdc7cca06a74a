"""
ActiveForm: 필드 공통 설정(레이아웃, field_config)과 View를 묶는 폼.
"""

from typing import Any

from src.core.html import add_css_class, begin_tag, end_tag
from src.domain.schemas import Layout
from src.forms.active_field import ActiveField
from src.forms.model import ModelAdapter
from src.render.view import View


class ActiveForm:
    """
    폼 하나.

    Usage:
        view = View()
        form = ActiveForm(view, layout="horizontal")
        html = form.begin() + str(form.field(model, "email")) + form.end()
    """

    def __init__(
        self,
        view: View | None = None,
        layout: Layout | str | None = Layout.DEFAULT,
        field_config: dict[str, Any] | None = None,
        action: str = "",
        method: str = "post",
        options: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            view: 렌더 컨텍스트 (None이면 새 View)
            layout: "default" | "horizontal" | "inline" (그 외 → default)
            field_config: 모든 필드에 적용할 설정 (필드 config가 우선)
            action: form action URL
            method: form method
            options: <form> 태그 속성
        """
        self.view = view if view is not None else View()
        self.layout = Layout.resolve(layout)
        self.field_config = dict(field_config or {})
        self.action = action
        self.method = method
        self.options = dict(options or {})

    def field(self, model: ModelAdapter, attribute: str, **config: Any) -> ActiveField:
        """
        필드 생성.

        Raises:
            FormError: INVALID_FIELD_CONFIG
        """
        return ActiveField(self, model, attribute, **config)

    def begin(self) -> str:
        """<form> 여는 태그 (aurora asset bundle 등록)."""
        self.view.register_asset_bundle("aurora")
        options = {"action": self.action, "method": self.method, **self.options}
        if self.layout is not Layout.DEFAULT:
            add_css_class(options, f"form-{self.layout.value}")
        return begin_tag("form", options)

    def end(self) -> str:
        return end_tag("form")
