"""
모델 어댑터: 필드 렌더러가 호스트 모델에서 읽는 값들.

검증/바인딩은 범위 밖. 렌더러가 필요로 하는 조회만 제공:
- attribute 값
- 표시용 label / hint
- 첫 번째 에러 메시지
- input name / id
"""

import re
from collections.abc import Mapping
from typing import Any

from src.core.ids import generate_input_id, generate_input_name

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def generate_attribute_label(attribute: str) -> str:
    """
    attribute 이름 → 표시용 label.

    Example:
        >>> generate_attribute_label("first_name")
        'First Name'
        >>> generate_attribute_label("createdAt")
        'Created At'
    """
    words = _CAMEL_BOUNDARY.sub(" ", attribute).replace("_", " ").replace("-", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


class ModelAdapter:
    """
    객체 또는 mapping을 감싸는 모델 어댑터.

    Usage:
        model = ModelAdapter({"email": "a@b.com"}, form_name="LoginForm")
        model.get_value("email")   # "a@b.com"
        model.input_name("email")  # "LoginForm[email]"
    """

    def __init__(
        self,
        source: Any,
        form_name: str | None = None,
        labels: Mapping[str, str] | None = None,
        hints: Mapping[str, str] | None = None,
        errors: Mapping[str, list[str] | str] | None = None,
    ) -> None:
        self.source = source
        if form_name is None:
            form_name = "" if isinstance(source, Mapping) else type(source).__name__
        self.form_name = form_name
        self.labels = dict(labels or {})
        self.hints = dict(hints or {})
        self.errors = dict(errors or {})

    def get_value(self, attribute: str) -> Any:
        """attribute 값 (없으면 None)."""
        if isinstance(self.source, Mapping):
            return self.source.get(attribute)
        return getattr(self.source, attribute, None)

    def get_label(self, attribute: str) -> str:
        """표시용 label (명시값 우선, 없으면 이름에서 생성)."""
        if attribute in self.labels:
            return self.labels[attribute]
        return generate_attribute_label(attribute)

    def get_hint(self, attribute: str) -> str:
        """hint 텍스트 (없으면 "")."""
        return self.hints.get(attribute, "")

    def first_error(self, attribute: str) -> str | None:
        """첫 번째 에러 메시지 (없으면 None)."""
        errors = self.errors.get(attribute)
        if not errors:
            return None
        if isinstance(errors, str):
            return errors
        return errors[0]

    def has_error(self, attribute: str) -> bool:
        return self.first_error(attribute) is not None

    def input_name(self, attribute: str) -> str:
        return generate_input_name(self.form_name, attribute)

    def input_id(self, attribute: str) -> str:
        return generate_input_id(self.form_name, attribute)
