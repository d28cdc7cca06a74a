"""
ID 생성: DOM element id

규칙:
- 전역 카운터 금지 → IdSequence 인스턴스를 렌더 호출에 명시적으로 전달
- 같은 입력 + 새 IdSequence → 같은 id (결정론적)
- input id는 form 이름 + attribute에서 결정론적으로 생성
"""

import re

_NON_ID_CHARS = re.compile(r"[^\w-]+")


class IdSequence:
    """
    순차 id 발급기.

    Usage:
        ids = IdSequence("sidebar")
        ids.next()  # "sidebar0"
        ids.next()  # "sidebar1"
    """

    def __init__(self, prefix: str, start: int = 0) -> None:
        self.prefix = prefix
        self.counter = start

    def next(self) -> str:
        """다음 id 발급."""
        value = f"{self.prefix}{self.counter}"
        self.counter += 1
        return value

    def __repr__(self) -> str:
        return f"IdSequence(prefix={self.prefix!r}, counter={self.counter})"


def generate_input_id(form_name: str, attribute: str) -> str:
    """
    input element id 생성.

    포맷: {form_name}-{attribute} (소문자, 허용 외 문자 → "-")
    form_name이 비어 있으면 attribute만 사용.

    Args:
        form_name: 모델 폼 이름 (예: "LoginForm")
        attribute: attribute 이름 (예: "email")

    Returns:
        id 문자열 (예: "loginform-email")
    """
    raw = f"{form_name}-{attribute}" if form_name else attribute
    return _sanitize_for_id(raw)


def generate_input_name(form_name: str, attribute: str) -> str:
    """
    input name 생성.

    포맷: {form_name}[{attribute}], form_name이 비어 있으면 attribute.
    """
    return f"{form_name}[{attribute}]" if form_name else attribute


def _sanitize_for_id(value: str) -> str:
    """
    id에 사용할 수 있도록 문자열 정리.

    - 소문자
    - [a-z0-9_-] 외 문자 → "-"
    - 앞뒤 "-" 제거
    """
    sanitized = _NON_ID_CHARS.sub("-", value.lower())
    return sanitized.strip("-")
