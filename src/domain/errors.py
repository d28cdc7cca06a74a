"""
Error definitions for the form renderer.

규칙:
- 렌더링 자체는 실패하지 않음 → 표시용 기본값으로 복구
- 프로그래머 실수(잘못된 설정 키, 없는 asset, 없는 partial)만 FormError로 명시적 실패
"""

from typing import Any


class FormError(Exception):
    """
    폼 렌더러 설정/사용 오류.

    표시 단계에서 복구할 수 없는 경우에만 사용:
    - 알 수 없는 field 설정 키
    - 잘못된 sidebar 메뉴 구조
    - 등록되지 않은 asset bundle
    - 존재하지 않는 Jinja2 partial

    Usage:
        raise FormError(ErrorCodes.ASSET_NOT_FOUND, "unknown bundle", name="foo")
    """

    def __init__(self, code: str, message: str = "", **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        parts = [f"[{self.code}]"]
        if self.message:
            parts.append(self.message)
        if ctx_str:
            parts.append(f"({ctx_str})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Field ===
    INVALID_FIELD_CONFIG = "INVALID_FIELD_CONFIG"
    UNKNOWN_INPUT_KIND = "UNKNOWN_INPUT_KIND"

    # === Widgets ===
    INVALID_MENU = "INVALID_MENU"

    # === View / Assets ===
    ASSET_NOT_FOUND = "ASSET_NOT_FOUND"
    PARTIAL_NOT_FOUND = "PARTIAL_NOT_FOUND"
