"""
Render layer: 페이지 렌더 컨텍스트.

역할:
- Jinja2 partial 렌더
- asset bundle / 초기화 JS 수집 → link/script 태그
"""

from .view import View

__all__ = [
    "View",
]
