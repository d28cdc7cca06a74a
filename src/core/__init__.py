"""
Core layer: 렌더러 공통 기본 도구.

역할:
- HTML 태그 빌더 / escape
- 설정 deep merge
- DOM id 생성 (명시적 IdSequence)
"""

from .html import add_css_class, begin_tag, end_tag, escape, tag
from .ids import IdSequence, generate_input_id, generate_input_name
from .merge import deep_merge

__all__ = [
    # html
    "tag",
    "begin_tag",
    "end_tag",
    "escape",
    "add_css_class",
    # ids
    "IdSequence",
    "generate_input_id",
    "generate_input_name",
    # merge
    "deep_merge",
]
