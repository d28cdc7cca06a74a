"""
Widgets layer: 폼 외부 UI 조각.

- sidebar.py: 2단 네비게이션 메뉴
- toolbar.py: rich-text editor toolbar (Jinja2 partial)
- editor.py: editor 초기화 스크립트
"""

from .editor import build_editor_script
from .sidebar import SideBar
from .toolbar import QuillToolbar

__all__ = [
    "SideBar",
    "QuillToolbar",
    "build_editor_script",
]
