"""
Rich-text editor toolbar (Quill snow theme).

폰트/크기/색상 팔레트는 고정값. 마크업은 Jinja2 partial
(quill_toolbar.html)에서 생성한다.
"""

from typing import TYPE_CHECKING, Any

from src.domain.constants import EDITOR_TOOLBAR_PARTIAL

if TYPE_CHECKING:
    from src.render.view import View

# (value, label, selected)
FONTS = (
    ("sans-serif", "Sans Serif", True),
    ("Georgia, serif", "Serif", False),
    ("Monaco, 'Courier New', monospace", "Monospace", False),
)

SIZES = ("10px", "14px", "18px", "24px", "32px")
DEFAULT_SIZE = "14px"

COLORS = (
    "rgb(0, 0, 0)", "rgb(230, 0, 0)", "rgb(255, 153, 0)", "rgb(255, 255, 0)",
    "rgb(0, 138, 0)", "rgb(0, 102, 204)", "rgb(153, 51, 255)", "rgb(255, 255, 255)",
    "rgb(250, 204, 204)", "rgb(255, 235, 204)", "rgb(255, 255, 204)", "rgb(204, 232, 204)",
    "rgb(204, 224, 245)", "rgb(235, 214, 255)", "rgb(187, 187, 187)", "rgb(240, 102, 102)",
    "rgb(255, 194, 102)", "rgb(255, 255, 102)", "rgb(102, 185, 102)", "rgb(102, 163, 224)",
    "rgb(194, 133, 255)", "rgb(136, 136, 136)", "rgb(161, 0, 0)", "rgb(178, 107, 0)",
    "rgb(178, 178, 0)", "rgb(0, 97, 0)", "rgb(0, 71, 178)", "rgb(107, 36, 178)",
    "rgb(68, 68, 68)", "rgb(92, 0, 0)", "rgb(102, 61, 0)", "rgb(102, 102, 0)",
    "rgb(0, 55, 0)", "rgb(0, 41, 102)", "rgb(61, 20, 102)",
)
DEFAULT_COLOR = "rgb(0, 0, 0)"
DEFAULT_BACKGROUND = "rgb(255, 255, 255)"

ALIGNMENTS = ("left", "center", "right", "justify")


class QuillToolbar:
    """
    Toolbar partial 렌더러.

    Usage:
        html = QuillToolbar(view, upload={"url": "/upload"}).render()
    """

    def __init__(self, view: "View", upload: dict[str, Any] | None = None) -> None:
        self.view = view
        self.upload = upload

    def context(self) -> dict[str, Any]:
        """partial 컨텍스트."""
        return {
            "fonts": FONTS,
            "sizes": SIZES,
            "default_size": DEFAULT_SIZE,
            "colors": COLORS,
            "default_color": DEFAULT_COLOR,
            "default_background": DEFAULT_BACKGROUND,
            "alignments": ALIGNMENTS,
            "upload": self.upload,
        }

    def render(self) -> str:
        return self.view.render(EDITOR_TOOLBAR_PARTIAL, **self.context())
