"""
Sidebar 네비게이션 위젯.

column 구조:
    {
        "Navbar": {
            "url": "#navbar",              # 선택
            "options": {"class": "x"},     # 선택, <a> 속성
            "submenu": {                   # 선택
                "Cover": "#navbar-cover",  # name → url
                "Invade": {"href": "#navbar-invade", "class": "y"},  # name → <a> 속성
            },
        },
        "Buttons": "#buttons",             # name → url
    }

출력:
    <nav class="aurora-sidebar">
      <ul id="sidebar0" class="nav">
        <li><a data-toggle="collapse" data-target="#sidebar1" data-parent="#sidebar0">Navbar</a>
            <i class="fa fa-chevron-right"></i>
            <ul class="submenu collapse" id="sidebar1">...</ul></li>
      </ul>
    </nav>

collapse 대상 id는 render()에 전달된 IdSequence에서 발급 (전역 카운터 없음).
"""

import logging
from collections.abc import Mapping
from typing import Any

from src.core.html import escape, tag
from src.core.ids import IdSequence
from src.domain.constants import SIDEBAR_CLASS, SIDEBAR_ID_PREFIX
from src.domain.errors import ErrorCodes, FormError

logger = logging.getLogger(__name__)


class SideBar:
    """
    2단 메뉴 트리 → 중첩 목록 HTML.

    Usage:
        html = SideBar(column).render()
        html = SideBar(column).render(IdSequence("sidebar", start=10))
    """

    def __init__(self, column: Mapping[str, Any], options: dict[str, Any] | None = None) -> None:
        """
        Raises:
            FormError: INVALID_MENU (column이 mapping이 아님)
        """
        if not isinstance(column, Mapping):
            raise FormError(
                ErrorCodes.INVALID_MENU,
                "sidebar column must be a mapping",
                type=type(column).__name__,
            )
        self.column = column
        self.options = options if options is not None else {"class": SIDEBAR_CLASS}

    def render(self, ids: IdSequence | None = None) -> str:
        """
        메뉴 HTML 생성.

        Args:
            ids: collapse 대상 id 발급기 (None이면 "sidebar0"부터 새로 시작)

        Returns:
            <nav> HTML
        """
        if ids is None:
            ids = IdSequence(SIDEBAR_ID_PREFIX)

        accordion_id = ids.next()
        items = [
            self._render_entry(name, entry, accordion_id, ids)
            for name, entry in self.column.items()
        ]
        menu = tag("ul", "".join(items), {"id": accordion_id, "class": "nav"})
        return tag("nav", menu, self.options)

    def __str__(self) -> str:
        return self.render()

    def _render_entry(self, name: str, entry: Any, accordion_id: str, ids: IdSequence) -> str:
        """최상위 항목 하나."""
        if isinstance(entry, str):
            entry = {"url": entry}
        elif not isinstance(entry, Mapping):
            raise FormError(
                ErrorCodes.INVALID_MENU,
                "menu entry must be a url or a mapping",
                name=name,
                type=type(entry).__name__,
            )

        anchor_options = self._anchor_options(entry.get("url"), entry.get("options"))
        submenu = self._render_submenu(entry.get("submenu"))

        if not submenu:
            return tag("li", tag("a", escape(name), anchor_options))

        submenu_id = ids.next()
        toggle_options = {
            "data-toggle": "collapse",
            "data-target": f"#{submenu_id}",
            "data-parent": f"#{accordion_id}",
            **anchor_options,
        }
        logger.debug(f"Sidebar submenu {name!r} → #{submenu_id}")
        content = (
            tag("a", escape(name), toggle_options)
            + tag("i", "", {"class": "fa fa-chevron-right"})
            + tag("ul", "".join(submenu), {"class": "submenu collapse", "id": submenu_id})
        )
        return tag("li", content)

    def _render_submenu(self, submenu: Any) -> list[str]:
        if not isinstance(submenu, Mapping):
            return []
        items: list[str] = []
        for name, target in submenu.items():
            if isinstance(target, str):
                anchor = tag("a", escape(name), {"href": target})
            elif target is None or isinstance(target, Mapping):
                anchor = tag("a", escape(name), dict(target or {}))
            else:
                raise FormError(
                    ErrorCodes.INVALID_MENU,
                    "submenu item must be a url or a mapping",
                    name=name,
                    type=type(target).__name__,
                )
            items.append(tag("li", anchor))
        return items

    @staticmethod
    def _anchor_options(url: str | None, options: Any) -> dict[str, Any]:
        anchor: dict[str, Any] = {}
        if url:
            anchor["href"] = url
        if isinstance(options, Mapping):
            anchor.update(options)
        return anchor
