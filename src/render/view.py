"""
View: 페이지 단위 렌더 컨텍스트.

역할:
- Jinja2 partial 렌더 (toolbar 등)
- asset bundle 등록 (의존 bundle 먼저, 한 번씩)
- 초기화 JS 등록 (key 중복 시 덮어쓰기)
- <head>/<body> 끝에 넣을 link/script 태그 생성

요청 하나당 View 하나. 공유 금지.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from src.assets.bundles import AssetBundle, get_bundle
from src.core.html import tag
from src.domain.errors import ErrorCodes, FormError

logger = logging.getLogger(__name__)

WIDGET_TEMPLATES_DIR = Path(__file__).parent.parent / "widgets" / "templates"


class View:
    """
    렌더 컨텍스트.

    Usage:
        view = View()
        view.register_asset_bundle("aurora")
        toolbar = view.render("quill_toolbar.html", upload=None)
        page = view.head() + body + view.body_end()
    """

    def __init__(
        self,
        search_paths: Sequence[Path] | None = None,
        asset_base_url: str = "/static",
    ) -> None:
        """
        Args:
            search_paths: 추가 partial 검색 경로 (widgets/templates보다 우선)
            asset_base_url: base_url이 없는 bundle의 URL 접두사
        """
        self.search_paths = [*(search_paths or []), WIDGET_TEMPLATES_DIR]
        self.asset_base_url = asset_base_url
        self.bundles: dict[str, AssetBundle] = {}
        self.js: dict[str, str] = {}
        self._env: Environment | None = None

    def _environment(self) -> Environment:
        """Jinja2 환경 (lazy)."""
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader([str(p) for p in self.search_paths]),
                autoescape=select_autoescape(["html"]),
                keep_trailing_newline=False,
            )
        return self._env

    def render(self, name: str, **context: Any) -> str:
        """
        partial 렌더.

        Args:
            name: partial 파일명 (예: "quill_toolbar.html")
            **context: 템플릿 변수

        Raises:
            FormError: PARTIAL_NOT_FOUND
        """
        try:
            template = self._environment().get_template(name)
        except TemplateNotFound as e:
            raise FormError(
                ErrorCodes.PARTIAL_NOT_FOUND,
                "partial not found",
                name=name,
                search_paths=[str(p) for p in self.search_paths],
            ) from e
        return template.render(**context)

    # =========================================================================
    # Assets
    # =========================================================================

    def register_asset_bundle(self, name: str) -> AssetBundle:
        """
        bundle 등록 (의존 bundle 먼저).

        Raises:
            FormError: ASSET_NOT_FOUND
        """
        if name in self.bundles:
            return self.bundles[name]

        bundle = get_bundle(name)
        for dependency in bundle.depends:
            self.register_asset_bundle(dependency)
        self.bundles[name] = bundle
        logger.debug(f"Registered asset bundle {name!r}")
        return bundle

    def register_js(self, js: str, key: str | None = None) -> None:
        """
        초기화 JS 등록 (DOM ready 이후 실행).

        같은 key로 다시 등록하면 교체된다. key가 없으면 내용 자체가 key.
        """
        self.js[key or js] = js

    def css_urls(self) -> list[str]:
        urls: list[str] = []
        for bundle in self.bundles.values():
            urls.extend(bundle.urls(self.asset_base_url)[0])
        return urls

    def js_urls(self) -> list[str]:
        urls: list[str] = []
        for bundle in self.bundles.values():
            urls.extend(bundle.urls(self.asset_base_url)[1])
        return urls

    def head(self) -> str:
        """<head>에 넣을 stylesheet link 태그들."""
        return "\n".join(
            tag("link", attributes={"rel": "stylesheet", "href": url})
            for url in self.css_urls()
        )

    def body_end(self) -> str:
        """</body> 직전에 넣을 script 태그들 + 등록된 JS."""
        scripts = [tag("script", "", {"src": url}) for url in self.js_urls()]
        if self.js:
            body = "\n".join(self.js.values())
            scripts.append(
                tag("script", f'\ndocument.addEventListener("DOMContentLoaded", function () {{\n{body}\n}});\n')
            )
        return "\n".join(scripts)
