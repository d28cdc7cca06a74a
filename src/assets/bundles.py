"""
Asset bundle 선언.

각 bundle은 CSS/JS 경로 목록과 의존 bundle 이름만 가진다.
파일 복사/게시는 범위 밖 - 경로는 base_url 기준으로 링크만 생성.
"""

from dataclasses import dataclass

from src.domain.errors import ErrorCodes, FormError


@dataclass(frozen=True)
class AssetBundle:
    """정적 asset 묶음."""
    name: str
    css: tuple[str, ...] = ()
    js: tuple[str, ...] = ()
    depends: tuple[str, ...] = ()
    base_url: str | None = None  # None이면 View의 asset_base_url 사용

    def urls(self, default_base_url: str) -> tuple[list[str], list[str]]:
        """(css url 목록, js url 목록)."""
        base = (self.base_url if self.base_url is not None else default_base_url).rstrip("/")
        return (
            [_join_url(base, path) for path in self.css],
            [_join_url(base, path) for path in self.js],
        )


def _join_url(base: str, path: str) -> str:
    if path.startswith(("http://", "https://", "//", "/")):
        return path
    return f"{base}/{path}" if base else path


# =============================================================================
# Bundles
# =============================================================================

# 호스트 프레임워크 기본 bundle (client-side 스크립트가 의존)
JQUERY_ASSET = AssetBundle(
    name="jquery",
    js=("https://code.jquery.com/jquery-3.7.1.min.js",),
    base_url="",
)

AURORA_ASSET = AssetBundle(
    name="aurora",
    css=("styles/aurora.css",),
    js=("scripts/aurora.js",),
    depends=("jquery",),
)

QUILL_ASSET = AssetBundle(
    name="quill",
    css=("quill.snow.css",),
    js=("quill.min.js",),
    base_url="https://cdn.quilljs.com/0.20.1",
)

BUNDLES: dict[str, AssetBundle] = {
    bundle.name: bundle for bundle in (JQUERY_ASSET, AURORA_ASSET, QUILL_ASSET)
}


def get_bundle(name: str) -> AssetBundle:
    """
    이름으로 bundle 조회.

    Raises:
        FormError: ASSET_NOT_FOUND
    """
    try:
        return BUNDLES[name]
    except KeyError:
        raise FormError(
            ErrorCodes.ASSET_NOT_FOUND,
            "unknown asset bundle",
            name=name,
            available=sorted(BUNDLES),
        ) from None
