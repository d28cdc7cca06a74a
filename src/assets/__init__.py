"""
Assets layer: CSS/JS bundle 선언 + 정적 파일 (static/).
"""

from pathlib import Path

from .bundles import (
    AURORA_ASSET,
    BUNDLES,
    JQUERY_ASSET,
    QUILL_ASSET,
    AssetBundle,
    get_bundle,
)

STATIC_DIR = Path(__file__).parent / "static"

__all__ = [
    "AssetBundle",
    "AURORA_ASSET",
    "QUILL_ASSET",
    "JQUERY_ASSET",
    "BUNDLES",
    "STATIC_DIR",
    "get_bundle",
]
