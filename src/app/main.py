"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

# Routes
from src.app.routes import forms
from src.assets import STATIC_DIR

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / "default.yaml"

    if not config_path.exists():
        logger.info(f"Config not found, using defaults: {config_path}")
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드
    """
    # Startup
    app.state.config = load_config()

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Aurora Forms",
    description="테마 폼 필드 렌더러 데모 및 미리보기 API",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (aurora CSS, JS)
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(forms.router, prefix="", tags=["Forms"])

# API 라우트
app.include_router(forms.api_router, prefix="/api/fields", tags=["Forms API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
