"""
Pytest fixtures for the form renderer tests.

구성:
- 레이아웃별 폼 팩토리
- 정상 모델 / 에러가 있는 모델 분리
"""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from src.forms.active_form import ActiveForm
from src.forms.model import ModelAdapter
from src.render.view import View

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Form Fixtures
# =============================================================================

@pytest.fixture
def view() -> View:
    """요청 하나 분량의 View."""
    return View()


@pytest.fixture
def make_form(view: View) -> Callable[..., ActiveForm]:
    """레이아웃별 ActiveForm 팩토리."""

    def _make(layout: str = "default", **kwargs) -> ActiveForm:
        return ActiveForm(view, layout=layout, **kwargs)

    return _make


@pytest.fixture
def sample_values() -> dict:
    """정상 케이스 모델 값."""
    return {
        "email": "a@b.com",
        "agree": "1",
        "newsletter": "0",
        "notifications": "1",
        "birthday": "2024-01-15",
        "gender": "f",
        "interests": ["forms", "themes"],
        "country": "kr",
        "bio": "<p>Hello</p>",
    }


@pytest.fixture
def model(sample_values: dict) -> ModelAdapter:
    """form 이름 없는 모델 (name/id = attribute)."""
    return ModelAdapter(sample_values)


@pytest.fixture
def model_with_errors(sample_values: dict) -> ModelAdapter:
    """email에 에러가 있는 모델."""
    return ModelAdapter(
        sample_values,
        errors={"email": ["Email is invalid.", "Email is taken."]},
    )
