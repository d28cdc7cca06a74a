"""
Forms layer: 필드 렌더러.

- layout.py: 레이아웃 프리셋 + configure()
- template.py: placeholder 치환
- model.py: 모델 어댑터
- active_field.py / active_form.py: 필드/폼
"""

from .active_field import ActiveField
from .active_form import ActiveForm
from .layout import configure
from .model import ModelAdapter
from .template import substitute

__all__ = [
    "ActiveField",
    "ActiveForm",
    "ModelAdapter",
    "configure",
    "substitute",
]
