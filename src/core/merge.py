"""
설정 dict deep merge.

규칙:
- override 우선: 같은 키면 override 값 사용
- 양쪽 모두 dict이면 키 단위 재귀 병합 (통째로 교체하지 않음)
- list/스칼라는 통째로 교체
- 입력 dict는 변경하지 않음 (결과는 새 dict)
"""

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], *overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    여러 설정 dict를 순서대로 병합.

    Args:
        base: 기본 설정
        *overrides: 뒤에 올수록 우선하는 override들 (None은 무시)

    Returns:
        병합된 새 dict

    Example:
        >>> deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        {'a': {'x': 1, 'y': 3}}
    """
    result: dict[str, Any] = copy.deepcopy(dict(base))
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = deep_merge(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result
