"""
Placeholder 치환: {name} 토큰 → part HTML.

규칙:
- 인식하는 이름은 PART_NAMES (닫힌 집합)
- 인식된 토큰: parts 값, 없으면 ""
- 인식 못한 {word} 토큰: 제거 (echo 금지), debug 로그
- 공백/기호가 든 중괄호 (CSS, JS 등)는 그대로 둠
- 한 번의 순회로 치환 → 치환 결과 안의 토큰은 다시 해석하지 않음
"""

import logging
import re
from collections.abc import Mapping

from src.domain.constants import PART_NAMES

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")


def find_tokens(template: str) -> list[str]:
    """템플릿에 등장하는 토큰 이름 목록 (등장 순서)."""
    return TOKEN_PATTERN.findall(template)


def substitute(
    template: str,
    parts: Mapping[str, str],
    allowed: frozenset[str] = PART_NAMES,
) -> str:
    """
    템플릿의 placeholder를 part로 치환.

    Args:
        template: {name} 토큰이 포함된 템플릿
        parts: 이름 → HTML 조각
        allowed: 인식하는 토큰 이름 집합

    Returns:
        치환된 문자열

    Example:
        >>> substitute("{input}", {"input": "X"})
        'X'
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in allowed:
            logger.debug(f"Dropping unrecognized template token {{{name}}}")
            return ""
        return parts.get(name) or ""

    return TOKEN_PATTERN.sub(replace, template)


def replace_token(template: str, name: str, replacement: str) -> str:
    """
    템플릿 안의 특정 토큰을 다른 텍스트로 교체 (렌더 전 템플릿 변형용).

    replacement 안에 같은 토큰을 다시 넣어도 재귀 치환되지 않는다.
    """
    return template.replace(f"{{{name}}}", replacement)
