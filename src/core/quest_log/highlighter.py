"""결과(outcome) 텍스트의 성공 계열 문구 강조"""

import logging
import re

logger = logging.getLogger(__name__)

# === 강조 대상 문구 (대소문자 무시) ===
SUCCESS_PHRASES: tuple[str, ...] = ("Success", "Victory", "Partial Success")
NUMBERED_RESULT_PREFIX = "Result"  # "Result 3", "result 12"

# === 강조 마커 ===
EMPHASIS_OPEN = '<span class="success">'
EMPHASIS_CLOSE = "</span>"


def _build_pattern() -> re.Pattern[str]:
    # 같은 시작 위치에서는 긴 문구 우선
    phrases = sorted(SUCCESS_PHRASES, key=len, reverse=True)
    alternatives = [re.escape(p) for p in phrases]
    alternatives.append(re.escape(NUMBERED_RESULT_PREFIX) + r" \d+")
    return re.compile("|".join(alternatives), re.IGNORECASE | re.ASCII)


_PATTERN = _build_pattern()


def highlight(text: str) -> str:
    """일치 구간을 강조 마커로 감싼다. 원문 대소문자 유지, 나머지 텍스트는 그대로."""
    if not isinstance(text, str):
        text = str(text)
    return _PATTERN.sub(lambda m: EMPHASIS_OPEN + m.group(0) + EMPHASIS_CLOSE, text)


def find_highlights(text: str) -> list[str]:
    """강조될 구간 목록 (왼쪽부터, 겹침 없음)."""
    return [m.group(0) for m in _PATTERN.finditer(str(text))]
