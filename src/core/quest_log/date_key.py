"""날짜 문자열 파싱 + 월 그룹 키/표시 라벨

"YYYY-MM-DD"와 "YYYY/MM/DD"를 동일하게 취급한다.
시간대 처리 없음 (로컬 날짜 문자열 그대로).
"""

from __future__ import annotations

import logging

from .errors import MalformedDate
from .models import DateParts

logger = logging.getLogger(__name__)

# === 허용 구분자 ===
DATE_SEPARATORS: tuple[str, ...] = ("-", "/")

# === 월 이름 (로케일 무관, en-US 고정) ===
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _split(value: str) -> list[str]:
    """모든 구분자를 첫 번째 구분자로 통일 후 분리."""
    canonical = DATE_SEPARATORS[0]
    for sep in DATE_SEPARATORS[1:]:
        value = value.replace(sep, canonical)
    return value.split(canonical)


def _to_int(component: str, value: str) -> int:
    if not (component.isascii() and component.isdigit()):
        raise MalformedDate(value, f"non-numeric component {component!r}")
    return int(component)


def parse(date_string: str) -> DateParts:
    """날짜 문자열 → DateParts.

    구성요소가 3개 미만이거나 숫자가 아니면 MalformedDate.
    """
    if not isinstance(date_string, str):
        raise MalformedDate(date_string, "not a string")

    parts = _split(date_string.strip())
    if len(parts) < 3:
        raise MalformedDate(date_string, "expected year, month and day")

    year, month, day = (_to_int(p, date_string) for p in parts[:3])
    return DateParts(year=year, month=month, day=day)


def month_key(parts: DateParts) -> str:
    """정규 그룹 키 "YYYY-MM". 사전순 정렬 = 달력순."""
    return f"{parts.year:04d}-{parts.month:02d}"


def month_key_of(date_string: str) -> str:
    return month_key(parse(date_string))


def _month_name(month: int, value: object) -> str:
    if not 1 <= month <= 12:
        raise MalformedDate(value, f"month out of range: {month}")
    return MONTH_NAMES[month - 1]


def long_label(parts: DateParts) -> str:
    """"January 5, 2026" 형식. 일(day)은 앞자리 0 없음."""
    name = _month_name(parts.month, parts)
    return f"{name} {parts.day}, {parts.year:04d}"


def _split_month_key(key: str) -> tuple[int, int]:
    if not isinstance(key, str):
        raise MalformedDate(key, "not a month key")
    pieces = key.strip().split(DATE_SEPARATORS[0])
    if len(pieces) != 2:
        raise MalformedDate(key, "expected YYYY-MM")
    year = _to_int(pieces[0], key)
    month = _to_int(pieces[1], key)
    _month_name(month, key)
    return year, month


def month_name(key: str) -> str:
    """"2026-03" → "March" (선택 버튼 라벨용)"""
    _, month = _split_month_key(key)
    return MONTH_NAMES[month - 1]


def normalize_month_key(key: str) -> str:
    """외부 입력 월 키 검증 + 정규화. "2026-3" → "2026-03"."""
    year, month = _split_month_key(key)
    return f"{year:04d}-{month:02d}"
