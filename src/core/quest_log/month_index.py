"""월 인덱스 — 이벤트 존재 월 집합 + 고정 연도 12개월 선택 버튼"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from .date_key import month_key_of, month_name
from .models import CompletedDay, MonthButton

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def available_months(completed_days: Iterable[CompletedDay]) -> set[str]:
    """기록이 1건 이상 있는 월 키 집합. 입력 순서와 무관."""
    return {month_key_of(day.date) for day in completed_days}


def all_selector_months(year: int) -> list[str]:
    """year의 "YYYY-01" ~ "YYYY-12" (달력순).

    year는 설정값이며 데이터에서 유도하지 않는다. 다른 연도의 기록은
    available_months에는 포함되지만 여기에는 나타나지 않는다.
    """
    return [f"{year:04d}-{m:02d}" for m in range(1, MONTHS_PER_YEAR + 1)]


def build_buttons(
    completed_days: Sequence[CompletedDay],
    selected_key: str,
    year: int,
) -> list[MonthButton]:
    """선택 버튼 12개. 이벤트 없는 달도 라벨은 정상 표시 (비활성)."""
    months = available_months(completed_days)
    buttons = [
        MonthButton(
            month_key=key,
            label=month_name(key),
            has_events=key in months,
            is_selected=key == selected_key,
        )
        for key in all_selector_months(year)
    ]

    outside = sorted(k for k in months if not k.startswith(f"{year:04d}-"))
    if outside:
        logger.debug("Months outside selector year %d: %s", year, outside)
    return buttons


def reselect(buttons: Iterable[MonthButton], selected_key: str) -> list[MonthButton]:
    """is_selected만 다시 계산한 버튼 목록."""
    return [replace(b, is_selected=b.month_key == selected_key) for b in buttons]
