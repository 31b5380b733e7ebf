"""월별 타임라인 뷰 — 필터 + 오늘 표시 + 라벨/강조"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .date_key import long_label, month_key_of, parse
from .highlighter import highlight
from .models import CompletedDay, NoEventsEntry, TimelineEntry, TimelineItem

logger = logging.getLogger(__name__)


def render_timeline(
    completed_days: Iterable[CompletedDay],
    current_date: str,
    month_filter: str,
) -> list[TimelineItem]:
    """month_filter에 속하는 기록만 원래 순서대로 반환 (정렬하지 않음).

    is_today는 원본 날짜 문자열의 완전 일치로 판정한다.
    "2026-01-05"와 "2026/01/05"는 서로 today가 아니다.
    일치하는 기록이 없으면 [NoEventsEntry] 하나를 반환.
    """
    entries: list[TimelineItem] = []
    for day in completed_days:
        if month_key_of(day.date) != month_filter:
            continue
        entries.append(
            TimelineEntry(
                date=day.date,
                date_label=long_label(parse(day.date)),
                is_today=day.date == current_date,
                event=day.event,
                outcome_markup=highlight(day.outcome),
            )
        )

    if not entries:
        logger.debug("No events for month %s", month_filter)
        return [NoEventsEntry(month_key=month_filter)]
    return entries


def is_empty_timeline(entries: Sequence[TimelineItem]) -> bool:
    return len(entries) == 1 and isinstance(entries[0], NoEventsEntry)
