"""퀘스트 로그 렌더러 — 문서 → ViewModel 조립 (I/O 없음)

load: 스탯 + 월 버튼 + current_date 월의 타임라인
select_month: 타임라인만 다시 계산, 버튼은 is_selected만 갱신
상태를 보관하지 않는다. 현재 ViewModel 소유는 호출자(서비스) 책임.
"""

from __future__ import annotations

import logging
from typing import Any

from .date_key import month_key_of, normalize_month_key
from .document import parse_document
from .errors import InvalidDocument, MalformedDate
from .models import QuestDocument, ViewModel
from .month_index import build_buttons, reselect
from .stats import render_stats
from .timeline import render_timeline

logger = logging.getLogger(__name__)

DEFAULT_TARGET_YEAR = 2026


class QuestRenderer:
    """선택 버튼 연도(target_year)는 설정값. 데이터에서 유도하지 않는다."""

    def __init__(self, target_year: int = DEFAULT_TARGET_YEAR) -> None:
        self._target_year = target_year

    @property
    def target_year(self) -> int:
        return self._target_year

    def load(self, raw: Any) -> ViewModel:
        """원본 dict 검증 후 전체 ViewModel 생성.

        Raises:
            InvalidDocument: 필수 필드 누락 또는 current_date 형식 오류
            MalformedDate: completed_days 내 날짜 형식 오류
        """
        document = parse_document(raw)
        return self.build(document)

    def build(self, document: QuestDocument) -> ViewModel:
        progress = document.quest_progress
        try:
            current_month = month_key_of(progress.current_date)
        except MalformedDate as e:
            raise InvalidDocument(
                f"Invalid quest_progress.current_date: {e}",
                field="quest_progress.current_date",
            ) from e

        stats = render_stats(document.character, progress)
        buttons = build_buttons(
            progress.completed_days, current_month, self._target_year
        )
        timeline = render_timeline(
            progress.completed_days, progress.current_date, current_month
        )

        logger.info(
            "Quest log rendered: %s, %d days, current month %s",
            document.character.name,
            stats.day_count,
            current_month,
        )
        return ViewModel(
            document=document,
            current_month=current_month,
            selected_month=current_month,
            stats=stats,
            month_buttons=tuple(buttons),
            timeline=tuple(timeline),
        )

    def select_month(self, view_model: ViewModel, month_key: str) -> ViewModel:
        """타임라인만 재계산한 새 ViewModel. 이벤트 없는 달은 NoEventsEntry.

        Raises:
            MalformedDate: month_key가 "YYYY-MM" 형식이 아님
        """
        key = normalize_month_key(month_key)
        progress = view_model.document.quest_progress
        timeline = render_timeline(
            progress.completed_days, progress.current_date, key
        )
        logger.info("Month selected: %s (%d entries)", key, len(timeline))
        return ViewModel(
            document=view_model.document,
            current_month=view_model.current_month,
            selected_month=key,
            stats=view_model.stats,
            month_buttons=tuple(reselect(view_model.month_buttons, key)),
            timeline=tuple(timeline),
        )
