"""API request/response schemas."""

import math
from typing import Optional

from pydantic import BaseModel, Field

from src.core.quest_log.models import (
    MonthButton,
    NoEventsEntry,
    StatsDisplay,
    TimelineItem,
    ViewModel,
)


# === Response Schemas ===


class ModifierInfo(BaseModel):
    """활성 보정치 배지"""

    key: str
    label: str
    value: Optional[float] = Field(None, description="null if not a finite float")
    badge: str


class StatsInfo(BaseModel):
    """캐릭터 스탯 표시값"""

    name: str
    char_class: str = Field(..., serialization_alias="class")
    hp: Optional[float] = None
    max_hp: Optional[float] = None
    hp_percent: Optional[float] = Field(
        None, description="100 * hp / max_hp, null if not finite"
    )
    hp_bar_percent: float = Field(..., description="HP bar width clamped to [0, 100]")
    spell_points: Optional[float] = None
    day_count: int
    events_completed: int
    modifiers: list[ModifierInfo] = []


class MonthButtonInfo(BaseModel):
    """월 선택 버튼"""

    month_key: str
    label: str
    has_events: bool
    is_selected: bool
    selectable: bool


class TimelineEntryInfo(BaseModel):
    """타임라인 항목"""

    date: str
    date_label: str
    heading: str
    is_today: bool
    event: str
    outcome_markup: str


class TimelineInfo(BaseModel):
    """선택 월 타임라인. empty면 entries 대신 message 표시."""

    month_key: str
    empty: bool
    message: Optional[str] = None
    entries: list[TimelineEntryInfo] = []


class QuestLogResponse(BaseModel):
    """전체 뷰 모델 응답"""

    success: bool = True
    current_month: str
    selected_month: str
    stats: StatsInfo
    months: list[MonthButtonInfo]
    timeline: TimelineInfo


class MonthSelectionResponse(BaseModel):
    """월 선택 응답 (스탯 제외)"""

    success: bool = True
    selected_month: str
    months: list[MonthButtonInfo]
    timeline: TimelineInfo


class NoticeResponse(BaseModel):
    """알림 배너"""

    level: Optional[str] = None
    message: Optional[str] = None
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None


# === 변환 ===


def finite_or_none(value: float) -> Optional[float]:
    """JSON으로 보낼 수 없는 값(nan, inf, float 범위 초과 정수)은 None."""
    try:
        as_float = float(value)
    except OverflowError:
        return None
    return as_float if math.isfinite(as_float) else None


def build_stats_info(stats: StatsDisplay) -> StatsInfo:
    return StatsInfo(
        name=stats.name,
        char_class=stats.char_class,
        hp=finite_or_none(stats.hp),
        max_hp=finite_or_none(stats.max_hp),
        hp_percent=finite_or_none(stats.hp_percent),
        hp_bar_percent=stats.hp_bar_percent,
        spell_points=finite_or_none(stats.spell_points),
        day_count=stats.day_count,
        events_completed=stats.events_completed,
        modifiers=[
            ModifierInfo(
                key=m.key, label=m.label, value=finite_or_none(m.value), badge=m.badge
            )
            for m in stats.modifier_labels
        ],
    )


def build_month_infos(buttons: tuple[MonthButton, ...]) -> list[MonthButtonInfo]:
    return [
        MonthButtonInfo(
            month_key=b.month_key,
            label=b.label,
            has_events=b.has_events,
            is_selected=b.is_selected,
            selectable=b.selectable,
        )
        for b in buttons
    ]


def build_timeline_info(month_key: str, items: tuple[TimelineItem, ...]) -> TimelineInfo:
    empty = [i for i in items if isinstance(i, NoEventsEntry)]
    if empty:
        return TimelineInfo(month_key=month_key, empty=True, message=empty[0].message)
    return TimelineInfo(
        month_key=month_key,
        empty=False,
        entries=[
            TimelineEntryInfo(
                date=i.date,
                date_label=i.date_label,
                heading=i.heading,
                is_today=i.is_today,
                event=i.event,
                outcome_markup=i.outcome_markup,
            )
            for i in items
        ],
    )


def build_quest_log_response(view_model: ViewModel) -> QuestLogResponse:
    return QuestLogResponse(
        current_month=view_model.current_month,
        selected_month=view_model.selected_month,
        stats=build_stats_info(view_model.stats),
        months=build_month_infos(view_model.month_buttons),
        timeline=build_timeline_info(view_model.selected_month, view_model.timeline),
    )
