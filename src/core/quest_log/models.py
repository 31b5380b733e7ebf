"""퀘스트 로그 도메인 모델 (프레젠테이션 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

NO_EVENTS_MESSAGE = "No events recorded for this month"
TODAY_SUFFIX = " - TODAY"


# === 입력 문서 ===


@dataclass(frozen=True)
class DateParts:
    """파싱된 날짜. month/day는 1부터 시작."""

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class CharacterStats:
    hp: float
    max_hp: float
    spell_points: float


@dataclass(frozen=True)
class Character:
    name: str
    char_class: str  # JSON "class"
    stats: CharacterStats


@dataclass(frozen=True)
class CompletedDay:
    """하루 기록 1건. date는 원본 문자열 그대로 보관 (today 비교용)."""

    date: str
    event: str
    outcome: str


@dataclass(frozen=True)
class QuestProgress:
    current_date: str
    completed_days: tuple[CompletedDay, ...] = ()
    # 문서 순서 유지 (dict 삽입 순서)
    active_modifiers: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class QuestDocument:
    """로드된 문서 전체. 새 로드 시 통째로 교체된다."""

    character: Character
    quest_progress: QuestProgress


# === 파생 뷰 ===


@dataclass(frozen=True)
class MonthButton:
    month_key: str  # "2026-01"
    label: str  # "January"
    has_events: bool
    is_selected: bool = False

    @property
    def selectable(self) -> bool:
        """이벤트 없는 달은 비활성 표시, 선택 불가"""
        return self.has_events


@dataclass(frozen=True)
class TimelineEntry:
    date: str
    date_label: str
    is_today: bool
    event: str
    outcome_markup: str

    @property
    def heading(self) -> str:
        return self.date_label + (TODAY_SUFFIX if self.is_today else "")


@dataclass(frozen=True)
class NoEventsEntry:
    """선택한 달에 기록이 없을 때의 전용 표시 항목"""

    month_key: str
    message: str = NO_EVENTS_MESSAGE


TimelineItem = Union[TimelineEntry, NoEventsEntry]


@dataclass(frozen=True)
class ModifierLabel:
    key: str  # "night_vision"
    label: str  # "Night Vision"
    value: float

    @property
    def badge(self) -> str:
        return f"{self.label}: +{self.value}"


@dataclass(frozen=True)
class StatsDisplay:
    name: str
    char_class: str
    hp: float
    max_hp: float
    hp_percent: float  # 클램핑 없음. max_hp == 0이면 nan/inf
    hp_bar_percent: float  # 표시용, [0, 100]
    spell_points: float
    day_count: int
    events_completed: int
    modifier_labels: tuple[ModifierLabel, ...] = ()


@dataclass(frozen=True)
class ViewModel:
    """한 번의 로드/선택 결과. 부분 수정 없이 새 인스턴스로 교체한다."""

    document: QuestDocument
    current_month: str  # current_date 기준 월
    selected_month: str
    stats: StatsDisplay
    month_buttons: tuple[MonthButton, ...]
    timeline: tuple[TimelineItem, ...]

    @property
    def timeline_is_empty(self) -> bool:
        return any(isinstance(item, NoEventsEntry) for item in self.timeline)
