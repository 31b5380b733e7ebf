"""퀘스트 로그 Core 패키지"""

from src.core.quest_log.errors import (
    AcquisitionFailure,
    InvalidDocument,
    MalformedDate,
    QuestLogError,
)
from src.core.quest_log.models import (
    Character,
    CharacterStats,
    CompletedDay,
    DateParts,
    ModifierLabel,
    MonthButton,
    NoEventsEntry,
    QuestDocument,
    QuestProgress,
    StatsDisplay,
    TimelineEntry,
    ViewModel,
)
from src.core.quest_log.renderer import QuestRenderer

__all__ = [
    # errors
    "QuestLogError",
    "MalformedDate",
    "InvalidDocument",
    "AcquisitionFailure",
    # models
    "DateParts",
    "CharacterStats",
    "Character",
    "CompletedDay",
    "QuestProgress",
    "QuestDocument",
    "MonthButton",
    "TimelineEntry",
    "NoEventsEntry",
    "ModifierLabel",
    "StatsDisplay",
    "ViewModel",
    # renderer
    "QuestRenderer",
]
