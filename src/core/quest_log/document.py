"""원본 JSON(dict) → QuestDocument 검증/변환

필수 필드가 없거나 타입이 맞지 않으면 InvalidDocument (필드 경로 포함).
날짜 형식 자체는 여기서 검사하지 않는다 (DateKey 담당).
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import InvalidDocument
from .models import (
    Character,
    CharacterStats,
    CompletedDay,
    QuestDocument,
    QuestProgress,
)

logger = logging.getLogger(__name__)


def _require(obj: dict, key: str, path: str) -> Any:
    if key not in obj or obj[key] is None:
        field = f"{path}.{key}" if path else key
        raise InvalidDocument(f"Missing required field: {field}", field=field)
    return obj[key]


def _require_object(obj: dict, key: str, path: str) -> dict:
    value = _require(obj, key, path)
    if not isinstance(value, dict):
        field = f"{path}.{key}" if path else key
        raise InvalidDocument(f"Field must be an object: {field}", field=field)
    return value


def _require_str(obj: dict, key: str, path: str) -> str:
    value = _require(obj, key, path)
    if not isinstance(value, str):
        field = f"{path}.{key}"
        raise InvalidDocument(f"Field must be a string: {field}", field=field)
    return value


def _require_number(obj: dict, key: str, path: str) -> float:
    value = _require(obj, key, path)
    # bool은 int의 하위 타입이므로 명시적으로 제외
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        field = f"{path}.{key}"
        raise InvalidDocument(f"Field must be a number: {field}", field=field)
    return value


def _parse_character(raw: dict) -> Character:
    char = _require_object(raw, "character", "")
    stats = _require_object(char, "stats", "character")
    return Character(
        name=_require_str(char, "name", "character"),
        char_class=_require_str(char, "class", "character"),
        stats=CharacterStats(
            hp=_require_number(stats, "hp", "character.stats"),
            max_hp=_require_number(stats, "max_hp", "character.stats"),
            spell_points=_require_number(stats, "spell_points", "character.stats"),
        ),
    )


def _parse_completed_days(progress: dict) -> tuple[CompletedDay, ...]:
    raw_days = _require(progress, "completed_days", "quest_progress")
    if not isinstance(raw_days, list):
        raise InvalidDocument(
            "Field must be a list: quest_progress.completed_days",
            field="quest_progress.completed_days",
        )

    days: list[CompletedDay] = []
    for index, raw_day in enumerate(raw_days):
        path = f"quest_progress.completed_days[{index}]"
        if not isinstance(raw_day, dict):
            raise InvalidDocument(f"Field must be an object: {path}", field=path)
        days.append(
            CompletedDay(
                date=_require_str(raw_day, "date", path),
                event=_require_str(raw_day, "event", path),
                outcome=_require_str(raw_day, "outcome", path),
            )
        )
    return tuple(days)


def _parse_modifiers(progress: dict) -> dict[str, float]:
    raw = progress.get("active_modifiers")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise InvalidDocument(
            "Field must be an object: quest_progress.active_modifiers",
            field="quest_progress.active_modifiers",
        )
    return {
        key: _require_number(raw, key, "quest_progress.active_modifiers")
        for key in raw
    }


def parse_document(raw: Any) -> QuestDocument:
    """최상위 dict 검증 후 불변 QuestDocument 반환."""
    if not isinstance(raw, dict):
        raise InvalidDocument("Quest document must be a JSON object")

    character = _parse_character(raw)
    progress = _require_object(raw, "quest_progress", "")
    quest_progress = QuestProgress(
        current_date=_require_str(progress, "current_date", "quest_progress"),
        completed_days=_parse_completed_days(progress),
        active_modifiers=_parse_modifiers(progress),
    )

    logger.debug(
        "Parsed quest document: %s (%d days)",
        character.name,
        len(quest_progress.completed_days),
    )
    return QuestDocument(character=character, quest_progress=quest_progress)
