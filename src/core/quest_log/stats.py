"""캐릭터 스탯 표시값 계산

hp_percent는 클램핑하지 않는다. 표시용 막대 값(hp_bar_percent)만 [0, 100].
순수 표시 파생값이므로 max_hp == 0에서도 예외를 던지지 않는다.
"""

import logging
import math

from .models import Character, ModifierLabel, QuestProgress, StatsDisplay

logger = logging.getLogger(__name__)

HP_BAR_MIN = 0.0
HP_BAR_MAX = 100.0


def hp_percent(hp: float, max_hp: float) -> float:
    """100 * hp / max_hp. max_hp == 0이면 nan(hp 0) 또는 부호 있는 inf.

    float 범위를 넘는 결과(거대 정수 입력)도 예외 없이 부호 있는 inf.
    """
    if isinstance(hp, float) and math.isnan(hp):
        return math.nan
    if max_hp == 0:
        if hp == 0:
            return math.nan
        return math.inf if hp > 0 else -math.inf
    try:
        return 100 * hp / max_hp
    except OverflowError:
        return math.inf if (hp > 0) == (max_hp > 0) else -math.inf


def clamp_percent(value: float) -> float:
    if math.isnan(value):
        return HP_BAR_MIN
    return max(HP_BAR_MIN, min(HP_BAR_MAX, value))


def title_case(text: str) -> str:
    """공백으로 구분된 각 단어의 첫 글자만 대문자로. 나머지 문자는 그대로."""
    chars: list[str] = []
    at_word_start = True
    for ch in text:
        if ch.isspace():
            at_word_start = True
            chars.append(ch)
            continue
        chars.append(ch.upper() if at_word_start else ch)
        at_word_start = False
    return "".join(chars)


def modifier_label(key: str) -> str:
    """"night_vision" → "Night Vision" """
    return title_case(key.replace("_", " "))


def render_stats(character: Character, quest_progress: QuestProgress) -> StatsDisplay:
    stats = character.stats
    percent = hp_percent(stats.hp, stats.max_hp)
    if not math.isfinite(percent):
        logger.warning(
            "Non-finite HP percentage for %s (hp=%s, max_hp=%s)",
            character.name,
            stats.hp,
            stats.max_hp,
        )

    # 문서 순서 유지
    modifiers = tuple(
        ModifierLabel(key=key, label=modifier_label(key), value=value)
        for key, value in quest_progress.active_modifiers.items()
    )

    day_count = len(quest_progress.completed_days)
    return StatsDisplay(
        name=character.name,
        char_class=character.char_class,
        hp=stats.hp,
        max_hp=stats.max_hp,
        hp_percent=percent,
        hp_bar_percent=clamp_percent(percent),
        spell_points=stats.spell_points,
        day_count=day_count,
        events_completed=day_count,
        modifier_labels=modifiers,
    )
