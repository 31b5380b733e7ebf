"""StatsView 테스트"""

import math

from src.core.quest_log.models import (
    Character,
    CharacterStats,
    CompletedDay,
    QuestProgress,
)
from src.core.quest_log.stats import (
    clamp_percent,
    hp_percent,
    modifier_label,
    render_stats,
    title_case,
)


def _character(hp=50, max_hp=100) -> Character:
    return Character(
        name="Aria",
        char_class="Wizard",
        stats=CharacterStats(hp=hp, max_hp=max_hp, spell_points=7),
    )


def _progress(days: int = 0, modifiers=None) -> QuestProgress:
    return QuestProgress(
        current_date="2026-01-01",
        completed_days=tuple(
            CompletedDay(date=f"2026-01-{i + 1:02d}", event="e", outcome="o")
            for i in range(days)
        ),
        active_modifiers=modifiers or {},
    )


class TestHpPercent:
    def test_half(self):
        stats = render_stats(_character(50, 100), _progress())
        assert stats.hp_percent == 50
        assert stats.hp_bar_percent == 50

    def test_zero_max_hp_does_not_raise(self):
        stats = render_stats(_character(10, 0), _progress())
        assert not math.isfinite(stats.hp_percent)
        assert stats.hp_bar_percent == 100

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(hp_percent(0, 0))
        assert clamp_percent(hp_percent(0, 0)) == 0

    def test_negative_over_zero(self):
        assert hp_percent(-5, 0) == -math.inf

    def test_over_max_not_clamped(self):
        stats = render_stats(_character(150, 100), _progress())
        assert stats.hp_percent == 150
        assert stats.hp_bar_percent == 100

    def test_huge_integer_hp_does_not_raise(self):
        stats = render_stats(_character(10**400, 3), _progress())
        assert stats.hp_percent == math.inf
        assert stats.hp_bar_percent == 100

    def test_huge_negative_hp(self):
        assert hp_percent(-10**400, 3) == -math.inf
        assert hp_percent(10**400, -3) == -math.inf
        assert clamp_percent(hp_percent(-10**400, 3)) == 0

    def test_negative_hp(self):
        stats = render_stats(_character(-10, 100), _progress())
        assert stats.hp_percent == -10
        assert stats.hp_bar_percent == 0


class TestModifiers:
    def test_title_case(self):
        assert title_case("night vision") == "Night Vision"
        assert title_case("x-ray  sight") == "X-ray  Sight"
        assert title_case("mIxed case") == "MIxed Case"

    def test_modifier_label(self):
        assert modifier_label("blessed_by_moon") == "Blessed By Moon"

    def test_document_order_preserved(self):
        stats = render_stats(
            _character(), _progress(modifiers={"zeal": 3, "arcane_focus": 1})
        )
        assert [m.label for m in stats.modifier_labels] == ["Zeal", "Arcane Focus"]
        assert stats.modifier_labels[1].badge == "Arcane Focus: +1"

    def test_no_modifiers(self):
        assert render_stats(_character(), _progress()).modifier_labels == ()


class TestDayCount:
    def test_day_count_is_record_count(self):
        stats = render_stats(_character(), _progress(days=4))
        assert stats.day_count == 4
        assert stats.events_completed == 4

    def test_character_fields(self):
        stats = render_stats(_character(), _progress())
        assert (stats.name, stats.char_class, stats.spell_points) == ("Aria", "Wizard", 7)
