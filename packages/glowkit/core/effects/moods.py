"""Legacy five-way mood grouping for effect filters.

The legacy moods predate the EffectMoodCategory tags. Both vocabularies
are kept and converted through explicit tables.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from glowkit.core.effects.enums import EffectMood, EffectMoodCategory


@dataclass(frozen=True)
class MoodDescriptor:
    """Display info for a legacy mood."""

    label: str
    emoji: str
    description: str
    color_hex: str


MOOD_DESCRIPTORS: MappingProxyType[EffectMood, MoodDescriptor] = MappingProxyType(
    {
        EffectMood.CALM_ELEGANT: MoodDescriptor("Calm", "😌", "Gentle, relaxing ambiance", "#7B68EE"),
        EffectMood.SUBTLE_MAGIC: MoodDescriptor("Magical", "✨", "Twinkling, magical sparkle", "#FFD700"),
        EffectMood.FESTIVE_FUN: MoodDescriptor("Party", "🎉", "High-energy party vibes", "#FF6B6B"),
        EffectMood.DRAMATIC: MoodDescriptor("Dramatic", "🎭", "Bold, attention-grabbing", "#E040FB"),
        EffectMood.SMOOTH_MOTION: MoodDescriptor("Flowing", "🌊", "Continuous flowing motion", "#00BCD4"),
    }
)

_EFFECTS_BY_MOOD: MappingProxyType[EffectMood, tuple[int, ...]] = MappingProxyType(
    {
        EffectMood.CALM_ELEGANT: (0, 2, 12, 1007),
        EffectMood.SUBTLE_MAGIC: (17, 20, 49, 87),
        EffectMood.FESTIVE_FUN: (13, 15, 28, 91),
        EffectMood.DRAMATIC: (59, 76, 1001, 1002, 1003, 1005),
        EffectMood.SMOOTH_MOTION: (3, 6, 10, 40, 96),
    }
)

_MOOD_BY_EFFECT: dict[int, EffectMood] = {
    fx: mood for mood, ids in _EFFECTS_BY_MOOD.items() for fx in ids
}

# legacy mood -> tag categories; first entry is the primary mapping
_LEGACY_TO_CATEGORIES: MappingProxyType[EffectMood, tuple[EffectMoodCategory, ...]] = (
    MappingProxyType(
        {
            EffectMood.CALM_ELEGANT: (EffectMoodCategory.CALM, EffectMoodCategory.ELEGANT),
            EffectMood.SUBTLE_MAGIC: (EffectMoodCategory.MAGICAL,),
            EffectMood.FESTIVE_FUN: (EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL),
            EffectMood.DRAMATIC: (EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.MODERN),
            EffectMood.SMOOTH_MOTION: (EffectMoodCategory.NATURAL,),
        }
    )
)

_CATEGORY_TO_LEGACY: MappingProxyType[EffectMoodCategory, EffectMood] = MappingProxyType(
    {
        EffectMoodCategory.CALM: EffectMood.CALM_ELEGANT,
        EffectMoodCategory.ELEGANT: EffectMood.CALM_ELEGANT,
        EffectMoodCategory.ROMANTIC: EffectMood.CALM_ELEGANT,
        EffectMoodCategory.COZY: EffectMood.CALM_ELEGANT,
        EffectMoodCategory.MAGICAL: EffectMood.SUBTLE_MAGIC,
        EffectMoodCategory.FESTIVE: EffectMood.FESTIVE_FUN,
        EffectMoodCategory.PLAYFUL: EffectMood.FESTIVE_FUN,
        EffectMoodCategory.MYSTERIOUS: EffectMood.DRAMATIC,
        EffectMoodCategory.MODERN: EffectMood.DRAMATIC,
        EffectMoodCategory.NATURAL: EffectMood.SMOOTH_MOTION,
    }
)


def describe_mood(mood: EffectMood) -> MoodDescriptor:
    return MOOD_DESCRIPTORS[mood]


def mood_for_effect(effect_id: int) -> EffectMood | None:
    """Legacy mood an effect is filed under, or None if unfiled."""
    return _MOOD_BY_EFFECT.get(effect_id)


def effect_ids_for_mood(mood: EffectMood) -> list[int]:
    return list(_EFFECTS_BY_MOOD[mood])


def effect_ids_for_moods(moods: Iterable[EffectMood]) -> list[int]:
    """Union of effect ids for several moods, in table order, no repeats."""
    wanted = set(moods)
    return [fx for mood, ids in _EFFECTS_BY_MOOD.items() if mood in wanted for fx in ids]


def filter_by_mood(effect_ids: Iterable[int], mood: EffectMood | None) -> list[int]:
    """Keep ids filed under mood; None keeps everything."""
    if mood is None:
        return list(effect_ids)
    return [fx for fx in effect_ids if _MOOD_BY_EFFECT.get(fx) == mood]


def mood_counts(effect_ids: Iterable[int]) -> dict[EffectMood, int]:
    """Count ids per legacy mood (every mood present, possibly zero)."""
    counts = {mood: 0 for mood in EffectMood}
    for fx in effect_ids:
        mood = _MOOD_BY_EFFECT.get(fx)
        if mood is not None:
            counts[mood] += 1
    return counts


def legacy_to_categories(mood: EffectMood) -> tuple[EffectMoodCategory, ...]:
    return _LEGACY_TO_CATEGORIES[mood]


def category_to_legacy(category: EffectMoodCategory) -> EffectMood:
    return _CATEGORY_TO_LEGACY[category]
