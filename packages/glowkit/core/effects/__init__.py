"""Effects domain - effect metadata, names table and mood vocabulary.

Usage:
    from glowkit.core.effects import EFFECT_REGISTRY, EnergyLevel

    EFFECT_REGISTRY.get(17).motion_type
    EFFECT_REGISTRY.adjusted_speed(15, 128)

Note: Importing this module auto-registers all builtins.
"""

# Auto-register builtins on import
from glowkit.core.effects import builtins as _builtins  # noqa: F401
from glowkit.core.effects.catalog import (
    EFFECT_REGISTRY,
    EffectCatalog,
    effect_name,
    get_effect,
    selector_mood_for_category,
    vibe_for_fx,
)
from glowkit.core.effects.energy import fallback_effect_for_energy, recommend_speed
from glowkit.core.effects.enums import (
    ColorBehavior,
    EffectMood,
    EffectMoodCategory,
    EffectVibe,
    EnergyLevel,
    FxVibe,
    MotionType,
    SelectorMood,
)
from glowkit.core.effects.models import (
    CUSTOM_EFFECT_MIN_ID,
    CustomEffect,
    EffectInfo,
    EffectMetadata,
    is_custom_effect,
)
from glowkit.core.effects.moods import (
    MOOD_DESCRIPTORS,
    MoodDescriptor,
    category_to_legacy,
    describe_mood,
    effect_ids_for_mood,
    effect_ids_for_moods,
    filter_by_mood,
    legacy_to_categories,
    mood_counts,
    mood_for_effect,
)
from glowkit.core.effects.tables import (
    CURATED_EFFECT_IDS,
    CUSTOM_PATTERN_EFFECT_IDS,
    RAINBOW_EFFECT_IDS,
)

__all__ = [
    # Enums
    "ColorBehavior",
    "EffectMood",
    "EffectMoodCategory",
    "EffectVibe",
    "EnergyLevel",
    "FxVibe",
    "MotionType",
    "SelectorMood",
    # Models
    "CustomEffect",
    "EffectInfo",
    "EffectMetadata",
    "MoodDescriptor",
    # Catalog
    "EFFECT_REGISTRY",
    "EffectCatalog",
    "effect_name",
    "get_effect",
    "selector_mood_for_category",
    "vibe_for_fx",
    # Tables
    "CURATED_EFFECT_IDS",
    "CUSTOM_EFFECT_MIN_ID",
    "CUSTOM_PATTERN_EFFECT_IDS",
    "MOOD_DESCRIPTORS",
    "RAINBOW_EFFECT_IDS",
    "is_custom_effect",
    # Legacy moods
    "category_to_legacy",
    "describe_mood",
    "effect_ids_for_mood",
    "effect_ids_for_moods",
    "filter_by_mood",
    "legacy_to_categories",
    "mood_counts",
    "mood_for_effect",
    # Energy
    "fallback_effect_for_energy",
    "recommend_speed",
]
