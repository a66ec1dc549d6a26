"""Static effect id tables.

Plain data: curated selections, speed multipliers, vibe groupings and
scenario recommendations. Read-only after import.
"""

from __future__ import annotations

from types import MappingProxyType

from glowkit.core.effects.enums import SelectorMood

# Popular effects that work well with custom color palettes
CURATED_EFFECT_IDS: tuple[int, ...] = (
    0, 1, 2, 3, 4, 6, 10, 11, 12, 13, 15, 17, 20, 21, 22, 28, 29, 38, 40, 41,
    42, 43, 45, 49, 51, 57, 59, 64, 66, 67, 74, 75, 76, 77, 79, 80, 81, 87, 88,
    89, 90, 91, 95, 96, 97, 101, 102, 103, 104, 110, 112, 115,
)  # fmt: skip

# Rainbow/multicolor effects that override custom palettes
RAINBOW_EFFECT_IDS: tuple[int, ...] = (9, 14, 24, 26, 30, 33, 63, 94, 99)

# Custom effects surfaced in generated pattern grids
CUSTOM_PATTERN_EFFECT_IDS: tuple[int, ...] = (1001, 1003, 1005, 1007)

# Value < 1.0 slows an effect that runs too fast at nominal speed
SPEED_MULTIPLIERS: MappingProxyType[int, float] = MappingProxyType(
    {
        # Very fast
        15: 0.4,
        76: 0.35,
        77: 0.35,
        79: 0.4,
        99: 0.4,
        # Fast
        10: 0.5,
        11: 0.5,
        13: 0.5,
        14: 0.5,
        17: 0.5,
        28: 0.5,
        29: 0.5,
        30: 0.5,
        40: 0.5,
        64: 0.5,
        80: 0.5,
        81: 0.5,
        92: 0.5,
        93: 0.5,
        94: 0.5,
        # Slightly fast
        3: 0.6,
        4: 0.6,
        6: 0.6,
        20: 0.6,
        21: 0.6,
        22: 0.6,
        36: 0.6,
        42: 0.6,
        49: 0.6,
        51: 0.6,
        55: 0.6,
        74: 0.6,
        87: 0.6,
        89: 0.6,
        90: 0.6,
        # Medium
        110: 0.7,
        67: 0.7,
        97: 0.7,
        101: 0.7,
    }
)

# Solids, fades, breaths, ambient flows and soft sparkles
ELEGANT_FX_IDS: frozenset[int] = frozenset(
    {0, 2, 12, 38, 43, 56, 67, 75, 88, 97, 101, 102, 104, 105, 110, 112, 115}
)

# Chases, wipes, scanners
MOTION_FX_IDS: frozenset[int] = frozenset(
    {
        3, 4, 6, 10, 11, 13, 14, 15, 16, 27, 28, 29, 30, 31, 32, 37, 40, 41, 50,
        52, 54, 55, 58, 59, 60, 64, 76, 77, 78, 92, 93, 94, 111,
    }
)  # fmt: skip

# Strobes, fireworks, sparkles
ENERGY_FX_IDS: frozenset[int] = frozenset(
    {1, 17, 20, 21, 22, 23, 24, 25, 42, 49, 51, 57, 74, 79, 80, 81, 87, 89, 90, 91, 95, 99, 103, 106}
)

# scenario -> ordered effect ids; aliases share one entry
SCENARIO_EFFECT_IDS: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "holiday": (13, 17, 80, 43, 49),
        "spooky": (17, 42, 37, 82, 46),
        "celebration": (39, 28, 15, 20, 87),
        "patriotic": (39, 52, 43, 84),
        "romantic": (2, 37, 49, 17, 12),
        "calm": (0, 2, 95, 75, 79),
        "game-day": (28, 15, 41, 39, 20),
        "elegant": (2, 17, 49, 87, 1005),
        "multicolor": (9, 10, 63, 30, 14),
        "default": (0, 2, 17, 13, 28),
    }
)

SCENARIO_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "christmas": "holiday",
        "holiday": "holiday",
        "halloween": "spooky",
        "spooky": "spooky",
        "party": "celebration",
        "celebration": "celebration",
        "4th-of-july": "patriotic",
        "independence-day": "patriotic",
        "patriotic": "patriotic",
        "romantic": "romantic",
        "date-night": "romantic",
        "relaxation": "calm",
        "calm": "calm",
        "sports": "game-day",
        "game-day": "game-day",
        "wedding": "elegant",
        "elegant": "elegant",
        "rainbow": "multicolor",
        "pride": "multicolor",
        "multicolor": "multicolor",
    }
)

# Scenarios that ask for color-overriding effects on purpose
COLOR_OVERRIDE_SCENARIOS: frozenset[str] = frozenset({"multicolor"})

SELECTOR_MOOD_BY_CATEGORY: MappingProxyType[str, SelectorMood] = MappingProxyType(
    {
        "Basic": SelectorMood.CALM,
        "Ambient": SelectorMood.CALM,
        "Sparkle": SelectorMood.MAGICAL,
        "Holiday": SelectorMood.MAGICAL,
        "Chase": SelectorMood.PARTY,
        "Strobe": SelectorMood.PARTY,
        "Fireworks": SelectorMood.PARTY,
        "Game": SelectorMood.PARTY,
        "Wipe": SelectorMood.FLOWING,
        "Scanner": SelectorMood.FLOWING,
        "Meteor": SelectorMood.DRAMATIC,
        "Fire": SelectorMood.DRAMATIC,
        "Rainbow": SelectorMood.COLORFUL,
        "Noise": SelectorMood.COLORFUL,
        "Ripple": SelectorMood.COLORFUL,
    }
)
