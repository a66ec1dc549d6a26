"""Curated effect templates for pattern generation."""

from __future__ import annotations

from typing import NamedTuple


class GridEffect(NamedTuple):
    """A named effect variant with fixed speed and intensity."""

    fx: int
    name: str
    speed: int
    intensity: int


# Effects every colorway palette is rendered with, in display order
COLORWAY_EFFECT_IDS: tuple[int, ...] = (
    # Classics
    0, 2, 3, 6, 10, 12, 13, 15, 17, 20, 28, 40, 49, 59, 76, 87, 91, 96,
    # Showpieces
    46, 52, 65, 69, 70, 73, 82, 89, 100, 107, 111, 112,
)  # fmt: skip

# Spacing palettes: Solid, Breathe, Fade, Sweep, Running, Gradient, Twinklefox, Lighthouse
SPACING_EFFECT_IDS: tuple[int, ...] = (0, 2, 12, 6, 15, 51, 46, 41)

# Galaxy variants; intensity comes from the node's dim level
GALAXY_EFFECTS: tuple[GridEffect, ...] = (
    GridEffect(0, "Solid Stars", 0, 0),
    GridEffect(2, "Breathing Stars", 80, 0),
    GridEffect(17, "Sparkling Galaxy", 80, 0),
    GridEffect(49, "Fairy Stars", 80, 0),
)
GALAXY_CASCADE = GridEffect(12, "Star Cascade", 60, 0)

TWINKLE_EFFECTS: tuple[GridEffect, ...] = (
    GridEffect(17, "Classic Twinkle", 80, 180),
    GridEffect(49, "Fairy Twinkle", 100, 200),
    GridEffect(80, "Twinklefox", 90, 190),
    GridEffect(74, "Colortwinkles", 70, 160),
    GridEffect(87, "Glitter Stars", 120, 220),
)

# Plain Twinkle at three speeds
TWINKLE_SPEEDS: tuple[GridEffect, ...] = (
    GridEffect(17, "Slow Shimmer", 40, 180),
    GridEffect(17, "Gentle Sparkle", 80, 180),
    GridEffect(17, "Lively Stars", 150, 180),
)

GALAXY_BRIGHTNESS = 255
TWINKLE_BRIGHTNESS = 220
DUAL_TEAM_BRIGHTNESS = 210
DUAL_TEAM_PIXELS = 150
