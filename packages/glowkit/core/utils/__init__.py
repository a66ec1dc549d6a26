"""Shared utilities for glowkit."""

from glowkit.core.utils.colors import (
    RGB,
    dedupe_colors,
    hex_to_rgb,
    lighten,
    rgb_to_hex,
    rgb_to_hsv,
)
from glowkit.core.utils.logging import configure_logging, get_logger, log_performance
from glowkit.core.utils.math import clamp, lerp, round_half_up

__all__ = [
    "RGB",
    "clamp",
    "configure_logging",
    "dedupe_colors",
    "get_logger",
    "hex_to_rgb",
    "lerp",
    "lighten",
    "log_performance",
    "rgb_to_hex",
    "rgb_to_hsv",
    "round_half_up",
]
