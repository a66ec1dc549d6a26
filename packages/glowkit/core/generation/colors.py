"""Conversion of theme colors to device color slots."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from glowkit.core.utils.colors import RGB, hex_to_rgb

MAX_COLOR_SLOTS = 3

RGBWList = list[tuple[int, int, int, int]]


def to_device_colors(colors: Sequence[RGB], limit: int = MAX_COLOR_SLOTS) -> RGBWList:
    """First ``limit`` colors as RGBW with the white channel forced to 0.

    A non-zero white channel washes out saturated hues on RGBW strips.
    """
    return [(r, g, b, 0) for r, g, b in colors[:limit]]


def hex_to_device_colors(colors: Iterable[str], limit: int = MAX_COLOR_SLOTS) -> RGBWList:
    return to_device_colors([hex_to_rgb(c) for c in colors], limit)
