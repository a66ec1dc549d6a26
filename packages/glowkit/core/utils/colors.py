"""Color conversion helpers for RGB triples and hex strings."""

from __future__ import annotations

import colorsys

from glowkit.core.utils.math import clamp, round_half_up

RGB = tuple[int, int, int]


def hex_to_rgb(value: str) -> RGB:
    """Parse '#RRGGBB' or 'RRGGBB' (an 'AARRGGBB' prefix is dropped).

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex color.
    """
    digits = value.strip().lstrip("#")
    if len(digits) == 8:
        digits = digits[2:]
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {value!r}") from e


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsv(rgb: RGB) -> tuple[float, float, float]:
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""
    h, s, v = colorsys.rgb_to_hsv(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    return h * 360.0, s, v


def lighten(rgb: RGB, amount: float = 0.2) -> RGB:
    """Raise HSL lightness by ``amount`` (clamped to 1.0)."""
    h, lightness, s = colorsys.rgb_to_hls(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    r, g, b = colorsys.hls_to_rgb(h, clamp(lightness + amount, 0.0, 1.0), s)
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def dedupe_colors(colors: list[RGB]) -> list[RGB]:
    """Drop repeated colors, keeping first occurrences in order."""
    seen: set[RGB] = set()
    out: list[RGB] = []
    for c in colors:
        if c not in seen:
            seen.add(c)
            out.append(c)
    return out
