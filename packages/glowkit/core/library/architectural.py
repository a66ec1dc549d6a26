"""White-temperature styles and spacing grids for architectural downlighting.

Colors per style come from a Kelvin-to-RGB ramp: a warmer primary and a
softer secondary.
"""

from __future__ import annotations

from dataclasses import dataclass

SPACING_RANGE = range(1, 5)


@dataclass(frozen=True)
class WhiteStyle:
    """A white color temperature offered as a downlighting style."""

    id: str
    name: str
    description: str
    colors: tuple[str, str]


@dataclass(frozen=True)
class DimLevel:
    """Brightness of the dimmed accent LEDs in a galaxy pattern."""

    level: int
    name: str
    description: str


WHITE_STYLES: tuple[WhiteStyle, ...] = (
    WhiteStyle("k2000", "2000K", "Candlelight", ("#FF890E", "#FFAB47")),
    WhiteStyle("k2700", "2700K", "Incandescent", ("#FFA757", "#FFC78D")),
    WhiteStyle("k3000", "3000K", "Warm White", ("#FFB16E", "#FFCFA0")),
    WhiteStyle("k3500", "3500K", "Soft White", ("#FFC18D", "#FFDABB")),
    WhiteStyle("k4000", "4000K", "Neutral White", ("#FFCEA6", "#FFE2CA")),
    WhiteStyle("k4500", "4500K", "Cool White", ("#FFDABB", "#FFEAD8")),
    WhiteStyle("k5000", "5000K", "Daylight", ("#FFE4CE", "#FFF0E4")),
    WhiteStyle("k5500", "5500K", "Bright Daylight", ("#FFEEDE", "#FFF6EE")),
    WhiteStyle("k6500", "6500K", "Moonlight", ("#FFFEFA", "#EEF2FF")),
)

DIM_LEVELS: tuple[DimLevel, ...] = (
    DimLevel(50, "50%", "Half brightness dim"),
    DimLevel(40, "40%", "Subtle dim"),
    DimLevel(30, "30%", "Low dim"),
)


def spacing_cells() -> list[tuple[int, int]]:
    """(on, off) pairs in row-major order: 1 On 1 Off ... 4 On 4 Off."""
    return [(on, off) for on in SPACING_RANGE for off in SPACING_RANGE]


def galaxy_cells() -> list[tuple[DimLevel, int, int]]:
    """(dim level, bright count, dim count) triples, 16 per dim level."""
    return [(dim, bright, dimmed) for dim in DIM_LEVELS for bright, dimmed in spacing_cells()]
