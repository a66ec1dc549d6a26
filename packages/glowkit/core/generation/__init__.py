"""Generation domain - pattern items, device payloads and the generator.

Usage:
    from glowkit.core.generation import PatternGenerator

    generator = PatternGenerator(root_resolver=tree.find_root_category_id)
    items = generator.generate_for_node(tree.get_node("xmas_candycane"))
    items[0].payload.to_dict()
"""

from glowkit.core.generation.colors import hex_to_device_colors, to_device_colors
from glowkit.core.generation.generator import PatternGenerator, dim_intensity
from glowkit.core.generation.models import (
    PALETTE_COLORS_ONLY,
    DevicePayload,
    PatternItem,
    SegmentPayload,
    effect_id_from_payload,
)
from glowkit.core.generation.naming import NAME_TEMPLATES, base_name, creative_name, pluralize
from glowkit.core.generation.templates import (
    COLORWAY_EFFECT_IDS,
    GALAXY_EFFECTS,
    SPACING_EFFECT_IDS,
    TWINKLE_EFFECTS,
    TWINKLE_SPEEDS,
    GridEffect,
)

__all__ = [
    # Models
    "DevicePayload",
    "PALETTE_COLORS_ONLY",
    "PatternItem",
    "SegmentPayload",
    "effect_id_from_payload",
    # Generator
    "PatternGenerator",
    "dim_intensity",
    "hex_to_device_colors",
    "to_device_colors",
    # Naming
    "NAME_TEMPLATES",
    "base_name",
    "creative_name",
    "pluralize",
    # Templates
    "COLORWAY_EFFECT_IDS",
    "GALAXY_EFFECTS",
    "SPACING_EFFECT_IDS",
    "TWINKLE_EFFECTS",
    "TWINKLE_SPEEDS",
    "GridEffect",
]
