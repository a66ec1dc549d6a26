"""Builtin custom effects.

Custom effects carry ids >= 1000 and run on an external controller;
the device only ever sees the solid colors they start from.
"""

from glowkit.core.effects.catalog import EFFECT_REGISTRY
from glowkit.core.effects.models import CustomEffect

_CUSTOM_EFFECTS: tuple[CustomEffect, ...] = (
    CustomEffect(
        id=1001,
        name="Rising Tide",
        description="Lights progressively fill from one end to the other, like water rising",
        category="Build",
    ),
    CustomEffect(
        id=1002,
        name="Falling Tide",
        description="Lights progressively empty, like water receding",
        category="Build",
    ),
    CustomEffect(
        id=1003,
        name="Pulse Burst",
        description="Colors radiate from the center outward to the edges",
        category="Radiate",
    ),
    CustomEffect(
        id=1004,
        name="Pulse Gather",
        description="Colors contract from the edges inward to the center",
        category="Radiate",
    ),
    CustomEffect(
        id=1005,
        name="Grand Reveal",
        description="Dramatic curtain-like opening from the center",
        category="Theatrical",
    ),
    CustomEffect(
        id=1006,
        name="Curtain Call",
        description="Elegant curtain-like closing toward the center",
        category="Theatrical",
    ),
    CustomEffect(
        id=1007,
        name="Ocean Swell",
        description="Gentle sinusoidal wave motion, like ocean waves",
        category="Wave",
    ),
)


def _register_custom_effects() -> None:
    for effect in _CUSTOM_EFFECTS:
        EFFECT_REGISTRY.register_custom(effect)


# Auto-register on import
_register_custom_effects()
