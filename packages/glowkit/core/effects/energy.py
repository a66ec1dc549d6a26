"""Energy-driven effect parameter helpers."""

from __future__ import annotations

from glowkit.core.effects.catalog import EFFECT_REGISTRY, EffectCatalog
from glowkit.core.effects.enums import EnergyLevel, MotionType
from glowkit.core.utils.math import clamp, lerp

_FALLBACK_BY_ENERGY: dict[EnergyLevel, int] = {
    EnergyLevel.VERY_LOW: 0,
    EnergyLevel.LOW: 2,
    EnergyLevel.MEDIUM: 17,
    EnergyLevel.DYNAMIC: 17,
    EnergyLevel.HIGH: 28,
    EnergyLevel.VERY_HIGH: 28,
}


def recommend_speed(
    effect_id: int,
    energy: EnergyLevel | None,
    catalog: EffectCatalog | None = None,
) -> float:
    """Recommended speed for an effect at an energy level, normalized to 0..1.

    Unregistered effects return 0.5 and static effects 0.0. Otherwise the
    speed is picked inside the effect's [min, max] range, leaning towards
    the slow end for low energy and the fast end for high energy.
    """
    catalog = catalog or EFFECT_REGISTRY
    meta = catalog.lookup(effect_id)
    if meta is None:
        return 0.5
    if meta.motion_type == MotionType.STATIC:
        return 0.0

    if energy == EnergyLevel.VERY_LOW:
        speed = float(meta.min_speed)
    elif energy == EnergyLevel.LOW:
        speed = lerp(meta.min_speed, meta.default_speed, 0.35)
    elif energy == EnergyLevel.HIGH:
        speed = lerp(meta.default_speed, meta.max_speed, 0.65)
    elif energy == EnergyLevel.VERY_HIGH:
        speed = float(meta.max_speed)
    else:
        speed = float(meta.default_speed)

    return clamp(speed / 255.0, 0.0, 1.0)


def fallback_effect_for_energy(energy: EnergyLevel | None) -> int:
    """Safe default effect id for an energy level (Solid when unknown)."""
    if energy is None:
        return 0
    return _FALLBACK_BY_ENERGY[energy]
