"""Creative pattern names built from a palette name and an effect id."""

from __future__ import annotations

from types import MappingProxyType

from glowkit.core.effects.catalog import EFFECT_REGISTRY, EffectCatalog

_NAME_SUFFIXES = (" glow", " vibes", " palette")
_VOWELS = "aeiou"

# effect id -> template; {base} is the cleaned palette name, {plural} its plural
NAME_TEMPLATES: MappingProxyType[int, str] = MappingProxyType(
    {
        0: "Classic {base}",
        2: "Breathing {base}",
        3: "{base} Wave",
        6: "Sweeping {base}",
        10: "{base} Scanner",
        12: "Fading {plural}",
        13: "{base} Marquee",
        15: "Running {plural}",
        17: "{base} Stars",
        20: "Sparkling {plural}",
        28: "{base} Chase",
        40: "{base} Spotlight",
        46: "{base} Stardust",
        49: "{base} Fairy Lights",
        52: "{base} Ripples",
        59: "{base} Comets",
        65: "Flowing {plural}",
        69: "{base} Aurora",
        70: "{base} Reflections",
        73: "{base} Tides",
        76: "{base} Meteors",
        82: "{base} Plasma",
        87: "Glittering {plural}",
        89: "{base} Burst",
        91: "Bouncing {plural}",
        96: "{base} Drips",
        100: "{base} Pulse",
        107: "{base} Flow",
        111: "Dancing {plural}",
        112: "{base} Shadows",
    }
)


def pluralize(name: str) -> str:
    """Naive English plural: 'Rose' -> 'Roses', 'Sky' -> 'Skies', 'Box' -> 'Boxes', 'Stars' unchanged."""
    lower = name.lower()
    if lower.endswith("s"):
        return name
    if lower.endswith(("x", "z", "ch", "sh")):
        return f"{name}es"
    if lower.endswith("y") and lower[-2:-1] not in _VOWELS:
        return f"{name[:-1]}ies"
    return f"{name}s"


def base_name(name: str) -> str:
    """Drop a trailing ' Glow', ' Vibes' or ' Palette'."""
    if name.lower().endswith(_NAME_SUFFIXES):
        return name[: name.rfind(" ")]
    return name


def creative_name(effect_id: int, palette_name: str, catalog: EffectCatalog = EFFECT_REGISTRY) -> str:
    """Pattern name for a palette rendered with an effect.

    Unmapped effects fall back to '{palette} - {effect name}'.

    Example:
        >>> creative_name(12, "Candy Cane Glow")
        'Fading Candy Canes'
    """
    template = NAME_TEMPLATES.get(effect_id)
    if template is None:
        return f"{palette_name} - {catalog.name(effect_id)}"
    base = base_name(palette_name)
    return template.format(base=base, plural=pluralize(base))
