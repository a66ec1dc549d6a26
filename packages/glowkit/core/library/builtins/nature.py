"""Builtin nature and outdoors palettes, grouped by environment."""

from glowkit.core.library.builtins._helpers import folder, palette_nodes
from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.categories import CAT_NATURE
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

SKY: tuple[NamedPalette, ...] = (
    _p("nature_sunset", "Golden Sunset", "Orange and pink dusk", ("#FF5E3A", "#FF9F43", "#FF6B9D"), (2, 90, 0), speed=60),
    _p("nature_sunrise", "First Light", "Soft peach sunrise", ("#FFB88C", "#FFDAB9", "#87CEEB"), (90, 2, 0), speed=40),
    _p("nature_rainbow_sky", "After the Rain", "Pastel sky after a storm", ("#B3E5FC", "#FFF59D", "#F8BBD0"), (12, 2, 0)),
)

NIGHT: tuple[NamedPalette, ...] = (
    _p("nature_starry_night", "Starry Night", "Deep navy with twinkling stars", ("#0B1D3A", "#FFFFFF", "#FFF8DC"), (17, 49, 0), speed=60),
    _p("nature_aurora", "Northern Lights", "Aurora green and violet", ("#00FF87", "#7B2FF7", "#00B4D8"), (38, 67, 2), speed=50),
    _p("nature_full_moon", "Full Moon", "Cool silver moonlight", ("#E8EAF6", "#B0BEC5"), (2, 0)),
)

WATER: tuple[NamedPalette, ...] = (
    _p("nature_ocean", "Ocean Waves", "Deep blue to sea foam", ("#006994", "#40E0D0", "#E0FFFF"), (1007, 75, 2), speed=50),
    _p("nature_tropical_lagoon", "Tropical Lagoon", "Turquoise shallows", ("#00CED1", "#7FFFD4", "#F0E68C"), (75, 2, 0)),
    _p("nature_waterfall", "Waterfall", "Misty white and river blue", ("#FFFFFF", "#4FC3F7", "#0277BD"), (59, 2, 0)),
)

FOREST: tuple[NamedPalette, ...] = (
    _p("nature_forest", "Evergreen Forest", "Pine and moss greens", ("#014421", "#228B22", "#8FBC8F"), (2, 0)),
    _p("nature_campfire", "Campfire", "Crackling ember glow", ("#FF4500", "#FF8C00", "#FFD700"), (37, 38, 0), speed=90),
    _p("nature_fireflies", "Fireflies", "Summer-night firefly flicker", ("#0B3D0B", "#DFFF00"), (17, 49, 0), speed=70),
)

DESERT: tuple[NamedPalette, ...] = (
    _p("nature_desert_dusk", "Desert Dusk", "Sandstone and purple mountains", ("#EDC9AF", "#C1440E", "#6A0DAD"), (2, 0)),
    _p("nature_canyon", "Red Rock Canyon", "Layered canyon reds", ("#A0522D", "#CD5C5C", "#F4A460"), (12, 0)),
)

_ENVIRONMENTS: tuple[tuple[str, str, str, tuple[NamedPalette, ...]], ...] = (
    ("nature_env_sky", "Sunsets & Skies", "Daybreak and dusk", SKY),
    ("nature_env_night", "Night Sky", "Stars, moon and aurora", NIGHT),
    ("nature_env_water", "Ocean & Water", "Waves, lagoons and falls", WATER),
    ("nature_env_forest", "Forest & Campfire", "Woods and warm embers", FOREST),
    ("nature_env_desert", "Desert", "Sand and canyon tones", DESERT),
)


def build_nature_nodes() -> list[LibraryNode]:
    nodes = [
        folder(folder_id, title, CAT_NATURE, i, description=desc)
        for i, (folder_id, title, desc, _palettes) in enumerate(_ENVIRONMENTS)
    ]
    for folder_id, _title, _desc, palettes in _ENVIRONMENTS:
        nodes.extend(palette_nodes(folder_id, palettes))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("nature", CAT_NATURE, build_nature_nodes, "Environment folders and palettes")
