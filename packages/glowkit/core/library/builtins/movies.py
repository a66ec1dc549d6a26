"""Builtin movie and superhero palettes, grouped by franchise."""

from glowkit.core.library.builtins._helpers import folder, palette_nodes
from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.categories import CAT_MOVIES
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

DISNEY: tuple[NamedPalette, ...] = (
    _p("movie_castle_magic", "Castle Magic", "Royal blue and gold with a sparkle", ("#1E88E5", "#FFD700", "#FFFFFF"), (49, 17, 0)),
    _p("movie_ice_palace", "Ice Palace", "Frosted blues and silver", ("#A5F2F3", "#4FC3F7", "#E0E0E0"), (17, 2, 0)),
    _p("movie_under_the_sea", "Under the Sea", "Sea green, coral and violet", ("#00A693", "#FF7F50", "#8A2BE2"), (1007, 2, 0)),
)

MARVEL: tuple[NamedPalette, ...] = (
    _p("movie_iron_armor", "Iron Armor", "Hot-rod red and gold", ("#B71C1C", "#FFC107"), (41, 12, 0)),
    _p("movie_star_shield", "Star Shield", "Red, white and blue shield", ("#C62828", "#FFFFFF", "#1565C0"), (12, 28, 0)),
    _p("movie_web_slinger", "Web Slinger", "Red and blue with web white", ("#D32F2F", "#1A237E", "#FFFFFF"), (28, 41, 0)),
    _p("movie_thunder_god", "Thunder God", "Storm blue with lightning white", ("#283593", "#90CAF9", "#FFFFFF"), (46, 2, 0)),
)

STAR_WARS: tuple[NamedPalette, ...] = (
    _p("movie_light_side", "Light Side", "Saber blue and green", ("#2196F3", "#00E676"), (40, 2, 0)),
    _p("movie_dark_side", "Dark Side", "Crimson saber on black", ("#D50000", "#212121"), (40, 2, 0)),
    _p("movie_desert_twin_suns", "Twin Suns", "Desert sand under two suns", ("#FFB74D", "#FF7043", "#FFE0B2"), (90, 0)),
)

DC: tuple[NamedPalette, ...] = (
    _p("movie_man_of_steel", "Man of Steel", "Blue and red with a gold crest", ("#0D47A1", "#D50000", "#FFD600"), (12, 41, 0)),
    _p("movie_dark_knight", "Dark Knight", "Night black and signal yellow", ("#212121", "#FFEB3B"), (2, 0)),
    _p("movie_amazon_warrior", "Amazon Warrior", "Crimson, gold and navy", ("#B71C1C", "#FFC107", "#1A237E"), (12, 28, 0)),
)

PIXAR: tuple[NamedPalette, ...] = (
    _p("movie_toy_box", "Toy Box", "Primary toy-box colors", ("#F44336", "#FFEB3B", "#2196F3"), (13, 28, 0)),
    _p("movie_lantern_sky", "Lantern Sky", "Floating lantern gold on dusk purple", ("#FFB300", "#4A148C"), (49, 17, 0)),
    _p("movie_marigold_bridge", "Marigold Bridge", "Marigold orange and magenta", ("#FF8F00", "#E91E63", "#7B1FA2"), (17, 2, 0)),
)

DREAMWORKS: tuple[NamedPalette, ...] = (
    _p("movie_ogre_swamp", "Swamp Ogre", "Swamp greens and mud brown", ("#7CB342", "#33691E", "#795548"), (2, 0)),
    _p("movie_dragon_rider", "Dragon Rider", "Night fury black with plasma blue", ("#263238", "#40C4FF"), (46, 2, 0)),
    _p("movie_troll_party", "Troll Party", "Hot pink, teal and sunshine", ("#FF4081", "#1DE9B6", "#FFEB3B"), (28, 17, 0)),
)

HARRY_POTTER: tuple[NamedPalette, ...] = (
    _p("movie_lion_house", "Lion House", "Scarlet and gold", ("#7F0909", "#FFC500"), (12, 2, 0)),
    _p("movie_serpent_house", "Serpent House", "Emerald and silver", ("#1A472A", "#AAAAAA"), (12, 2, 0)),
    _p("movie_eagle_house", "Eagle House", "Blue and bronze", ("#0E1A40", "#946B2D"), (12, 2, 0)),
    _p("movie_badger_house", "Badger House", "Yellow and black", ("#ECB939", "#372E29"), (12, 2, 0)),
    _p("movie_great_hall", "Great Hall", "Floating candlelight", ("#FFB74D", "#FFE0B2"), (37, 0)),
)

NINTENDO: tuple[NamedPalette, ...] = (
    _p("movie_plumber_bros", "Plumber Bros", "Red and green overalls", ("#E53935", "#43A047", "#1E88E5"), (28, 13, 0)),
    _p("movie_power_star", "Power Star", "Invincible star gold", ("#FFD600", "#FFFFFF"), (87, 17, 0)),
    _p("movie_hero_of_time", "Hero of Time", "Forest green and triforce gold", ("#2E7D32", "#FFD54F"), (2, 49, 0)),
)

# folder id, title, palettes
_FRANCHISES: tuple[tuple[str, str, tuple[NamedPalette, ...]], ...] = (
    ("franchise_disney", "Disney", DISNEY),
    ("franchise_marvel", "Marvel", MARVEL),
    ("franchise_starwars", "Star Wars", STAR_WARS),
    ("franchise_dc", "DC", DC),
    ("franchise_pixar", "Pixar", PIXAR),
    ("franchise_dreamworks", "DreamWorks", DREAMWORKS),
    ("franchise_harrypotter", "Wizarding World", HARRY_POTTER),
    ("franchise_nintendo", "Nintendo", NINTENDO),
)


def build_movie_nodes() -> list[LibraryNode]:
    nodes = [folder(folder_id, title, CAT_MOVIES, i) for i, (folder_id, title, _palettes) in enumerate(_FRANCHISES)]
    for folder_id, _title, palettes in _FRANCHISES:
        nodes.extend(palette_nodes(folder_id, palettes))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("movies", CAT_MOVIES, build_movie_nodes, "Franchise folders and palettes")
