"""Builtin seasonal colorways."""

from glowkit.core.library.builtins._helpers import folder, palette_nodes
from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.categories import CAT_SEASON
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

SPRING: tuple[NamedPalette, ...] = (
    _p("spring_cherryblossom", "Cherry Blossom", "Soft pink blossoms", ("#FFB7C5", "#FF69B4", "#FFFFFF"), (2, 43, 0)),
    _p("spring_freshgrass", "Fresh Cut Grass", "Vibrant spring green", ("#7CFC00", "#32CD32", "#90EE90"), (2, 0)),
    _p("spring_tulipfield", "Tulip Field", "Red, yellow, and pink tulips", ("#FF0000", "#FFFF00", "#FF69B4"), (41, 0)),
    _p("spring_raindrop", "Spring Rain", "Fresh blue raindrops", ("#87CEEB", "#ADD8E6", "#FFFFFF"), (43, 2, 0)),
    _p("spring_daffodil", "Daffodil", "Sunny yellow blooms", ("#FFFF00", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("spring_lavender", "Lavender Field", "Purple lavender rows", ("#E6E6FA", "#9370DB", "#90EE90"), (41, 2, 0)),
    _p("spring_butterfly", "Butterfly Garden", "Colorful butterfly wings", ("#FF8C00", "#4169E1", "#FFFF00"), (41, 43, 0)),
    _p("spring_robinegg", "Robin's Egg", "Soft blue nest", ("#00CED1", "#ADD8E6", "#FFFFFF"), (2, 0)),
    _p("spring_meadow", "Meadow", "Green grass with wildflowers", ("#90EE90", "#FF69B4", "#FFFF00"), (41, 0)),
    _p("spring_renewal", "Renewal", "Fresh green new growth", ("#98FB98", "#00FF7F", "#32CD32"), (2, 0)),
    _p("spring_peony", "Peony", "Soft pink peony petals", ("#FFC0CB", "#FFB6C1", "#FF69B4"), (2, 0)),
    _p("spring_mint", "Mint Fresh", "Cool mint green", ("#98FF98", "#ADFF2F", "#FFFFFF"), (2, 0)),
)

SUMMER: tuple[NamedPalette, ...] = (
    _p("summer_sunset", "Summer Sunset", "Orange and pink sky", ("#FF4500", "#FF8C00", "#FF69B4"), (2, 41, 0)),
    _p("summer_ocean", "Ocean Waves", "Blue and teal sea", ("#00CED1", "#0000FF", "#FFFFFF"), (41, 2, 0)),
    _p("summer_tropical", "Tropical Paradise", "Vibrant tropical colors", ("#00FFFF", "#FF8C00", "#32CD32"), (41, 0)),
    _p("summer_watermelon", "Watermelon", "Red with green rind", ("#FF6B6B", "#00FF00", "#000000"), (41, 0)),
    _p("summer_lemonade", "Lemonade", "Fresh yellow citrus", ("#FFFF00", "#FFFDD0", "#FFD700"), (2, 0)),
    _p("summer_poolside", "Poolside", "Cool pool blue", ("#00BFFF", "#87CEEB", "#FFFFFF"), (41, 2, 0)),
    _p("summer_bonfire", "Beach Bonfire", "Warm fire glow", ("#FF4500", "#FF8C00", "#FFD700"), (101, 0)),
    _p("summer_seashell", "Seashell", "Soft beach pinks", ("#FFF5EE", "#FFB6C1", "#D2B48C"), (2, 0)),
    _p("summer_palm", "Palm Trees", "Green palms and sunset", ("#228B22", "#FF8C00", "#FF4500"), (41, 0)),
    _p("summer_icecream", "Ice Cream", "Sweet pastel scoops", ("#FFB6C1", "#FFFDD0", "#8B4513"), (41, 0)),
    _p("summer_coral", "Coral Reef", "Coral and sea blue", ("#FF7F50", "#00CED1", "#FF69B4"), (41, 0)),
    _p("summer_bbq", "BBQ Party", "Warm grill tones", ("#FF4500", "#FFD700", "#8B4513"), (101, 0)),
)

AUTUMN: tuple[NamedPalette, ...] = (
    _p("autumn_fallleaves", "Fall Leaves", "Red, orange, yellow leaves", ("#FF0000", "#FF8C00", "#FFD700"), (41, 0)),
    _p("autumn_pumpkinspice", "Pumpkin Spice", "Warm spice tones", ("#FF8C00", "#8B4513", "#FFD700"), (2, 101, 0)),
    _p("autumn_harvest", "Harvest Moon", "Golden harvest glow", ("#FFD700", "#FF8C00", "#8B4513"), (2, 0)),
    _p("autumn_cranberry", "Cranberry Bog", "Deep red cranberries", ("#8B0000", "#DC143C", "#722F37"), (2, 0)),
    _p("autumn_acorn", "Acorn & Oak", "Brown and tan oak", ("#8B4513", "#D2B48C", "#228B22"), (2, 0)),
    _p("autumn_apple", "Apple Orchard", "Red and green apples", ("#FF0000", "#228B22", "#FFD700"), (41, 0)),
    _p("autumn_hayride", "Hayride", "Golden hay and brown", ("#DAA520", "#8B4513", "#FFD700"), (2, 0)),
    _p("autumn_maple", "Maple Syrup", "Amber and gold maple", ("#FFB347", "#8B4513", "#FFD700"), (2, 0)),
    _p("autumn_scarecrow", "Scarecrow", "Straw and denim", ("#DAA520", "#4169E1", "#8B4513"), (2, 0)),
    _p("autumn_bonfire", "Autumn Bonfire", "Warm crackling fire", ("#FF4500", "#FF8C00", "#FFD700"), (101, 0)),
    _p("autumn_rustic", "Rustic Charm", "Earthy rust and brown", ("#B7410E", "#8B4513", "#D2B48C"), (2, 0)),
    _p("autumn_vineyard", "Vineyard", "Purple grape and green vine", ("#800080", "#228B22", "#8B4513"), (2, 0)),
)

WINTER: tuple[NamedPalette, ...] = (
    _p("winter_snowfall", "Snowfall", "Pure white snow", ("#FFFFFF", "#F0F8FF", "#E0FFFF"), (43, 2, 0)),
    _p("winter_frost", "Frost", "Icy blue frost", ("#ADD8E6", "#87CEEB", "#FFFFFF"), (43, 0)),
    _p("winter_aurora", "Northern Lights", "Aurora borealis greens", ("#00FF7F", "#00CED1", "#9370DB"), (38, 41, 0)),
    _p("winter_cozy", "Cozy Cabin", "Warm fireplace glow", ("#FF4500", "#FFB347", "#8B4513"), (101, 0)),
    _p("winter_icicle", "Icicle", "Crystal ice blue", ("#B0E0E6", "#FFFFFF", "#87CEEB"), (43, 0)),
    _p("winter_evergreen", "Evergreen", "Deep forest green", ("#006400", "#228B22", "#2E8B57"), (2, 0)),
    _p("winter_holly", "Holly Berry", "Green holly with red berries", ("#228B22", "#FF0000", "#006400"), (43, 0)),
    _p("winter_midnight", "Midnight Blue", "Deep winter night", ("#00008B", "#191970", "#FFFFFF"), (43, 0)),
    _p("winter_hotcocoa", "Hot Cocoa", "Warm brown and cream", ("#8B4513", "#FFFDD0", "#D2691E"), (2, 0)),
    _p("winter_silver", "Silver Snow", "Glittering silver", ("#C0C0C0", "#FFFFFF", "#E8E8E8"), (43, 87, 0)),
    _p("winter_cardinal", "Cardinal", "Red bird on white snow", ("#FF0000", "#FFFFFF", "#8B0000"), (43, 0)),
    _p("winter_pinecone", "Pinecone", "Brown pine with green", ("#8B4513", "#228B22", "#D2B48C"), (2, 0)),
)

_SEASONS: tuple[tuple[str, str, str, tuple[NamedPalette, ...]], ...] = (
    ("season_spring", "Spring", "Fresh blooms and new growth", SPRING),
    ("season_summer", "Summer", "Sunny days and warm nights", SUMMER),
    ("season_autumn", "Autumn", "Fall colors and harvest", AUTUMN),
    ("season_winter", "Winter", "Snow and cozy warmth", WINTER),
)


def build_season_nodes() -> list[LibraryNode]:
    nodes = [
        folder(folder_id, title, CAT_SEASON, i, description=desc)
        for i, (folder_id, title, desc, _palettes) in enumerate(_SEASONS)
    ]
    for folder_id, _title, _desc, palettes in _SEASONS:
        nodes.extend(palette_nodes(folder_id, palettes))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("seasons", CAT_SEASON, build_season_nodes, "Season folders and colorways")
