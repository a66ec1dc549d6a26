"""Builtin holiday palettes.

Registers the holiday folders (Christmas through New Year's Eve) and
their named palettes under the Holidays category.
"""

from glowkit.core.library.builtins._helpers import folder, palette_nodes
from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.categories import CAT_HOLIDAY
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

CHRISTMAS: tuple[NamedPalette, ...] = (
    _p("xmas_classic", "Classic Christmas", "Traditional red, green, and white", ("#FF0000", "#00FF00", "#FFFFFF"), (12, 41, 43, 0)),
    _p("xmas_candycane", "Candy Cane", "Red and white stripes", ("#FF0000", "#FFFFFF"), (12, 41, 0)),
    _p("xmas_grinch", "The Grinch", "Shades of green with a hint of red", ("#00FF00", "#228B22", "#FF0000"), (2, 41, 0)),
    _p("xmas_frosty", "Frosty the Snowman", "Icy blue and white winter tones", ("#87CEEB", "#FFFFFF", "#ADD8E6"), (43, 2, 0)),
    _p("xmas_santa", "Santa Claus", "Santa red with white and black accents", ("#FF0000", "#FFFFFF", "#000000"), (12, 0)),
    _p("xmas_nutcracker", "Nutcracker", "Royal red and gold", ("#DC143C", "#FFD700", "#000000"), (12, 41, 0)),
    _p("xmas_winterwonderland", "Winter Wonderland", "Silver, blue, and white snow", ("#C0C0C0", "#4169E1", "#FFFFFF"), (43, 2, 0)),
    _p("xmas_northpole", "North Pole", "Green, red, and gold festive", ("#00FF00", "#FF0000", "#FFD700"), (12, 43, 0)),
    _p("xmas_goldbells", "Gold Bells", "Warm gold and cream tones", ("#FFD700", "#FFFDD0", "#DAA520"), (2, 43, 0)),
    _p("xmas_silvertinsel", "Silver Tinsel", "Sparkling silver and white", ("#C0C0C0", "#FFFFFF", "#E8E8E8"), (43, 87, 0)),
    _p("xmas_rudolph", "Rudolph", "Red nose with brown and gold", ("#FF0000", "#8B4513", "#FFD700"), (2, 0)),
    _p("xmas_snowflake", "Snowflake", "Pure white with ice blue", ("#FFFFFF", "#B0E0E6"), (43, 0)),
)

HALLOWEEN: tuple[NamedPalette, ...] = (
    _p("halloween_classic", "Classic Halloween", "Orange and black spooky", ("#FF8C00", "#000000"), (43, 57, 0)),
    _p("halloween_witchbrew", "Witch's Brew", "Purple and green cauldron", ("#800080", "#00FF00", "#000000"), (2, 43, 0)),
    _p("halloween_pumpkinpatch", "Pumpkin Patch", "Orange pumpkin glow", ("#FF8C00", "#FF6600", "#FFD700"), (2, 101, 0)),
    _p("halloween_hauntedhouse", "Haunted House", "Eerie purple and orange", ("#800080", "#FF8C00", "#000000"), (57, 43, 0)),
    _p("halloween_skeleton", "Skeleton", "White bones on black", ("#FFFFFF", "#000000"), (1, 43, 0)),
    _p("halloween_vampire", "Vampire", "Blood red and black", ("#8B0000", "#000000", "#FF0000"), (2, 0)),
    _p("halloween_ghost", "Ghost", "Pale white with purple", ("#FFFFFF", "#E6E6FA", "#9370DB"), (2, 43, 0)),
    _p("halloween_franken", "Frankenstein", "Monster green and black", ("#00FF00", "#000000", "#ADFF2F"), (57, 1, 0)),
    _p("halloween_candy", "Candy Corn", "Yellow, orange, and white layers", ("#FFFF00", "#FF8C00", "#FFFFFF"), (41, 0)),
    _p("halloween_blackcat", "Black Cat", "Black with yellow eyes", ("#000000", "#FFFF00"), (43, 0)),
    _p("halloween_spiderweb", "Spider Web", "Silver web on purple", ("#C0C0C0", "#800080", "#000000"), (43, 0)),
)

JULY_4TH: tuple[NamedPalette, ...] = (
    _p("july4_classic", "Classic Patriotic", "Red, white, and blue", ("#FF0000", "#FFFFFF", "#0000FF"), (52, 12, 43, 0)),
    _p("july4_fireworks", "Fireworks", "Explosive patriotic bursts", ("#FF0000", "#FFFFFF", "#0000FF"), (52, 66, 0)),
    _p("july4_oldglory", "Old Glory", "Deep flag colors", ("#BF0A30", "#FFFFFF", "#002868"), (12, 41, 0)),
    _p("july4_sparkler", "Sparkler", "White sparkle with color accents", ("#FFFFFF", "#FF0000", "#0000FF"), (43, 87, 0)),
    _p("july4_stripes", "Stars and Stripes", "Alternating red and white", ("#FF0000", "#FFFFFF"), (41, 12, 0)),
    _p("july4_bluewave", "Blue Wave", "Blue with white crests", ("#0000FF", "#4169E1", "#FFFFFF"), (41, 2, 0)),
    _p("july4_liberty", "Liberty", "Copper green with gold", ("#4A9B7F", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("july4_bbq", "BBQ Party", "Warm patriotic glow", ("#FF4500", "#FFD700", "#FF6347"), (101, 0)),
    _p("july4_stars", "Starry Night", "Blue sky with white stars", ("#002868", "#FFFFFF"), (43, 0)),
    _p("july4_parade", "Parade", "Bright and bold tricolor", ("#FF0000", "#FFFFFF", "#1E90FF"), (12, 41, 0)),
)

VALENTINES: tuple[NamedPalette, ...] = (
    _p("val_romance", "Romance", "Classic red and pink", ("#FF0000", "#FF69B4", "#FFFFFF"), (2, 43, 0)),
    _p("val_heartbeat", "Heartbeat", "Pulsing red love", ("#FF0000", "#DC143C"), (82, 2, 0)),
    _p("val_roses", "Red Roses", "Deep red with green", ("#DC143C", "#228B22", "#FF0000"), (2, 0)),
    _p("val_blush", "Blush", "Soft pink tones", ("#FFB6C1", "#FFC0CB", "#FFFFFF"), (2, 0)),
    _p("val_passion", "Passion", "Bold red and purple", ("#FF0000", "#800080", "#FF1493"), (2, 41, 0)),
    _p("val_candy", "Candy Hearts", "Pastel conversation hearts", ("#FFB6C1", "#ADD8E6", "#FFFF00"), (43, 0)),
    _p("val_chocolate", "Chocolate Box", "Rich brown with gold", ("#8B4513", "#FFD700", "#FF0000"), (2, 0)),
    _p("val_cupid", "Cupid", "White and gold with pink", ("#FFFFFF", "#FFD700", "#FF69B4"), (43, 2, 0)),
    _p("val_wine", "Wine & Dine", "Burgundy and gold elegance", ("#722F37", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("val_sweetheart", "Sweetheart", "Pink and white stripes", ("#FF69B4", "#FFFFFF"), (41, 0)),
)

ST_PATRICKS: tuple[NamedPalette, ...] = (
    _p("stpat_shamrock", "Shamrock", "Classic Irish green", ("#00FF00", "#228B22", "#90EE90"), (2, 41, 0)),
    _p("stpat_goldpot", "Pot of Gold", "Green with gold treasure", ("#00FF00", "#FFD700"), (43, 12, 0)),
    _p("stpat_rainbow", "End of Rainbow", "Rainbow to gold", ("#FF0000", "#FFFF00", "#00FF00"), (41, 0)),
    _p("stpat_lucky", "Lucky Clover", "Four-leaf clover greens", ("#00FF00", "#32CD32", "#006400"), (2, 0)),
    _p("stpat_irish", "Irish Flag", "Green, white, and orange", ("#00FF00", "#FFFFFF", "#FF8C00"), (41, 12, 0)),
    _p("stpat_leprechaun", "Leprechaun", "Green suit with gold buckle", ("#228B22", "#FFD700", "#8B4513"), (12, 0)),
    _p("stpat_emerald", "Emerald Isle", "Deep emerald greens", ("#50C878", "#006400", "#00FF7F"), (2, 0)),
    _p("stpat_celtic", "Celtic", "Green with gold Celtic knots", ("#006400", "#DAA520", "#228B22"), (41, 0)),
    _p("stpat_guinness", "Pub Night", "Dark brown with gold foam", ("#3D1F0D", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("stpat_moss", "Irish Moss", "Soft green earth tones", ("#8A9A5B", "#90EE90", "#228B22"), (2, 0)),
)

EASTER: tuple[NamedPalette, ...] = (
    _p("easter_pastels", "Easter Pastels", "Soft pastel rainbow", ("#FFB6C1", "#ADD8E6", "#FFFF00"), (41, 43, 0)),
    _p("easter_bunny", "Easter Bunny", "White and pink bunny", ("#FFFFFF", "#FFB6C1", "#FF69B4"), (2, 0)),
    _p("easter_eggs", "Easter Eggs", "Colorful egg hunt", ("#FF69B4", "#00FFFF", "#FFFF00"), (43, 41, 0)),
    _p("easter_spring", "Spring Morning", "Fresh green and yellow", ("#90EE90", "#FFFF00", "#ADD8E6"), (2, 0)),
    _p("easter_lilies", "Easter Lilies", "White lilies with green", ("#FFFFFF", "#FFFDD0", "#90EE90"), (2, 0)),
    _p("easter_chicks", "Baby Chicks", "Yellow and orange chicks", ("#FFFF00", "#FFD700", "#FF8C00"), (43, 0)),
    _p("easter_lavender", "Lavender Field", "Purple and green garden", ("#E6E6FA", "#9370DB", "#90EE90"), (2, 41, 0)),
    _p("easter_robin", "Robin Egg", "Soft blue robin eggs", ("#00FFFF", "#ADD8E6", "#FFFFFF"), (2, 0)),
    _p("easter_tulip", "Tulip Garden", "Red, yellow, pink tulips", ("#FF0000", "#FFFF00", "#FF69B4"), (41, 0)),
    _p("easter_sunrise", "Easter Sunrise", "Morning gold and pink", ("#FFD700", "#FF69B4", "#FFB6C1"), (2, 0)),
)

THANKSGIVING: tuple[NamedPalette, ...] = (
    _p("thanks_harvest", "Harvest", "Orange and brown autumn", ("#FF8C00", "#8B4513", "#FFD700"), (101, 2, 0)),
    _p("thanks_turkey", "Turkey", "Brown with red gobble", ("#8B4513", "#FF0000", "#FF8C00"), (2, 0)),
    _p("thanks_pumpkin", "Pumpkin Pie", "Warm pumpkin and cream", ("#FF8C00", "#FFFDD0", "#8B4513"), (2, 0)),
    _p("thanks_leaves", "Fall Leaves", "Red, orange, and yellow", ("#FF0000", "#FF8C00", "#FFFF00"), (41, 0)),
    _p("thanks_corn", "Indian Corn", "Multi-colored corn", ("#FFD700", "#8B0000", "#FF8C00"), (41, 0)),
    _p("thanks_acorn", "Acorn", "Brown and tan earth tones", ("#8B4513", "#D2B48C", "#6B4423"), (2, 0)),
    _p("thanks_cranberry", "Cranberry", "Deep red cranberry", ("#8B0000", "#DC143C", "#FF6347"), (2, 0)),
    _p("thanks_golden", "Golden Feast", "Warm gold tones", ("#FFD700", "#DAA520", "#FF8C00"), (2, 101, 0)),
    _p("thanks_fireside", "Fireside", "Warm fireplace glow", ("#FF4500", "#FF8C00", "#FFD700"), (101, 0)),
    _p("thanks_gratitude", "Gratitude", "Warm and inviting amber", ("#FFB347", "#FFE4B5", "#FF8C00"), (2, 0)),
)

NEW_YEARS: tuple[NamedPalette, ...] = (
    _p("ny_celebration", "Celebration", "Gold and silver sparkle", ("#FFD700", "#C0C0C0", "#FFFFFF"), (52, 43, 87, 0)),
    _p("ny_midnight", "Midnight", "Dark blue with gold stars", ("#00008B", "#FFD700", "#FFFFFF"), (43, 52, 0)),
    _p("ny_champagne", "Champagne", "Bubbly gold tones", ("#FFD700", "#FAF0E6", "#DAA520"), (43, 2, 0)),
    _p("ny_balldrop", "Ball Drop", "Crystal and lights", ("#FFFFFF", "#00FFFF", "#FF00FF"), (52, 43, 0)),
    _p("ny_confetti", "Confetti", "Multi-color party", ("#FF0000", "#00FF00", "#FFD700"), (87, 43, 0)),
    _p("ny_disco", "Disco Ball", "Silver disco shimmer", ("#C0C0C0", "#FFFFFF", "#87CEEB"), (43, 87, 0)),
    _p("ny_countdown", "Countdown", "Red and gold countdown", ("#FF0000", "#FFD700"), (1, 82, 0)),
    _p("ny_party", "Party Time", "Vibrant party colors", ("#FF00FF", "#00FFFF", "#FFFF00"), (52, 12, 0)),
    _p("ny_elegant", "Black Tie", "Elegant black and gold", ("#000000", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("ny_fireworks", "Fireworks", "Explosive celebration", ("#FF0000", "#FFFFFF", "#0000FF"), (52, 66, 0)),
)

# folder id, title, image, palettes
_HOLIDAYS: tuple[tuple[str, str, str | None, tuple[NamedPalette, ...]], ...] = (
    ("holiday_christmas", "Christmas", "https://images.unsplash.com/photo-1543589077-47d81606c1bf", CHRISTMAS),
    ("holiday_halloween", "Halloween", "https://images.unsplash.com/photo-1509557965875-b88c97052f0e", HALLOWEEN),
    ("holiday_july4", "4th of July", "https://images.unsplash.com/photo-1475724017904-b712052c192a", JULY_4TH),
    ("holiday_valentines", "Valentine's Day", None, VALENTINES),
    ("holiday_stpatricks", "St. Patrick's Day", None, ST_PATRICKS),
    ("holiday_easter", "Easter", "https://images.unsplash.com/photo-1522938974444-f12497b69347", EASTER),
    ("holiday_thanksgiving", "Thanksgiving", None, THANKSGIVING),
    ("holiday_newyears", "New Year's Eve", None, NEW_YEARS),
)


def build_holiday_nodes() -> list[LibraryNode]:
    nodes: list[LibraryNode] = []
    for i, (folder_id, title, image_url, _palettes) in enumerate(_HOLIDAYS):
        nodes.append(folder(folder_id, title, CAT_HOLIDAY, i, image_url=image_url))
    for folder_id, _title, _image, palettes in _HOLIDAYS:
        nodes.extend(palette_nodes(folder_id, palettes))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("holidays", CAT_HOLIDAY, build_holiday_nodes, "Holiday folders and palettes")
