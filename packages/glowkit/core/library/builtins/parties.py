"""Builtin party and event palettes."""

from glowkit.core.library.builtins._helpers import folder, palette_nodes
from glowkit.core.library.builtins._helpers import named_palette as _p
from glowkit.core.library.categories import CAT_PARTY
from glowkit.core.library.models import LibraryNode, NamedPalette
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

BIRTHDAY_BOY: tuple[NamedPalette, ...] = (
    _p("bday_boy_superhero", "Superhero", "Red, blue, and yellow hero", ("#FF0000", "#0000FF", "#FFFF00"), (12, 41, 0)),
    _p("bday_boy_sports", "Sports Star", "Green field with gold", ("#228B22", "#FFD700", "#FFFFFF"), (41, 0)),
    _p("bday_boy_dinosaur", "Dinosaur", "Green dino jungle", ("#228B22", "#8B4513", "#FF8C00"), (2, 0)),
    _p("bday_boy_space", "Outer Space", "Galaxy purple and blue", ("#4B0082", "#0000FF", "#FFFFFF"), (43, 0)),
    _p("bday_boy_monster", "Monster Truck", "Orange and black trucks", ("#FF8C00", "#000000", "#FF0000"), (41, 0)),
    _p("bday_boy_pirate", "Pirate Adventure", "Black and gold treasure", ("#000000", "#FFD700", "#FF0000"), (43, 0)),
    _p("bday_boy_ocean", "Under the Sea", "Blue ocean depths", ("#0000FF", "#00CED1", "#00FF7F"), (41, 0)),
    _p("bday_boy_minecraft", "Block Builder", "Green and brown blocks", ("#228B22", "#8B4513", "#808080"), (41, 0)),
    _p("bday_boy_race", "Race Car", "Red racing stripes", ("#FF0000", "#FFFFFF", "#000000"), (41, 12, 0)),
    _p("bday_boy_safari", "Safari Adventure", "Jungle animal colors", ("#FFD700", "#8B4513", "#228B22"), (2, 0)),
)

BIRTHDAY_GIRL: tuple[NamedPalette, ...] = (
    _p("bday_girl_princess", "Princess", "Pink and gold royalty", ("#FF69B4", "#FFD700", "#FFFFFF"), (43, 2, 0)),
    _p("bday_girl_unicorn", "Unicorn Magic", "Rainbow pastel sparkle", ("#FF69B4", "#9370DB", "#00FFFF"), (43, 41, 0)),
    _p("bday_girl_barbie", "Barbie Pink", "Hot pink and white", ("#FF1493", "#FFFFFF", "#FF69B4"), (2, 0)),
    _p("bday_girl_mermaid", "Mermaid", "Teal and purple sea", ("#00CED1", "#9370DB", "#00FF7F"), (41, 0)),
    _p("bday_girl_fairy", "Fairy Garden", "Pink flowers and green", ("#FF69B4", "#90EE90", "#E6E6FA"), (43, 0)),
    _p("bday_girl_butterfly", "Butterfly", "Colorful butterfly wings", ("#FF69B4", "#00FFFF", "#FFFF00"), (41, 0)),
    _p("bday_girl_rainbow", "Rainbow Bright", "Full rainbow colors", ("#FF0000", "#FFFF00", "#00FF00"), (41, 0)),
    _p("bday_girl_ballerina", "Ballerina", "Soft pink tutu", ("#FFB6C1", "#FFFFFF", "#FFC0CB"), (2, 0)),
    _p("bday_girl_frozen", "Ice Princess", "Icy blue and white", ("#87CEEB", "#FFFFFF", "#ADD8E6"), (43, 0)),
    _p("bday_girl_sunshine", "Sunshine", "Yellow and orange joy", ("#FFFF00", "#FF8C00", "#FF69B4"), (2, 0)),
)

BIRTHDAY_ADULT: tuple[NamedPalette, ...] = (
    _p("bday_adult_elegant", "Elegant Gold", "Gold and black sophistication", ("#FFD700", "#000000", "#FFFFFF"), (2, 0)),
    _p("bday_adult_silver", "Silver Celebration", "Silver and white sparkle", ("#C0C0C0", "#FFFFFF", "#000000"), (43, 0)),
    _p("bday_adult_party", "Party Lights", "Multi-color celebration", ("#FF00FF", "#00FFFF", "#FFFF00"), (12, 43, 0)),
    _p("bday_adult_champagne", "Champagne Toast", "Bubbly gold tones", ("#FFD700", "#FAF0E6", "#DAA520"), (43, 2, 0)),
    _p("bday_adult_neon", "Neon Night", "Bright neon colors", ("#FF00FF", "#00FF00", "#00FFFF"), (12, 0)),
    _p("bday_adult_rose", "Rose Gold", "Rose gold and blush", ("#B76E79", "#FFC0CB", "#FFD700"), (2, 0)),
    _p("bday_adult_milestone", "Milestone", "Gold and silver balloons", ("#FFD700", "#C0C0C0", "#FFFFFF"), (43, 0)),
    _p("bday_adult_tropical", "Tropical Party", "Bright island colors", ("#FF8C00", "#00CED1", "#32CD32"), (41, 0)),
    _p("bday_adult_vintage", "Vintage Glam", "Deep burgundy and gold", ("#722F37", "#FFD700", "#000000"), (2, 0)),
    _p("bday_adult_disco", "Disco Fever", "Shimmering disco colors", ("#C0C0C0", "#FFD700", "#FF00FF"), (43, 12, 0)),
)

WEDDING: tuple[NamedPalette, ...] = (
    _p("wedding_classic", "Classic White", "Pure white elegance", ("#FFFFFF", "#FFFDD0"), (2, 0)),
    _p("wedding_romantic", "Romantic Blush", "Blush pink and gold", ("#FFB6C1", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("wedding_garden", "Garden Romance", "Pink roses and green", ("#FF69B4", "#90EE90", "#FFFFFF"), (2, 0)),
    _p("wedding_navy", "Navy & Gold", "Elegant navy and gold", ("#000080", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("wedding_rustic", "Rustic Charm", "Burlap and lace", ("#D2B48C", "#FFFFFF", "#8B4513"), (101, 0)),
    _p("wedding_lavender", "Lavender Dreams", "Soft purple elegance", ("#E6E6FA", "#9370DB", "#FFFFFF"), (2, 0)),
    _p("wedding_burgundy", "Burgundy Romance", "Deep wine and gold", ("#722F37", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("wedding_beach", "Beach Wedding", "Sandy and ocean blue", ("#D2B48C", "#00CED1", "#FFFFFF"), (41, 0)),
    _p("wedding_sage", "Sage Green", "Earthy sage and cream", ("#9DC183", "#FFFDD0", "#FFFFFF"), (2, 0)),
    _p("wedding_sunset", "Sunset Romance", "Coral and gold sunset", ("#FF7F50", "#FFD700", "#FF69B4"), (2, 0)),
)

BABY_SHOWER: tuple[NamedPalette, ...] = (
    _p("baby_boy", "Baby Boy Blue", "Soft blue for boys", ("#ADD8E6", "#87CEEB", "#FFFFFF"), (2, 0)),
    _p("baby_girl", "Baby Girl Pink", "Soft pink for girls", ("#FFB6C1", "#FFC0CB", "#FFFFFF"), (2, 0)),
    _p("baby_neutral", "Gender Neutral", "Yellow and green joy", ("#FFFF00", "#90EE90", "#FFFFFF"), (2, 0)),
    _p("baby_safari", "Safari Animals", "Jungle animal colors", ("#FFD700", "#8B4513", "#90EE90"), (2, 0)),
    _p("baby_cloud", "Clouds & Stars", "White clouds, gold stars", ("#FFFFFF", "#FFD700", "#ADD8E6"), (43, 0)),
    _p("baby_elephant", "Elephant Parade", "Gray and pastel blue", ("#808080", "#ADD8E6", "#FFFFFF"), (41, 0)),
    _p("baby_rainbow", "Rainbow Baby", "Soft rainbow pastels", ("#FFB6C1", "#FFFF00", "#ADD8E6"), (41, 0)),
    _p("baby_woodland", "Woodland Creatures", "Forest browns and greens", ("#8B4513", "#90EE90", "#FFFDD0"), (2, 0)),
    _p("baby_navy", "Nautical", "Navy and white stripes", ("#000080", "#FFFFFF", "#FF0000"), (41, 0)),
    _p("baby_twinkle", "Twinkle Star", "Night sky with stars", ("#191970", "#FFD700", "#FFFFFF"), (43, 0)),
)

GRADUATION: tuple[NamedPalette, ...] = (
    _p("grad_classic", "Classic Cap & Gown", "Black and gold achievement", ("#000000", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("grad_success", "Success Gold", "Celebratory gold", ("#FFD700", "#DAA520", "#FFFFFF"), (43, 0)),
    _p("grad_future", "Bright Future", "Optimistic blue and gold", ("#4169E1", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("grad_celebrate", "Celebration", "Multi-color party", ("#FF0000", "#FFFF00", "#0000FF"), (52, 43, 0)),
    _p("grad_class", "Class Colors", "School colors pride", ("#000080", "#FFD700", "#FFFFFF"), (12, 0)),
    _p("grad_elegant", "Elegant Silver", "Refined silver and white", ("#C0C0C0", "#FFFFFF", "#000000"), (2, 0)),
    _p("grad_milestone", "Milestone", "Achievement purple", ("#800080", "#FFD700", "#FFFFFF"), (2, 0)),
    _p("grad_adventure", "New Adventure", "Bold and bright start", ("#FF8C00", "#00CED1", "#FFFF00"), (41, 0)),
    _p("grad_books", "Books & Knowledge", "Library browns and gold", ("#8B4513", "#FFD700", "#FFFDD0"), (2, 0)),
    _p("grad_stars", "Reach for Stars", "Night sky achievement", ("#191970", "#FFD700", "#FFFFFF"), (43, 0)),
)

ANNIVERSARY: tuple[NamedPalette, ...] = (
    _p("anniv_gold", "Golden Anniversary", "50 years of gold", ("#FFD700", "#DAA520", "#FFFFFF"), (2, 0)),
    _p("anniv_silver", "Silver Anniversary", "25 years of silver", ("#C0C0C0", "#FFFFFF", "#E8E8E8"), (2, 0)),
    _p("anniv_ruby", "Ruby Anniversary", "40 years of red", ("#E0115F", "#FFFFFF", "#DC143C"), (2, 0)),
    _p("anniv_romance", "Romantic Evening", "Red roses and candlelight", ("#FF0000", "#FFB347", "#FFFFFF"), (101, 2, 0)),
    _p("anniv_pearl", "Pearl Anniversary", "30 years of pearls", ("#FFFDD0", "#FFFFFF", "#FFE4B5"), (2, 0)),
    _p("anniv_diamond", "Diamond Anniversary", "60 years of diamonds", ("#FFFFFF", "#B9F2FF", "#C0C0C0"), (43, 0)),
    _p("anniv_love", "Love Story", "Pink and red hearts", ("#FF69B4", "#FF0000", "#FFFFFF"), (82, 2, 0)),
    _p("anniv_champagne", "Champagne Toast", "Bubbly celebration", ("#FFD700", "#FAF0E6", "#FFFFFF"), (43, 0)),
    _p("anniv_starlight", "Starlight", "Romantic night sky", ("#191970", "#FFD700", "#FFFFFF"), (43, 0)),
    _p("anniv_eternal", "Eternal Flame", "Warm everlasting glow", ("#FF4500", "#FFB347", "#FFD700"), (101, 0)),
)


def build_party_nodes() -> list[LibraryNode]:
    nodes = [
        folder("event_birthdays", "Birthdays", CAT_PARTY, 0),
        folder("event_bday_boy", "Boy Birthday", "event_birthdays", 0),
        folder("event_bday_girl", "Girl Birthday", "event_birthdays", 1),
        folder("event_bday_adult", "Adult Birthday", "event_birthdays", 2),
        folder("event_weddings", "Weddings", CAT_PARTY, 1),
        folder("event_babyshower", "Baby Shower", CAT_PARTY, 2),
        folder("event_graduation", "Graduation", CAT_PARTY, 3),
        folder("event_anniversary", "Anniversary", CAT_PARTY, 4),
    ]
    nodes.extend(palette_nodes("event_bday_boy", BIRTHDAY_BOY))
    nodes.extend(palette_nodes("event_bday_girl", BIRTHDAY_GIRL))
    nodes.extend(palette_nodes("event_bday_adult", BIRTHDAY_ADULT))
    nodes.extend(palette_nodes("event_weddings", WEDDING))
    nodes.extend(palette_nodes("event_babyshower", BABY_SHOWER))
    nodes.extend(palette_nodes("event_graduation", GRADUATION))
    nodes.extend(palette_nodes("event_anniversary", ANNIVERSARY))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register("parties", CAT_PARTY, build_party_nodes, "Party and event palettes")
