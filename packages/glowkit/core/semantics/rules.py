"""Ordered keyword rule tables for query analysis.

Every table is evaluated top to bottom and the first matching rule wins,
so more specific rules sit above broader ones.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TypeVar

from glowkit.core.effects.enums import EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.utils.colors import RGB

T = TypeVar("T")

Rule = tuple[re.Pattern[str], T]


def _rule(words: str, value: T) -> tuple[re.Pattern[str], T]:
    return re.compile(rf"\b({words})\b"), value


# Words dropped before theme tokenization
FILLER_PATTERN = re.compile(r"\b(lets|let's|make|it|look|like|have|a|an|the|for|my|our)\b")

# Theme keywords in priority order

HOLIDAY_THEMES: tuple[str, ...] = (
    "christmas", "xmas", "halloween", "thanksgiving", "easter", "valentines",
    "stpatricks", "newyears", "fourthofjuly", "4thofjuly", "memorialday",
    "laborday", "mothersday", "fathersday", "mardigras", "cincodemayo",
)  # fmt: skip

OCCASION_THEMES: tuple[str, ...] = (
    "wedding", "birthday", "graduation", "babyshower", "baby", "shower",
    "anniversary", "engagement", "retirement", "housewarming",
)  # fmt: skip

TEAM_THEMES: tuple[str, ...] = (
    # NFL
    "chiefs", "cowboys", "packers", "patriots", "steelers", "eagles",
    "niners", "49ers", "seahawks", "broncos", "raiders", "chargers",
    "bills", "dolphins", "jets", "ravens", "bengals", "browns",
    "texans", "colts", "jaguars", "titans", "bears", "lions",
    "vikings", "falcons", "panthers", "saints", "buccaneers",
    "cardinals", "rams", "commanders", "giants",
    # NBA
    "lakers", "celtics", "warriors", "heat", "bulls", "knicks",
    "nets", "mavericks", "spurs", "rockets", "nuggets", "suns",
    "bucks", "sixers", "raptors", "clippers", "thunder", "grizzlies",
    "pelicans", "timberwolves", "blazers", "jazz", "kings", "cavaliers",
    "pistons", "pacers", "hawks", "hornets", "magic", "wizards",
    # MLB
    "royals", "yankees", "redsox", "dodgers", "cubs", "astros",
    "braves", "phillies", "mets", "rangers", "padres",
    "mariners", "whitesox", "tigers", "twins", "guardians", "orioles",
    "bluejays", "rays", "athletics", "angels", "reds", "brewers",
    "pirates", "rockies", "diamondbacks", "marlins", "nationals",
    # NHL
    "blackhawks", "bruins", "mapleleafs", "canadiens", "redwings",
    "penguins", "flyers", "avalanche", "lightning", "goldenknights",
    "capitals", "oilers", "flames", "blues", "stars", "sharks",
    "ducks", "kraken", "wild", "predators", "hurricanes", "devils",
    "islanders", "sabres", "senators", "canucks",
    # MLS
    "sportingkc", "galaxy", "lafc", "sounders", "atlantaunited", "intermiami",
    # College
    "jayhawks", "wildcats", "crimsontide", "buckeyes",
    "wolverines", "fightingirish", "longhorns", "bulldogs", "sooners",
)  # fmt: skip

SEASON_THEMES: tuple[str, ...] = ("winter", "spring", "summer", "fall", "autumn")

MOOD_THEMES: tuple[str, ...] = ("romantic", "energetic", "relaxing", "elegant", "cozy", "peaceful")

NATURE_THEMES: tuple[str, ...] = (
    "sunset", "sunrise", "ocean", "beach", "forest", "fire", "rainbow",
    "stars", "night", "aurora", "northern", "lights",
)  # fmt: skip


def _ordered_unique(*groups: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(word for group in groups for word in group))


THEME_KEYWORDS: tuple[str, ...] = _ordered_unique(
    HOLIDAY_THEMES, OCCASION_THEMES, TEAM_THEMES, SEASON_THEMES, MOOD_THEMES, NATURE_THEMES
)

CONTEXT_RULES: tuple[Rule[str], ...] = (
    _rule("party|fun|bash|wild|crazy|energetic|dance", "party"),
    _rule("elegant|formal|classy|sophisticated|upscale|fancy|gala", "elegant"),
    _rule("romantic|intimate|cozy|date", "romantic"),
    _rule("celebration|celebrat|festive|special", "celebration"),
    _rule("simple|static|solid|still|calm", "simple"),
)

MOOD_RULES: tuple[Rule[EffectMoodCategory], ...] = (
    _rule(r"spooky|scary|halloween|haunted|creepy|eerie|mysterious", EffectMoodCategory.MYSTERIOUS),
    _rule(r"romantic|romance|love|valentines?|date|intimate", EffectMoodCategory.ROMANTIC),
    _rule(r"elegant|classy|sophisticated|formal|upscale|gala|wedding", EffectMoodCategory.ELEGANT),
    _rule(r"festive|holiday|christmas|xmas|celebrat\w*|party|birthday|new ?years?", EffectMoodCategory.FESTIVE),
    _rule(r"playful|fun|silly|kids?|game ?day|whimsical", EffectMoodCategory.PLAYFUL),
    _rule(r"magical|magic|enchant\w*|fairy|dreamy", EffectMoodCategory.MAGICAL),
    _rule(r"cozy|warm|snug|fireplace|cabin", EffectMoodCategory.COZY),
    _rule(r"calm|relax\w*|peaceful|chill|soothing|serene|quiet|zen", EffectMoodCategory.CALM),
    _rule(r"nature|natural|ocean|beach|forest|sunset|sunrise|earthy|garden", EffectMoodCategory.NATURAL),
    _rule(r"modern|sleek|minimal\w*|contemporary", EffectMoodCategory.MODERN),
)

VIBE_RULES: tuple[Rule[EffectVibe], ...] = (
    _rule(r"spooky|scary|haunted|creepy", EffectVibe.SPOOKY),
    _rule(r"intimate|romantic", EffectVibe.INTIMATE),
    _rule(r"luxur\w*|glamorous|glam|upscale|opulent", EffectVibe.LUXURIOUS),
    _rule(r"majestic|grand|regal|royal", EffectVibe.MAJESTIC),
    _rule(r"whimsical|silly|quirky", EffectVibe.WHIMSICAL),
    _rule(r"dreamy|dream\w*|ethereal", EffectVibe.DREAMY),
    _rule(r"tranquil|zen|meditat\w*", EffectVibe.TRANQUIL),
    _rule(r"serene|peaceful|calm", EffectVibe.SERENE),
    _rule(r"joyful|happy|cheerful|jolly", EffectVibe.JOYFUL),
    _rule(r"exciting|excited|wild|crazy|hype|game ?day", EffectVibe.EXCITING),
    _rule(r"bold|dramatic|striking", EffectVibe.BOLD),
    _rule(r"vibrant|bright|vivid", EffectVibe.VIBRANT),
    _rule(r"subtle|understated|muted", EffectVibe.SUBTLE),
    _rule(r"gentle|soft|slow", EffectVibe.GENTLE),
    _rule(r"dynamic|energetic|lively", EffectVibe.DYNAMIC),
    _rule(r"magical|sparkl\w*|enchant\w*", EffectVibe.MAGICAL),
)

ENERGY_RULES: tuple[Rule[EnergyLevel], ...] = (
    _rule(r"insane|crazy|wild|rave|strobe|maximum|max", EnergyLevel.VERY_HIGH),
    _rule(r"sleep\w*|bedtime|night ?light|very calm", EnergyLevel.VERY_LOW),
    _rule(r"energetic|party|exciting|lively|fast|upbeat|dance|hype|game ?day", EnergyLevel.HIGH),
    _rule(r"calm|relax\w*|gentle|slow|soft|peaceful|cozy|romantic|chill", EnergyLevel.LOW),
    _rule(r"moderate|medium|balanced", EnergyLevel.MEDIUM),
)

MOTION_RULES: tuple[Rule[MotionType], ...] = (
    _rule(r"chase|chasing|running|race|racing", MotionType.CHASING),
    _rule(r"fireworks?|explod\w*|explosion|burst\w*", MotionType.EXPLOSIVE),
    _rule(r"twinkl\w*|sparkl\w*|glitter\w*|shimmer\w*", MotionType.TWINKLING),
    _rule(r"flicker\w*|candles?|flames?|fire", MotionType.FLICKERING),
    _rule(r"scan\w*|sweep\w*|lighthouse", MotionType.SCANNING),
    _rule(r"drip\w*|rain|icicles?", MotionType.DRIPPING),
    _rule(r"bounc\w*|juggl\w*", MotionType.BOUNCING),
    _rule(r"morph\w*|blend\w*|shifting", MotionType.MORPHING),
    _rule(r"pulse|pulsing|breath\w*|fade|fading", MotionType.PULSING),
    _rule(r"flow\w*|waves?|ripple\w*|rolling", MotionType.FLOWING),
    _rule(r"static|solid|steady|still", MotionType.STATIC),
)

NAMED_COLORS: MappingProxyType[str, RGB] = MappingProxyType(
    {
        "red": (255, 0, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "yellow": (255, 255, 0),
        "orange": (255, 165, 0),
        "purple": (139, 0, 255),
        "violet": (127, 0, 255),
        "pink": (255, 105, 180),
        "magenta": (255, 0, 255),
        "cyan": (0, 255, 255),
        "teal": (0, 128, 128),
        "indigo": (75, 0, 130),
        "lime": (50, 205, 50),
        "coral": (255, 127, 80),
        "salmon": (250, 128, 114),
        "gold": (255, 215, 0),
        "silver": (192, 192, 192),
        "aqua": (0, 255, 255),
        "navy": (0, 0, 128),
        "maroon": (128, 0, 0),
        "olive": (128, 128, 0),
        "crimson": (220, 20, 60),
        "white": (255, 255, 255),
        "warm white": (255, 244, 224),
        "cool white": (200, 220, 255),
        "daylight": (255, 251, 240),
        "bright white": (255, 255, 255),
        "soft white": (255, 228, 196),
        "natural white": (245, 240, 232),
        "candlelight": (255, 210, 142),
        "ice blue": (153, 204, 255),
        "sky blue": (135, 206, 235),
        "forest green": (34, 139, 34),
        "emerald": (80, 200, 120),
        "ruby": (224, 17, 95),
        "amber": (255, 191, 0),
        "lavender": (230, 230, 250),
        "mint": (152, 255, 152),
        "peach": (255, 218, 185),
    }
)

# Longest names first so "warm white" claims its span before "white"
NAMED_COLOR_PATTERNS: tuple[tuple[re.Pattern[str], RGB], ...] = tuple(
    (re.compile(rf"\b{re.escape(name)}\b"), rgb)
    for name, rgb in sorted(NAMED_COLORS.items(), key=lambda item: (-len(item[0]), item[0]))
)

_RED = NAMED_COLORS["red"]
_GREEN = NAMED_COLORS["green"]
_WHITE = NAMED_COLORS["white"]
_BLUE = NAMED_COLORS["blue"]
_ORANGE = NAMED_COLORS["orange"]
_PURPLE = NAMED_COLORS["purple"]
_GOLD = NAMED_COLORS["gold"]
_PINK = NAMED_COLORS["pink"]

# Occasion keywords -> multi-color fallback when no color is named
THEMED_COLOR_RULES: tuple[Rule[tuple[RGB, ...]], ...] = (
    _rule(r"christmas|xmas|holiday", (_RED, _GREEN, _WHITE)),
    _rule(r"halloween|spooky", (_ORANGE, _PURPLE)),
    _rule(r"4th of july|fourth of july|july|patriotic|independence|memorial ?day|usa", (_RED, _WHITE, _BLUE)),
    _rule(r"valentines?|valentine's", (_RED, _PINK, _WHITE)),
    _rule(r"st\.? ?patrick'?s?|stpatricks|irish", (_GREEN, _GOLD, _WHITE)),
    _rule(r"easter|spring", (_PINK, NAMED_COLORS["lavender"], NAMED_COLORS["mint"])),
    _rule(r"thanksgiving|autumn|fall", (_ORANGE, NAMED_COLORS["maroon"], _GOLD)),
    _rule(r"new ?years?|nye", (_GOLD, NAMED_COLORS["silver"], _WHITE)),
    _rule(r"hanukkah|chanukah", (_BLUE, _WHITE)),
    _rule(r"wedding|anniversary|engagement", (_WHITE, NAMED_COLORS["warm white"], _GOLD)),
    _rule(r"ocean|beach", (_BLUE, NAMED_COLORS["teal"], NAMED_COLORS["cyan"])),
    _rule(r"sunset|sunrise", (_ORANGE, _PINK, _PURPLE)),
    _rule(r"winter|snow|icy", (_WHITE, NAMED_COLORS["ice blue"], _BLUE)),
)

COLOR_OVERRIDE_PATTERN = re.compile(r"\b(rainbow|multi-?colou?red|multi-?colou?r|pride|colou?rful|all colou?rs)\b")

# Theme keyword -> effect occasion vocabulary
THEME_OCCASIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "christmas": "christmas",
        "xmas": "christmas",
        "halloween": "halloween",
        "thanksgiving": "thanksgiving",
        "valentines": "romantic",
        "newyears": "new-years",
        "fourthofjuly": "4th-of-july",
        "4thofjuly": "4th-of-july",
        "memorialday": "patriotic",
        "laborday": "patriotic",
        "wedding": "wedding",
        "engagement": "wedding",
        "anniversary": "romantic",
        "birthday": "celebration",
        "graduation": "celebration",
        "retirement": "celebration",
        "winter": "winter",
        "fall": "autumn",
        "autumn": "autumn",
        "romantic": "romantic",
        "energetic": "party",
        "relaxing": "relaxation",
        "peaceful": "relaxation",
        "cozy": "cozy",
        "ocean": "ocean",
        "beach": "ocean",
        "night": "night",
        "stars": "starry",
        "rainbow": "rainbow-request",
        **{team: "sports-team" for team in TEAM_THEMES if team != "stars"},
    }
)

CONTEXT_OCCASIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "party": "party",
        "romantic": "romantic",
        "celebration": "celebration",
        "simple": "everyday",
    }
)
