"""Builtin effect metadata.

Registers matching metadata (moods, vibes, motion, energy and parameter
ranges) for the device effects plus the externally executed custom
effects.
"""

from glowkit.core.effects.catalog import EFFECT_REGISTRY
from glowkit.core.effects.enums import EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.effects.models import EffectMetadata

_EFFECTS: tuple[EffectMetadata, ...] = (
    EffectMetadata(
        id=0,
        name="Solid",
        description="Static solid color with no animation",
        respects_colors=True,
        moods={EffectMoodCategory.CALM, EffectMoodCategory.ELEGANT, EffectMoodCategory.COZY},
        vibes={EffectVibe.SERENE, EffectVibe.SUBTLE, EffectVibe.TRANQUIL},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=0,
        default_intensity=128,
        best_for_occasions={"relaxation", "everyday", "ambient", "work"},
        avoid_for_occasions={"party", "celebration", "sports"},
    ),
    EffectMetadata(
        id=1,
        name="Blink",
        description="Simple on/off blinking",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=20,
        max_speed=200,
        default_speed=100,
        default_intensity=128,
        best_for_occasions={"alerts", "attention"},
        avoid_for_occasions={"relaxation", "romantic", "sleep"},
    ),
    EffectMetadata(
        id=2,
        name="Breathe",
        description="Smooth fade in and out like breathing",
        respects_colors=True,
        moods={EffectMoodCategory.CALM, EffectMoodCategory.ROMANTIC, EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.COZY},
        vibes={EffectVibe.SERENE, EffectVibe.GENTLE, EffectVibe.DREAMY, EffectVibe.INTIMATE},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.LOW,
        min_speed=20,
        max_speed=150,
        default_speed=60,
        default_intensity=128,
        best_for_occasions={"romantic", "relaxation", "meditation", "evening", "date-night"},
        avoid_for_occasions={"party", "sports", "high-energy"},
    ),
    EffectMetadata(
        id=3,
        name="Wipe",
        description="Color wipes across the strip",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=30,
        max_speed=200,
        default_speed=100,
        default_intensity=128,
        best_for_occasions={"transition", "reveal"},
    ),
    EffectMetadata(
        id=4,
        name="Wipe Random",
        description="Color wipes with random colors",
        respects_colors=False,
        inherent_colors=("random colors",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=5,
        name="Random Colors",
        description="Random color changes",
        respects_colors=False,
        inherent_colors=("random colors",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=6,
        name="Sweep",
        description="Sweeping motion across the strip",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.DYNAMIC, EffectVibe.SUBTLE},
        motion_type=MotionType.SCANNING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=30,
        max_speed=180,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=7,
        name="Dynamic",
        description="Dynamic color changes",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.VIBRANT},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=8,
        name="Colorloop",
        description="Smooth color cycling through hues",
        respects_colors=False,
        inherent_colors=("full spectrum", "rainbow cycling"),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.DREAMY, EffectVibe.WHIMSICAL},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
        avoid_for_occasions={"themed", "holiday", "sports-team"},
    ),
    EffectMetadata(
        id=9,
        name="Rainbow",
        description="Classic rainbow gradient - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow", "full spectrum", "ROYGBIV"),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.VIBRANT, EffectVibe.JOYFUL, EffectVibe.WHIMSICAL},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=128,
        best_for_occasions={"pride", "rainbow-request", "multicolor"},
        avoid_for_occasions={"christmas", "halloween", "4th-of-july", "sports-team", "wedding", "romantic"},
    ),
    EffectMetadata(
        id=10,
        name="Rainbow Cycle",
        description="Moving rainbow - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow", "full spectrum cycling"),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.VIBRANT, EffectVibe.JOYFUL, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=128,
        best_for_occasions={"pride", "rainbow-request", "multicolor"},
        avoid_for_occasions={"christmas", "halloween", "4th-of-july", "sports-team", "wedding", "romantic"},
    ),
    EffectMetadata(
        id=11,
        name="Scan",
        description="Single pixel scanning back and forth",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.SCANNING,
        energy_level=EnergyLevel.LOW,
        min_speed=30,
        max_speed=180,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=12,
        name="Fade",
        description="Smooth color transitions",
        respects_colors=True,
        moods={EffectMoodCategory.CALM, EffectMoodCategory.ELEGANT, EffectMoodCategory.ROMANTIC},
        vibes={EffectVibe.SERENE, EffectVibe.GENTLE, EffectVibe.DREAMY},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.LOW,
        min_speed=20,
        max_speed=120,
        default_speed=60,
        default_intensity=128,
        best_for_occasions={"relaxation", "ambient", "evening"},
    ),
    EffectMetadata(
        id=13,
        name="Theater",
        description="Theater-style chase lights",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.JOYFUL, EffectVibe.VIBRANT, EffectVibe.MAJESTIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=40,
        max_speed=180,
        default_speed=100,
        default_intensity=180,
        best_for_occasions={"christmas", "holiday", "celebration", "party"},
    ),
    EffectMetadata(
        id=14,
        name="Theater Rainbow",
        description="Theater chase with rainbow - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow theater chase",),
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.JOYFUL, EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
        best_for_occasions={"pride", "rainbow-request"},
        avoid_for_occasions={"themed", "holiday", "sports-team"},
    ),
    EffectMetadata(
        id=15,
        name="Running",
        description="Smooth running lights",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL, EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC, EffectVibe.VIBRANT, EffectVibe.EXCITING},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        min_speed=60,
        max_speed=220,
        default_speed=150,
        default_intensity=200,
        best_for_occasions={"party", "sports", "celebration", "game-day"},
    ),
    EffectMetadata(
        id=16,
        name="Saw",
        description="Sawtooth wave pattern",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=17,
        name="Twinkle",
        description="Random twinkling pixels",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE, EffectMoodCategory.ELEGANT, EffectMoodCategory.ROMANTIC},
        vibes={EffectVibe.MAGICAL, EffectVibe.DREAMY, EffectVibe.WHIMSICAL, EffectVibe.SUBTLE},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        min_speed=40,
        max_speed=150,
        default_speed=80,
        min_intensity=100,
        max_intensity=220,
        default_intensity=180,
        best_for_occasions={"christmas", "holiday", "magical", "wedding", "romantic", "evening"},
    ),
    EffectMetadata(
        id=18,
        name="Dissolve",
        description="Pixels dissolve randomly",
        respects_colors=True,
        moods={EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.DREAMY, EffectVibe.SUBTLE},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=19,
        name="Dissolve Random",
        description="Dissolve with random colors",
        respects_colors=False,
        inherent_colors=("random colors",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=20,
        name="Sparkle",
        description="Bright sparkles on background",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.MAGICAL, EffectVibe.JOYFUL, EffectVibe.VIBRANT},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=50,
        max_speed=180,
        default_speed=100,
        default_intensity=200,
        best_for_occasions={"celebration", "holiday", "party", "new-years"},
    ),
    EffectMetadata(
        id=21,
        name="Sparkle Dark",
        description="Sparkles on dark background",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.MAGICAL, EffectVibe.SUBTLE, EffectVibe.DREAMY},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=100,
        default_intensity=200,
        best_for_occasions={"night", "starry", "magical"},
    ),
    EffectMetadata(
        id=22,
        name="Sparkle+",
        description="Enhanced sparkle effect",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAGICAL, EffectVibe.VIBRANT},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=200,
    ),
    EffectMetadata(
        id=23,
        name="Strobe",
        description="Fast strobe effect",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.EXCITING, EffectVibe.BOLD, EffectVibe.DYNAMIC},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.VERY_HIGH,
        min_speed=100,
        max_speed=255,
        default_speed=200,
        default_intensity=255,
        best_for_occasions={"rave", "dance", "high-energy"},
        avoid_for_occasions={"relaxation", "romantic", "everyday", "work"},
    ),
    EffectMetadata(
        id=24,
        name="Strobe Rainbow",
        description="Rainbow strobe - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow strobe",),
        moods={EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.EXCITING, EffectVibe.DYNAMIC},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.VERY_HIGH,
        default_speed=200,
        default_intensity=255,
        avoid_for_occasions={"themed", "relaxation"},
    ),
    EffectMetadata(
        id=25,
        name="Strobe Mega",
        description="Intense strobe effect",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.EXCITING, EffectVibe.BOLD},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.VERY_HIGH,
        default_speed=220,
        default_intensity=255,
        avoid_for_occasions={"relaxation", "romantic", "work"},
    ),
    EffectMetadata(
        id=26,
        name="Blink Rainbow",
        description="Blinking rainbow - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow blink",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=27,
        name="Android",
        description="Android-style loading animation",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=28,
        name="Chase",
        description="Classic chase effect",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL, EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC, EffectVibe.EXCITING, EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        min_speed=80,
        max_speed=220,
        default_speed=150,
        default_intensity=200,
        best_for_occasions={"sports", "party", "game-day", "celebration"},
    ),
    EffectMetadata(
        id=29,
        name="Chase Random",
        description="Chase with random colors",
        respects_colors=False,
        inherent_colors=("random color chase",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
    ),
    EffectMetadata(
        id=30,
        name="Chase Rainbow",
        description="Chase with rainbow - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow chase",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.VIBRANT, EffectVibe.DYNAMIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
        best_for_occasions={"pride", "rainbow-request"},
        avoid_for_occasions={"themed", "holiday", "sports-team"},
    ),
    EffectMetadata(
        id=31,
        name="Chase Flash",
        description="Chase with flash accent",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.EXCITING, EffectVibe.DYNAMIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
    ),
    EffectMetadata(
        id=32,
        name="Chase Flash Random",
        description="Chase flash with random colors",
        respects_colors=False,
        inherent_colors=("random flash chase",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
    ),
    EffectMetadata(
        id=33,
        name="Chase Rainbow White",
        description="Rainbow chase with white - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow with white",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
    ),
    EffectMetadata(
        id=34,
        name="Colorful",
        description="Colorful shifting pattern - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("shifting multicolor",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.VIBRANT, EffectVibe.JOYFUL},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=35,
        name="Traffic Light",
        description="Red, yellow, green sequence - USES SPECIFIC COLORS",
        respects_colors=False,
        inherent_colors=("red", "yellow", "green"),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.WHIMSICAL},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
    ),
    EffectMetadata(
        id=36,
        name="Sweep Random",
        description="Sweep with random colors",
        respects_colors=False,
        inherent_colors=("random sweep",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.SCANNING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=37,
        name="Candle",
        description="Flickering candle flame effect",
        respects_colors=True,
        moods={EffectMoodCategory.COZY, EffectMoodCategory.ROMANTIC, EffectMoodCategory.CALM},
        vibes={EffectVibe.INTIMATE, EffectVibe.TRANQUIL, EffectVibe.GENTLE},
        motion_type=MotionType.FLICKERING,
        energy_level=EnergyLevel.LOW,
        min_speed=30,
        max_speed=100,
        default_speed=60,
        default_intensity=180,
        best_for_occasions={"romantic", "cozy", "dinner", "autumn", "halloween", "thanksgiving"},
    ),
    EffectMetadata(
        id=38,
        name="Fire",
        description="Realistic fire simulation",
        respects_colors=True,
        moods={EffectMoodCategory.COZY, EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.NATURAL},
        vibes={EffectVibe.INTIMATE, EffectVibe.BOLD, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLICKERING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=40,
        max_speed=150,
        default_speed=80,
        default_intensity=200,
        best_for_occasions={"halloween", "autumn", "cozy", "cabin"},
    ),
    EffectMetadata(
        id=39,
        name="Fireworks",
        description="Exploding fireworks simulation",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MAGICAL, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.EXCITING, EffectVibe.JOYFUL, EffectVibe.MAJESTIC},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.HIGH,
        min_speed=80,
        max_speed=200,
        default_speed=150,
        default_intensity=220,
        best_for_occasions={"4th-of-july", "new-years", "celebration", "party", "independence-day"},
    ),
    EffectMetadata(
        id=40,
        name="Scanner",
        description="Scanning beam effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.DYNAMIC, EffectVibe.SUBTLE},
        motion_type=MotionType.SCANNING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=128,
    ),
    EffectMetadata(
        id=41,
        name="Running Dual",
        description="Dual running lights",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC, EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        min_speed=80,
        max_speed=220,
        default_speed=150,
        default_intensity=200,
        best_for_occasions={"sports", "party", "game-day"},
    ),
    EffectMetadata(
        id=42,
        name="Halloween",
        description="Spooky Halloween effect",
        respects_colors=True,
        moods={EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.SPOOKY, EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=180,
        best_for_occasions={"halloween", "spooky", "october"},
    ),
    EffectMetadata(
        id=43,
        name="Tricolor Chase",
        description="Three color chase pattern",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=120,
        default_intensity=180,
        best_for_occasions={"holiday", "celebration", "patriotic"},
    ),
    EffectMetadata(
        id=44,
        name="Tricolor Wipe",
        description="Three color wipe pattern",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=45,
        name="Tricolor Fade",
        description="Three color fade pattern",
        respects_colors=True,
        moods={EffectMoodCategory.ELEGANT, EffectMoodCategory.CALM},
        vibes={EffectVibe.GENTLE, EffectVibe.SUBTLE},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
    ),
    EffectMetadata(
        id=46,
        name="Lightning",
        description="Lightning flash simulation",
        respects_colors=True,
        moods={EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.BOLD, EffectVibe.EXCITING, EffectVibe.SPOOKY},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.DYNAMIC,
        default_speed=100,
        default_intensity=255,
        best_for_occasions={"halloween", "storm", "dramatic"},
    ),
    EffectMetadata(
        id=47,
        name="ICU",
        description="Scanning ICU effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.SCANNING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=48,
        name="Multi Comet",
        description="Multiple comets moving together",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAJESTIC, EffectVibe.DREAMY, EffectVibe.DYNAMIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=120,
        default_intensity=180,
        best_for_occasions={"night", "magical", "starry"},
    ),
    EffectMetadata(
        id=49,
        name="Fairy",
        description="Delicate fairy lights effect",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.ROMANTIC, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.MAGICAL, EffectVibe.DREAMY, EffectVibe.WHIMSICAL, EffectVibe.GENTLE},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        min_speed=30,
        max_speed=100,
        default_speed=60,
        default_intensity=150,
        best_for_occasions={"wedding", "romantic", "garden", "magical", "evening"},
    ),
    EffectMetadata(
        id=50,
        name="Fairy Twinkle",
        description="Twinkling fairy effect",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.ROMANTIC},
        vibes={EffectVibe.MAGICAL, EffectVibe.DREAMY, EffectVibe.SUBTLE},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
    ),
    EffectMetadata(
        id=51,
        name="Running Tri",
        description="Running triple color effect",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.VIBRANT},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=200,
    ),
    EffectMetadata(
        id=52,
        name="Fireworks Starburst",
        description="Starburst fireworks pattern",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.EXCITING, EffectVibe.MAJESTIC},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.HIGH,
        min_speed=100,
        max_speed=220,
        default_speed=150,
        default_intensity=220,
        best_for_occasions={"4th-of-july", "new-years", "celebration"},
    ),
    EffectMetadata(
        id=53,
        name="Fireworks 1D",
        description="One-dimensional fireworks",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.EXCITING, EffectVibe.JOYFUL},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=220,
    ),
    EffectMetadata(
        id=54,
        name="Bouncing Balls",
        description="Bouncing ball simulation",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.WHIMSICAL, EffectVibe.JOYFUL, EffectVibe.DYNAMIC},
        motion_type=MotionType.BOUNCING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
        best_for_occasions={"kids", "playful", "fun"},
    ),
    EffectMetadata(
        id=55,
        name="Sinelon",
        description="Sine wave pattern",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=56,
        name="Sinelon Dual",
        description="Dual sine wave",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.SUBTLE, EffectVibe.GENTLE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=57,
        name="Sinelon Rainbow",
        description="Rainbow sine wave - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow sine",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=58,
        name="Popcorn",
        description="Popping effect like popcorn",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.WHIMSICAL, EffectVibe.JOYFUL},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=59,
        name="Drip",
        description="Dripping water effect",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.CALM},
        vibes={EffectVibe.TRANQUIL, EffectVibe.GENTLE},
        motion_type=MotionType.DRIPPING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
        best_for_occasions={"relaxation", "water", "rain"},
    ),
    EffectMetadata(
        id=60,
        name="Plasma",
        description="Plasma effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=61,
        name="Percent",
        description="Progress bar style effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=0,
        default_intensity=128,
    ),
    EffectMetadata(
        id=62,
        name="Ripple Rainbow",
        description="Rainbow ripples - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("rainbow ripple",),
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=63,
        name="Pride 2015",
        description="Pride rainbow effect - OVERRIDES USER COLORS",
        respects_colors=False,
        inherent_colors=("pride rainbow", "LGBTQ colors"),
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.VIBRANT, EffectVibe.JOYFUL},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=128,
        best_for_occasions={"pride", "rainbow-request"},
        avoid_for_occasions={"themed", "holiday", "sports-team"},
    ),
    EffectMetadata(
        id=64,
        name="Juggle",
        description="Juggling lights effect",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.BOUNCING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=65,
        name="Palette",
        description="Uses palette colors",
        respects_colors=False,
        inherent_colors=("palette-based",),
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=66,
        name="Fire 2012",
        description="Classic fire simulation",
        respects_colors=True,
        moods={EffectMoodCategory.COZY, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.INTIMATE, EffectVibe.BOLD},
        motion_type=MotionType.FLICKERING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=200,
    ),
    EffectMetadata(
        id=67,
        name="Colorwaves",
        description="Flowing color waves",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM, EffectMoodCategory.MODERN},
        vibes={EffectVibe.TRANQUIL, EffectVibe.DYNAMIC, EffectVibe.GENTLE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
        best_for_occasions={"ocean", "relaxation", "ambient"},
    ),
    EffectMetadata(
        id=68,
        name="BPM",
        description="Beat per minute pulsing",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC, EffectVibe.EXCITING},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.HIGH,
        default_speed=120,
        default_intensity=200,
        best_for_occasions={"party", "music", "dance"},
    ),
    EffectMetadata(
        id=69,
        name="Fill Noise",
        description="Noise-based filling",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=70,
        name="Noise 1",
        description="Perlin noise pattern",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=71,
        name="Noise 2",
        description="Variant noise pattern",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=72,
        name="Noise 3",
        description="Another noise variant",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=73,
        name="Noise 4",
        description="Fourth noise variant",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=74,
        name="Colortwinkles",
        description="Twinkling with color changes",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAGICAL, EffectVibe.JOYFUL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=180,
    ),
    EffectMetadata(
        id=75,
        name="Lake",
        description="Peaceful lake reflections",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM},
        vibes={EffectVibe.TRANQUIL, EffectVibe.SERENE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=40,
        default_intensity=128,
        best_for_occasions={"relaxation", "nature", "water"},
    ),
    EffectMetadata(
        id=76,
        name="Meteor",
        description="Falling meteor trail",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAJESTIC, EffectVibe.DREAMY, EffectVibe.DYNAMIC},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=60,
        max_speed=180,
        default_speed=120,
        default_intensity=200,
        best_for_occasions={"night", "magical", "shooting-star", "space"},
    ),
    EffectMetadata(
        id=77,
        name="Meteor Smooth",
        description="Smooth meteor trail",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.MAJESTIC, EffectVibe.GENTLE},
        motion_type=MotionType.CHASING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=78,
        name="Railway",
        description="Railway crossing lights",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=200,
    ),
    EffectMetadata(
        id=79,
        name="Ripple",
        description="Rippling water effect",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.TRANQUIL, EffectVibe.GENTLE, EffectVibe.DREAMY},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=150,
        best_for_occasions={"relaxation", "water", "zen"},
    ),
    EffectMetadata(
        id=80,
        name="Twinklefox",
        description="Fox-inspired twinkle",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.MAGICAL, EffectVibe.SUBTLE, EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        min_speed=30,
        max_speed=120,
        default_speed=70,
        default_intensity=180,
        best_for_occasions={"christmas", "holiday", "magical", "winter"},
    ),
    EffectMetadata(
        id=81,
        name="Twinklecat",
        description="Cat-inspired twinkle",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.MAGICAL, EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=70,
        default_intensity=180,
    ),
    EffectMetadata(
        id=82,
        name="Halloween Eyes",
        description="Spooky blinking eyes",
        respects_colors=True,
        moods={EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.SPOOKY, EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
        best_for_occasions={"halloween", "spooky"},
    ),
    EffectMetadata(
        id=83,
        name="Solid Pattern",
        description="Solid pattern segments",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.SUBTLE, EffectVibe.BOLD},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=0,
        default_intensity=128,
    ),
    EffectMetadata(
        id=84,
        name="Solid Pattern Tri",
        description="Three-color solid pattern",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.MODERN},
        vibes={EffectVibe.BOLD, EffectVibe.VIBRANT},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=0,
        default_intensity=128,
        best_for_occasions={"patriotic", "holiday", "team-colors"},
    ),
    EffectMetadata(
        id=85,
        name="Spots",
        description="Spotlights effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.SUBTLE, EffectVibe.LUXURIOUS},
        motion_type=MotionType.STATIC,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=150,
    ),
    EffectMetadata(
        id=86,
        name="Spots Fade",
        description="Fading spotlights",
        respects_colors=True,
        moods={EffectMoodCategory.ELEGANT, EffectMoodCategory.CALM},
        vibes={EffectVibe.SUBTLE, EffectVibe.GENTLE},
        motion_type=MotionType.PULSING,
        energy_level=EnergyLevel.LOW,
        default_speed=50,
        default_intensity=150,
    ),
    EffectMetadata(
        id=87,
        name="Glitter",
        description="Sparkling glitter effect",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE, EffectMoodCategory.ELEGANT},
        vibes={EffectVibe.MAGICAL, EffectVibe.LUXURIOUS, EffectVibe.JOYFUL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        min_speed=50,
        max_speed=150,
        default_speed=100,
        default_intensity=200,
        best_for_occasions={"celebration", "new-years", "party", "glamour"},
    ),
    EffectMetadata(
        id=88,
        name="Candle Multi",
        description="Multiple candle flames",
        respects_colors=True,
        moods={EffectMoodCategory.COZY, EffectMoodCategory.ROMANTIC},
        vibes={EffectVibe.INTIMATE, EffectVibe.TRANQUIL},
        motion_type=MotionType.FLICKERING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=180,
    ),
    EffectMetadata(
        id=89,
        name="Solid Glitter",
        description="Solid color with glitter overlay",
        respects_colors=True,
        moods={EffectMoodCategory.ELEGANT, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.LUXURIOUS, EffectVibe.MAGICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=150,
    ),
    EffectMetadata(
        id=90,
        name="Sunrise",
        description="Simulated sunrise",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM, EffectMoodCategory.COZY},
        vibes={EffectVibe.TRANQUIL, EffectVibe.GENTLE, EffectVibe.SERENE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.VERY_LOW,
        min_speed=10,
        max_speed=60,
        default_speed=30,
        default_intensity=128,
        best_for_occasions={"morning", "wake-up", "alarm"},
    ),
    EffectMetadata(
        id=91,
        name="Phased",
        description="Phased color shifting",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.SUBTLE, EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=92,
        name="Twinkleup",
        description="Upward twinkling",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAGICAL, EffectVibe.JOYFUL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=180,
    ),
    EffectMetadata(
        id=93,
        name="Noise Pal",
        description="Noise with palette",
        respects_colors=False,
        inherent_colors=("palette-based noise",),
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=94,
        name="Sine",
        description="Sine wave pattern",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.CALM},
        vibes={EffectVibe.GENTLE, EffectVibe.SUBTLE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
    ),
    EffectMetadata(
        id=95,
        name="Flow",
        description="Flowing colors effect",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM, EffectMoodCategory.MODERN},
        vibes={EffectVibe.TRANQUIL, EffectVibe.GENTLE, EffectVibe.DREAMY},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        min_speed=40,
        max_speed=120,
        default_speed=80,
        default_intensity=150,
        best_for_occasions={"ocean", "relaxation", "ambient", "water"},
    ),
    EffectMetadata(
        id=96,
        name="Chunchun",
        description="Chunchun pattern",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=97,
        name="Dancing Shadows",
        description="Shadows moving about",
        respects_colors=True,
        moods={EffectMoodCategory.MYSTERIOUS, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.SPOOKY, EffectVibe.DREAMY},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
        best_for_occasions={"halloween", "mysterious"},
    ),
    EffectMetadata(
        id=98,
        name="Washing Machine",
        description="Washing motion pattern",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.WHIMSICAL, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=99,
        name="Blends",
        description="Blending colors",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.CALM},
        vibes={EffectVibe.GENTLE, EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
    ),
    EffectMetadata(
        id=100,
        name="TV Simulator",
        description="Simulates TV ambient light",
        respects_colors=False,
        inherent_colors=("random TV colors",),
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.DYNAMIC,
        default_speed=80,
        default_intensity=150,
    ),
    EffectMetadata(
        id=101,
        name="Dynamic Smooth",
        description="Smooth dynamic changes",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.CALM},
        vibes={EffectVibe.GENTLE, EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
    ),
    EffectMetadata(
        id=102,
        name="Pixels",
        description="2D pixel effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.TWINKLING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=103,
        name="Pixelwave",
        description="2D pixel wave",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.DREAMY},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=104,
        name="Juggles",
        description="2D juggling effect",
        respects_colors=True,
        moods={EffectMoodCategory.PLAYFUL, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.DYNAMIC, EffectVibe.WHIMSICAL},
        motion_type=MotionType.BOUNCING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=105,
        name="Matripix",
        description="Matrix pixel effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=106,
        name="Gravimeter",
        description="Gravity meter visualization",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC},
        motion_type=MotionType.BOUNCING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=107,
        name="Plasmoid",
        description="Plasma ball effect",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN, EffectMoodCategory.MAGICAL},
        vibes={EffectVibe.DYNAMIC, EffectVibe.BOLD},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=108,
        name="Puddles",
        description="Puddle ripples",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM},
        vibes={EffectVibe.TRANQUIL, EffectVibe.GENTLE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.LOW,
        default_speed=60,
        default_intensity=128,
    ),
    EffectMetadata(
        id=109,
        name="Midnoise",
        description="Mid-frequency noise",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.SUBTLE},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.LOW,
        default_speed=80,
        default_intensity=128,
    ),
    EffectMetadata(
        id=110,
        name="Noisemeter",
        description="Noise level visualization",
        respects_colors=True,
        moods={EffectMoodCategory.MODERN},
        vibes={EffectVibe.DYNAMIC},
        motion_type=MotionType.MORPHING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=150,
    ),
    EffectMetadata(
        id=1001,
        name="Rising Tide",
        description="Custom: colors rise up from bottom",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.NATURAL},
        vibes={EffectVibe.MAJESTIC, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=1002,
        name="Falling Tide",
        description="Custom: colors fall from top",
        respects_colors=True,
        moods={EffectMoodCategory.MAGICAL, EffectMoodCategory.MYSTERIOUS},
        vibes={EffectVibe.MAJESTIC, EffectVibe.DYNAMIC},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=100,
        default_intensity=180,
    ),
    EffectMetadata(
        id=1003,
        name="Pulse Burst",
        description="Custom: explosive color pulses",
        respects_colors=True,
        moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
        vibes={EffectVibe.EXCITING, EffectVibe.BOLD},
        motion_type=MotionType.EXPLOSIVE,
        energy_level=EnergyLevel.HIGH,
        default_speed=150,
        default_intensity=220,
    ),
    EffectMetadata(
        id=1005,
        name="Grand Reveal",
        description="Custom: dramatic reveal effect",
        respects_colors=True,
        moods={EffectMoodCategory.ELEGANT, EffectMoodCategory.FESTIVE},
        vibes={EffectVibe.MAJESTIC, EffectVibe.LUXURIOUS},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.MEDIUM,
        default_speed=80,
        default_intensity=200,
        best_for_occasions={"reveal", "special-moment", "wedding"},
    ),
    EffectMetadata(
        id=1007,
        name="Ocean Swell",
        description="Custom: gentle ocean wave motion",
        respects_colors=True,
        moods={EffectMoodCategory.NATURAL, EffectMoodCategory.CALM},
        vibes={EffectVibe.TRANQUIL, EffectVibe.SERENE},
        motion_type=MotionType.FLOWING,
        energy_level=EnergyLevel.VERY_LOW,
        default_speed=50,
        default_intensity=128,
        best_for_occasions={"relaxation", "ocean", "sleep"},
    ),
)


def _register_effects() -> None:
    """Register all builtin effect metadata."""
    for effect in _EFFECTS:
        EFFECT_REGISTRY.register(effect)


# Auto-register on import
_register_effects()
