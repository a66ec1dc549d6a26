"""Effect enums - motion, energy, mood and vibe vocabulary.

Enums used to tag effect metadata and to express query intent.
"""

from enum import Enum


class MotionType(str, Enum):
    """How an effect animates.

    Attributes:
        STATIC: No movement.
        PULSING: Fades in and out.
        FLOWING: Smooth flowing motion, like water or waves.
        CHASING: Dots or segments moving in one direction.
        TWINKLING: Random sparkles or twinkles.
        EXPLOSIVE: Sudden bursts or flashes.
        SCANNING: Scanning back and forth.
        DRIPPING: Dripping or falling motion.
        FLICKERING: Flickering like flames.
        BOUNCING: Bouncing motion.
        MORPHING: Morphing or color-shifting.
    """

    STATIC = "static"
    PULSING = "pulsing"
    FLOWING = "flowing"
    CHASING = "chasing"
    TWINKLING = "twinkling"
    EXPLOSIVE = "explosive"
    SCANNING = "scanning"
    DRIPPING = "dripping"
    FLICKERING = "flickering"
    BOUNCING = "bouncing"
    MORPHING = "morphing"


class EnergyLevel(str, Enum):
    """Energy scale for mood matching.

    Declaration order is the scale order. DYNAMIC marks effects whose
    energy varies over time and sits outside the linear scale.

    Attributes:
        VERY_LOW: Meditation, sleep, relaxation.
        LOW: Evening ambiance, romantic.
        MEDIUM: Everyday lighting, casual.
        HIGH: Parties, celebrations.
        VERY_HIGH: Raves, sports events.
        DYNAMIC: Variable energy.
    """

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"
    DYNAMIC = "dynamic"

    @property
    def rank(self) -> int:
        """Position on the ordered scale."""
        return _ENERGY_ORDER.index(self)


_ENERGY_ORDER: tuple[EnergyLevel, ...] = tuple(EnergyLevel)


class EffectMoodCategory(str, Enum):
    """Coarse mood tags for semantic matching."""

    CALM = "calm"
    ROMANTIC = "romantic"
    ELEGANT = "elegant"
    FESTIVE = "festive"
    MYSTERIOUS = "mysterious"
    PLAYFUL = "playful"
    MAGICAL = "magical"
    NATURAL = "natural"
    MODERN = "modern"
    COZY = "cozy"


class EffectVibe(str, Enum):
    """Fine-grained vibe descriptors."""

    SERENE = "serene"
    DREAMY = "dreamy"
    INTIMATE = "intimate"
    LUXURIOUS = "luxurious"
    JOYFUL = "joyful"
    EXCITING = "exciting"
    SPOOKY = "spooky"
    WHIMSICAL = "whimsical"
    MAJESTIC = "majestic"
    TRANQUIL = "tranquil"
    VIBRANT = "vibrant"
    SUBTLE = "subtle"
    BOLD = "bold"
    GENTLE = "gentle"
    DYNAMIC = "dynamic"
    MAGICAL = "magical"


class ColorBehavior(str, Enum):
    """How an effect treats the segment colors.

    Attributes:
        USES_SELECTED_COLORS: Displays the selected colors as-is.
        BLENDS_SELECTED_COLORS: Animates or blends the selected colors.
        GENERATES_OWN_COLORS: Ignores the selection (rainbow, fire).
        USES_PALETTE: Renders from a device palette instead of the colors.
    """

    USES_SELECTED_COLORS = "uses_selected_colors"
    BLENDS_SELECTED_COLORS = "blends_selected_colors"
    GENERATES_OWN_COLORS = "generates_own_colors"
    USES_PALETTE = "uses_palette"

    @property
    def uses_user_colors(self) -> bool:
        return self in (ColorBehavior.USES_SELECTED_COLORS, ColorBehavior.BLENDS_SELECTED_COLORS)


class SelectorMood(str, Enum):
    """User-facing grouping of effects in the effect picker."""

    CALM = "calm"
    MAGICAL = "magical"
    PARTY = "party"
    FLOWING = "flowing"
    DRAMATIC = "dramatic"
    COLORFUL = "colorful"


class EffectMood(str, Enum):
    """Legacy five-way mood grouping used by effect filters.

    Attributes:
        CALM_ELEGANT: Gentle, relaxing effects (breathe, fade, solid).
        SUBTLE_MAGIC: Twinkling, magical effects (sparkle, fairy).
        FESTIVE_FUN: High-energy party effects (chase, running).
        DRAMATIC: Attention-grabbing effects (reveal, tide, meteor).
        SMOOTH_MOTION: Continuous flowing motion (wipe, sweep, scan).
    """

    CALM_ELEGANT = "calm_elegant"
    SUBTLE_MAGIC = "subtle_magic"
    FESTIVE_FUN = "festive_fun"
    DRAMATIC = "dramatic"
    SMOOTH_MOTION = "smooth_motion"


class FxVibe(str, Enum):
    """Filter label used to group generated pattern grids."""

    ELEGANT = "Elegant"
    MOTION = "Motion"
    ENERGY = "Energy"
