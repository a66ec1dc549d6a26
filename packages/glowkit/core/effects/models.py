"""Effect models - metadata, names table entries and custom effects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from glowkit.core.effects.enums import (
    ColorBehavior,
    EffectMoodCategory,
    EffectVibe,
    EnergyLevel,
    MotionType,
)

CUSTOM_EFFECT_MIN_ID = 1000


def is_custom_effect(effect_id: int) -> bool:
    """Custom effects are named and colored here but executed elsewhere."""
    return effect_id >= CUSTOM_EFFECT_MIN_ID


class EffectMetadata(BaseModel):
    """Matching metadata for a single device effect.

    Attributes:
        id: Device effect id (fx value).
        name: Display name.
        description: Human-readable description.
        respects_colors: False when the effect ignores the supplied colors
            and renders its own (rainbow, fire, palette-driven).
        inherent_colors: Colors the effect produces on its own, if any.
        moods: Coarse mood tags.
        vibes: Fine-grained vibe tags.
        motion_type: How the effect animates.
        energy_level: Position on the energy scale.
        min_speed: Lowest recommended speed.
        max_speed: Highest recommended speed.
        default_speed: Recommended default speed.
        min_intensity: Lowest recommended intensity.
        max_intensity: Highest recommended intensity.
        default_intensity: Recommended default intensity.
        best_for_occasions: Occasions the effect suits.
        avoid_for_occasions: Occasions the effect should not be used for.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=0)
    name: str
    description: str = ""
    respects_colors: bool = True
    inherent_colors: tuple[str, ...] = ()
    moods: frozenset[EffectMoodCategory] = frozenset()
    vibes: frozenset[EffectVibe] = frozenset()
    motion_type: MotionType = MotionType.STATIC
    energy_level: EnergyLevel = EnergyLevel.MEDIUM

    min_speed: int = Field(default=0, ge=0, le=255)
    max_speed: int = Field(default=255, ge=0, le=255)
    default_speed: int = Field(default=128, ge=0, le=255)
    min_intensity: int = Field(default=0, ge=0, le=255)
    max_intensity: int = Field(default=255, ge=0, le=255)
    default_intensity: int = Field(default=128, ge=0, le=255)

    best_for_occasions: frozenset[str] = frozenset()
    avoid_for_occasions: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def _validate_ranges(self) -> EffectMetadata:
        if not self.min_speed <= self.default_speed <= self.max_speed:
            raise ValueError(
                f"Effect {self.id}: speed range invalid "
                f"({self.min_speed} <= {self.default_speed} <= {self.max_speed})"
            )
        if not self.min_intensity <= self.default_intensity <= self.max_intensity:
            raise ValueError(
                f"Effect {self.id}: intensity range invalid "
                f"({self.min_intensity} <= {self.default_intensity} <= {self.max_intensity})"
            )
        return self

    @property
    def is_custom(self) -> bool:
        return is_custom_effect(self.id)


class EffectInfo(BaseModel):
    """Names-table entry for a device effect.

    Attributes:
        id: Device effect id.
        name: Device display name.
        category: Browsing category (e.g. 'Chase', 'Sparkle').
        color_behavior: How the effect treats segment colors.
        requires_2d: Only renders on matrix layouts.
        requires_audio: Needs an audio-reactive build.
        uses_color_layout: Lays colors out according to grouping.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=0)
    name: str
    category: str
    color_behavior: ColorBehavior = ColorBehavior.USES_SELECTED_COLORS
    requires_2d: bool = False
    requires_audio: bool = False
    uses_color_layout: bool = False

    @property
    def is_standard(self) -> bool:
        """True for plain 1D effects (no matrix, no audio)."""
        return not self.requires_2d and not self.requires_audio


class CustomEffect(BaseModel):
    """Effect executed by an external controller rather than the device.

    Attributes:
        id: Effect id (>= 1000).
        name: Display name.
        description: What the effect looks like.
        category: Family (Build, Radiate, Theatrical, Wave).
        is_animated: False for static reveals.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=CUSTOM_EFFECT_MIN_ID)
    name: str
    description: str
    category: str
    is_animated: bool = True
