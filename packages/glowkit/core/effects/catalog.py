"""Effect catalog registry.

Provides a single registry for effect metadata, the device names table
and custom effects, with lenient lookups (unknown ids resolve to a
generic permissive default) and strict lookups for callers that need
to know an id is registered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from glowkit.core.effects.enums import (
    EffectMoodCategory,
    EnergyLevel,
    FxVibe,
    MotionType,
    SelectorMood,
)
from glowkit.core.effects.models import CustomEffect, EffectInfo, EffectMetadata, is_custom_effect
from glowkit.core.effects.tables import (
    COLOR_OVERRIDE_SCENARIOS,
    ELEGANT_FX_IDS,
    ENERGY_FX_IDS,
    SCENARIO_ALIASES,
    SCENARIO_EFFECT_IDS,
    SELECTOR_MOOD_BY_CATEGORY,
    SPEED_MULTIPLIERS,
)
from glowkit.core.errors import ItemNotFoundError
from glowkit.core.utils.math import clamp, round_half_up

logger = logging.getLogger(__name__)


def vibe_for_fx(fx_id: int) -> FxVibe:
    """Return the grid filter label for an effect id (Motion by default)."""
    if fx_id in ELEGANT_FX_IDS:
        return FxVibe.ELEGANT
    if fx_id in ENERGY_FX_IDS:
        return FxVibe.ENERGY
    return FxVibe.MOTION


def selector_mood_for_category(category: str) -> SelectorMood:
    """Map a names-table category to the picker mood (Calm by default)."""
    return SELECTOR_MOOD_BY_CATEGORY.get(category, SelectorMood.CALM)


class EffectCatalog:
    """Registry for effect metadata, effect names and custom effects.

    Example:
        >>> catalog = EffectCatalog()
        >>> catalog.register(EffectMetadata(id=0, name="Solid"))
        >>> catalog.get(0).name
        'Solid'
        >>> catalog.get(999).name
        'Effect #999'
    """

    def __init__(self, speed_multipliers: Mapping[int, float] | None = None) -> None:
        """Initialize empty catalog.

        Args:
            speed_multipliers: Per-effect speed scaling; defaults to the
                builtin multiplier table.
        """
        self._items: dict[int, EffectMetadata] = {}
        self._info: dict[int, EffectInfo] = {}
        self._custom: dict[int, CustomEffect] = {}
        self._speed_multipliers: dict[int, float] = dict(
            SPEED_MULTIPLIERS if speed_multipliers is None else speed_multipliers
        )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, item: EffectMetadata) -> None:
        """Register effect metadata.

        Raises:
            ValueError: If the effect id is already registered.
        """
        if item.id in self._items:
            raise ValueError(f"Effect already registered: {item.id}")
        self._items[item.id] = item
        logger.debug(f"Registered effect: {item.id} ({item.name})")

    def register_info(self, info: EffectInfo) -> None:
        """Register a names-table entry.

        Raises:
            ValueError: If the effect id already has an entry.
        """
        if info.id in self._info:
            raise ValueError(f"Effect info already registered: {info.id}")
        self._info[info.id] = info

    def register_custom(self, effect: CustomEffect) -> None:
        """Register a custom (externally executed) effect.

        Raises:
            ValueError: If the effect id is already registered.
        """
        if effect.id in self._custom:
            raise ValueError(f"Custom effect already registered: {effect.id}")
        self._custom[effect.id] = effect
        logger.debug(f"Registered custom effect: {effect.id} ({effect.name})")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, effect_id: int) -> EffectMetadata:
        """Lookup effect metadata, falling back to a generic default.

        Never raises: unknown ids get permissive metadata (full parameter
        ranges, no mood or vibe tags) named from the names table.
        """
        item = self._items.get(effect_id)
        if item is not None:
            return item
        return self._generic(effect_id)

    def lookup(self, effect_id: int) -> EffectMetadata | None:
        """Lookup registered metadata only."""
        return self._items.get(effect_id)

    def require(self, effect_id: int) -> EffectMetadata:
        """Lookup registered metadata.

        Raises:
            ItemNotFoundError: If the effect has no registered metadata.
        """
        item = self._items.get(effect_id)
        if item is None:
            raise ItemNotFoundError(f"Effect not found: {effect_id}")
        return item

    def has(self, effect_id: int) -> bool:
        return effect_id in self._items

    def list_all(self) -> list[EffectMetadata]:
        """All registered metadata in id order."""
        return [self._items[k] for k in sorted(self._items)]

    def list_ids(self) -> list[int]:
        return sorted(self._items)

    def filter(self, predicate: Callable[[EffectMetadata], bool]) -> list[EffectMetadata]:
        """Registered metadata matching predicate, in id order."""
        return [item for item in self.list_all() if predicate(item)]

    def info(self, effect_id: int) -> EffectInfo | None:
        return self._info.get(effect_id)

    def list_info(self, *, standard_only: bool = False) -> list[EffectInfo]:
        infos = [self._info[k] for k in sorted(self._info)]
        if standard_only:
            return [i for i in infos if i.is_standard]
        return infos

    def standard_ids(self) -> list[int]:
        """Ids of plain 1D effects usable for pattern generation."""
        return [i.id for i in self.list_info(standard_only=True)]

    def by_category(self, category: str) -> list[EffectInfo]:
        return [i for i in self.list_info() if i.category == category]

    def selector_mood(self, effect_id: int) -> SelectorMood | None:
        info = self._info.get(effect_id)
        return selector_mood_for_category(info.category) if info is not None else None

    def custom_effect(self, effect_id: int) -> CustomEffect | None:
        return self._custom.get(effect_id)

    def list_custom(self) -> list[CustomEffect]:
        return [self._custom[k] for k in sorted(self._custom)]

    def name(self, effect_id: int) -> str:
        """Display name for an effect id.

        Resolution order: names table, custom effects, metadata, then a
        numbered placeholder.
        """
        info = self._info.get(effect_id)
        if info is not None:
            return info.name
        custom = self._custom.get(effect_id)
        if custom is not None:
            return custom.name
        item = self._items.get(effect_id)
        if item is not None:
            return item.name
        if is_custom_effect(effect_id):
            return f"Custom Effect #{effect_id}"
        return f"Effect #{effect_id}"

    def respects_colors(self, effect_id: int) -> bool:
        """Whether the effect renders with the supplied colors (True if unknown)."""
        return self.get(effect_id).respects_colors

    # ------------------------------------------------------------------
    # Parameter helpers
    # ------------------------------------------------------------------

    def clamp_speed(self, effect_id: int, speed: int) -> int:
        """Clamp a caller-supplied speed into the effect's recommended range."""
        meta = self.get(effect_id)
        return clamp(speed, meta.min_speed, meta.max_speed)

    def clamp_intensity(self, effect_id: int, intensity: int) -> int:
        """Clamp a caller-supplied intensity into the effect's recommended range."""
        meta = self.get(effect_id)
        return clamp(intensity, meta.min_intensity, meta.max_intensity)

    def speed_multiplier(self, effect_id: int) -> float:
        return self._speed_multipliers.get(effect_id, 1.0)

    def adjusted_speed(self, effect_id: int, base_speed: int) -> int:
        """Scale a base speed by the effect's multiplier, clamped to 1..255."""
        return clamp(round_half_up(base_speed * self.speed_multiplier(effect_id)), 1, 255)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def color_respecting(self) -> list[EffectMetadata]:
        return self.filter(lambda e: e.respects_colors)

    def color_overriding(self) -> list[EffectMetadata]:
        return self.filter(lambda e: not e.respects_colors)

    def for_mood(self, mood: EffectMoodCategory) -> list[EffectMetadata]:
        return self.filter(lambda e: mood in e.moods)

    def for_any_mood(self, moods: Iterable[EffectMoodCategory]) -> list[EffectMetadata]:
        wanted = frozenset(moods)
        return self.filter(lambda e: bool(e.moods & wanted))

    def for_motion(self, motion: MotionType) -> list[EffectMetadata]:
        return self.filter(lambda e: e.motion_type == motion)

    def for_energy_range(self, low: EnergyLevel, high: EnergyLevel) -> list[EffectMetadata]:
        """Effects whose energy rank falls within [low, high] inclusive."""
        return self.filter(lambda e: low.rank <= e.energy_level.rank <= high.rank)

    def for_occasion(self, occasion: str) -> list[EffectMetadata]:
        return self.filter(lambda e: occasion in e.best_for_occasions)

    def should_avoid(self, effect_id: int, occasion: str) -> bool:
        item = self._items.get(effect_id)
        return item is not None and occasion in item.avoid_for_occasions

    def recommended_ids(self, scenario: str, color_respect_required: bool = True) -> list[int]:
        """Recommended effect ids for a named scenario.

        Rainbow-style scenarios return their list unfiltered. Others are
        filtered to registered color-respecting effects unless
        ``color_respect_required`` is False.
        """
        canonical = SCENARIO_ALIASES.get(scenario.lower(), "default")
        ids = SCENARIO_EFFECT_IDS[canonical]
        if canonical in COLOR_OVERRIDE_SCENARIOS or not color_respect_required:
            return list(ids)
        return [i for i in ids if (m := self._items.get(i)) is not None and m.respects_colors]

    # ------------------------------------------------------------------

    def _generic(self, effect_id: int) -> EffectMetadata:
        info = self._info.get(effect_id)
        respects = info.color_behavior.uses_user_colors if info is not None else True
        return EffectMetadata(
            id=effect_id,
            name=self.name(effect_id),
            respects_colors=respects,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, effect_id: object) -> bool:
        return effect_id in self._items


# Global registry, populated by glowkit.core.effects.builtins
EFFECT_REGISTRY = EffectCatalog()


def get_effect(effect_id: int) -> EffectMetadata:
    """Lookup effect metadata in the global registry (never raises)."""
    return EFFECT_REGISTRY.get(effect_id)


def effect_name(effect_id: int) -> str:
    """Display name from the global registry."""
    return EFFECT_REGISTRY.name(effect_id)
