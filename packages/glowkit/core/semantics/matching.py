"""Match engine - hard-filter and weighted scoring of effects against a query.

Two modes share one set of criteria:

- ``find_matching_effects``: every supplied constraint must hold.
- ``calculate_match_score``: weighted overlap blended with a static
  universal-appeal prior, used to rank generated pattern items.

Effects that render their own colors are excluded in both modes whenever
the query carries a color preference, unless the caller passes
``allow_color_override``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from glowkit.core.effects.catalog import EFFECT_REGISTRY, EffectCatalog
from glowkit.core.effects.enums import EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.effects.models import EffectMetadata
from glowkit.core.effects.tables import CURATED_EFFECT_IDS, SCENARIO_ALIASES
from glowkit.core.generation.models import PatternItem
from glowkit.core.semantics.analyzer import QueryAnalysis
from glowkit.core.utils.colors import RGB, rgb_to_hsv

logger = logging.getLogger(__name__)

MOOD_WEIGHT = 3.0
VIBE_WEIGHT = 2.0
COLOR_WEIGHT = 2.0
OCCASION_BONUS = 2.0
OCCASION_PENALTY = -1.0
KEYWORD_WEIGHT = 1.0

SCORE_BLEND = 0.8
APPEAL_BLEND = 0.2
CURATED_APPEAL = 0.7
DEFAULT_APPEAL = 0.5

# Motions that satisfy each other in hard-filter mode
COMPATIBLE_MOTIONS: tuple[frozenset[MotionType], ...] = (
    frozenset({MotionType.FLOWING, MotionType.PULSING}),
    frozenset({MotionType.CHASING, MotionType.SCANNING}),
    frozenset({MotionType.TWINKLING, MotionType.EXPLOSIVE}),
)

_WORD = re.compile(r"[a-z0-9']+")

_CURATED = frozenset(CURATED_EFFECT_IDS)


def motions_compatible(wanted: MotionType, actual: MotionType) -> bool:
    if wanted == actual:
        return True
    return any(wanted in group and actual in group for group in COMPATIBLE_MOTIONS)


def energy_within_step(wanted: EnergyLevel, actual: EnergyLevel) -> bool:
    """Within one step on the ordered scale; ``dynamic`` on either side matches anything."""
    if EnergyLevel.DYNAMIC in (wanted, actual):
        return True
    return abs(wanted.rank - actual.rank) <= 1


def color_family(rgb: RGB) -> str:
    """Coarse hue bucket for color-overlap scoring."""
    hue, saturation, value = rgb_to_hsv(rgb)
    if value < 0.15:
        return "black"
    if saturation < 0.15:
        return "white"
    if hue < 15 or hue >= 345:
        return "red"
    if hue < 45:
        return "orange"
    if hue < 70:
        return "yellow"
    if hue < 170:
        return "green"
    if hue < 200:
        return "cyan"
    if hue < 260:
        return "blue"
    if hue < 290:
        return "purple"
    return "pink"


def _words(text: str) -> set[str]:
    return set(_WORD.findall(text.lower()))


class MatchCriteria(BaseModel):
    """Constraints and preferences for matching.

    Empty or None fields are inactive: they neither filter nor score.
    """

    model_config = ConfigDict(frozen=True)

    moods: frozenset[EffectMoodCategory] = frozenset()
    vibes: frozenset[EffectVibe] = frozenset()
    motion_type: MotionType | None = None
    energy_level: EnergyLevel | None = None
    occasion: str | None = None
    color_preferences: tuple[tuple[int, int, int], ...] = ()
    keywords: tuple[str, ...] = ()
    require_color_respect: bool = False

    @classmethod
    def from_analysis(cls, analysis: QueryAnalysis) -> MatchCriteria:
        return cls(
            moods=frozenset({analysis.mood}) if analysis.mood else frozenset(),
            vibes=frozenset({analysis.vibe}) if analysis.vibe else frozenset(),
            motion_type=analysis.motion_type,
            energy_level=analysis.energy_level,
            occasion=analysis.occasion,
            color_preferences=analysis.color_preferences,
            keywords=analysis.keywords,
        )

    @property
    def has_colors(self) -> bool:
        return bool(self.color_preferences)

    def needs_color_respect(self, allow_color_override: bool = False) -> bool:
        if allow_color_override:
            return False
        return self.require_color_respect or self.has_colors


class PatternProfile(BaseModel):
    """Scoring view of a pattern: its effect's tags plus its own colors and words."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    effect_id: int | None = None
    respects_colors: bool = True
    moods: frozenset[EffectMoodCategory] = frozenset()
    vibes: frozenset[EffectVibe] = frozenset()
    colors: tuple[tuple[int, int, int], ...] = ()
    occasions: frozenset[str] = frozenset()
    avoid_occasions: frozenset[str] = frozenset()
    keywords: frozenset[str] = frozenset()
    universal_appeal: float = Field(default=DEFAULT_APPEAL, ge=0.0, le=1.0)

    @classmethod
    def from_item(
        cls,
        item: PatternItem,
        catalog: EffectCatalog = EFFECT_REGISTRY,
        keywords: Iterable[str] = (),
    ) -> PatternProfile:
        """Profile a generated item from its first segment and effect metadata.

        Args:
            item: Generated pattern item.
            catalog: Effect metadata source.
            keywords: Extra words describing the item, e.g. its palette's name.
        """
        fx = item.effect_id
        meta = catalog.get(fx)
        colors = tuple((r, g, b) for r, g, b, _ in item.payload.seg[0].col)
        words = _words(item.name)
        for keyword in keywords:
            words |= _words(keyword)
        words |= _words(meta.name)
        return cls(
            id=item.id,
            name=item.name,
            effect_id=fx,
            respects_colors=meta.respects_colors,
            moods=meta.moods,
            vibes=meta.vibes,
            colors=colors,
            occasions=meta.best_for_occasions,
            avoid_occasions=meta.avoid_for_occasions,
            keywords=frozenset(words),
            universal_appeal=CURATED_APPEAL if fx in _CURATED else DEFAULT_APPEAL,
        )


class ScoredPattern(NamedTuple):
    profile: PatternProfile
    score: float


class MatchEngine:
    """Filters effects and ranks pattern profiles against ``MatchCriteria``."""

    def __init__(self, catalog: EffectCatalog = EFFECT_REGISTRY) -> None:
        self._catalog = catalog

    def effect_matches(
        self,
        effect: EffectMetadata,
        criteria: MatchCriteria,
        allow_color_override: bool = False,
    ) -> bool:
        if criteria.needs_color_respect(allow_color_override) and not effect.respects_colors:
            return False
        if criteria.moods and not criteria.moods & effect.moods:
            return False
        if criteria.vibes and not criteria.vibes & effect.vibes:
            return False
        if criteria.motion_type is not None and not motions_compatible(criteria.motion_type, effect.motion_type):
            return False
        if criteria.energy_level is not None and not energy_within_step(criteria.energy_level, effect.energy_level):
            return False
        if criteria.occasion is not None and criteria.occasion in effect.avoid_for_occasions:
            return False
        return True

    def find_matching_effects(
        self,
        criteria: MatchCriteria,
        allow_color_override: bool = False,
    ) -> list[EffectMetadata]:
        """Registered effects satisfying every active constraint, in id order."""
        matches = self._catalog.filter(lambda e: self.effect_matches(e, criteria, allow_color_override))
        logger.debug(f"Hard filter matched {len(matches)} effects")
        return matches

    def calculate_match_score(self, profile: PatternProfile, criteria: MatchCriteria) -> float:
        """Weighted overlap averaged over active factors, blended 80/20 with appeal.

        With no active factor the profile's ``universal_appeal`` is returned
        unchanged.
        """
        total = 0.0
        factors = 0

        if criteria.moods:
            total += MOOD_WEIGHT * len(criteria.moods & profile.moods) / len(criteria.moods)
            factors += 1
        if criteria.vibes:
            total += VIBE_WEIGHT * len(criteria.vibes & profile.vibes) / len(criteria.vibes)
            factors += 1
        if criteria.color_preferences:
            wanted = {color_family(c) for c in criteria.color_preferences}
            have = {color_family(c) for c in profile.colors}
            total += COLOR_WEIGHT * len(wanted & have) / len(wanted)
            factors += 1
        if criteria.occasion:
            if criteria.occasion in profile.occasions:
                total += OCCASION_BONUS
            elif criteria.occasion in profile.avoid_occasions:
                total += OCCASION_PENALTY
            factors += 1
        if criteria.keywords:
            hits = sum(1 for k in criteria.keywords if k in profile.keywords)
            total += KEYWORD_WEIGHT * hits / len(criteria.keywords)
            factors += 1

        if factors == 0:
            return profile.universal_appeal
        return SCORE_BLEND * (total / factors) + APPEAL_BLEND * profile.universal_appeal

    def is_excluded(
        self,
        profile: PatternProfile,
        criteria: MatchCriteria,
        allow_color_override: bool = False,
    ) -> bool:
        return criteria.needs_color_respect(allow_color_override) and not profile.respects_colors

    def rank_patterns(
        self,
        profiles: Iterable[PatternProfile],
        criteria: MatchCriteria,
        allow_color_override: bool = False,
        limit: int | None = None,
    ) -> list[ScoredPattern]:
        """Score desc, then name, then id; excluded profiles are dropped."""
        scored = [
            ScoredPattern(p, self.calculate_match_score(p, criteria))
            for p in profiles
            if not self.is_excluded(p, criteria, allow_color_override)
        ]
        scored.sort(key=lambda s: (-s.score, s.profile.name.lower(), s.profile.id))
        return scored[:limit] if limit is not None else scored

    def suggest_effects(
        self,
        analysis: QueryAnalysis,
        require_color_respect: bool = True,
    ) -> list[int]:
        """Effect ids for an analyzed query.

        Rainbow requests and known occasions use the catalog's scenario table.
        Otherwise, or when that yields nothing, the hard-filter result ids.
        """
        override = analysis.wants_color_override
        scenario = "rainbow" if override else analysis.occasion
        if scenario is None and analysis.context in SCENARIO_ALIASES:
            scenario = analysis.context
        if scenario is not None and scenario in SCENARIO_ALIASES:
            ids = self._catalog.recommended_ids(scenario, color_respect_required=require_color_respect)
            if ids:
                return ids
        criteria = MatchCriteria.from_analysis(analysis).model_copy(
            update={"require_color_respect": require_color_respect}
        )
        return [e.id for e in self.find_matching_effects(criteria, allow_color_override=override)]


def profiles_for_items(
    items: Sequence[PatternItem],
    catalog: EffectCatalog = EFFECT_REGISTRY,
    keywords: Iterable[str] = (),
) -> list[PatternProfile]:
    extra = tuple(keywords)
    return [PatternProfile.from_item(item, catalog, keywords=extra) for item in items]
