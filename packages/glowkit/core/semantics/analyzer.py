"""Query analyzer - extracts theme, context and effect attributes from free text.

All extractors are pure functions of the query string. The analyzer never
consults the cache; the caller hashes ``QueryAnalysis.query_hash``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from glowkit.core.caching.hashing import stable_hash
from glowkit.core.effects.enums import EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.library.teams import find_team
from glowkit.core.semantics.rules import (
    COLOR_OVERRIDE_PATTERN,
    CONTEXT_OCCASIONS,
    CONTEXT_RULES,
    ENERGY_RULES,
    FILLER_PATTERN,
    MOOD_RULES,
    MOTION_RULES,
    NAMED_COLOR_PATTERNS,
    TEAM_THEMES,
    THEME_KEYWORDS,
    THEME_OCCASIONS,
    THEMED_COLOR_RULES,
    VIBE_RULES,
    Rule,
)
from glowkit.core.utils.colors import RGB, dedupe_colors, hex_to_rgb

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_PUNCTUATION = re.compile(r"[^\w\s'-]")
_ALNUM = re.compile(r"[^\W_]")


class QueryAnalysis(BaseModel):
    """Attributes extracted from one free-text query.

    Attributes:
        query: The original query text.
        theme: First theme keyword found, e.g. "christmas" or "chiefs".
        context: Context modifier (party, elegant, romantic, celebration, simple).
        mood: Effect mood category.
        vibe: Effect vibe.
        energy_level: Requested energy.
        motion_type: Requested motion.
        color_preferences: Named colors, or a themed fallback when none are named.
        colors_explicit: True when ``color_preferences`` came from named colors.
        wants_color_override: Rainbow/multicolor requested.
        keywords: Lower-case content words with filler removed.
        query_hash: Cache key over theme and context.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    theme: str | None = None
    context: str | None = None
    mood: EffectMoodCategory | None = None
    vibe: EffectVibe | None = None
    energy_level: EnergyLevel | None = None
    motion_type: MotionType | None = None
    color_preferences: tuple[tuple[int, int, int], ...] = ()
    colors_explicit: bool = False
    wants_color_override: bool = False
    keywords: tuple[str, ...] = ()
    query_hash: str

    @property
    def occasion(self) -> str | None:
        """Effect occasion implied by the theme, else by the context."""
        return occasion_for(self.theme, self.context)

    @property
    def is_empty(self) -> bool:
        return not self.keywords


def occasion_for(theme: str | None, context: str | None) -> str | None:
    if theme and theme in THEME_OCCASIONS:
        return THEME_OCCASIONS[theme]
    if context:
        return CONTEXT_OCCASIONS.get(context)
    return None


def _first_match(text: str, rules: Sequence[Rule]):
    for pattern, value in rules:
        if pattern.search(text):
            return value
    return None


def _normalize(query: str) -> str:
    return query.lower().strip()


def content_tokens(query: str) -> list[str]:
    """Lower-case tokens with filler words removed."""
    cleaned = FILLER_PATTERN.sub(" ", _normalize(query))
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return cleaned.split(" ") if cleaned else []


class QueryAnalyzer:
    """Rule-table driven query analysis.

    Each table is a sequence of ``(compiled pattern, value)`` pairs checked
    in order; the defaults live in ``glowkit.core.semantics.rules`` and can
    be replaced per instance.

    Example:
        >>> analyzer = QueryAnalyzer()
        >>> a = analyzer.analyze("let's have a wedding party!")
        >>> (a.theme, a.context)
        ('wedding', 'party')
    """

    def __init__(
        self,
        theme_keywords: Sequence[str] = THEME_KEYWORDS,
        context_rules: Sequence[Rule] = CONTEXT_RULES,
        mood_rules: Sequence[Rule] = MOOD_RULES,
        vibe_rules: Sequence[Rule] = VIBE_RULES,
        energy_rules: Sequence[Rule] = ENERGY_RULES,
        motion_rules: Sequence[Rule] = MOTION_RULES,
        themed_color_rules: Sequence[Rule] = THEMED_COLOR_RULES,
    ) -> None:
        self._theme_keywords = tuple(theme_keywords)
        self._theme_set = frozenset(self._theme_keywords)
        self._context_rules = tuple(context_rules)
        self._mood_rules = tuple(mood_rules)
        self._vibe_rules = tuple(vibe_rules)
        self._energy_rules = tuple(energy_rules)
        self._motion_rules = tuple(motion_rules)
        self._themed_color_rules = tuple(themed_color_rules)

    def extract_theme(self, query: str) -> str | None:
        """First theme keyword among the tokens, else the first keyword contained
        in the tokens joined without spaces ("4th of july" -> "4thofjuly").
        """
        tokens = content_tokens(query)
        for token in tokens:
            if token in self._theme_set:
                return token
        compound = "".join(tokens)
        if not compound:
            return None
        for keyword in self._theme_keywords:
            if keyword in compound:
                return keyword
        return None

    def extract_context(self, query: str) -> str | None:
        return _first_match(_normalize(query), self._context_rules)

    def extract_mood(self, query: str) -> EffectMoodCategory | None:
        return _first_match(_normalize(query), self._mood_rules)

    def extract_vibe(self, query: str) -> EffectVibe | None:
        return _first_match(_normalize(query), self._vibe_rules)

    def extract_energy(self, query: str) -> EnergyLevel | None:
        return _first_match(_normalize(query), self._energy_rules)

    def extract_motion(self, query: str) -> MotionType | None:
        return _first_match(_normalize(query), self._motion_rules)

    def extract_named_colors(self, query: str) -> list[RGB]:
        """Named colors in order of first occurrence.

        Multi-word names claim their span first, so "warm white" does not
        also yield "white".
        """
        text = _normalize(query)
        hits: list[tuple[int, RGB]] = []
        for pattern, rgb in NAMED_COLOR_PATTERNS:
            for m in pattern.finditer(text):
                hits.append((m.start(), rgb))
            text = pattern.sub(lambda m: " " * len(m.group(0)), text)
        hits.sort(key=lambda hit: hit[0])
        return dedupe_colors([rgb for _, rgb in hits])

    def themed_colors(self, query: str) -> list[RGB]:
        """Multi-color fallback for occasion keywords or a named team."""
        colors = _first_match(_normalize(query), self._themed_color_rules)
        if colors:
            return list(colors)
        theme = self.extract_theme(query)
        if theme in TEAM_THEMES:
            team = find_team(theme)
            if team is not None:
                return dedupe_colors([hex_to_rgb(c) for c in team.colors])
        return []

    def extract_colors(self, query: str) -> tuple[list[RGB], bool]:
        """Color preferences and whether they were named explicitly.

        Named colors always win over themed fallbacks.
        """
        named = self.extract_named_colors(query)
        if named:
            return named, True
        return self.themed_colors(query), False

    def detect_color_override(self, query: str) -> bool:
        """True for rainbow, multicolor, pride or colorful requests."""
        return COLOR_OVERRIDE_PATTERN.search(_normalize(query)) is not None

    def keywords(self, query: str) -> list[str]:
        """Distinct content words in query order.

        Contraction fragments left behind by filler removal (the "'s" of
        "it's") and tokens without a letter or digit are dropped.
        """
        words = (_PUNCTUATION.sub("", token) for token in content_tokens(query))
        return list(dict.fromkeys(w for w in words if not w.startswith("'") and _ALNUM.search(w)))

    def analyze(self, query: str) -> QueryAnalysis:
        theme = self.extract_theme(query)
        context = self.extract_context(query)
        colors, explicit = self.extract_colors(query)
        analysis = QueryAnalysis(
            query=query,
            theme=theme,
            context=context,
            mood=self.extract_mood(query),
            vibe=self.extract_vibe(query),
            energy_level=self.extract_energy(query),
            motion_type=self.extract_motion(query),
            color_preferences=tuple(colors),
            colors_explicit=explicit,
            wants_color_override=self.detect_color_override(query),
            keywords=tuple(self.keywords(query)),
            query_hash=stable_hash(theme, context),
        )
        logger.debug(f"Analyzed {query!r}: theme={theme} context={context} hash={analysis.query_hash}")
        return analysis


_DEFAULT_ANALYZER = QueryAnalyzer()


def analyze_query(query: str) -> QueryAnalysis:
    """Analyze with the default rule tables."""
    return _DEFAULT_ANALYZER.analyze(query)


def query_hash(query: str) -> str:
    """Cache key for a query: stable hash of its theme and context."""
    return stable_hash(_DEFAULT_ANALYZER.extract_theme(query), _DEFAULT_ANALYZER.extract_context(query))
