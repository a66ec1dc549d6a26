"""Semantics domain - query analysis and effect matching.

Usage:
    from glowkit.core.semantics import MatchCriteria, MatchEngine, QueryAnalyzer

    analysis = QueryAnalyzer().analyze("romantic christmas twinkle")
    engine = MatchEngine()
    effects = engine.find_matching_effects(MatchCriteria.from_analysis(analysis))
"""

from glowkit.core.semantics.analyzer import (
    QueryAnalysis,
    QueryAnalyzer,
    analyze_query,
    content_tokens,
    occasion_for,
    query_hash,
)
from glowkit.core.semantics.matching import (
    COMPATIBLE_MOTIONS,
    MatchCriteria,
    MatchEngine,
    PatternProfile,
    ScoredPattern,
    color_family,
    energy_within_step,
    motions_compatible,
    profiles_for_items,
)
from glowkit.core.semantics.rules import (
    CONTEXT_RULES,
    ENERGY_RULES,
    MOOD_RULES,
    MOTION_RULES,
    NAMED_COLORS,
    THEME_KEYWORDS,
    THEMED_COLOR_RULES,
    VIBE_RULES,
)

__all__ = [
    # Analysis
    "QueryAnalysis",
    "QueryAnalyzer",
    "analyze_query",
    "content_tokens",
    "occasion_for",
    "query_hash",
    # Matching
    "COMPATIBLE_MOTIONS",
    "MatchCriteria",
    "MatchEngine",
    "PatternProfile",
    "ScoredPattern",
    "color_family",
    "energy_within_step",
    "motions_compatible",
    "profiles_for_items",
    # Rule tables
    "CONTEXT_RULES",
    "ENERGY_RULES",
    "MOOD_RULES",
    "MOTION_RULES",
    "NAMED_COLORS",
    "THEME_KEYWORDS",
    "THEMED_COLOR_RULES",
    "VIBE_RULES",
]
