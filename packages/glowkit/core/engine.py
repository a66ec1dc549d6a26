"""LookEngine - facade wiring catalog, generator, analyzer, matcher, cache and search.

All collaborators are injected; nothing here holds module-level state.

Example:
    >>> engine = LookEngine()
    >>> result = engine.match("christmas twinkle", node_id="xmas_candycane")
    >>> result.analysis.theme, result.from_cache
    ('christmas', False)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from glowkit.core.caching.backends.memory import InMemoryQueryCache
from glowkit.core.caching.backends.null import NullQueryCache
from glowkit.core.caching.protocols import QueryCache
from glowkit.core.config.models import GlowkitConfig
from glowkit.core.effects.catalog import EFFECT_REGISTRY, EffectCatalog
from glowkit.core.generation.generator import PatternGenerator
from glowkit.core.generation.models import PatternItem
from glowkit.core.library.models import LibraryNode
from glowkit.core.library.tree import CatalogTree
from glowkit.core.search.library_search import LibrarySearch
from glowkit.core.search.models import LibrarySearchResults
from glowkit.core.semantics.analyzer import QueryAnalysis, QueryAnalyzer
from glowkit.core.semantics.matching import MatchCriteria, MatchEngine, PatternProfile, profiles_for_items

logger = logging.getLogger(__name__)


class RankedPattern(BaseModel):
    """A generated pattern with its match score."""

    model_config = ConfigDict(frozen=True)

    item: PatternItem
    score: float


class LookResult(BaseModel):
    """Outcome of matching one query.

    Attributes:
        analysis: Analysis of the query that produced this result. A cache
            hit returns the result stored for an earlier query with the
            same theme and context.
        patterns: Ranked pattern items, best first.
        suggested_effect_ids: Effect ids suited to the query.
        from_cache: True when served from the query cache.
    """

    model_config = ConfigDict(frozen=True)

    analysis: QueryAnalysis
    patterns: tuple[RankedPattern, ...] = ()
    suggested_effect_ids: tuple[int, ...] = ()
    from_cache: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.patterns and not self.suggested_effect_ids


class LookEngine:
    """Entry point for callers: node patterns, query matching and search.

    Args:
        config: Engine configuration; defaults when None.
        catalog: Effect metadata registry.
        tree: Catalog tree; built from ``config.catalog`` when None.
        cache: Query cache; in-memory (or no-op when caching is disabled)
            when None.
    """

    def __init__(
        self,
        config: GlowkitConfig | None = None,
        catalog: EffectCatalog = EFFECT_REGISTRY,
        tree: CatalogTree | None = None,
        cache: QueryCache | None = None,
    ) -> None:
        self._config = config or GlowkitConfig()
        self._catalog = catalog
        self._tree = tree or CatalogTree(self._config.catalog)
        if cache is None:
            cache = InMemoryQueryCache() if self._config.cache.enabled else NullQueryCache()
        self._cache = cache
        self._generator = PatternGenerator(
            catalog=catalog,
            config=self._config.generation,
            root_resolver=self._tree.find_root_category_id,
        )
        self._analyzer = QueryAnalyzer()
        self._matcher = MatchEngine(catalog)
        self._search = LibrarySearch(self._tree, self._config.search)

        # Bumped on every catalog change; results computed across a bump are not cached
        self._generation = 0
        self._tree.add_invalidation_listener(self._on_catalog_change)

    def _on_catalog_change(self) -> None:
        self._generation += 1
        self._cache.invalidate()

    @property
    def tree(self) -> CatalogTree:
        return self._tree

    @property
    def cache(self) -> QueryCache:
        return self._cache

    @property
    def generator(self) -> PatternGenerator:
        return self._generator

    def patterns_for_node(self, node_id: str) -> list[PatternItem]:
        """Generated patterns for a node; [] for unknown ids and non-palettes."""
        return self._generator.generate_for_node(self._tree.get_node(node_id))

    def analyze(self, query: str) -> QueryAnalysis:
        return self._analyzer.analyze(query)

    def match(self, query: str, node_id: str | None = None) -> LookResult:
        """Rank patterns for a query.

        With ``node_id`` the node's own patterns are ranked; otherwise the
        patterns of the palettes a library search returns for the query.
        Results are cached by query hash (scoped to the node when given).
        """
        analysis = self._analyzer.analyze(query)
        if analysis.is_empty:
            return LookResult(analysis=analysis)

        key = analysis.query_hash if node_id is None else f"{node_id}:{analysis.query_hash}"
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Match served from cache: {key}")
            return cached.model_copy(update={"from_cache": True})

        generation = self._generation
        if node_id is not None:
            node = self._tree.get_node(node_id)
            nodes = [node] if node is not None else []
        else:
            nodes = list(self._search.search(query).palettes)

        criteria = MatchCriteria.from_analysis(analysis)
        items, profiles = self._profiles(nodes)
        ranked = self._matcher.rank_patterns(
            profiles,
            criteria,
            allow_color_override=analysis.wants_color_override,
        )
        result = LookResult(
            analysis=analysis,
            patterns=tuple(RankedPattern(item=items[s.profile.id], score=s.score) for s in ranked),
            suggested_effect_ids=tuple(self._matcher.suggest_effects(analysis)),
        )
        if generation == self._generation:
            self._cache.put(key, result)
        else:
            logger.debug(f"Catalog changed during match, not caching {key}")
        logger.debug(f"Matched {query!r}: {len(result.patterns)} patterns")
        return result

    def _profiles(self, nodes: Iterable[LibraryNode]) -> tuple[dict[str, PatternItem], list[PatternProfile]]:
        items: dict[str, PatternItem] = {}
        profiles: list[PatternProfile] = []
        for node in nodes:
            fresh = [item for item in self._generator.generate_for_node(node) if item.id not in items]
            items.update((item.id, item) for item in fresh)
            profiles.extend(profiles_for_items(fresh, self._catalog, keywords=(node.name, node.description or "")))
        return items, profiles

    def search(self, query: str, patterns: Iterable[PatternItem] = ()) -> LibrarySearchResults:
        return self._search.search(query, patterns)

    def invalidate(self) -> None:
        """Drop the catalog snapshot; the cache is cleared through the tree listener."""
        self._tree.invalidate()
