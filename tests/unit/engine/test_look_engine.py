"""Tests for the LookEngine facade."""

import pytest

from glowkit.core.caching import InMemoryQueryCache, NullQueryCache
from glowkit.core.config import CacheConfig, GlowkitConfig
from glowkit.core.effects import EFFECT_REGISTRY
from glowkit.core.engine import LookEngine


@pytest.fixture
def engine() -> LookEngine:
    return LookEngine()


class TestConstruction:
    """Test collaborator defaults."""

    def test_default_cache(self, engine):
        assert isinstance(engine.cache, InMemoryQueryCache)

    def test_disabled_cache(self):
        engine = LookEngine(GlowkitConfig(cache=CacheConfig(enabled=False)))
        assert isinstance(engine.cache, NullQueryCache)

    def test_injected_cache(self):
        cache = InMemoryQueryCache()
        assert LookEngine(cache=cache).cache is cache


class TestPatternsForNode:
    """Test patterns_for_node()."""

    def test_palette(self, engine):
        items = engine.patterns_for_node("xmas_candycane")
        assert len(items) == 30
        assert {i.category_id for i in items} == {"cat_holiday"}

    def test_unknown_or_folder(self, engine):
        assert engine.patterns_for_node("no_such_node") == []
        assert engine.patterns_for_node("cat_holiday") == []


class TestMatch:
    """Test match() ranking and caching."""

    @pytest.mark.parametrize("query", ["", "   ", "let's make it"])
    def test_empty_query_not_cached(self, engine, query):
        result = engine.match(query, node_id="xmas_candycane")
        assert result.is_empty
        assert not result.from_cache
        assert len(engine.cache) == 0

    def test_repeat_served_from_cache(self, engine):
        first = engine.match("christmas party", node_id="xmas_candycane")
        second = engine.match("christmas party", node_id="xmas_candycane")
        assert not first.from_cache
        assert second.from_cache
        assert second.patterns == first.patterns

    def test_cache_scoped_by_node(self, engine):
        """Test the same query on another node is computed fresh."""
        engine.match("christmas party", node_id="xmas_candycane")
        assert not engine.match("christmas party", node_id="team_nfl_chiefs").from_cache

    def test_same_theme_and_context_share_entry(self, engine):
        """Test queries differing only in motion collapse to one cache entry."""
        first = engine.match("elegant christmas twinkle", node_id="xmas_candycane")
        second = engine.match("elegant christmas pulse", node_id="xmas_candycane")
        assert second.from_cache
        assert second.analysis.query == first.analysis.query

    def test_color_respect_without_override(self, engine):
        """Test effects that ignore palette colors are dropped for a themed query."""
        result = engine.match("christmas", node_id="xmas_candycane")
        assert result.patterns
        assert all(EFFECT_REGISTRY.respects_colors(p.item.effect_id) for p in result.patterns)
        assert len(result.patterns) < 30

    def test_color_override_keeps_everything(self, engine):
        result = engine.match("rainbow christmas", node_id="xmas_candycane")
        assert result.analysis.wants_color_override
        assert len(result.patterns) == 30

    def test_scores_non_increasing(self, engine):
        result = engine.match("romantic christmas twinkle", node_id="xmas_candycane")
        scores = [p.score for p in result.patterns]
        assert scores == sorted(scores, reverse=True)

    def test_without_node_uses_search(self, engine):
        """Test matching without a node ranks patterns of searched palettes."""
        result = engine.match("christmas")
        assert result.patterns
        assert result.suggested_effect_ids
        scores = [p.score for p in result.patterns]
        assert scores == sorted(scores, reverse=True)

    def test_disabled_cache_never_hits(self):
        engine = LookEngine(GlowkitConfig(cache=CacheConfig(enabled=False)))
        engine.match("christmas party", node_id="xmas_candycane")
        assert not engine.match("christmas party", node_id="xmas_candycane").from_cache


class TestInvalidation:
    """Test catalog changes clear cached results."""

    def test_followed_teams_clear_cache(self, engine):
        engine.match("christmas party", node_id="xmas_candycane")
        assert len(engine.cache) == 1
        engine.tree.update_followed_teams(["Chiefs"])
        assert len(engine.cache) == 0
        assert not engine.match("christmas party", node_id="xmas_candycane").from_cache

    def test_invalidate(self, engine):
        engine.match("christmas party")
        engine.invalidate()
        assert len(engine.cache) == 0

    def test_change_during_match_not_cached(self, engine, monkeypatch):
        """Test a result computed across a catalog change is returned but not stored."""
        generate = engine.generator.generate_for_node

        def generate_after_change(node):
            engine.tree.update_followed_teams(["Chiefs"])
            return generate(node)

        monkeypatch.setattr(engine.generator, "generate_for_node", generate_after_change)
        result = engine.match("christmas party", node_id="xmas_candycane")
        assert not result.from_cache
        assert len(engine.cache) == 0
        assert not engine.match("christmas party", node_id="xmas_candycane").from_cache


class TestSearch:
    def test_search_delegates(self, engine):
        results = engine.search("christmas")
        assert results.folders[0].name == "Christmas"

    def test_search_patterns(self, engine):
        items = engine.patterns_for_node("xmas_candycane")
        results = engine.search("chase", patterns=items)
        assert all("chase" in p.name.lower() for p in results.patterns)
