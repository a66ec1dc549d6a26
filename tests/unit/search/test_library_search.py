"""Tests for library keyword search."""

import pytest

from glowkit.core.config import SearchConfig
from glowkit.core.generation import PatternGenerator
from glowkit.core.library import CatalogTree, LibraryNode, NodeSourceRegistry, NodeType
from glowkit.core.search import LibrarySearch, related_keywords, relevance_key, score_node


def _build_nodes() -> list[LibraryNode]:
    return [
        LibraryNode(id="f_xmas", name="Christmas", node_type=NodeType.FOLDER, parent_id="cat_holiday"),
        LibraryNode(
            id="p_deluxe",
            name="Christmas Lights Deluxe",
            node_type=NodeType.PALETTE,
            parent_id="f_xmas",
            theme_colors=("#FF0000", "#00FF00"),
        ),
        LibraryNode(
            id="p_candy",
            name="Candy Stripes",
            description="A christmas favorite",
            node_type=NodeType.PALETTE,
            parent_id="f_xmas",
            theme_colors=("#FF0000", "#FFFFFF"),
        ),
        LibraryNode(
            id="p_merry",
            name="Merry Christmas",
            node_type=NodeType.PALETTE,
            parent_id="f_xmas",
            theme_colors=("#00FF00", "#FFFFFF"),
        ),
        LibraryNode(
            id="p_ocean",
            name="Ocean Blue",
            node_type=NodeType.PALETTE,
            parent_id="cat_nature",
            theme_colors=("#0000FF", "#00FFFF"),
        ),
        LibraryNode(id="league_nfl", name="NFL", node_type=NodeType.FOLDER, parent_id="cat_sports"),
        LibraryNode(
            id="team_chiefs",
            name="Chiefs",
            node_type=NodeType.PALETTE,
            parent_id="league_nfl",
            theme_colors=("#E31837", "#FFB81C"),
        ),
    ]


@pytest.fixture
def tree() -> CatalogTree:
    sources = NodeSourceRegistry()
    sources.register("test", "cat_holiday", _build_nodes)
    return CatalogTree(sources=sources)


@pytest.fixture
def search(tree) -> LibrarySearch:
    return LibrarySearch(tree)


def _names(nodes) -> list[str]:
    return [n.name for n in nodes]


class TestScoring:
    """Test score_node() and relevance_key()."""

    @pytest.mark.parametrize(
        ("terms", "expected"),
        [
            (["candy stripes"], 100),
            (["candy"], 50),
            (["stripes"], 25),
            (["favorite"], 10),
            (["candy", "stripes", "favorite"], 85),
            (["xyz"], 0),
        ],
    )
    def test_score_node(self, tree, terms, expected):
        assert score_node(tree.get_node("p_candy"), terms) == expected

    def test_related_keyword_score(self, tree):
        """Test a name association scores when nothing else does."""
        assert score_node(tree.get_node("p_merry"), ["santa"]) == 15

    def test_sports_keywords_from_parent(self, tree):
        assert "gameday" in related_keywords(tree.get_node("team_chiefs"))
        assert "gameday" not in related_keywords(tree.get_node("p_ocean"))

    def test_relevance_key_order(self):
        names = ["Merry Christmas", "Christmas Lights", "Christmas", "Candy"]
        assert sorted(names, key=lambda n: relevance_key(n, "christmas")) == [
            "Christmas",
            "Christmas Lights",
            "Candy",
            "Merry Christmas",
        ]


class TestSearch:
    """Test LibrarySearch.search()."""

    def test_partitions_and_ordering(self, search):
        """Test exact match first, then prefix, then alphabetical."""
        results = search.search("Christmas")
        assert _names(results.folders) == ["Christmas"]
        assert _names(results.palettes) == ["Christmas Lights Deluxe", "Candy Stripes", "Merry Christmas"]

    def test_related_keywords(self, search):
        """Test nodes are found through associated words."""
        assert _names(search.search("gameday").palettes) == ["Chiefs"]
        assert _names(search.search("santa").palettes) == ["Christmas Lights Deluxe", "Merry Christmas"]

    def test_multi_term_query(self, search):
        results = search.search("  ocean blue ")
        assert _names(results.palettes) == ["Ocean Blue"]

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, search, query):
        results = search.search(query)
        assert results.is_empty
        assert results.total_count == 0

    def test_no_match(self, search):
        assert search.search("zzzz").is_empty

    def test_caps(self, tree):
        """Test each partition is capped by config."""
        results = LibrarySearch(tree, SearchConfig(palette_limit=1, folder_limit=0)).search("christmas")
        assert _names(results.palettes) == ["Christmas Lights Deluxe"]
        assert results.folders == ()

    def test_patterns(self, search, rose_palette):
        """Test supplied pattern items are matched by name."""
        items = PatternGenerator().generate_for_palette(rose_palette)
        results = search.search("rose", patterns=items)
        assert 0 < len(results.patterns) <= 10
        assert all("rose" in p.name.lower() for p in results.patterns)
        assert results.patterns[0].name.lower().startswith("rose")

    def test_builtin_catalog(self, catalog_tree):
        """Test the builtin Christmas folder ranks first."""
        results = LibrarySearch(catalog_tree).search("christmas")
        assert results.folders[0].name == "Christmas"
        assert len(results.palettes) <= 10
        assert len(results.folders) <= 5
