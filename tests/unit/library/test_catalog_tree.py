"""Tests for the catalog tree."""

from datetime import datetime

import pytest

from glowkit.core.config import CatalogConfig
from glowkit.core.errors import InvalidHierarchyError
from glowkit.core.library import (
    CAT_SECURITY,
    CAT_SPORTS,
    LIVE_EVENTS_FOLDER_ID,
    MY_TEAMS_FOLDER_ID,
    CatalogTree,
    LibraryNode,
    LiveEvent,
    NodeSourceRegistry,
    NodeType,
    SportsTeam,
    find_team,
)


def _folder(node_id: str, parent_id: str | None, sort_order: int = 0) -> LibraryNode:
    return LibraryNode(id=node_id, name=node_id.title(), node_type=NodeType.FOLDER, parent_id=parent_id, sort_order=sort_order)


def _tree_with(nodes: list[LibraryNode], max_depth: int = 16) -> CatalogTree:
    registry = NodeSourceRegistry()
    registry.register("test", CAT_SPORTS, lambda: list(nodes))
    return CatalogTree(CatalogConfig(max_depth=max_depth), sources=registry)


@pytest.fixture
def tree() -> CatalogTree:
    return CatalogTree()


@pytest.fixture
def big_game() -> LiveEvent:
    return LiveEvent(
        id="sb",
        name="Super Bowl",
        team1=find_team("Kansas City Chiefs"),
        team2=find_team("Philadelphia Eagles"),
        league="NFL",
        event_time=datetime(2026, 2, 8, 18, 30),
        estimated_audience=120.0,
    )


class TestRoots:
    """Test root category listing."""

    def test_root_categories_in_display_order(self, tree):
        """Test None lists the root categories sorted by sort order."""
        names = [n.name for n in tree.get_children(None)]
        assert names == [
            "Game Day Fan Zone",
            "Holidays",
            "Seasonal Vibes",
            "Parties & Events",
            "Movies & Superheroes",
            "Architectural Downlighting (White)",
            "Security & Alerts",
            "Nature & Outdoors",
        ]

    def test_roots_are_categories(self, tree):
        """Test every root is a category without a parent."""
        for node in tree.get_children(None):
            assert node.is_category
            assert node.is_root

    def test_security_can_be_excluded(self):
        """Test include_security=False drops the category and its palettes."""
        tree = CatalogTree(CatalogConfig(include_security=False))
        assert tree.get_node(CAT_SECURITY) is None
        assert tree.get_node("security_police") is None
        assert len(tree.get_children(None)) == 7


class TestTraversal:
    """Test lookups, children and ancestors."""

    def test_get_node(self, tree):
        """Test lookup by id."""
        node = tree.get_node("team_nfl_chiefs")
        assert node is not None
        assert node.name == "Kansas City Chiefs"
        assert node.is_palette

    def test_unknown_node_is_none(self, tree):
        """Test unknown ids resolve to None, not an error."""
        assert tree.get_node("nope") is None
        assert "nope" not in tree

    def test_children_sorted(self, tree):
        """Test league folders follow the always-present My Teams folder."""
        ids = [n.id for n in tree.get_children(CAT_SPORTS)]
        assert ids[0] == MY_TEAMS_FOLDER_ID
        assert ids[1:] == [
            "league_nfl",
            "league_nba",
            "league_mlb",
            "league_nhl",
            "league_mls",
            "league_wnba",
            "league_nwsl",
        ]

    def test_children_of_unknown_parent_empty(self, tree):
        """Test unknown parents have no children."""
        assert tree.get_children("nope") == []
        assert not tree.has_children("nope")

    def test_ancestors_of_root_empty(self, tree):
        """Test a root category has no ancestors."""
        assert tree.get_ancestors(CAT_SPORTS) == []

    def test_ancestors_of_palette(self, tree):
        """Test a 3-level palette has two ancestors, root first."""
        ancestors = tree.get_ancestors("team_nfl_chiefs")
        assert [n.id for n in ancestors] == [CAT_SPORTS, "league_nfl"]

    def test_ancestors_of_deep_galaxy_palette(self, tree):
        """Test deep architectural chains resolve in root-to-parent order."""
        ancestors = tree.get_ancestors("arch_galaxy_k2700_40_2b3d")
        assert [n.id for n in ancestors] == [
            "cat_arch",
            "arch_galaxy",
            "arch_galaxy_k2700",
            "arch_galaxy_k2700_dim40",
        ]

    def test_ancestors_of_unknown_empty(self, tree):
        """Test unknown ids have no ancestors."""
        assert tree.get_ancestors("nope") == []

    def test_find_root_category(self, tree):
        """Test root resolution for palettes, folders and roots."""
        assert tree.find_root_category_id("team_nfl_chiefs") == CAT_SPORTS
        assert tree.find_root_category_id("league_nfl") == CAT_SPORTS
        assert tree.find_root_category_id("cat_holiday") == "cat_holiday"
        assert tree.find_root_category_id("nope") is None

    def test_palette_nodes_have_colors(self, tree):
        """Test palette listing only returns generable nodes."""
        palettes = tree.palette_nodes()
        assert palettes
        assert all(p.node_type == NodeType.PALETTE and p.theme_colors for p in palettes)

    def test_every_node_reaches_a_root(self, tree):
        """Test every non-root node's first ancestor is a root category."""
        roots = {n.id for n in tree.get_children(None)}
        for node in tree.all_nodes():
            if node.is_root:
                continue
            assert tree.find_root_category_id(node.id) in roots

    def test_len(self, tree):
        """Test length counts all nodes."""
        assert len(tree) == len(tree.all_nodes())


class TestMemoization:
    """Test snapshot caching and invalidation."""

    def test_snapshot_reused(self, tree):
        """Test repeated reads return the same node objects."""
        assert tree.get_node("holiday_christmas") is tree.get_node("holiday_christmas")

    def test_invalidate_rebuilds(self, tree):
        """Test invalidation produces a fresh but equal snapshot."""
        before = tree.get_node("holiday_christmas")
        tree.invalidate()
        after = tree.get_node("holiday_christmas")
        assert after == before
        assert after is not before

    def test_listeners_notified(self, tree):
        """Test listeners run on every invalidation."""
        calls = []
        tree.add_invalidation_listener(lambda: calls.append(1))
        tree.invalidate()
        tree.update_followed_teams(["Chiefs"])
        assert len(calls) == 2


class TestDynamicContent:
    """Test live events and followed teams."""

    def test_followed_teams_appear(self, tree):
        """Test followed teams become palettes under My Teams."""
        assert tree.get_children(MY_TEAMS_FOLDER_ID) == []
        tree.update_followed_teams(["Kansas City Chiefs", "lakers", "Unknown FC"])
        ids = [n.id for n in tree.get_children(MY_TEAMS_FOLDER_ID)]
        assert ids == ["my_team_nfl_chiefs", "my_team_nba_lakers"]

    def test_clear_followed_teams(self, tree):
        """Test clearing leaves the My Teams folder empty but present."""
        tree.update_followed_teams(["Chiefs"])
        tree.clear_followed_teams()
        assert tree.get_node(MY_TEAMS_FOLDER_ID) is not None
        assert tree.get_children(MY_TEAMS_FOLDER_ID) == []

    def test_live_event_folder_first(self, tree, big_game):
        """Test the live-event folder leads the sports category."""
        tree.update_live_events([big_game])
        children = tree.get_children(CAT_SPORTS)
        assert children[0].id == LIVE_EVENTS_FOLDER_ID
        assert children[0].name == "Big Game Designs"
        assert children[1].id == MY_TEAMS_FOLDER_ID

    def test_live_event_palettes_resolve(self, tree, big_game):
        """Test live-event palettes have valid ancestor chains."""
        tree.update_live_events([big_game])
        ancestors = tree.get_ancestors("big_event_sb_merged_house_split")
        assert [n.id for n in ancestors] == [CAT_SPORTS, LIVE_EVENTS_FOLDER_ID, "big_event_sb_merged"]

    def test_clear_live_events(self, tree, big_game):
        """Test clearing removes the live-event folder."""
        tree.update_live_events([big_game])
        tree.clear_live_events()
        assert tree.get_node(LIVE_EVENTS_FOLDER_ID) is None

    def test_rivals_sharing_a_nickname(self, tree):
        """Test two teams with the same short name get separate folders."""
        championship = LiveEvent(
            id="cfp",
            name="National Championship",
            team1=SportsTeam("Tigers", "NCAA", "LSU", ("#461D7C", "#FDD023")),
            team2=SportsTeam("Tigers", "NCAA", "Clemson", ("#F56600", "#522D80")),
            league="NCAA",
        )
        tree.update_live_events([championship])
        names = [n.name for n in tree.get_children(LIVE_EVENTS_FOLDER_ID)]
        assert names == ["LSU Tigers", "Clemson Tigers", "Both Teams"]
        assert tree.get_node("big_event_cfp_team2_chase").name == "Tigers Chase"

    def test_repeated_event_kept_once(self, tree, big_game):
        """Test passing the same event twice keeps the catalog readable."""
        tree.update_live_events([big_game, big_game])
        assert [e.id for e in tree.live_events] == ["sb"]
        assert tree.get_node(LIVE_EVENTS_FOLDER_ID).metadata["eventCount"] == 1
        assert tree.get_children(None)


class TestValidation:
    """Test build-time hierarchy validation."""

    def test_cycle_raises(self):
        """Test a cyclic parent chain fails the build."""
        tree = _tree_with([_folder("a", "b"), _folder("b", "a")])
        with pytest.raises(InvalidHierarchyError, match="Cycle"):
            tree.get_children(None)

    def test_self_parent_raises(self):
        """Test a node parented to itself fails the build."""
        tree = _tree_with([_folder("a", "a")])
        with pytest.raises(InvalidHierarchyError):
            tree.get_node("a")

    def test_dangling_parent_raises(self):
        """Test a missing parent fails the build."""
        tree = _tree_with([_folder("orphan", "nowhere")])
        with pytest.raises(InvalidHierarchyError, match="missing parent") as exc_info:
            len(tree)
        assert exc_info.value.node_id == "orphan"

    def test_duplicate_id_raises(self):
        """Test a duplicate id fails the build."""
        tree = _tree_with([_folder(CAT_SPORTS, None)])
        with pytest.raises(InvalidHierarchyError, match="Duplicate"):
            tree.all_nodes()

    def test_too_deep_raises(self):
        """Test chains longer than max_depth fail the build."""
        nodes = [_folder("x", CAT_SPORTS), _folder("y", "x"), _folder("z", "y")]
        with pytest.raises(InvalidHierarchyError, match="exceeds depth"):
            _tree_with(nodes, max_depth=2).all_nodes()

    def test_depth_limit_inclusive(self):
        """Test a chain exactly at max_depth is accepted."""
        tree = _tree_with([_folder("x", CAT_SPORTS), _folder("y", "x")], max_depth=2)
        assert [n.id for n in tree.get_ancestors("y")] == [CAT_SPORTS, "x"]
