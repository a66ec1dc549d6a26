"""Tests for library models, builtin content and runtime builders."""

from datetime import datetime, timedelta

import pytest

from glowkit.core.library import (
    LIVE_EVENTS_FOLDER_ID,
    MY_TEAMS_FOLDER_ID,
    NODE_SOURCE_REGISTRY,
    LibraryNode,
    LiveEvent,
    NamedPalette,
    NodeSourceRegistry,
    NodeType,
    SportsTeam,
    build_followed_team_nodes,
    build_live_event_nodes,
    dual_team_colors,
    find_team,
    resolve_followed_teams,
    search_teams,
    select_upcoming,
)
from glowkit.core.errors import ItemNotFoundError
from glowkit.core.utils.colors import lighten

NOW = datetime(2026, 2, 1, 12, 0)


def _event(event_id: str, days_out: float, audience: float, team1: str = "Chiefs", team2: str = "Eagles") -> LiveEvent:
    return LiveEvent(
        id=event_id,
        name=f"Event {event_id}",
        team1=find_team(team1),
        team2=find_team(team2),
        league="NFL",
        event_time=NOW + timedelta(days=days_out),
        estimated_audience=audience,
    )


class TestLibraryNode:
    """Test LibraryNode parsing and generation hints."""

    def test_hex_colors_parsed(self):
        """Test hex strings become RGB triples."""
        node = LibraryNode(id="p", name="P", node_type=NodeType.PALETTE, theme_colors=("#FF0000", (0, 0, 255)))
        assert node.theme_colors == ((255, 0, 0), (0, 0, 255))

    def test_channel_range_enforced(self):
        """Test channels outside 0..255 are rejected."""
        with pytest.raises(ValueError):
            LibraryNode(id="p", name="P", node_type=NodeType.PALETTE, theme_colors=((256, 0, 0),))

    def test_palette_without_colors_not_generable(self):
        """Test a palette node needs colors to be generable."""
        node = LibraryNode(id="p", name="P", node_type=NodeType.PALETTE)
        assert not node.is_palette

    def test_default_hints(self):
        """Test metadata defaults."""
        node = LibraryNode(id="p", name="P", node_type=NodeType.PALETTE, theme_colors=("#FFFFFF",))
        assert node.suggested_effects == [12, 41, 2, 0]
        assert node.default_speed == 128
        assert node.default_intensity == 128
        assert node.grouping is None
        assert not node.has_spacing
        assert node.dim_level == 50

    def test_metadata_hints(self):
        """Test metadata overrides."""
        node = LibraryNode(
            id="p",
            name="P",
            node_type=NodeType.PALETTE,
            theme_colors=("#FFFFFF",),
            metadata={"suggestedEffects": [2], "defaultSpeed": 40, "grouping": 2, "spacing": 3, "isGalaxyPattern": True},
        )
        assert node.suggested_effects == [2]
        assert node.default_speed == 40
        assert node.has_spacing
        assert node.is_galaxy_pattern
        assert not node.is_twinkle_pattern

    def test_boolean_hint_not_an_int(self):
        """Test booleans are not read as integer hints."""
        node = LibraryNode(id="p", name="P", node_type=NodeType.FOLDER, metadata={"defaultSpeed": True})
        assert node.default_speed == 128

    def test_frozen(self):
        """Test nodes are immutable."""
        node = LibraryNode(id="p", name="P", node_type=NodeType.FOLDER)
        with pytest.raises(ValueError):
            node.name = "Q"

    def test_named_palette_to_node(self):
        """Test palette definitions carry hints into metadata."""
        palette = NamedPalette(id="x", name="X", colors=("#00FF00",), suggested_effects=(2, 0), default_speed=60)
        node = palette.to_node("folder", sort_order=3)
        assert node.parent_id == "folder"
        assert node.sort_order == 3
        assert node.metadata == {"suggestedEffects": [2, 0], "defaultSpeed": 60}


class TestNodeSources:
    """Test the node source registry."""

    def test_builtin_sources_in_build_order(self):
        """Test builtin sources register in build order."""
        names = [info.name for info in NODE_SOURCE_REGISTRY.list_all()]
        assert names == ["sports", "holidays", "seasons", "parties", "movies", "nature", "architectural", "security"]

    def test_duplicate_registration_raises(self):
        """Test duplicate names are rejected."""
        registry = NodeSourceRegistry()
        registry.register("a", "cat_a", list)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("a", "cat_a", list)

    def test_get_unknown_raises(self):
        """Test strict lookup raises ItemNotFoundError."""
        with pytest.raises(ItemNotFoundError):
            NodeSourceRegistry().get("missing")

    def test_build_all_excludes(self):
        """Test excluded sources are skipped."""
        registry = NodeSourceRegistry()
        registry.register("a", "cat_a", lambda: [LibraryNode(id="a1", name="A", node_type=NodeType.FOLDER)])
        registry.register("b", "cat_b", lambda: [LibraryNode(id="b1", name="B", node_type=NodeType.FOLDER)])
        assert [n.id for n in registry.build_all(exclude=["a"])] == ["b1"]
        assert len(registry) == 2


class TestArchitecturalContent:
    """Test the architectural downlighting hierarchy."""

    def test_style_folder_has_17_palettes(self):
        """Test each style folder holds All plus 16 spacing palettes."""
        nodes = NODE_SOURCE_REGISTRY.get("architectural")()
        children = [n for n in nodes if n.parent_id == "arch_k3000"]
        assert len(children) == 17
        assert children[0].name == "All 3000K"
        assert children[1].name == "1 On 1 Off"
        assert children[-1].name == "4 On 4 Off"

    def test_galaxy_palettes_per_dim_level(self):
        """Test each dim-level folder holds 16 galaxy palettes."""
        nodes = NODE_SOURCE_REGISTRY.get("architectural")()
        palettes = [n for n in nodes if n.parent_id == "arch_galaxy_k3000_dim30"]
        assert len(palettes) == 16
        assert all(p.is_galaxy_pattern and p.dim_level == 30 for p in palettes)


class TestTeams:
    """Test team lookup."""

    def test_find_team_by_full_name(self):
        """Test full-name lookup is case-insensitive."""
        team = find_team("kansas city chiefs")
        assert team is not None
        assert team.league == "NFL"

    def test_find_team_by_nickname(self):
        """Test nickname-plus-name lookup."""
        assert find_team("KC Chiefs") == find_team("Chiefs")

    def test_find_unknown_team(self):
        """Test unknown names return None."""
        assert find_team("Springfield Isotopes") is None

    def test_search_teams(self):
        """Test substring search on city."""
        assert any(t.name == "Chiefs" for t in search_teams("kansas"))
        assert search_teams("   ") == []

    def test_team_requires_colors(self):
        """Test a team without colors is rejected."""
        with pytest.raises(ValueError):
            SportsTeam("Nobodies", "NFL", "Nowhere", ())


class TestFollowedTeams:
    """Test followed-team node building."""

    def test_resolve_dedupes(self):
        """Test repeated names resolve to one team."""
        teams = resolve_followed_teams(["Chiefs", "Kansas City Chiefs", "nope"])
        assert [t.name for t in teams] == ["Chiefs"]

    def test_nodes_under_my_teams(self):
        """Test palettes are ordered under the My Teams folder."""
        nodes = build_followed_team_nodes(["Eagles", "Chiefs"])
        assert [n.id for n in nodes] == ["my_team_nfl_eagles", "my_team_nfl_chiefs"]
        assert all(n.parent_id == MY_TEAMS_FOLDER_ID for n in nodes)
        assert [n.sort_order for n in nodes] == [0, 1]


class TestLiveEvents:
    """Test live-event selection and node building."""

    def test_no_events_no_nodes(self):
        """Test an empty event list builds nothing."""
        assert build_live_event_nodes([]) == []

    def test_select_upcoming_by_audience(self):
        """Test selection keeps this week's events, biggest first, capped at two."""
        events = [
            _event("small", 1, 5.0),
            _event("past", -1, 200.0),
            _event("big", 3, 100.0),
            _event("far", 10, 150.0),
            _event("mid", 6, 50.0),
        ]
        assert [e.id for e in select_upcoming(events, NOW)] == ["big", "mid"]

    def test_event_without_time_not_upcoming(self):
        """Test unscheduled events are never upcoming."""
        event = _event("x", 1, 10.0).model_copy(update={"event_time": None})
        assert not event.is_upcoming(NOW)

    def test_primary_event_structure(self):
        """Test one event builds root, two team folders and the merged folder."""
        nodes = build_live_event_nodes([_event("sb", 1, 100.0)])
        by_id = {n.id: n for n in nodes}
        root = by_id[LIVE_EVENTS_FOLDER_ID]
        assert root.sort_order == -1
        assert root.description == "Kansas City Chiefs vs Philadelphia Eagles"
        assert root.metadata["eventCount"] == 1

        team_palettes = [n for n in nodes if n.parent_id == "big_event_sb_team1"]
        assert [n.name for n in team_palettes] == [
            "Solid Chiefs",
            "Chiefs Chase",
            "Chiefs Breathe",
            "Chiefs Running",
            "Chiefs Twinkle",
        ]
        merged = [n for n in nodes if n.parent_id == "big_event_sb_merged"]
        assert len(merged) == 9
        assert merged[0].name == "House Divided"
        assert merged[0].metadata["segmentSplit"] is True
        assert len(nodes) == 23

    def test_secondary_event_gets_subfolder(self):
        """Test later events nest under their own folder."""
        nodes = build_live_event_nodes([_event("a", 1, 100.0), _event("b", 2, 50.0, "Lakers", "Celtics")])
        by_id = {n.id: n for n in nodes}
        assert by_id["big_event_b"].parent_id == LIVE_EVENTS_FOLDER_ID
        assert by_id["big_event_b_team1"].parent_id == "big_event_b"
        assert by_id["big_event_a_team1"].parent_id == LIVE_EVENTS_FOLDER_ID
        assert len(nodes) == 46


class TestDualTeamColors:
    """Test merged color sets."""

    def test_distinct_primaries(self):
        """Test the pair uses both primaries when they differ."""
        t1 = SportsTeam("Reds", "MLB", "A", ("#FF0000", "#FFFFFF"))
        t2 = SportsTeam("Blues", "MLB", "B", ("#0000FF", "#FFFF00"))
        sets = dual_team_colors(t1, t2)
        assert sets["pair"] == [(255, 0, 0), (0, 0, 255)]
        assert sets["trio"] == [(255, 0, 0), (0, 0, 255), (255, 255, 255)]
        assert sets["all"] == [(255, 0, 0), (255, 255, 255), (0, 0, 255), (255, 255, 0)]

    def test_shared_primary_uses_secondaries(self):
        """Test equal primaries lead with the secondaries."""
        t1 = SportsTeam("Reds", "MLB", "A", ("#FF0000", "#FFFFFF"))
        t2 = SportsTeam("Cards", "MLB", "B", ("#FF0000", "#000000"))
        sets = dual_team_colors(t1, t2)
        assert sets["pair"] == [(255, 255, 255), (0, 0, 0)]
        assert sets["trio"] == [(255, 0, 0), (255, 255, 255), (0, 0, 0)]
        assert sets["all"] == [(255, 0, 0), (255, 255, 255), (0, 0, 0)]

    def test_missing_secondary_lightened(self):
        """Test a single-color team gets its primary lightened."""
        t1 = SportsTeam("Reds", "MLB", "A", ("#FF0000",))
        t2 = SportsTeam("Reds2", "MLB", "B", ("#FF0000",))
        sets = dual_team_colors(t1, t2)
        assert sets["pair"] == [lighten((255, 0, 0)), lighten((255, 0, 0))]
