"""Tests for pattern generation."""

import pytest

from glowkit.core.config import GenerationConfig
from glowkit.core.effects import EFFECT_REGISTRY
from glowkit.core.generation import (
    COLORWAY_EFFECT_IDS,
    PatternGenerator,
    SPACING_EFFECT_IDS,
    dim_intensity,
)
from glowkit.core.library import WHITE_STYLES, CatalogTree, LibraryNode, LiveEvent, NodeType, find_team


@pytest.fixture
def generator(catalog_tree) -> PatternGenerator:
    return PatternGenerator(root_resolver=catalog_tree.find_root_category_id)


class TestColorwayPatterns:
    """Test the colorway template."""

    def test_one_item_per_template_effect(self, generator, rose_palette):
        """Test every template effect yields an item, in order."""
        items = generator.generate_for_palette(rose_palette)
        assert [i.effect_id for i in items] == list(COLORWAY_EFFECT_IDS)
        assert len(items) == 30

    def test_item_ids_and_names(self, generator, rose_palette):
        """Test ids and creative names."""
        items = {i.effect_id: i for i in generator.generate_for_palette(rose_palette)}
        assert items[0].id == "gen_test_palette_fx_0"
        assert items[0].name == "Classic Rose"
        assert items[12].name == "Fading Roses"
        assert items[28].name == "Rose Chase"

    def test_payload_shape(self, generator, rose_palette):
        """Test payload fields and color conversion."""
        item = generator.generate_for_palette(rose_palette)[1]
        payload = item.payload.to_dict()
        assert payload["on"] is True
        assert payload["bri"] == 200
        seg = payload["seg"][0]
        assert seg["fx"] == 2
        assert seg["pal"] == 5
        assert seg["col"] == [[255, 0, 0, 0], [0, 255, 0, 0], [0, 0, 255, 0]]
        assert seg["sx"] == EFFECT_REGISTRY.adjusted_speed(2, 128)
        assert seg["ix"] == 128
        assert "grp" not in seg
        assert "spc" not in seg

    def test_speed_multiplier_applied(self, generator, rose_palette):
        """Test fast effects are slowed by their multiplier, then clamped to their range."""
        running = next(i for i in generator.generate_for_palette(rose_palette) if i.effect_id == 15)
        assert EFFECT_REGISTRY.adjusted_speed(15, 128) == 51
        assert running.payload.seg[0].sx == 60

    def test_node_hints_clamped_to_effect_range(self, generator, rose_palette):
        """Test out-of-range node speed and intensity are clamped, not passed through."""
        node = rose_palette.model_copy(update={"metadata": {"defaultSpeed": 250, "defaultIntensity": 10}})
        items = {i.effect_id: i.payload.seg[0] for i in generator.generate_for_palette(node)}
        assert items[2].sx == 150
        assert items[17].ix == 100
        assert items[0].ix == 10

    def test_category_is_root(self, generator, catalog_tree):
        """Test items carry the root category of a tree node."""
        items = generator.generate_for_node(catalog_tree.get_node("xmas_candycane"))
        assert {i.category_id for i in items} == {"cat_holiday"}

    def test_category_without_resolver(self, rose_palette):
        """Test the parent id is used when no resolver is given."""
        items = PatternGenerator().generate_for_palette(rose_palette)
        assert items[0].category_id == "cat_holiday"

    def test_config_brightness(self, rose_palette):
        """Test brightness comes from config."""
        generator = PatternGenerator(config=GenerationConfig(brightness=90))
        assert generator.generate_for_palette(rose_palette)[0].payload.bri == 90

    def test_deterministic(self, generator, catalog_tree):
        """Test repeated generation is identical for every palette kind."""
        for node_id in ("xmas_candycane", "arch_k3000_2on3off", "arch_galaxy_k3000_50_1b2d", "team_nfl_chiefs"):
            node = catalog_tree.get_node(node_id)
            assert generator.generate_for_node(node) == generator.generate_for_node(node)


class TestNodeDispatch:
    """Test generate_for_node dispatch."""

    def test_folder_yields_nothing(self, generator, catalog_tree):
        """Test folders and categories are not generable."""
        assert generator.generate_for_node(catalog_tree.get_node("holiday_christmas")) == []
        assert generator.generate_for_node(catalog_tree.get_node("cat_holiday")) == []
        assert generator.generate_for_node(None) == []

    def test_empty_palette_yields_nothing(self, generator):
        """Test palettes without colors are not generable."""
        node = LibraryNode(id="empty", name="Empty", node_type=NodeType.PALETTE)
        assert generator.generate_for_node(node) == []

    def test_spacing_template(self, generator, catalog_tree):
        """Test spacing palettes use the short template with grouping."""
        items = generator.generate_for_node(catalog_tree.get_node("arch_k3000_2on3off"))
        assert [i.effect_id for i in items] == list(SPACING_EFFECT_IDS)
        assert items[0].name == "2 On 3 Off"
        seg = items[0].payload.to_dict()["seg"][0]
        assert seg["grp"] == 2
        assert seg["spc"] == 3
        assert items[0].category_id == "cat_arch"

    def test_galaxy_node(self, generator, catalog_tree):
        """Test galaxy palettes yield four effects and the cascade."""
        items = generator.generate_for_node(catalog_tree.get_node("arch_galaxy_k3000_40_1b2d"))
        assert [i.name for i in items] == [
            "1 Bright 2 Dim - Solid Stars",
            "1 Bright 2 Dim - Breathing Stars",
            "1 Bright 2 Dim - Sparkling Galaxy",
            "1 Bright 2 Dim - Fairy Stars",
            "1 Bright 2 Dim - Star Cascade",
        ]
        assert items[-1].id == "gen_arch_galaxy_k3000_40_1b2d_galaxy_cascade"
        first = items[0].payload
        assert first.bri == 255
        assert first.seg[0].sx == 0
        assert first.seg[0].ix == 102
        assert (first.seg[0].grp, first.seg[0].spc) == (1, 2)
        assert items[1].payload.seg[0].sx == 80
        assert items[-1].payload.seg[0].fx == 12
        assert items[-1].payload.seg[0].sx == 60

    def test_twinkle_node(self, generator, catalog_tree):
        """Test twinkle palettes yield five effects and three speeds."""
        items = generator.generate_for_node(catalog_tree.get_node("arch_galaxy_k3000_twinkle_2s1t"))
        assert len(items) == 8
        assert items[0].id == "gen_arch_galaxy_k3000_twinkle_2s1t_twinkle_17"
        assert items[-1].id == "gen_arch_galaxy_k3000_twinkle_2s1t_twinkle_speed_150"
        assert [i.payload.seg[0].sx for i in items[5:]] == [40, 80, 150]
        assert all(i.payload.bri == 220 for i in items)


class TestStyleGrids:
    """Test per-style combinatorial grids."""

    def test_spacing_grid_has_17(self, generator):
        """Test All plus sixteen on/off cells."""
        items = generator.spacing_grid(WHITE_STYLES[0])
        assert len(items) == 17
        assert items[0].name == "All 2000K"
        assert (items[0].payload.seg[0].grp, items[0].payload.seg[0].spc) == (1, 0)
        assert items[1].name == "1 On 1 Off"
        assert items[-1].name == "4 On 4 Off"

    def test_galaxy_grid_has_49(self, generator):
        """Test three dim levels of sixteen cells plus cascade."""
        items = generator.galaxy_grid(WHITE_STYLES[0])
        assert len(items) == 49
        assert items[0].name == "1 Bright 1 Dim"
        assert items[0].payload.seg[0].ix == 128
        assert items[16].payload.seg[0].ix == 102
        assert items[32].payload.seg[0].ix == 77
        assert items[-1].name == "2000K Star Cascade"

    def test_twinkle_grid_has_8(self, generator):
        """Test five named effects plus three speeds."""
        items = generator.twinkle_grid(WHITE_STYLES[0], bright_count=3, dim_count=2)
        assert len(items) == 8
        assert all(i.payload.seg[0].grp == 3 and i.payload.seg[0].spc == 2 for i in items)

    def test_galaxy_plus_twinkle_per_style(self, generator):
        """Test a style's galaxy section holds 57 generated items."""
        for style in WHITE_STYLES:
            assert len(generator.galaxy_grid(style)) + len(generator.twinkle_grid(style)) == 57

    def test_grid_ids_unique(self, generator):
        """Test grid item ids do not collide."""
        style = WHITE_STYLES[3]
        items = generator.spacing_grid(style) + generator.galaxy_grid(style) + generator.twinkle_grid(style)
        assert len({i.id for i in items}) == len(items)

    def test_dim_intensity(self):
        """Test dim percentages round half up."""
        assert dim_intensity(50) == 128
        assert dim_intensity(40) == 102
        assert dim_intensity(30) == 77


class TestDualTeamPatterns:
    """Test merged two-team designs."""

    @pytest.fixture
    def event_tree(self) -> CatalogTree:
        tree = CatalogTree()
        tree.update_live_events(
            [
                LiveEvent(
                    id="sb",
                    name="Super Bowl",
                    team1=find_team("Chiefs"),
                    team2=find_team("Eagles"),
                    league="NFL",
                )
            ]
        )
        return tree

    def test_house_split_two_segments(self, generator, event_tree):
        """Test house split lights each half in one team's colors."""
        node = event_tree.get_node("big_event_sb_merged_house_split")
        payload = generator.dual_team_payload(node).to_dict()
        assert payload["bri"] == 210
        first, second = payload["seg"]
        assert (first["start"], first["stop"]) == (0, 75)
        assert (second["start"], second["stop"]) == (75, 150)
        assert first["col"][0] == [227, 24, 55, 0]
        assert second["col"][0] == [0, 76, 84, 0]
        assert "sx" not in first

    def test_house_split_node_single_item(self, generator, event_tree):
        """Test house split nodes yield only the split pattern."""
        items = generator.generate_for_node(event_tree.get_node("big_event_sb_merged_house_split"))
        assert len(items) == 1
        assert len(items[0].payload.seg) == 2

    def test_merged_design_leads_with_featured(self, generator, event_tree):
        """Test other merged designs lead with their own effect."""
        items = generator.generate_for_node(event_tree.get_node("big_event_sb_merged_comet"))
        assert items[0].id == "gen_big_event_sb_merged_comet_featured"
        seg = items[0].payload.seg[0]
        assert (seg.fx, seg.sx, seg.ix, seg.pal) == (65, 140, 180, 0)
        assert len(items) == 31

    def test_node_driven_segments_within_effect_ranges(self, generator, event_tree):
        """Test every colorway, spacing and featured segment respects its effect's ranges."""
        checked = 0
        for node in event_tree.palette_nodes():
            if node.is_galaxy_pattern or node.is_twinkle_pattern:
                continue
            for item in generator.generate_for_node(node):
                for seg in item.payload.seg:
                    if seg.sx is None:
                        continue
                    meta = EFFECT_REGISTRY.get(seg.fx)
                    assert meta.min_speed <= seg.sx <= meta.max_speed, item.id
                    assert meta.min_intensity <= seg.ix <= meta.max_intensity, item.id
                    checked += 1
        assert checked > 1000
