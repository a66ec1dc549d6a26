"""Tests for the effect catalog registry."""

import pytest

from glowkit.core.effects import (
    EFFECT_REGISTRY,
    EffectCatalog,
    EffectInfo,
    EffectMetadata,
    EffectMoodCategory,
    EnergyLevel,
    FxVibe,
    MotionType,
    SelectorMood,
    effect_name,
    is_custom_effect,
    selector_mood_for_category,
    vibe_for_fx,
)
from glowkit.core.effects.enums import ColorBehavior
from glowkit.core.effects.models import CustomEffect
from glowkit.core.errors import ItemNotFoundError


@pytest.fixture
def catalog() -> EffectCatalog:
    """Small catalog with one color-respecting and one rainbow effect."""
    cat = EffectCatalog(speed_multipliers={5: 0.5})
    cat.register(
        EffectMetadata(
            id=5,
            name="Chase",
            motion_type=MotionType.CHASING,
            energy_level=EnergyLevel.HIGH,
            moods={EffectMoodCategory.FESTIVE},
            min_speed=50,
            max_speed=200,
            default_speed=100,
            best_for_occasions={"party"},
            avoid_for_occasions={"sleep"},
        )
    )
    cat.register(
        EffectMetadata(
            id=9,
            name="Rainbow",
            respects_colors=False,
            energy_level=EnergyLevel.MEDIUM,
            moods={EffectMoodCategory.PLAYFUL},
        )
    )
    return cat


class TestEffectMetadata:
    """Test EffectMetadata model."""

    def test_defaults_are_permissive(self):
        """Test minimal metadata spans the full parameter range."""
        meta = EffectMetadata(id=1, name="X")
        assert meta.respects_colors is True
        assert (meta.min_speed, meta.max_speed) == (0, 255)
        assert meta.moods == frozenset()

    def test_default_outside_range_rejected(self):
        """Test default speed must sit inside [min, max]."""
        with pytest.raises(ValueError):
            EffectMetadata(id=1, name="X", min_speed=50, max_speed=100, default_speed=10)

    def test_frozen(self):
        """Test metadata is immutable."""
        meta = EffectMetadata(id=1, name="X")
        with pytest.raises(ValueError):
            meta.name = "Y"

    def test_custom_flag(self):
        """Test ids >= 1000 are custom."""
        assert EffectMetadata(id=1001, name="Rising Tide").is_custom
        assert not EffectMetadata(id=17, name="Twinkle").is_custom
        assert is_custom_effect(1000)
        assert not is_custom_effect(999)

    def test_custom_effect_id_floor(self):
        """Test custom effects must use ids >= 1000."""
        with pytest.raises(ValueError):
            CustomEffect(id=12, name="Bad", description="", category="Wave")


class TestRegistration:
    """Test EffectCatalog registration."""

    def test_duplicate_rejected(self, catalog):
        """Test registering the same id twice raises."""
        with pytest.raises(ValueError, match="already registered"):
            catalog.register(EffectMetadata(id=5, name="Again"))

    def test_duplicate_info_rejected(self, catalog):
        """Test names-table entries are unique per id."""
        info = EffectInfo(id=5, name="Chase", category="Chase")
        catalog.register_info(info)
        with pytest.raises(ValueError):
            catalog.register_info(info)

    def test_len_and_contains(self, catalog):
        """Test container protocol reflects registered metadata."""
        assert len(catalog) == 2
        assert 5 in catalog
        assert 6 not in catalog
        assert catalog.list_ids() == [5, 9]


class TestLookup:
    """Test lenient and strict lookups."""

    def test_get_known(self, catalog):
        """Test get returns registered metadata."""
        assert catalog.get(5).name == "Chase"

    def test_get_unknown_returns_generic(self, catalog):
        """Test unknown ids resolve to a permissive default."""
        meta = catalog.get(999)
        assert meta.id == 999
        assert meta.name == "Effect #999"
        assert meta.respects_colors is True
        assert meta.moods == frozenset()
        assert meta.max_speed == 255

    def test_generic_uses_names_table_color_behavior(self, catalog):
        """Test unregistered metadata inherits color behavior from the names table."""
        catalog.register_info(
            EffectInfo(id=42, name="Fireworks", category="Fireworks", color_behavior=ColorBehavior.USES_PALETTE)
        )
        assert catalog.get(42).name == "Fireworks"
        assert catalog.respects_colors(42) is False

    def test_lookup_and_require(self, catalog):
        """Test strict forms report unknown ids."""
        assert catalog.lookup(999) is None
        assert catalog.require(5).id == 5
        with pytest.raises(ItemNotFoundError):
            catalog.require(999)

    def test_filter_in_id_order(self, catalog):
        """Test filter keeps id order."""
        result = catalog.filter(lambda e: e.energy_level != EnergyLevel.LOW)
        assert [e.id for e in result] == [5, 9]


class TestNames:
    """Test display name resolution."""

    def test_names_table_wins_over_metadata(self):
        """Test the device names table takes precedence."""
        assert EFFECT_REGISTRY.get(41).name == "Running Dual"
        assert EFFECT_REGISTRY.name(41) == "Lighthouse"

    def test_custom_effect_name(self):
        """Test custom effects resolve through the custom table."""
        assert effect_name(1004) == "Pulse Gather"
        assert effect_name(1007) == "Ocean Swell"

    def test_unknown_custom_id(self):
        """Test unregistered custom ids get a custom placeholder."""
        assert effect_name(1099) == "Custom Effect #1099"

    def test_unknown_standard_id(self):
        """Test unregistered standard ids get a numbered placeholder."""
        assert effect_name(999) == "Effect #999"


class TestParameters:
    """Test speed and intensity helpers."""

    def test_clamp_speed(self, catalog):
        """Test speeds are clamped into the recommended range."""
        assert catalog.clamp_speed(5, 10) == 50
        assert catalog.clamp_speed(5, 250) == 200
        assert catalog.clamp_speed(5, 120) == 120

    def test_clamp_unknown_is_passthrough(self, catalog):
        """Test unknown effects accept any in-range value."""
        assert catalog.clamp_intensity(999, 240) == 240

    def test_adjusted_speed_applies_multiplier(self, catalog):
        """Test multiplier scaling rounds half away from zero."""
        assert catalog.adjusted_speed(5, 101) == 51
        assert catalog.adjusted_speed(9, 128) == 128

    def test_adjusted_speed_floor_is_one(self, catalog):
        """Test the adjusted speed never drops below 1."""
        assert catalog.adjusted_speed(5, 0) == 1

    def test_builtin_multipliers(self):
        """Test builtin multiplier table values."""
        assert EFFECT_REGISTRY.adjusted_speed(15, 128) == 51
        assert EFFECT_REGISTRY.adjusted_speed(17, 85) == 43
        assert EFFECT_REGISTRY.adjusted_speed(0, 128) == 128


class TestQueries:
    """Test metadata queries."""

    def test_color_respecting_split(self, catalog):
        """Test color-respecting and overriding partitions."""
        assert [e.id for e in catalog.color_respecting()] == [5]
        assert [e.id for e in catalog.color_overriding()] == [9]

    def test_for_mood(self, catalog):
        """Test filtering by one or several moods."""
        assert [e.id for e in catalog.for_mood(EffectMoodCategory.FESTIVE)] == [5]
        ids = [e.id for e in catalog.for_any_mood([EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL])]
        assert ids == [5, 9]

    def test_for_energy_range(self, catalog):
        """Test inclusive energy range filter."""
        result = catalog.for_energy_range(EnergyLevel.LOW, EnergyLevel.MEDIUM)
        assert [e.id for e in result] == [9]

    def test_occasions(self, catalog):
        """Test best-for and avoid-for occasion lookups."""
        assert [e.id for e in catalog.for_occasion("party")] == [5]
        assert catalog.should_avoid(5, "sleep")
        assert not catalog.should_avoid(999, "sleep")

    def test_builtin_solid_is_static(self):
        """Test Solid is registered as a static very-low energy effect."""
        solid = EFFECT_REGISTRY.get(0)
        assert solid.motion_type == MotionType.STATIC
        assert solid.energy_level == EnergyLevel.VERY_LOW
        assert EFFECT_REGISTRY.should_avoid(0, "party")


class TestRecommendations:
    """Test scenario recommendations."""

    def test_alias_resolves(self):
        """Test aliases share the canonical scenario list."""
        assert EFFECT_REGISTRY.recommended_ids("christmas") == [13, 17, 80, 43, 49]
        assert EFFECT_REGISTRY.recommended_ids("Holiday") == [13, 17, 80, 43, 49]

    def test_unknown_scenario_uses_default(self):
        """Test unknown scenarios fall back to the default list."""
        assert EFFECT_REGISTRY.recommended_ids("unheard-of") == [0, 2, 17, 13, 28]

    def test_rainbow_scenario_never_filtered(self):
        """Test rainbow scenarios keep color-overriding effects."""
        ids = EFFECT_REGISTRY.recommended_ids("pride")
        assert ids == [9, 10, 63, 30, 14]
        assert not any(EFFECT_REGISTRY.respects_colors(i) for i in ids)

    def test_filtering_drops_unregistered_and_overriding(self, catalog):
        """Test non-rainbow scenarios keep registered color-respecting ids only."""
        assert catalog.recommended_ids("default") == []
        assert catalog.recommended_ids("default", color_respect_required=False) == [0, 2, 17, 13, 28]


class TestGrouping:
    """Test vibe and selector mood grouping."""

    def test_vibe_for_fx(self):
        """Test grid vibe label lookup with Motion default."""
        assert vibe_for_fx(0) == FxVibe.ELEGANT
        assert vibe_for_fx(17) == FxVibe.ENERGY
        assert vibe_for_fx(28) == FxVibe.MOTION
        assert vibe_for_fx(500) == FxVibe.MOTION

    def test_selector_mood(self):
        """Test names-table categories map to picker moods."""
        assert selector_mood_for_category("Chase") == SelectorMood.PARTY
        assert selector_mood_for_category("Unknown") == SelectorMood.CALM
        assert EFFECT_REGISTRY.selector_mood(17) == SelectorMood.MAGICAL
        assert EFFECT_REGISTRY.selector_mood(5000) is None

    def test_standard_ids_exclude_matrix_and_audio(self):
        """Test standard ids skip 2D and audio-reactive effects."""
        standard = EFFECT_REGISTRY.standard_ids()
        assert 0 in standard
        assert 118 not in standard
        assert 163 not in standard
