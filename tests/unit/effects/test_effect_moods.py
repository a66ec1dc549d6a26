"""Tests for the legacy mood grouping."""

from glowkit.core.effects import (
    EffectMood,
    EffectMoodCategory,
    category_to_legacy,
    describe_mood,
    effect_ids_for_mood,
    effect_ids_for_moods,
    filter_by_mood,
    legacy_to_categories,
    mood_counts,
    mood_for_effect,
)


class TestMoodTables:
    """Test legacy mood lookups."""

    def test_descriptor(self):
        """Test display info per mood."""
        desc = describe_mood(EffectMood.FESTIVE_FUN)
        assert desc.label == "Party"
        assert desc.color_hex == "#FF6B6B"

    def test_mood_for_effect(self):
        """Test effects resolve to their filed mood."""
        assert mood_for_effect(0) == EffectMood.CALM_ELEGANT
        assert mood_for_effect(1005) == EffectMood.DRAMATIC
        assert mood_for_effect(999) is None

    def test_ids_for_moods_preserve_table_order(self):
        """Test multi-mood lookups follow table order."""
        ids = effect_ids_for_moods([EffectMood.SMOOTH_MOTION, EffectMood.CALM_ELEGANT])
        assert ids == [0, 2, 12, 1007, 3, 6, 10, 40, 96]
        assert effect_ids_for_mood(EffectMood.SUBTLE_MAGIC) == [17, 20, 49, 87]


class TestFiltering:
    """Test filtering and counting."""

    def test_filter_none_keeps_all(self):
        """Test a None mood is a no-op filter."""
        assert filter_by_mood([28, 999, 0], None) == [28, 999, 0]

    def test_filter_by_mood(self):
        """Test only ids filed under the mood survive."""
        assert filter_by_mood([28, 999, 0, 15], EffectMood.FESTIVE_FUN) == [28, 15]

    def test_counts_include_every_mood(self):
        """Test counts report zero for empty moods."""
        counts = mood_counts([0, 2, 17, 999])
        assert counts[EffectMood.CALM_ELEGANT] == 2
        assert counts[EffectMood.SUBTLE_MAGIC] == 1
        assert counts[EffectMood.DRAMATIC] == 0
        assert len(counts) == len(EffectMood)


class TestConversions:
    """Test legacy to tag conversions."""

    def test_every_category_maps_back(self):
        """Test every tag category has a legacy mood."""
        for category in EffectMoodCategory:
            assert isinstance(category_to_legacy(category), EffectMood)

    def test_round_trip_of_primary_category(self):
        """Test a legacy mood's primary category maps back to it."""
        for mood in EffectMood:
            primary = legacy_to_categories(mood)[0]
            assert category_to_legacy(primary) == mood
