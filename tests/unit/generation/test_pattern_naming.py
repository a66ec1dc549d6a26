"""Tests for creative pattern naming and payload models."""

import pytest

from glowkit.core.generation import (
    DevicePayload,
    SegmentPayload,
    base_name,
    creative_name,
    effect_id_from_payload,
    pluralize,
    to_device_colors,
)


class TestPluralize:
    """Test pluralize()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Rose", "Roses"),
            ("Sky", "Skies"),
            ("Stars", "Stars"),
            ("Holiday", "Holidays"),
            ("Monkey", "Monkeys"),
            ("Toy", "Toys"),
            ("Guy", "Guys"),
            ("Toy Box", "Toy Boxes"),
            ("Blush", "Blushes"),
            ("The Grinch", "The Grinches"),
            ("Boston Red Sox", "Boston Red Soxes"),
            ("Blitz", "Blitzes"),
        ],
    )
    def test_pluralize(self, name, expected):
        """Test common plural forms."""
        assert pluralize(name) == expected


class TestCreativeName:
    """Test creative_name()."""

    def test_suffix_stripped(self):
        """Test Glow/Vibes/Palette suffixes are dropped."""
        assert base_name("Candy Cane Glow") == "Candy Cane"
        assert base_name("Summer Vibes") == "Summer"
        assert base_name("Autumn Palette") == "Autumn"
        assert base_name("Glowing Embers") == "Glowing Embers"

    def test_templates(self):
        """Test mapped effects use their templates."""
        assert creative_name(2, "Ocean") == "Breathing Ocean"
        assert creative_name(12, "Candy Cane Glow") == "Fading Candy Canes"
        assert creative_name(17, "Sky") == "Sky Stars"
        assert creative_name(20, "Sky") == "Sparkling Skies"

    def test_fallback_uses_effect_name(self):
        """Test unmapped effects use the catalog name with the full palette name."""
        assert creative_name(999, "Ocean Glow") == "Ocean Glow - Effect #999"


class TestPayloadModels:
    """Test payload serialization."""

    def test_white_channel_zeroed(self):
        """Test at most three colors, white forced to zero."""
        assert to_device_colors([(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]) == [
            (1, 2, 3, 0),
            (4, 5, 6, 0),
            (7, 8, 9, 0),
        ]

    def test_to_dict_omits_unset(self):
        """Test optional segment fields are omitted when unset."""
        payload = DevicePayload(bri=100, seg=(SegmentPayload(fx=2, col=((1, 2, 3, 0),), sx=10, ix=20, pal=5),))
        assert payload.to_dict() == {
            "on": True,
            "bri": 100,
            "seg": [{"fx": 2, "col": [[1, 2, 3, 0]], "sx": 10, "ix": 20, "pal": 5}],
        }

    def test_too_many_colors_rejected(self):
        """Test segments hold at most three colors."""
        with pytest.raises(ValueError):
            SegmentPayload(fx=0, col=((0, 0, 0, 0),) * 4)

    def test_payload_needs_segment(self):
        """Test a payload without segments is rejected."""
        with pytest.raises(ValueError):
            DevicePayload(seg=())

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"seg": [{"fx": 17}]}, 17),
            ({"seg": {"fx": 2}}, 2),
            ({"seg": []}, None),
            ({"seg": [{"fx": "x"}]}, None),
            ({}, None),
            (None, None),
        ],
    )
    def test_effect_id_from_payload(self, payload, expected):
        """Test effect id extraction from raw payloads."""
        assert effect_id_from_payload(payload) == expected
