"""Shared pytest fixtures for glowkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from glowkit.core.effects import EffectCatalog, EffectMetadata, EffectMoodCategory, EffectVibe, EnergyLevel, MotionType
from glowkit.core.library import CatalogTree, LibraryNode, NodeType

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Catalog Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def catalog_tree() -> CatalogTree:
    """Default catalog tree, shared read-only across tests."""
    return CatalogTree()


@pytest.fixture
def rose_palette() -> LibraryNode:
    """Standalone four-color palette under the holiday category."""
    return LibraryNode(
        id="test_palette",
        name="Rose Glow",
        node_type=NodeType.PALETTE,
        parent_id="cat_holiday",
        theme_colors=("#FF0000", "#00FF00", "#0000FF", "#FFFFFF"),
    )


# ============================================================================
# Effect Fixtures
# ============================================================================


@pytest.fixture
def small_catalog() -> EffectCatalog:
    """Six effects covering each motion group, energy extreme and color behavior.

    1 Solid (calm, static, very low, avoids party)
    2 Breathe (calm/romantic, pulsing, low)
    3 Rainbow (ignores colors, flowing, medium)
    4 Chase (festive/playful, chasing, high, best for party)
    5 Fireworks (festive, explosive, very high)
    6 Chaos (playful, morphing, dynamic)
    """
    catalog = EffectCatalog(speed_multipliers={})
    for item in (
        EffectMetadata(
            id=1,
            name="Solid",
            moods={EffectMoodCategory.CALM},
            vibes={EffectVibe.SERENE},
            motion_type=MotionType.STATIC,
            energy_level=EnergyLevel.VERY_LOW,
            avoid_for_occasions={"party"},
        ),
        EffectMetadata(
            id=2,
            name="Breathe",
            moods={EffectMoodCategory.CALM, EffectMoodCategory.ROMANTIC},
            vibes={EffectVibe.SERENE, EffectVibe.INTIMATE},
            motion_type=MotionType.PULSING,
            energy_level=EnergyLevel.LOW,
            best_for_occasions={"romantic"},
        ),
        EffectMetadata(
            id=3,
            name="Rainbow",
            respects_colors=False,
            moods={EffectMoodCategory.PLAYFUL},
            motion_type=MotionType.FLOWING,
            energy_level=EnergyLevel.MEDIUM,
            best_for_occasions={"pride"},
        ),
        EffectMetadata(
            id=4,
            name="Chase",
            moods={EffectMoodCategory.FESTIVE, EffectMoodCategory.PLAYFUL},
            vibes={EffectVibe.EXCITING},
            motion_type=MotionType.CHASING,
            energy_level=EnergyLevel.HIGH,
            best_for_occasions={"party"},
        ),
        EffectMetadata(
            id=5,
            name="Fireworks",
            moods={EffectMoodCategory.FESTIVE},
            motion_type=MotionType.EXPLOSIVE,
            energy_level=EnergyLevel.VERY_HIGH,
        ),
        EffectMetadata(
            id=6,
            name="Chaos",
            moods={EffectMoodCategory.PLAYFUL},
            motion_type=MotionType.MORPHING,
            energy_level=EnergyLevel.DYNAMIC,
        ),
    ):
        catalog.register(item)
    return catalog
