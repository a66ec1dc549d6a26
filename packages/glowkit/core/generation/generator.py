"""Pattern generator - expands palette nodes into named device patterns.

Every public method is a pure function of its inputs: the same node
(id, colors and metadata) always yields the same ordered items.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from glowkit.core.config.models import GenerationConfig
from glowkit.core.effects.catalog import EFFECT_REGISTRY, EffectCatalog
from glowkit.core.generation.colors import RGBWList, hex_to_device_colors, to_device_colors
from glowkit.core.generation.models import (
    PALETTE_COLORS_ONLY,
    PALETTE_DEFAULT,
    DevicePayload,
    PatternItem,
    SegmentPayload,
)
from glowkit.core.generation.naming import creative_name
from glowkit.core.generation.templates import (
    COLORWAY_EFFECT_IDS,
    DUAL_TEAM_BRIGHTNESS,
    DUAL_TEAM_PIXELS,
    GALAXY_BRIGHTNESS,
    GALAXY_CASCADE,
    GALAXY_EFFECTS,
    SPACING_EFFECT_IDS,
    TWINKLE_BRIGHTNESS,
    TWINKLE_EFFECTS,
    TWINKLE_SPEEDS,
)
from glowkit.core.library.architectural import DIM_LEVELS, WhiteStyle, spacing_cells
from glowkit.core.library.categories import CAT_ARCH
from glowkit.core.library.models import LibraryNode
from glowkit.core.utils.math import round_half_up

logger = logging.getLogger(__name__)

RootResolver = Callable[[str], str | None]

HOUSE_SPLIT = "house_split"


def dim_intensity(dim_level: int) -> int:
    """Intensity for a dim percentage (50 -> 128)."""
    return round_half_up(255 * dim_level / 100)


class PatternGenerator:
    """Builds PatternItems from catalog nodes and white styles.

    Args:
        catalog: Effect catalog used for names and speed adjustment.
        config: Generation defaults (brightness, speed, intensity).
        root_resolver: Maps a node id to its root category id, usually
            ``CatalogTree.find_root_category_id``. Without one (or when it
            returns None) the node's parent id is used.

    Example:
        >>> generator = PatternGenerator(root_resolver=tree.find_root_category_id)
        >>> items = generator.generate_for_node(tree.get_node("xmas_candycane"))
        >>> items[0].payload.to_dict()["seg"][0]["pal"]
        5
    """

    def __init__(
        self,
        catalog: EffectCatalog = EFFECT_REGISTRY,
        config: GenerationConfig | None = None,
        root_resolver: RootResolver | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config or GenerationConfig()
        self._root_resolver = root_resolver

    def _category_id(self, node: LibraryNode) -> str:
        root = self._root_resolver(node.id) if self._root_resolver else None
        return root or node.parent_id or node.id

    def _speed(self, node: LibraryNode) -> int:
        return node.int_hint("defaultSpeed", self._config.default_speed)

    def _intensity(self, node: LibraryNode) -> int:
        return node.int_hint("defaultIntensity", self._config.default_intensity)

    @staticmethod
    def _item(item_id: str, name: str, category_id: str, bri: int, segment: SegmentPayload) -> PatternItem:
        return PatternItem(
            id=item_id,
            name=name,
            category_id=category_id,
            payload=DevicePayload(on=True, bri=bri, seg=(segment,)),
        )

    # Node dispatch

    def generate_for_node(self, node: LibraryNode | None) -> list[PatternItem]:
        """All patterns for a node; [] for folders, categories and empty palettes.

        Galaxy and twinkle palettes use their grids, spacing palettes the
        spacing template, merged team designs lead with their featured
        payload. Everything else gets the full colorway template.
        """
        if node is None or not node.is_palette:
            return []
        if node.is_galaxy_pattern:
            return self.galaxy_patterns(node)
        if node.is_twinkle_pattern:
            return self.twinkle_patterns(node)
        if "patternType" in node.metadata:
            featured = PatternItem(
                id=f"gen_{node.id}_featured",
                name=node.name,
                category_id=self._category_id(node),
                payload=self.dual_team_payload(node),
            )
            if node.metadata["patternType"] == HOUSE_SPLIT:
                return [featured]
            return [featured, *self.generate_for_palette(node)]
        if node.has_spacing:
            return self._palette_patterns(node, SPACING_EFFECT_IDS, spacing=True)
        return self.generate_for_palette(node)

    def generate_for_palette(self, node: LibraryNode) -> list[PatternItem]:
        """The colorway template: one item per curated effect.

        Node speed and intensity are clamped into each effect's recommended
        range after the speed multiplier is applied.
        """
        if not node.is_palette:
            return []
        return self._palette_patterns(node, COLORWAY_EFFECT_IDS, spacing=False)

    def _palette_patterns(self, node: LibraryNode, effect_ids: Sequence[int], *, spacing: bool) -> list[PatternItem]:
        col = to_device_colors(node.theme_colors)
        category_id = self._category_id(node)
        base_speed = self._speed(node)
        intensity = self._intensity(node)

        items = []
        for fx in effect_ids:
            name = node.name if spacing and fx == 0 else creative_name(fx, node.name, self._catalog)
            segment = SegmentPayload(
                fx=fx,
                col=col,
                sx=self._catalog.clamp_speed(fx, self._catalog.adjusted_speed(fx, base_speed)),
                ix=self._catalog.clamp_intensity(fx, intensity),
                pal=PALETTE_COLORS_ONLY,
                grp=node.grouping if spacing else None,
                spc=node.spacing if spacing else None,
            )
            items.append(self._item(f"gen_{node.id}_fx_{fx}", name, category_id, self._config.brightness, segment))
        logger.debug(f"Generated {len(items)} patterns for {node.id}")
        return items

    # Galaxy and twinkle palettes

    def galaxy_patterns(self, node: LibraryNode) -> list[PatternItem]:
        """Four galaxy effects plus Star Cascade, dimmed to the node's level."""
        return self._galaxy_items(
            f"gen_{node.id}_galaxy",
            node.name,
            to_device_colors(node.theme_colors),
            self._category_id(node),
            node.bright_count,
            node.dim_count,
            node.dim_level,
        )

    def twinkle_patterns(self, node: LibraryNode) -> list[PatternItem]:
        """Five twinkle effects plus three Twinkle speeds."""
        return self._twinkle_items(
            f"gen_{node.id}_twinkle",
            node.name,
            to_device_colors(node.theme_colors),
            self._category_id(node),
            node.bright_count,
            node.dim_count,
        )

    def _galaxy_items(
        self,
        id_prefix: str,
        label: str,
        col: RGBWList,
        category_id: str,
        bright_count: int,
        dim_count: int,
        dim_level: int,
    ) -> list[PatternItem]:
        intensity = dim_intensity(dim_level)
        items = []
        for effect in (*GALAXY_EFFECTS, GALAXY_CASCADE):
            suffix = "cascade" if effect is GALAXY_CASCADE else str(effect.fx)
            segment = SegmentPayload(
                fx=effect.fx,
                col=col,
                sx=effect.speed,
                ix=intensity,
                grp=bright_count,
                spc=dim_count,
                pal=PALETTE_COLORS_ONLY,
            )
            items.append(
                self._item(f"{id_prefix}_{suffix}", f"{label} - {effect.name}", category_id, GALAXY_BRIGHTNESS, segment)
            )
        return items

    def _twinkle_items(
        self,
        id_prefix: str,
        label: str,
        col: RGBWList,
        category_id: str,
        bright_count: int,
        dim_count: int,
    ) -> list[PatternItem]:
        items = []
        for effect in (*TWINKLE_EFFECTS, *TWINKLE_SPEEDS):
            suffix = f"speed_{effect.speed}" if effect in TWINKLE_SPEEDS else str(effect.fx)
            segment = SegmentPayload(
                fx=effect.fx,
                col=col,
                sx=effect.speed,
                ix=effect.intensity,
                grp=bright_count,
                spc=dim_count,
                pal=PALETTE_COLORS_ONLY,
            )
            items.append(
                self._item(f"{id_prefix}_{suffix}", f"{label} - {effect.name}", category_id, TWINKLE_BRIGHTNESS, segment)
            )
        return items

    # White-style grids

    def spacing_grid(self, style: WhiteStyle) -> list[PatternItem]:
        """'All {style}' plus every 'N On M Off' cell: 17 solid items."""
        col = hex_to_device_colors(style.colors)
        cells = [(f"All {style.name}", "all", 1, 0)]
        cells += [(f"{on} On {off} Off", f"{on}on{off}off", on, off) for on, off in spacing_cells()]
        return [
            self._item(
                f"gen_arch_{style.id}_{suffix}",
                name,
                CAT_ARCH,
                self._config.brightness,
                SegmentPayload(fx=0, col=col, sx=0, ix=128, grp=on, spc=off, pal=PALETTE_COLORS_ONLY),
            )
            for name, suffix, on, off in cells
        ]

    def galaxy_grid(self, style: WhiteStyle) -> list[PatternItem]:
        """'B Bright D Dim' solid stars for every dim level and cell, plus Star Cascade: 49 items."""
        col = hex_to_device_colors(style.colors)
        items = []
        for dim in DIM_LEVELS:
            for bright, dimmed in spacing_cells():
                segment = SegmentPayload(
                    fx=0,
                    col=col,
                    sx=0,
                    ix=dim_intensity(dim.level),
                    grp=bright,
                    spc=dimmed,
                    pal=PALETTE_COLORS_ONLY,
                )
                items.append(
                    self._item(
                        f"gen_arch_galaxy_{style.id}_{dim.level}_{bright}b{dimmed}d",
                        f"{bright} Bright {dimmed} Dim",
                        CAT_ARCH,
                        GALAXY_BRIGHTNESS,
                        segment,
                    )
                )
        cascade = SegmentPayload(
            fx=GALAXY_CASCADE.fx,
            col=col,
            sx=GALAXY_CASCADE.speed,
            ix=dim_intensity(DIM_LEVELS[0].level),
            grp=1,
            spc=1,
            pal=PALETTE_COLORS_ONLY,
        )
        items.append(
            self._item(
                f"gen_arch_galaxy_{style.id}_cascade",
                f"{style.name} {GALAXY_CASCADE.name}",
                CAT_ARCH,
                GALAXY_BRIGHTNESS,
                cascade,
            )
        )
        return items

    def twinkle_grid(self, style: WhiteStyle, bright_count: int = 1, dim_count: int = 1) -> list[PatternItem]:
        """The eight twinkle variants for a white style."""
        return self._twinkle_items(
            f"gen_arch_galaxy_{style.id}_twinkle_{bright_count}s{dim_count}t",
            style.name,
            hex_to_device_colors(style.colors),
            CAT_ARCH,
            bright_count,
            dim_count,
        )

    # Team designs

    def dual_team_payload(
        self,
        node: LibraryNode,
        total_pixels: int = DUAL_TEAM_PIXELS,
        brightness: int = DUAL_TEAM_BRIGHTNESS,
    ) -> DevicePayload:
        """Payload for a merged two-team design.

        House-split designs light the first half of the strip in team 1's
        colors and the second half in team 2's. Other designs use a single
        segment with their first suggested effect, speed and intensity
        clamped to its recommended range.
        """
        if node.metadata.get("patternType") == HOUSE_SPLIT and node.metadata.get("segmentSplit") is True:
            half = total_pixels // 2
            team1 = hex_to_device_colors(node.metadata.get("team1Colors", ()))
            team2 = hex_to_device_colors(node.metadata.get("team2Colors", ()))
            return DevicePayload(
                on=True,
                bri=brightness,
                seg=(
                    SegmentPayload(id=0, start=0, stop=half, fx=0, col=team1),
                    SegmentPayload(id=1, start=half, stop=total_pixels, fx=0, col=team2),
                ),
            )

        effects = node.suggested_effects
        fx = effects[0] if effects else 0
        segment = SegmentPayload(
            fx=fx,
            col=to_device_colors(node.theme_colors),
            sx=self._catalog.clamp_speed(fx, node.default_speed),
            ix=self._catalog.clamp_intensity(fx, node.default_intensity),
            pal=PALETTE_DEFAULT,
        )
        return DevicePayload(on=True, bri=brightness, seg=(segment,))
