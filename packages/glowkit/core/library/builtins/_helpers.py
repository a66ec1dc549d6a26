"""Shared constructors for builtin catalog content."""

from __future__ import annotations

from collections.abc import Sequence

from glowkit.core.library.models import LibraryNode, NamedPalette, NodeType


def named_palette(
    palette_id: str,
    name: str,
    description: str | None,
    colors: tuple[str, ...],
    suggested_effects: tuple[int, ...] | None = None,
    *,
    speed: int | None = None,
    intensity: int | None = None,
) -> NamedPalette:
    return NamedPalette(
        id=palette_id,
        name=name,
        description=description,
        colors=colors,
        suggested_effects=suggested_effects,
        default_speed=speed,
        default_intensity=intensity,
    )


def folder(
    folder_id: str,
    name: str,
    parent_id: str,
    sort_order: int,
    *,
    description: str | None = None,
    image_url: str | None = None,
    colors: Sequence[str] = (),
    metadata: dict | None = None,
) -> LibraryNode:
    return LibraryNode(
        id=folder_id,
        name=name,
        description=description,
        image_url=image_url,
        node_type=NodeType.FOLDER,
        parent_id=parent_id,
        theme_colors=tuple(colors),
        sort_order=sort_order,
        metadata=metadata or {},
    )


def palette_nodes(parent_id: str, palettes: Sequence[NamedPalette]) -> list[LibraryNode]:
    """Convert palettes to nodes, ordered by position."""
    return [p.to_node(parent_id, sort_order=i) for i, p in enumerate(palettes)]
