"""Builtin architectural downlighting hierarchy.

Per white style: a folder with an all-on palette and sixteen on/off
spacing palettes. A Galaxy & Starlight folder repeats every style with
bright/dim grids at three dim levels plus solid/twinkle grids.
"""

from glowkit.core.library.architectural import WHITE_STYLES, WhiteStyle, galaxy_cells, spacing_cells
from glowkit.core.library.builtins._helpers import folder
from glowkit.core.library.categories import CAT_ARCH
from glowkit.core.library.models import LibraryNode, NodeType
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY

GALAXY_FOLDER_ID = "arch_galaxy"


def _palette(
    node_id: str,
    name: str,
    description: str,
    parent_id: str,
    style: WhiteStyle,
    sort_order: int,
    metadata: dict,
) -> LibraryNode:
    return LibraryNode(
        id=node_id,
        name=name,
        description=description,
        node_type=NodeType.PALETTE,
        parent_id=parent_id,
        theme_colors=style.colors,
        sort_order=sort_order,
        metadata=metadata,
    )


def _spacing_nodes(style: WhiteStyle, sort_order: int) -> list[LibraryNode]:
    folder_id = f"arch_{style.id}"
    nodes = [
        folder(folder_id, style.name, CAT_ARCH, sort_order, description=style.description, colors=style.colors),
        _palette(
            f"{folder_id}_all",
            f"All {style.name}",
            f"All LEDs solid {style.description.lower()}",
            folder_id,
            style,
            0,
            {"suggestedEffects": [0], "defaultSpeed": 0, "defaultIntensity": 128, "grouping": 1, "spacing": 0},
        ),
    ]
    for index, (on, off) in enumerate(spacing_cells(), start=1):
        nodes.append(
            _palette(
                f"{folder_id}_{on}on{off}off",
                f"{on} On {off} Off",
                f"{on} LED{'s' if on > 1 else ''} on, {off} off",
                folder_id,
                style,
                index,
                {"suggestedEffects": [0], "defaultSpeed": 0, "defaultIntensity": 128, "grouping": on, "spacing": off},
            )
        )
    return nodes


def _galaxy_nodes(style: WhiteStyle, sort_order: int) -> list[LibraryNode]:
    style_folder_id = f"{GALAXY_FOLDER_ID}_{style.id}"
    nodes = [
        folder(
            style_folder_id,
            f"{style.name} Stars",
            GALAXY_FOLDER_ID,
            sort_order,
            description=f"Galaxy effect with {style.name.lower()}",
            colors=style.colors,
        )
    ]

    dim_folders_seen: set[int] = set()
    for index, (dim, bright, dimmed) in enumerate(galaxy_cells()):
        dim_folder_id = f"{style_folder_id}_dim{dim.level}"
        if dim.level not in dim_folders_seen:
            dim_folders_seen.add(dim.level)
            nodes.append(
                folder(
                    dim_folder_id,
                    f"Dim at {dim.name}",
                    style_folder_id,
                    index // 16,
                    description=f"Accents dimmed to {dim.level}% brightness",
                    colors=style.colors,
                )
            )
        nodes.append(
            _palette(
                f"{style_folder_id}_{dim.level}_{bright}b{dimmed}d",
                f"{bright} Bright {dimmed} Dim",
                f"{bright} bright, {dimmed} at {dim.level}%",
                dim_folder_id,
                style,
                index % 16,
                {
                    "suggestedEffects": [0, 17, 49],
                    "defaultSpeed": 60,
                    "defaultIntensity": 128,
                    "grouping": bright,
                    "spacing": dimmed,
                    "isGalaxyPattern": True,
                    "dimLevel": dim.level,
                    "brightCount": bright,
                    "dimCount": dimmed,
                },
            )
        )

    twinkle_folder_id = f"{style_folder_id}_twinkle"
    nodes.append(
        folder(
            twinkle_folder_id,
            "Twinkling Stars",
            style_folder_id,
            10,
            description="Soft twinkling star effect",
            colors=style.colors,
        )
    )
    for index, (bright, twinkling) in enumerate(spacing_cells()):
        nodes.append(
            _palette(
                f"{twinkle_folder_id}_{bright}s{twinkling}t",
                f"{bright} Solid {twinkling} Twinkle",
                f"{bright} steady, {twinkling} twinkling",
                twinkle_folder_id,
                style,
                index,
                {
                    "suggestedEffects": [17, 49, 80],
                    "defaultSpeed": 80,
                    "defaultIntensity": 180,
                    "grouping": bright,
                    "spacing": twinkling,
                    "isTwinklePattern": True,
                    "brightCount": bright,
                    "dimCount": twinkling,
                },
            )
        )
    return nodes


def build_architectural_nodes() -> list[LibraryNode]:
    nodes: list[LibraryNode] = []
    for i, style in enumerate(WHITE_STYLES):
        nodes.extend(_spacing_nodes(style, i))

    nodes.append(
        folder(
            GALAXY_FOLDER_ID,
            "Galaxy & Starlight",
            CAT_ARCH,
            100,
            description="Elegant stars with dimmed twinkling accents",
            colors=("#FFFFFF", "#87CEEB"),
        )
    )
    for i, style in enumerate(WHITE_STYLES):
        nodes.extend(_galaxy_nodes(style, i))
    return nodes


# Auto-register on import
NODE_SOURCE_REGISTRY.register(
    "architectural", CAT_ARCH, build_architectural_nodes, "White-temperature spacing and galaxy grids"
)
