"""Registry of static node sources for the catalog tree.

Each builtin content module registers a named builder returning a flat
list of nodes. The tree concatenates the builders in registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from glowkit.core.errors import ItemNotFoundError
from glowkit.core.library.models import LibraryNode

logger = logging.getLogger(__name__)

NodeBuilder = Callable[[], list[LibraryNode]]


@dataclass(frozen=True)
class NodeSourceInfo:
    """Lightweight source metadata for listing."""

    name: str
    root_id: str
    description: str


class NodeSourceRegistry:
    """Ordered registry of static node builders.

    Example:
        >>> registry = NodeSourceRegistry()
        >>> registry.register("security", "cat_security", build_security_nodes)
        >>> [info.name for info in registry.list_all()]
        ['security']
    """

    def __init__(self) -> None:
        self._builders: dict[str, NodeBuilder] = {}
        self._info: dict[str, NodeSourceInfo] = {}

    def register(self, name: str, root_id: str, builder: NodeBuilder, description: str = "") -> None:
        """Register a node builder under a unique name.

        Args:
            name: Source name (used to exclude sources from a build).
            root_id: Root category the source's nodes hang under.
            builder: Zero-argument callable returning the source's nodes.
            description: Optional description.

        Raises:
            ValueError: If the name is already registered.
        """
        if name in self._builders:
            raise ValueError(f"Node source already registered: {name}")
        self._builders[name] = builder
        self._info[name] = NodeSourceInfo(name=name, root_id=root_id, description=description)
        logger.debug(f"Registered node source: {name} (under {root_id})")

    def get(self, name: str) -> NodeBuilder:
        """Get builder by name.

        Raises:
            ItemNotFoundError: If the source is not registered.
        """
        if name not in self._builders:
            raise ItemNotFoundError(f"Node source not found: {name}")
        return self._builders[name]

    def has(self, name: str) -> bool:
        return name in self._builders

    def list_all(self) -> list[NodeSourceInfo]:
        """Sources in registration order."""
        return list(self._info.values())

    def build_all(self, exclude: Iterable[str] = ()) -> list[LibraryNode]:
        """Run every builder not excluded and concatenate the results."""
        skipped = set(exclude)
        nodes: list[LibraryNode] = []
        for name, builder in self._builders.items():
            if name in skipped:
                continue
            built = builder()
            logger.debug(f"Node source {name} produced {len(built)} nodes")
            nodes.extend(built)
        return nodes

    def __len__(self) -> int:
        return len(self._builders)


# Global registry, populated by glowkit.core.library.builtins
NODE_SOURCE_REGISTRY = NodeSourceRegistry()
