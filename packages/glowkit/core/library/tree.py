"""Catalog tree - memoized, validated hierarchy of library nodes.

The tree concatenates root categories, runtime content (live events and
followed teams) and every registered static source into one flat list,
then indexes it by id and by parent id. The snapshot is built lazily on
first read and swapped in whole; updates to the runtime inputs drop it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from glowkit.core.config.models import CatalogConfig
from glowkit.core.errors import InvalidHierarchyError
from glowkit.core.library.categories import CAT_SECURITY, my_teams_folder, root_categories
from glowkit.core.library.dynamic import build_followed_team_nodes, build_live_event_nodes
from glowkit.core.library.models import LibraryNode, LiveEvent
from glowkit.core.library.sources import NODE_SOURCE_REGISTRY, NodeSourceRegistry
from glowkit.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

InvalidationListener = Callable[[], None]


@dataclass(frozen=True)
class _Snapshot:
    nodes: tuple[LibraryNode, ...]
    by_id: MappingProxyType[str, LibraryNode]
    children: MappingProxyType[str | None, tuple[LibraryNode, ...]]
    ancestors: MappingProxyType[str, tuple[str, ...]] = field(repr=False)


class CatalogTree:
    """Hierarchical node store with lazy build and explicit invalidation.

    Reads never observe a partially built snapshot: the snapshot is
    created outside the shared state and published under the lock.

    Args:
        config: Catalog build options (depth limit, security category).
        sources: Static node sources, concatenated in registration order.

    Example:
        >>> tree = CatalogTree()
        >>> [n.name for n in tree.get_children(None)][:2]
        ['Game Day Fan Zone', 'Holidays']
        >>> [n.id for n in tree.get_ancestors("team_nfl_chiefs")]
        ['cat_sports', 'league_nfl']
    """

    def __init__(
        self,
        config: CatalogConfig | None = None,
        sources: NodeSourceRegistry = NODE_SOURCE_REGISTRY,
    ) -> None:
        self._config = config or CatalogConfig()
        self._sources = sources
        self._lock = threading.RLock()
        self._snapshot: _Snapshot | None = None
        self._live_events: tuple[LiveEvent, ...] = ()
        self._followed_teams: tuple[str, ...] = ()
        self._listeners: list[InvalidationListener] = []

    # Snapshot management

    def _current(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._build()
            return self._snapshot

    @log_performance
    def _build(self) -> _Snapshot:
        nodes = self._collect_nodes()

        by_id: dict[str, LibraryNode] = {}
        for node in nodes:
            if node.id in by_id:
                raise InvalidHierarchyError(f"Duplicate node id: {node.id}", node_id=node.id)
            by_id[node.id] = node

        children: dict[str | None, list[LibraryNode]] = {}
        for node in nodes:
            children.setdefault(node.parent_id, []).append(node)

        ancestors = self._validate_chains(by_id)

        logger.debug(f"Built catalog tree: {len(nodes)} nodes, {len(children.get(None, []))} roots")
        return _Snapshot(
            nodes=tuple(nodes),
            by_id=MappingProxyType(by_id),
            # sorted() is stable, so ties keep insertion order
            children=MappingProxyType(
                {parent: tuple(sorted(kids, key=lambda n: n.sort_order)) for parent, kids in children.items()}
            ),
            ancestors=MappingProxyType(ancestors),
        )

    def _collect_nodes(self) -> list[LibraryNode]:
        excluded_roots: frozenset[str] = frozenset()
        excluded_sources: tuple[str, ...] = ()
        if not self._config.include_security:
            excluded_roots = frozenset({CAT_SECURITY})
            excluded_sources = ("security",)

        nodes = root_categories(exclude=excluded_roots)
        nodes.extend(build_live_event_nodes(self._live_events))
        nodes.append(my_teams_folder())
        nodes.extend(build_followed_team_nodes(self._followed_teams))
        nodes.extend(self._sources.build_all(exclude=excluded_sources))
        return nodes

    def _validate_chains(self, by_id: dict[str, LibraryNode]) -> dict[str, tuple[str, ...]]:
        """Walk every parent chain once; returns root-to-parent id chains.

        Raises:
            InvalidHierarchyError: On a dangling parent, a cycle, or a
                chain longer than the configured depth.
        """
        max_depth = self._config.max_depth
        resolved: dict[str, tuple[str, ...]] = {}

        for node_id in by_id:
            path: list[str] = []
            visited: set[str] = set()
            current = by_id[node_id]
            while current.parent_id is not None and current.id not in resolved:
                if current.id in visited:
                    raise InvalidHierarchyError(
                        f"Cycle in parent chain of {node_id}", node_id=node_id, chain=tuple(path)
                    )
                visited.add(current.id)
                path.append(current.id)
                if len(path) > max_depth:
                    raise InvalidHierarchyError(
                        f"Parent chain of {node_id} exceeds depth {max_depth}",
                        node_id=node_id,
                        chain=tuple(path),
                    )
                parent = by_id.get(current.parent_id)
                if parent is None:
                    raise InvalidHierarchyError(
                        f"Node {current.id} references missing parent {current.parent_id}",
                        node_id=current.id,
                        chain=tuple(path),
                    )
                current = parent

            # current is now a root or a node whose chain is known
            chain = resolved.setdefault(current.id, ())
            for walked in reversed(path):
                chain = (*chain, by_id[walked].parent_id)  # type: ignore[arg-type]
                if len(chain) > max_depth:
                    raise InvalidHierarchyError(
                        f"Parent chain of {walked} exceeds depth {max_depth}", node_id=walked, chain=chain
                    )
                resolved[walked] = chain
        return resolved

    def invalidate(self) -> None:
        """Drop the snapshot and notify listeners."""
        with self._lock:
            self._snapshot = None
            listeners = list(self._listeners)
        logger.debug("Catalog tree invalidated")
        for listener in listeners:
            listener()

    def add_invalidation_listener(self, listener: InvalidationListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    # Runtime content

    def update_live_events(self, events: Sequence[LiveEvent]) -> None:
        """Replace the live events shown under Game Day Fan Zone (first is primary).

        Repeated event ids keep their first occurrence.
        """
        unique: dict[str, LiveEvent] = {}
        for event in events:
            unique.setdefault(event.id, event)
        with self._lock:
            self._live_events = tuple(unique.values())
        logger.debug(f"Live events updated: {list(unique)}")
        self.invalidate()

    def clear_live_events(self) -> None:
        self.update_live_events(())

    def update_followed_teams(self, names: Iterable[str]) -> None:
        """Replace the followed team names shown under My Teams."""
        with self._lock:
            self._followed_teams = tuple(names)
        logger.debug(f"Followed teams updated: {list(self._followed_teams)}")
        self.invalidate()

    def clear_followed_teams(self) -> None:
        self.update_followed_teams(())

    @property
    def live_events(self) -> tuple[LiveEvent, ...]:
        return self._live_events

    @property
    def followed_teams(self) -> tuple[str, ...]:
        return self._followed_teams

    # Reads

    def get_node(self, node_id: str) -> LibraryNode | None:
        return self._current().by_id.get(node_id)

    def get_children(self, parent_id: str | None) -> list[LibraryNode]:
        """Children sorted by sort_order; None lists the root categories."""
        return list(self._current().children.get(parent_id, ()))

    def has_children(self, node_id: str) -> bool:
        return bool(self._current().children.get(node_id))

    def get_ancestors(self, node_id: str) -> list[LibraryNode]:
        """Breadcrumb from the root category down to the node's parent.

        Returns [] for roots and unknown ids.
        """
        snapshot = self._current()
        chain = snapshot.ancestors.get(node_id, ())
        return [snapshot.by_id[ancestor_id] for ancestor_id in chain]

    def find_root_category_id(self, node_id: str) -> str | None:
        """Root category id for a node (the node itself when it is a root)."""
        snapshot = self._current()
        if node_id not in snapshot.by_id:
            return None
        chain = snapshot.ancestors.get(node_id, ())
        return chain[0] if chain else node_id

    def all_nodes(self) -> list[LibraryNode]:
        return list(self._current().nodes)

    def palette_nodes(self) -> list[LibraryNode]:
        """Generable palette nodes in build order."""
        return [n for n in self._current().nodes if n.is_palette]

    def __len__(self) -> int:
        return len(self._current().nodes)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and node_id in self._current().by_id
