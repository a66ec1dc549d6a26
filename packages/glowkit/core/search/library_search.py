"""Keyword search over catalog nodes and generated pattern items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from glowkit.core.config.models import SearchConfig
from glowkit.core.generation.models import PatternItem
from glowkit.core.library.models import LibraryNode
from glowkit.core.library.tree import CatalogTree
from glowkit.core.search.keywords import matches_related
from glowkit.core.search.models import LibrarySearchResults

logger = logging.getLogger(__name__)

EXACT_SCORE = 100
PREFIX_SCORE = 50
CONTAINS_SCORE = 25
DESCRIPTION_SCORE = 10
RELATED_SCORE = 15


def score_node(node: LibraryNode, terms: Sequence[str]) -> int:
    """Sum of per-term scores; each term takes the first rule that applies.

    Exact name +100, name prefix +50, name contains +25, description
    contains +10, related keyword +15.
    """
    name = node.name.lower()
    description = (node.description or "").lower()
    score = 0
    for term in terms:
        if name == term:
            score += EXACT_SCORE
        elif name.startswith(term):
            score += PREFIX_SCORE
        elif term in name:
            score += CONTAINS_SCORE
        elif term in description:
            score += DESCRIPTION_SCORE
        elif matches_related(node, term):
            score += RELATED_SCORE
    return score


def relevance_key(name: str, query: str) -> tuple[bool, bool, str]:
    """Sort key: exact match first, then prefix match, then alphabetical."""
    lower = name.lower()
    return (lower != query, not lower.startswith(query), lower)


class LibrarySearch:
    """Searches a ``CatalogTree`` and any supplied pattern items.

    Args:
        tree: Catalog to search.
        config: Result caps per partition.

    Example:
        >>> results = LibrarySearch(CatalogTree()).search("christmas")
        >>> results.folders[0].name
        'Christmas'
    """

    def __init__(self, tree: CatalogTree, config: SearchConfig | None = None) -> None:
        self._tree = tree
        self._config = config or SearchConfig()

    def search(self, query: str, patterns: Iterable[PatternItem] = ()) -> LibrarySearchResults:
        q = query.strip().lower()
        if not q:
            return LibrarySearchResults()
        terms = q.split()

        palettes: list[LibraryNode] = []
        folders: list[LibraryNode] = []
        for node in self._tree.all_nodes():
            if score_node(node, terms) <= 0:
                continue
            if node.is_palette:
                palettes.append(node)
            elif node.is_folder or node.is_category:
                folders.append(node)

        matched_patterns = [p for p in patterns if any(t in p.name.lower() for t in terms)]

        palettes.sort(key=lambda n: relevance_key(n.name, q))
        folders.sort(key=lambda n: relevance_key(n.name, q))
        matched_patterns.sort(key=lambda p: relevance_key(p.name, q))

        results = LibrarySearchResults(
            palettes=tuple(palettes[: self._config.palette_limit]),
            folders=tuple(folders[: self._config.folder_limit]),
            patterns=tuple(matched_patterns[: self._config.pattern_limit]),
        )
        logger.debug(
            f"Search {q!r}: {len(palettes)} palettes, {len(folders)} folders, "
            f"{len(matched_patterns)} patterns before caps"
        )
        return results
