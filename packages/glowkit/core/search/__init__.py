"""Search domain - keyword search over the catalog and pattern items."""

from glowkit.core.search.keywords import NAME_ASSOCIATIONS, matches_related, related_keywords
from glowkit.core.search.library_search import LibrarySearch, relevance_key, score_node
from glowkit.core.search.models import LibrarySearchResults

__all__ = [
    "LibrarySearch",
    "LibrarySearchResults",
    "NAME_ASSOCIATIONS",
    "matches_related",
    "related_keywords",
    "relevance_key",
    "score_node",
]
