"""Related-keyword associations for library search.

A node picks up every keyword set whose trigger substring appears in its
name; nodes under a sports folder also pick up the game-day set.
"""

from __future__ import annotations

from glowkit.core.library.models import LibraryNode

# name substrings -> associated search words
NAME_ASSOCIATIONS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("christmas", "xmas"), ("holiday", "festive", "winter", "december", "santa", "red", "green")),
    (("halloween",), ("spooky", "scary", "october", "orange", "purple", "ghost", "pumpkin")),
    (("july", "independence"), ("patriotic", "america", "usa", "fireworks", "red", "white", "blue")),
    (("valentine",), ("love", "romantic", "heart", "pink", "red", "february")),
    (("easter",), ("spring", "pastel", "bunny", "egg")),
    (("patrick",), ("irish", "lucky", "shamrock", "green", "march")),
    (("thanksgiving",), ("fall", "autumn", "harvest", "turkey", "november", "orange")),
    (("white", "warm", "cool"), ("elegant", "architectural", "downlight", "accent", "subtle")),
    (("party", "birthday", "rave"), ("fun", "celebration", "festive", "disco", "dance")),
)

SPORTS_PARENT_MARKERS: tuple[str, ...] = ("sports", "nfl", "nba", "mlb", "nhl", "mls")
SPORTS_KEYWORDS: tuple[str, ...] = ("game", "team", "fan", "sport", "gameday")


def related_keywords(node: LibraryNode) -> list[str]:
    name = node.name.lower()
    keywords: list[str] = []
    for triggers, words in NAME_ASSOCIATIONS:
        if any(t in name for t in triggers):
            keywords.extend(words)
    parent = node.parent_id or ""
    if any(marker in parent for marker in SPORTS_PARENT_MARKERS):
        keywords.extend(SPORTS_KEYWORDS)
    return keywords


def matches_related(node: LibraryNode, term: str) -> bool:
    """Containment in either direction against the node's related keywords."""
    return any(kw in term or term in kw for kw in related_keywords(node))
