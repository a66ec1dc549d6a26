"""Exception taxonomy for glowkit.

Ordinary "not found" and "no match" outcomes are never raised: lookups
resolve to safe defaults, empty collections or None. Exceptions are
reserved for corrupted static data and strict registry access.
"""

from __future__ import annotations


class GlowkitError(Exception):
    """Base class for all glowkit errors."""

    pass


class InvalidHierarchyError(GlowkitError):
    """Raised when the catalog tree cannot be built from its node lists.

    Covers duplicate node ids, parents that do not exist, cyclic parent
    chains and chains deeper than the configured limit. Always fatal at
    build time.

    Attributes:
        node_id: Node whose parent chain failed validation.
        chain: Node ids walked before the failure was detected.
    """

    def __init__(self, message: str, *, node_id: str | None = None, chain: tuple[str, ...] = ()):
        super().__init__(message)
        self.node_id = node_id
        self.chain = chain


class ItemNotFoundError(KeyError):
    """Raised by strict registry lookups when an item is not registered."""

    pass


__all__ = [
    "GlowkitError",
    "InvalidHierarchyError",
    "ItemNotFoundError",
]
