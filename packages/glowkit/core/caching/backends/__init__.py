"""Query cache backends."""

from glowkit.core.caching.backends.memory import InMemoryQueryCache
from glowkit.core.caching.backends.null import NullQueryCache

__all__ = ["InMemoryQueryCache", "NullQueryCache"]
