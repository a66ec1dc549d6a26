"""Query-result caching for glowkit.

Match results are memoized by a stable hash of the analyzed query's
theme and context:
- ``QueryCache`` protocol (get / put / invalidate)
- ``InMemoryQueryCache``: unbounded, lock-guarded dict
- ``NullQueryCache``: always misses
"""

from glowkit.core.caching.backends.memory import InMemoryQueryCache
from glowkit.core.caching.backends.null import NullQueryCache
from glowkit.core.caching.hashing import GENERIC_THEME, NEUTRAL_CONTEXT, stable_hash
from glowkit.core.caching.protocols import QueryCache

__all__ = [
    # Core
    "QueryCache",
    "stable_hash",
    "GENERIC_THEME",
    "NEUTRAL_CONTEXT",
    # Backends
    "InMemoryQueryCache",
    "NullQueryCache",
]
