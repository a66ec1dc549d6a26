"""Protocol for query-result caches."""

from typing import Any, Protocol


class QueryCache(Protocol):
    """
    Map from query hash to a previously produced result.

    Implementations must be safe to share between threads: ``get`` never
    observes a half-applied ``invalidate``. No eviction is implied; wrap
    a backend when bounded memory is needed.
    """

    def get(self, key: str) -> Any | None:
        """
        Look up a cached result.

        Args:
            key: Query hash (see ``stable_hash``)

        Returns:
            The stored value, or None on miss
        """
        ...

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        ...

    def invalidate(self) -> None:
        """Drop every entry."""
        ...

    def __len__(self) -> int: ...
