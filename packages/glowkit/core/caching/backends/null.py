"""No-op query cache.

Always reports a miss, discards all stores.
"""

from typing import Any


class NullQueryCache:
    """
    No-op cache for callers that disable memoization and for tests.
    """

    def get(self, key: str) -> Any | None:
        """Always returns None."""
        return None

    def put(self, key: str, value: Any) -> None:
        """Discard."""
        pass

    def invalidate(self) -> None:
        """No-op."""
        pass

    def __len__(self) -> int:
        return 0
