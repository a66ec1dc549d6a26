"""Tests for query caches and the stable query hash."""

import threading

import pytest

from glowkit.core.caching import InMemoryQueryCache, NullQueryCache, QueryCache, stable_hash


class TestStableHash:
    """Test stable_hash()."""

    def test_eight_hex_digits(self):
        """Test the key is an 8-character hex prefix."""
        key = stable_hash("wedding", "party")
        assert len(key) == 8
        int(key, 16)

    def test_deterministic(self):
        """Test equal inputs give equal keys."""
        assert stable_hash("christmas", "elegant") == stable_hash("christmas", "elegant")

    def test_defaults(self):
        """Test missing theme and context use generic/neutral."""
        assert stable_hash(None, None) == stable_hash("generic", "neutral")
        assert stable_hash("", None) == stable_hash("generic", "neutral")

    def test_context_changes_key(self):
        """Test different contexts give different keys."""
        assert stable_hash("wedding", None) != stable_hash("wedding", "party")

    def test_known_value(self):
        """Test the digest is a SHA-256 prefix of 'theme:context'."""
        import hashlib

        assert stable_hash("wedding", "party") == hashlib.sha256(b"wedding:party").hexdigest()[:8]


class TestInMemoryQueryCache:
    """Test InMemoryQueryCache."""

    @pytest.fixture
    def cache(self) -> InMemoryQueryCache:
        return InMemoryQueryCache()

    def test_satisfies_protocol(self, cache):
        """Test the backend can stand in for the protocol."""
        typed: QueryCache = cache
        assert typed.get("missing") is None

    def test_put_get(self, cache):
        """Test stored values are returned."""
        cache.put("abc", ["result"])
        assert cache.get("abc") == ["result"]
        assert "abc" in cache
        assert len(cache) == 1

    def test_put_replaces(self, cache):
        """Test a second put overwrites the entry."""
        cache.put("abc", 1)
        cache.put("abc", 2)
        assert cache.get("abc") == 2
        assert len(cache) == 1

    def test_invalidate(self, cache):
        """Test invalidate drops every entry."""
        cache.put("a", 1)
        cache.put("b", 2)
        cache.invalidate()
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_concurrent_puts(self, cache):
        """Test concurrent writers do not lose entries."""

        def writer(offset: int) -> None:
            for i in range(200):
                cache.put(f"{offset}-{i}", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 800


class TestNullQueryCache:
    """Test NullQueryCache."""

    def test_always_misses(self):
        """Test stores are discarded."""
        cache = NullQueryCache()
        cache.put("abc", 1)
        assert cache.get("abc") is None
        assert len(cache) == 0
        cache.invalidate()
