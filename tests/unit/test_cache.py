"""Tests for cache utilities."""

from __future__ import annotations

from unittest.mock import patch

from network_bootstrap_operator.utils.cache import (
    get_cached_object,
    invalidate_cache,
    make_cache_key,
    set_cached_object,
)


class TestCacheKey:
    """Test cases for make_cache_key function."""

    def test_make_cache_key(self):
        """Test making cache key."""
        assert make_cache_key("ConfigMap", "ops", "network") == "ConfigMap:ops:network"

    def test_make_cache_key_different_values(self):
        """Test cache keys are unique for different resources."""
        key1 = make_cache_key("ConfigMap", "ns1", "network")
        key2 = make_cache_key("ConfigMap", "ns2", "network")
        key3 = make_cache_key("Ingress", "ns1", "network")

        assert len({key1, key2, key3}) == 3


class TestCacheOperations:
    """Test cases for cache get/set operations."""

    def test_set_and_get_cached_object(self):
        """Test setting and getting cached object."""
        obj = {"name": "network"}

        set_cached_object("ConfigMap:ops:network", obj)

        assert get_cached_object("ConfigMap:ops:network") == obj

    def test_get_nonexistent_object(self):
        """Test getting non-existent cached object returns None."""
        assert get_cached_object("nonexistent:key") is None

    def test_cache_expiration(self):
        """Test that cached objects expire after TTL."""
        with patch("network_bootstrap_operator.utils.cache._cache_ttl", 30.0):
            with patch("network_bootstrap_operator.utils.cache.time.time", return_value=100.0):
                set_cached_object("k", {"v": 1})
            with patch("network_bootstrap_operator.utils.cache.time.time", return_value=120.0):
                assert get_cached_object("k") == {"v": 1}
            with patch("network_bootstrap_operator.utils.cache.time.time", return_value=131.0):
                assert get_cached_object("k") is None

    def test_cache_overwrite(self):
        """Test that setting same key overwrites previous value."""
        set_cached_object("k", {"version": 1})
        set_cached_object("k", {"version": 2})

        assert get_cached_object("k") == {"version": 2}


class TestCacheInvalidation:
    """Test cases for cache invalidation."""

    def test_invalidate_all_cache(self):
        """Test invalidating all cache entries."""
        set_cached_object("key1", {"data": 1})
        set_cached_object("key2", {"data": 2})

        invalidate_cache()

        assert get_cached_object("key1") is None
        assert get_cached_object("key2") is None

    def test_invalidate_cache_with_pattern(self):
        """Test invalidating cache entries matching pattern."""
        set_cached_object("ConfigMap:ops:network", {"name": "network"})
        set_cached_object("Ingress:ops:probe", {"name": "probe"})

        invalidate_cache("ConfigMap")

        assert get_cached_object("ConfigMap:ops:network") is None
        assert get_cached_object("Ingress:ops:probe") == {"name": "probe"}
