"""Tests for the bounded segment cache."""

import threading

import pytest

from dotpath import DotpathConfigError, SegmentCache, split_path


def test_cache_returns_split_segments_and_counts_hits() -> None:
    """Repeated paths should be served from the cache."""

    cache = SegmentCache(maxsize=8)

    first = cache.get(r"a\.b.c")
    second = cache.get(r"a\.b.c")

    assert first == ("a.b", "c")
    assert second is first
    assert cache.misses == 1
    assert cache.hits == 1
    assert r"a\.b.c" in cache


def test_cache_evicts_least_recently_used() -> None:
    """A full cache should drop the path used longest ago."""

    cache = SegmentCache(maxsize=2)

    cache.get("a")
    cache.get("b")
    cache.get("a")
    cache.get("c")

    assert len(cache) == 2
    assert "a" in cache
    assert "c" in cache
    assert "b" not in cache


def test_zero_size_cache_stores_nothing() -> None:
    """A zero-size cache should tokenize on every call."""

    cache = SegmentCache(maxsize=0)

    assert cache.get("a.b") == ("a", "b")
    assert cache.get("a.b") == ("a", "b")
    assert len(cache) == 0
    assert cache.misses == 2


def test_unbounded_cache_never_evicts() -> None:
    """A cache without maxsize should keep every path."""

    cache = SegmentCache(maxsize=None)

    for i in range(100):
        cache.get(f"p.{i}")

    assert len(cache) == 100


def test_clear_resets_entries_and_counters() -> None:
    """Clearing should empty the cache without changing later results."""

    cache = SegmentCache()
    cache.get("x.y")
    cache.get("x.y")

    cache.clear()

    assert len(cache) == 0
    assert cache.hits == 0
    assert cache.misses == 0
    assert cache.get("x.y") == split_path("x.y")


def test_negative_size_is_rejected() -> None:
    """Negative capacities should raise a config error."""

    with pytest.raises(DotpathConfigError, match="cache size"):
        SegmentCache(maxsize=-1)


def test_cache_is_consistent_across_threads() -> None:
    """Concurrent lookups should agree with split_path and respect maxsize."""

    cache = SegmentCache(maxsize=4)
    paths = [f"k{i % 6}.{i % 3}" for i in range(60)]
    errors: list[str] = []

    def worker() -> None:
        for path in paths:
            if cache.get(path) != split_path(path):
                errors.append(path)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(cache) <= 4
    assert cache.hits + cache.misses == 4 * len(paths)
