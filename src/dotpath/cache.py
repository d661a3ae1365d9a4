"""Bounded cache of tokenized paths."""

from __future__ import annotations

import threading
from collections import OrderedDict

from .errors import DotpathConfigError
from .paths import split_path

DEFAULT_CACHE_SIZE = 4096


class SegmentCache:
    """Thread-safe least-recently-used map from path string to its segments.

    ``maxsize=None`` never evicts; ``maxsize=0`` stores nothing and tokenizes
    on every call.
    """

    def __init__(self, maxsize: int | None = DEFAULT_CACHE_SIZE) -> None:
        if maxsize is not None and maxsize < 0:
            raise DotpathConfigError(f"cache size must be >= 0, got {maxsize}")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, tuple[str, ...]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, path: str) -> tuple[str, ...]:
        with self._lock:
            segments = self._entries.get(path)
            if segments is not None:
                self._entries.move_to_end(path)
                self.hits += 1
                return segments

            self.misses += 1
            segments = split_path(path)
            if self.maxsize == 0:
                return segments
            self._entries[path] = segments
            if self.maxsize is not None and len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
            return segments

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __repr__(self) -> str:
        return (
            f"SegmentCache(maxsize={self.maxsize}, size={len(self)}, "
            f"hits={self.hits}, misses={self.misses})"
        )


__all__ = ["DEFAULT_CACHE_SIZE", "SegmentCache"]
