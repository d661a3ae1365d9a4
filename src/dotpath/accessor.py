"""Single and batch queries of dot-paths against JSON-like trees.

Two query flavours share the same tokenizer and walker:

* lossy (``get_value``/``get_values``): a missing path reads as ``None``, which
  cannot be told apart from a stored JSON ``null``.
* strict (``try_get_value``/``try_get_values``): every result carries an
  explicit ``found`` flag next to the value.

Lookup failures never raise from these four operations. ``explain`` exposes
the specific failure kind and ``require_value`` raises ``PathNotFoundError``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import NamedTuple

from .cache import SegmentCache
from .config import DOTPATH_CONFIG
from .errors import DotpathConfigError, PathNotFoundError
from .log import get_logger
from .paths import JSONValue, LookupFailure, Resolution, resolve


class _Unset:
    """Sentinel for accessor arguments left to DOTPATH_CONFIG."""


_UNSET: _Unset = _Unset()


class Lookup(NamedTuple):
    found: bool
    value: JSONValue


NOT_FOUND = Lookup(False, None)


class PathAccessor:
    """Resolve dot-paths with an owned segment cache.

    Arguments left unset fall back to ``DOTPATH_CONFIG`` at construction time.
    Pass ``cache`` to share one ``SegmentCache`` between accessors.
    """

    def __init__(
        self,
        *,
        cache: SegmentCache | None = None,
        cache_size: int | None | _Unset = _UNSET,
        verbose: bool | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if cache is not None and cache_size is not _UNSET:
            raise ValueError("pass either cache or cache_size, not both")
        if cache is None:
            if isinstance(cache_size, _Unset):
                size = DOTPATH_CONFIG.cache_size
            else:
                size = cache_size
            if size is not None and (isinstance(size, bool) or not isinstance(size, int)):
                raise DotpathConfigError(
                    f"cache_size must be an int or None, got {type(size).__name__}"
                )
            cache = SegmentCache(size)
        self.cache = cache
        self.verbose = DOTPATH_CONFIG.verbose if verbose is None else verbose
        self.logger = logger if logger is not None else get_logger()

    def split(self, path: str) -> tuple[str, ...]:
        return self.cache.get(path)

    def explain(self, root: JSONValue, path: str) -> Resolution:
        if not isinstance(path, str):
            raise TypeError(f"path must be a str, got {type(path).__name__}")
        resolution = resolve(root, self.split(path))
        if not resolution.found:
            self._report(path, resolution)
        return resolution

    def get_value(self, root: JSONValue, path: str) -> JSONValue:
        return self.explain(root, path).value

    def try_get_value(self, root: JSONValue, path: str) -> Lookup:
        resolution = self.explain(root, path)
        if not resolution.found:
            return NOT_FOUND
        return Lookup(True, resolution.value)

    def require_value(self, root: JSONValue, path: str) -> JSONValue:
        resolution = self.explain(root, path)
        if not resolution.found:
            raise PathNotFoundError.from_resolution(path, resolution)
        return resolution.value

    def get_values(
        self, root: JSONValue, paths: Iterable[object]
    ) -> dict[str, JSONValue]:
        return {
            path: self.get_value(root, path) for path in self._string_paths(paths)
        }

    def try_get_values(
        self, root: JSONValue, paths: Iterable[object]
    ) -> dict[str, Lookup]:
        return {
            path: self.try_get_value(root, path)
            for path in self._string_paths(paths)
        }

    def _string_paths(self, paths: Iterable[object]) -> Iterable[str]:
        if isinstance(paths, str):
            raise TypeError("paths must be an iterable of str, not a single str")
        for entry in paths:
            if isinstance(entry, str):
                yield entry
                continue
            self._log(
                "skipping path entry %r: %s: expected str, got %s",
                entry,
                LookupFailure.INVALID_PATH_ENTRY.value,
                type(entry).__name__,
            )

    def _report(self, path: str, resolution: Resolution) -> None:
        assert resolution.failure is not None
        self._log(
            "path %r: %s: %s",
            path,
            resolution.failure.value,
            resolution.describe(),
        )

    def _log(self, msg: str, *args: object) -> None:
        level = logging.WARNING if self.verbose else logging.DEBUG
        self.logger.log(level, msg, *args)

    def __repr__(self) -> str:
        return f"PathAccessor(cache={self.cache!r}, verbose={self.verbose})"


_default_accessor: PathAccessor | None = None
_default_lock = threading.Lock()


def default_accessor() -> PathAccessor:
    """Return the process-wide accessor, creating it from config on first use."""

    global _default_accessor
    with _default_lock:
        if _default_accessor is None:
            _default_accessor = PathAccessor()
        return _default_accessor


def reset_default_accessor() -> None:
    """Drop the process-wide accessor so the next call rebuilds it from config."""

    global _default_accessor
    with _default_lock:
        _default_accessor = None


def clear_segment_cache() -> None:
    default_accessor().cache.clear()


def get_value(root: JSONValue, path: str) -> JSONValue:
    return default_accessor().get_value(root, path)


def get_values(root: JSONValue, paths: Iterable[object]) -> dict[str, JSONValue]:
    return default_accessor().get_values(root, paths)


def try_get_value(root: JSONValue, path: str) -> Lookup:
    return default_accessor().try_get_value(root, path)


def try_get_values(root: JSONValue, paths: Iterable[object]) -> dict[str, Lookup]:
    return default_accessor().try_get_values(root, paths)


def explain(root: JSONValue, path: str) -> Resolution:
    return default_accessor().explain(root, path)


def require_value(root: JSONValue, path: str) -> JSONValue:
    return default_accessor().require_value(root, path)


__all__ = [
    "Lookup",
    "NOT_FOUND",
    "PathAccessor",
    "clear_segment_cache",
    "default_accessor",
    "explain",
    "get_value",
    "get_values",
    "require_value",
    "reset_default_accessor",
    "try_get_value",
    "try_get_values",
]
