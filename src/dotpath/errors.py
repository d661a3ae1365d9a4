from __future__ import annotations

from .paths import LookupFailure, Resolution


class DotpathError(Exception):
    """Base class for dotpath errors."""


class DotpathConfigError(DotpathError, ValueError):
    """Raised when configuration values are invalid."""


class PathNotFoundError(DotpathError, KeyError):
    """Raised by ``require_value`` when a path does not resolve."""

    def __init__(
        self,
        path: str,
        failure: LookupFailure,
        *,
        segment: str | None = None,
        depth: int | None = None,
    ) -> None:
        self.path = path
        self.failure = failure
        self.segment = segment
        self.depth = depth
        super().__init__(path)

    @classmethod
    def from_resolution(cls, path: str, resolution: Resolution) -> PathNotFoundError:
        assert resolution.failure is not None
        return cls(
            path,
            resolution.failure,
            segment=resolution.segment,
            depth=resolution.depth,
        )

    def __str__(self) -> str:
        return (
            f"path {self.path!r} not found: {self.failure.value} "
            f"at segment {self.depth} ({self.segment!r})"
        )


__all__ = ["DotpathConfigError", "DotpathError", "PathNotFoundError"]
