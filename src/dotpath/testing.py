from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .accessor import reset_default_accessor
from .config import DOTPATH_CONFIG


@dataclass(frozen=True)
class _DotpathConfigSnapshot:
    cache_size: int | None
    verbose: bool
    log_level: str

    @classmethod
    def capture(cls) -> "_DotpathConfigSnapshot":
        return cls(
            cache_size=DOTPATH_CONFIG.cache_size,
            verbose=DOTPATH_CONFIG.verbose,
            log_level=DOTPATH_CONFIG.log_level,
        )

    def restore(self) -> None:
        DOTPATH_CONFIG.cache_size = self.cache_size
        DOTPATH_CONFIG.verbose = self.verbose
        DOTPATH_CONFIG.log_level = self.log_level


@contextmanager
def dotpath_test_env() -> Generator[None, None, None]:
    """Run with default config and a fresh default accessor, then restore."""
    snapshot = _DotpathConfigSnapshot.capture()
    DOTPATH_CONFIG.cache_size = 16
    DOTPATH_CONFIG.verbose = False
    DOTPATH_CONFIG.log_level = "WARNING"
    reset_default_accessor()
    try:
        yield
    finally:
        snapshot.restore()
        reset_default_accessor()


@pytest.fixture()
def dotpath_config() -> Generator[None, None, None]:
    """Isolate DOTPATH_CONFIG and the default accessor for the test."""
    with dotpath_test_env():
        yield
