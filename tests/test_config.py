"""Tests for environment-driven configuration."""

import pytest

from dotpath import DOTPATH_CONFIG, DotpathConfig, DotpathConfigError, PathAccessor


def test_from_env_defaults() -> None:
    """An empty environment should yield the documented defaults."""

    config = DotpathConfig.from_env({})

    assert config.cache_size == 4096
    assert config.verbose is False
    assert config.log_level == "WARNING"


def test_from_env_reads_variables() -> None:
    """DOTPATH_* variables should override every default."""

    config = DotpathConfig.from_env(
        {
            "DOTPATH_CACHE_SIZE": "32",
            "DOTPATH_VERBOSE": "yes",
            "DOTPATH_LOG_LEVEL": "debug",
        }
    )

    assert config.cache_size == 32
    assert config.verbose is True
    assert config.log_level == "DEBUG"


def test_from_env_unbounded_cache() -> None:
    """'none' should select an unbounded cache."""

    assert DotpathConfig.from_env({"DOTPATH_CACHE_SIZE": "None"}).cache_size is None


@pytest.mark.parametrize(
    "environ",
    [
        {"DOTPATH_CACHE_SIZE": "lots"},
        {"DOTPATH_CACHE_SIZE": "-5"},
        {"DOTPATH_VERBOSE": "maybe"},
        {"DOTPATH_LOG_LEVEL": "chatty"},
    ],
)
def test_from_env_rejects_invalid_values(environ: dict[str, str]) -> None:
    """Malformed environment values should raise DotpathConfigError."""

    with pytest.raises(DotpathConfigError):
        DotpathConfig.from_env(environ)


def test_accessor_reads_defaults_from_config(dotpath_config) -> None:
    """A bare PathAccessor should take its settings from DOTPATH_CONFIG."""

    DOTPATH_CONFIG.cache_size = 3
    DOTPATH_CONFIG.verbose = True

    accessor = PathAccessor()

    assert accessor.cache.maxsize == 3
    assert accessor.verbose is True


def test_config_assignment_is_validated(dotpath_config) -> None:
    """Assigning an invalid value to the live config should fail."""

    with pytest.raises(ValueError):
        DOTPATH_CONFIG.cache_size = -1
