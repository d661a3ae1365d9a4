"""Process-wide defaults for path accessors."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .cache import DEFAULT_CACHE_SIZE
from .errors import DotpathConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_UNBOUNDED_VALUES = {"none", "unbounded"}


class DotpathConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    cache_size: int | None = Field(default=DEFAULT_CACHE_SIZE, ge=0)
    verbose: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DotpathConfig:
        """Build a config from ``DOTPATH_*`` environment variables."""

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw_size = env.get("DOTPATH_CACHE_SIZE")
        if raw_size is not None:
            values["cache_size"] = _parse_cache_size(raw_size)

        raw_verbose = env.get("DOTPATH_VERBOSE")
        if raw_verbose is not None:
            values["verbose"] = _parse_bool("DOTPATH_VERBOSE", raw_verbose)

        raw_level = env.get("DOTPATH_LOG_LEVEL")
        if raw_level is not None:
            values["log_level"] = raw_level

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise DotpathConfigError(f"invalid dotpath configuration: {exc}") from exc


def _parse_cache_size(raw: str) -> int | None:
    text = raw.strip().lower()
    if text in _UNBOUNDED_VALUES:
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise DotpathConfigError(
            f"DOTPATH_CACHE_SIZE must be an integer or 'none', got {raw!r}"
        ) from exc


def _parse_bool(name: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise DotpathConfigError(f"{name} must be a boolean flag, got {raw!r}")


DOTPATH_CONFIG = DotpathConfig.from_env()


__all__ = ["DOTPATH_CONFIG", "DotpathConfig"]
