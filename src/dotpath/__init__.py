"""
dotpath: dot-path queries over parsed JSON trees.

This package uses a src-layout. Import the package as `dotpath`.
"""

from importlib.metadata import version

__version__ = version("dotpath")

from .accessor import (
    NOT_FOUND,
    Lookup,
    PathAccessor,
    clear_segment_cache,
    default_accessor,
    explain,
    get_value,
    get_values,
    require_value,
    reset_default_accessor,
    try_get_value,
    try_get_values,
)
from .cache import DEFAULT_CACHE_SIZE, SegmentCache
from .config import DOTPATH_CONFIG, DotpathConfig
from .errors import DotpathConfigError, DotpathError, PathNotFoundError
from .log import configure_logging, get_logger
from .paths import (
    JSONScalar,
    JSONValue,
    LookupFailure,
    Resolution,
    escape_segment,
    join_path,
    resolve,
    split_path,
)

__all__ = [
    "__version__",
    "DEFAULT_CACHE_SIZE",
    "DOTPATH_CONFIG",
    "DotpathConfig",
    "DotpathConfigError",
    "DotpathError",
    "JSONScalar",
    "JSONValue",
    "Lookup",
    "LookupFailure",
    "NOT_FOUND",
    "PathAccessor",
    "PathNotFoundError",
    "Resolution",
    "SegmentCache",
    "clear_segment_cache",
    "configure_logging",
    "default_accessor",
    "escape_segment",
    "explain",
    "get_logger",
    "get_value",
    "get_values",
    "join_path",
    "require_value",
    "reset_default_accessor",
    "resolve",
    "split_path",
    "try_get_value",
    "try_get_values",
]
