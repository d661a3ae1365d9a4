from __future__ import annotations

import logging

from rich.logging import RichHandler

from .config import DOTPATH_CONFIG

LOGGER_NAME = "dotpath"


class _DotpathRichHandler(RichHandler):
    """Console handler installed by ``configure_logging``."""


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging() -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Safe to call repeatedly; the handler is only added once. The level is
    refreshed from ``DOTPATH_CONFIG.log_level`` on every call.
    """

    logger = get_logger()
    if not any(isinstance(h, _DotpathRichHandler) for h in logger.handlers):
        handler = _DotpathRichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(DOTPATH_CONFIG.log_level)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
