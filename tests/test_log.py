"""Tests for package logging setup."""

import logging

import dotpath
from dotpath.log import _DotpathRichHandler


def _rich_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, _DotpathRichHandler)]


def test_configure_logging_is_idempotent(dotpath_config) -> None:
    """Calling configure_logging twice should install a single handler."""

    logger = dotpath.get_logger()
    previous_level = logger.level
    before = _rich_handlers(logger)

    try:
        dotpath.configure_logging()
        dotpath.configure_logging()
        assert len(_rich_handlers(logger)) == 1
    finally:
        for handler in _rich_handlers(logger):
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(previous_level)


def test_configure_logging_applies_config_level(dotpath_config) -> None:
    """The package logger level should follow DOTPATH_CONFIG.log_level."""

    logger = dotpath.get_logger()
    previous_level = logger.level
    before = _rich_handlers(logger)
    dotpath.DOTPATH_CONFIG.log_level = "debug"

    try:
        assert dotpath.configure_logging() is logger
        assert logger.level == logging.DEBUG
    finally:
        for handler in _rich_handlers(logger):
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(previous_level)
