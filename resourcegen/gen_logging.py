"""Logging configuration for the generation pipeline.

Usage in generator modules:
    from .gen_logging import get_logger
    logger = get_logger(__name__)

The root logger name is "resourcegen". Levels are controlled by the CLI.
"""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "resourcegen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger under the resourcegen hierarchy.

    The package prefix is stripped, e.g.
    "resourcegen.templates.filters" -> "resourcegen.filters"
    "some.plugin.hooks"             -> "resourcegen.hooks"
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the resourcegen logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG
        (default)       -> INFO
        --quiet / -q    -> WARNING
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called multiple times
    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_GenFormatter())
    root_logger.addHandler(handler)
    root_logger.propagate = False


class _GenFormatter(logging.Formatter):
    """Emit the message with a short level tag for warnings and errors."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"[{record.levelname.lower()}] {message}"
        return message
