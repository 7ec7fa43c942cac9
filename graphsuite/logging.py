"""Logging setup shared by every graphsuite module.

All module loggers live under the ``graphsuite`` logger, which owns the only
handler. Modules call ``get_logger(__name__)``; the command line switches
between normal and debug output with ``set_verbosity``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "graphsuite"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``graphsuite`` logger.

    Only the first call has an effect; ``reset_logging()`` allows another.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to ``LOG_FORMAT``.
        handler: Destination; defaults to a stdout stream handler.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or LOG_FORMAT))
    root.addHandler(handler)
    # pytest's caplog listens on the interpreter root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger first."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def set_verbosity(verbose: bool) -> int:
    """Switch between debug output (``verbose``) and the INFO default.

    Returns:
        The level now in effect.
    """
    level = logging.DEBUG if verbose else logging.INFO
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Drop the package handler so the next setup starts fresh (tests only)."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
