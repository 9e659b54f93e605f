"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers under the ``pleadgrid`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent; the package logger carries at
      most one stderr handler, rebound to the current ``sys.stderr`` on each
      call.
    - Library modules never configure handlers themselves.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "pleadgrid"
_HANDLER_NAME = "pleadgrid-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install a single stderr handler on the package logger."""

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
