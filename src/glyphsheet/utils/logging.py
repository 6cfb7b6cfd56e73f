"""Logging utilities.

All loggers live under the ``glyphsheet`` namespace.  :func:`configure_logging`
attaches a single stderr handler to the package logger and may be called any
number of times; later calls only adjust the level.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "glyphsheet"
_FORMAT = "%(levelname)s: %(message)s"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self):  # type: ignore[no-untyped-def, override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for module ``name``."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach the package stderr handler and set the level.

    ``verbose`` selects ``DEBUG``; otherwise ``INFO`` is used.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
