"""Logging helpers.

Thin wrapper around the standard library so every module logs under the
``vhdlex`` namespace.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(name)s: %(levelname)s: %(message)s"

_handler: logging.StreamHandler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger for *name*, prefixed with ``vhdlex.`` when needed."""
    if not (name == "vhdlex" or name.startswith("vhdlex.")):
        name = f"vhdlex.{name}"
    return logging.getLogger(name)


def configure(verbose: bool) -> None:
    """Send vhdlex log records to stderr, at DEBUG when *verbose*.

    Safe to call repeatedly: the handler is installed once on the
    ``vhdlex`` logger and each call resets its level and stream. The
    root logger is left alone.
    """
    global _handler
    logger = logging.getLogger("vhdlex")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(_handler)
    _handler.setStream(sys.stderr)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
