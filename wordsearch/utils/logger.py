"""Logging setup shared by the generator modules and the CLI."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger.

    Per-word outcomes of the placement sweep are logged at DEBUG. Unplaced
    words and word-source fallbacks use WARNING and failed puzzle validation
    uses ERROR, so the CLI default of WARNING shows only what affects the
    printed puzzle. Calling this again replaces the previous handler.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for a ``wordsearch`` module, defaulting to the package logger.

    Importing any module through here installs the default handler when the
    root logger has none yet.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
