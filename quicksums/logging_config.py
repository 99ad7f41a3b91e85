"""Logging setup: stdlib logging routed through Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the quicksums logger and return it.

    WARNING by default so the game screen stays clean; DEBUG with verbose.
    Safe to call more than once.
    """
    logger = logging.getLogger("quicksums")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
