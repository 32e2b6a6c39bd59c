"""Logging setup shared by the CLI frontends."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int = 0, console: Console | None = None) -> None:
    """Route ``tilesolver`` log records through Rich.

    ``verbosity`` 0 shows warnings, 1 adds info, 2 and above adds debug.
    Log output goes to stderr so it never mixes with a printed path, and
    stays off the root logger so a host application does not print it twice.
    """
    level = _LEVELS.get(verbosity, logging.DEBUG)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger("tilesolver")
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
