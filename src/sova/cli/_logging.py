"""Rich log handler setup for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """
    Route the ``sova`` loggers through a single RichHandler on stderr.

    Safe to call more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("sova")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        markup=False,
        show_path=False,
        show_time=verbose,
        rich_tracebacks=True,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
