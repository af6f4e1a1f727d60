"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/logging_setup.py

Rich logging configuration for applications embedding seqalgebra. The library
only creates named loggers (seqalgebra.*); nothing is installed on import.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def _level_for(verbose: int) -> int:
    if verbose <= 0:
        return logging.WARNING
    return logging.INFO if verbose == 1 else logging.DEBUG


def configure_logging(verbose: int = 0) -> RichHandler:
    """
    Install one Rich handler on stderr for the ``seqalgebra`` logger tree.

    Levels: WARNING (no -v), INFO (-v), DEBUG (-vv).
    """
    logger = logging.getLogger("seqalgebra")
    # Reset handlers from a previous call
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.DEBUG)  # let the handler decide what to emit
    logger.propagate = False

    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=False,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(_level_for(verbose))
    logger.addHandler(handler)
    return handler
