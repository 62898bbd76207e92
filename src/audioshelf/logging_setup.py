# ABOUTME: Logging configuration for the audioshelf CLI.
# ABOUTME: Routes the audioshelf logger through a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the audioshelf package logger.

    Args:
        level: Logging level name or number (DEBUG, INFO, WARNING, ...).

    Returns:
        The configured audioshelf logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("audioshelf")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
