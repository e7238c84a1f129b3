"""
Logging configuration.
"""

import logging

from rich.logging import RichHandler

from app_convert.util.progress import console


def setup_logging(verbose: bool = False) -> None:
    """
    Route log records through rich.

    Args:
        verbose: Log DEBUG records when True, WARNING and above otherwise
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
