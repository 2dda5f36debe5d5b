"""
Logging configuration for header-cleaner.

Diagnostics go to stderr through rich so they never mix with the report.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAMES = ("scanner", "graph", "config", "cli")


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> None:
    """
    Configure logging with a rich handler on stderr.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to write logs to
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    for name in LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)
