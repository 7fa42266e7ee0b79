"""
Logging setup for Code Scout.

Diagnostics go to stderr through rich so they never mix with the tables
or JSON a command writes to stdout. Modules log under the ``code_scout``
namespace via ``get_logger(__name__)``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "code_scout"

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level. ``quiet`` wins."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _stderr_handler(verbose: bool) -> logging.Handler:
    # Paths and messages may contain [brackets], so markup stays off
    return RichHandler(
        console=Console(stderr=True),
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        show_time=verbose,
        show_path=verbose,
    )


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the root logger for one CLI run.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        verbose: DEBUG level, with timestamps and source locations
        quiet: ERROR level only
        log_file: Also append plain-text records to this file

    Returns:
        The ``code_scout`` logger
    """
    level = level_for(verbose, quiet)

    handlers = [_stderr_handler(verbose)]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``code_scout`` or a child of it; bare names are prefixed."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
