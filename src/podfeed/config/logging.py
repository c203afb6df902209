"""Logging setup for podfeed."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "podfeed"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str | None = None,
) -> logging.Logger:
    """Configure the ``podfeed`` logger.

    Args:
        verbose: Force DEBUG level, which reports every dropped element.
        log_file: Optional file to mirror log records to.
        level: Explicit level name (e.g. from ParserConfig.log_level).

    Returns:
        The configured package logger.
    """
    if verbose:
        resolved = logging.DEBUG
    elif level is not None:
        resolved = logging.getLevelName(level.upper())
    else:
        resolved = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    console_handler.setLevel(resolved)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(resolved)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
