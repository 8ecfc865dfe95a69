"""Logging setup for jauge.

Console output is terse and level-filtered; the optional log file always
receives DEBUG records, including the worker thread that emitted them so
parallel scenario runs can be untangled afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "jauge"
_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(threadName)s %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(levelname)-8s %(message)s"


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure and return the root jauge logger.

    Args:
        verbose: Log DEBUG to the console (per-repetition detail).
        quiet: Only log WARNING and above to the console.  Ignored if
            *verbose* is True.
        log_file: If provided, also log everything at DEBUG to this path.

    Returns:
        The configured ``jauge`` logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Allow repeated configuration (tests, multiple CLI invocations).
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    if verbose:
        console.setLevel(logging.DEBUG)
    elif quiet:
        console.setLevel(logging.WARNING)
    else:
        console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(fh)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``jauge.<name>`` child logger."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
