"""
Opt-in logging for applications and notebooks using Matrixarith.

Modules of the package log through ``logging.getLogger(__name__)`` and never
attach handlers on import. Everything they emit (matrix products, random
draws) is at DEBUG level, which is why DEBUG is the default here.
"""

from __future__ import annotations

import logging
import pathlib
import sys
from typing import TextIO

PACKAGE_LOGGER = "Matrixarith"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _remove_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.DEBUG,
    log_file: pathlib.Path | str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Send the package records to a stream and, optionally, a file.

    Calling it again replaces (and closes) the handlers of the previous call.

    Parameters
    ----------
    level: int, optional (default=logging.DEBUG)
        Minimum level of the records that are kept.
    log_file: str, or path object, optional
        File to write the records to. It is truncated.
    stream: text stream, optional
        Stream for the console records. If `None`, stdout will be used.

    Returns
    -------
    logging.Logger
        The package logger.

    See Also
    --------
    reset_logging: remove the handlers again.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_handlers(logger)
    logger.setLevel(level)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout if stream is None else stream)
    ]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        f"Logging at {logging.getLevelName(level)}"
        + (f", also to {log_file}" if log_file is not None else "")
    )
    return logger


def reset_logging():
    """Close the handlers added by `setup_logging` and restore the level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_handlers(logger)
    logger.setLevel(logging.NOTSET)
