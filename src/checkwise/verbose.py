"""Logging setup for checkwise."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from checkwise.config import CheckwiseConfig

ROOT_LOGGER_NAME = "checkwise"

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _level_of(config: CheckwiseConfig) -> str:
    return config.log_level.value.upper()


def setup_logger(
    log_file: Path,
    verbose: bool = False,
    logger_name: str = ROOT_LOGGER_NAME,
    level: int | str = logging.DEBUG,
) -> logging.Logger:
    """
    Send checker log records to *log_file*, and to stderr if *verbose*.

    Handlers left by an earlier call are closed and replaced, so running this
    twice in one process does not duplicate lines. The handlers accept every
    record; *level* on the logger decides what gets through.

    Args:
        log_file: Log file, appended to. Parent directories are created.
        verbose: Also echo records to stderr.
        logger_name: Logger to attach to. Checkers log under ``checkwise.*``,
            so the default catches all of them.
        level: Threshold for the logger, as a number or a name like "ERROR".

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.disabled = False
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(log_file, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def configure_logging(
    config: CheckwiseConfig, log_file: Path | None = None, verbose: bool = False
) -> logging.Logger:
    """Apply the configured log level to the ``checkwise`` logger tree.

    With *log_file*, also attach file (and optionally stderr) handlers at that
    level through :func:`setup_logger`.
    """
    if log_file is not None:
        return setup_logger(log_file, verbose=verbose, level=_level_of(config))
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_level_of(config))
    return logger
