"""Logging configuration for todoapp.

``-v`` shows INFO and ``-vv`` shows DEBUG. The repository's per-call cache
tracing and the simulated remote's round trips stay at INFO until ``-vvv``.
"""

import logging
import sys
from pathlib import Path

from . import __version__

APP_LOGGER = "todoapp"
TRACE_LOGGERS = (
    "todoapp.repositories.tasks_repository",
    "todoapp.repositories.remote",
)
TRACE_VERBOSITY = 3

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the todoapp loggers.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2=DEBUG, 3+=DEBUG with
            cache and remote tracing)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)

    trace_level = logging.DEBUG if verbose >= TRACE_VERBOSITY else logging.INFO
    for name in TRACE_LOGGERS:
        logging.getLogger(name).setLevel(trace_level)

    if verbose > 0:
        _add_handler(logger, logging.StreamHandler(sys.stderr), level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _add_handler(logger, logging.FileHandler(log_file), level)

    logger.info(
        "todoapp %s starting (level=%s, tracing=%s)",
        __version__,
        logging.getLevelName(level),
        "on" if trace_level == logging.DEBUG else "off",
    )
