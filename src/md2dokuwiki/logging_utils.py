"""Logging setup for the md2dokuwiki command line.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
handlers are installed here, once, by :func:`configure_logging`. Conversion
progress is logged at INFO, skipped rules and RFC title fallbacks at
WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``.

    Raises
    ------
    ValueError
        If ``log_level`` is a name ``logging`` does not know

    """
    if isinstance(log_level, int):
        return log_level

    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_LOG_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT)


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Replace the root logger's handlers with the md2dokuwiki ones.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name (``"INFO"``, ``"debug"``...)
    log_file : str, optional
        Also append log records to this file. A file that cannot be opened
        is reported as a warning and skipped.
    trace_mode : bool, default False
        Prefix records with a timestamp, level and logger name
    stream : TextIO, optional
        Console stream, ``sys.stderr`` by default so that stdout carries
        only converted output and file names

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    _add_handler(root_logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _add_handler(root_logger, file_handler, level, formatter)
            root_logger.debug("Writing log records to %s", log_file)

    return root_logger
