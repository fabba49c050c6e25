# === FILE: seo_doctor/logger.py ===
"""Logging setup for SEO Doctor.

Every module logs through the shared :data:`logger`::

    from seo_doctor.logger import logger
    logger.debug("Fetched %s", url)

Records go to stderr, so the console summary on stdout stays clean, and
optionally to a rotating log file.  The CLI calls :func:`init_logging` once
with the level and file chosen on the command line.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SEODoctor"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

# handlers installed by init_logging; others (e.g. test capture) are left alone
_installed: List[logging.Handler] = []


def _build_handlers(log_file: str | Path | None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = LOG_FORMAT,
) -> logging.Logger:
    """Reset the SEO Doctor logger: new level, stderr handler, optional rotating file.

    Handlers from a previous call are closed, so calling this again never
    duplicates output.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    while _installed:
        old = _installed.pop()
        lg.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        lg.addHandler(handler)
        _installed.append(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOGGER_NAME"]
