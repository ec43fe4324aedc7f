"""
Logging configuration for the application.

Log records go to stdout as single pipe-separated lines. Level names
are validated when settings load, so a typo in ``LOG_LEVEL`` fails at
startup instead of quietly logging at INFO.
Never logs request bodies or secrets.
"""

import logging
import sys
from typing import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

# Server loggers that repeat what the error handlers already log.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric level.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS.
    """
    try:
        return LOG_LEVELS[name.strip().upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level '{name}'. Expected one of: {', '.join(LOG_LEVELS)}"
        ) from None


def configure_logging(
    level: str = "INFO", quiet_loggers: Iterable[str] = QUIET_LOGGERS
) -> None:
    """Send all application logging to stdout at ``level``.

    Replaces any handlers already on the root logger, so calling it
    again (one call per ``create_app``) never duplicates output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        quiet_loggers: Loggers capped at WARNING regardless of ``level``.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
