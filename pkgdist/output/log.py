"""Logging levels and the log sink of the CLI.

The CLI logs through the stdlib ``pkgdist`` logger. Its levels are the
:class:`Level` enum, whose ``APP`` member is a custom level above
``CRITICAL`` for messages meant for the user: they are reported whenever
logging is on at all. No level (``None``) turns logging off completely.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import assert_never

from rich.console import Console
from rich.logging import RichHandler

from pkgdist.backend.log import Severity
from pkgdist.core.config import APP_LOG_LEVEL, TOOL_NAME

__all__ = [
    "Level",
    "Verbosity",
    "logger",
    "install_reporter",
    "resolve_level",
    "set_level",
    "to_backend_severity",
]

logger = logging.getLogger(TOOL_NAME)

_OFF = APP_LOG_LEVEL + 10


class Level(str, Enum):
    """Log levels, from most to least important."""

    APP = "app"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    def __str__(self) -> str:
        return self.value

    @property
    def logging_level(self) -> int:
        """Matching stdlib logging level."""
        return {
            Level.APP: APP_LOG_LEVEL,
            Level.ERROR: logging.ERROR,
            Level.WARNING: logging.WARNING,
            Level.INFO: logging.INFO,
            Level.DEBUG: logging.DEBUG,
        }[self]


class Verbosity(str, Enum):
    """Values accepted by ``--verbosity``."""

    QUIET = "quiet"
    APP = "app"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    def __str__(self) -> str:
        return self.value

    @property
    def level(self) -> Level | None:
        if self is Verbosity.QUIET:
            return None
        return Level(self.value)


def to_backend_severity(level: Level | None) -> Severity | None:
    """Map a CLI log level onto the backend severity."""
    match level:
        case None:
            return None
        case Level.APP:
            return Severity.APP
        case Level.ERROR:
            return Severity.ERROR
        case Level.WARNING:
            return Severity.WARNING
        case Level.INFO:
            return Severity.INFO
        case Level.DEBUG:
            return Severity.DEBUG
        case _:
            assert_never(level)


def resolve_level(verbosity: Verbosity, verbose: int = 0, quiet: bool = False) -> Level | None:
    """Combine ``--verbosity`` with the ``-v``/``-q`` shorthands.

    ``-q`` wins over everything, then ``-v`` (once: info, twice or more:
    debug), then ``--verbosity``.
    """
    if quiet:
        return None
    if verbose == 1:
        return Level.INFO
    if verbose > 1:
        return Level.DEBUG
    return verbosity.level


def set_level(level: Level | None) -> None:
    logging.addLevelName(APP_LOG_LEVEL, "APP")
    logger.setLevel(_OFF if level is None else level.logging_level)


class _Reporter(RichHandler):
    """Log sink installed by :func:`install_reporter`."""


def install_reporter(console: Console) -> logging.Handler:
    """Send ``pkgdist`` log records to ``console``, replacing a previous sink."""
    for handler in list(logger.handlers):
        if isinstance(handler, _Reporter):
            logger.removeHandler(handler)
    handler = _Reporter(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return handler
