"""Backend severity and reporting.

Backends keep their own severity, independent of the CLI's logging setup, and
consult it before reporting anything. The CLI sets it once at startup from
the user's verbosity choice. ``None`` means no reporting at all.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from pkgdist.core.config import APP_LOG_LEVEL

__all__ = [
    "Severity",
    "level",
    "set_level",
    "enabled",
    "info",
    "debug",
]

_log = logging.getLogger("pkgdist.backend")


class Severity(IntEnum):
    """Backend severities, from most to least important."""

    APP = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def logging_level(self) -> int:
        """Matching stdlib logging level."""
        return {
            Severity.APP: APP_LOG_LEVEL,
            Severity.ERROR: logging.ERROR,
            Severity.WARNING: logging.WARNING,
            Severity.INFO: logging.INFO,
            Severity.DEBUG: logging.DEBUG,
        }[self]


_level: Severity | None = Severity.WARNING


def level() -> Severity | None:
    return _level


def set_level(severity: Severity | None) -> None:
    global _level
    _level = severity


def enabled(severity: Severity) -> bool:
    """True if messages of ``severity`` should be reported."""
    return _level is not None and severity <= _level


def _report(severity: Severity, msg: str, *args: object) -> None:
    if enabled(severity):
        _log.log(severity.logging_level, msg, *args)


def info(msg: str, *args: object) -> None:
    _report(Severity.INFO, msg, *args)


def debug(msg: str, *args: object) -> None:
    _report(Severity.DEBUG, msg, *args)
