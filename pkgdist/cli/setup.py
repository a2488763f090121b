"""Process setup, run once before any command."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pkgdist import __version__
from pkgdist.backend import log as backend_log
from pkgdist.core.config import TOOL_NAME
from pkgdist.core.result import Err, Ok, Result
from pkgdist.output.console import ColorMode, set_color_mode
from pkgdist.output.log import Level, install_reporter, logger, set_level, to_backend_severity

__all__ = ["SetupError", "setup"]


@dataclass(frozen=True, slots=True)
class SetupError:
    """Error when the process environment cannot be set up."""

    message: str
    path: Path | None = None


def setup(color: ColorMode, level: Level | None, cwd: Path | None) -> Result[None, SetupError]:
    """Configure styling and logging, then change to ``cwd`` if given.

    Steps run in a fixed order: styling, backend severity, log level, log
    sink, startup line, working directory. Only the last one can fail.
    """
    console = set_color_mode(color)
    backend_log.set_level(to_backend_severity(level))
    set_level(level)
    install_reporter(console)
    logger.info("%s %s running", TOOL_NAME, __version__)

    if cwd is None:
        return Ok(None)
    try:
        os.chdir(cwd)
    except OSError as e:
        return Err(SetupError(f"{cwd}: {e.strerror or e}", path=cwd))
    logger.debug("working directory: %s", Path.cwd())
    return Ok(None)
