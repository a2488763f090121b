"""Defaults and environment variable names.

The tool has no configuration file: every setting is a command-line option,
and the few settings that make sense per user or per CI job can also be
given through the environment variables below (the option wins).
"""

from __future__ import annotations

import logging
from pathlib import Path

__all__ = [
    "TOOL_NAME",
    "DEFAULT_PKG_FILE",
    "DEFAULT_BACKEND",
    "ARCHIVE_EXT",
    "COLOR_ENV",
    "VERBOSITY_ENV",
    "BACKEND_ENV",
    "BACKEND_ENTRY_POINT_GROUP",
    "APP_LOG_LEVEL",
]

TOOL_NAME = "pkgdist"

# Package description file, relative to the package root.
DEFAULT_PKG_FILE = Path("pkg") / "pkg.ml"

DEFAULT_BACKEND = "static"

# Extension of distribution archives produced by `pkgdist distrib`.
ARCHIVE_EXT = ".tbz"

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------

COLOR_ENV = "PKGDIST_COLOR"
VERBOSITY_ENV = "PKGDIST_VERBOSITY"
BACKEND_ENV = "PKGDIST_BACKEND"

BACKEND_ENTRY_POINT_GROUP = "pkgdist.backends"

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

# Level of messages addressed to the user rather than to a log reader.
# Reported whenever logging is on at all.
APP_LOG_LEVEL = logging.CRITICAL + 10
