"""Options shared by the commands.

Declared once as ``Annotated`` aliases so every command spells, documents
and parses them the same way. Path-typed options all go through
:func:`pkgdist.core.paths.path_value`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from pkgdist.core.config import BACKEND_ENV, COLOR_ENV, VERBOSITY_ENV
from pkgdist.core.paths import path_value
from pkgdist.output.console import ColorMode
from pkgdist.output.log import Verbosity

COMMON = "Common options"
DETERMINATION = "Distribution options"

# -----------------------------------------------------------------------------
# Setup (application callback)
# -----------------------------------------------------------------------------

ColorOpt = Annotated[
    ColorMode,
    typer.Option(
        "--color",
        envvar=COLOR_ENV,
        case_sensitive=False,
        help="Colorize the output: auto, always or never.",
    ),
]

VerbosityOpt = Annotated[
    Verbosity,
    typer.Option(
        "--verbosity",
        envvar=VERBOSITY_ENV,
        case_sensitive=False,
        metavar="LEVEL",
        help="Log level: quiet, app, error, warning, info or debug.",
    ),
]

VerboseOpt = Annotated[
    int,
    typer.Option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity: -v for info, -vv for debug. Overrides --verbosity.",
    ),
]

QuietOpt = Annotated[
    bool,
    typer.Option("-q", "--quiet", help="Be quiet. Takes precedence over -v and --verbosity."),
]

PkgDirOpt = Annotated[
    Path | None,
    typer.Option(
        "-C",
        "--pkg-dir",
        parser=path_value,
        metavar="DIR",
        help="Change to directory DIR before doing anything.",
    ),
]

# -----------------------------------------------------------------------------
# Package description and backend
# -----------------------------------------------------------------------------

PkgFileOpt = Annotated[
    Path,
    typer.Option(
        "--pkg-file",
        parser=path_value,
        metavar="FILE",
        rich_help_panel=COMMON,
        help="Use FILE as the package description file.",
    ),
]

IgnorePkgOpt = Annotated[
    bool,
    typer.Option(
        "-i",
        "--ignore-pkg",
        rich_help_panel=COMMON,
        help="Ignore the package description file (uses the static backend).",
    ),
]

BackendOpt = Annotated[
    str,
    typer.Option(
        "--backend",
        envvar=BACKEND_ENV,
        metavar="NAME",
        rich_help_panel=COMMON,
        help="Package backend reading the package description.",
    ),
]

# -----------------------------------------------------------------------------
# Determination overrides
# -----------------------------------------------------------------------------

BuildDirOpt = Annotated[
    str | None,
    typer.Option(
        "--build-dir",
        metavar="DIR",
        rich_help_panel=DETERMINATION,
        help="Build directory. If absent, provided by the package description.",
    ),
]

NameOpt = Annotated[
    str | None,
    typer.Option(
        "--name",
        metavar="NAME",
        rich_help_panel=DETERMINATION,
        help="Package name of the distribution. If absent, provided by the package description.",
    ),
]

CommitOpt = Annotated[
    str | None,
    typer.Option(
        "--commit",
        metavar="COMMIT-ISH",
        rich_help_panel=DETERMINATION,
        help="VCS commit-ish to base the distribution on. "
        "If absent, provided by the package description.",
    ),
]

PkgVersionOpt = Annotated[
    str | None,
    typer.Option(
        "--pkg-version",
        metavar="VERSION",
        rich_help_panel=DETERMINATION,
        help="Version string of the distribution. "
        "If absent, provided by the package description.",
    ),
]

# -----------------------------------------------------------------------------
# Release files
# -----------------------------------------------------------------------------

DistFileOpt = Annotated[
    Path | None,
    typer.Option(
        "--dist-file",
        parser=path_value,
        metavar="FILE",
        help="The distribution archive. If absent, NAME-VERSION.tbz in the build directory.",
    ),
]

DistPkgFileOpt = Annotated[
    Path,
    typer.Option(
        "--dist-pkg-file",
        parser=path_value,
        metavar="FILE",
        help="Package description file in the distribution, "
        "relative to the distribution directory.",
    ),
]

OpamFileOpt = Annotated[
    Path | None,
    typer.Option(
        "--opam-file",
        parser=path_value,
        metavar="FILE",
        help="OPAM file to use. If absent, the first OPAM file of the package "
        "description, or ./opam.",
    ),
]

ChangeLogOpt = Annotated[
    Path | None,
    typer.Option(
        "--change-log",
        parser=path_value,
        metavar="FILE",
        help="Change log to use. If absent, determined from the package description.",
    ),
]

DelegateOpt = Annotated[
    str | None,
    typer.Option(
        "--delegate",
        metavar="TOOL",
        help="Delegate tool to use for publishing. If absent, looked up by the backend.",
    ),
]
