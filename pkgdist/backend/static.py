"""Built-in backend that never reads the package description.

Useful when no description-aware backend is installed, or with
``--ignore-pkg``: it only knows the conventional defaults, so the package
name and version have to be given on the command line.
"""

from __future__ import annotations

from pathlib import Path

from pkgdist.core.determine import DistribError
from pkgdist.core.result import Ok, Result

from . import log
from .base import DescriptionBackend, PackageDescription

__all__ = ["StaticBackend", "STATIC_DESCRIPTION"]

STATIC_DESCRIPTION = PackageDescription(
    build_dir="_build",
    commit_ish="HEAD",
    change_logs=(Path("CHANGES.md"),),
)


def _conventional_description(pkg_file: Path) -> Result[PackageDescription, DistribError]:
    log.info("%s: not read, using conventional defaults", pkg_file)
    return Ok(STATIC_DESCRIPTION)


class StaticBackend(DescriptionBackend):
    def __init__(self) -> None:
        super().__init__("static", _conventional_description)
