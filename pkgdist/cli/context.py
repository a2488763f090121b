from __future__ import annotations

from dataclasses import dataclass

from pkgdist.backend.base import PackageBackend
from pkgdist.backend.registry import load_backend
from pkgdist.backend.static import StaticBackend
from pkgdist.cli.commands._helpers import exit_on_error
from pkgdist.output.console import ConsoleProtocol, RichConsole
from pkgdist.output.log import logger


@dataclass(frozen=True, slots=True)
class CLIContext:
    backend: PackageBackend
    console: ConsoleProtocol


def build_context(backend: str, *, ignore_pkg: bool = False) -> CLIContext:
    if ignore_pkg:
        logger.debug("ignoring the package description file")
        package_backend: PackageBackend = StaticBackend()
    else:
        package_backend = exit_on_error(load_backend(backend))
    return CLIContext(backend=package_backend, console=RichConsole())
