"""Package backend contract.

A package backend owns everything the core does not: reading the package
description file, querying the VCS, building archives. The core talks to it
only through :class:`PackageBackend`.

:class:`DescriptionBackend` implements the usual fallback order on top of a
description reader, so most backends only have to provide the reader:

1. a value given on the command line wins;
2. otherwise the value comes from the package description;
3. otherwise the determination fails, naming the option to use.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TypeAlias

from pkgdist.core.config import ARCHIVE_EXT
from pkgdist.core.determine import Determination, DeterminationRequest, DistribError
from pkgdist.core.result import Err, Ok, Result

from . import log

__all__ = [
    "PackageBackend",
    "PackageDescription",
    "DescriptionReader",
    "DescriptionBackend",
    "archive_path",
    "DEFAULT_OPAM_FILE",
]

DEFAULT_OPAM_FILE = Path("opam")

# Option supplying each determination field, for error hints.
_FIELD_OPTIONS = {
    "build_dir": ("build directory", "--build-dir"),
    "name": ("package name", "--name"),
    "commit_ish": ("commit-ish", "--commit"),
    "version": ("package version", "--pkg-version"),
}


class PackageBackend(Protocol):
    """What the core needs from a package backend."""

    name: str

    def determine(self, request: DeterminationRequest) -> Result[Determination, DistribError]:
        """Resolve every unset field of ``request``."""
        ...

    def archive_path(self, det: Determination) -> Path:
        """Conventional location of the distribution archive of ``det``."""
        ...

    def opam_file(self, pkg_file: Path, explicit: Path | None) -> Result[Path, DistribError]:
        """OPAM file to use for the package described by ``pkg_file``."""
        ...

    def change_log(self, pkg_file: Path, explicit: Path | None) -> Result[Path, DistribError]:
        """Change log to use for the package described by ``pkg_file``."""
        ...


@dataclass(frozen=True, slots=True)
class PackageDescription:
    """Defaults a package description provides. Any of them may be missing."""

    build_dir: str | None = None
    name: str | None = None
    commit_ish: str | None = None
    version: str | None = None
    opam_files: tuple[Path, ...] = ()
    change_logs: tuple[Path, ...] = ()


DescriptionReader: TypeAlias = Callable[[Path], Result[PackageDescription, DistribError]]


def archive_path(det: Determination) -> Path:
    """Return ``<build_dir>/<name>-<version>.tbz``."""
    return det.build_dir / f"{det.name}-{det.version}{ARCHIVE_EXT}"


class DescriptionBackend:
    """Backend resolving unset values from a package description.

    The description is read lazily and at most once per file: a request whose
    fields are all set never touches it.
    """

    def __init__(self, name: str, read_description: DescriptionReader) -> None:
        self.name = name
        self._read_description = read_description
        self._descriptions: dict[Path, Result[PackageDescription, DistribError]] = {}

    def description(self, pkg_file: Path) -> Result[PackageDescription, DistribError]:
        if pkg_file not in self._descriptions:
            log.debug("reading package description %s", pkg_file)
            self._descriptions[pkg_file] = self._read_description(pkg_file)
        return self._descriptions[pkg_file]

    def determine(self, request: DeterminationRequest) -> Result[Determination, DistribError]:
        values = {
            "build_dir": request.build_dir,
            "name": request.name,
            "commit_ish": request.commit_ish,
            "version": request.version,
        }
        if request.unset:
            match self.description(request.pkg_file):
                case Err() as err:
                    return err
                case Ok(desc):
                    for field in request.unset:
                        values[field] = getattr(desc, field)

        for field, value in values.items():
            if value is None:
                what, option = _FIELD_OPTIONS[field]
                return Err(
                    DistribError(
                        f"{request.pkg_file}: could not determine the {what}",
                        hint=f"specify it with {option}",
                        path=request.pkg_file,
                    )
                )

        return Ok(
            Determination(
                build_dir=Path(values["build_dir"] or ""),
                name=values["name"] or "",
                commit_ish=values["commit_ish"] or "",
                version=values["version"] or "",
            )
        )

    def archive_path(self, det: Determination) -> Path:
        return archive_path(det)

    def opam_file(self, pkg_file: Path, explicit: Path | None) -> Result[Path, DistribError]:
        if explicit is not None:
            return Ok(explicit)
        match self.description(pkg_file):
            case Err() as err:
                return err
            case Ok(desc) if desc.opam_files:
                return Ok(desc.opam_files[0])
            case _:
                return Ok(DEFAULT_OPAM_FILE)

    def change_log(self, pkg_file: Path, explicit: Path | None) -> Result[Path, DistribError]:
        if explicit is not None:
            return Ok(explicit)
        match self.description(pkg_file):
            case Err() as err:
                return err
            case Ok(desc) if desc.change_logs:
                return Ok(desc.change_logs[0])
            case _:
                return Err(
                    DistribError(
                        f"{pkg_file}: no change log specified in the package description",
                        hint="specify one with --change-log",
                        path=pkg_file,
                    )
                )
