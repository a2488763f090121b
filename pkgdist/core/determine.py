"""Determination of the distribution to work on.

A distribution is identified by four values: build directory, package name,
commit-ish and version. Each can be given on the command line; whatever is
left unset is supplied by the package backend from the package description
file. This module only does the bookkeeping: it records exactly what the
caller said (``None`` when the caller said nothing) and hands the request to
the backend, which owns the fallback order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DEFAULT_PKG_FILE
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from pkgdist.backend.base import PackageBackend

__all__ = [
    "DeterminationRequest",
    "Determination",
    "DistribError",
    "build_request",
    "determine",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DistribError:
    """Error when a distribution cannot be determined or located."""

    message: str
    hint: str | None = None
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DeterminationRequest:
    """Caller-supplied values for a determination.

    ``None`` means unset. The empty string is a value like any other and
    must reach the backend as such.
    """

    pkg_file: Path = DEFAULT_PKG_FILE
    build_dir: str | None = None
    name: str | None = None
    commit_ish: str | None = None
    version: str | None = None

    @property
    def unset(self) -> tuple[str, ...]:
        """Names of the fields the backend has to supply."""
        fields = {
            "build_dir": self.build_dir,
            "name": self.name,
            "commit_ish": self.commit_ish,
            "version": self.version,
        }
        return tuple(k for k, v in fields.items() if v is None)


@dataclass(frozen=True, slots=True)
class Determination:
    """A fully resolved distribution."""

    build_dir: Path
    name: str
    commit_ish: str
    version: str


def build_request(
    *,
    pkg_file: Path = DEFAULT_PKG_FILE,
    build_dir: str | None = None,
    name: str | None = None,
    commit_ish: str | None = None,
    version: str | None = None,
) -> DeterminationRequest:
    return DeterminationRequest(
        pkg_file=pkg_file,
        build_dir=build_dir,
        name=name,
        commit_ish=commit_ish,
        version=version,
    )


def determine(
    backend: PackageBackend, request: DeterminationRequest
) -> Result[Determination, DistribError]:
    """Resolve ``request`` with ``backend``."""
    log.debug("determining distribution with %s backend: %s", backend.name, request)
    result = backend.determine(request)
    match result:
        case Ok(det):
            log.debug("determined %s", det)
        case Err(error):
            log.debug("determination failed: %s", error.message)
    return result
