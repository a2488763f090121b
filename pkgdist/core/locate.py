"""Distribution archive lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .determine import Determination, DistribError
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from pkgdist.backend.base import PackageBackend

__all__ = ["find_dist_file"]

log = logging.getLogger(__name__)


def find_dist_file(
    backend: PackageBackend, det: Determination, dist_file: Path | None
) -> Result[Path, DistribError]:
    """Return the distribution archive to use for ``det``.

    An explicit ``dist_file`` is used verbatim. Otherwise the backend derives
    the conventional archive name in the build directory. That name is only a
    convention: the archive exists only once the backend has built it, so the
    path is checked before being handed out.
    """
    dist = dist_file if dist_file is not None else backend.archive_path(det)
    log.debug("looking for distribution archive %s", dist)
    if dist.is_file():
        return Ok(dist)
    return Err(
        DistribError(
            f"{dist}: No such file. Did you forget to build the distribution archive?",
            path=dist,
        )
    )
