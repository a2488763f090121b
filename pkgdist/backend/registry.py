"""Backend discovery.

Besides the built-in backends, third-party packages register backends
under the ``pkgdist.backends`` entry-point group. An entry point must load
to a callable (usually a class) returning a :class:`PackageBackend` when
called without arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from importlib.metadata import entry_points

from pkgdist.core.config import BACKEND_ENTRY_POINT_GROUP
from pkgdist.core.determine import DistribError
from pkgdist.core.result import Err, Ok, Result

from . import log
from .base import PackageBackend
from .static import StaticBackend

__all__ = ["BUILTIN_BACKENDS", "available_backends", "load_backend"]

BUILTIN_BACKENDS: dict[str, Callable[[], PackageBackend]] = {
    "static": StaticBackend,
}


def _entry_point_names() -> set[str]:
    return {ep.name for ep in entry_points(group=BACKEND_ENTRY_POINT_GROUP)}


def available_backends() -> list[str]:
    return sorted(BUILTIN_BACKENDS.keys() | _entry_point_names())


def load_backend(name: str) -> Result[PackageBackend, DistribError]:
    """Instantiate backend ``name``; built-ins shadow entry points."""
    factory = BUILTIN_BACKENDS.get(name)
    if factory is None:
        eps = {ep.name: ep for ep in entry_points(group=BACKEND_ENTRY_POINT_GROUP)}
        ep = eps.get(name)
        if ep is None:
            return Err(
                DistribError(
                    f"unknown package backend: {name}",
                    hint=f"available: {', '.join(available_backends())}",
                )
            )
        try:
            loaded = ep.load()
        except Exception as e:
            return Err(DistribError(f"cannot load package backend {name} ({ep.value}): {e}"))
        if not callable(loaded):
            return Err(DistribError(f"package backend {name} ({ep.value}) is not callable"))
        factory = loaded

    # Third-party code: any failure is reported, not raised.
    try:
        backend = factory()
    except Exception as e:
        return Err(DistribError(f"cannot create package backend {name}: {e}"))
    log.debug("using %s package backend", backend.name)
    return Ok(backend)
