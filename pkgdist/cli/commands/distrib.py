from __future__ import annotations

from pathlib import Path

from pkgdist.cli.commands._helpers import exit_on_error
from pkgdist.cli.context import CLIContext, build_context
from pkgdist.cli.options import (
    BackendOpt,
    BuildDirOpt,
    ChangeLogOpt,
    CommitOpt,
    DelegateOpt,
    DistFileOpt,
    DistPkgFileOpt,
    IgnorePkgOpt,
    NameOpt,
    OpamFileOpt,
    PkgFileOpt,
    PkgVersionOpt,
)
from pkgdist.core.config import DEFAULT_BACKEND, DEFAULT_PKG_FILE
from pkgdist.core.determine import Determination, build_request, determine
from pkgdist.core.locate import find_dist_file


def _determine(
    ctx: CLIContext,
    pkg_file: Path,
    build_dir: str | None,
    name: str | None,
    commit_ish: str | None,
    version: str | None,
) -> Determination:
    request = build_request(
        pkg_file=pkg_file,
        build_dir=build_dir,
        name=name,
        commit_ish=commit_ish,
        version=version,
    )
    return exit_on_error(determine(ctx.backend, request))


def determine_cmd(
    pkg_file: PkgFileOpt = DEFAULT_PKG_FILE,
    ignore_pkg: IgnorePkgOpt = False,
    backend: BackendOpt = DEFAULT_BACKEND,
    build_dir: BuildDirOpt = None,
    name: NameOpt = None,
    commit_ish: CommitOpt = None,
    version: PkgVersionOpt = None,
) -> None:
    """Show the distribution determined from the options and the package description."""
    ctx = build_context(backend, ignore_pkg=ignore_pkg)
    det = _determine(ctx, pkg_file, build_dir, name, commit_ish, version)

    ctx.console.pair("name", det.name)
    ctx.console.pair("version", det.version)
    ctx.console.pair("commit-ish", det.commit_ish)
    ctx.console.pair("build-dir", det.build_dir)
    ctx.console.pair("archive", ctx.backend.archive_path(det))


def locate_cmd(
    pkg_file: PkgFileOpt = DEFAULT_PKG_FILE,
    ignore_pkg: IgnorePkgOpt = False,
    backend: BackendOpt = DEFAULT_BACKEND,
    build_dir: BuildDirOpt = None,
    name: NameOpt = None,
    commit_ish: CommitOpt = None,
    version: PkgVersionOpt = None,
    dist_file: DistFileOpt = None,
) -> None:
    """Print the path of the distribution archive, failing if it does not exist."""
    ctx = build_context(backend, ignore_pkg=ignore_pkg)
    det = _determine(ctx, pkg_file, build_dir, name, commit_ish, version)
    ctx.console.print(str(exit_on_error(find_dist_file(ctx.backend, det, dist_file))))


def files_cmd(
    pkg_file: PkgFileOpt = DEFAULT_PKG_FILE,
    ignore_pkg: IgnorePkgOpt = False,
    backend: BackendOpt = DEFAULT_BACKEND,
    build_dir: BuildDirOpt = None,
    name: NameOpt = None,
    commit_ish: CommitOpt = None,
    version: PkgVersionOpt = None,
    dist_file: DistFileOpt = None,
    dist_pkg_file: DistPkgFileOpt = DEFAULT_PKG_FILE,
    opam_file: OpamFileOpt = None,
    change_log: ChangeLogOpt = None,
    delegate: DelegateOpt = None,
) -> None:
    """Show the files a release of the distribution would use."""
    ctx = build_context(backend, ignore_pkg=ignore_pkg)
    det = _determine(ctx, pkg_file, build_dir, name, commit_ish, version)
    archive = exit_on_error(find_dist_file(ctx.backend, det, dist_file))
    opam = exit_on_error(ctx.backend.opam_file(pkg_file, opam_file))
    log_file = exit_on_error(ctx.backend.change_log(pkg_file, change_log))

    ctx.console.pair("archive", archive)
    ctx.console.pair("opam-file", opam)
    ctx.console.pair("change-log", log_file)
    ctx.console.pair("dist-pkg-file", dist_pkg_file)
    if delegate is not None:
        ctx.console.pair("delegate", delegate)
