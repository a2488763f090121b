from __future__ import annotations

import typer

from pkgdist import __version__
from pkgdist.cli.commands.distrib import determine_cmd, files_cmd, locate_cmd
from pkgdist.cli.options import ColorOpt, PkgDirOpt, QuietOpt, VerboseOpt, VerbosityOpt
from pkgdist.cli.setup import setup
from pkgdist.core.errors import ErrorCode
from pkgdist.core.result import Err
from pkgdist.output.console import ColorMode
from pkgdist.output.log import Verbosity, resolve_level

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Determine package distributions and locate their archives.",
)


# Commands
app.command("determine")(determine_cmd)
app.command("locate")(locate_cmd)
app.command("files")(files_cmd)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    color: ColorOpt = ColorMode.AUTO,
    verbosity: VerbosityOpt = Verbosity.WARNING,
    verbose: VerboseOpt = 0,
    quiet: QuietOpt = False,
    pkg_dir: PkgDirOpt = None,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    result = setup(color, resolve_level(verbosity, verbose, quiet), pkg_dir)
    if isinstance(result, Err):
        raise typer.BadParameter(result.error.message, ctx=ctx, param_hint="'-C' / '--pkg-dir'")


def main() -> None:
    app()
