"""Shared helpers for CLI commands.

Every command turns its failures into an exit code here, so that all of
them report errors and exit the same way.
"""

from __future__ import annotations

from typing import TypeVar

import typer

from pkgdist.core.errors import ErrorCode
from pkgdist.core.result import Err, Result
from pkgdist.output.log import logger

T = TypeVar("T")
E = TypeVar("E")


def error_message(error: object) -> str:
    """Render an error value with its optional hint.

    Expects error objects to have a ``message`` and an optional ``hint``
    attribute; anything else is rendered with ``str``.
    """
    message: str = getattr(error, "message", str(error))
    hint: str | None = getattr(error, "hint", None)
    if hint:
        return f"{message}\nhint: {hint}"
    return message


def handle_error(outcome: Result[T, E]) -> int | None:
    """Log a failed ``outcome`` and return its exit code.

    Returns ``None`` for a successful outcome: the command exits normally.
    """
    if isinstance(outcome, Err):
        logger.error(error_message(outcome.error))
        return int(ErrorCode.FAILURE)
    return None


def exit_on_error(outcome: Result[T, E]) -> T:
    """Return the value of ``outcome`` or exit with the failure code.

    This helper reduces boilerplate for the common pattern:
        match result:
            case Err(e):
                logger.error(e.message)
                raise typer.Exit(code=3)
            case Ok(value):
                ...
    """
    if isinstance(outcome, Err):
        code = handle_error(outcome)
        raise typer.Exit(code=code)
    return outcome.value
