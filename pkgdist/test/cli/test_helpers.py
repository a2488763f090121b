"""Tests for the exit code bridge in pkgdist.cli.commands._helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import typer

from pkgdist.cli.commands._helpers import error_message, exit_on_error, handle_error
from pkgdist.cli.setup import SetupError
from pkgdist.core.determine import DistribError
from pkgdist.core.result import Err, Ok


def _errors(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.levelno == logging.ERROR]


class TestHandleError:
    def test_ok_does_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        assert handle_error(Ok(Path("_build/mypkg-1.0.0.tbz"))) is None
        assert caplog.records == []

    @pytest.mark.parametrize(
        "error",
        [
            DistribError("_build/mypkg-1.0.0.tbz: No such file."),
            DistribError("unknown package backend: nope", hint="available: static"),
            SetupError("missing: No such file or directory"),
            "plain string error",
        ],
    )
    def test_err_logs_once_and_returns_three(
        self, error: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert handle_error(Err(error)) == 3
        records = _errors(caplog)
        assert len(records) == 1
        assert records[0].name == "pkgdist"
        assert records[0].getMessage() == error_message(error)


class TestErrorMessage:
    def test_message(self) -> None:
        assert error_message(DistribError("boom")) == "boom"

    def test_hint_on_second_line(self) -> None:
        error = DistribError("pkg/pkg.ml: could not determine the package name", hint="specify it with --name")
        assert error_message(error) == (
            "pkg/pkg.ml: could not determine the package name\nhint: specify it with --name"
        )

    def test_str_fallback(self) -> None:
        assert error_message("boom") == "boom"


class TestExitOnError:
    def test_returns_value(self) -> None:
        assert exit_on_error(Ok("1.0.0")) == "1.0.0"

    def test_raises_exit(self, caplog: pytest.LogCaptureFixture) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            exit_on_error(Err(DistribError("boom")))

        assert exc_info.value.exit_code == 3
        assert [r.getMessage() for r in _errors(caplog)] == ["boom"]
