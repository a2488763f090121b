"""Tests for pkgdist.output.console module."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from pkgdist.output import console as console_mod
from pkgdist.output.console import (
    ColorMode,
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    set_color_mode,
    stdout_console,
)


class TestColorMode:
    def test_values(self) -> None:
        assert [str(m) for m in ColorMode] == ["auto", "always", "never"]

    def test_always_forces_terminal(self) -> None:
        assert set_color_mode(ColorMode.ALWAYS).is_terminal is True

    def test_never_disables_styling(self) -> None:
        console = set_color_mode(ColorMode.NEVER)
        assert console.is_terminal is False
        assert console.no_color is True

    def test_stdout_console_is_shared(self) -> None:
        console = set_color_mode(ColorMode.NEVER)
        assert stdout_console() is console

    def test_stdout_console_defaults_to_auto(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(console_mod, "_stdout", None)
        assert isinstance(stdout_console(), Console)


class TestMockConsole:
    def test_print(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.lines == ["hello"]

    def test_pair(self) -> None:
        console = MockConsole()
        console.pair("name", "mypkg")
        assert console.lines == ["name: mypkg"]

    def test_satisfies_protocol(self) -> None:
        def use_console(c: ConsoleProtocol) -> None:
            c.print("test")
            c.pair("k", "v")

        mock = MockConsole()
        use_console(mock)
        assert mock.text == "test\nk: v"


class TestRichConsole:
    def _console(self) -> tuple[RichConsole, io.StringIO]:
        buf = io.StringIO()
        return RichConsole(Console(file=buf, force_terminal=False, width=40)), buf

    def test_print(self) -> None:
        console, buf = self._console()
        console.print("_build/mypkg-1.0.0.tbz")
        assert buf.getvalue() == "_build/mypkg-1.0.0.tbz\n"

    def test_markup_not_interpreted(self) -> None:
        console, buf = self._console()
        console.print("[bold]x[/bold]")
        assert buf.getvalue() == "[bold]x[/bold]\n"

    def test_long_lines_not_wrapped(self) -> None:
        console, buf = self._console()
        line = "/very/long/" + "x" * 80 + ".tbz"
        console.print(line)
        assert buf.getvalue() == line + "\n"

    def test_pair(self) -> None:
        console, buf = self._console()
        console.pair("version", "1.0.0")
        assert buf.getvalue() == "version: 1.0.0\n"
