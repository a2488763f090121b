"""Tests for pkgdist.core.paths module."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from pkgdist.core.paths import dump, parse_path, path_value
from pkgdist.core.result import Err, Ok


class TestDump:
    def test_plain_text_is_quoted(self) -> None:
        assert dump("pkg/pkg.ml") == '"pkg/pkg.ml"'

    def test_escapes(self) -> None:
        assert dump('a"b\\c') == '"a\\"b\\\\c"'
        assert dump("a\nb") == '"a\\nb"'

    def test_nul_is_escaped(self) -> None:
        assert dump("a\x00b") == '"a\\x00b"'


class TestParsePath:
    def test_relative_path(self) -> None:
        assert parse_path("pkg/pkg.ml") == Ok(Path("pkg/pkg.ml"))

    def test_absolute_path(self) -> None:
        assert parse_path("/tmp/dist.tbz") == Ok(Path("/tmp/dist.tbz"))

    def test_empty_string_is_not_a_path(self) -> None:
        assert parse_path("") == Err('"": not a path')

    @pytest.mark.parametrize("text", ["\x00", "a\x00b", "dir/\x00/file"])
    def test_nul_byte_is_not_a_path(self, text: str) -> None:
        result = parse_path(text)
        assert isinstance(result, Err)
        assert result.error == f"{dump(text)}: not a path"
        assert "not a path" in result.error

    def test_error_quotes_input_text(self) -> None:
        result = parse_path("foo\x00bar")
        assert isinstance(result, Err)
        assert result.error.startswith('"foo')
        assert 'bar": not a path' in result.error


class TestPathValue:
    def test_returns_path(self) -> None:
        assert path_value("_build") == Path("_build")

    def test_path_default_passes_through(self) -> None:
        default = Path("pkg") / "pkg.ml"
        assert path_value(default) is default

    def test_bad_value_raises_bad_parameter(self) -> None:
        with pytest.raises(typer.BadParameter, match="not a path"):
            path_value("")
