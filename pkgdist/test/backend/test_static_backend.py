"""Tests for pkgdist.backend.static module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgdist.backend.static import StaticBackend
from pkgdist.core.determine import Determination, build_request
from pkgdist.core.result import Err, Ok


def test_name() -> None:
    assert StaticBackend().name == "static"


def test_conventional_defaults() -> None:
    result = StaticBackend().determine(build_request(name="mypkg", version="1.0.0"))

    assert result == Ok(
        Determination(build_dir=Path("_build"), name="mypkg", commit_ish="HEAD", version="1.0.0")
    )


def test_never_opens_description(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    # pkg/pkg.ml does not exist here.
    result = StaticBackend().determine(build_request(name="mypkg", version="1.0.0"))
    assert isinstance(result, Ok)


def test_version_required() -> None:
    result = StaticBackend().determine(build_request(name="mypkg"))

    assert isinstance(result, Err)
    assert "could not determine the package version" in result.error.message
    assert result.error.hint == "specify it with --pkg-version"


def test_release_files() -> None:
    backend = StaticBackend()
    assert backend.opam_file(Path("pkg/pkg.ml"), None) == Ok(Path("opam"))
    assert backend.change_log(Path("pkg/pkg.ml"), None) == Ok(Path("CHANGES.md"))
