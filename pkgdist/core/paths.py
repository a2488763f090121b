"""Path values for command-line options.

Every path-typed option of the CLI goes through ``path_value`` so that a
malformed path is rejected while arguments are parsed, with the same message
whatever the option.
"""

from __future__ import annotations

from pathlib import Path

import typer

from .result import Err, Ok, Result

__all__ = ["dump", "parse_path", "path_value"]

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def dump(text: str) -> str:
    """Return ``text`` double-quoted with backslash and control characters escaped."""
    out: list[str] = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def parse_path(text: str) -> Result[Path, str]:
    """Interpret ``text`` as a filesystem path.

    The empty string and text holding a NUL byte cannot name a file on any
    host; both are rejected.
    """
    if not text or "\x00" in text:
        return Err(f"{dump(text)}: not a path")
    return Ok(Path(text))


def path_value(text: str | Path) -> Path:
    """typer ``parser=`` adapter for :func:`parse_path`.

    click also runs option defaults through the parser; those are already
    ``Path`` values and are returned as is.
    """
    if isinstance(text, Path):
        return text
    match parse_path(text):
        case Ok(path):
            return path
        case Err(message):
            raise typer.BadParameter(message)
