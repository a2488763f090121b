"""Console output abstraction.

Commands print their results through :class:`ConsoleProtocol`, so they can
be tested with :class:`MockConsole`. The production implementation,
:class:`RichConsole`, writes to the shared standard output console whose
styling is decided once at startup by :func:`set_color_mode`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.text import Text

__all__ = [
    "ColorMode",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "set_color_mode",
    "stdout_console",
]


class ColorMode(str, Enum):
    """Terminal styling choice."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


_stdout: Console | None = None


def set_color_mode(mode: ColorMode) -> Console:
    """(Re)create the shared stdout console for ``mode``.

    ``auto`` styles output only when stdout is a terminal (rich also honours
    ``NO_COLOR``); ``always`` and ``never`` override the detection.
    """
    global _stdout
    match mode:
        case ColorMode.AUTO:
            _stdout = Console(highlight=False)
        case ColorMode.ALWAYS:
            _stdout = Console(force_terminal=True, highlight=False)
        case ColorMode.NEVER:
            _stdout = Console(force_terminal=False, no_color=True, highlight=False)
    return _stdout


def stdout_console() -> Console:
    """The shared stdout console, created with ``auto`` styling if needed."""
    if _stdout is None:
        return set_color_mode(ColorMode.AUTO)
    return _stdout


class ConsoleProtocol(Protocol):
    """Where commands write their results."""

    def print(self, message: str) -> None: ...

    def pair(self, label: str, value: object) -> None:
        """Print a ``label: value`` line."""
        ...


class RichConsole:
    """Console writing to the shared stdout console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else stdout_console()

    def print(self, message: str) -> None:
        # Paths and versions may contain brackets; never interpret markup.
        self._console.print(message, markup=False, soft_wrap=True)

    def pair(self, label: str, value: object) -> None:
        self._console.print(Text.assemble((f"{label}: ", "bold"), str(value)), soft_wrap=True)


def _empty_lines() -> list[str]:
    return []


@dataclass
class MockConsole:
    """Console capturing output lines for tests."""

    lines: list[str] = field(default_factory=_empty_lines)

    def print(self, message: str) -> None:
        self.lines.append(message)

    def pair(self, label: str, value: object) -> None:
        self.lines.append(f"{label}: {value}")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
