"""Output abstraction layer."""

from .console import (
    ColorMode,
    ConsoleProtocol,
    MockConsole,
    RichConsole,
)

__all__ = [
    "ColorMode",
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
]
