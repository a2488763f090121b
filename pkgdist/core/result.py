"""Result type for explicit error handling.

Every operation of the core returns a ``Result`` instead of raising: the
outcome of an invocation is either ``Ok(value)`` or ``Err(error)`` and is
consumed exactly once, by the command that asked for it.

Usage:
    def lookup(path: Path) -> Result[Path, DistribError]:
        if not path.is_file():
            return Err(DistribError(f"{path}: No such file."))
        return Ok(path)

    match lookup(Path("_build/pkg-1.0.tbz")):
        case Ok(path):
            print(path)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome.

    Attributes:
        error: The error value, usually a dataclass with a ``message``.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
