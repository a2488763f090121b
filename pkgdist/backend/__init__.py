"""Package backends: the collaborators that read package descriptions."""

from .base import (
    DescriptionBackend,
    PackageBackend,
    PackageDescription,
    archive_path,
)
from .log import Severity
from .registry import available_backends, load_backend
from .static import StaticBackend

__all__ = [
    "DescriptionBackend",
    "PackageBackend",
    "PackageDescription",
    "Severity",
    "StaticBackend",
    "archive_path",
    "available_backends",
    "load_backend",
]
