"""Option resolution and distribution archive lookup for package releases."""

__version__ = "0.1.0"
