"""Exception types raised while resolving thresholds and roots."""

from __future__ import annotations


class LsnewerError(Exception):
    """Base class for lsnewer failures."""


class InvalidTimestamp(LsnewerError, ValueError):
    """Text does not match the ``YYYY-MM-DD hh:mm:ss`` layout.

    ``reason`` names the first rule the text broke.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid timestamp {text!r}: {reason}")
        self.text = text
        self.reason = reason


class ReferenceFileNotFound(LsnewerError, FileNotFoundError):
    """Threshold argument is neither a timestamp nor an existing path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No such file: {path}")
        self.path = path


class ReferenceFileUnreadable(LsnewerError, OSError):
    """Reference file exists but its modification time cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read file: {path} ({reason})")
        self.path = path
        self.reason = reason


class DirectoryNotFound(LsnewerError, NotADirectoryError):
    """Root argument does not resolve to an openable directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory not found: {path}")
        self.path = path


__all__ = [
    "LsnewerError",
    "InvalidTimestamp",
    "ReferenceFileNotFound",
    "ReferenceFileUnreadable",
    "DirectoryNotFound",
]
