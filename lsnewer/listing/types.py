"""Domain datatypes for filtered long-listing traversal."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..timestamp import Timestamp


@dataclass(frozen=True)
class ListingOptions:
    """Settings fixed before traversal starts.

    ``threshold`` of ``None`` lists every readable entry; otherwise only
    entries modified strictly after it are kept.
    """

    root: Path
    threshold: Timestamp | None = None
    show_hidden: bool = True


@dataclass(frozen=True)
class EntryRecord:
    """One accepted entry with the metadata shown in a listing line."""

    name: str
    path: Path
    is_dir: bool
    timestamp: Timestamp
    links: int
    owner: str
    group: str
    permissions: str
    size: int

    @property
    def display_time(self) -> str:
        return self.timestamp.display()


@dataclass(frozen=True)
class DirectoryListing:
    """Accepted entries of one visited directory.

    ``error`` is set when the directory could not be opened; ``entries`` is
    then empty.
    """

    path: Path
    entries: tuple[EntryRecord, ...] = ()
    error: OSError | None = None


__all__ = [
    "ListingOptions",
    "EntryRecord",
    "DirectoryListing",
]
