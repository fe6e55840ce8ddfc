"""Depth-first traversal that keeps entries newer than a threshold.

Directories are visited in pre-order with an explicit stack, children in
name order. Symlinked directories are reported but never descended, and a
directory reached twice (bind mounts) is visited once. Entries that cannot
be stat'ed are skipped; a directory that cannot be opened is reported as a
``DirectoryListing`` with ``error`` set and the walk moves on.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..errors import InvalidTimestamp
from ..timestamp import is_after, timestamp_from_mtime
from .metadata import build_entry_record
from .types import DirectoryListing, EntryRecord, ListingOptions

logger = logging.getLogger(__name__)


def _directory_key(path: Path) -> tuple[int, int] | None:
    """Return ``(st_dev, st_ino)`` for ``path`` or ``None`` on stat failure."""
    try:
        info = path.stat()
    except OSError:
        return None
    return (info.st_dev, info.st_ino)


def scan_directory(directory: Path, options: ListingOptions) -> tuple[DirectoryListing, list[Path]]:
    """Scan one directory.

    Returns ``(listing, subdirectories)`` where ``subdirectories`` holds the
    physical child directories in name order, whether or not they passed
    the threshold.
    """
    try:
        with os.scandir(directory) as scanned:
            children = sorted(scanned, key=lambda item: item.name)
    except OSError as exc:
        return DirectoryListing(path=directory, error=exc), []

    records: list[EntryRecord] = []
    subdirectories: list[Path] = []
    for child in children:
        if not options.show_hidden and child.name.startswith("."):
            continue
        child_path = Path(child.path)

        try:
            stat_result = child.stat()
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", child_path, exc)
            continue

        try:
            is_physical_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_physical_dir = False
        if is_physical_dir:
            subdirectories.append(child_path)

        try:
            timestamp = timestamp_from_mtime(stat_result.st_mtime)
        except (InvalidTimestamp, OverflowError, OSError) as exc:
            logger.debug("Skipping entry with unusable mtime %s: %s", child_path, exc)
            continue

        if options.threshold is not None and not is_after(timestamp, options.threshold):
            continue
        records.append(build_entry_record(child_path, stat_result, timestamp))

    return DirectoryListing(path=directory, entries=tuple(records)), subdirectories


def iter_listings(options: ListingOptions) -> Iterator[DirectoryListing]:
    """Yield one ``DirectoryListing`` per visited directory, root first."""
    stack: list[Path] = [options.root]
    visited: set[tuple[int, int]] = set()

    while stack:
        directory = stack.pop()
        key = _directory_key(directory)
        if key is not None:
            if key in visited:
                continue
            visited.add(key)

        listing, subdirectories = scan_directory(directory, options)
        if listing.error is not None:
            logger.warning("cannot open directory %s: %s", directory, listing.error)
        yield listing
        stack.extend(reversed(subdirectories))


def iter_entries(options: ListingOptions) -> Iterator[EntryRecord]:
    """Yield accepted entries across the whole tree in traversal order."""
    for listing in iter_listings(options):
        yield from listing.entries


__all__ = [
    "scan_directory",
    "iter_listings",
    "iter_entries",
]
