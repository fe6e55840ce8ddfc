"""Long-listing line formatting with optional terminal colour."""

from __future__ import annotations

from pathlib import Path

from pygments.console import colorize

from .types import DirectoryListing, EntryRecord

HEADER_COLOR = "bold"
DIRECTORY_NAME_COLOR = "blue"


def format_entry_line(record: EntryRecord, color: bool = False) -> str:
    """Render ``<perms> <links> <owner> <group> <size> <time> <name>``.

    Column widths follow ``ls -l``: links 2, group 10, size 8, time 12.
    """
    name = record.name
    if color and record.is_dir:
        name = colorize(DIRECTORY_NAME_COLOR, name)
    return (
        f"{record.permissions} {record.links:2d} {record.owner} {record.group:>10} "
        f"{record.size:8d} {record.display_time:>12} {name}"
    )


def format_directory_header(path: Path, color: bool = False) -> str:
    text = str(path)
    return colorize(HEADER_COLOR, text) if color else text


def render_listing(listing: DirectoryListing, *, color: bool = False, headers: bool = True) -> list[str]:
    """Return the output lines for one visited directory.

    Unopenable directories still get their header so the gap is visible.
    """
    lines: list[str] = []
    if headers:
        lines.append(format_directory_header(listing.path, color=color))
    lines.extend(format_entry_line(record, color=color) for record in listing.entries)
    return lines


__all__ = [
    "format_entry_line",
    "format_directory_header",
    "render_listing",
]
