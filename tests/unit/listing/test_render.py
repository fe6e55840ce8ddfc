"""Tests for long-listing line layout and directory headers."""

from __future__ import annotations

import unittest
from pathlib import Path

from lsnewer.listing import DirectoryListing, EntryRecord, format_directory_header, format_entry_line, render_listing
from lsnewer.timestamp import parse_timestamp


def _record(name: str = "notes.txt", is_dir: bool = False, size: int = 1234) -> EntryRecord:
    return EntryRecord(
        name=name,
        path=Path("/srv/data") / name,
        is_dir=is_dir,
        timestamp=parse_timestamp("2024-03-07 09:05:30"),
        links=1,
        owner="alice",
        group="staff",
        permissions="drwxr-xr-x" if is_dir else "-rw-r--r--",
        size=size,
    )


class EntryLineTests(unittest.TestCase):
    def test_line_matches_long_listing_columns(self) -> None:
        self.assertEqual(
            format_entry_line(_record()),
            "-rw-r--r--  1 alice      staff     1234 Mar  7  09:05 notes.txt",
        )

    def test_wide_values_are_not_truncated(self) -> None:
        line = format_entry_line(_record(size=123456789012))
        self.assertIn(" 123456789012 ", line)

    def test_color_only_decorates_directory_names(self) -> None:
        plain_file = format_entry_line(_record(), color=True)
        colored_dir = format_entry_line(_record(name="docs", is_dir=True), color=True)
        self.assertNotIn("\x1b[", plain_file)
        self.assertIn("\x1b[", colored_dir)
        self.assertIn("docs", colored_dir)


class RenderListingTests(unittest.TestCase):
    def test_header_precedes_entries(self) -> None:
        listing = DirectoryListing(path=Path("/srv/data"), entries=(_record("a"), _record("b")))
        lines = render_listing(listing)
        self.assertEqual(lines[0], "/srv/data")
        self.assertTrue(lines[1].endswith(" a"))
        self.assertTrue(lines[2].endswith(" b"))

    def test_headers_can_be_suppressed(self) -> None:
        listing = DirectoryListing(path=Path("/srv/data"), entries=(_record("a"),))
        self.assertEqual(len(render_listing(listing, headers=False)), 1)

    def test_unopenable_directory_renders_header_only(self) -> None:
        listing = DirectoryListing(path=Path("/srv/locked"), error=PermissionError("denied"))
        self.assertEqual(render_listing(listing), ["/srv/locked"])

    def test_colored_header(self) -> None:
        header = format_directory_header(Path("/srv/data"), color=True)
        self.assertIn("/srv/data", header)
        self.assertTrue(header.startswith("\x1b["))
        self.assertEqual(format_directory_header(Path("/srv/data")), "/srv/data")


if __name__ == "__main__":
    unittest.main()
