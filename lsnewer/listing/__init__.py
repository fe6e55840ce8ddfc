"""Filtered long-listing traversal.

This package contains the non-timestamp parts of a listing run:
- option/record/listing datatypes
- per-entry metadata (owner, group, permissions)
- the depth-first threshold-filtered walk
- line rendering for the printer
"""

from __future__ import annotations

from .types import DirectoryListing, EntryRecord, ListingOptions
from .metadata import build_entry_record, group_name, owner_name, render_permissions
from .walk import iter_entries, iter_listings, scan_directory
from .render import format_directory_header, format_entry_line, render_listing

__all__ = [
    "DirectoryListing",
    "EntryRecord",
    "ListingOptions",
    "build_entry_record",
    "group_name",
    "owner_name",
    "render_permissions",
    "iter_entries",
    "iter_listings",
    "scan_directory",
    "format_directory_header",
    "format_entry_line",
    "render_listing",
]
