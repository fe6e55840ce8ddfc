"""Timestamp model, validation, and comparison.

This package contains the threshold primitives:
- the immutable ``Timestamp`` value and the ``EPOCH`` default
- position-by-position validation of ``YYYY-MM-DD hh:mm:ss`` text
- construction from literals and file modification times
- strict ``is_after`` ordering
"""

from __future__ import annotations

from .types import EPOCH, MONTH_ABBREVIATIONS, Timestamp
from .validate import TIMESTAMP_LAYOUT, TIMESTAMP_LENGTH, is_valid_timestamp, timestamp_error
from .convert import format_mtime, parse_timestamp, timestamp_from_mtime
from .compare import is_after

__all__ = [
    "EPOCH",
    "MONTH_ABBREVIATIONS",
    "Timestamp",
    "TIMESTAMP_LAYOUT",
    "TIMESTAMP_LENGTH",
    "is_valid_timestamp",
    "timestamp_error",
    "format_mtime",
    "parse_timestamp",
    "timestamp_from_mtime",
    "is_after",
]
