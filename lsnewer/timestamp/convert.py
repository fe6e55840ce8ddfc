"""Construct ``Timestamp`` values from literals and file modification times."""

from __future__ import annotations

import time

from ..errors import InvalidTimestamp
from .types import Timestamp
from .validate import timestamp_error


def parse_timestamp(text: str) -> Timestamp:
    """Parse a canonical ``YYYY-MM-DD hh:mm:ss`` string.

    Raises ``InvalidTimestamp`` naming the first broken rule. Fields are
    fixed-width digit runs once validated, so plain ``int`` parsing is exact.
    """
    reason = timestamp_error(text)
    if reason is not None:
        raise InvalidTimestamp(text, reason)
    return Timestamp(
        year=int(text[0:4]),
        month=int(text[5:7]),
        day=int(text[8:10]),
        hour=int(text[11:13]),
        minute=int(text[14:16]),
        second=int(text[17:19]),
    )


def format_mtime(mtime: float) -> str:
    """Render a raw ``st_mtime`` in local time as the canonical string."""
    local = time.localtime(mtime)
    return (
        f"{local.tm_year:04d}-{local.tm_mon:02d}-{local.tm_mday:02d} "
        f"{local.tm_hour:02d}:{local.tm_min:02d}:{local.tm_sec:02d}"
    )


def timestamp_from_mtime(mtime: float) -> Timestamp:
    """Convert a raw modification time through the canonical string form."""
    return parse_timestamp(format_mtime(mtime))


__all__ = [
    "parse_timestamp",
    "format_mtime",
    "timestamp_from_mtime",
]
