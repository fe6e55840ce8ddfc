"""Resolve the traversal root and the modification-time threshold.

Both are settled once, before any traversal starts. A ``-t`` value is
tried as a literal timestamp first and as a reference-file path second.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DirectoryNotFound, ReferenceFileNotFound, ReferenceFileUnreadable
from .timestamp import EPOCH, Timestamp, parse_timestamp, timestamp_error, timestamp_from_mtime

logger = logging.getLogger(__name__)


def resolve_threshold(value: str | None) -> Timestamp:
    """Return the cutoff timestamp for ``value``.

    ``None`` gives ``EPOCH``. A valid literal is used as-is regardless of the
    filesystem. Anything else must name an existing file whose modification
    time becomes the threshold. An empty or missing path raises
    ``ReferenceFileNotFound``; any other stat failure raises
    ``ReferenceFileUnreadable``.
    """
    if value is None:
        return EPOCH

    reason = timestamp_error(value)
    if reason is None:
        return parse_timestamp(value)

    logger.debug("Threshold %r is not a timestamp (%s); trying it as a path", value, reason)
    if not value:
        raise ReferenceFileNotFound(value)
    reference = Path(value).expanduser().absolute()
    try:
        mtime = reference.stat().st_mtime
    except (FileNotFoundError, NotADirectoryError, ValueError) as exc:
        raise ReferenceFileNotFound(value) from exc
    except OSError as exc:
        raise ReferenceFileUnreadable(value, exc.strerror or str(exc)) from exc
    threshold = timestamp_from_mtime(mtime)
    logger.debug("Threshold taken from %s: %s", reference, threshold)
    return threshold


def resolve_root(value: str | os.PathLike[str]) -> Path:
    """Return the absolute traversal root, raising ``DirectoryNotFound`` if unusable."""
    try:
        root = Path(value).expanduser().resolve()
    except (OSError, RuntimeError) as exc:
        raise DirectoryNotFound(str(value)) from exc
    if not root.is_dir():
        raise DirectoryNotFound(str(value))
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise DirectoryNotFound(str(value)) from exc
    return root


__all__ = [
    "resolve_threshold",
    "resolve_root",
]
