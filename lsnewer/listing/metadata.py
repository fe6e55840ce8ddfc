"""Per-entry metadata: owner/group names, permission strings, records."""

from __future__ import annotations

import grp
import os
import pwd
import stat
from functools import lru_cache
from pathlib import Path

from ..timestamp import Timestamp
from .types import EntryRecord

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@lru_cache(maxsize=256)
def owner_name(uid: int) -> str:
    """Return the login name for ``uid``, or the number when it has none."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Return the group name for ``gid``, or the number when it has none."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def render_permissions(mode: int) -> str:
    """Render ``st_mode`` as ``d``/``-`` followed by three ``rwx`` triplets."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(flag if mode & bit else "-" for bit, flag in _PERMISSION_BITS)


def build_entry_record(path: Path, stat_result: os.stat_result, timestamp: Timestamp) -> EntryRecord:
    """Bundle one entry's stat data with the timestamp it was filtered on."""
    return EntryRecord(
        name=path.name,
        path=path,
        is_dir=stat.S_ISDIR(stat_result.st_mode),
        timestamp=timestamp,
        links=int(stat_result.st_nlink),
        owner=owner_name(stat_result.st_uid),
        group=group_name(stat_result.st_gid),
        permissions=render_permissions(stat_result.st_mode),
        size=int(stat_result.st_size),
    )


__all__ = [
    "owner_name",
    "group_name",
    "render_permissions",
    "build_entry_record",
]
