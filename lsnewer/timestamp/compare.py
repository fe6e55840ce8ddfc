"""Strict ordering between timestamps."""

from __future__ import annotations

from .types import Timestamp


def is_after(candidate: Timestamp, reference: Timestamp) -> bool:
    """Return whether ``candidate`` is strictly later than ``reference``.

    Fields are compared lexicographically from year down to second; equal
    timestamps are not after each other.
    """
    return candidate.as_tuple() > reference.as_tuple()


__all__ = ["is_after"]
